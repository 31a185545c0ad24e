"""
Thermocouple profile registry (GOST R 8.585-2001).

Each profile defines: the reference function temperature -> EMF, the inverse
function EMF -> temperature, and the ranges over which both are valid, so the
conversion pipeline is the same for every thermocouple type.

Types R, S, B, J, T, E, K and N share their reference functions with
IEC 60584-1 / NIST ITS-90. Types A-1, A-2, A-3, L and M are GOST-only.

To add a new type: add a member to ThermocoupleType and one entry to
THERMOCOUPLE_PROFILES. Lookup order and the supported-type list are derived
from the dict.
"""
from typing import Any, Dict, Optional, Tuple

from .models import ExponentialTerm, ReferenceFunction, Segment, ThermocoupleType


class InvalidThermocoupleType(ValueError):
    """Raised when a type selector does not name one of the supported thermocouples."""

    def __init__(self, message: str, selector: Any = None):
        self.selector = selector
        supported = ", ".join(t.value for t in THERMOCOUPLE_PROFILES)
        super().__init__(f"{message} Supported types: {supported}.")


# -----------------------------------------------------------------------------
# Standard keys
# -----------------------------------------------------------------------------
KEY_CANONICAL_NAME = "canonical_name"
KEY_DESCRIPTION = "description"
KEY_SOURCE = "source"
KEY_FORWARD = "forward"
KEY_INVERSE = "inverse"
# Temperature window of the forward function (°C)
KEY_TEMPERATURE_RANGE = "temperature_range"
# EMF window of the inverse function (mV) and the temperatures it maps to (°C)
KEY_EMF_RANGE = "emf_range"
KEY_INVERSE_TEMPERATURE_RANGE = "inverse_temperature_range"

SOURCE_IEC = "IEC 60584-1 / NIST ITS-90"
SOURCE_GOST = "GOST R 8.585-2001"


# -----------------------------------------------------------------------------
# Type R: platinum-13% rhodium / platinum
# -----------------------------------------------------------------------------
FORWARD_R = ReferenceFunction((
    Segment(None, (
        0.000000000000E+00, 0.528961729765E-02, 0.139166589782E-04,
        -0.238855693017E-07, 0.356916001063E-10, -0.462347666298E-13,
        0.500777441034E-16, -0.373105886191E-19, 0.157716482367E-22,
        -0.281038625251E-26,
    )),
    Segment(1064.18, (
        0.295157925316E+01, -0.252061251332E-02, 0.159564501865E-04,
        -0.764085947576E-08, 0.205305291024E-11, -0.293359668173E-15,
    )),
    Segment(1664.5, (
        0.152232118209E+03, -0.268819888545E+00, 0.171280280471E-03,
        -0.345895706453E-07, -0.934633971046E-14,
    )),
))

# The published 1.923..13.228 mV series overlaps the next one; the next one
# is used from 11.361 mV where its error band is narrower.
INVERSE_R = ReferenceFunction((
    Segment(None, (
        0.0000000E+00, 1.8891380E+02, -9.3835290E+01, 1.3068619E+02,
        -2.2703580E+02, 3.5145659E+02, -3.8953900E+02, 2.8239471E+02,
        -1.2607281E+02, 3.1353611E+01, -3.3187769E+00,
    )),
    Segment(1.923, (
        1.334584505E+01, 1.472644573E+02, -1.844024844E+01, 4.031129726E+00,
        -6.249428360E-01, 6.468412046E-02, -4.458750426E-03, 1.994710149E-04,
        -5.313401790E-06, 6.481976217E-08,
    )),
    Segment(11.361, (
        -8.199599416E+01, 1.553962042E+02, -8.342197663E+00, 4.279433549E-01,
        -1.191577910E-02, 1.492290091E-04,
    )),
    Segment(19.739, (
        3.406177836E+04, -7.023729171E+03, 5.582903813E+02, -1.952394635E+01,
        2.560740231E-01,
    )),
))

# -----------------------------------------------------------------------------
# Type S: platinum-10% rhodium / platinum
# -----------------------------------------------------------------------------
FORWARD_S = ReferenceFunction((
    Segment(None, (
        0.000000000000E+00, 0.540313308631E-02, 0.125934289740E-04,
        -0.232477968689E-07, 0.322028823036E-10, -0.331465196389E-13,
        0.255744251786E-16, -0.125068871393E-19, 0.271443176145E-23,
    )),
    Segment(1064.18, (
        0.132900444085E+01, 0.334509311344E-02, 0.654805192818E-05,
        -0.164856259209E-08, 0.129989605174E-13,
    )),
    Segment(1664.5, (
        0.146628232636E+03, -0.258430516752E+00, 0.163693574641E-03,
        -0.330439046987E-07, -0.943223690612E-14,
    )),
))

# Same overlap handling as type R: 1.874..11.950 mV hands over at 10.332 mV.
INVERSE_S = ReferenceFunction((
    Segment(None, (
        0.00000000E+00, 1.84949460E+02, -8.00504062E+01, 1.02237430E+02,
        -1.52248592E+02, 1.88821343E+02, -1.59085941E+02, 8.23027880E+01,
        -2.34181944E+01, 2.79786260E+00,
    )),
    Segment(1.874, (
        1.291507177E+01, 1.466298863E+02, -1.534713402E+01, 3.145945973E+00,
        -4.163257839E-01, 3.187963771E-02, -1.291637500E-03, 2.183475087E-05,
        -1.447379511E-07, 8.211272125E-09,
    )),
    Segment(10.332, (
        -8.087801117E+01, 1.621573104E+02, -8.536869453E+00, 4.719686976E-01,
        -1.441693666E-02, 2.081618890E-04,
    )),
    Segment(17.536, (
        5.333875126E+04, -1.235892298E+04, 1.092657613E+03, -4.265693686E+01,
        6.247205420E-01,
    )),
))

# -----------------------------------------------------------------------------
# Type B: platinum-30% rhodium / platinum-6% rhodium
# -----------------------------------------------------------------------------
FORWARD_B = ReferenceFunction((
    Segment(None, (
        0.000000000000E+00, -0.246508183460E-03, 0.590404211710E-05,
        -0.132579316360E-08, 0.156682919010E-11, -0.169445292400E-14,
        0.629903470940E-18,
    )),
    Segment(630.615, (
        -0.389381686210E+01, 0.285717474700E-01, -0.848851047850E-04,
        0.157852801640E-06, -0.168353448640E-09, 0.111097940130E-12,
        -0.445154310330E-16, 0.989756408210E-20, -0.937913302890E-24,
    )),
))

INVERSE_B = ReferenceFunction((
    Segment(None, (
        9.8423321E+01, 6.9971500E+02, -8.4765304E+02, 1.0052644E+03,
        -8.3345952E+02, 4.5508542E+02, -1.5523037E+02, 2.9886750E+01,
        -2.4742860E+00,
    )),
    Segment(2.431, (
        2.1315071E+02, 2.8510504E+02, -5.2742887E+01, 9.9160804E+00,
        -1.2965303E+00, 1.1195870E-01, -6.0625199E-03, 1.8661696E-04,
        -2.4878585E-06,
    )),
))

# -----------------------------------------------------------------------------
# Type J: iron / copper-nickel
# -----------------------------------------------------------------------------
FORWARD_J = ReferenceFunction((
    Segment(None, (
        0.000000000000E+00, 0.503811878150E-01, 0.304758369300E-04,
        -0.856810657200E-07, 0.132281952950E-09, -0.170529583370E-12,
        0.209480906970E-15, -0.125383953360E-18, 0.156317256970E-22,
    )),
    Segment(760.0, (
        0.296456256810E+03, -0.149761277860E+01, 0.317871039240E-02,
        -0.318476867010E-05, 0.157208190040E-08, -0.306913690560E-12,
    )),
))

INVERSE_J = ReferenceFunction((
    Segment(None, (
        0.0000000E+00, 1.9528268E+01, -1.2286185E+00, -1.0752178E+00,
        -5.9086933E-01, -1.7256713E-01, -2.8131513E-02, -2.3963370E-03,
        -8.3823321E-05,
    )),
    Segment(0.0, (
        0.000000E+00, 1.978425E+01, -2.001204E-01, 1.036969E-02,
        -2.549687E-04, 3.585153E-06, -5.344285E-08, 5.099890E-10,
    )),
    Segment(42.919, (
        -3.11358187E+03, 3.00543684E+02, -9.94773230E+00, 1.70276630E-01,
        -1.43033468E-03, 4.73886084E-06,
    )),
))

# -----------------------------------------------------------------------------
# Type T: copper / copper-nickel
# -----------------------------------------------------------------------------
FORWARD_T = ReferenceFunction((
    Segment(None, (
        0.000000000000E+00, 0.387481063640E-01, 0.441944343470E-04,
        0.118443231050E-06, 0.200329735540E-07, 0.901380195590E-09,
        0.226511565930E-10, 0.360711542050E-12, 0.384939398830E-14,
        0.282135219250E-16, 0.142515947790E-18, 0.487686622860E-21,
        0.107955392700E-23, 0.139450270620E-26, 0.797951539270E-30,
    )),
    Segment(0.0, (
        0.000000000000E+00, 0.387481063640E-01, 0.332922278800E-04,
        0.206182434040E-06, -0.218822568460E-08, 0.109968809280E-10,
        -0.308157587720E-13, 0.454791352900E-16, -0.275129016730E-19,
    )),
))

INVERSE_T = ReferenceFunction((
    Segment(None, (
        0.0000000E+00, 2.5949192E+01, -2.1316967E-01, 7.9018692E-01,
        4.2527777E-01, 1.3304473E-01, 2.0241446E-02, 1.2668171E-03,
    )),
    Segment(0.0, (
        0.000000E+00, 2.592800E+01, -7.602961E-01, 4.637791E-02,
        -2.165394E-03, 6.048144E-05, -7.293422E-07,
    )),
))

# -----------------------------------------------------------------------------
# Type E: nickel-chromium / copper-nickel
# -----------------------------------------------------------------------------
FORWARD_E = ReferenceFunction((
    Segment(None, (
        0.000000000000E+00, 0.586655087080E-01, 0.454109771240E-04,
        -0.779980486860E-06, -0.258001608430E-07, -0.594525830570E-09,
        -0.932140586670E-11, -0.102876055340E-12, -0.803701236210E-15,
        -0.439794973910E-17, -0.164147763550E-19, -0.396736195160E-22,
        -0.558273287210E-25, -0.346578420130E-28,
    )),
    Segment(0.0, (
        0.000000000000E+00, 0.586655087100E-01, 0.450322755820E-04,
        0.289084072120E-07, -0.330568966520E-09, 0.650244032700E-12,
        -0.191974955040E-15, -0.125366004970E-17, 0.214892175690E-20,
        -0.143880417820E-23, 0.359608994810E-27,
    )),
))

INVERSE_E = ReferenceFunction((
    Segment(None, (
        0.0000000E+00, 1.6977288E+01, -4.3514970E-01, -1.5859697E-01,
        -9.2502871E-02, -2.6084314E-02, -4.1360199E-03, -3.4034030E-04,
        -1.1564890E-05,
    )),
    Segment(0.0, (
        0.0000000E+00, 1.7057035E+01, -2.3301759E-01, 6.5435585E-03,
        -7.3562749E-05, -1.7896001E-06, 8.4036165E-08, -1.3735879E-09,
        1.0629823E-11, -3.2447087E-14,
    )),
))

# -----------------------------------------------------------------------------
# Type K: nickel-chromium / nickel-aluminium
# -----------------------------------------------------------------------------
FORWARD_K = ReferenceFunction((
    Segment(None, (
        0.000000000000E+00, 0.394501280250E-01, 0.236223735980E-04,
        -0.328589067840E-06, -0.499048287770E-08, -0.675090591730E-10,
        -0.574103274280E-12, -0.310888728940E-14, -0.104516093650E-16,
        -0.198892668780E-19, -0.163226974860E-22,
    )),
    Segment(0.0, (
        -0.176004136860E-01, 0.389212049750E-01, 0.185587700320E-04,
        -0.994575928740E-07, 0.318409457190E-09, -0.560728448890E-12,
        0.560750590590E-15, -0.320207200030E-18, 0.971511471520E-22,
        -0.121047212750E-25,
    ), ExponentialTerm(0.118597600000E+00, -0.118343200000E-03, 0.126968600000E+03)),
))

INVERSE_K = ReferenceFunction((
    Segment(None, (
        0.0000000E+00, 2.5173462E+01, -1.1662878E+00, -1.0833638E+00,
        -8.9773540E-01, -3.7342377E-01, -8.6632643E-02, -1.0450598E-02,
        -5.1920577E-04,
    )),
    Segment(0.0, (
        0.000000E+00, 2.508355E+01, 7.860106E-02, -2.503131E-01,
        8.315270E-02, -1.228034E-02, 9.804036E-04, -4.413030E-05,
        1.057734E-06, -1.052755E-08,
    )),
    Segment(20.644, (
        -1.318058E+02, 4.830222E+01, -1.646031E+00, 5.464731E-02,
        -9.650715E-04, 8.802193E-06, -3.110810E-08,
    )),
))

# -----------------------------------------------------------------------------
# Type N: nickel-chromium-silicon / nickel-silicon
# -----------------------------------------------------------------------------
FORWARD_N = ReferenceFunction((
    Segment(None, (
        0.000000000000E+00, 0.261591059620E-01, 0.109574842280E-04,
        -0.938411115540E-07, -0.464120397590E-10, -0.263033577160E-11,
        -0.226534380030E-13, -0.760893007910E-16, -0.934196678350E-19,
    )),
    Segment(0.0, (
        0.000000000000E+00, 0.259293946010E-01, 0.157101418800E-04,
        0.438256272370E-07, -0.252611697940E-09, 0.643118193390E-12,
        -0.100634715190E-14, 0.997453389920E-18, -0.608632456070E-21,
        0.208492293390E-24, -0.306821961510E-28,
    )),
))

INVERSE_N = ReferenceFunction((
    Segment(None, (
        0.0000000E+00, 3.8436847E+01, 1.1010485E+00, 5.2229312E+00,
        7.2060525E+00, 5.8488586E+00, 2.7754916E+00, 7.7075166E-01,
        1.1582665E-01, 7.3138868E-03,
    )),
    Segment(0.0, (
        0.00000E+00, 3.86896E+01, -1.08267E+00, 4.70205E-02,
        -2.12169E-06, -1.17272E-04, 5.39280E-06, -7.98156E-08,
    )),
    Segment(20.613, (
        1.972485E+01, 3.300943E+01, -3.915159E-01, 9.855391E-03,
        -1.274371E-04, 7.767022E-07,
    )),
))

# -----------------------------------------------------------------------------
# Type A-1: tungsten-5% rhenium / tungsten-20% rhenium
# -----------------------------------------------------------------------------
FORWARD_A1 = ReferenceFunction((
    Segment(None, (
        7.1564735E-04, 1.1951905E-02, 1.6672625E-05, -2.8287807E-08,
        2.8397839E-11, -1.8505007E-14, 7.3632123E-18, -1.6148878E-21,
        1.4901679E-25,
    )),
))

INVERSE_A1 = ReferenceFunction((
    Segment(None, (
        0.9643027, 79.495086, -4.9990310, 0.6341776,
        -4.7440967E-02, 2.1811337E-03, -5.8324228E-05, 8.2433725E-07,
        -4.5928480E-09,
    )),
))

# TODO: types A-2, A-3, L and M below were refitted from the GOST R 8.585-2001
# range endpoints and reference table values; replace with the Annex A
# coefficients once a certified copy of the standard is at hand.

# -----------------------------------------------------------------------------
# Type A-2: tungsten-5% rhenium / tungsten-20% rhenium
# -----------------------------------------------------------------------------
FORWARD_A2 = ReferenceFunction((
    Segment(None, (
        7.21861584E-04, 1.20556879E-02, 1.68173996E-05, -2.85334406E-08,
        2.86444281E-11, -1.86656929E-14, 7.42714983E-18, -1.62891047E-21,
        1.50310759E-25,
    )),
))

INVERSE_A2 = ReferenceFunction((
    Segment(None, (
        -4.72268805E-02, 8.27770191E+01, -8.95263374E+00, 2.53964064E+00,
        -5.66233876E-01, 8.56017099E-02, -7.44378721E-03, 2.77190156E-04,
    )),
    Segment(6.258, (
        9.24564739E+00, 7.17936335E+01, -2.69772512E+00, 2.69087584E-01,
        -1.52187925E-02, 5.31371474E-04, -1.00155685E-05, 8.08879600E-08,
    )),
))

# -----------------------------------------------------------------------------
# Type A-3: tungsten-5% rhenium / tungsten-20% rhenium
# -----------------------------------------------------------------------------
FORWARD_A3 = ReferenceFunction((
    Segment(None, (
        7.09694484E-04, 1.18524872E-02, 1.65339395E-05, -2.80525046E-08,
        2.81616213E-11, -1.83510795E-14, 7.30196395E-18, -1.60145491E-21,
        1.47777245E-25,
    )),
))

INVERSE_A3 = ReferenceFunction((
    Segment(None, (
        -4.72268796E-02, 8.41961599E+01, -9.26223556E+00, 2.67251269E+00,
        -6.06074290E-01, 9.31955037E-02, -8.24306979E-03, 3.12216131E-04,
    )),
    Segment(6.152, (
        9.24561643E+00, 7.30244915E+01, -2.79102271E+00, 2.83166596E-01,
        -1.62896340E-02, 5.78511707E-04, -1.10910433E-05, 9.11095045E-08,
    )),
))

# -----------------------------------------------------------------------------
# Type L: chromel / copel
# -----------------------------------------------------------------------------
FORWARD_L = ReferenceFunction((
    Segment(None, (
        0.00000000E+00, 6.33216953E-02, 6.00752535E-05, -9.18085404E-08,
        -5.30861569E-11, -3.87450286E-13,
    )),
    Segment(0.0, (
        0.00000000E+00, 6.32772397E-02, 5.81869178E-05, -5.60943985E-08,
        1.78815265E-11,
    )),
))

INVERSE_L = ReferenceFunction((
    Segment(None, (
        0.00000000E+00, 1.57334487E+01, -4.00772697E-01, -1.48541963E-01,
        -7.74925257E-02, -1.98111184E-02, -2.85528023E-03, -2.14669756E-04,
        -6.69469981E-06,
    )),
    Segment(0.0, (
        0.00000000E+00, 1.57819027E+01, -2.17918516E-01, 7.70055628E-03,
        -2.19192680E-04, 4.53789515E-06, -6.03740250E-08, 4.55891513E-10,
        -1.47853180E-12,
    )),
))

# -----------------------------------------------------------------------------
# Type M: copper / copel
# -----------------------------------------------------------------------------
FORWARD_M = ReferenceFunction((
    Segment(None, (
        0.00000000E+00, 4.27300491E-02, 5.20069023E-05, -2.06689980E-08,
        2.61229162E-10, 1.26408508E-12, 2.07604466E-15,
    )),
    Segment(0.0, (
        0.00000000E+00, 4.26871507E-02, 3.80973684E-05, 1.93124784E-07,
        -1.67695541E-09, 4.63697446E-12,
    )),
))

INVERSE_M = ReferenceFunction((
    Segment(None, (
        0.00000000E+00, 2.33351809E+01, -9.56892971E-01, -3.96277478E-01,
        -3.29529982E-01, -1.29043700E-01, -2.88249154E-02, -3.35560011E-03,
        -1.62769192E-04,
    )),
    Segment(0.0, (
        0.00000000E+00, 2.34323229E+01, -5.07850034E-01, -1.93399553E-02,
        8.50037319E-03, -6.40951832E-04,
    )),
))


def _profile(
    tc_type: ThermocoupleType,
    description: str,
    source: str,
    forward: ReferenceFunction,
    inverse: ReferenceFunction,
    temperature_range: Tuple[float, float],
    emf_range: Tuple[float, float],
    inverse_temperature_range: Optional[Tuple[float, float]] = None,
) -> Dict[str, Any]:
    return {
        KEY_CANONICAL_NAME: tc_type.value,
        KEY_DESCRIPTION: description,
        KEY_SOURCE: source,
        KEY_FORWARD: forward,
        KEY_INVERSE: inverse,
        KEY_TEMPERATURE_RANGE: temperature_range,
        KEY_EMF_RANGE: emf_range,
        KEY_INVERSE_TEMPERATURE_RANGE: inverse_temperature_range or temperature_range,
    }


# -----------------------------------------------------------------------------
# Registry: one entry per type. Key order = selector code order.
# -----------------------------------------------------------------------------
THERMOCOUPLE_PROFILES: Dict[ThermocoupleType, Dict[str, Any]] = {
    ThermocoupleType.R: _profile(
        ThermocoupleType.R, "Platinum-13% rhodium / platinum", SOURCE_IEC,
        FORWARD_R, INVERSE_R, (-50.0, 1768.1), (-0.226, 21.103),
    ),
    ThermocoupleType.S: _profile(
        ThermocoupleType.S, "Platinum-10% rhodium / platinum", SOURCE_IEC,
        FORWARD_S, INVERSE_S, (-50.0, 1768.1), (-0.235, 18.694),
    ),
    ThermocoupleType.B: _profile(
        ThermocoupleType.B, "Platinum-30% rhodium / platinum-6% rhodium", SOURCE_IEC,
        FORWARD_B, INVERSE_B, (0.0, 1820.0), (0.291, 13.820), (250.0, 1820.0),
    ),
    ThermocoupleType.J: _profile(
        ThermocoupleType.J, "Iron / copper-nickel", SOURCE_IEC,
        FORWARD_J, INVERSE_J, (-210.0, 1200.0), (-8.095, 69.553),
    ),
    ThermocoupleType.T: _profile(
        ThermocoupleType.T, "Copper / copper-nickel", SOURCE_IEC,
        FORWARD_T, INVERSE_T, (-270.0, 400.0), (-5.603, 20.872), (-200.0, 400.0),
    ),
    ThermocoupleType.E: _profile(
        ThermocoupleType.E, "Nickel-chromium / copper-nickel", SOURCE_IEC,
        FORWARD_E, INVERSE_E, (-270.0, 1000.0), (-8.825, 76.373), (-200.0, 1000.0),
    ),
    ThermocoupleType.K: _profile(
        ThermocoupleType.K, "Nickel-chromium / nickel-aluminium", SOURCE_IEC,
        FORWARD_K, INVERSE_K, (-270.0, 1372.0), (-5.891, 54.886), (-200.0, 1372.0),
    ),
    ThermocoupleType.N: _profile(
        ThermocoupleType.N, "Nickel-chromium-silicon / nickel-silicon", SOURCE_IEC,
        FORWARD_N, INVERSE_N, (-270.0, 1300.0), (-3.990, 47.513), (-200.0, 1300.0),
    ),
    ThermocoupleType.A1: _profile(
        ThermocoupleType.A1, "Tungsten-5% rhenium / tungsten-20% rhenium", SOURCE_GOST,
        FORWARD_A1, INVERSE_A1, (0.0, 2500.0), (0.0, 33.640),
    ),
    ThermocoupleType.A2: _profile(
        ThermocoupleType.A2, "Tungsten-5% rhenium / tungsten-20% rhenium", SOURCE_GOST,
        FORWARD_A2, INVERSE_A2, (0.0, 1800.0), (0.0, 27.232),
    ),
    ThermocoupleType.A3: _profile(
        ThermocoupleType.A3, "Tungsten-5% rhenium / tungsten-20% rhenium", SOURCE_GOST,
        FORWARD_A3, INVERSE_A3, (0.0, 1800.0), (0.0, 26.773),
    ),
    ThermocoupleType.L: _profile(
        ThermocoupleType.L, "Chromel / copel", SOURCE_GOST,
        FORWARD_L, INVERSE_L, (-200.0, 800.0), (-9.488, 66.466),
    ),
    ThermocoupleType.M: _profile(
        ThermocoupleType.M, "Copper / copel", SOURCE_GOST,
        FORWARD_M, INVERSE_M, (-200.0, 100.0), (-6.154, 4.722),
    ),
}

SUPPORTED_TYPES = tuple(THERMOCOUPLE_PROFILES.keys())
# Accepted spellings: "K", "k", "A-1", "A1", "a_1"
_NAME_LOOKUP = {t.value.upper(): t for t in THERMOCOUPLE_PROFILES}
_NAME_LOOKUP.update({t.name.upper(): t for t in THERMOCOUPLE_PROFILES})


def parse_thermocouple_type(selector: Any) -> ThermocoupleType:
    """
    Resolve a type selector to a ThermocoupleType. Accepts a member, a name
    ("K", "A-1", "A1") or the integer code (R = 0 ... M = 12). Anything else
    raises InvalidThermocoupleType.
    """
    if isinstance(selector, ThermocoupleType):
        return selector
    if isinstance(selector, bool):
        raise InvalidThermocoupleType(f"Invalid thermocouple type selector: {selector!r}.", selector=selector)
    if isinstance(selector, int):
        if 0 <= selector < len(SUPPORTED_TYPES):
            return SUPPORTED_TYPES[selector]
        raise InvalidThermocoupleType(f"Unknown thermocouple type code: {selector}.", selector=selector)
    if isinstance(selector, str):
        name = selector.strip().upper().replace("_", "-")
        tc_type = _NAME_LOOKUP.get(name) or _NAME_LOOKUP.get(name.replace("-", ""))
        if tc_type is not None:
            return tc_type
        raise InvalidThermocoupleType(f"Unknown thermocouple type: {selector!r}.", selector=selector)
    raise InvalidThermocoupleType(f"Invalid thermocouple type selector: {selector!r}.", selector=selector)


def get_thermocouple_profile(selector: Any) -> Dict[str, Any]:
    """Return a copy of the profile for the given type selector."""
    return dict(THERMOCOUPLE_PROFILES[parse_thermocouple_type(selector)])
