"""
Numeric constants shared by the conversion, distance and gamut modules.

All matrices use the column-vector convention (``M @ xyz``) and are frozen
(read-only) numpy arrays. Inverses are computed once here instead of being
typed in, so that forward and inverse transforms agree to rounding error.
"""
import numpy as np

from .illuminants import Illuminant


def _frozen(rows) -> np.ndarray:
    arr = np.array(rows, dtype=np.float64)
    arr.setflags(write=False)
    return arr


def _frozen_inverse(matrix: np.ndarray) -> np.ndarray:
    return _frozen(np.linalg.inv(matrix))


# CIE 1976 breakpoints, exact rational forms
CIE_E = 216.0 / 24389.0
CIE_K = 24389.0 / 27.0
CIE_KE = CIE_K * CIE_E  # == 8.0

# Chroma (LCh) or hexagonal chroma (HSV/HSL) below this is treated as gray
CHROMA_EPSILON = 1e-10
# Slack allowed on channel bounds when testing gamut membership
GAMUT_TOLERANCE = 1e-9
# Luminance below -LUMINANCE_TOLERANCE is rejected by Lab/Luv
LUMINANCE_TOLERANCE = 1e-12
# Bisection steps used by chroma-reduction gamut searches
CLIP_ITERATIONS = 64
# CIEDE2000 difference under which two colors are indistinguishable
JND_THRESHOLD = 1.0


def _primary_matrix(primaries, white) -> np.ndarray:
    """
    Linear RGB -> XYZ matrix from primary chromaticities and a white point.

    Columns are the primaries' XYZ scaled so that RGB (1, 1, 1) lands exactly
    on ``white``. See http://brucelindbloom.com/Eqn_RGB_XYZ_Matrix.html
    """
    columns = np.array([[x / y, 1.0, (1.0 - x - y) / y] for x, y in primaries]).T
    scale = np.linalg.solve(columns, np.asarray(white, dtype=np.float64))
    return _frozen(columns * scale)


# Linear RGB -> XYZ primary matrices
SRGB_PRIMARIES = ((0.64, 0.33), (0.30, 0.60), (0.15, 0.06))
ADOBE_RGB_PRIMARIES = ((0.64, 0.33), (0.21, 0.71), (0.15, 0.06))
# ROMM RGB
PROPHOTO_RGB_PRIMARIES = ((0.7347, 0.2653), (0.1596, 0.8404), (0.0366, 0.0001))

SRGB_TO_XYZ = _primary_matrix(SRGB_PRIMARIES, Illuminant.D65.value)
XYZ_TO_SRGB = _frozen_inverse(SRGB_TO_XYZ)

ADOBE_RGB_TO_XYZ = _primary_matrix(ADOBE_RGB_PRIMARIES, Illuminant.D65.value)
XYZ_TO_ADOBE_RGB = _frozen_inverse(ADOBE_RGB_TO_XYZ)

PROPHOTO_RGB_TO_XYZ = _primary_matrix(PROPHOTO_RGB_PRIMARIES, Illuminant.D50.value)
XYZ_TO_PROPHOTO_RGB = _frozen_inverse(PROPHOTO_RGB_TO_XYZ)

ADOBE_RGB_GAMMA = 563.0 / 256.0
PROPHOTO_GAMMA = 1.8

# Cone response matrices for chromatic adaptation
ADAPTATION_MATRICES = {
    "bradford": _frozen([
        [0.8951, 0.2664, -0.1614],
        [-0.7502, 1.7135, 0.0367],
        [0.0389, -0.0685, 1.0296],
    ]),
    "von_kries": _frozen([
        [0.40024, 0.70760, -0.08081],
        [-0.22630, 1.16532, 0.04570],
        [0.00000, 0.00000, 0.91822],
    ]),
    "xyz_scaling": _frozen(np.eye(3)),
}

ADAPTATION_INVERSES = {
    name: _frozen_inverse(matrix) for name, matrix in ADAPTATION_MATRICES.items()
}

# CIE 1931 2 degree observer, 360-700 nm in 10 nm steps
SPECTRAL_LOCUS_CMF = _frozen([
    [0.000129900000, 0.000003917000, 0.000606100000],
    [0.000414900000, 0.000012390000, 0.001946000000],
    [0.001368000000, 0.000039000000, 0.006450001000],
    [0.004243000000, 0.000120000000, 0.020050010000],
    [0.014310000000, 0.000396000000, 0.067850010000],
    [0.043510000000, 0.001210000000, 0.207400000000],
    [0.134380000000, 0.004000000000, 0.645600000000],
    [0.283900000000, 0.011600000000, 1.385600000000],
    [0.348280000000, 0.023000000000, 1.747060000000],
    [0.336200000000, 0.038000000000, 1.772110000000],
    [0.290800000000, 0.060000000000, 1.669200000000],
    [0.195360000000, 0.090980000000, 1.287640000000],
    [0.095640000000, 0.139020000000, 0.812950100000],
    [0.032010000000, 0.208020000000, 0.465180000000],
    [0.004900000000, 0.323000000000, 0.272000000000],
    [0.009300000000, 0.503000000000, 0.158200000000],
    [0.063270000000, 0.710000000000, 0.078249990000],
    [0.165500000000, 0.862000000000, 0.042160000000],
    [0.290400000000, 0.954000000000, 0.020300000000],
    [0.433449900000, 0.994950100000, 0.008749999000],
    [0.594500000000, 0.995000000000, 0.003900000000],
    [0.762100000000, 0.952000000000, 0.002100000000],
    [0.916300000000, 0.870000000000, 0.001650001000],
    [1.026300000000, 0.757000000000, 0.001100000000],
    [1.062200000000, 0.631000000000, 0.000800000000],
    [1.002600000000, 0.503000000000, 0.000340000000],
    [0.854449900000, 0.381000000000, 0.000190000000],
    [0.642400000000, 0.265000000000, 0.000049999990],
    [0.447900000000, 0.175000000000, 0.000020000000],
    [0.283500000000, 0.107000000000, 0.000000000000],
    [0.164900000000, 0.061000000000, 0.000000000000],
    [0.087400000000, 0.032000000000, 0.000000000000],
    [0.046770000000, 0.017000000000, 0.000000000000],
    [0.022700000000, 0.008210000000, 0.000000000000],
    [0.011359160000, 0.004102000000, 0.000000000000],
])

# Chromaticity (x, y) polygon of the spectral locus, closed by the line of purples
SPECTRAL_LOCUS_XY = _frozen(
    SPECTRAL_LOCUS_CMF[:, :2] / SPECTRAL_LOCUS_CMF.sum(axis=1, keepdims=True)
)
