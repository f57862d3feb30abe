"""CIE 1976 L*a*b* <-> XYZ."""
import math
from typing import Tuple

from ..constants import CIE_E, CIE_K, CIE_KE, LUMINANCE_TOLERANCE
from ..errors import DomainError
from ..types.color_types import Channels, XYZTuple


def _f(t: float) -> float:
    if t > CIE_E:
        return t ** (1.0 / 3.0)
    return (CIE_K * t + 16.0) / 116.0


def _f_inv(f: float) -> float:
    f3 = f ** 3
    if f3 > CIE_E:
        return f3
    return (116.0 * f - 16.0) / CIE_K


def check_luminance(y: float) -> None:
    """Raise DomainError for negative or non-finite luminance."""
    if not math.isfinite(y):
        raise DomainError(f"Luminance must be finite, got {y!r}")
    if y < -LUMINANCE_TOLERANCE:
        raise DomainError(f"Negative luminance Y={y!r} has no lightness")


def xyz_to_lab(x: float, y: float, z: float, white: Tuple[float, float, float]) -> Channels:
    """
    Convert XYZ to CIELAB relative to ``white``.

    The linear branch below CIE_E keeps the mapping finite near black and for
    negative X or Z (imaginary colors). Negative Y is rejected.
    """
    check_luminance(y)
    y = max(y, 0.0)
    xw, yw, zw = white
    fx = _f(x / xw)
    fy = _f(y / yw)
    fz = _f(z / zw)

    L = 116.0 * fy - 16.0
    a = 500.0 * (fx - fy)
    b = 200.0 * (fy - fz)
    return L, a, b


def lab_to_xyz(L: float, a: float, b: float, white: Tuple[float, float, float]) -> XYZTuple:
    """Convert CIELAB relative to ``white`` back to XYZ."""
    if L < 0.0:
        raise DomainError(f"L* must be non-negative, got {L!r}")
    xw, yw, zw = white
    fy = (L + 16.0) / 116.0
    fx = fy + a / 500.0
    fz = fy - b / 200.0

    xr = _f_inv(fx)
    yr = fy ** 3 if L > CIE_KE else L / CIE_K
    zr = _f_inv(fz)
    return xr * xw, yr * yw, zr * zw
