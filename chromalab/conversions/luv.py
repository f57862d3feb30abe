"""CIE 1976 L*u*v* <-> XYZ."""
from typing import Tuple

from ..constants import CIE_E, CIE_K, CIE_KE
from ..errors import DomainError
from ..types.color_types import Channels, XYZTuple
from .lab import check_luminance


def _uv_prime(x: float, y: float, z: float) -> Tuple[float, float]:
    denom = x + 15.0 * y + 3.0 * z
    return 4.0 * x / denom, 9.0 * y / denom


def xyz_to_luv(x: float, y: float, z: float, white: Tuple[float, float, float]) -> Channels:
    """
    Convert XYZ to CIELUV relative to ``white``.

    Exact black has no chromaticity; it maps to (0, 0, 0).
    """
    check_luminance(y)
    y = max(y, 0.0)
    if x + 15.0 * y + 3.0 * z == 0.0:
        return 0.0, 0.0, 0.0

    xw, yw, zw = white
    yr = y / yw
    if yr > CIE_E:
        L = 116.0 * yr ** (1.0 / 3.0) - 16.0
    else:
        L = CIE_K * yr

    u_p, v_p = _uv_prime(x, y, z)
    un_p, vn_p = _uv_prime(xw, yw, zw)
    u = 13.0 * L * (u_p - un_p)
    v = 13.0 * L * (v_p - vn_p)
    return L, u, v


def luv_to_xyz(L: float, u: float, v: float, white: Tuple[float, float, float]) -> XYZTuple:
    """Convert CIELUV relative to ``white`` back to XYZ."""
    if L < 0.0:
        raise DomainError(f"L* must be non-negative, got {L!r}")
    # Without light there is no color; also avoids dividing by 13 * L
    if L == 0.0:
        return 0.0, 0.0, 0.0

    xw, yw, zw = white
    un_p, vn_p = _uv_prime(xw, yw, zw)
    u_p = u / (13.0 * L) + un_p
    v_p = v / (13.0 * L) + vn_p
    if v_p == 0.0:
        raise DomainError(f"Chromaticity v'=0 is undefined for L*u*v* = ({L}, {u}, {v})")

    if L > CIE_KE:
        yr = ((L + 16.0) / 116.0) ** 3
    else:
        yr = L / CIE_K
    y = yr * yw
    x = y * 9.0 * u_p / (4.0 * v_p)
    z = y * (12.0 - 3.0 * u_p - 20.0 * v_p) / (4.0 * v_p)
    return x, y, z
