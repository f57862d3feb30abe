"""
RGB working spaces and the linear-matrix step between RGB and CIE XYZ.

A working space bundles its primaries (as an RGB -> XYZ matrix), the reference
white those primaries are defined against, and the transfer function that maps
encoded channel values to linear light.
"""
from __future__ import annotations

from functools import partial
from typing import Callable, NamedTuple, Tuple

import numpy as np

from .. import constants
from ..illuminants import Illuminant
from ..types.color_types import Channels, XYZTuple
from .companding import (
    srgb_to_linear,
    linear_to_srgb,
    gamma_to_linear,
    linear_to_gamma,
    prophoto_to_linear,
    linear_to_prophoto,
    identity,
)


class RGBWorkingSpace(NamedTuple):
    name: str
    to_xyz_matrix: np.ndarray
    from_xyz_matrix: np.ndarray
    illuminant: Illuminant
    decode: Callable[[float], float]
    encode: Callable[[float], float]


SRGB = RGBWorkingSpace(
    "sRGB",
    constants.SRGB_TO_XYZ,
    constants.XYZ_TO_SRGB,
    Illuminant.D65,
    srgb_to_linear,
    linear_to_srgb,
)

LINEAR_SRGB = RGBWorkingSpace(
    "linear sRGB",
    constants.SRGB_TO_XYZ,
    constants.XYZ_TO_SRGB,
    Illuminant.D65,
    identity,
    identity,
)

ADOBE_RGB = RGBWorkingSpace(
    "Adobe RGB (1998)",
    constants.ADOBE_RGB_TO_XYZ,
    constants.XYZ_TO_ADOBE_RGB,
    Illuminant.D65,
    partial(gamma_to_linear, gamma=constants.ADOBE_RGB_GAMMA),
    partial(linear_to_gamma, gamma=constants.ADOBE_RGB_GAMMA),
)

PROPHOTO_RGB = RGBWorkingSpace(
    "ProPhoto RGB",
    constants.PROPHOTO_RGB_TO_XYZ,
    constants.XYZ_TO_PROPHOTO_RGB,
    Illuminant.D50,
    partial(prophoto_to_linear, gamma=constants.PROPHOTO_GAMMA),
    partial(linear_to_prophoto, gamma=constants.PROPHOTO_GAMMA),
)


def apply_matrix(matrix: np.ndarray, v: Tuple[float, float, float]) -> Tuple[float, float, float]:
    """Multiply a 3x3 matrix by a 3-vector, returning plain floats."""
    out = matrix @ np.asarray(v, dtype=np.float64)
    return float(out[0]), float(out[1]), float(out[2])


def rgb_to_xyz(r: float, g: float, b: float, space: RGBWorkingSpace = SRGB) -> XYZTuple:
    """
    Convert encoded RGB (nominally 0..1) to XYZ relative to the space's white.

    Args:
        r, g, b: encoded channel values; values outside 0..1 are extrapolated
        space: RGB working space
    Returns:
        (X, Y, Z) with the space's reference white at Y = 1
    """
    linear = (space.decode(r), space.decode(g), space.decode(b))
    return apply_matrix(space.to_xyz_matrix, linear)


def xyz_to_rgb(x: float, y: float, z: float, space: RGBWorkingSpace = SRGB) -> Channels:
    """
    Convert XYZ (already relative to the space's white) to encoded RGB.

    No clamping is applied; out-of-gamut colors yield channels outside 0..1.
    """
    lr, lg, lb = apply_matrix(space.from_xyz_matrix, (x, y, z))
    return space.encode(lr), space.encode(lg), space.encode(lb)
