import math
from typing import ClassVar, Tuple

from ..illuminants import Illuminant
from ..conversions.luv import xyz_to_luv, luv_to_xyz
from ..conversions.lch import luv_to_lch, lch_to_luv
from ..types.color_types import ColorSpace, Channels, XYZTuple
from .color_base import ColorBase, Bounds, build_registry
from .lab import PolarBase


class ColorLuv(ColorBase):
    __slots__ = ()
    mode: ClassVar[ColorSpace] = ColorSpace.LUV
    channel_names: ClassVar[Tuple[str, str, str]] = ("l", "u", "v")
    bounds: ClassVar[Bounds] = ((0.0, 100.0), (-math.inf, math.inf), (-math.inf, math.inf))
    is_relative: ClassVar[bool] = True

    def _to_xyz_tuple(self) -> XYZTuple:
        return luv_to_xyz(*self._value, white=self.illuminant.white_point)

    @classmethod
    def _from_xyz_tuple(cls, xyz: XYZTuple, illuminant: Illuminant) -> Channels:
        return xyz_to_luv(*xyz, white=illuminant.white_point)


class ColorLCHuv(PolarBase):
    """Cylindrical CIELUV."""
    __slots__ = ()
    mode: ClassVar[ColorSpace] = ColorSpace.LCHUV

    def _to_xyz_tuple(self) -> XYZTuple:
        return luv_to_xyz(*lch_to_luv(*self._value), white=self.illuminant.white_point)

    @classmethod
    def _from_xyz_tuple(cls, xyz: XYZTuple, illuminant: Illuminant) -> Channels:
        return luv_to_lch(*xyz_to_luv(*xyz, white=illuminant.white_point))


luv_tuple_to_class = build_registry(ColorLuv, ColorLCHuv)
