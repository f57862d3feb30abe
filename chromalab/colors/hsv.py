from typing import ClassVar, Optional, Tuple

from ..constants import CHROMA_EPSILON
from ..illuminants import Illuminant
from ..conversions.hsv import unit_rgb_to_hsv, hsv_to_unit_rgb, unit_rgb_to_hsl, hsl_to_unit_rgb
from ..conversions.rgb_xyz import SRGB, rgb_to_xyz, xyz_to_rgb
from ..types.color_types import ColorSpace, Channels, XYZTuple
from ..types.format_type import HUE_360
from ..utils.hue import normalize_hue
from .color_base import ColorBase, Bounds, build_registry


class UnitHSV(ColorBase):
    """Hexcone projection of sRGB: hue in degrees, saturation and value in 0..1."""
    __slots__ = ()
    mode:       ClassVar[ColorSpace] = ColorSpace.HSV
    channel_names: ClassVar[Tuple[str, str, str]] = ("h", "s", "v")
    bounds:     ClassVar[Bounds] = ((0.0, HUE_360), (0.0, 1.0), (0.0, 1.0))
    hue_index:  ClassVar[Optional[int]] = 0

    @classmethod
    def _hue_is_undefined(cls, channels: Channels) -> bool:
        _, s, v = channels
        return abs(s * v) < CHROMA_EPSILON

    @classmethod
    def _normalize(cls, channels: Channels) -> Channels:
        h, s, v = channels
        if cls._hue_is_undefined(channels):
            return 0.0, s, v
        return normalize_hue(h), s, v

    def _to_xyz_tuple(self) -> XYZTuple:
        return rgb_to_xyz(*hsv_to_unit_rgb(*self._value), space=SRGB)

    @classmethod
    def _from_xyz_tuple(cls, xyz: XYZTuple, illuminant: Illuminant) -> Channels:
        return unit_rgb_to_hsv(*xyz_to_rgb(*xyz, space=SRGB))


class UnitHSL(ColorBase):
    __slots__ = ()
    mode:       ClassVar[ColorSpace] = ColorSpace.HSL
    channel_names: ClassVar[Tuple[str, str, str]] = ("h", "s", "l")
    bounds:     ClassVar[Bounds] = ((0.0, HUE_360), (0.0, 1.0), (0.0, 1.0))
    hue_index:  ClassVar[Optional[int]] = 0

    @classmethod
    def _hue_is_undefined(cls, channels: Channels) -> bool:
        _, s, l = channels
        # hexagonal chroma of the double cone
        return abs((1.0 - abs(2.0 * l - 1.0)) * s) < CHROMA_EPSILON

    @classmethod
    def _normalize(cls, channels: Channels) -> Channels:
        h, s, l = channels
        if cls._hue_is_undefined(channels):
            return 0.0, s, l
        return normalize_hue(h), s, l

    def _to_xyz_tuple(self) -> XYZTuple:
        return rgb_to_xyz(*hsl_to_unit_rgb(*self._value), space=SRGB)

    @classmethod
    def _from_xyz_tuple(cls, xyz: XYZTuple, illuminant: Illuminant) -> Channels:
        return unit_rgb_to_hsl(*xyz_to_rgb(*xyz, space=SRGB))


hsv_tuple_to_class = build_registry(UnitHSV, UnitHSL)
