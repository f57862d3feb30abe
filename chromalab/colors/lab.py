import math
from typing import ClassVar, Optional, Tuple

from ..constants import CHROMA_EPSILON
from ..errors import DomainError
from ..illuminants import Illuminant
from ..conversions.lab import xyz_to_lab, lab_to_xyz
from ..conversions.lch import lab_to_lch, lch_to_lab
from ..types.color_types import ColorSpace, Channels, XYZTuple
from ..types.format_type import HUE_360
from ..utils.hue import normalize_hue
from .color_base import ColorBase, Bounds, build_registry


class ColorLab(ColorBase):
    __slots__ = ()
    mode: ClassVar[ColorSpace] = ColorSpace.LAB
    channel_names: ClassVar[Tuple[str, str, str]] = ("l", "a", "b")
    bounds: ClassVar[Bounds] = ((0.0, 100.0), (-math.inf, math.inf), (-math.inf, math.inf))
    is_relative: ClassVar[bool] = True

    def _to_xyz_tuple(self) -> XYZTuple:
        return lab_to_xyz(*self._value, white=self.illuminant.white_point)

    @classmethod
    def _from_xyz_tuple(cls, xyz: XYZTuple, illuminant: Illuminant) -> Channels:
        return xyz_to_lab(*xyz, white=illuminant.white_point)


class PolarBase(ColorBase):
    """Lightness, chroma and hue angle over a CIE opponent-axis space."""
    __slots__ = ()
    channel_names: ClassVar[Tuple[str, str, str]] = ("l", "c", "h")
    bounds: ClassVar[Bounds] = ((0.0, 100.0), (0.0, math.inf), (0.0, HUE_360))
    is_relative: ClassVar[bool] = True
    hue_index: ClassVar[Optional[int]] = 2

    @classmethod
    def _hue_is_undefined(cls, channels: Channels) -> bool:
        return channels[1] < CHROMA_EPSILON

    @classmethod
    def _normalize(cls, channels: Channels) -> Channels:
        L, c, h = channels
        if c < 0.0:
            raise DomainError(f"{cls.mode.value} chroma must be non-negative, got {c!r}")
        if cls._hue_is_undefined(channels):
            return L, c, 0.0
        return L, c, normalize_hue(h)


class ColorLCHab(PolarBase):
    """Cylindrical CIELAB: lightness, chroma, hue angle in degrees."""
    __slots__ = ()
    mode: ClassVar[ColorSpace] = ColorSpace.LCHAB

    def _to_xyz_tuple(self) -> XYZTuple:
        return lab_to_xyz(*lch_to_lab(*self._value), white=self.illuminant.white_point)

    @classmethod
    def _from_xyz_tuple(cls, xyz: XYZTuple, illuminant: Illuminant) -> Channels:
        return lab_to_lch(*xyz_to_lab(*xyz, white=illuminant.white_point))


lab_tuple_to_class = build_registry(ColorLab, ColorLCHab)
