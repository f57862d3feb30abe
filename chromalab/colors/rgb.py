from typing import ClassVar, Tuple

from ..illuminants import Illuminant
from ..types.format_type import FormatType, max_non_hue
from ..types.color_types import ColorSpace, Channels, XYZTuple
from ..conversions.rgb_xyz import (
    RGBWorkingSpace,
    SRGB,
    LINEAR_SRGB,
    ADOBE_RGB,
    PROPHOTO_RGB,
    rgb_to_xyz,
    xyz_to_rgb,
)
from .color_base import ColorBase, Bounds, build_registry


class RGBBase(ColorBase):
    """Encoded RGB in one working space; XYZ is reached through the space's matrix."""
    __slots__ = ()

    channel_names: ClassVar[Tuple[str, str, str]] = ("r", "g", "b")
    bounds: ClassVar[Bounds] = ((0.0, 1.0), (0.0, 1.0), (0.0, 1.0))
    working_space: ClassVar[RGBWorkingSpace] = SRGB

    @property
    def unit_value(self) -> Channels:
        """Channels scaled to 0..1 regardless of format."""
        scale = max_non_hue[self.format_type]
        r, g, b = self._value
        return r / scale, g / scale, b / scale

    def _to_xyz_tuple(self) -> XYZTuple:
        return rgb_to_xyz(*self.unit_value, space=self.working_space)

    @classmethod
    def _from_xyz_tuple(cls, xyz: XYZTuple, illuminant: Illuminant) -> Channels:
        scale = max_non_hue[cls.format_type]
        r, g, b = xyz_to_rgb(*xyz, space=cls.working_space)
        return r * scale, g * scale, b * scale


class ColorRGBINT(RGBBase):
    """sRGB with 0..255 integer channels."""
    __slots__ = ()
    mode: ClassVar[ColorSpace] = ColorSpace.RGB
    format_type: ClassVar[FormatType] = FormatType.INT
    bounds: ClassVar[Bounds] = ((0, 255), (0, 255), (0, 255))


class ColorUnitRGB(RGBBase):
    """sRGB (IEC 61966-2-1) with 0..1 float channels."""
    __slots__ = ()
    mode: ClassVar[ColorSpace] = ColorSpace.RGB
    format_type: ClassVar[FormatType] = FormatType.FLOAT


class ColorLinearRGB(RGBBase):
    """sRGB primaries with a linear transfer function."""
    __slots__ = ()
    mode: ClassVar[ColorSpace] = ColorSpace.LINEAR_RGB
    working_space: ClassVar[RGBWorkingSpace] = LINEAR_SRGB


class ColorAdobeRGB(RGBBase):
    """Adobe RGB (1998), D65 white, pure gamma 563/256."""
    __slots__ = ()
    mode: ClassVar[ColorSpace] = ColorSpace.ADOBE_RGB
    working_space: ClassVar[RGBWorkingSpace] = ADOBE_RGB


class ColorProPhotoRGB(RGBBase):
    """ProPhoto (ROMM) RGB, D50 white, gamma 1.8 with a linear toe."""
    __slots__ = ()
    mode: ClassVar[ColorSpace] = ColorSpace.PROPHOTO_RGB
    native_illuminant: ClassVar[Illuminant] = Illuminant.D50
    working_space: ClassVar[RGBWorkingSpace] = PROPHOTO_RGB


rgb_tuple_to_class = build_registry(
    ColorRGBINT,
    ColorUnitRGB,
    ColorLinearRGB,
    ColorAdobeRGB,
    ColorProPhotoRGB,
)
