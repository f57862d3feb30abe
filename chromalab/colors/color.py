from __future__ import annotations
from typing import Optional, Union

from .color_base import ColorBase
from .rgb import rgb_tuple_to_class
from .xyz import xyz_tuple_to_class
from .lab import lab_tuple_to_class, ColorLCHab
from .luv import luv_tuple_to_class
from .hsv import hsv_tuple_to_class
from ..conversions.wrapper import convert, ColorTarget
from ..errors import IlluminantMismatchError
from ..illuminants import Illuminant, DEFAULT_ILLUMINANT
from ..types.color_types import ColorSpace, ColorSpaceLike, to_color_space
from ..types.format_type import FormatType

unified_tuple_to_class: dict[tuple[ColorSpace, FormatType], type[ColorBase]] = {
    **rgb_tuple_to_class,
    **xyz_tuple_to_class,
    **lab_tuple_to_class,
    **luv_tuple_to_class,
    **hsv_tuple_to_class,
}


def get_color_class(color_space: ColorSpaceLike, format_type: Optional[FormatType] = None) -> type[ColorBase]:
    """
    Look up the color class for a space and format.

    Args:
        color_space: ColorSpace member or name (case-insensitive)
        format_type: FormatType; defaults to FLOAT
    """
    space = to_color_space(color_space)
    fmt = FormatType(format_type) if format_type is not None else FormatType.FLOAT
    color_class = unified_tuple_to_class.get((space, fmt))
    if color_class is None:
        raise ValueError(
            f"Unsupported color space/format combination: {space.value}/{fmt.value}"
        )
    return color_class


def color_convert(
    self: ColorBase,
    to_space: Optional[ColorTarget] = None,
    format_type: Optional[FormatType] = None,
    *,
    illuminant: Optional[Union[Illuminant, str]] = None,
) -> ColorBase:
    """
    Convert this color to a different color space, format or illuminant.

    Args:
        to_space: Target class, ColorSpace or name (e.g. "lab", "hsv"). Defaults to the current space.
        format_type: Target format (INT, FLOAT) when ``to_space`` is not a class.
        illuminant: Reference white for illuminant-relative targets.

    Returns:
        New ColorBase instance in the target space/format
    """
    return convert(self, to_space, format_type, illuminant=illuminant)


def shared_illuminant(
    a: ColorBase,
    b: ColorBase,
    illuminant: Optional[Union[Illuminant, str]] = None,
) -> Illuminant:
    """
    Reference white in which two colors can be compared or combined.

    Raises:
        IlluminantMismatchError: both colors are illuminant-relative with
            different whites and no ``illuminant`` was given
    """
    if illuminant is not None:
        return Illuminant.from_name(illuminant)
    if a.is_relative and b.is_relative:
        if a.illuminant is not b.illuminant:
            raise IlluminantMismatchError(a.illuminant, b.illuminant)
        return a.illuminant
    if a.is_relative:
        return a.illuminant
    if b.is_relative:
        return b.illuminant
    return DEFAULT_ILLUMINANT


# ---------- CIELCh(ab) attribute helpers ----------

def _as_lch(self: ColorBase) -> ColorLCHab:
    return self.convert(ColorLCHab)  # type: ignore[return-value]


def _from_lch(self: ColorBase, lch: ColorLCHab) -> ColorBase:
    return lch.convert(type(self), illuminant=self.illuminant if self.is_relative else None)


def lightness(self: ColorBase) -> float:
    """CIE L* of this color (0 black, 100 reference white)."""
    return _as_lch(self).value[0]


def chroma(self: ColorBase) -> float:
    """CIELCh(ab) chroma."""
    return _as_lch(self).value[1]


def hue(self: ColorBase) -> float:
    """CIELCh(ab) hue angle in degrees; 0 for grays."""
    return _as_lch(self).value[2]


def with_lightness(self: ColorBase, value: float) -> ColorBase:
    """Same chroma and hue at a new L*, in this color's class."""
    lch = _as_lch(self)
    _, c, h = lch.value
    return _from_lch(self, ColorLCHab((value, c, h), illuminant=lch.illuminant))


def with_chroma(self: ColorBase, value: float) -> ColorBase:
    lch = _as_lch(self)
    L, _, h = lch.value
    return _from_lch(self, ColorLCHab((L, value, h), illuminant=lch.illuminant))


def with_hue(self: ColorBase, value: float) -> ColorBase:
    lch = _as_lch(self)
    L, c, _ = lch.value
    return _from_lch(self, ColorLCHab((L, c, value), illuminant=lch.illuminant))


def grayscale(self: ColorBase) -> ColorBase:
    """Neutral color with the same L*."""
    return with_chroma(self, 0.0)


def color_distance(self: ColorBase, other: ColorBase, *, illuminant: Optional[Union[Illuminant, str]] = None) -> float:
    """CIEDE2000 difference to ``other``."""
    from ..distance import distance_ciede2000  # local import to avoid cycles

    return distance_ciede2000(self, other, illuminant=illuminant)


ColorBase.convert = color_convert
ColorBase.lightness = property(lightness)  # type: ignore[assignment]
ColorBase.chroma = property(chroma)  # type: ignore[assignment]
ColorBase.hue = property(hue)  # type: ignore[assignment]
ColorBase.with_lightness = with_lightness  # type: ignore[attr-defined]
ColorBase.with_chroma = with_chroma  # type: ignore[attr-defined]
ColorBase.with_hue = with_hue  # type: ignore[attr-defined]
ColorBase.grayscale = grayscale  # type: ignore[attr-defined]
ColorBase.distance = color_distance  # type: ignore[attr-defined]


def convert_color(value, color_space: ColorSpaceLike, format_type: Optional[FormatType] = None):
    """Build a color of the given space from a ColorBase or a raw channel tuple."""
    color_class = get_color_class(color_space, format_type)
    if isinstance(value, ColorBase):
        return value.convert(color_class)
    return color_class(value)
