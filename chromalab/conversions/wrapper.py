"""
Generic conversion between color classes through the CIE XYZ hub.

Every class knows only how to reach XYZ relative to its own reference white
and how to come back from it; a conversion is those two steps with a
chromatic adaptation in between when the whites differ.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, Type, Union

from ..illuminants import Illuminant, DEFAULT_ILLUMINANT
from ..types.color_types import ColorSpaceLike
from ..types.format_type import FormatType
from ..utils import value_or_default

if TYPE_CHECKING:
    from ..colors.color_base import ColorBase

logger = logging.getLogger(__name__)

ColorTarget = Union[ColorSpaceLike, "Type[ColorBase]"]


def resolve_color_class(
    to_space: ColorTarget,
    format_type: Optional[FormatType] = None,
) -> Type[ColorBase]:
    """Map a class, ColorSpace or space name (plus optional format) to a color class."""
    from ..colors.color_base import ColorBase  # local import to avoid cycles
    from ..colors.color import get_color_class

    if isinstance(to_space, type):
        if not issubclass(to_space, ColorBase):
            raise TypeError(f"Expected a ColorBase subclass, got {to_space!r}")
        return to_space
    return get_color_class(to_space, format_type)


def target_illuminant(
    color: ColorBase,
    target_cls: Type[ColorBase],
    illuminant: Optional[Union[Illuminant, str]] = None,
) -> Illuminant:
    """
    Reference white a conversion of ``color`` into ``target_cls`` ends up in.

    Device spaces always use their native white. Relative spaces take the
    explicit argument, else the source's illuminant when the source is
    relative, else D65.
    """
    if not target_cls.is_relative:
        return target_cls.native_illuminant
    fallback = color.illuminant if color.is_relative else DEFAULT_ILLUMINANT
    return Illuminant.from_name(value_or_default(illuminant, fallback))


def convert(
    color: ColorBase,
    to_space: Optional[ColorTarget] = None,
    format_type: Optional[FormatType] = None,
    *,
    illuminant: Optional[Union[Illuminant, str]] = None,
) -> ColorBase:
    """
    Convert a color to another space, format and/or illuminant.

    Args:
        color: source color
        to_space: target class, ColorSpace member or name; defaults to the
            source's own space
        format_type: target format when ``to_space`` is not a class
            (defaults to FLOAT)
        illuminant: reference white of a relative target
    Returns:
        New color of the target class; ``color`` itself when nothing changes
    """
    from ..colors.color_base import ColorBase  # local import to avoid cycles

    if not isinstance(color, ColorBase):
        raise TypeError(f"convert() expects a ColorBase instance, got {type(color).__name__}")

    if to_space is None:
        to_space = color.mode
        format_type = value_or_default(format_type, color.format_type)

    target_cls = resolve_color_class(to_space, format_type)
    dest = target_illuminant(color, target_cls, illuminant)

    if type(color) is target_cls and color.illuminant is dest:
        return color

    logger.debug(
        "Converting %s[%s] -> %s[%s] via XYZ",
        type(color).__name__, color.illuminant.name, target_cls.__name__, dest.name,
    )
    return target_cls.from_xyz(color.to_xyz(), illuminant=dest)
