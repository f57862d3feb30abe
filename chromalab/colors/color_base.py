from __future__ import annotations
import math
from typing import Any, Callable, ClassVar, Optional, Tuple, Self, cast

from ..errors import DomainError
from ..illuminants import Illuminant, DEFAULT_ILLUMINANT
from ..conversions.adaptation import adapt
from ..types.color_types import ColorSpace, Channels, ScalarVector, XYZTuple, HUE_SPACES
from ..types.format_type import FormatType, format_classes
from ..utils import get_dimension, value_or_default

Bounds = Tuple[Tuple[float, float], Tuple[float, float], Tuple[float, float]]


class ColorBase:
    """
    Immutable three-channel color value.

    Subclasses describe one color space through class variables and implement
    the two hub conversions ``_to_xyz_tuple`` / ``_from_xyz_tuple``. Every
    conversion between two spaces goes through CIE XYZ, with a chromatic
    adaptation step when the reference whites differ.

    Illuminant-relative spaces (``is_relative``) store the illuminant per
    instance; device spaces always use their ``native_illuminant``.
    """
    __slots__ = ('_value', '_illuminant', '_is_frozen')  # no new attributes

    num_channels: ClassVar[int] = 3
    mode:       ClassVar[ColorSpace]
    format_type: ClassVar[FormatType] = FormatType.FLOAT
    channel_names: ClassVar[Tuple[str, str, str]]
    bounds:     ClassVar[Bounds]
    is_relative: ClassVar[bool] = False
    native_illuminant: ClassVar[Illuminant] = DEFAULT_ILLUMINANT
    hue_index:  ClassVar[Optional[int]] = None

    # Attached in colors/color.py to avoid import cycles
    convert: Callable[..., ColorBase]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: ScalarVector | ColorBase, illuminant: Optional[Illuminant] = None) -> None:
        # ---- Handle ColorBase input ----
        if isinstance(value, ColorBase):
            converted = value.convert(type(self), illuminant=illuminant)
            value = converted.value
            illuminant = converted.illuminant

        # ---- Illuminant ----
        if self.is_relative:
            resolved = Illuminant.from_name(value_or_default(illuminant, DEFAULT_ILLUMINANT))
        else:
            if illuminant is not None and Illuminant.from_name(illuminant) is not self.native_illuminant:
                raise ValueError(
                    f"{self.__class__.__name__} is defined relative to {self.native_illuminant.name}, "
                    f"got illuminant {illuminant!r}"
                )
            resolved = self.native_illuminant

        # ---- Channels ----
        if isinstance(value, (str, bytes)) or get_dimension(value) != self.num_channels:
            raise ValueError(f"{self.mode.value} expects a {self.num_channels}-channel value, got {value!r}")

        channels = tuple(cast(Tuple[Any, ...], value))
        for v in channels:
            if isinstance(v, bool) or not isinstance(v, (int, float)) and not hasattr(v, '__float__'):
                raise TypeError(f"{self.mode.value} channels must be real numbers, got {v!r}")
            if not math.isfinite(v):
                raise DomainError(f"{self.mode.value} channels must be finite, got {value!r}")

        # type enforcement
        cast_type = format_classes[self.format_type]
        if cast_type is int:
            channels = tuple(int(round(v)) for v in channels)
        else:
            channels = tuple(float(v) for v in channels)

        self._value = self._normalize(cast(Channels, channels))
        self._illuminant = resolved

        # freeze instance, no more writes allowed
        super().__setattr__('_is_frozen', True)

    @classmethod
    def _normalize(cls, channels: Channels) -> Channels:
        """Hook for space-specific canonical forms (hue wrapping and so on)."""
        return channels

    @classmethod
    def _hue_is_undefined(cls, channels: Channels) -> bool:
        return False

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> Channels:
        return self._value

    @property
    def illuminant(self) -> Illuminant:
        return self._illuminant

    @property
    def has_hue(self) -> bool:
        """Check if this color space includes a hue channel."""
        return self.mode in HUE_SPACES

    @property
    def is_achromatic(self) -> bool:
        """True for hue-carrying colors whose hue is meaningless (grays, black)."""
        return self._hue_is_undefined(self._value)

    def __iter__(self):
        return iter(self._value)

    def __getitem__(self, index: int):
        return self._value[index]

    def __len__(self) -> int:
        return self.num_channels

    # ------------------ VALUE SEMANTICS ------------------
    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        other = cast(ColorBase, other)
        return self._value == other._value and self._illuminant is other._illuminant

    def __hash__(self) -> int:
        return hash((type(self), self._value, self._illuminant))

    def __repr__(self) -> str:
        if self.is_relative:
            return f"{self.__class__.__name__}({self._value!r}, illuminant={self._illuminant!r})"
        return f"{self.__class__.__name__}({self._value!r})"

    # ------------------ HUB CONVERSIONS ------------------
    def _to_xyz_tuple(self) -> XYZTuple:
        """XYZ of this color relative to ``self.illuminant``."""
        raise NotImplementedError

    @classmethod
    def _from_xyz_tuple(cls, xyz: XYZTuple, illuminant: Illuminant) -> Channels:
        """Channels of ``cls`` for XYZ already relative to ``illuminant``."""
        raise NotImplementedError

    def to_xyz(self, illuminant: Optional[Illuminant] = None):
        """
        Convert to CIE XYZ.

        Args:
            illuminant: reference white of the result; defaults to this
                color's own illuminant (no adaptation)
        Returns:
            ColorXYZ relative to ``illuminant``
        """
        from .xyz import ColorXYZ  # local import to avoid cycles

        target = Illuminant.from_name(value_or_default(illuminant, self.illuminant))
        xyz = adapt(self._to_xyz_tuple(), self.illuminant, target)
        return ColorXYZ(xyz, illuminant=target)

    @classmethod
    def from_xyz(cls, xyz, illuminant: Optional[Illuminant] = None) -> Self:
        """
        Build a color of this class from a ColorXYZ value.

        Relative spaces keep the XYZ value's illuminant unless ``illuminant``
        is given; device spaces always adapt to their native illuminant.
        """
        if cls.is_relative:
            target = Illuminant.from_name(value_or_default(illuminant, xyz.illuminant))
        else:
            target = cls.native_illuminant
        xyz_tuple = adapt(xyz.value, xyz.illuminant, target)
        if cls.is_relative:
            return cls(cls._from_xyz_tuple(xyz_tuple, target), illuminant=target)
        return cls(cls._from_xyz_tuple(xyz_tuple, target))


def build_registry(*classes: type[ColorBase]):
    return {
        (cls.mode, cls.format_type): cls
        for cls in classes
    }
