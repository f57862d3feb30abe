import math
from typing import ClassVar, Optional, Tuple

from ..illuminants import Illuminant
from ..conversions.adaptation import AdaptationMethod, adapt
from ..types.color_types import ColorSpace, Channels, XYZTuple
from .color_base import ColorBase, Bounds, build_registry


class ColorXYZ(ColorBase):
    """
    CIE 1931 XYZ tristimulus values, normalized so the reference white has Y = 1.

    The hub every other space converts through. Values are meaningful only
    together with their illuminant.
    """
    __slots__ = ()
    mode: ClassVar[ColorSpace] = ColorSpace.XYZ
    channel_names: ClassVar[Tuple[str, str, str]] = ("x", "y", "z")
    bounds: ClassVar[Bounds] = ((0.0, math.inf), (0.0, math.inf), (0.0, math.inf))
    is_relative: ClassVar[bool] = True

    def _to_xyz_tuple(self) -> XYZTuple:
        return self._value

    @classmethod
    def _from_xyz_tuple(cls, xyz: XYZTuple, illuminant: Illuminant) -> Channels:
        return xyz

    def to_xyz(self, illuminant: Optional[Illuminant] = None) -> "ColorXYZ":
        if illuminant is None or illuminant is self.illuminant:
            return self
        return self.adapt_to(illuminant)

    def adapt_to(self, illuminant: Illuminant, method: AdaptationMethod = "bradford") -> "ColorXYZ":
        """
        Chromatically adapt to another reference white.

        Args:
            illuminant: destination white
            method: 'bradford' (default), 'von_kries' or 'xyz_scaling'
        """
        illuminant = Illuminant.from_name(illuminant)
        if illuminant is self.illuminant:
            return self
        return ColorXYZ(adapt(self._value, self.illuminant, illuminant, method), illuminant=illuminant)

    @property
    def chromaticity(self) -> Tuple[float, float]:
        """(x, y) chromaticity; black reports the white point's chromaticity."""
        x, y, z = self._value
        total = x + y + z
        if total == 0.0:
            return self.illuminant.chromaticity
        return x / total, y / total

    @property
    def luminance(self) -> float:
        return self._value[1]


xyz_tuple_to_class = build_registry(ColorXYZ)
