"""
Colormaps: ordered color stops sampled into evenly spaced swatches.

``colormap`` interpolates piecewise between adjacent stops.
``GradientColorMap`` is the two-color callable form, with optional padding
that trims the ends of the gradient and ``BoundType`` handling for positions
outside [0, 1].
"""
from __future__ import annotations

import math
from bisect import bisect_right
from typing import List, Optional, Sequence, Tuple, Union

import numpy as np
from boundednumbers import BoundType, bound_type_to_np_function

from ..colors.color_base import ColorBase
from ..colors.color import shared_illuminant
from ..conversions.wrapper import ColorTarget, resolve_color_class
from ..illuminants import Illuminant
from ..types.color_types import ColorSpace
from ..types.transform_types import UnitTransform
from .mixing import HueMode, lerp_channels, mix, convert_like

ColorStop = Union[ColorBase, Tuple[ColorBase, float]]
IlluminantLike = Union[Illuminant, str]


def _parse_stops(stops: Sequence[ColorStop]) -> Tuple[List[ColorBase], List[float]]:
    if len(stops) < 2:
        raise ValueError(f"A colormap needs at least 2 stops, got {len(stops)}")

    if all(isinstance(stop, ColorBase) for stop in stops):
        bare = list(stops)
        return bare, np.linspace(0.0, 1.0, len(bare)).tolist()  # type: ignore[return-value]

    colors: List[ColorBase] = []
    positions: List[float] = []
    for stop in stops:
        if isinstance(stop, ColorBase) or len(stop) != 2:
            raise ValueError(
                "Stops must be all bare colors or all (color, position) pairs"
            )
        color, position = stop
        if not isinstance(color, ColorBase):
            raise TypeError(f"Stop color must be a ColorBase instance, got {type(color).__name__}")
        position = float(position)
        if not math.isfinite(position):
            raise ValueError(f"Stop position must be finite, got {position!r}")
        if positions and position < positions[-1]:
            raise ValueError(f"Stop positions must be non-decreasing, got {position} after {positions[-1]}")
        colors.append(color)
        positions.append(position)
    return colors, positions


def _sample_positions(n: int, unit_transform: Optional[UnitTransform]) -> np.ndarray:
    if n < 2:
        raise ValueError(f"n must be at least 2, got {n}")
    u = np.linspace(0.0, 1.0, n, dtype=float)
    if unit_transform is not None:
        u = np.asarray(unit_transform(u), dtype=float)
        if u.shape != (n,):
            raise ValueError(f"unit_transform must preserve shape ({n},), got {u.shape}")
    return u


def colormap(
    stops: Sequence[ColorStop],
    n: int,
    space: ColorTarget = ColorSpace.LAB,
    *,
    unit_transform: Optional[UnitTransform] = None,
    illuminant: Optional[IlluminantLike] = None,
    hue_mode: HueMode = HueMode.SHORTEST,
) -> List[ColorBase]:
    """
    Sample ``n`` evenly spaced colors from a sequence of stops.

    Args:
        stops: ``(color, position)`` pairs with non-decreasing positions, or
            bare colors spaced evenly over [0, 1]
        n: number of samples, at least 2
        space: interpolation space (default CIELAB)
        unit_transform: optional remapping of the sample positions
        illuminant: common white for stops relative to different whites
        hue_mode: hue path when ``space`` is polar
    Returns:
        List of colors of the first stop's class. Positions before the first
        stop or after the last one repeat that stop.
    """
    colors, positions = _parse_stops(stops)
    first = colors[0]
    samples = []
    for x in _sample_positions(n, unit_transform):
        x = float(x)
        if x <= positions[0]:
            color = colors[0]
        elif x >= positions[-1]:
            color = colors[-1]
        else:
            i = bisect_right(positions, x) - 1
            t = (x - positions[i]) / (positions[i + 1] - positions[i])
            color = mix(colors[i], colors[i + 1], t, space, illuminant=illuminant, hue_mode=hue_mode)
        samples.append(convert_like(color, first))
    return samples


class GradientColorMap:
    """
    Callable two-color gradient.

    ``cmap(x)`` maps a position to a color of ``start``'s class. Positions are
    first bounded with ``bound_type`` (``BoundType.IGNORE`` extrapolates),
    then passed through ``unit_transform``, then squeezed into
    ``[lower_pad, 1 - upper_pad]`` of the gradient.
    """

    def __init__(
        self,
        start: ColorBase,
        end: ColorBase,
        space: ColorTarget = ColorSpace.LAB,
        *,
        padding: Tuple[float, float] = (0.0, 0.0),
        unit_transform: Optional[UnitTransform] = None,
        bound_type: BoundType = BoundType.CLAMP,
        hue_mode: HueMode = HueMode.SHORTEST,
        illuminant: Optional[IlluminantLike] = None,
    ) -> None:
        lower, upper = (float(p) for p in padding)
        if lower < 0.0 or upper < 0.0 or lower + upper >= 1.0:
            raise ValueError(f"Padding must be non-negative and sum to less than 1, got {padding!r}")

        white = shared_illuminant(start, end, illuminant)
        self.space = resolve_color_class(space)
        self.start = start
        self.end = end
        self.padding = (lower, upper)
        self.unit_transform = unit_transform
        self.bound_type = bound_type
        self.hue_mode = hue_mode
        self._start = start.convert(self.space, illuminant=white)
        self._end = end.convert(self.space, illuminant=white)

    def transform(self, positions) -> np.ndarray:
        """Gradient parameters for an array of positions."""
        u = np.asarray(positions, dtype=float)
        if self.bound_type != BoundType.IGNORE:
            u = np.asarray(bound_type_to_np_function[self.bound_type](u, 0.0, 1.0), dtype=float)
        if self.unit_transform is not None:
            u = np.asarray(self.unit_transform(u), dtype=float)
        lower, upper = self.padding
        return lower + u * (1.0 - lower - upper)

    def _color_at(self, t: float) -> ColorBase:
        if t == 0.0:
            return self.start
        if t == 1.0:
            return convert_like(self.end, self.start)
        cls = self.space
        channels = lerp_channels(self._start, self._end, t, self.hue_mode)
        mixed = cls(channels, illuminant=self._start.illuminant if cls.is_relative else None)
        return convert_like(mixed, self.start)

    def __call__(self, x: float) -> ColorBase:
        return self._color_at(float(self.transform(np.array([x]))[0]))

    def sample(self, n: int) -> List[ColorBase]:
        """``n`` colors at evenly spaced positions over [0, 1]."""
        return [self._color_at(float(t)) for t in self.transform(_sample_positions(n, None))]

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self.start!r}, {self.end!r}, "
            f"space={self.space.__name__}, padding={self.padding!r})"
        )


def gradient_scale(
    a: ColorBase,
    b: ColorBase,
    n: int,
    space: ColorTarget = ColorSpace.LAB,
    *,
    illuminant: Optional[IlluminantLike] = None,
    hue_mode: HueMode = HueMode.SHORTEST,
) -> List[ColorBase]:
    """``n`` colors from ``a`` to ``b`` inclusive, evenly spaced in ``space``."""
    return colormap([a, b], n, space, illuminant=illuminant, hue_mode=hue_mode)


def padded_gradient(
    a: ColorBase,
    b: ColorBase,
    lower_pad: float,
    upper_pad: float,
    space: ColorTarget = ColorSpace.LAB,
    *,
    illuminant: Optional[IlluminantLike] = None,
    hue_mode: HueMode = HueMode.SHORTEST,
) -> GradientColorMap:
    """
    Gradient from ``a`` to ``b`` with both ends trimmed.

    Position 0 maps to ``lower_pad`` of the way from ``a`` to ``b`` and
    position 1 to ``1 - upper_pad``, which keeps extreme colors such as pure
    black or white out of a palette.
    """
    return GradientColorMap(
        a, b, space,
        padding=(lower_pad, upper_pad),
        illuminant=illuminant,
        hue_mode=hue_mode,
    )
