"""
Reference white points.

Each member is the normalized XYZ tristimulus value of a CIE standard
illuminant for the 1931 2 degree observer, with Y fixed at 1. Members are
singletons, so two colors share an illuminant exactly when their members are
identical.
"""
from __future__ import annotations

from enum import Enum
from typing import Tuple

import numpy as np


class Illuminant(Enum):
    A = (1.09850, 1.00000, 0.35585)
    B = (0.99072, 1.00000, 0.85223)
    C = (0.98074, 1.00000, 1.18232)
    D50 = (0.96422, 1.00000, 0.82521)
    D55 = (0.95682, 1.00000, 0.92149)
    D65 = (0.95047, 1.00000, 1.08883)
    D75 = (0.94972, 1.00000, 1.22638)
    E = (1.00000, 1.00000, 1.00000)
    F2 = (0.99186, 1.00000, 0.67393)
    F7 = (0.95041, 1.00000, 1.08747)
    F11 = (1.00962, 1.00000, 0.64350)

    @property
    def white_point(self) -> Tuple[float, float, float]:
        return self.value

    @property
    def white_array(self) -> np.ndarray:
        return np.array(self.value, dtype=np.float64)

    @property
    def chromaticity(self) -> Tuple[float, float]:
        """(x, y) chromaticity coordinates of the white point."""
        x, y, z = self.value
        total = x + y + z
        return x / total, y / total

    @classmethod
    def from_name(cls, name: str | Illuminant) -> Illuminant:
        if isinstance(name, Illuminant):
            return name
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(f"Unknown illuminant: {name!r}") from None

    def __repr__(self) -> str:
        return f"Illuminant.{self.name}"


DEFAULT_ILLUMINANT = Illuminant.D65

for _member in Illuminant:
    # Registry is read-only constant data; a bad entry is a programming error
    if _member.value[1] != 1.0:
        raise RuntimeError(f"Illuminant {_member.name} is not normalized to Y=1")
del _member
