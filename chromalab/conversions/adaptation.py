"""
Chromatic adaptation between reference whites.

XYZ is moved into a cone-response space, each cone channel is scaled by the
ratio of the destination white's response to the source white's, and the
result is moved back to XYZ. The three steps collapse into one 3x3 matrix per
(source, destination, method), cached after first use.
"""
from __future__ import annotations

import logging
from functools import lru_cache
from typing import Literal

import numpy as np

from ..constants import ADAPTATION_MATRICES, ADAPTATION_INVERSES
from ..illuminants import Illuminant
from ..types.color_types import XYZTuple
from .rgb_xyz import apply_matrix

logger = logging.getLogger(__name__)

AdaptationMethod = Literal["bradford", "von_kries", "xyz_scaling"]


@lru_cache(maxsize=None)
def adaptation_matrix(
    from_illuminant: Illuminant,
    to_illuminant: Illuminant,
    method: AdaptationMethod = "bradford",
) -> np.ndarray:
    """
    Composite XYZ -> XYZ matrix adapting ``from_illuminant`` to ``to_illuminant``.

    See http://brucelindbloom.com/Eqn_ChromAdapt.html
    """
    try:
        cone = ADAPTATION_MATRICES[method]
        cone_inv = ADAPTATION_INVERSES[method]
    except KeyError:
        raise ValueError(
            f"Unknown adaptation method: {method!r}; expected one of {sorted(ADAPTATION_MATRICES)}"
        ) from None

    source = cone @ from_illuminant.white_array
    dest = cone @ to_illuminant.white_array
    scale = np.diag(dest / source)

    matrix = cone_inv @ scale @ cone
    matrix.setflags(write=False)
    logger.debug("Built %s adaptation matrix %s -> %s", method, from_illuminant.name, to_illuminant.name)
    return matrix


def adapt(
    xyz: XYZTuple,
    from_illuminant: Illuminant,
    to_illuminant: Illuminant,
    method: AdaptationMethod = "bradford",
) -> XYZTuple:
    """
    Re-express an XYZ triple measured under one white point under another.

    Args:
        xyz: (X, Y, Z) relative to ``from_illuminant``
        from_illuminant: source reference white
        to_illuminant: destination reference white
        method: cone response model ('bradford', 'von_kries', 'xyz_scaling')
    Returns:
        (X, Y, Z) relative to ``to_illuminant``; the input itself when both
        whites are the same
    """
    if from_illuminant is to_illuminant:
        return xyz
    return apply_matrix(adaptation_matrix(from_illuminant, to_illuminant, method), xyz)
