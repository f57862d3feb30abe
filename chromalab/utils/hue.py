"""Hue angle helpers shared by the conversion, distance and mixing code."""
from ..types.format_type import HUE_360


def normalize_hue(h: float) -> float:
    """Wrap an angle in degrees into [0, 360)."""
    h = h % HUE_360
    # tiny negative inputs round up to exactly 360.0
    if h >= HUE_360:
        return 0.0
    return h + 0.0


def hue_difference(h0: float, h1: float) -> float:
    """Signed short-path difference ``h1 - h0`` in degrees, within [-180, 180]."""
    delta = h1 - h0
    if delta > 180.0:
        delta -= HUE_360
    elif delta < -180.0:
        delta += HUE_360
    return delta
