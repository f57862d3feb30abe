from .default import value_or_default
from .dimension import get_dimension
from .hue import normalize_hue, hue_difference

__all__ = ['value_or_default', 'get_dimension', 'normalize_hue', 'hue_difference']
