from .format_type import FormatType
from .color_types import ColorSpace, HUE_SPACES, to_color_space

__all__ = [
    'FormatType',
    'ColorSpace',
    'HUE_SPACES',
    'to_color_space',
]
