from .mixing import HueMode, hue_lerp, mix
from .colormap import colormap, GradientColorMap, gradient_scale, padded_gradient

__all__ = [
    'HueMode',
    'hue_lerp',
    'mix',
    'colormap',
    'GradientColorMap',
    'gradient_scale',
    'padded_gradient',
]
