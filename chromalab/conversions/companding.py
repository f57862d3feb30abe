import math
# No dependencies


def srgb_to_linear(c: float) -> float:
    """Convert nonlinear sRGB (0..1) to linear-light RGB."""
    if c <= 0.04045:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4

def linear_to_srgb(c: float) -> float:
    """Convert linear-light RGB (0..1) to nonlinear sRGB."""
    if c <= 0.0031308:
        return 12.92 * c
    return 1.055 * (c ** (1/2.4)) - 0.055

def gamma_to_linear(c: float, gamma: float) -> float:
    """Pure power decoding, mirrored for negative (out-of-gamut) values."""
    return math.copysign(abs(c) ** gamma, c)

def linear_to_gamma(c: float, gamma: float) -> float:
    """Pure power encoding, mirrored for negative (out-of-gamut) values."""
    return math.copysign(abs(c) ** (1 / gamma), c)

def prophoto_to_linear(c: float, gamma: float = 1.8) -> float:
    """Decode ROMM RGB: linear segment below 16/512, power law above."""
    if c < 16 / 512:
        return c / 16
    return c ** gamma

def linear_to_prophoto(c: float, gamma: float = 1.8) -> float:
    """Encode ROMM RGB: linear segment below 1/512, power law above."""
    if c < 1 / 512:
        return 16 * c
    return c ** (1 / gamma)

def identity(c: float) -> float:
    return c
