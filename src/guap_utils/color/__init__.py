"""
Color Package

Hex/RGB/HSL conversion and palette helpers.
"""

from .conversions import (
    HSL,
    RGB,
    hex_to_hsl,
    hex_to_rgb,
    hex_to_rgba,
    hsl_to_hex,
    hsl_to_rgb,
    rgb_to_hex,
    rgb_to_hsl,
    rgba_to_hex,
)
from .schemes import (
    TriadicScheme,
    generate_gradient,
    generate_triadic_colors,
    get_complementary_color,
    random_dark_color,
    random_light_color,
)

__all__ = [
    "RGB",
    "HSL",
    "TriadicScheme",
    "rgb_to_hex",
    "hex_to_rgb",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "hex_to_hsl",
    "hsl_to_hex",
    "hex_to_rgba",
    "rgba_to_hex",
    "generate_gradient",
    "get_complementary_color",
    "generate_triadic_colors",
    "random_light_color",
    "random_dark_color",
]
