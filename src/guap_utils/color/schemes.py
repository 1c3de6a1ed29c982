"""
Module: color.schemes

Purpose:
    Palette helpers built on the conversions module: gradients,
    complementary and triadic colors, random light/dark colors.

Key Classes:
    - TriadicScheme: primary/secondary/tertiary hex colors

Key Functions:
    - generate_gradient(): Linear RGB interpolation between two colors
    - get_complementary_color(): Hue rotated by 180 degrees
    - generate_triadic_colors(): Hues rotated by 120 and 240 degrees
    - random_light_color(), random_dark_color()

Dependencies:
    - numpy: Gradient interpolation
"""

from __future__ import annotations

import random
from dataclasses import asdict, dataclass
from typing import Any, List, Optional

import numpy as np

from guap_utils.config import DEFAULT_GRADIENT_STEPS
from .conversions import hex_to_hsl, hex_to_rgb, hsl_to_hex, rgb_to_hex


@dataclass(frozen=True)
class TriadicScheme:
    """Three hex colors evenly spaced around the hue wheel."""
    primary: str
    secondary: str
    tertiary: str

    def as_dict(self) -> dict[str, str]:
        return asdict(self)


def generate_gradient(
    start_color: Any,
    end_color: Any,
    steps: int = DEFAULT_GRADIENT_STEPS,
) -> List[str]:
    """
    Interpolate between two hex colors.

    Args:
        start_color: Hex color at ratio 0
        end_color: Hex color at ratio 1
        steps: Number of intervals; the result has ``steps + 1`` colors

    Returns:
        Hex colors from start to end inclusive. [] if either color is
        invalid or ``steps`` is below 1.

    Example:
        >>> generate_gradient("#000000", "#ffffff", 2)
        ['#000000', '#808080', '#ffffff']
    """
    rgb1 = hex_to_rgb(start_color)
    rgb2 = hex_to_rgb(end_color)
    if rgb1 is None or rgb2 is None or steps < 1:
        return []

    ratios = np.linspace(0.0, 1.0, int(steps) + 1)[:, np.newaxis]
    start = np.array([rgb1.r, rgb1.g, rgb1.b], dtype=float)
    end = np.array([rgb2.r, rgb2.g, rgb2.b], dtype=float)
    # floor(x + 0.5) keeps half-up rounding; np.round is half-to-even
    channels = np.floor(start * (1 - ratios) + end * ratios + 0.5).astype(int)

    return [rgb_to_hex(*row) for row in channels.tolist()]


def get_complementary_color(hex_color: Any) -> Any:
    """Hue + 180. Returns the input unchanged when it isn't a valid hex color."""
    hsl = hex_to_hsl(hex_color)
    if hsl is None:
        return hex_color
    return hsl_to_hex((hsl.h + 180) % 360, hsl.s, hsl.l)


def generate_triadic_colors(hex_color: Any) -> TriadicScheme:
    """
    Build a triadic scheme from a base color.

    The primary color is the input as given. For invalid input all
    three entries are the input.
    """
    hsl = hex_to_hsl(hex_color)
    if hsl is None:
        return TriadicScheme(hex_color, hex_color, hex_color)

    return TriadicScheme(
        primary=hex_color,
        secondary=hsl_to_hex((hsl.h + 120) % 360, hsl.s, hsl.l),
        tertiary=hsl_to_hex((hsl.h + 240) % 360, hsl.s, hsl.l),
    )


def _random_color(rng: random.Random, low_l: int, span_l: int) -> str:
    h = rng.randrange(360)
    s = rng.randrange(30) + 70
    l = rng.randrange(span_l) + low_l
    return hsl_to_hex(h, s, l)


def random_light_color(rng: Optional[random.Random] = None) -> str:
    """Random saturated color with lightness 70-89%."""
    return _random_color(rng or random.Random(), 70, 20)


def random_dark_color(rng: Optional[random.Random] = None) -> str:
    """Random saturated color with lightness 10-29%."""
    return _random_color(rng or random.Random(), 10, 20)
