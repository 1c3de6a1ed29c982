"""
Module: color.conversions

Purpose:
    Conversions between hex strings, RGB and HSL, plus CSS rgba()
    strings. Channel values are rounded half-up so results match
    what browsers produce for the same inputs.

Key Classes:
    - RGB: Red/green/blue channels (0-255)
    - HSL: Hue (0-360), saturation and lightness (0-100)

Key Functions:
    - rgb_to_hex(), hex_to_rgb()
    - rgb_to_hsl(), hsl_to_rgb()
    - hex_to_hsl(), hsl_to_hex()
    - hex_to_rgba(), rgba_to_hex()

Used By:
    - color.schemes: Gradients and palette generation
"""

from __future__ import annotations

import math
import re
from dataclasses import asdict, dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class RGB:
    """RGB color with integer channels 0-255."""
    r: int
    g: int
    b: int

    def as_dict(self) -> dict[str, int]:
        return asdict(self)


@dataclass(frozen=True)
class HSL:
    """HSL color: hue in degrees, saturation/lightness in percent."""
    h: int
    s: int
    l: int

    def as_dict(self) -> dict[str, int]:
        return asdict(self)


_RGBA_PATTERN = re.compile(r"rgba?\((\d+),\s*(\d+),\s*(\d+)(?:,\s*([\d.]+))?\)")
_HEX_DIGITS = re.compile(r"[0-9a-fA-F]{6}")


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positives (Python's round() is banker's)."""
    return math.floor(value + 0.5)


def _channel_hex(value: float) -> str:
    return format(round_half_up(max(0, min(255, value))), "02x")


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """
    Convert RGB channels to a hex color string.

    Channels are clamped to 0-255 and rounded.

    Example:
        >>> rgb_to_hex(255, 0, 0)
        '#ff0000'
    """
    return "#" + _channel_hex(r) + _channel_hex(g) + _channel_hex(b)


def hex_to_rgb(hex_color: Any) -> Optional[RGB]:
    """
    Parse a hex color (``#rgb``, ``#rrggbb``, with or without ``#``).

    Returns:
        RGB, or None for non-strings, wrong lengths and non-hex digits.

    Example:
        >>> hex_to_rgb("#f00")
        RGB(r=255, g=0, b=0)
    """
    if not hex_color or not isinstance(hex_color, str):
        return None

    value = hex_color.replace("#", "", 1)
    if len(value) == 3:
        value = "".join(char * 2 for char in value)
    if not _HEX_DIGITS.fullmatch(value):
        return None

    return RGB(
        r=int(value[0:2], 16),
        g=int(value[2:4], 16),
        b=int(value[4:6], 16),
    )


def rgb_to_hsl(r: float, g: float, b: float) -> HSL:
    """
    Convert RGB channels (0-255) to HSL.

    Example:
        >>> rgb_to_hsl(255, 0, 0)
        HSL(h=0, s=100, l=50)
    """
    r, g, b = r / 255, g / 255, b / 255
    high = max(r, g, b)
    low = min(r, g, b)
    lightness = (high + low) / 2

    if high == low:
        hue = saturation = 0.0  # achromatic
    else:
        d = high - low
        saturation = d / (2 - high - low) if lightness > 0.5 else d / (high + low)
        if high == r:
            hue = ((g - b) / d + (6 if g < b else 0)) / 6
        elif high == g:
            hue = ((b - r) / d + 2) / 6
        else:
            hue = ((r - g) / d + 4) / 6

    return HSL(
        h=round_half_up(hue * 360),
        s=round_half_up(saturation * 100),
        l=round_half_up(lightness * 100),
    )


def _hue_to_rgb(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(h: float, s: float, l: float) -> RGB:
    """
    Convert HSL (h 0-360, s/l 0-100) to RGB.

    Example:
        >>> hsl_to_rgb(120, 100, 50)
        RGB(r=0, g=255, b=0)
    """
    h, s, l = h / 360, s / 100, l / 100

    if s == 0:
        r = g = b = l
    else:
        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q
        r = _hue_to_rgb(p, q, h + 1 / 3)
        g = _hue_to_rgb(p, q, h)
        b = _hue_to_rgb(p, q, h - 1 / 3)

    return RGB(
        r=round_half_up(r * 255),
        g=round_half_up(g * 255),
        b=round_half_up(b * 255),
    )


def hex_to_hsl(hex_color: Any) -> Optional[HSL]:
    """Hex to HSL. None when the hex string is invalid."""
    rgb = hex_to_rgb(hex_color)
    if rgb is None:
        return None
    return rgb_to_hsl(rgb.r, rgb.g, rgb.b)


def hsl_to_hex(h: float, s: float, l: float) -> str:
    rgb = hsl_to_rgb(h, s, l)
    return rgb_to_hex(rgb.r, rgb.g, rgb.b)


def hex_to_rgba(hex_color: Any, alpha: float = 1) -> str:
    """
    Build a CSS ``rgba()`` string from a hex color.

    Invalid hex falls back to black with the requested alpha.

    Example:
        >>> hex_to_rgba("#ff0000", 0.5)
        'rgba(255, 0, 0, 0.5)'
    """
    rgb = hex_to_rgb(hex_color)
    if rgb is None:
        return f"rgba(0, 0, 0, {alpha})"
    return f"rgba({rgb.r}, {rgb.g}, {rgb.b}, {alpha})"


def rgba_to_hex(rgba: Any, include_alpha: bool = False) -> Optional[str]:
    """
    Convert a CSS ``rgb()``/``rgba()`` string to hex.

    Args:
        rgba: String such as "rgba(255, 0, 0, 0.5)"
        include_alpha: Append the alpha channel as a fourth byte

    Returns:
        "#rrggbb" or "#rrggbbaa"; None when the string does not parse
        or a value is out of range.

    Example:
        >>> rgba_to_hex("rgba(255, 0, 0, 0.5)", include_alpha=True)
        '#ff000080'
    """
    if not rgba or not isinstance(rgba, str):
        return None

    match = _RGBA_PATTERN.search(rgba)
    if not match:
        return None

    r, g, b = (int(match.group(i)) for i in (1, 2, 3))
    try:
        alpha = float(match.group(4)) if match.group(4) else 1.0
    except ValueError:
        return None

    if not all(0 <= c <= 255 for c in (r, g, b)) or not 0 <= alpha <= 1:
        return None

    result = rgb_to_hex(r, g, b)
    if include_alpha:
        result += _channel_hex(alpha * 255)
    return result
