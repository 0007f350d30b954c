"""Colour model: hex normalisation, RGB conversion and label contrast.

Every hex string that enters the palette passes through normalize_hex().
Anything that is not exactly '#' + 6 hex digits becomes black; this is a
compatibility rule, not a validation failure, so nothing here raises.
"""

import math
import re

FALLBACK_HEX = '#000000'
DARK_TEXT = '#111111'
LIGHT_TEXT = '#FFFFFF'

# Rec. 709 / sRGB luminance weights
_LUMA_WEIGHTS = (0.2126, 0.7152, 0.0722)
_HEX_RE = re.compile(r'#[0-9a-fA-F]{6}')


def normalize_hex(value: object) -> str:
    """Return value uppercased if it is '#RRGGBB', else '#000000'."""
    if isinstance(value, str) and _HEX_RE.fullmatch(value):
        return value.upper()
    return FALLBACK_HEX


def hex_to_rgb(hex_str: object) -> tuple[int, int, int]:
    """Convert a hex colour to an (r, g, b) tuple of ints in [0, 255]."""
    h = normalize_hex(hex_str)[1:]
    return (int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16))


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Convert channels (clamped to [0, 255]) to canonical '#RRGGBB'."""
    r, g, b = (max(0, min(255, int(c))) for c in (r, g, b))
    return f'#{r:02X}{g:02X}{b:02X}'


def srgb_to_linear(channel: int) -> float:
    """Linearise one 8-bit sRGB channel to [0, 1]."""
    x = channel / 255
    if x <= 0.04045:
        return x / 12.92
    return math.pow((x + 0.055) / 1.055, 2.4)


def relative_luminance(hex_str: object) -> float:
    """Relative luminance Y of a hex colour, 0.0 (black) to 1.0 (white)."""
    rgb = hex_to_rgb(hex_str)
    return sum(w * srgb_to_linear(c) for w, c in zip(_LUMA_WEIGHTS, rgb))


def contrast_text(hex_str: object) -> str:
    """Pick near-black or white label text for a background colour.

    Strictly greater than 0.5 luminance gets dark text; 0.5 itself is light.
    """
    return DARK_TEXT if relative_luminance(hex_str) > 0.5 else LIGHT_TEXT


def rgb_distance(a: tuple[int, int, int], b: tuple[int, int, int]) -> float:
    """Euclidean distance in RGB space. Converts to int so uint8 cannot wrap."""
    return math.sqrt(sum((int(x) - int(y)) ** 2 for x, y in zip(a, b)))
