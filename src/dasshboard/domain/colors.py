"""Color helpers for host and section styling."""

from __future__ import annotations

import colorsys
import re

_HEX_RE = re.compile(r"#([0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})")
_RGB_RE = re.compile(r"rgba?\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*(?:,\s*[\d.]+\s*)?\)")

# First entry is the theme default (empty string), rendered with the link color.
SECTION_PALETTE: tuple[str, ...] = (
    "", "#ffadad", "#ffd6a5", "#fdffb6", "#caffbf", "#9bf6ff", "#a0c4ff", "#bdb2ff", "#ffc6ff", "#ffd9d9",
    "#000000", "#e03524", "#f07c12", "#ffc200", "#90bc1a", "#21b534", "#0095ac", "#1f64ad", "#4040a0", "#903498",
    "#888888", "#f94144", "#f3722c", "#f8961e", "#f9c74f", "#90be6d", "#43aa8b", "#4d908e", "#577590", "#277da1",
    "#ffffff", "#ef476f", "#f78c6b", "#ffd166", "#83d483", "#06d6a0", "#0cb0a9", "#118ab2", "#0c637f", "#073b4c",
)  # fmt: skip


def parse_rgb(color: str) -> tuple[int, int, int] | None:
    """Parse ``#rgb``, ``#rgba``, ``#rrggbb``, ``#rrggbbaa`` or ``rgb()/rgba()``."""
    value = color.strip()
    hex_match = _HEX_RE.fullmatch(value)
    if hex_match is not None:
        digits = hex_match.group(1)
        if len(digits) in (3, 4):
            return (int(digits[0] * 2, 16), int(digits[1] * 2, 16), int(digits[2] * 2, 16))
        return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))

    match = _RGB_RE.fullmatch(value)
    if match is None:
        return None
    r, g, b = (min(int(c), 255) for c in match.groups())
    return r, g, b


def hue(color: str) -> float:
    """HSL hue of *color* in degrees; 0 when unparsable or achromatic.

    Examples:
        >>> hue("#00ff00")
        120.0
        >>> hue("not-a-color")
        0.0
    """
    rgb = parse_rgb(color)
    if rgb is None:
        return 0.0
    h, _l, _s = colorsys.rgb_to_hls(*(c / 255 for c in rgb))
    return round(h * 360, 2) % 360


def check_color(color: str) -> str:
    """Return *color* stripped; raise ValueError unless it is "" or parses as RGB.

    Used as a model validator so only plain color values reach inline styles.
    """
    value = color.strip()
    if value and parse_rgb(value) is None:
        raise ValueError("unrecognised color; use #rgb, #rrggbb or rgb(r, g, b)")
    return value
