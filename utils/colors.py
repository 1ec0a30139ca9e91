"""
Color utilities — hex parsing and per-channel color blending for scenes.
"""

import math

from utils.animation import interpolate_channels


def hex_to_rgb(hex_color):
    """
    Convert hex color string to RGB tuple.

    Args:
        hex_color: Color string like "#FFFFFF" or "FFFFFF"

    Returns:
        Tuple of (r, g, b) integers 0-255
    """
    hex_color = hex_color.lstrip("#")
    return tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))



def rgb_to_css(color):
    """Format an (r, g, b) tuple as a CSS rgb() string."""
    r, g, b = color
    return f"rgb({r}, {g}, {b})"


def interpolate_color(value, input_range, colors, **kwargs):
    """
    Blend between colors by interpolating each channel independently.

    Args:
        value: Input value (frame or 0..1 progress)
        input_range: Breakpoints, one per color
        colors: Hex strings or (r, g, b) tuples
        **kwargs: Extrapolation / easing options passed to the interpolator

    Returns:
        (r, g, b) tuple of ints, each channel rounded
    """
    rgb = [hex_to_rgb(c) if isinstance(c, str) else tuple(c) for c in colors]
    channels = interpolate_channels(value, input_range, rgb, **kwargs)
    # Halves round up
    return tuple(int(math.floor(ch + 0.5)) for ch in channels)
