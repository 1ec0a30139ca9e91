# Shared animation utilities for the product tour
from utils.errors import ConfigurationError
from utils.colors import hex_to_rgb, interpolate_color
from utils.timing import sec, ms, revealed_chars, typed_text, in_range
from utils.animation import (
    ease_out_cubic, ease_in_out_cubic, ease_out_quad,
    ease_out_bounce, smooth_step, interpolate, interpolate_channels,
    KeyframeSet,
)
from utils.spring import SpringConfig, SPRING_PRESETS, spring, measure_spring
