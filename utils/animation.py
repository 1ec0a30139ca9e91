"""
Animation utilities — easing functions and keyframe interpolation.

Every value here is a pure function of its inputs (usually a frame number),
so scenes can be sampled in any order.
"""

from bisect import bisect_right
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from utils.errors import ConfigurationError

CLAMP = "clamp"
EXTEND = "extend"
EXTRAPOLATION_POLICIES = (CLAMP, EXTEND)


def linear(t):
    """Identity curve, clamped to 0..1."""
    return max(0.0, min(1.0, t))


def ease_out_cubic(t):
    """Fast start, slow end. Great for elements entering the screen."""
    t = max(0.0, min(1.0, t))
    return 1.0 - (1.0 - t) ** 3


def ease_in_out_cubic(t):
    """Smooth acceleration and deceleration. Great for fade transitions."""
    t = max(0.0, min(1.0, t))
    if t < 0.5:
        return 4.0 * t * t * t
    else:
        return 1.0 - (-2.0 * t + 2.0) ** 3 / 2.0


def ease_out_quad(t):
    """Gentle deceleration. Subtler than cubic."""
    t = max(0.0, min(1.0, t))
    return 1.0 - (1.0 - t) ** 2


def ease_out_bounce(t):
    """Bounce effect at the end. Great for pop-in elements."""
    t = max(0.0, min(1.0, t))
    if t < 1.0 / 2.75:
        return 7.5625 * t * t
    elif t < 2.0 / 2.75:
        t -= 1.5 / 2.75
        return 7.5625 * t * t + 0.75
    elif t < 2.5 / 2.75:
        t -= 2.25 / 2.75
        return 7.5625 * t * t + 0.9375
    else:
        t -= 2.625 / 2.75
        return 7.5625 * t * t + 0.984375


def smooth_step(t):
    """Hermite interpolation — smooth start and end."""
    t = max(0.0, min(1.0, t))
    return t * t * (3.0 - 2.0 * t)


EASINGS = {
    "linear": linear,
    "ease_out_cubic": ease_out_cubic,
    "ease_in_out_cubic": ease_in_out_cubic,
    "ease_out_quad": ease_out_quad,
    "ease_out_bounce": ease_out_bounce,
    "smooth_step": smooth_step,
}


def get_easing(name):
    """Look up an easing function by name (as written in config.yaml)."""
    try:
        return EASINGS[name]
    except KeyError:
        raise ConfigurationError(
            f"Unknown easing '{name}', expected one of {sorted(EASINGS)}"
        ) from None


@dataclass(frozen=True)
class KeyframeSet:
    """
    Piecewise-linear curve over ordered (breakpoint, value) pairs.

    Attributes:
        breakpoints: Input positions (usually frames), non-decreasing
        values: Output value for each breakpoint
        extrapolate_left: "clamp" holds the first value before the first
            breakpoint, "extend" continues the first segment's slope
        extrapolate_right: Same for the far end
        easing: Optional curve applied to the progress inside each segment
    """
    breakpoints: tuple
    values: tuple
    extrapolate_left: str = CLAMP
    extrapolate_right: str = CLAMP
    easing: Optional[Callable[[float], float]] = None

    def __post_init__(self):
        object.__setattr__(self, "breakpoints", tuple(self.breakpoints))
        object.__setattr__(self, "values", tuple(self.values))
        _validate(self.breakpoints, self.values,
                  self.extrapolate_left, self.extrapolate_right)

    def at(self, frame):
        """Evaluate the curve at `frame`."""
        bps = self.breakpoints
        vals = self.values

        if frame >= bps[-1]:
            if self.extrapolate_right == EXTEND and frame > bps[-1]:
                return _extend(frame, bps[-2], bps[-1], vals[-2], vals[-1])
            return float(vals[-1])

        if frame < bps[0]:
            if self.extrapolate_left == EXTEND:
                return _extend(frame, bps[0], bps[1], vals[0], vals[1])
            return float(vals[0])

        # Last breakpoint at or before frame, so b_i <= frame < b_{i+1}
        i = bisect_right(bps, frame) - 1
        b0, b1 = bps[i], bps[i + 1]
        v0, v1 = vals[i], vals[i + 1]
        if b1 == b0:
            return float(v1)

        progress = (frame - b0) / (b1 - b0)
        if self.easing:
            progress = self.easing(progress)
        return v0 + (v1 - v0) * progress

    __call__ = at


def _validate(breakpoints, values, extrapolate_left, extrapolate_right):
    if len(breakpoints) != len(values):
        raise ConfigurationError(
            f"Keyframe set has {len(breakpoints)} breakpoints "
            f"but {len(values)} values"
        )
    if len(breakpoints) < 2:
        raise ConfigurationError("Keyframe set needs at least two breakpoints")
    for a, b in zip(breakpoints, breakpoints[1:]):
        if b < a:
            raise ConfigurationError(
                f"Keyframe breakpoints must be non-decreasing, got {list(breakpoints)}"
            )
    for policy in (extrapolate_left, extrapolate_right):
        if policy not in EXTRAPOLATION_POLICIES:
            raise ConfigurationError(
                f"Unknown extrapolation '{policy}', expected clamp or extend"
            )


def _extend(frame, b0, b1, v0, v1):
    # A zero-width edge segment has no slope to continue
    if b1 == b0:
        return float(v0 if frame < b0 else v1)
    slope = (v1 - v0) / (b1 - b0)
    return v0 + slope * (frame - b0)


def interpolate(frame, input_range, output_range,
                extrapolate_left=CLAMP, extrapolate_right=CLAMP, easing=None):
    """
    Map `frame` through a piecewise-linear curve.

    Args:
        frame: Input value (frame number or any scalar such as spring progress)
        input_range: Non-decreasing breakpoints, at least two
        output_range: Output value per breakpoint
        extrapolate_left: "clamp" or "extend" before the first breakpoint
        extrapolate_right: "clamp" or "extend" after the last breakpoint
        easing: Easing function applied inside each segment. None = linear.

    Returns:
        Interpolated float

    Raises:
        ConfigurationError: breakpoints out of order or ranges mismatched
    """
    curve = KeyframeSet(input_range, output_range,
                        extrapolate_left, extrapolate_right, easing)
    return curve.at(frame)


def interpolate_channels(frame, input_range, output_vectors: Sequence[Sequence[float]],
                         extrapolate_left=CLAMP, extrapolate_right=CLAMP, easing=None):
    """
    Interpolate vector values (positions, colors) one channel at a time.

    Args:
        frame: Input value
        input_range: Breakpoints shared by every channel
        output_vectors: One vector per breakpoint, all the same length

    Returns:
        Tuple with one interpolated float per channel
    """
    if not output_vectors:
        raise ConfigurationError("Keyframe set needs at least two breakpoints")
    width = len(output_vectors[0])
    if any(len(v) != width for v in output_vectors):
        raise ConfigurationError("All keyframe vectors must have the same length")

    return tuple(
        interpolate(frame, input_range, [v[ch] for v in output_vectors],
                    extrapolate_left, extrapolate_right, easing)
        for ch in range(width)
    )
