"""
Spring physics — closed-form damped oscillator for entrance animations.

`spring()` returns the unit step response of m*x'' + c*x' + k*x = k,
released from rest at x=0, evaluated at the time a frame represents.
Nothing is integrated step by step, so any frame can be sampled directly.
"""

import math
from dataclasses import dataclass
from functools import lru_cache

import numpy as np

from utils.errors import ConfigurationError

# Distance from 1 that counts as settled
DEFAULT_SETTLE_THRESHOLD = 0.005

# Hard stop for measure_spring on extremely slow springs (10 min @ 30fps)
_MAX_SETTLE_FRAMES = 18000


@dataclass(frozen=True)
class SpringConfig:
    """
    Physical parameters of a damped oscillator.

    Attributes:
        mass: Oscillator mass (> 0)
        damping: Damping coefficient (>= 0)
        stiffness: Spring constant (> 0)
        overshoot_clamping: Never report progress above 1
    """
    mass: float = 1.0
    damping: float = 10.0
    stiffness: float = 100.0
    overshoot_clamping: bool = False

    def __post_init__(self):
        if self.mass <= 0:
            raise ConfigurationError(f"Spring mass must be positive, got {self.mass}")
        if self.stiffness <= 0:
            raise ConfigurationError(
                f"Spring stiffness must be positive, got {self.stiffness}"
            )
        if self.damping < 0:
            raise ConfigurationError(
                f"Spring damping must not be negative, got {self.damping}"
            )

    @property
    def natural_frequency(self):
        """Undamped angular frequency, rad/s."""
        return math.sqrt(self.stiffness / self.mass)

    @property
    def damping_ratio(self):
        """< 1 oscillates, == 1 critical, > 1 creeps in without overshoot."""
        return self.damping / (2.0 * math.sqrt(self.stiffness * self.mass))

    @classmethod
    def from_dict(cls, data, base=None):
        """Build a config from a config.yaml mapping, filling gaps from `base`."""
        base = base or cls()
        return cls(
            mass=data.get("mass", base.mass),
            damping=data.get("damping", base.damping),
            stiffness=data.get("stiffness", base.stiffness),
            overshoot_clamping=data.get("overshoot_clamping", base.overshoot_clamping),
        )


SMOOTH = SpringConfig(mass=1, damping=200, stiffness=100)
SNAPPY = SpringConfig(mass=1, damping=20, stiffness=200)
BOUNCY = SpringConfig(mass=1, damping=8, stiffness=100)
HEAVY = SpringConfig(mass=2, damping=15, stiffness=80)

SPRING_PRESETS = {
    "smooth": SMOOTH,
    "snappy": SNAPPY,
    "bouncy": BOUNCY,
    "heavy": HEAVY,
}


def load_spring_presets(config):
    """
    Merge `springs:` overrides from config.yaml over the built-in presets.

    Args:
        config: Full config dict

    Returns:
        Dict of preset name -> SpringConfig
    """
    presets = dict(SPRING_PRESETS)
    for name, params in (config.get("springs") or {}).items():
        presets[name] = SpringConfig.from_dict(params, presets.get(name))
    return presets


def step_response(t, config):
    """
    Position of the oscillator `t` seconds after release.

    Closed-form solution for each damping regime; the raw value may
    overshoot 1 for under-damped springs.
    """
    if t <= 0:
        return 0.0

    w0 = config.natural_frequency
    zeta = config.damping_ratio

    if zeta < 1.0:
        wd = w0 * math.sqrt(1.0 - zeta * zeta)
        envelope = math.exp(-zeta * w0 * t)
        return 1.0 - envelope * (
            math.cos(wd * t) + (zeta * w0 / wd) * math.sin(wd * t)
        )

    if zeta == 1.0:
        return 1.0 - math.exp(-w0 * t) * (1.0 + w0 * t)

    root = math.sqrt(zeta * zeta - 1.0)
    r1 = -w0 * (zeta - root)  # slow root
    r2 = -w0 * (zeta + root)  # fast root
    return 1.0 - (r2 * math.exp(r1 * t) - r1 * math.exp(r2 * t)) / (r2 - r1)


def _error_bound(t, config):
    """Upper bound of |x(t) - 1| for every time >= t."""
    w0 = config.natural_frequency
    zeta = config.damping_ratio
    if zeta < 1.0:
        return math.exp(-zeta * w0 * t) / math.sqrt(1.0 - zeta * zeta)
    # Critically and over-damped responses approach 1 monotonically
    return abs(1.0 - step_response(t, config))


@lru_cache(maxsize=None)
def measure_spring(fps, config=SMOOTH, threshold=DEFAULT_SETTLE_THRESHOLD):
    """
    Count the frames a spring needs before it stays within `threshold` of 1.

    Args:
        fps: Frames per second
        config: SpringConfig
        threshold: Allowed distance from the resting value

    Returns:
        Number of frames (int)
    """
    if threshold <= 0:
        raise ConfigurationError(f"Settle threshold must be positive, got {threshold}")

    last_outside = 0
    frame = 0
    while frame < _MAX_SETTLE_FRAMES:
        t = frame / fps
        if abs(1.0 - step_response(t, config)) >= threshold:
            last_outside = frame
        if _error_bound(t, config) < threshold:
            break
        frame += 1
    return last_outside + 1


def spring(frame, fps, config=SMOOTH, delay=0, duration_in_frames=None):
    """
    Normalized spring progress for a frame.

    Args:
        frame: Current frame
        fps: Frames per second of the composition
        config: SpringConfig (see SPRING_PRESETS)
        delay: Frames to wait before the spring starts moving
        duration_in_frames: Stretch or squeeze the motion so it settles in
            this many frames. None = natural duration.

    Returns:
        0.0 before `delay`, then a value travelling toward 1.0
    """
    if fps <= 0:
        raise ConfigurationError(f"fps must be positive, got {fps}")
    if frame < delay:
        return 0.0

    elapsed = frame - delay
    if duration_in_frames is not None:
        if duration_in_frames <= 0:
            raise ConfigurationError(
                f"Spring duration must be positive, got {duration_in_frames}"
            )
        elapsed *= measure_spring(fps, config) / duration_in_frames

    value = step_response(elapsed / fps, config)
    if config.overshoot_clamping:
        value = min(value, 1.0)
    return value


def spring_curve(frames, fps, config=SMOOTH, delay=0):
    """Sample `spring()` for many frames at once as a numpy array."""
    return np.fromiter(
        (spring(f, fps, config, delay) for f in frames),
        dtype=float,
    )


def smooth_spring(frame, fps, delay=0):
    return spring(frame, fps, SMOOTH, delay)


def snappy_spring(frame, fps, delay=0):
    return spring(frame, fps, SNAPPY, delay)


def bouncy_spring(frame, fps, delay=0):
    return spring(frame, fps, BOUNCY, delay)


def delayed_spring(frame, fps, delay, config=SMOOTH):
    return spring(frame, fps, config, delay)
