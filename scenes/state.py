"""
Building blocks for scene state functions.

A scene is a plain function `frame -> VisualState`. The helpers here cover
the patterns every scene repeats: entrances (fade / scale / slide), a mouse
cursor moving through named waypoints, typed text with a blinking caret,
and cross-fading between two sub-views.

All state objects are frozen dataclasses, rebuilt for every frame.
"""

from dataclasses import dataclass
from typing import Optional

from utils.animation import KeyframeSet, interpolate
from utils.errors import ConfigurationError
from utils.spring import SMOOTH, SNAPPY, spring
from utils.timing import DEFAULT_FPS, revealed_chars

# A view with opacity above this receives pointer interaction. Keeps the
# handoff away from the exact midpoint of a cross-fade.
INTERACTIVE_OPACITY_THRESHOLD = 0.1

# Click ripple and caret blink both run on a 16-frame cycle
BLINK_CYCLE = 16

FADE_DISTANCE = 8
SLIDE_DISTANCE = 40

# Frames the smooth preset needs to come to rest in the demo scenes
SMOOTH_SETTLE_FRAMES = 23

SLIDE_OFFSETS = {
    "left": (-SLIDE_DISTANCE, 0),
    "right": (SLIDE_DISTANCE, 0),
    "up": (0, -SLIDE_DISTANCE),
    "down": (0, SLIDE_DISTANCE),
}


@dataclass(frozen=True)
class VisualState:
    """Base class for every per-frame state snapshot."""


@dataclass(frozen=True)
class Entrance(VisualState):
    """Opacity and transform of an element animating into view."""
    opacity: float = 1.0
    translate_x: float = 0.0
    translate_y: float = 0.0
    scale: float = 1.0


@dataclass(frozen=True)
class CursorState(VisualState):
    """Mouse cursor overlay."""
    x: float = 0.0
    y: float = 0.0
    visible: bool = False
    clicking: bool = False
    ripple_radius: float = 0.0
    ripple_opacity: float = 0.0


@dataclass(frozen=True)
class TypedField(VisualState):
    """A text field being typed into."""
    value: str = ""
    chars: int = 0
    complete: bool = False
    caret_visible: bool = False
    caret_opacity: float = 0.0


@dataclass(frozen=True)
class CrossFade(VisualState):
    """Opacities and interaction priority of two views trading places."""
    outgoing_opacity: float = 1.0
    incoming_opacity: float = 0.0
    outgoing_interactive: bool = True
    incoming_interactive: bool = False


# ─── ENTRANCES ───────────────────────────────────────────────────

def fade_in(frame, start_frame=0, duration_frames=15, direction="up"):
    """
    Linear fade with an optional 8px vertical drift.

    direction="up" rises into place, "down" drops into place,
    "none" only fades.
    """
    window = [start_frame, start_frame + duration_frames]
    opacity = interpolate(frame, window, [0, 1])

    if direction == "up":
        translate_y = interpolate(frame, window, [FADE_DISTANCE, 0])
    elif direction == "down":
        translate_y = interpolate(frame, window, [-FADE_DISTANCE, 0])
    elif direction == "none":
        translate_y = 0.0
    else:
        raise ConfigurationError(f"Unknown fade direction '{direction}'")

    return Entrance(opacity=opacity, translate_y=translate_y)


def scale_in(frame, fps=DEFAULT_FPS, start_frame=0, config=SNAPPY):
    """Spring pop from 50% to 100% scale while fading in. Only the scale overshoots."""
    progress = spring(frame, fps, config, delay=start_frame)
    return Entrance(
        opacity=max(0.0, min(1.0, progress)),
        scale=interpolate(progress, [0, 1], [0.5, 1],
                          extrapolate_right="extend"),
    )


def slide_in(frame, fps=DEFAULT_FPS, start_frame=0, direction="left", config=SMOOTH,
             duration_in_frames=None):
    """
    Spring slide from 40px off-axis while fading in.

    `duration_in_frames` makes the spring settle in exactly that many frames.
    """
    try:
        dx, dy = SLIDE_OFFSETS[direction]
    except KeyError:
        raise ConfigurationError(f"Unknown slide direction '{direction}'") from None

    progress = spring(frame, fps, config, delay=start_frame,
                      duration_in_frames=duration_in_frames)
    return Entrance(
        opacity=max(0.0, min(1.0, progress)),
        translate_x=interpolate(progress, [0, 1], [dx, 0], extrapolate_right="extend"),
        translate_y=interpolate(progress, [0, 1], [dy, 0], extrapolate_right="extend"),
    )


# ─── CURSOR ──────────────────────────────────────────────────────

class Waypoints:
    """
    Named cursor stops, each at a frame, evaluated as two keyframe curves.

    Args:
        stops: Sequence of (name, frame, x, y), frames non-decreasing

    Raises:
        ConfigurationError: stops out of order or fewer than two
    """

    def __init__(self, stops):
        self.stops = tuple(stops)
        frames = [s[1] for s in self.stops]
        self._x = KeyframeSet(frames, [s[2] for s in self.stops])
        self._y = KeyframeSet(frames, [s[3] for s in self.stops])

    def position(self, frame):
        return self._x.at(frame), self._y.at(frame)

    def frame_of(self, name):
        for stop_name, frame, _x, _y in self.stops:
            if stop_name == name:
                return frame
        raise KeyError(name)


def ripple(frame, clicking):
    """Click ripple radius and opacity; zero while not clicking."""
    if not clicking:
        return 0.0, 0.0
    phase = frame % BLINK_CYCLE
    return (
        interpolate(phase, [0, 8], [0, 20]),
        interpolate(phase, [0, 8], [0.5, 0]),
    )


def cursor(frame, waypoints: Optional[Waypoints], visible, clicking=False):
    """Cursor state at `frame` following `waypoints`."""
    if waypoints is None or not visible:
        return CursorState()
    x, y = waypoints.position(frame)
    radius, opacity = ripple(frame, clicking)
    return CursorState(
        x=x, y=y, visible=True, clicking=clicking,
        ripple_radius=radius, ripple_opacity=opacity,
    )


# ─── TEXT ────────────────────────────────────────────────────────

def caret_opacity(frame):
    """Blinking caret: on for 4 frames, fades off, back on every 16."""
    return interpolate(frame % BLINK_CYCLE, [0, 4, 8, 12, 16], [1, 1, 0, 0, 1])


def typed_field(frame, text, start_frame, frames_per_char=2, show_caret=True):
    """
    Typewriter state for `text`.

    The caret keeps blinking for 10 frames after the last character,
    then disappears.
    """
    chars = revealed_chars(frame, text, frames_per_char, start_frame)
    complete = chars >= len(text)
    finish_frame = start_frame + len(text) * frames_per_char
    caret = show_caret and frame >= start_frame and not (
        complete and frame - finish_frame > 10
    )
    return TypedField(
        value=text[:chars],
        chars=chars,
        complete=complete,
        caret_visible=caret,
        caret_opacity=caret_opacity(frame) if caret else 0.0,
    )


# ─── CROSS-FADE ──────────────────────────────────────────────────

def cross_fade(frame, start, end, threshold=INTERACTIVE_OPACITY_THRESHOLD):
    """
    Swap two views over the window [start, end].

    The outgoing view ramps 1 -> 0 while the incoming one ramps 0 -> 1.
    Only one view is interactive at a time: the more opaque one, and only
    once its opacity is above `threshold`. On an exact tie the outgoing
    view keeps priority.
    """
    outgoing = interpolate(frame, [start, end], [1, 0])
    incoming = interpolate(frame, [start, end], [0, 1])
    return CrossFade(
        outgoing_opacity=outgoing,
        incoming_opacity=incoming,
        outgoing_interactive=outgoing >= incoming and outgoing > threshold,
        incoming_interactive=incoming > outgoing and incoming > threshold,
    )
