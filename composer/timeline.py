"""
Timeline — stitches independently timed scenes into one composition.

Segments run back to back; a Transition between two segments overlaps the
last frames of the first with the first frames of the second, so

    total frames = sum(segment durations) - sum(transition durations)

Sampling a frame is stateless: the timeline finds the active segments by
bisecting precomputed start frames, evaluates each at its own local frame,
and reports the layers bottom to top (outgoing under, incoming over).
"""

from bisect import bisect_right
from dataclasses import dataclass
from typing import Any, Callable, Optional

from brain.storyboard import TransitionType
from composer.effects import FULL, LayerEffect, TransitionEngine, combine
from scenes.state import VisualState
from utils.animation import linear
from utils.errors import ConfigurationError
from utils.spring import SpringConfig, spring
from utils.timing import DEFAULT_FPS


@dataclass(frozen=True)
class Segment:
    """
    A scene placed on the timeline.

    Attributes:
        duration_in_frames: How long the scene runs (> 0)
        scene: Callable mapping a local frame (0-based) to a VisualState
        name: Label used in composed frames and exports
    """
    duration_in_frames: int
    scene: Callable[[int], Any]
    name: str = ""

    def __post_init__(self):
        if self.duration_in_frames <= 0:
            raise ConfigurationError(
                f"Segment '{self.name}' must last at least one frame, "
                f"got {self.duration_in_frames}"
            )


@dataclass(frozen=True)
class Transition:
    """
    Overlap window between two adjacent segments.

    Attributes:
        duration_in_frames: Overlap length (>= 0, 0 = hard cut)
        transition_type: Presentation, see composer.effects
        easing: Blend curve applied to linear progress
        spring_config: If set, progress follows this spring, stretched
            to settle exactly at the end of the window
    """
    duration_in_frames: int
    transition_type: TransitionType = TransitionType.CROSSFADE
    easing: Callable[[float], float] = linear
    spring_config: Optional[SpringConfig] = None

    def __post_init__(self):
        if self.duration_in_frames < 0:
            raise ConfigurationError(
                f"Transition duration must not be negative, got {self.duration_in_frames}"
            )

    def progress(self, offset, fps=DEFAULT_FPS):
        """Blend progress (0..1) `offset` frames into the window."""
        if self.spring_config is not None:
            value = spring(offset, fps, self.spring_config,
                           duration_in_frames=self.duration_in_frames)
        else:
            value = self.easing(offset / self.duration_in_frames)
        return max(0.0, min(1.0, value))


def linear_timing(duration_in_frames, transition_type=TransitionType.CROSSFADE, easing=linear):
    """Transition whose progress grows linearly (optionally eased) over the window."""
    return Transition(duration_in_frames, transition_type, easing=easing)


def spring_timing(duration_in_frames, config, transition_type=TransitionType.CROSSFADE):
    """Transition whose progress follows `config`, settling at the end of the window."""
    return Transition(duration_in_frames, transition_type, spring_config=config)


@dataclass(frozen=True)
class Layer:
    """One segment's contribution to a composed frame."""
    segment_index: int
    name: str
    local_frame: int
    effect: LayerEffect
    state: Any

    @property
    def opacity(self):
        return self.effect.opacity


@dataclass(frozen=True)
class ComposedFrame(VisualState):
    """Everything visible at one global frame, bottom layer first."""
    global_frame: int
    layers: tuple

    @property
    def top(self):
        return self.layers[-1]

    def layer(self, name):
        for layer in self.layers:
            if layer.name == name:
                return layer
        return None


class Timeline:
    """
    Ordered composition of Segments joined by Transitions.

    Args:
        items: Segment, Transition, Segment, ... (must start and end with a
            Segment and alternate)
        fps: Frame rate, used by spring-timed transitions
        name: Composition id

    Raises:
        ConfigurationError: bad ordering, or a transition longer than one
            of its neighbours
    """

    def __init__(self, items, fps=DEFAULT_FPS, name=""):
        if fps <= 0:
            raise ConfigurationError(f"fps must be positive, got {fps}")
        self.fps = fps
        self.name = name
        self.segments, self.transitions = _split_items(list(items))
        self.engine = TransitionEngine()

        for i, transition in enumerate(self.transitions):
            before, after = self.segments[i], self.segments[i + 1]
            if transition.duration_in_frames > min(before.duration_in_frames,
                                                   after.duration_in_frames):
                raise ConfigurationError(
                    f"Transition {i} ({transition.duration_in_frames} frames) is longer "
                    f"than '{before.name}' ({before.duration_in_frames}) or "
                    f"'{after.name}' ({after.duration_in_frames})"
                )

        starts = [0]
        for segment, transition in zip(self.segments, self.transitions):
            starts.append(starts[-1] + segment.duration_in_frames
                          - transition.duration_in_frames)
        self.starts = tuple(starts)
        self.ends = tuple(s + seg.duration_in_frames
                          for s, seg in zip(self.starts, self.segments))

    @classmethod
    def from_parts(cls, segments, transitions, fps=DEFAULT_FPS, name=""):
        """Build from separate lists: n segments and n - 1 transitions."""
        segments = list(segments)
        transitions = list(transitions)
        if len(transitions) != max(0, len(segments) - 1):
            raise ConfigurationError(
                f"{len(segments)} segments need {max(0, len(segments) - 1)} "
                f"transitions, got {len(transitions)}"
            )
        items = []
        for i, segment in enumerate(segments):
            if i:
                items.append(transitions[i - 1])
            items.append(segment)
        return cls(items, fps=fps, name=name)

    @property
    def duration_in_frames(self):
        return (sum(s.duration_in_frames for s in self.segments)
                - sum(t.duration_in_frames for t in self.transitions))

    def __len__(self):
        return self.duration_in_frames

    def clamp_frame(self, frame):
        """Out-of-range frames snap to the first or last frame."""
        return max(0, min(frame, self.duration_in_frames - 1))

    def active_segments(self, frame):
        """Indices of the segments visible at `frame`, bottom first."""
        frame = self.clamp_frame(frame)
        last = bisect_right(self.starts, frame) - 1
        first = last
        # Segment ends never decrease, so the active ones are contiguous
        while first > 0 and self.ends[first - 1] > frame:
            first -= 1
        return list(range(first, last + 1))

    def frame_at(self, frame):
        """
        Compose the frame.

        Args:
            frame: Global frame; values outside [0, duration) are clamped

        Returns:
            ComposedFrame with one Layer per active segment
        """
        frame = self.clamp_frame(frame)
        layers = []
        for i in self.active_segments(frame):
            segment = self.segments[i]
            local = frame - self.starts[i]
            layers.append(Layer(
                segment_index=i,
                name=segment.name,
                local_frame=local,
                effect=self._effect_for(i, frame),
                state=segment.scene(local),
            ))
        return ComposedFrame(global_frame=frame, layers=tuple(layers))

    __call__ = frame_at

    def _effect_for(self, index, frame):
        effect = FULL

        # Entering: inside the transition from the previous segment
        if index > 0:
            incoming = self.transitions[index - 1]
            offset = frame - self.starts[index]
            if offset < incoming.duration_in_frames:
                _, entering = self.engine.apply_transition(
                    incoming.transition_type, incoming.progress(offset, self.fps)
                )
                effect = combine(effect, entering)

        # Leaving: inside the transition to the next segment
        if index < len(self.transitions):
            outgoing = self.transitions[index]
            offset = frame - self.starts[index + 1]
            if 0 <= offset < outgoing.duration_in_frames:
                leaving, _ = self.engine.apply_transition(
                    outgoing.transition_type, outgoing.progress(offset, self.fps)
                )
                effect = combine(effect, leaving)

        return effect

    def as_segment(self, name=None):
        """Wrap this timeline so it can be nested inside another one."""
        return Segment(self.duration_in_frames, self, name or self.name)


def _split_items(items):
    if not items:
        raise ConfigurationError("A timeline needs at least one segment")

    segments, transitions = [], []
    for position, item in enumerate(items):
        expected = Segment if position % 2 == 0 else Transition
        if not isinstance(item, expected):
            raise ConfigurationError(
                f"Timeline item {position} should be a {expected.__name__}, "
                f"got {type(item).__name__}"
            )
        (segments if expected is Segment else transitions).append(item)

    if len(items) % 2 == 0:
        raise ConfigurationError("A timeline must end with a segment, not a transition")
    return segments, transitions
