"""
Director — turns a Storyboard into a ready-to-sample Timeline.

The Director:
  1. Picks the storyboard (built-in template or one loaded from a dict)
  2. Resolves every scene id against the scene registry
  3. Builds Segments and Transitions from the config
  4. Validates the whole composition before any frame is sampled
"""

from functools import partial

from brain.storyboard import Storyboard, TimingType
from brain.templates import get_storyboard
from composer.timeline import Segment, Timeline, linear_timing, spring_timing
from scenes.registry import get_scene
from scenes.state import INTERACTIVE_OPACITY_THRESHOLD
from utils.animation import get_easing
from utils.errors import ConfigurationError
from utils.spring import load_spring_presets


class Director:
    """
    Builds timelines for the CLI and the exporter.

    Usage:
        director = Director(config)
        storyboard = director.create_storyboard("full_tour")
        timeline = director.build_timeline(storyboard)
    """

    def __init__(self, config=None):
        self.config = config or {}
        self.springs = load_spring_presets(self.config)
        self.threshold = self.config.get("interaction", {}).get(
            "opacity_threshold", INTERACTIVE_OPACITY_THRESHOLD
        )

    def create_storyboard(self, composition_id):
        """Built-in storyboard for `composition_id` (see brain.templates)."""
        return get_storyboard(composition_id, self.config)

    def load_storyboard(self, data):
        """Storyboard from a plain dict, e.g. a YAML document."""
        return Storyboard.from_dict(data)

    def build_timeline(self, storyboard):
        """
        Build the Timeline for a storyboard.

        Args:
            storyboard: Storyboard with at least one scene

        Returns:
            Timeline

        Raises:
            ConfigurationError: unknown scene, easing or spring preset, or
                an invalid composition
        """
        if not storyboard.scenes:
            raise ConfigurationError(
                f"Storyboard '{storyboard.composition_id}' has no scenes"
            )

        items = []
        for position, entry in enumerate(storyboard.scenes):
            info = get_scene(entry.scene_id)
            if position:
                items.append(self._transition(entry))

            scene_fn = partial(info.state_fn, fps=storyboard.fps)
            if info.cross_fades:
                scene_fn = partial(scene_fn, threshold=self.threshold)

            items.append(Segment(
                duration_in_frames=info.duration if entry.duration is None else entry.duration,
                scene=scene_fn,
                name=entry.scene_id,
            ))

        timeline = Timeline(items, fps=storyboard.fps, name=storyboard.composition_id)
        print(f"   [Director] {storyboard.composition_id}: {len(storyboard.scenes)} scene(s), "
              f"{timeline.duration_in_frames} frames @ {storyboard.fps}fps")
        return timeline

    def _transition(self, entry):
        easing = get_easing(entry.easing)
        if entry.timing != TimingType.SPRING:
            return linear_timing(entry.transition_duration, entry.transition_in, easing)

        try:
            config = self.springs[entry.spring]
        except KeyError:
            raise ConfigurationError(
                f"Unknown spring preset '{entry.spring}', "
                f"expected one of {sorted(self.springs)}"
            ) from None
        return spring_timing(entry.transition_duration, config, entry.transition_in)
