"""
Built-in storyboards.

"full_tour" is the complete product demo; every registered scene also gets
a single-scene storyboard under its own id so it can be previewed alone.
Timeline defaults (transition type/duration) come from config.yaml.
"""

from brain.storyboard import (
    SceneEntry, Storyboard, TimingType, TransitionType, parse_enum,
)
from scenes.registry import SCENES, get_scene
from utils.errors import ConfigurationError

FULL_TOUR_SCENES = [
    "title_card",
    "register_domain",
    "dns_verification",
    "embed_widget",
    "dashboard",
    "outro_card",
]

FULL_TOUR = "full_tour"


def _video_settings(config):
    video = config.get("video", {})
    return {
        "fps": video.get("fps", 30),
        "width": video.get("width", 1920),
        "height": video.get("height", 1080),
    }


def full_tour(config=None):
    """
    The whole demo: six scenes joined by fades.

    With the default config: 60 + 135 + 165 + 150 + 150 + 60 = 720 scene
    frames, minus five 15-frame crossfades = 645 frames (21.5s @ 30fps).
    """
    config = config or {}
    timeline_config = config.get("timeline", {})

    sb = Storyboard(
        composition_id=FULL_TOUR,
        title="DeadDrop product tour",
        **_video_settings(config),
    )
    for scene_id in FULL_TOUR_SCENES:
        sb.add_scene(SceneEntry(
            scene_id=scene_id,
            transition_in=parse_enum(TransitionType, timeline_config.get("transition", "crossfade")),
            transition_duration=timeline_config.get("transition_duration", 15),
            timing=parse_enum(TimingType, timeline_config.get("timing", "linear")),
            easing=timeline_config.get("easing", "linear"),
            spring=timeline_config.get("spring", "smooth"),
        ))
    return sb


def single_scene(scene_id, config=None):
    """Storyboard showing one registered scene on its own."""
    info = get_scene(scene_id)
    sb = Storyboard(
        composition_id=scene_id,
        title=scene_id.replace("_", " ").title(),
        **_video_settings(config or {}),
    )
    sb.add_scene(SceneEntry(scene_id=info.scene_id, duration=info.duration))
    return sb


def list_compositions():
    """Ids of every built-in storyboard."""
    return [FULL_TOUR] + list(SCENES)


def get_storyboard(composition_id, config=None):
    """Look up a built-in storyboard by id."""
    if composition_id == FULL_TOUR:
        return full_tour(config)
    if composition_id in SCENES:
        return single_scene(composition_id, config)
    raise ConfigurationError(
        f"Unknown composition '{composition_id}', expected one of {list_compositions()}"
    )
