"""
Storyboard data model — the authored plan for a composition.

A Storyboard contains a sequence of SceneEntries, each describing:
- Which registered scene to show
- How many frames it runs for
- How to transition in from the previous scene

The director turns a Storyboard into a Timeline; nothing here is
evaluated per frame.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from utils.errors import ConfigurationError


class TransitionType(Enum):
    """Transition effects between scenes."""
    CUT = "cut"
    CROSSFADE = "crossfade"
    FADE_BLACK = "fade_black"
    SLIDE_LEFT = "slide_left"
    SLIDE_RIGHT = "slide_right"
    ZOOM_IN = "zoom_in"
    ZOOM_OUT = "zoom_out"


class TimingType(Enum):
    """How transition progress advances over its window."""
    LINEAR = "linear"
    SPRING = "spring"


@dataclass
class SceneEntry:
    """
    A single scene in the storyboard.

    Attributes:
        scene_id: Key in the scene registry (e.g. "dns_verification")
        duration: Length in frames. None = the scene's own duration.
        transition_in: Transition from the previous scene (ignored for the first)
        transition_duration: Overlap with the previous scene, in frames
        timing: Linear or spring-driven transition progress
        easing: Easing name applied to linear timing (see utils.animation.EASINGS)
        spring: Spring preset name used by spring timing
        scene_index: Position in storyboard (set automatically)
    """
    scene_id: str
    duration: Optional[int] = None
    transition_in: TransitionType = TransitionType.CROSSFADE
    transition_duration: int = 15
    timing: TimingType = TimingType.LINEAR
    easing: str = "linear"
    spring: str = "smooth"
    scene_index: int = 0


@dataclass
class Storyboard:
    """
    Complete composition storyboard.

    Created from templates or config, consumed by the Director.
    """
    composition_id: str
    title: str = ""
    fps: int = 30
    width: int = 1920
    height: int = 1080
    scenes: list[SceneEntry] = field(default_factory=list)

    def add_scene(self, scene: SceneEntry) -> None:
        """Add a scene and update its index."""
        scene.scene_index = len(self.scenes)
        self.scenes.append(scene)

    def get_scene_ids(self) -> list[str]:
        return [scene.scene_id for scene in self.scenes]

    def to_dict(self) -> dict:
        """Serialize storyboard to dict (for YAML/JSON/logging)."""
        return {
            "composition_id": self.composition_id,
            "title": self.title,
            "fps": self.fps,
            "width": self.width,
            "height": self.height,
            "scenes": [
                {
                    "scene_id": s.scene_id,
                    "duration": s.duration,
                    "transition_in": s.transition_in.value,
                    "transition_duration": s.transition_duration,
                    "timing": s.timing.value,
                    "easing": s.easing,
                    "spring": s.spring,
                }
                for s in self.scenes
            ],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Storyboard":
        """Deserialize storyboard from dict."""
        sb = cls(
            composition_id=data.get("composition_id", ""),
            title=data.get("title", ""),
            fps=data.get("fps", 30),
            width=data.get("width", 1920),
            height=data.get("height", 1080),
        )
        for scene_data in data.get("scenes", []):
            scene = SceneEntry(
                scene_id=scene_data.get("scene_id", ""),
                duration=scene_data.get("duration"),
                transition_in=parse_enum(TransitionType, scene_data.get("transition_in", "crossfade")),
                transition_duration=scene_data.get("transition_duration", 15),
                timing=parse_enum(TimingType, scene_data.get("timing", "linear")),
                easing=scene_data.get("easing", "linear"),
                spring=scene_data.get("spring", "smooth"),
            )
            sb.add_scene(scene)
        return sb


def parse_enum(enum_cls, value):
    """Enum member for a config value, or ConfigurationError listing choices."""
    try:
        return enum_cls(value)
    except ValueError:
        choices = [member.value for member in enum_cls]
        raise ConfigurationError(
            f"Unknown {enum_cls.__name__} '{value}', expected one of {choices}"
        ) from None
