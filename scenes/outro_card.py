"""
Outro card — closing call to action.

Timeline (60 frames @ 30fps):
  Frame  0-12  Diamond logo and tagline fade in
  Frame 15-25  URL fades in
  Frame 25-35  Footer text fades in
  Frame 35-60  Hold
"""

from dataclasses import dataclass

from scenes.state import Entrance, VisualState, fade_in
from utils.timing import DEFAULT_FPS

DURATION = 60

TAGLINE = "Your website. Their messages. Your inbox."
URL = "deaddrop.io"
FOOTER = "Open Source · Self-Hosted · Privacy-First"


@dataclass(frozen=True)
class OutroCardState(VisualState):
    logo: Entrance
    tagline: Entrance
    url: Entrance
    footer: Entrance
    tagline_text: str = TAGLINE
    url_text: str = URL
    footer_text: str = FOOTER
    background: str = "#0a0a0a"


def scene_state(frame, fps=DEFAULT_FPS):
    return OutroCardState(
        logo=fade_in(frame, 0, 12, "none"),
        tagline=fade_in(frame, 0, 12, "up"),
        url=fade_in(frame, 15, 10, "up"),
        footer=fade_in(frame, 25, 10, "none"),
    )
