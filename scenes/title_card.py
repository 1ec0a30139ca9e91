"""
Title card — logo reveal that opens the tour.

Timeline (60 frames @ 30fps):
  Frame  0-10  Diamond logo scales in with bounce
  Frame  8-18  Logo text fades up
  Frame 18-28  Subtitle fades up
  Frame 25-35  Red decorative line appears
  Frame 35-60  Hold on complete state
"""

from dataclasses import dataclass

from scenes.state import Entrance, VisualState, fade_in, scale_in
from utils.spring import BOUNCY
from utils.timing import DEFAULT_FPS

DURATION = 60

LOGO_START = 0
TITLE_START = 8
SUBTITLE_START = 18
DIVIDER_START = 25
FADE_FRAMES = 10

TITLE = "DEADDROP"
SUBTITLE = "Anonymous Contact Widget for Any Website"


@dataclass(frozen=True)
class TitleCardState(VisualState):
    logo: Entrance
    title: Entrance
    subtitle: Entrance
    divider: Entrance
    title_text: str = TITLE
    subtitle_text: str = SUBTITLE
    background: str = "#f5f0e8"


def scene_state(frame, fps=DEFAULT_FPS):
    return TitleCardState(
        logo=scale_in(frame, fps, LOGO_START, BOUNCY),
        title=fade_in(frame, TITLE_START, FADE_FRAMES, "up"),
        subtitle=fade_in(frame, SUBTITLE_START, FADE_FRAMES, "up"),
        divider=fade_in(frame, DIVIDER_START, FADE_FRAMES, "none"),
    )
