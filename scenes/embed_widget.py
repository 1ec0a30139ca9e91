"""
Scene 3 — Embed the widget on the user's site.

Timeline (150 frames @ 30fps):
  Phase 1  (0-29)    Embed code panel on the domain detail page
  Phase 2  (30-59)   Crossfade to the user's mock website
  Phase 3  (60-74)   Widget button pops in on the mock site
  Phase 4  (75-124)  Widget panel opens, form fields are filled in
  Phase 5  (125-149) Success state
"""

from dataclasses import dataclass

from scenes.state import (
    INTERACTIVE_OPACITY_THRESHOLD, SMOOTH_SETTLE_FRAMES, CursorState, Entrance, TypedField,
    VisualState, Waypoints, cursor, scale_in, slide_in, typed_field,
)
from utils.animation import interpolate
from utils.spring import SMOOTH, SNAPPY, spring
from utils.timing import DEFAULT_FPS, in_range

DURATION = 150

# Phase 1
CURSOR_APPEAR = 8
CURSOR_CLICK = 16
CURSOR_CLICK_END = 20
COPIED_APPEAR = 22

# Phase 2
CROSSFADE_START = 30
CROSSFADE_END = 38
SITE_FADE_IN_START = 34
SITE_FADE_IN_END = 44
SCRIPT_OVERLAY_APPEAR = 48
SCRIPT_OVERLAY_GONE = 58

# Phase 3
WIDGET_BTN_APPEAR = 60

# Phase 4
WIDGET_CLICK = 75
PANEL_OPEN = 78
NAME_TYPE_START = 82
EMAIL_TYPE_START = 92
MSG_TYPE_START = 104
SEND_CURSOR_MOVE = 122
SEND_CLICK = 124

# Phase 5
SUCCESS_TRANSITION_START = 125
SUCCESS_TRANSITION_END = 130

NAME = "Jane Smith"
EMAIL = "jane@example.com"
MESSAGE = "Love the project! How can I contribute?"

DEADDROP_URL = "deaddrop.io/domains/mycoolproject.com"
SITE_URL = "mycoolproject.com"

COPY_PATH = Waypoints([
    ("enter", CURSOR_APPEAR, 600, 300),
    ("copy_button", CURSOR_CLICK, 480, 440),
])

WIDGET_PATH = Waypoints([
    ("enter", WIDGET_BTN_APPEAR, 700, 500),
    ("approach", WIDGET_CLICK - 2, 830, 720),
    ("widget_button", WIDGET_CLICK, 830, 720),
    ("hold", PANEL_OPEN + 2, 830, 720),
    ("to_send", SEND_CURSOR_MOVE, 790, 620),
    ("send", SEND_CLICK, 790, 620),
])


@dataclass(frozen=True)
class EmbedWidgetState(VisualState):
    browser_url: str
    deaddrop_visible: bool
    deaddrop_opacity: float
    deaddrop_interactive: bool
    site_visible: bool
    site_opacity: float
    site_interactive: bool
    copied_visible: bool
    script_overlay_opacity: float
    script_overlay: Entrance
    widget_button_visible: bool
    widget_button_scale: float
    panel_visible: bool
    panel_open: bool
    panel_opacity: float
    name: TypedField
    email: TypedField
    message: TypedField
    success_visible: bool
    success_opacity: float
    cursor: CursorState


def _field(frame, text, start):
    return typed_field(frame, text, start, 2, show_caret=False)


def scene_state(frame, fps=DEFAULT_FPS, threshold=INTERACTIVE_OPACITY_THRESHOLD):
    deaddrop_opacity = interpolate(frame, [CROSSFADE_START, CROSSFADE_END], [1, 0])
    site_opacity = interpolate(frame, [SITE_FADE_IN_START, SITE_FADE_IN_END], [0, 1])

    widget_progress = spring(frame, fps, SNAPPY, delay=WIDGET_BTN_APPEAR)
    panel_progress = spring(frame, fps, SMOOTH, delay=PANEL_OPEN,
                            duration_in_frames=SMOOTH_SETTLE_FRAMES)

    # Phase 1 cursor wins while it is on screen
    copy_visible = in_range(frame, CURSOR_APPEAR, CROSSFADE_START)
    widget_visible = WIDGET_BTN_APPEAR <= frame <= SEND_CLICK
    if copy_visible:
        pointer = cursor(frame, COPY_PATH, True,
                         in_range(frame, CURSOR_CLICK, CURSOR_CLICK_END))
    else:
        clicking = (in_range(frame, WIDGET_CLICK, WIDGET_CLICK + 4)
                    or SEND_CLICK <= frame <= SEND_CLICK + 3)
        pointer = cursor(frame, WIDGET_PATH, widget_visible, clicking)

    success = frame >= SUCCESS_TRANSITION_START
    success_window = [SUCCESS_TRANSITION_START, SUCCESS_TRANSITION_END]

    return EmbedWidgetState(
        browser_url=DEADDROP_URL if frame < CROSSFADE_END else SITE_URL,
        deaddrop_visible=frame < CROSSFADE_END,
        deaddrop_opacity=deaddrop_opacity,
        deaddrop_interactive=frame < CROSSFADE_END,
        site_visible=frame >= SITE_FADE_IN_START,
        site_opacity=site_opacity,
        site_interactive=frame >= CROSSFADE_END and site_opacity > threshold,
        copied_visible=in_range(frame, COPIED_APPEAR, CROSSFADE_START),
        script_overlay_opacity=interpolate(
            frame,
            [SCRIPT_OVERLAY_APPEAR, SCRIPT_OVERLAY_APPEAR + 4,
             SCRIPT_OVERLAY_GONE - 4, SCRIPT_OVERLAY_GONE],
            [0, 1, 1, 0],
        ),
        script_overlay=slide_in(frame, fps, SCRIPT_OVERLAY_APPEAR, "down",
                                duration_in_frames=SMOOTH_SETTLE_FRAMES),
        widget_button_visible=frame >= WIDGET_BTN_APPEAR,
        widget_button_scale=interpolate(widget_progress, [0, 1], [0, 1],
                                        extrapolate_right="extend"),
        panel_visible=in_range(frame, PANEL_OPEN, SUCCESS_TRANSITION_START),
        panel_open=panel_progress > threshold,
        panel_opacity=interpolate(frame, success_window, [1, 0]) if success else 1.0,
        name=_field(frame, NAME, NAME_TYPE_START),
        email=_field(frame, EMAIL, EMAIL_TYPE_START),
        message=_field(frame, MESSAGE, MSG_TYPE_START),
        success_visible=success,
        success_opacity=interpolate(frame, success_window, [0, 1]),
        cursor=pointer,
    )
