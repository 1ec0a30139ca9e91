"""
Scene 4 — Dashboard and inbox.

Timeline (150 frames @ 30fps):
  Phase 1  (0-29)     Dashboard with the domain list, unread badge bumps
  Phase 2  (30-54)    Hover and click on "mycoolproject.com"
  Phase 3  (55-89)    Transition to domain detail, messages fade in
  Phase 4  (90-114)   Cursor moves to "Mark Read" on the first message
  Phase 5  (115-149)  First message changes from unread to read
"""

from dataclasses import dataclass

from scenes.state import (
    INTERACTIVE_OPACITY_THRESHOLD, CursorState, Entrance, VisualState,
    Waypoints, cursor, fade_in,
)
from utils.animation import interpolate
from utils.spring import SNAPPY, spring
from utils.timing import DEFAULT_FPS, in_range

DURATION = 150

BADGE_BOUNCE_FRAME = 12
UNREAD_INCREMENT_FRAME = 15

CURSOR_APPEAR = 30
ROW_HOVER_START = 35
ROW_CLICK = 45
ROW_CLICK_END = 49

DASHBOARD_FADE_START = 55
DASHBOARD_FADE_END = 62
DETAIL_FADE_START = 63
DETAIL_FADE_END = 70
MESSAGE_FADES = (65, 70, 75)
MESSAGE_FADE_FRAMES = 8

MARK_CURSOR_APPEAR = 90
MARK_CURSOR_HOVER = 96
MARK_CURSOR_CLICK = 100
MARK_CURSOR_CLICK_END = 104

STATE_CHANGE_START = 115
STATE_CHANGE_END = 125

DASHBOARD_URL = "deaddrop.io"
DETAIL_URL = "deaddrop.io/domains/mycoolproject.com"

ROW_PATH = Waypoints([
    ("enter", CURSOR_APPEAR, 700, 250),
    ("row", ROW_HOVER_START, 500, 290),
    ("click", ROW_CLICK, 500, 290),
])

MARK_PATH = Waypoints([
    ("enter", MARK_CURSOR_APPEAR, 600, 250),
    ("mark_read", MARK_CURSOR_HOVER, 330, 390),
    ("click", MARK_CURSOR_CLICK, 330, 390),
])


@dataclass(frozen=True)
class DashboardState(VisualState):
    browser_url: str
    dashboard_opacity: float
    dashboard_entrance: Entrance
    dashboard_interactive: bool
    unread_count: int
    badge_scale: float
    row_hovered: bool
    detail_opacity: float
    detail_interactive: bool
    messages: tuple
    first_message_read: bool
    unread_marker_opacity: float
    cursor: CursorState


def scene_state(frame, fps=DEFAULT_FPS, threshold=INTERACTIVE_OPACITY_THRESHOLD):
    bump = spring(frame, fps, SNAPPY, delay=BADGE_BOUNCE_FRAME)
    detail_opacity = interpolate(frame, [DETAIL_FADE_START, DETAIL_FADE_END], [0, 1])

    row_visible = in_range(frame, CURSOR_APPEAR, DASHBOARD_FADE_START)
    if row_visible:
        pointer = cursor(frame, ROW_PATH, True, in_range(frame, ROW_CLICK, ROW_CLICK_END))
    else:
        pointer = cursor(
            frame, MARK_PATH,
            MARK_CURSOR_APPEAR <= frame <= MARK_CURSOR_CLICK_END,
            in_range(frame, MARK_CURSOR_CLICK, MARK_CURSOR_CLICK_END),
        )

    return DashboardState(
        browser_url=DASHBOARD_URL if frame < DASHBOARD_FADE_END else DETAIL_URL,
        dashboard_opacity=interpolate(frame, [DASHBOARD_FADE_START, DASHBOARD_FADE_END], [1, 0]),
        dashboard_entrance=fade_in(frame, 0, 12),
        dashboard_interactive=frame < DASHBOARD_FADE_END,
        unread_count=2 if frame < UNREAD_INCREMENT_FRAME else 3,
        badge_scale=interpolate(bump, [0, 0.5, 1], [1, 1.15, 1],
                                extrapolate_left="extend", extrapolate_right="extend"),
        row_hovered=in_range(frame, ROW_HOVER_START, DASHBOARD_FADE_START),
        detail_opacity=detail_opacity,
        detail_interactive=frame >= DASHBOARD_FADE_END and detail_opacity > threshold,
        messages=tuple(fade_in(frame, start, MESSAGE_FADE_FRAMES) for start in MESSAGE_FADES),
        first_message_read=frame >= STATE_CHANGE_END,
        unread_marker_opacity=interpolate(frame, [STATE_CHANGE_START, STATE_CHANGE_END], [1, 0]),
        cursor=pointer,
    )
