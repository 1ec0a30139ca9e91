"""
Scene 1 — Register a domain.

Timeline (135 frames @ 30fps):
  Phase 1  (0-14)    Form appears with a fade
  Phase 2  (15-56)   Cursor arrives, user types "mycoolproject.com"
  Phase 3  (57-74)   Cursor moves to the button, hovers, clicks
  Phase 4  (75-89)   Form fades out, URL changes, detail page fades in
  Phase 5  (90-119)  Domain detail with flash message + verification panel
  Phase 6  (120-134) Static hold
"""

from dataclasses import dataclass

from scenes.state import (
    SMOOTH_SETTLE_FRAMES, CursorState, Entrance, TypedField, VisualState, Waypoints,
    cursor, fade_in, typed_field,
)
from utils.animation import interpolate
from utils.spring import SMOOTH, spring
from utils.timing import DEFAULT_FPS, in_range

DURATION = 135

DOMAIN = "mycoolproject.com"
TYPING_START = 17
FRAMES_PER_CHAR = 2

FORM_FADE_START = 0
FORM_FADE_FRAMES = 14
CURSOR_APPEAR = 15
CURSOR_MOVE_TO_BTN = 57
BTN_HOVER_START = 62
BTN_CLICK_START = 68
BTN_CLICK_END = 72
PAGE_TRANSITION_START = 75
PAGE_TRANSITION_END = 82
DETAIL_FADE_START = 90

FORM_URL = "deaddrop.io/domains/new"
DETAIL_URL = "deaddrop.io/domains/mycoolproject.com"

CURSOR_PATH = Waypoints([
    ("input", CURSOR_APPEAR, 420, 380),
    ("leave_input", CURSOR_MOVE_TO_BTN, 420, 380),
    ("button", CURSOR_MOVE_TO_BTN + 6, 450, 478),
])


@dataclass(frozen=True)
class RegisterDomainState(VisualState):
    browser_url: str
    form_opacity: float
    form_entrance: Entrance
    form_interactive: bool
    domain_input: TypedField
    input_focused: bool
    button_hovered: bool
    detail_opacity: float
    detail_translate_y: float
    detail_interactive: bool
    cursor: CursorState


def scene_state(frame, fps=DEFAULT_FPS):
    clicking = BTN_CLICK_START <= frame <= BTN_CLICK_END
    cursor_visible = in_range(frame, CURSOR_APPEAR, PAGE_TRANSITION_START)

    detail_slide = spring(frame, fps, SMOOTH, delay=DETAIL_FADE_START,
                          duration_in_frames=SMOOTH_SETTLE_FRAMES)

    return RegisterDomainState(
        browser_url=FORM_URL if frame < PAGE_TRANSITION_END else DETAIL_URL,
        form_opacity=interpolate(frame, [PAGE_TRANSITION_START, PAGE_TRANSITION_END], [1, 0]),
        form_entrance=fade_in(frame, FORM_FADE_START, FORM_FADE_FRAMES),
        form_interactive=frame < PAGE_TRANSITION_END,
        domain_input=typed_field(frame, DOMAIN, TYPING_START, FRAMES_PER_CHAR,
                                 show_caret=cursor_visible),
        input_focused=cursor_visible,
        button_hovered=in_range(frame, BTN_HOVER_START, PAGE_TRANSITION_START),
        detail_opacity=interpolate(frame, [DETAIL_FADE_START - 8, DETAIL_FADE_START], [0, 1]),
        detail_translate_y=interpolate(detail_slide, [0, 1], [12, 0],
                                       extrapolate_right="extend"),
        detail_interactive=frame >= DETAIL_FADE_START,
        cursor=cursor(frame, CURSOR_PATH, cursor_visible, clicking),
    )
