"""
Scene 2 — DNS verification.

Timeline (165 frames @ 30fps):
  Phase 1  (0-29)    Domain detail page shown, cursor copies the TXT record
  Phase 2  (30-44)   Crossfade to the DNS provider panel
  Phase 3  (45-104)  New TXT row slides in, record value is typed
  Phase 4  (105-114) Cursor clicks Save
  Phase 5  (115-139) Crossfade back, cursor clicks CHECK VERIFICATION
  Phase 6  (140-164) Verification success: badge bounce, panel turns green
"""

from dataclasses import dataclass

from scenes.state import (
    INTERACTIVE_OPACITY_THRESHOLD, CursorState, Entrance, VisualState,
    Waypoints, cross_fade, cursor, scale_in,
)
from utils.colors import interpolate_color, rgb_to_css
from utils.spring import BOUNCY, SNAPPY
from utils.timing import DEFAULT_FPS, in_range, typed_text, typing_end

DURATION = 165

TXT_VALUE = "deaddrop-verify=a9c55678-1234-5678-abcd-ef0123456789"

CURSOR_APPEAR = 10
COPIED_APPEAR = 20
CROSSFADE_TO_DNS_START = 30
CROSSFADE_TO_DNS_END = 44
NEW_ROW_APPEAR = 48
DNS_TYPING_START = 52
DNS_TYPING_FPC = 1
DNS_TYPING_END = typing_end(TXT_VALUE, DNS_TYPING_FPC, DNS_TYPING_START)
SAVE_MOVE_START = 105
SAVE_CLICK_START = 108
SAVE_CLICK_END = 112
CROSSFADE_BACK_START = 115
CROSSFADE_BACK_END = 124
CHECK_MOVE_START = 125
CHECK_CLICK_START = 130
CHECK_CLICK_END = 134
VERIFY_SUCCESS_START = 140
BORDER_BLEND_FRAMES = 10

DEADDROP_URL = "deaddrop.io/domains/mycoolproject.com"
DNS_URL = "dash.cloudflare.com/dns/mycoolproject.com"

PENDING_BORDER = "#eab308"
VERIFIED_BORDER = "#22c55e"

CURSOR_PATH = Waypoints([
    ("enter", CURSOR_APPEAR, 500, 350),
    ("code_block", 20, 460, 420),
    ("dns_content", CROSSFADE_TO_DNS_END, 580, 340),
    ("typing_done", DNS_TYPING_END, 580, 340),
    ("to_save", SAVE_MOVE_START, 780, 560),
    ("save", SAVE_MOVE_START + 3, 780, 560),
    ("back_on_deaddrop", CROSSFADE_BACK_END, 340, 530),
    ("to_check", CHECK_MOVE_START, 340, 530),
    ("check", CHECK_MOVE_START + 4, 340, 530),
])


@dataclass(frozen=True)
class DnsRecord:
    type: str
    name: str
    content: str
    is_new: bool = False


EXISTING_RECORDS = (
    DnsRecord("A", "mycoolproject.com", "76.76.21.21"),
    DnsRecord("CNAME", "www", "mycoolproject.com"),
)


@dataclass(frozen=True)
class DnsVerificationState(VisualState):
    browser_url: str
    deaddrop_opacity: float
    deaddrop_interactive: bool
    dns_opacity: float
    dns_interactive: bool
    dns_records: tuple
    copied_visible: bool
    copied: Entrance
    verified: bool
    badge: Entrance
    badge_text: str
    panel_title: str
    panel_border: tuple
    panel_border_css: str
    check_hovered: bool
    cursor: CursorState


def scene_state(frame, fps=DEFAULT_FPS, threshold=INTERACTIVE_OPACITY_THRESHOLD):
    # Two swaps: DeadDrop -> DNS panel, then DNS panel -> DeadDrop
    to_dns = cross_fade(frame, CROSSFADE_TO_DNS_START, CROSSFADE_TO_DNS_END, threshold)
    back = cross_fade(frame, CROSSFADE_BACK_START, CROSSFADE_BACK_END, threshold)
    if frame < CROSSFADE_BACK_START:
        deaddrop_opacity, deaddrop_interactive = to_dns.outgoing_opacity, to_dns.outgoing_interactive
        dns_opacity, dns_interactive = to_dns.incoming_opacity, to_dns.incoming_interactive
    else:
        deaddrop_opacity, deaddrop_interactive = back.incoming_opacity, back.incoming_interactive
        dns_opacity, dns_interactive = back.outgoing_opacity, back.outgoing_interactive

    records = EXISTING_RECORDS
    if frame >= NEW_ROW_APPEAR:
        content = typed_text(frame, TXT_VALUE, DNS_TYPING_FPC, DNS_TYPING_START)
        records += (DnsRecord("TXT", "mycoolproject.com", content, is_new=True),)

    verified = frame >= VERIFY_SUCCESS_START
    border = interpolate_color(
        frame,
        [VERIFY_SUCCESS_START, VERIFY_SUCCESS_START + BORDER_BLEND_FRAMES],
        [PENDING_BORDER, VERIFIED_BORDER],
    )

    clicking = (SAVE_CLICK_START <= frame <= SAVE_CLICK_END
                or CHECK_CLICK_START <= frame <= CHECK_CLICK_END)
    cursor_visible = in_range(frame, CURSOR_APPEAR, VERIFY_SUCCESS_START)
    copied_visible = in_range(frame, COPIED_APPEAR, CROSSFADE_TO_DNS_START)

    return DnsVerificationState(
        browser_url=DNS_URL if in_range(frame, CROSSFADE_TO_DNS_START, CROSSFADE_BACK_END)
        else DEADDROP_URL,
        deaddrop_opacity=deaddrop_opacity,
        deaddrop_interactive=deaddrop_interactive,
        dns_opacity=dns_opacity,
        dns_interactive=dns_interactive,
        dns_records=records,
        copied_visible=copied_visible,
        copied=scale_in(frame, fps, COPIED_APPEAR, SNAPPY) if copied_visible else Entrance(opacity=0.0),
        verified=verified,
        badge=scale_in(frame, fps, VERIFY_SUCCESS_START, BOUNCY) if verified else Entrance(),
        badge_text="Verified" if verified else "Unverified",
        panel_title="Widget Embed Code" if verified else "DNS Verification Required",
        panel_border=border,
        panel_border_css=rgb_to_css(border),
        check_hovered=in_range(frame, CHECK_MOVE_START, VERIFY_SUCCESS_START),
        cursor=cursor(frame, CURSOR_PATH, cursor_visible, clicking),
    )
