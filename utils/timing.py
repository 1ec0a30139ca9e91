"""
Frame timing helpers — second/frame conversion, typed text, phase ranges.
"""

import math

DEFAULT_FPS = 30


def sec(seconds, fps=DEFAULT_FPS):
    """Seconds to the nearest whole frame."""
    return int(round(seconds * fps))


def ms(milliseconds, fps=DEFAULT_FPS):
    """Milliseconds to the nearest whole frame."""
    return int(round(milliseconds / 1000 * fps))


def char_frames(text, frames_per_char=2):
    """Frames needed to type out `text` completely."""
    return len(text) * frames_per_char


def revealed_chars(frame, text, frames_per_char=2, start_frame=0):
    """
    Number of characters of `text` visible at `frame`.

    Zero before `start_frame`, then one more character every
    `frames_per_char` frames until the whole text is shown.
    """
    if frame < start_frame:
        return 0
    typed = math.floor((frame - start_frame) / frames_per_char)
    return max(0, min(len(text), typed))


def typed_text(frame, text, frames_per_char=2, start_frame=0):
    """The visible prefix of `text` at `frame`."""
    return text[:revealed_chars(frame, text, frames_per_char, start_frame)]


def typing_end(text, frames_per_char=2, start_frame=0):
    """First frame at which the full text is visible."""
    return start_frame + char_frames(text, frames_per_char)


def in_range(frame, start, end):
    """Half-open phase test: start <= frame < end."""
    return start <= frame < end
