"""
Tests for frame timing helpers and color blending.
"""

import pytest

from utils.colors import hex_to_rgb, interpolate_color, rgb_to_css
from utils.timing import (
    char_frames, in_range, ms, revealed_chars, sec, typed_text, typing_end,
)

DOMAIN = "mysite.com"


class TestConversions:

    def test_sec(self):
        assert sec(2) == 60
        assert sec(0.5, fps=24) == 12

    def test_char_frames(self):
        assert char_frames(DOMAIN) == 20
        assert char_frames(DOMAIN, 1) == 10

    def test_ms(self):
        assert ms(500) == 15


class TestRevealedChars:
    """Typed text grows one character every N frames and stops at the end."""

    def test_zero_before_start(self):
        for frame in range(-5, 17):
            assert revealed_chars(frame, DOMAIN, 2, start_frame=17) == 0

    def test_non_decreasing_and_saturates(self):
        counts = [revealed_chars(f, DOMAIN, 2, 17) for f in range(0, 80)]
        assert counts == sorted(counts)
        assert counts[-1] == len(DOMAIN)
        assert max(counts) == len(DOMAIN)

    def test_floor_per_char(self):
        assert revealed_chars(18, DOMAIN, 2, 17) == 0
        assert revealed_chars(19, DOMAIN, 2, 17) == 1
        assert typed_text(22, DOMAIN, 2, 17) == "my"

    def test_typing_end(self):
        end = typing_end(DOMAIN, 2, 17)
        assert end == 37
        assert typed_text(end - 1, DOMAIN, 2, 17) == DOMAIN[:-1]
        assert typed_text(end, DOMAIN, 2, 17) == DOMAIN

    def test_empty_text(self):
        assert typed_text(100, "", 2, 0) == ""


class TestInRange:
    """Phase windows are half-open."""

    def test_bounds(self):
        assert in_range(20, 20, 25)
        assert in_range(24, 20, 25)
        assert not in_range(25, 20, 25)
        assert not in_range(19, 20, 25)


class TestColors:

    def test_hex_parsing(self):
        assert hex_to_rgb("#eab308") == (234, 179, 8)
        assert hex_to_rgb("22c55e") == (34, 197, 94)

    def test_css(self):
        assert rgb_to_css((1, 2, 3)) == "rgb(1, 2, 3)"

    @pytest.mark.parametrize("frame, expected", [
        (130, (234, 179, 8)),
        (140, (234, 179, 8)),
        (145, (134, 188, 51)),
        (150, (34, 197, 94)),
        (160, (34, 197, 94)),
    ])
    def test_pending_to_verified(self, frame, expected):
        assert interpolate_color(frame, [140, 150], ["#eab308", "#22c55e"]) == expected

    def test_halves_round_up(self):
        assert interpolate_color(0.5, [0, 1], [(0, 0, 0), (1, 3, 5)]) == (1, 2, 3)

    def test_returns_ints(self):
        color = interpolate_color(0.3, [0, 1], ["#000000", "#ffffff"])
        assert all(isinstance(ch, int) for ch in color)
