"""
Tests for keyframe interpolation and easing curves.
"""

import pytest

from utils.animation import (
    KeyframeSet, ease_in_out_cubic, ease_out_bounce, ease_out_cubic,
    ease_out_quad, get_easing, interpolate, interpolate_channels, linear,
    smooth_step,
)
from utils.errors import ConfigurationError


class TestInterpolateClamp:
    """Piecewise-linear curve with clamped ends."""

    @pytest.mark.parametrize("frame, expected", [
        (0, 0.0), (10, 1.0), (20, 0.0), (5, 0.5), (15, 0.5), (-5, 0.0), (25, 0.0),
    ])
    def test_triangle_curve(self, frame, expected):
        assert interpolate(frame, [0, 10, 20], [0, 1, 0]) == pytest.approx(expected)

    def test_fractional_input(self):
        """Spring progress values are interpolated the same way as frames."""
        assert interpolate(0.25, [0, 1], [12, 0]) == pytest.approx(9.0)

    def test_descending_values(self):
        assert interpolate(78, [75, 82], [1, 0]) == pytest.approx(4 / 7)


class TestInterpolateExtend:
    """Extrapolation continues the slope of the edge segment."""

    def test_extend_left(self):
        assert interpolate(-5, [0, 10, 20], [0, 1, 0],
                           extrapolate_left="extend") == pytest.approx(-0.5)

    def test_extend_right(self):
        assert interpolate(25, [0, 10, 20], [0, 1, 0],
                           extrapolate_right="extend") == pytest.approx(-0.5)

    def test_policies_are_independent(self):
        curve = KeyframeSet([0, 10], [0, 10], extrapolate_left="clamp",
                            extrapolate_right="extend")
        assert curve.at(-5) == 0.0
        assert curve.at(15) == pytest.approx(15.0)

    def test_extend_on_degenerate_edge_holds_value(self):
        curve = KeyframeSet([0, 0, 10], [0, 5, 10], extrapolate_left="extend")
        assert curve.at(-3) == 0.0


class TestDegenerateSegments:
    """Repeated breakpoints produce a unit step."""

    def test_step_takes_right_hand_value(self):
        curve = KeyframeSet([0, 10, 10, 20], [0, 1, 5, 5])
        assert curve.at(9) == pytest.approx(0.9)
        assert curve.at(10) == pytest.approx(5.0)
        assert curve.at(15) == pytest.approx(5.0)

    def test_all_breakpoints_equal(self):
        curve = KeyframeSet([5, 5], [0, 1])
        assert curve.at(4) == 0.0
        assert curve.at(5) == 1.0
        assert curve.at(6) == 1.0

    def test_repeated_first_breakpoint(self):
        curve = KeyframeSet([0, 0, 10], [5, 7, 9])
        assert curve.at(-1) == 5.0
        assert curve.at(0) == 7.0
        assert curve.at(5) == pytest.approx(8.0)

    def test_repeated_last_breakpoint(self):
        curve = KeyframeSet([0, 10, 10], [0, 1, 3])
        assert curve.at(10) == 3.0
        assert curve.at(11) == 3.0


class TestKeyframeValidation:
    """Invalid keyframe sets fail immediately."""

    def test_non_monotonic_breakpoints(self):
        with pytest.raises(ConfigurationError):
            interpolate(5, [0, 20, 10], [0, 1, 2])

    def test_length_mismatch(self):
        with pytest.raises(ConfigurationError):
            KeyframeSet([0, 10], [0, 1, 2])

    def test_single_breakpoint(self):
        with pytest.raises(ConfigurationError):
            KeyframeSet([0], [1])

    def test_unknown_extrapolation(self):
        with pytest.raises(ConfigurationError):
            KeyframeSet([0, 1], [0, 1], extrapolate_right="wrap")

    def test_configuration_error_is_value_error(self):
        with pytest.raises(ValueError):
            KeyframeSet([3, 1], [0, 1])


class TestKeyframeSet:

    def test_callable_and_frozen(self):
        curve = KeyframeSet([0, 10], [0, 100])
        assert curve(5) == pytest.approx(50.0)
        with pytest.raises(AttributeError):
            curve.values = (1, 2)

    def test_easing_applied_per_segment(self):
        assert interpolate(5, [0, 10], [0, 100], easing=ease_out_quad) == pytest.approx(75.0)

    def test_easing_not_applied_outside_range(self):
        assert interpolate(15, [0, 10], [0, 100], easing=ease_out_quad) == 100.0


class TestInterpolateChannels:
    """Vector values are interpolated channel by channel."""

    def test_position(self):
        assert interpolate_channels(5, [0, 10], [(0, 0), (10, 20)]) == pytest.approx((5.0, 10.0))

    def test_three_channels_with_waypoints(self):
        result = interpolate_channels(15, [0, 10, 20], [(0, 0, 0), (10, 10, 10), (10, 0, 20)])
        assert result == pytest.approx((10.0, 5.0, 15.0))

    def test_mismatched_vectors(self):
        with pytest.raises(ConfigurationError):
            interpolate_channels(0, [0, 1], [(0, 0), (1,)])


class TestEasing:
    """Easing curves map 0 -> 0 and 1 -> 1 and clamp their input."""

    @pytest.mark.parametrize("easing", [
        linear, ease_out_cubic, ease_in_out_cubic, ease_out_quad, ease_out_bounce, smooth_step,
    ])
    def test_endpoints(self, easing):
        assert easing(0.0) == pytest.approx(0.0)
        assert easing(1.0) == pytest.approx(1.0)
        assert easing(-1.0) == pytest.approx(0.0)
        assert easing(2.0) == pytest.approx(1.0)

    def test_lookup_by_name(self):
        assert get_easing("smooth_step") is smooth_step

    def test_unknown_name(self):
        with pytest.raises(ConfigurationError):
            get_easing("elastic")
