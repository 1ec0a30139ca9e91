"""
Tests for transition effects.
"""

import pytest

from brain.storyboard import TransitionType
from composer.effects import FULL, HIDDEN, LayerEffect, TransitionEngine, combine
from utils.errors import ConfigurationError


@pytest.fixture
def engine():
    return TransitionEngine()


class TestTransitionEngine:

    @pytest.mark.parametrize("progress", [0.0, 0.2, 0.5, 0.9, 1.0])
    def test_crossfade(self, engine, progress):
        outgoing, incoming = engine.apply_transition(TransitionType.CROSSFADE, progress)
        assert outgoing.opacity + incoming.opacity == pytest.approx(1.0)
        assert incoming.opacity == pytest.approx(progress)

    def test_fade_black(self, engine):
        outgoing, incoming = engine.apply_transition(TransitionType.FADE_BLACK, 0.25)
        assert (outgoing.opacity, incoming.opacity) == pytest.approx((0.5, 0.0))
        outgoing, incoming = engine.apply_transition(TransitionType.FADE_BLACK, 0.75)
        assert (outgoing.opacity, incoming.opacity) == pytest.approx((0.0, 0.5))

    def test_cut(self, engine):
        assert engine.apply_transition(TransitionType.CUT, 0.49) == (FULL, HIDDEN)
        assert engine.apply_transition(TransitionType.CUT, 0.5) == (HIDDEN, FULL)

    def test_slide_right(self, engine):
        outgoing, incoming = engine.apply_transition(TransitionType.SLIDE_RIGHT, 0.0)
        assert incoming.offset_x == pytest.approx(-1.0)
        outgoing, incoming = engine.apply_transition(TransitionType.SLIDE_RIGHT, 1.0)
        assert outgoing.offset_x == pytest.approx(1.0)
        assert incoming.offset_x == pytest.approx(0.0)

    def test_zoom_in(self, engine):
        outgoing, incoming = engine.apply_transition(TransitionType.ZOOM_IN, 0.0)
        assert outgoing == FULL
        assert incoming.scale == pytest.approx(0.3)
        assert incoming.opacity == 0.0
        _, incoming = engine.apply_transition(TransitionType.ZOOM_IN, 1.0)
        assert incoming.opacity == 1.0
        assert incoming.scale == pytest.approx(1.0)

    def test_zoom_out(self, engine):
        _, incoming = engine.apply_transition(TransitionType.ZOOM_OUT, 0.0)
        assert incoming.scale == pytest.approx(1.5)
        _, incoming = engine.apply_transition(TransitionType.ZOOM_OUT, 1.0)
        assert incoming.scale == pytest.approx(1.0)

    def test_unknown_type(self, engine):
        with pytest.raises(ConfigurationError):
            engine.apply_transition("wipe", 0.5)


class TestCombine:

    def test_multiplies_and_adds(self):
        result = combine(LayerEffect(opacity=0.5, offset_x=0.25, scale=2.0),
                         LayerEffect(opacity=0.5, offset_x=-0.5, offset_y=0.1, scale=0.5))
        assert result == LayerEffect(opacity=0.25, offset_x=-0.25, offset_y=0.1, scale=1.0)

    def test_full_is_identity(self):
        effect = LayerEffect(opacity=0.3, offset_y=0.2)
        assert combine(FULL, effect) == effect
