"""
Tests for storyboards, built-in templates and the director.
"""

import pytest

from brain.director import Director
from brain.storyboard import SceneEntry, Storyboard, TimingType, TransitionType
from brain.templates import FULL_TOUR, FULL_TOUR_SCENES, get_storyboard, list_compositions
from utils.errors import ConfigurationError


@pytest.fixture
def director():
    return Director()


class TestStoryboard:

    def test_add_scene_sets_index(self):
        sb = Storyboard(composition_id="demo")
        sb.add_scene(SceneEntry("title_card"))
        sb.add_scene(SceneEntry("outro_card"))
        assert [s.scene_index for s in sb.scenes] == [0, 1]
        assert sb.get_scene_ids() == ["title_card", "outro_card"]

    def test_dict_round_trip(self):
        sb = Storyboard(composition_id="demo", fps=24)
        sb.add_scene(SceneEntry("title_card", duration=40))
        sb.add_scene(SceneEntry("outro_card", transition_in=TransitionType.ZOOM_IN,
                                timing=TimingType.SPRING, spring="bouncy"))
        restored = Storyboard.from_dict(sb.to_dict())
        assert restored == sb

    def test_unknown_transition(self):
        with pytest.raises(ConfigurationError):
            Storyboard.from_dict({"scenes": [{"scene_id": "title_card", "transition_in": "wipe"}]})


class TestTemplates:

    def test_full_tour_scenes(self):
        assert get_storyboard(FULL_TOUR).get_scene_ids() == FULL_TOUR_SCENES

    def test_every_scene_is_a_composition(self):
        assert list_compositions()[0] == FULL_TOUR
        assert set(FULL_TOUR_SCENES) <= set(list_compositions())

    def test_unknown_composition(self):
        with pytest.raises(ConfigurationError):
            get_storyboard("teaser")

    def test_config_overrides(self):
        sb = get_storyboard(FULL_TOUR, {"timeline": {"transition": "fade_black",
                                                     "transition_duration": 10}})
        assert sb.scenes[1].transition_in == TransitionType.FADE_BLACK
        assert sb.scenes[1].transition_duration == 10


class TestDirector:

    def test_full_tour_timeline(self, director):
        timeline = director.build_timeline(director.create_storyboard(FULL_TOUR))
        assert timeline.duration_in_frames == 645
        assert [s.name for s in timeline.segments] == FULL_TOUR_SCENES

    def test_full_tour_frame_400(self, director):
        timeline = director.build_timeline(director.create_storyboard(FULL_TOUR))
        composed = timeline(400)
        assert composed.top.name == "embed_widget"
        assert composed.top.local_frame == 85
        sequential = [timeline(f) for f in range(401)]
        assert sequential[-1] == composed

    def test_shorter_transitions(self):
        director = Director({"timeline": {"transition_duration": 10}})
        timeline = director.build_timeline(director.create_storyboard(FULL_TOUR))
        assert timeline.duration_in_frames == 670

    def test_single_scene(self, director):
        timeline = director.build_timeline(director.create_storyboard("dashboard"))
        assert timeline.duration_in_frames == 150
        assert timeline(0).layers[0].state.unread_count == 2

    def test_threshold_from_config(self):
        director = Director({"interaction": {"opacity_threshold": 0.6}})
        timeline = director.build_timeline(director.create_storyboard("dns_verification"))
        state = timeline(37).top.state
        assert not state.deaddrop_interactive
        assert not state.dns_interactive

    def test_spring_timing(self):
        director = Director({"timeline": {"timing": "spring", "spring": "smooth"}})
        timeline = director.build_timeline(director.create_storyboard(FULL_TOUR))
        assert timeline.transitions[0].spring_config == director.springs["smooth"]
        opacities = [timeline(f).layer("register_domain").opacity for f in range(45, 60)]
        assert opacities == sorted(opacities)

    def test_loaded_storyboard(self, director):
        sb = director.load_storyboard({
            "composition_id": "short",
            "scenes": [
                {"scene_id": "title_card", "duration": 30},
                {"scene_id": "outro_card", "transition_in": "cut", "transition_duration": 0},
            ],
        })
        timeline = director.build_timeline(sb)
        assert timeline.duration_in_frames == 90
        assert timeline(30).top.name == "outro_card"

    def test_unknown_scene(self, director):
        sb = director.load_storyboard({"scenes": [{"scene_id": "pricing"}]})
        with pytest.raises(ConfigurationError):
            director.build_timeline(sb)

    def test_unknown_spring_preset(self, director):
        sb = director.load_storyboard({"scenes": [
            {"scene_id": "title_card"},
            {"scene_id": "outro_card", "timing": "spring", "spring": "wobbly"},
        ]})
        with pytest.raises(ConfigurationError):
            director.build_timeline(sb)

    def test_unknown_easing(self, director):
        sb = director.load_storyboard({"scenes": [
            {"scene_id": "title_card"},
            {"scene_id": "outro_card", "easing": "elastic"},
        ]})
        with pytest.raises(ConfigurationError):
            director.build_timeline(sb)

    def test_empty_storyboard(self, director):
        with pytest.raises(ConfigurationError):
            director.build_timeline(Storyboard(composition_id="empty"))

    def test_zero_duration_scene(self, director):
        sb = director.load_storyboard({"scenes": [{"scene_id": "title_card", "duration": 0}]})
        with pytest.raises(ConfigurationError):
            director.build_timeline(sb)

    def test_transition_too_long(self, director):
        sb = director.load_storyboard({"scenes": [
            {"scene_id": "title_card"},
            {"scene_id": "outro_card", "transition_duration": 90},
        ]})
        with pytest.raises(ConfigurationError):
            director.build_timeline(sb)
