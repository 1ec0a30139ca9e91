"""
Scene registry — every scene the director can place on a timeline.
"""

from collections import namedtuple

from scenes import (
    dashboard, dns_verification, embed_widget, outro_card, register_domain,
    title_card,
)
from utils.errors import ConfigurationError

SceneInfo = namedtuple("SceneInfo", "scene_id duration state_fn cross_fades")

SCENES = {
    "title_card": SceneInfo("title_card", title_card.DURATION, title_card.scene_state, False),
    "register_domain": SceneInfo(
        "register_domain", register_domain.DURATION, register_domain.scene_state, False
    ),
    "dns_verification": SceneInfo(
        "dns_verification", dns_verification.DURATION, dns_verification.scene_state, True
    ),
    "embed_widget": SceneInfo(
        "embed_widget", embed_widget.DURATION, embed_widget.scene_state, True
    ),
    "dashboard": SceneInfo("dashboard", dashboard.DURATION, dashboard.scene_state, True),
    "outro_card": SceneInfo("outro_card", outro_card.DURATION, outro_card.scene_state, False),
}


def get_scene(scene_id):
    """Look up a scene by id, failing with the list of known ids."""
    try:
        return SCENES[scene_id]
    except KeyError:
        raise ConfigurationError(
            f"Unknown scene '{scene_id}', expected one of {sorted(SCENES)}"
        ) from None
