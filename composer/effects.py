"""
Transition effects between scenes.

Supports: cut, crossfade, fade to black, slide (left/right), zoom (in/out).
Each effect turns transition progress (0..1) into the opacity and transform
of the outgoing and incoming layers. Pixels are never touched here; the
renderer applies the returned values.
"""

from dataclasses import dataclass

from brain.storyboard import TransitionType
from utils.animation import ease_out_cubic
from utils.errors import ConfigurationError


@dataclass(frozen=True)
class LayerEffect:
    """
    How one layer is drawn during a transition.

    Offsets are fractions of the frame size (1.0 = one full width/height),
    scale is applied around the frame center.
    """
    opacity: float = 1.0
    offset_x: float = 0.0
    offset_y: float = 0.0
    scale: float = 1.0


FULL = LayerEffect()
HIDDEN = LayerEffect(opacity=0.0)


class TransitionEngine:
    """Computes outgoing/incoming layer effects for a transition type."""

    def apply_transition(self, transition_type, progress):
        """
        Effects for both layers at a point in the transition.

        Args:
            transition_type: TransitionType enum value
            progress: Transition progress, 0.0 (start) to 1.0 (end)

        Returns:
            (outgoing LayerEffect, incoming LayerEffect)
        """
        if transition_type == TransitionType.CROSSFADE:
            return LayerEffect(opacity=1.0 - progress), LayerEffect(opacity=progress)

        elif transition_type == TransitionType.FADE_BLACK:
            # Out to black over the first half, in from black over the second
            return (
                LayerEffect(opacity=max(0.0, 1.0 - 2.0 * progress)),
                LayerEffect(opacity=max(0.0, 2.0 * progress - 1.0)),
            )

        elif transition_type == TransitionType.CUT:
            return (FULL, HIDDEN) if progress < 0.5 else (HIDDEN, FULL)

        elif transition_type == TransitionType.SLIDE_LEFT:
            return self._slide(progress, direction="right")

        elif transition_type == TransitionType.SLIDE_RIGHT:
            return self._slide(progress, direction="left")

        elif transition_type == TransitionType.ZOOM_IN:
            return self._zoom_in(progress)

        elif transition_type == TransitionType.ZOOM_OUT:
            return self._zoom_out(progress)

        raise ConfigurationError(f"Unsupported transition type: {transition_type!r}")

    def _slide(self, progress, direction="right"):
        """
        Slide-in transition — content enters from the specified side.

        direction="right" means content slides in from the right edge (SLIDE_LEFT).
        direction="left" means content slides in from the left edge (SLIDE_RIGHT).
        The outgoing layer is pushed off the opposite edge.
        """
        eased = ease_out_cubic(progress)
        sign = 1.0 if direction == "right" else -1.0
        return (
            LayerEffect(offset_x=-sign * eased),
            LayerEffect(offset_x=sign * (1.0 - eased)),
        )

    def _zoom_in(self, progress):
        """Incoming layer grows from 0.3x to 1.0x, fading in faster than it zooms."""
        eased = ease_out_cubic(progress)
        return FULL, LayerEffect(
            opacity=min(1.0, eased * 1.5),
            scale=0.3 + 0.7 * eased,
        )

    def _zoom_out(self, progress):
        """Incoming layer shrinks from 1.5x to 1.0x while fading in."""
        eased = ease_out_cubic(progress)
        return FULL, LayerEffect(
            opacity=min(1.0, eased * 1.5),
            scale=1.5 - 0.5 * eased,
        )


def combine(first, second):
    """Stack two effects on one layer (a segment inside two transitions)."""
    return LayerEffect(
        opacity=first.opacity * second.opacity,
        offset_x=first.offset_x + second.offset_x,
        offset_y=first.offset_y + second.offset_y,
        scale=first.scale * second.scale,
    )
