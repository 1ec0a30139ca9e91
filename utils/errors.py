"""
Error types shared by the animation engine.

Only one kind of failure exists: a composition that was authored wrong.
It is raised while building keyframes, springs or timelines, before any
frame is sampled.
"""


class ConfigurationError(ValueError):
    """Invalid keyframes, spring parameters, or timeline structure."""
