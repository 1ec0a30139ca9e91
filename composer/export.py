"""
State export — samples a Timeline and writes the per-frame states to JSON.

The JSON document is what an external rasterizer consumes; nothing here
draws pixels.
"""

import json
import os
from dataclasses import fields, is_dataclass

import numpy as np


def state_to_dict(state):
    """
    Convert a VisualState (or ComposedFrame) into JSON-ready data.

    Dataclasses become dicts tagged with their class name under "type",
    tuples become lists.
    """
    if is_dataclass(state) and not isinstance(state, type):
        data = {"type": type(state).__name__}
        for f in fields(state):
            data[f.name] = state_to_dict(getattr(state, f.name))
        return data
    if isinstance(state, (list, tuple)):
        return [state_to_dict(item) for item in state]
    if isinstance(state, dict):
        return {key: state_to_dict(value) for key, value in state.items()}
    return state


def sample_frames(timeline, start=0, end=None, step=1):
    """
    Compose every `step`-th frame in [start, end).

    Args:
        timeline: Timeline (or any callable with duration_in_frames)
        start: First frame
        end: Stop before this frame. None = end of the timeline.
        step: Frame stride

    Returns:
        List of ComposedFrame
    """
    if end is None:
        end = timeline.duration_in_frames
    return [timeline(frame) for frame in range(start, end, step)]


def sample_channel(timeline, getter, frames=None):
    """
    Pull one numeric value out of many frames.

    Args:
        timeline: Timeline
        getter: Function ComposedFrame -> number
        frames: Iterable of frames. None = every frame.

    Returns:
        numpy float array, one entry per frame
    """
    if frames is None:
        frames = range(timeline.duration_in_frames)
    return np.fromiter((getter(timeline(f)) for f in frames), dtype=float)


def export_states(timeline, output_path, config):
    """
    Write every sampled frame of a timeline to a JSON file.

    Args:
        timeline: Timeline to sample
        output_path: Output .json path
        config: Config dict with video/export settings

    Returns:
        Path to the written file
    """
    video_config = config.get("video", {})
    export_config = config.get("export", {})
    step = export_config.get("step", 1)
    indent = export_config.get("indent", 2)

    directory = os.path.dirname(output_path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    frames = sample_frames(timeline, step=step)
    print(f"   [Export] Sampling {len(frames)} frame(s) of '{timeline.name}'...")

    document = {
        "composition": timeline.name,
        "fps": timeline.fps,
        "width": video_config.get("width", 1920),
        "height": video_config.get("height", 1080),
        "duration_in_frames": timeline.duration_in_frames,
        "step": step,
        "frames": [state_to_dict(frame) for frame in frames],
    }

    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(document, f, indent=indent)

    print(f"   [Export] Done! Output: {output_path}")
    return output_path
