#!/usr/bin/env python3
"""
PRODUCT TOUR RENDERER — sample the demo compositions frame by frame.

LIST COMPOSITIONS:
  python render.py --list

INSPECT ONE FRAME:
  python render.py --composition full_tour --frame 400
  python render.py --composition dns_verification --frame 37

EXPORT STATES FOR THE RASTERIZER:
  python render.py --composition full_tour --output output/full_tour.json
  python render.py --composition embed_widget --output out.json --step 2

CUSTOM STORYBOARD:
  python render.py --storyboard my_tour.yaml --output out.json
"""

import argparse
import json
import os
import sys
import time

import yaml

# Ensure project root is in path
PROJECT_ROOT = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, PROJECT_ROOT)

from brain.director import Director
from brain.templates import FULL_TOUR, list_compositions
from composer.export import export_states, state_to_dict
from utils.errors import ConfigurationError


def load_config(path=None):
    """Load configuration from config.yaml."""
    config_path = path or os.path.join(PROJECT_ROOT, "config.yaml")
    if not os.path.exists(config_path):
        return {}
    with open(config_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def load_storyboard_file(path):
    """Load a storyboard document (YAML or JSON) into a dict."""
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def run_list(director):
    """Print every built-in composition with its length."""
    for composition_id in list_compositions():
        storyboard = director.create_storyboard(composition_id)
        timeline = director.build_timeline(storyboard)
        seconds = timeline.duration_in_frames / timeline.fps
        print(f"  {composition_id:<20} {timeline.duration_in_frames:>5} frames  {seconds:5.1f}s")


def run_frame(timeline, frame):
    """Print the composed state of a single frame as JSON."""
    composed = timeline(frame)
    if composed.global_frame != frame:
        print(f"   [Render] Frame {frame} outside 0..{timeline.duration_in_frames - 1}, "
              f"clamped to {composed.global_frame}")
    print(json.dumps(state_to_dict(composed), indent=2))


def main():
    parser = argparse.ArgumentParser(
        description="PRODUCT TOUR RENDERER — sample frame-driven demo compositions"
    )
    parser.add_argument("--composition", default=FULL_TOUR,
                        help=f"Composition id (default: {FULL_TOUR})")
    parser.add_argument("--storyboard", default=None,
                        help="Path to a storyboard YAML/JSON file (overrides --composition)")
    parser.add_argument("--frame", type=int, default=None,
                        help="Print the state of a single frame")
    parser.add_argument("--output", default=None,
                        help="Write all sampled states to this JSON file")
    parser.add_argument("--step", type=int, default=None,
                        help="Sample every Nth frame when exporting")
    parser.add_argument("--config", default=None,
                        help="Path to config.yaml")
    parser.add_argument("--list", action="store_true",
                        help="List available compositions")

    args = parser.parse_args()

    config = load_config(args.config)
    if args.step is not None:
        if args.step <= 0:
            parser.error("--step must be a positive number")
        config.setdefault("export", {})["step"] = args.step

    director = Director(config)

    try:
        if args.list:
            run_list(director)
            return

        if args.frame is None and not args.output:
            parser.error("nothing to do: pass --frame, --output or --list")

        if args.storyboard:
            storyboard = director.load_storyboard(load_storyboard_file(args.storyboard))
        else:
            storyboard = director.create_storyboard(args.composition)
        timeline = director.build_timeline(storyboard)
    except ConfigurationError as e:
        print(f"   [Render] Invalid composition: {e}")
        sys.exit(1)

    if args.frame is not None:
        run_frame(timeline, args.frame)
        return

    start_time = time.time()

    print("=" * 55)
    print("  PRODUCT TOUR RENDERER")
    print("=" * 55)
    print(f"  Composition: {timeline.name}")
    print(f"  Frames:      {timeline.duration_in_frames} @ {timeline.fps}fps")
    print(f"  Segments:    {', '.join(s.name for s in timeline.segments)}")
    print("=" * 55)

    output_path = export_states(timeline, args.output, config)

    elapsed = time.time() - start_time
    file_size = os.path.getsize(output_path) / (1024 * 1024)

    print(f"\n{'=' * 55}")
    print(f"  STATES READY!")
    print(f"{'=' * 55}")
    print(f"  Output:   {output_path}")
    print(f"  Size:     {file_size:.1f} MB")
    print(f"  Time:     {elapsed:.1f}s")
    print(f"{'=' * 55}")

    return output_path


if __name__ == "__main__":
    main()
