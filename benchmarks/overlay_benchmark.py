"""
Overlay benchmarking script.

Drives an overlay with synthetic frame timestamps and reports the smoothed
samples it records together with the average cost of one tick.

Usage::

    python benchmarks/overlay_benchmark.py [--frames 600] [--fps 60] [--jitter 2.0]
"""

import argparse
import os
import sys
import time

# Allow running from repo root without installing the package
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import numpy as np


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Benchmark the FPS overlay tick loop.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("--frames", type=int, default=600, help="Number of frames to simulate")
    parser.add_argument("--fps",    type=float, default=60.0, help="Simulated frame rate")
    parser.add_argument(
        "--jitter",
        type=float,
        default=0.0,
        help="Standard deviation of frame interval noise in milliseconds",
    )
    parser.add_argument("--width",    type=int, default=120, help="Surface width in pixels")
    parser.add_argument("--height",   type=int, default=80, help="Surface height in pixels")
    parser.add_argument("--capacity", type=int, default=30, help="Graph history points")
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Optional PNG path to write the final overlay surface to",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()

    from fps_overlay.core.overlay import Overlay, OverlayConfig
    from fps_overlay.core.scheduler import FrameScheduler

    print(f"\n{'='*60}")
    print(f"  FPS Overlay Benchmark")
    print(f"{'='*60}")
    print(f"  Frames      : {args.frames}")
    print(f"  Target rate : {args.fps:.1f} fps  (jitter {args.jitter:.1f} ms)")
    print(f"  Surface     : {args.width}x{args.height}, {args.capacity} points")
    print()

    # ---- Prepare timestamps ----
    rng = np.random.default_rng(42)
    intervals = np.full(args.frames, 1000.0 / args.fps)
    if args.jitter > 0:
        intervals += rng.normal(0.0, args.jitter, args.frames)
    timestamps = np.cumsum(np.clip(intervals, 0.1, None))

    scheduler = FrameScheduler()
    overlay = Overlay(
        scheduler,
        OverlayConfig(args.width, args.height, args.capacity),
        clock=lambda: 0.0,
    )
    overlay.toggle()

    # ---- Benchmark ----
    start = time.perf_counter()
    for ts in timestamps:
        scheduler.fire(float(ts))
    elapsed = time.perf_counter() - start

    us_per_tick = (elapsed / args.frames * 1e6) if args.frames else 0.0
    samples = overlay.buffer.snapshot()

    print(f"  Results:")
    print(f"    Samples retained : {len(samples)}")
    print(f"    Samples          : {samples}")
    print(f"    Latest value     : {overlay.buffer.latest} fps")
    print(f"    µs / tick        : {us_per_tick:.1f}")

    if args.output:
        import cv2
        cv2.imwrite(args.output, overlay.surface.to_image())
        print(f"    Surface written  : {args.output}")
    print(f"\n{'='*60}\n")


if __name__ == "__main__":
    main()
