"""
Speleo launcher.
Asks for an execution mode, then runs the cave traversal simulation:
  A) the user enters the map and the explored cells are shown
  B) success rate for one accessibility probability
  C) mode B for every accessibility from 0% to 100% in 1% steps
"""

import argparse
import random
import sys

import pygame

import cave_config as cc
import cave_grid as cg
import cave_prompt as cp
import cave_sampling as smp
import cave_text as ct
import cave_visual as cv


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Estimate whether a random cave can be crossed")
    parser.add_argument("--seed", type=int, help="Seed the random source for reproducible runs")
    parser.add_argument("--visual", action="store_true", help="Open a pygame view after mode A or C")
    parser.add_argument("--debug", action="store_true", help="Print traversal and sampling details")
    return parser


def run_show_paths(size: int, input_fn, visual: bool) -> None:
    cave = cg.build_fixed_cave(cp.read_map(size, input_fn))
    summary = smp.run_mode(cc.MODE_SHOW_PATHS, size, cave=cave)
    for line in ct.trial_report(summary, cave):
        print(line)

    if visual:
        open_view(lambda: cv.show_cave(cave, summary["exit_reached"]))


def run_statistics(mode: str, size: int, input_fn, rng, visual: bool) -> None:
    accessibility = None
    if mode == cc.MODE_SINGLE:
        accessibility = cp.ask_accessibility(input_fn)
    samples = cp.ask_samples(input_fn)

    results = []
    for stats in smp.run_mode(mode, size, accessibility=accessibility, samples=samples, rng=rng):
        print(ct.success_line(stats))
        results.append(stats)

    if mode == cc.MODE_SWEEP:
        threshold = ct.threshold_estimate(results)
        if threshold is not None:
            print(f"[Cave] Crossing succeeds at least half the time from accessibility {threshold:.2f}.")
        if visual:
            open_view(lambda: cv.show_sweep(results))


def open_view(show) -> None:
    try:
        show()
    except pygame.error:
        print(
            "[Cave] Visual view is not available on this device. "
            "Pygame could not open a window."
        )


def main(argv=None, input_fn=input) -> int:
    args = build_parser().parse_args(argv)
    cc.DEBUG_LOG_TO_CONSOLE = args.debug

    rng = random.Random(args.seed)
    cc.log(f"random source seeded with {args.seed}")

    try:
        mode = cp.ask_mode(input_fn)
        size = cp.ask_size(input_fn)

        if mode == cc.MODE_SHOW_PATHS:
            run_show_paths(size, input_fn, args.visual)
        else:
            run_statistics(mode, size, input_fn, rng, args.visual)
    except (EOFError, KeyboardInterrupt):
        print("\n[Cave] Input closed before the run finished.")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
