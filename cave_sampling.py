# -----------------------------------------
#  cave_sampling.py
#  Monte Carlo driver for the Speleo cave simulator
#  Modes:
#    A) one user-supplied cave, explored fully
#    B) success rate for one accessibility value
#    C) mode B for every accessibility in 1% steps
# -----------------------------------------

from dataclasses import dataclass

import cave_config as cc
import cave_grid as cg
import cave_search as cs
from cave_errors import InvalidArgumentError


@dataclass
class RunStats:
    accessibility: float
    samples: int = 0
    successes: int = 0

    @property
    def success_rate(self) -> float:
        if self.samples == 0:
            return 0.0
        return self.successes / self.samples


# ---------- MODE A ----------

def single_trial(cave: cg.Cave) -> dict:
    """
    Explore a fixed cave once, without the early stop.
    Visited flags stay on the cave so the explored area can be shown.
    """
    return cs.attempt_traverse(cave, stop_at_exit=cs.stop_at_exit_for(cc.MODE_SHOW_PATHS))


# ---------- MODE B ----------

def estimate_success(accessibility: float, size: int, samples: int, rng=None) -> RunStats:
    """
    Traverse `samples` freshly generated caves and tally how many
    can be crossed. Each sample gets its own cave; nothing is shared.
    """
    if isinstance(samples, bool) or not isinstance(samples, int) or samples <= 0:
        raise InvalidArgumentError(f"sample size must be a positive integer, got {samples!r}")

    stop = cs.stop_at_exit_for(cc.MODE_SINGLE)
    stats = RunStats(accessibility=accessibility)
    for _ in range(samples):
        cave = cg.build_random_cave(size, accessibility, rng)
        result = cs.attempt_traverse(cave, stop_at_exit=stop)
        stats.samples += 1
        if result["exit_reached"]:
            stats.successes += 1

    cc.log(
        f"p={accessibility:.2f} n={size}: "
        f"{stats.successes}/{stats.samples} crossings"
    )
    return stats


# ---------- MODE C ----------

def sweep_points(steps: int = cc.SWEEP_STEPS) -> list[float]:
    """Accessibility values 0, 1/steps, ... 1 (inclusive)."""
    if steps <= 0:
        raise InvalidArgumentError(f"sweep needs at least one step, got {steps!r}")
    return [i / steps for i in range(steps + 1)]


def sweep(size: int, samples: int, rng=None, steps: int = cc.SWEEP_STEPS):
    """Yield RunStats for every accessibility point, lowest first."""
    for p in sweep_points(steps):
        yield estimate_success(p, size, samples, rng)


# ---------- DISPATCH ----------

def run_mode(mode: str, size: int, *, cave=None, accessibility=None, samples=None, rng=None):
    """
    Run one execution mode.
    Returns the trial summary for mode A, a one-item list of RunStats
    for mode B, and the lazy sweep generator for mode C.
    """
    if mode == cc.MODE_SHOW_PATHS:
        if cave is None:
            raise InvalidArgumentError("mode A needs a cave")
        return single_trial(cave)
    if mode == cc.MODE_SINGLE:
        if accessibility is None:
            raise InvalidArgumentError("mode B needs an accessibility")
        return [estimate_success(accessibility, size, samples, rng)]
    if mode == cc.MODE_SWEEP:
        return sweep(size, samples, rng)
    raise InvalidArgumentError(f"unknown mode {mode!r}")
