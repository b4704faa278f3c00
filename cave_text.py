# cave_text.py
# Text templates / console output for the Speleo cave simulator

import cave_config as cc


def exit_banner(exit_reached: bool) -> str:
    return "Exit found" if exit_reached else "Exit NOT found"


def path_rows(cave) -> list[str]:
    """
    One line per cave row, space separated.
    '1' marks a cell never reached, '0' a visited one.
    """
    lines = []
    for strip in cave:
        lines.append(" ".join("0" if c.visited else "1" for c in strip))
    return lines


def success_line(stats) -> str:
    d = cc.RATE_DIGITS
    return (
        f"Success for accessibility {stats.accessibility:.{d}f} "
        f"is {stats.success_rate:.{d}f}"
    )


def trial_report(summary: dict, cave) -> list[str]:
    """Mode A output: banner then the explored map."""
    return [exit_banner(summary["exit_reached"])] + path_rows(cave)


def threshold_estimate(results, level: float = 0.5):
    """
    First accessibility whose success rate reaches `level`,
    or None if the sweep never gets there.
    """
    for stats in results:
        if stats.success_rate >= level:
            return stats.accessibility
    return None
