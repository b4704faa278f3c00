# -----------------------------------------
#  cave_search.py
#  Depth-first traversal of a cave, top row to bottom row
#  Uses cave_grid as core
# -----------------------------------------

import cave_config as cc
from cave_errors import InvalidArgumentError
from cave_grid import Cave, Cell


# ---------- STATES ----------

IDLE = "idle"
EXPLORING = "exploring"
DONE = "done"

# ---------- STATUS ----------

EXIT_FOUND = "exit_found"   # stopped early on the first exit cell
COMPLETED = "completed"     # frontier emptied


def stop_at_exit_for(mode: str) -> bool:
    """Modes B and C stop at the first exit; mode A explores everything reachable."""
    return mode != cc.MODE_SHOW_PATHS


class CaveTraversal:
    """
    Explicit-stack DFS over a cave.

    Rules:
      - Every free, unvisited cell of the entry row seeds the frontier.
      - Cells are marked visited when pushed, never twice.
      - The top of the frontier is peeked first; if it lies on the exit row,
        exits_found is bumped and, with stop_at_exit, the search ends with
        that cell still on the frontier.
      - Otherwise the cell is popped and its neighbours pushed North, East,
        West, South, so South comes off first.

    The visited flags are left on the cave for display; call cave.reset()
    before traversing the same layout again.
    """

    def __init__(self, cave: Cave, stop_at_exit: bool = True):
        self.cave = cave
        self.stop_at_exit = stop_at_exit
        self.frontier: list[Cell] = []
        self.state = IDLE
        self.status: str | None = None
        self.exits_found = 0
        self.cells_visited = 0
        self.max_depth = 0

    def _scout(self, cell: Cell) -> None:
        if self.cave.is_accessible(cell) and self.cave.is_unvisited(cell):
            self.cave.mark_visited(cell)
            self.frontier.append(cell)
            self.cells_visited += 1
            if len(self.frontier) > self.max_depth:
                self.max_depth = len(self.frontier)

    def start(self) -> None:
        if self.state != IDLE:
            raise InvalidArgumentError(f"traversal already {self.state}")

        # find cave entries
        for cell in self.cave.entry_row():
            self._scout(cell)

        self.state = EXPLORING
        if not self.frontier:
            self._finish(COMPLETED)

    def _finish(self, status: str) -> None:
        self.state = DONE
        self.status = status
        cc.log(
            f"traversal {status}: exits={self.exits_found} "
            f"visited={self.cells_visited} depth={self.max_depth}"
        )

    def step(self) -> bool:
        """One peek/pop/push cycle. Returns False once the traversal is done."""
        if self.state != EXPLORING:
            return False

        cell = self.frontier[-1]
        if self.cave.is_exit(cell):
            self.exits_found += 1
            if self.stop_at_exit:
                self._finish(EXIT_FOUND)
                return False

        self.frontier.pop()
        for nb in self.cave.neighbours(cell):
            self._scout(nb)

        if not self.frontier:
            self._finish(COMPLETED)
            return False
        return True

    def run(self) -> dict:
        if self.state == IDLE:
            self.start()
        while self.step():
            pass
        return self.summary()

    def summary(self) -> dict:
        return {
            "status": self.status,
            "exit_reached": self.exits_found > 0,
            "exits_found": self.exits_found,
            "cells_visited": self.cells_visited,
            "max_depth": self.max_depth,
        }


def attempt_traverse(cave: Cave, stop_at_exit: bool = True) -> dict:
    """
    Run one traversal and return its summary dict:
      {
        "status": "exit_found" | "completed",
        "exit_reached": bool,
        "exits_found": int,     # exit-row cells peeked
        "cells_visited": int,   # cells ever pushed
        "max_depth": int        # deepest frontier size reached
      }
    """
    return CaveTraversal(cave, stop_at_exit=stop_at_exit).run()
