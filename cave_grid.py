# -----------------------------------------
#  cave_grid.py
#  Grid model for the Speleo cave simulator
#  A cave is an N x N square of cells, each
#  obstructed (rock) or free, plus a visited flag
# -----------------------------------------

import random
from dataclasses import dataclass

import cave_config as cc
from cave_errors import InvalidArgumentError, InvalidInputError


# ---------- RANDOM SOURCE ----------

def bernoulli(probability: float, rng=None) -> bool:
    """
    One Bernoulli trial: True with the given probability.
    rng is any object with a random() method (random.Random by default).
    """
    if rng is None:
        rng = random
    return rng.random() < probability


# ---------- CELLS ----------

@dataclass
class Cell:
    row: int
    col: int
    obstructed: bool
    visited: bool = False

    def is_accessible(self) -> bool:
        return not self.obstructed

    def is_unvisited(self) -> bool:
        return not self.visited

    def can_explore(self) -> bool:
        return self.is_accessible() and self.is_unvisited()


# ---------- CAVE ----------

class Cave:
    """
    Square grid of cells, indexed cave[row][col].
    Row 0 is the entry row, row size-1 the exit row.
    """

    def __init__(self, cells: list[list[Cell]]):
        self.cells = cells
        self.size = len(cells)

    def __getitem__(self, row: int) -> list[Cell]:
        return self.cells[row]

    def __iter__(self):
        return iter(self.cells)

    def __repr__(self) -> str:
        return f"Cave(size={self.size}, open={self.open_count()})"

    # ----- accessors -----

    def is_accessible(self, cell: Cell) -> bool:
        return cell.is_accessible()

    def is_unvisited(self, cell: Cell) -> bool:
        return cell.is_unvisited()

    def mark_visited(self, cell: Cell) -> None:
        cell.visited = True

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def neighbours(self, cell: Cell) -> list[Cell]:
        """In-bounds neighbours in push order: North, East, West, South."""
        result = []
        for dr, dc in cc.NEIGHBOUR_OFFSETS:
            r, c = cell.row + dr, cell.col + dc
            if self.in_bounds(r, c):
                result.append(self.cells[r][c])
        return result

    def entry_row(self) -> list[Cell]:
        return self.cells[cc.ENTRY_ROW]

    def is_exit(self, cell: Cell) -> bool:
        return cell.row == self.size - 1

    # ----- whole-grid views -----

    def visited_cells(self) -> set[tuple[int, int]]:
        return {(c.row, c.col) for row in self.cells for c in row if c.visited}

    def obstruction_rows(self) -> list[list[bool]]:
        return [[c.obstructed for c in row] for row in self.cells]

    def open_count(self) -> int:
        return sum(1 for row in self.cells for c in row if not c.obstructed)

    def reset(self) -> None:
        """Clear every visited flag; obstruction layout is untouched."""
        for row in self.cells:
            for c in row:
                c.visited = False


# ---------- BUILDERS ----------

def build_fixed_cave(rows) -> Cave:
    """
    Build a cave from explicit obstruction flags, row-major.
    Any truthy flag means the cell is rock.
    Raises InvalidInputError if the rows do not form a non-empty square.
    """
    rows = [list(r) for r in rows]
    n = len(rows)
    if n == 0:
        raise InvalidInputError("cave map has no rows")

    for y, strip in enumerate(rows):
        if len(strip) != n:
            raise InvalidInputError(
                f"row {y} has {len(strip)} cells, expected {n}"
            )

    cells = [
        [Cell(y, x, bool(flag)) for x, flag in enumerate(strip)]
        for y, strip in enumerate(rows)
    ]
    return Cave(cells)


def build_random_cave(size: int, accessibility: float, rng=None) -> Cave:
    """
    Build a size x size cave where each cell is rock with
    probability (1 - accessibility), independently.
    """
    if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
        raise InvalidArgumentError(f"cave size must be a positive integer, got {size!r}")
    if not 0.0 <= accessibility <= 1.0:
        raise InvalidArgumentError(
            f"accessibility must be within [0, 1], got {accessibility!r}"
        )

    blocked = 1.0 - accessibility
    cells = [
        [Cell(y, x, bernoulli(blocked, rng)) for x in range(size)]
        for y in range(size)
    ]
    return Cave(cells)
