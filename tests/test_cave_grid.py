import random

import pytest

import cave_grid as cg
from cave_errors import InvalidArgumentError, InvalidInputError


def test_fixed_cave_row_major_flags():
    cave = cg.build_fixed_cave([[0, 1], [0, 0]])
    assert cave.size == 2
    assert cave[0][1].obstructed
    assert not cave[0][0].obstructed
    assert (cave[1][0].row, cave[1][0].col) == (1, 0)
    assert cave.open_count() == 3


@pytest.mark.parametrize("rows", [[], [[0, 0], [0]], [[0, 0, 0], [0, 0, 0]]])
def test_fixed_cave_rejects_non_square(rows):
    with pytest.raises(InvalidInputError):
        cg.build_fixed_cave(rows)


@pytest.mark.parametrize("size, p", [(0, 0.5), (-3, 0.5), (4, -0.1), (4, 1.5), (2.5, 0.5), (4, float("nan"))])
def test_random_cave_rejects_bad_arguments(size, p):
    with pytest.raises(InvalidArgumentError):
        cg.build_random_cave(size, p, random.Random(0))


def test_random_cave_extremes():
    rng = random.Random(7)
    assert cg.build_random_cave(6, 1.0, rng).open_count() == 36
    assert cg.build_random_cave(6, 0.0, rng).open_count() == 0


def test_random_cave_is_reproducible_with_seed():
    a = cg.build_random_cave(8, 0.6, random.Random(42))
    b = cg.build_random_cave(8, 0.6, random.Random(42))
    assert a.obstruction_rows() == b.obstruction_rows()


def test_bernoulli_uses_given_source():
    class Fixed:
        def __init__(self, value):
            self.value = value

        def random(self):
            return self.value

    assert cg.bernoulli(0.5, Fixed(0.2))
    assert not cg.bernoulli(0.5, Fixed(0.7))
    assert not cg.bernoulli(0.0, Fixed(0.0))


def test_neighbours_order_north_east_west_south():
    cave = cg.build_fixed_cave([[0] * 3 for _ in range(3)])
    centre = cave[1][1]
    coords = [(c.row, c.col) for c in cave.neighbours(centre)]
    assert coords == [(0, 1), (1, 2), (1, 0), (2, 1)]


def test_neighbours_stay_in_bounds():
    cave = cg.build_fixed_cave([[0] * 3 for _ in range(3)])
    coords = [(c.row, c.col) for c in cave.neighbours(cave[0][0])]
    assert coords == [(0, 1), (1, 0)]


def test_accessors_and_reset_keep_obstruction():
    cave = cg.build_fixed_cave([[1, 0], [0, 0]])
    rock, free = cave[0][0], cave[0][1]
    assert not cave.is_accessible(rock)
    assert cave.is_accessible(free)
    assert cave.is_unvisited(free)

    cave.mark_visited(free)
    assert not cave.is_unvisited(free)
    assert cave.visited_cells() == {(0, 1)}

    cave.reset()
    assert cave.visited_cells() == set()
    assert cave.obstruction_rows() == [[True, False], [False, False]]


def test_exit_row_is_last_row():
    cave = cg.build_fixed_cave([[0] * 3 for _ in range(3)])
    assert cave.is_exit(cave[2][0])
    assert not cave.is_exit(cave[1][2])
    assert [c.col for c in cave.entry_row()] == [0, 1, 2]
