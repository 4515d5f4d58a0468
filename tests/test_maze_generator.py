import math
import random

import pytest

from src.core.errors import InvalidArgumentError
from src.level.maze_generator import MazeGenerator

from helpers import assert_twin_consistent, corridor_component

WIDTH = 15
HEIGHT = 15


@pytest.fixture
def dense_maze(rng):
    return MazeGenerator(30, 0, rng=rng).generate(0, 0, WIDTH, HEIGHT)


@pytest.mark.parametrize("randomness, sparseness", [(-1, 50), (101, 50), (50, -1), (50, 101)])
def test_invalid_arguments_raise(randomness, sparseness):
    with pytest.raises(InvalidArgumentError):
        MazeGenerator(randomness, sparseness)


def test_dense_maze_visits_every_cell(dense_maze):
    assert dense_maze.is_all_cells_visited()
    assert len(dense_maze.corridor_cells()) == WIDTH * HEIGHT


def test_dense_maze_is_a_spanning_tree(dense_maze):
    start = next(dense_maze.cells)
    assert len(corridor_component(dense_maze, start)) == WIDTH * HEIGHT

    # A tree over n cells has exactly n - 1 passages
    open_sides = sum(
        1 for cell in dense_maze.cells for side in cell.sides.values() if side.is_open
    )
    assert open_sides // 2 == WIDTH * HEIGHT - 1


def test_maze_keeps_sides_twin_consistent(rng):
    room = MazeGenerator(60, 50, rng=rng).generate(2, 3, WIDTH, HEIGHT)
    assert (room.left, room.top) == (3, 2)
    assert_twin_consistent(room)


@pytest.mark.parametrize("sparseness", range(0, 101))
def test_sparseness_seals_expected_number_of_cells(sparseness, rng):
    room = MazeGenerator(30, sparseness, rng=rng).generate(0, 0, WIDTH, HEIGHT)

    solid = sum(1 for cell in room.cells if cell.is_solid)
    expected = math.ceil(WIDTH * HEIGHT * sparseness / 100)
    assert solid == expected, f"{sparseness}% sparseness should leave {expected} solid cells, got {solid}"
    assert room.is_all_cells_visited()


@pytest.mark.parametrize("sparseness", [10, 50, 90])
def test_sparse_maze_stays_connected(sparseness, rng):
    room = MazeGenerator(30, sparseness, rng=rng).generate(0, 0, WIDTH, HEIGHT)
    corridors = room.corridor_cells()

    reachable = corridor_component(room, corridors[0])
    assert reachable == {(cell.x, cell.y) for cell in corridors}


def test_single_cell_maze_is_solid(rng):
    room = MazeGenerator(50, 50, rng=rng).generate(0, 0, 1, 1)
    cell = room.cell_at(0, 0)
    assert cell.visited
    assert cell.is_solid


@pytest.mark.parametrize("seed", range(5))
def test_remove_all_dead_ends(seed):
    rng = random.Random(seed)
    generator = MazeGenerator(30, 70, rng=rng)
    room = generator.generate(0, 0, WIDTH, HEIGHT)
    dead_ends_before = len(room.dead_end_cells())
    assert dead_ends_before > 0

    removed = generator.remove_dead_ends(room, 100)

    assert 0 < removed <= dead_ends_before
    assert room.dead_end_cells() == []
    corridors = room.corridor_cells()
    assert corridor_component(room, corridors[0]) == {(cell.x, cell.y) for cell in corridors}
    assert_twin_consistent(room)


def test_zero_modifier_leaves_maze_untouched(rng):
    generator = MazeGenerator(30, 70, rng=rng)
    room = generator.generate(0, 0, WIDTH, HEIGHT)
    before = str(room)

    assert generator.remove_dead_ends(room, 0) == 0
    assert str(room) == before


def test_invalid_dead_end_modifier_raises(dense_maze):
    with pytest.raises(InvalidArgumentError):
        MazeGenerator(30, 0).remove_dead_ends(dense_maze, 101)


def test_same_seed_same_maze():
    first = MazeGenerator(40, 60, rng=random.Random(99)).generate(0, 0, WIDTH, HEIGHT)
    second = MazeGenerator(40, 60, rng=random.Random(99)).generate(0, 0, WIDTH, HEIGHT)
    assert str(first) == str(second)
