import math
import random

import pytest

from entities.bug import Bug, BugNest
from maze.maze_core import MazeGrid, find_path
from utils.constants import BUG_SPAWN_TIME, BUG_SPEED, BUG_RADIUS

from conftest import open_grid


def test_bug_starts_with_random_heading_at_bug_speed(maze, rng):
    bug = Bug(100, 100, maze, rng)
    assert bug.radius == BUG_RADIUS
    assert math.hypot(bug.dx, bug.dy) == pytest.approx(BUG_SPEED)
    assert 0 <= bug.direction < 2 * math.pi


def test_bug_bounce_picks_new_heading_away_from_wall():
    grid = MazeGrid(3, 3, 30)
    for seed in range(20):
        bug = Bug(45, 32, grid, random.Random(seed))
        bug.set_direction(-math.pi / 2)
        bug.update()

        assert bug.dy >= 0
        assert math.hypot(bug.dx, bug.dy) == pytest.approx(BUG_SPEED)
        assert bug.direction == pytest.approx(math.atan2(bug.dy, bug.dx))


def test_bug_bounce_is_not_plain_reflection():
    grid = MazeGrid(3, 3, 30)
    headings = set()
    for seed in range(10):
        bug = Bug(45, 32, grid, random.Random(seed))
        bug.set_direction(-math.pi / 2)
        bug.update()
        headings.add(round(bug.direction, 6))
    assert len(headings) > 1


def test_bug_without_wall_keeps_heading():
    grid = open_grid(3, 3)
    bug = Bug(45, 45, grid, random.Random(0))
    heading = bug.direction
    bug.update()
    assert bug.direction == heading


def test_nest_sits_in_middle_third_of_route(clock):
    grid = open_grid(5, 5)
    path = find_path(grid, 4, 4, 0, 0)
    assert len(path) == 9

    for seed in range(30):
        nest = BugNest(grid, clock, random.Random(seed))
        assert 3 <= nest.path_index < 6
        assert nest.cell == path[nest.path_index]
        assert (nest.x, nest.y) == grid.cell_center(*nest.cell)


def test_nest_on_generated_maze_is_on_route(maze, clock, rng):
    nest = BugNest(maze, clock, rng)
    path = maze.find_path(9, 9, 0, 0)
    assert nest.cell in path
    assert len(path) // 3 <= nest.path_index < 2 * len(path) // 3


def test_nest_falls_back_when_no_route(clock):
    grid = MazeGrid(3, 3, 30)
    for seed in range(20):
        nest = BugNest(grid, clock, random.Random(seed))
        assert nest.path_index is None
        assert nest.cell != grid.entrance
        assert grid.in_bounds(*nest.cell)


def test_nest_spawns_on_schedule(maze, clock, rng):
    nest = BugNest(maze, clock, rng)

    clock.advance(BUG_SPAWN_TIME - 1)
    nest.update()
    assert nest.bugs == []

    clock.advance(1)
    nest.update()
    assert len(nest.bugs) == 1

    clock.advance(BUG_SPAWN_TIME - 1)
    nest.update()
    assert len(nest.bugs) == 1

    clock.advance(1)
    nest.update()
    assert len(nest.bugs) == 2


def test_spawned_bug_starts_at_nest(maze, clock, rng):
    nest = BugNest(maze, clock, rng)
    bug = nest.spawn_bug()
    assert (bug.x, bug.y) == (nest.x, nest.y)


def test_remove_bugs_near_is_inclusive(maze, clock, rng):
    nest = BugNest(maze, clock, rng)
    nest.bugs = [Bug(100, 100, maze, rng), Bug(200, 200, maze, rng)]

    assert nest.remove_bugs_near(106, 100, 3) == 1
    assert [(b.x, b.y) for b in nest.bugs] == [(200, 200)]
    assert nest.remove_bugs_near(106, 100, 3) == 0


def test_first_bug_touching_is_strict(maze, clock, rng):
    nest = BugNest(maze, clock, rng)
    bug = Bug(100, 100, maze, rng)
    nest.bugs = [bug]

    assert nest.first_bug_touching(108, 100, 5) is None
    assert nest.first_bug_touching(107.9, 100, 5) is bug
