import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from maze.maze_core import MazeGrid, carve_passage, shared_walls
from maze.generator import build_maze
from game.settings import Settings
from game.sound import silent_sounds


class FakeClock:
    """Millisecond clock advanced by hand"""
    def __init__(self, now=0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, ms):
        self.now += ms


class RecordingCue:
    def __init__(self):
        self.plays = 0

    def play(self):
        self.plays += 1


class BrokenCue:
    def play(self):
        raise RuntimeError("no audio device")


def open_grid(rows, cols, cell_size=30):
    """Grid with every inner wall carved and entrance/exit open"""
    grid = MazeGrid(rows, cols, cell_size)
    for row in range(rows):
        for col in range(cols):
            grid.grid[row][col].visited = True
            if col + 1 < cols:
                carve_passage(grid, (row, col), (row, col + 1))
            if row + 1 < rows:
                carve_passage(grid, (row, col), (row + 1, col))
    return grid


def close_passage(grid, a, b):
    """Put back the wall between two adjacent cells (both sides)"""
    walls = shared_walls(a, b)
    if walls is None:
        return
    (arow, acol), (brow, bcol) = a, b
    grid.grid[arow][acol].add_wall(walls[0])
    grid.grid[brow][bcol].add_wall(walls[1])


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def maze(rng):
    return build_maze(10, 10, 30, rng=rng)


@pytest.fixture
def sounds():
    return {'kill': RecordingCue(), 'exit': RecordingCue(), 'death': RecordingCue()}


@pytest.fixture
def quiet_sounds():
    return silent_sounds()
