"""
Maze generation - randomized depth-first backtracking
"""

import logging
import random
from utils.constants import DIRS, TOP, BOTTOM, ROWS, COLS, CELL_SIZE
from maze.maze_core import MazeGrid, carve_passage

logger = logging.getLogger(__name__)


def generate_maze(grid, rng=None, row=0, col=0):
    """
    Carve a perfect maze by recursive backtracking, starting at (row, col)

    Recursion depth grows with rows * cols; use generate_maze_iterative() for
    large grids.
    """
    rng = rng or random
    grid.grid[row][col].visited = True

    directions = list(DIRS)
    rng.shuffle(directions)

    for drow, dcol, _, _ in directions:
        nrow, ncol = row + drow, col + dcol
        if grid.in_bounds(nrow, ncol) and not grid.grid[nrow][ncol].visited:
            carve_passage(grid, (row, col), (nrow, ncol))
            generate_maze(grid, rng, nrow, ncol)


def generate_maze_iterative(grid, rng=None):
    """
    Depth-first backtracker with an explicit stack instead of recursion

    Each cell keeps its own shuffled direction list, so a given rng state
    carves the same maze as generate_maze().
    """
    rng = rng or random

    def shuffled():
        directions = list(DIRS)
        rng.shuffle(directions)
        return directions

    grid.grid[0][0].visited = True
    stack = [(0, 0, shuffled())]

    while stack:
        row, col, pending = stack[-1]

        while pending:
            drow, dcol, _, _ = pending.pop(0)
            nrow, ncol = row + drow, col + dcol
            if grid.in_bounds(nrow, ncol) and not grid.grid[nrow][ncol].visited:
                carve_passage(grid, (row, col), (nrow, ncol))
                grid.grid[nrow][ncol].visited = True
                stack.append((nrow, ncol, shuffled()))
                break
        else:
            stack.pop()


def create_entrance_and_exit(grid):
    """Open the entrance (bottom of bottom-right cell) and exit (top of top-left cell)"""
    entrance_row, entrance_col = grid.entrance
    exit_row, exit_col = grid.exit
    grid.grid[entrance_row][entrance_col].remove_wall(BOTTOM)
    grid.grid[exit_row][exit_col].remove_wall(TOP)


def build_maze(rows=ROWS, cols=COLS, cell_size=CELL_SIZE, seed=None, rng=None, iterative=False):
    """
    Allocate, carve and open a maze

    Args:
        rows, cols: Grid dimensions
        cell_size: Cell size in pixels
        seed: Optional seed for a private random generator
        rng: Random generator to use (overrides seed)
        iterative: If True, carve with the explicit-stack backtracker

    Returns:
        MazeGrid ready for play
    """
    if rng is None:
        rng = random.Random(seed) if seed is not None else random

    grid = MazeGrid(rows, cols, cell_size)
    if iterative:
        generate_maze_iterative(grid, rng)
    else:
        generate_maze(grid, rng)
    create_entrance_and_exit(grid)

    logger.debug("Generated %dx%d maze (seed=%s)", rows, cols, seed)
    return grid
