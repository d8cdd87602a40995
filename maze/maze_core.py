"""
Core maze structures - cells, grid, carving helpers and pathfinding
"""

from collections import deque
from utils.constants import (
    TOP, RIGHT, BOTTOM, LEFT, ALL_WALLS, DIRS, DIR_TO_BITS, CELL_SIZE
)

OPPOSITE_WALL = {
    TOP: BOTTOM,
    RIGHT: LEFT,
    BOTTOM: TOP,
    LEFT: RIGHT,
}


def opposite_wall(wall):
    """Get the wall facing the given one from the neighbouring cell"""
    return OPPOSITE_WALL[wall]


class Cell:
    """
    One grid unit with four walls stored as a bitmask
    """
    def __init__(self, row, col):
        self.row = row
        self.col = col
        self.walls = ALL_WALLS
        self.visited = False

    def has_wall(self, wall):
        """Check if a wall is present on the given side"""
        return (self.walls & wall) != 0

    def remove_wall(self, wall):
        self.walls &= ~wall

    def add_wall(self, wall):
        self.walls |= wall

    def open_sides(self):
        """Count number of open sides in the cell"""
        return sum(1 for wall in (TOP, RIGHT, BOTTOM, LEFT) if not self.has_wall(wall))

    def __repr__(self):
        return f"Cell({self.row},{self.col}, walls={self.walls:04b})"


class MazeGrid:
    """
    Maze grid with wall-based representation

    The entrance is the bottom-right cell (opened on its bottom side) and the
    exit is the top-left cell (opened on its top side).
    """
    def __init__(self, rows, cols, cell_size=CELL_SIZE):
        if rows < 1 or cols < 1:
            raise ValueError(f"maze needs at least one cell, got {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        self.cell_size = cell_size
        self.width = cols * cell_size
        self.height = rows * cell_size
        self.grid = []
        self.setup_grid()

    @property
    def entrance(self):
        return self.rows - 1, self.cols - 1

    @property
    def exit(self):
        return 0, 0

    def setup_grid(self):
        """Fill the grid with fully walled, unvisited cells"""
        self.grid = [[Cell(row, col) for col in range(self.cols)] for row in range(self.rows)]

    def in_bounds(self, row, col):
        """Check if coordinates are within grid bounds"""
        return 0 <= row < self.rows and 0 <= col < self.cols

    def cell(self, row, col):
        """Get cell at grid coordinates, or None outside the grid"""
        if not self.in_bounds(row, col):
            return None
        return self.grid[row][col]

    def cell_coords_at(self, x, y):
        """Convert pixel position to (row, col)"""
        return int(y // self.cell_size), int(x // self.cell_size)

    def cell_at(self, x, y):
        """Get the cell containing a pixel position, or None outside the grid"""
        row, col = self.cell_coords_at(x, y)
        return self.cell(row, col)

    def cell_center(self, row, col):
        """Pixel coordinates of the centre of a cell"""
        half = self.cell_size / 2
        return col * self.cell_size + half, row * self.cell_size + half

    def cells(self):
        for row in self.grid:
            yield from row

    def carved_edges(self):
        """Count inter-cell passages (each counted once)"""
        count = 0
        for cell in self.cells():
            if cell.col + 1 < self.cols and not cell.has_wall(RIGHT):
                count += 1
            if cell.row + 1 < self.rows and not cell.has_wall(BOTTOM):
                count += 1
        return count

    def find_path(self, start_row, start_col, end_row, end_col):
        return find_path(self, start_row, start_col, end_row, end_col)

    def __repr__(self):
        return f"MazeGrid({self.rows}x{self.cols}, cell_size={self.cell_size})"


def neighbor_dirs(grid, row, col):
    """Get valid neighbour coordinates and wall bits around a cell"""
    res = []
    for drow, dcol, wall_bit, opp_bit in DIRS:
        nrow, ncol = row + drow, col + dcol
        if grid.in_bounds(nrow, ncol):
            res.append((nrow, ncol, wall_bit, opp_bit))
    return res


def shared_walls(a, b):
    """
    Get the (wall of a, wall of b) pair separating two adjacent cells
    Returns None when the cells are not neighbours
    """
    (arow, acol), (brow, bcol) = a, b
    bits = DIR_TO_BITS.get((brow - arow, bcol - acol))
    if bits is None:
        return None
    wall_bit = bits[0]
    return wall_bit, opposite_wall(wall_bit)


def carve_passage(grid, a, b):
    """Carve a passage between two adjacent cells (both sides)"""
    walls = shared_walls(a, b)
    if walls is None:
        return
    (arow, acol), (brow, bcol) = a, b
    grid.grid[arow][acol].remove_wall(walls[0])
    grid.grid[brow][bcol].remove_wall(walls[1])


def is_open_between(grid, a, b):
    """Check if passage is open between two adjacent cells, from both sides"""
    (arow, acol), (brow, bcol) = a, b
    walls = shared_walls(a, b)
    if walls is None or not grid.in_bounds(arow, acol) or not grid.in_bounds(brow, bcol):
        return False
    return (not grid.grid[arow][acol].has_wall(walls[0])
            and not grid.grid[brow][bcol].has_wall(walls[1]))


def neighbors_open(grid, row, col):
    """Get list of neighbour cells reachable through open walls"""
    res = []
    for nrow, ncol, _, _ in neighbor_dirs(grid, row, col):
        if is_open_between(grid, (row, col), (nrow, ncol)):
            res.append((nrow, ncol))
    return res


# ========== PATHFINDING ==========

def reconstruct_path(prev, goal):
    """Reconstruct path from prev dictionary"""
    path = []
    cur = goal
    while cur is not None:
        path.append(cur)
        cur = prev[cur]
    path.reverse()
    return path


def find_path(grid, start_row, start_col, end_row, end_col):
    """
    BFS shortest path between two cells

    Returns:
        List of (row, col) from start to end inclusive, or None when either
        end is outside the grid or no open passage connects them
    """
    if not grid.in_bounds(start_row, start_col) or not grid.in_bounds(end_row, end_col):
        return None

    start = (start_row, start_col)
    goal = (end_row, end_col)
    if start == goal:
        return [start]

    q = deque([start])
    prev = {start: None}

    while q:
        row, col = q.popleft()
        for n in neighbors_open(grid, row, col):
            if n not in prev:
                prev[n] = (row, col)
                if n == goal:
                    return reconstruct_path(prev, goal)
                q.append(n)
    return None
