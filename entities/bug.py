"""
Bugs and the nests that spawn them
"""

import logging
import math
import random

import pygame

from utils.constants import BUG_RADIUS, BUG_SPEED, BUG_SPAWN_TIME, NEST_RADIUS
from utils.colors import COLOR_BUG, COLOR_NEST
from utils.helpers import circles_collide, circles_touch
from entities.kinematic import KinematicEntity

logger = logging.getLogger(__name__)


class Bug(KinematicEntity):
    """
    Wandering bug

    Unlike a bullet, a bug that touches a wall also picks a fresh random
    heading, still pointed away from the walls it touched.
    """
    def __init__(self, x, y, maze, rng=None):
        self.rng = rng or random
        super().__init__(x, y, BUG_RADIUS, BUG_SPEED, self.rng.uniform(0, 2 * math.pi))
        self.maze = maze

    def update(self):
        hits = self.wall_hits(self.maze)
        if hits:
            self.set_direction(self.rng.uniform(0, 2 * math.pi))
            self.apply_reflection(hits)
            self.sync_direction()
        self.advance()

    def draw(self, surface):
        pygame.draw.circle(surface, COLOR_BUG, (round(self.x), round(self.y)), self.radius)

    def __repr__(self):
        return f"Bug(pos=({self.x:.1f},{self.y:.1f}))"


class BugNest:
    """
    Stationary spawn point placed on the route from entrance to exit
    """
    def __init__(self, maze, clock, rng=None):
        self.maze = maze
        self.clock = clock
        self.rng = rng or random
        self.bugs = []
        self.last_spawn_time = clock()
        self.radius = NEST_RADIUS

        self.cell, self.path_index = self._choose_cell()
        self.x, self.y = maze.cell_center(*self.cell)

    def _choose_cell(self):
        """
        Pick a cell from the middle third of the entrance-exit path

        Returns:
            ((row, col), path index) - the index is None for the random fallback
        """
        entrance = self.maze.entrance
        exit_row, exit_col = self.maze.exit
        path = self.maze.find_path(entrance[0], entrance[1], exit_row, exit_col)

        if path:
            start = len(path) // 3
            end = (2 * len(path)) // 3
            index = self.rng.randrange(start, end) if end > start else start
            return path[index], index

        logger.warning("No path from entrance to exit; placing nest at random")
        candidates = [(c.row, c.col) for c in self.maze.cells() if (c.row, c.col) != entrance]
        if not candidates:
            return entrance, None
        return self.rng.choice(candidates), None

    def spawn_bug(self):
        bug = Bug(self.x, self.y, self.maze, self.rng)
        self.bugs.append(bug)
        return bug

    def update(self):
        """Spawn on schedule, then move every bug"""
        now = self.clock()
        if now - self.last_spawn_time >= BUG_SPAWN_TIME:
            self.spawn_bug()
            self.last_spawn_time = now

        for bug in self.bugs:
            bug.update()

    def remove_bugs_near(self, x, y, radius):
        """
        Remove every bug touching a circle at (x, y)
        Returns number of bugs removed
        """
        before = len(self.bugs)
        self.bugs = [bug for bug in self.bugs
                     if not circles_touch(x, y, radius, bug.x, bug.y, bug.radius)]
        return before - len(self.bugs)

    def first_bug_touching(self, x, y, radius):
        """Get the first bug overlapping a circle at (x, y), or None"""
        for bug in self.bugs:
            if circles_collide(x, y, radius, bug.x, bug.y, bug.radius):
                return bug
        return None

    def draw(self, surface):
        pygame.draw.circle(surface, COLOR_NEST, (round(self.x), round(self.y)), self.radius)
        for bug in self.bugs:
            bug.draw(surface)

    def __repr__(self):
        return f"BugNest(cell={self.cell}, bugs={len(self.bugs)})"
