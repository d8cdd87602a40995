"""
Shared kinematics for circular entities moving through the maze
"""

import math
from utils.constants import TOP, RIGHT, BOTTOM, LEFT
from utils.helpers import distance


class KinematicEntity:
    """
    Circle with a position, radius and a velocity derived from direction and speed

    Player, Bullet and Bug all share this wall reflection rule.
    """
    def __init__(self, x, y, radius, speed, direction):
        self.x = x
        self.y = y
        self.radius = radius
        self.speed = speed
        self.direction = direction
        self.dx = 0.0
        self.dy = 0.0
        self.sync_velocity()

    def sync_velocity(self):
        """Rebuild (dx, dy) from direction and speed"""
        self.dx = math.cos(self.direction) * self.speed
        self.dy = math.sin(self.direction) * self.speed

    def sync_direction(self):
        """Rebuild direction from the current velocity"""
        self.direction = math.atan2(self.dy, self.dx)

    def set_direction(self, direction):
        self.direction = direction
        self.sync_velocity()

    def set_speed(self, speed):
        self.speed = speed
        self.sync_velocity()

    def wall_hits(self, maze):
        """
        Walls of the containing cell within radius of the centre

        Returns:
            List of wall bits; empty when the entity is outside the grid
        """
        cell = maze.cell_at(self.x, self.y)
        if cell is None:
            return []

        size = maze.cell_size
        relative_x = self.x % size
        relative_y = self.y % size

        hits = []
        if cell.has_wall(TOP) and relative_y <= self.radius:
            hits.append(TOP)
        if cell.has_wall(BOTTOM) and relative_y >= size - self.radius:
            hits.append(BOTTOM)
        if cell.has_wall(LEFT) and relative_x <= self.radius:
            hits.append(LEFT)
        if cell.has_wall(RIGHT) and relative_x >= size - self.radius:
            hits.append(RIGHT)
        return hits

    def apply_reflection(self, hits):
        """Point the velocity away from every wall that was hit"""
        for wall in hits:
            if wall == TOP:
                self.dy = abs(self.dy)
            elif wall == BOTTOM:
                self.dy = -abs(self.dy)
            elif wall == LEFT:
                self.dx = abs(self.dx)
            elif wall == RIGHT:
                self.dx = -abs(self.dx)

    def reflect_off_walls(self, maze):
        """Bounce off nearby walls; returns the walls that were hit"""
        hits = self.wall_hits(maze)
        if hits:
            self.apply_reflection(hits)
            self.sync_direction()
        return hits

    def advance(self):
        self.x += self.dx
        self.y += self.dy

    def distance_to(self, other):
        return distance(self.x, self.y, other.x, other.y)

    def position(self):
        return self.x, self.y
