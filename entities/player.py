"""
Player entity - a circle steered through the maze towards the exit
"""

import logging
import math
from enum import Enum, auto

import pygame

from utils.constants import (
    TOP, RIGHT, BOTTOM, LEFT,
    PLAYER_START_DIRECTION, PLAYER_REMOVAL_DELAY, EXIT_REMOVAL_DELAY
)
from utils.colors import COLOR_PLAYER, COLOR_PLAYER_DEAD, COLOR_PLAYER_ARROW
from entities.kinematic import KinematicEntity
from game.sound import play_cue

logger = logging.getLogger(__name__)


class PlayerState(Enum):
    """Player lifecycle states"""
    ACTIVE = auto()
    EXITING = auto()
    DEAD = auto()
    REMOVED = auto()


class Player(KinematicEntity):
    """
    Player with step movement, rotation and an exit/death lifecycle

    Removal after exiting or dying is deferred: it is scheduled on the clock
    and performed by update() or complete_removal().
    """
    def __init__(self, maze, settings, clock, exit_sound=None, death_sound=None):
        row, col = maze.entrance
        x, y = maze.cell_center(row, col)
        super().__init__(x, y, settings.player_radius, 0, PLAYER_START_DIRECTION)

        self.maze = maze
        self.settings = settings
        self.clock = clock
        self.move_speed = settings.player_speed
        self.color = COLOR_PLAYER
        self.arrow_length = self.radius * 1.5

        self.exit_sound = exit_sound
        self.death_sound = death_sound

        # Lifecycle
        self.has_exited = False
        self.is_dead = False
        self.is_removed = False
        self.removal_due = None  # clock time (ms) of the pending removal
        self.moves = 0

    @property
    def state(self):
        if self.is_removed:
            return PlayerState.REMOVED
        if self.is_dead:
            return PlayerState.DEAD
        if self.has_exited:
            return PlayerState.EXITING
        return PlayerState.ACTIVE

    @property
    def is_active(self):
        """Still inside the maze and alive"""
        return not (self.is_dead or self.is_removed or self.has_exited)

    @property
    def can_fire(self):
        return not (self.is_dead or self.is_removed)

    def can_move(self, new_x, new_y):
        """
        Check if the player may move its centre to (new_x, new_y)

        Reaching the top-left cell counts as leaving the maze; after that every
        move is allowed.
        """
        if self.has_exited:
            return True

        r = self.radius
        size = self.maze.cell_size
        left, right = new_x - r, new_x + r
        top, bottom = new_y - r, new_y + r

        # Any part of the circle outside the arena
        if left < 0 or right > self.maze.width or top < 0 or bottom > self.maze.height:
            return False

        corners = {
            self.maze.cell_coords_at(left, top),
            self.maze.cell_coords_at(right, top),
            self.maze.cell_coords_at(left, bottom),
            self.maze.cell_coords_at(right, bottom),
        }
        for row, col in corners:
            cell = self.maze.cell(row, col)
            if cell is None:
                continue

            relative_x = new_x - col * size
            relative_y = new_y - row * size

            if cell.has_wall(TOP) and abs(relative_y) <= r:
                return False
            if cell.has_wall(BOTTOM) and abs(relative_y - size) <= r:
                return False
            if cell.has_wall(LEFT) and abs(relative_x) <= r:
                return False
            if cell.has_wall(RIGHT) and abs(relative_x - size) <= r:
                return False

        if new_y <= size and new_x <= size:
            self.exit_maze()
        return True

    def move(self, dx, dy):
        """
        Step by (dx, dy) * move_speed
        Returns True if move was accepted
        """
        new_x = self.x + dx * self.move_speed
        new_y = self.y + dy * self.move_speed

        if self.can_move(new_x, new_y):
            self.x = new_x
            self.y = new_y
            self.moves += 1
            return True
        return False

    def rotate_clockwise(self):
        self.direction += self.settings.rotation_speed

    def rotate_counter_clockwise(self):
        self.direction -= self.settings.rotation_speed

    def exit_maze(self):
        """Mark the player as having left through the exit"""
        if self.has_exited:
            return
        self.has_exited = True
        logger.info("Player reached the exit after %d moves", self.moves)
        play_cue(self.exit_sound, 'exit')
        self._schedule_removal(EXIT_REMOVAL_DELAY)

    def die(self):
        """
        Kill the player; repeated calls have no further effect
        Returns True if this call killed the player
        """
        if self.is_dead or self.is_removed:
            return False
        self.is_dead = True
        self.color = COLOR_PLAYER_DEAD
        logger.info("Player died at (%.1f, %.1f)", self.x, self.y)
        play_cue(self.death_sound, 'death')
        self._schedule_removal(PLAYER_REMOVAL_DELAY)
        return True

    def _schedule_removal(self, delay):
        due = self.clock() + delay
        if self.removal_due is None or due < self.removal_due:
            self.removal_due = due

    def complete_removal(self):
        """Finish a pending exit or death"""
        if self.is_removed:
            return
        self.is_removed = True
        self.removal_due = None
        logger.info("Player removed (%s)", "dead" if self.is_dead else "exited")

    def update(self):
        """Perform the pending removal once its time has come"""
        if self.removal_due is not None and self.clock() >= self.removal_due:
            self.complete_removal()

    def draw(self, surface):
        """Render player circle and direction arrow"""
        if self.is_removed:
            return

        center = (round(self.x), round(self.y))
        pygame.draw.circle(surface, self.color, center, self.radius)

        end_x = self.x + math.cos(self.direction) * self.arrow_length
        end_y = self.y + math.sin(self.direction) * self.arrow_length
        pygame.draw.line(surface, COLOR_PLAYER_ARROW, center, (round(end_x), round(end_y)), 2)

    def __repr__(self):
        return f"Player(pos=({self.x:.1f},{self.y:.1f}), state={self.state.name})"
