"""
Game board - owns the maze and every live entity and runs one tick at a time
"""

import logging
import math
import random

import pygame

from utils.constants import (
    TOP, RIGHT, BOTTOM, LEFT,
    BUGNEST_CREATION_DELAY, BUGNEST_CREATION_INTERVAL, POINTS_PER_BUG,
    BULLET_SPEED_RANGE, BULLET_RADIUS_RANGE, WALL_THICK,
    ROTATE_CLOCKWISE, ROTATE_COUNTER_CLOCKWISE
)
from utils.colors import COLOR_BG, COLOR_WALL, COLOR_VISITED_CELL, COLOR_PANEL_BG, COLOR_TEXT
from utils.helpers import clamp
from maze.generator import build_maze
from entities.player import Player
from entities.bullet import Bullet
from entities.bug import BugNest
from game.settings import Settings
from game.sound import default_sounds, play_cue

logger = logging.getLogger(__name__)


def draw_maze(surface, maze):
    """Draw visited-cell tint and maze walls"""
    size = maze.cell_size
    tint = pygame.Surface((size, size), pygame.SRCALPHA)
    tint.fill(COLOR_VISITED_CELL)

    for cell in maze.cells():
        if cell.visited:
            surface.blit(tint, (cell.col * size, cell.row * size))

    # Walls go on top of every tint
    for cell in maze.cells():
        x0 = cell.col * size
        y0 = cell.row * size
        x1 = x0 + size
        y1 = y0 + size

        if cell.has_wall(TOP):
            pygame.draw.line(surface, COLOR_WALL, (x0, y0), (x1, y0), WALL_THICK)
        if cell.has_wall(RIGHT):
            pygame.draw.line(surface, COLOR_WALL, (x1, y0), (x1, y1), WALL_THICK)
        if cell.has_wall(BOTTOM):
            pygame.draw.line(surface, COLOR_WALL, (x0, y1), (x1, y1), WALL_THICK)
        if cell.has_wall(LEFT):
            pygame.draw.line(surface, COLOR_WALL, (x0, y0), (x0, y1), WALL_THICK)


class GameBoard:
    """
    Arena controller

    One update() call is one frame: nest scheduling, rotation, movement of
    bullets and bugs, then collision resolution and scoring.
    """
    def __init__(self, settings=None, clock=None, rng=None, maze=None, sounds=None, seed=None):
        """
        Args:
            settings: Settings for this arena (a fresh default one if None)
            clock: Zero-argument callable returning milliseconds
            rng: Random generator shared by maze carving, nests and bugs
            maze: Pre-built MazeGrid; generated when None
            sounds: Dict with 'kill', 'exit' and 'death' cues
            seed: Seed for a private random generator when rng is None
        """
        self.settings = settings or Settings()
        self.clock = clock or pygame.time.get_ticks
        if rng is None:
            rng = random.Random(seed) if seed is not None else random
        self.rng = rng
        self.maze = maze or build_maze(rng=rng)
        self.sounds = sounds if sounds is not None else default_sounds()

        self.player = Player(self.maze, self.settings, self.clock,
                             exit_sound=self.sounds.get('exit'),
                             death_sound=self.sounds.get('death'))
        self.bullets = []
        self.bug_nests = []
        self.rotation_state = {
            ROTATE_CLOCKWISE: False,
            ROTATE_COUNTER_CLOCKWISE: False,
        }
        self.score = 0

        self.start_time = self.clock()
        self.last_nest_time = None

    # ========== COMMANDS ==========

    def move_up(self):
        return self._move(0, -1)

    def move_down(self):
        return self._move(0, 1)

    def move_left(self):
        return self._move(-1, 0)

    def move_right(self):
        return self._move(1, 0)

    def _move(self, dx, dy):
        if self.player.is_dead or self.player.is_removed:
            return False
        return self.player.move(dx, dy)

    def fire_bullet(self):
        """
        Fire from the player's position along its direction
        Returns the new Bullet, or None when firing is not possible
        """
        if not self.player.can_fire:
            return None
        if len(self.bullets) >= self.settings.max_bullets:
            return None
        bullet = self._new_bullet()
        self.bullets.append(bullet)
        return bullet

    fire = fire_bullet

    def reset_first_bullet(self):
        """Drop every live bullet and start again with a single one"""
        if not self.player.can_fire:
            return None
        bullet = self._new_bullet()
        self.bullets = [bullet]
        return bullet

    def _new_bullet(self):
        return Bullet(self.player.x, self.player.y, self.player.direction,
                      self.maze, self.settings, self.clock)

    def set_rotation(self, direction, held):
        """Press or release one of the rotation controls"""
        if direction not in self.rotation_state:
            raise ValueError(f"Unknown rotation direction: {direction!r}")
        self.rotation_state[direction] = bool(held)

    def adjust_bullet_speed(self, value):
        """Set bullet speed (clamped) for new and live bullets"""
        speed = self._coerce_tunable(value, BULLET_SPEED_RANGE, 'bullet speed')
        if speed is None:
            return self.settings.bullet_speed

        self.settings.bullet_speed = speed
        for bullet in self.bullets:
            bullet.direction = math.atan2(bullet.dy, bullet.dx)
            bullet.set_speed(speed)
        return speed

    def adjust_bullet_radius(self, value):
        """Set bullet radius (clamped) for new and live bullets"""
        radius = self._coerce_tunable(value, BULLET_RADIUS_RANGE, 'bullet radius')
        if radius is None:
            return self.settings.bullet_radius

        self.settings.bullet_radius = radius
        for bullet in self.bullets:
            bullet.radius = radius
        return radius

    def _coerce_tunable(self, value, value_range, name):
        try:
            number = float(value)
        except (TypeError, ValueError):
            logger.debug("Ignoring non-numeric %s: %r", name, value)
            return None
        if math.isnan(number):
            logger.debug("Ignoring NaN %s", name)
            return None

        clamped = clamp(number, *value_range)
        if clamped != number:
            logger.debug("Clamped %s %s to %s", name, number, clamped)
        return clamped

    # ========== UPDATE ==========

    def update(self):
        """Advance the arena by one frame"""
        self.check_nest_creation()

        if self.rotation_state[ROTATE_CLOCKWISE]:
            self.player.rotate_clockwise()
        if self.rotation_state[ROTATE_COUNTER_CLOCKWISE]:
            self.player.rotate_counter_clockwise()

        for bullet in self.bullets:
            bullet.update()

        for nest in self.bug_nests:
            nest.update()

        self.check_bullet_exit()
        self.check_bullet_bug_collisions()
        self.check_player_bug_collisions()

        self.player.update()

    def check_nest_creation(self):
        """Create the first nest after a delay, then one per interval"""
        if not self.player.is_active:
            return None

        now = self.clock()
        if self.last_nest_time is None:
            due = now - self.start_time >= BUGNEST_CREATION_DELAY
        else:
            due = now - self.last_nest_time >= BUGNEST_CREATION_INTERVAL
        if not due:
            return None

        nest = BugNest(self.maze, self.clock, self.rng)
        self.bug_nests.append(nest)
        self.last_nest_time = now
        logger.info("Bug nest %d created at cell %s", len(self.bug_nests), nest.cell)
        return nest

    def check_bullet_exit(self):
        """Drop bullets that expired or left through the top edge"""
        self.bullets = [bullet for bullet in self.bullets
                        if bullet.y >= 0 and not bullet.is_dead()]

    def check_bullet_bug_collisions(self):
        """
        Remove bugs hit by bullets, score them and drop the bullets that hit

        A bullet checks every nest before it is spent, so it can kill several
        bugs in one tick.
        Returns number of bugs killed this tick
        """
        total = 0
        spent = set()
        for bullet in self.bullets:
            for nest in self.bug_nests:
                killed = nest.remove_bugs_near(bullet.x, bullet.y, bullet.radius)
                if not killed:
                    continue
                spent.add(bullet)
                total += killed
                self.score += killed * POINTS_PER_BUG
                for _ in range(killed):
                    play_cue(self.sounds.get('kill'), 'bug kill')

        if spent:
            self.bullets = [bullet for bullet in self.bullets if bullet not in spent]
        return total

    def check_player_bug_collisions(self):
        """Kill the player on the first bug found touching it"""
        player = self.player
        if player.is_dead or player.is_removed:
            return False

        for nest in self.bug_nests:
            if nest.first_bug_touching(player.x, player.y, player.radius):
                player.die()
                return True
        return False

    # ========== QUERIES ==========

    def total_bugs(self):
        return sum(len(nest.bugs) for nest in self.bug_nests)

    def is_over(self):
        return self.player.is_removed

    # ========== DRAW ==========

    def draw(self, surface, font=None):
        """Paint the current state; the score strip needs a font"""
        surface.fill(COLOR_BG)
        draw_maze(surface, self.maze)

        for nest in self.bug_nests:
            nest.draw(surface)

        self.player.draw(surface)

        for bullet in self.bullets:
            bullet.draw(surface)

        if font is not None:
            panel_y = self.maze.height
            pygame.draw.rect(surface, COLOR_PANEL_BG,
                             (0, panel_y, self.maze.width, surface.get_height() - panel_y))
            text = font.render(f"Score: {self.score}", True, COLOR_TEXT)
            surface.blit(text, (10, panel_y + 6))

    def __repr__(self):
        return (f"GameBoard(score={self.score}, bullets={len(self.bullets)}, "
                f"nests={len(self.bug_nests)}, bugs={self.total_bugs()})")
