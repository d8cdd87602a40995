"""
Bullet entity - bounces off maze walls and fades out over its lifetime
"""

import pygame

from utils.colors import COLOR_BULLET, COLOR_BG
from utils.helpers import clamp
from entities.kinematic import KinematicEntity


class Bullet(KinematicEntity):
    """
    Projectile fired from the player's position along its direction
    """
    def __init__(self, x, y, direction, maze, settings, clock):
        super().__init__(x, y, settings.bullet_radius, settings.bullet_speed, direction)
        self.maze = maze
        self.settings = settings
        self.clock = clock
        self.birth_time = clock()
        self.lifetime = settings.bullet_lifetime

    def age(self):
        """Milliseconds since the bullet was fired"""
        return self.clock() - self.birth_time

    @property
    def opacity(self):
        """Fade level in [0, 1]; drops linearly with age"""
        life_percent = self.age() / self.lifetime
        return clamp(1.0 - life_percent * self.settings.bullet_fade_steps / 4, 0.0, 1.0)

    def is_dead(self):
        return self.age() > self.lifetime

    def update(self):
        self.reflect_off_walls(self.maze)
        self.advance()

    def draw(self, surface):
        # Blend towards the background instead of using per-pixel alpha
        alpha = self.opacity
        color = tuple(round(bg + (fg - bg) * alpha) for fg, bg in zip(COLOR_BULLET, COLOR_BG))
        pygame.draw.circle(surface, color, (round(self.x), round(self.y)), round(self.radius))

    def __repr__(self):
        return f"Bullet(pos=({self.x:.1f},{self.y:.1f}), dir={self.direction:.2f})"
