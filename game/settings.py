"""
Runtime tunables and difficulty presets
"""

from utils.constants import (
    BULLET_RADIUS, BULLET_SPEED, BULLET_LIFETIME, BULLET_FADE_STEPS, MAX_BULLETS,
    PLAYER_RADIUS, PLAYER_SPEED, ROTATION_SPEED,
    DIFFICULTY_EASY, DIFFICULTY_NORMAL, DIFFICULTY_HARD
)


class Settings:
    """
    Mutable tunables for one arena

    A fresh instance is handed to each GameBoard; the bullet speed and radius
    are changed at runtime by the adjust commands.
    """
    def __init__(self, **kwargs):
        # Bullets
        self.bullet_radius = kwargs.get('bullet_radius', BULLET_RADIUS)
        self.bullet_speed = kwargs.get('bullet_speed', BULLET_SPEED)
        self.bullet_lifetime = kwargs.get('bullet_lifetime', BULLET_LIFETIME)  # ms
        self.bullet_fade_steps = kwargs.get('bullet_fade_steps', BULLET_FADE_STEPS)
        self.max_bullets = kwargs.get('max_bullets', MAX_BULLETS)

        # Player
        self.player_radius = kwargs.get('player_radius', PLAYER_RADIUS)
        self.player_speed = kwargs.get('player_speed', PLAYER_SPEED)
        self.rotation_speed = kwargs.get('rotation_speed', ROTATION_SPEED)

    @classmethod
    def for_difficulty(cls, difficulty):
        """Build settings from a named preset"""
        if difficulty not in DIFFICULTY_PRESETS:
            raise ValueError(f"Unknown difficulty: {difficulty!r}")
        return cls(**DIFFICULTY_PRESETS[difficulty])

    def __repr__(self):
        return (f"Settings(bullet_radius={self.bullet_radius}, bullet_speed={self.bullet_speed}, "
                f"player_speed={self.player_speed})")


# ========== DIFFICULTY PRESETS ==========

DIFFICULTY_PRESETS = {
    DIFFICULTY_EASY: {
        'bullet_radius': 5,
        'bullet_speed': 3,
        'bullet_lifetime': 15000,
    },
    DIFFICULTY_NORMAL: {},
    DIFFICULTY_HARD: {
        'bullet_radius': 2,
        'bullet_speed': 1.5,
        'bullet_lifetime': 6000,
        'max_bullets': 30,
    },
}
