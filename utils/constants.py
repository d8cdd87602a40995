"""
Global constants for Maze Blaster
"""

import math

GAME_TITLE = "Maze Blaster"

# Screen settings
CELL_SIZE = 30
CANVAS_WIDTH = 300
CANVAS_HEIGHT = 300
ROWS = CANVAS_HEIGHT // CELL_SIZE
COLS = CANVAS_WIDTH // CELL_SIZE
FPS = 60
WALL_THICK = 1

# Score strip below the maze
SCORE_AREA_HEIGHT = 30

# Wall bit flags
TOP = 1
RIGHT = 2
BOTTOM = 4
LEFT = 8
ALL_WALLS = TOP | RIGHT | BOTTOM | LEFT

# (row offset, col offset, wall bit, opposite wall bit), in search order
DIRS = [
    (-1, 0, TOP, BOTTOM),    # up
    (0, 1, RIGHT, LEFT),     # right
    (1, 0, BOTTOM, TOP),     # down
    (0, -1, LEFT, RIGHT),    # left
]

# Offset to bit mapping
DIR_TO_BITS = {
    (-1, 0): (TOP, BOTTOM),
    (0, 1): (RIGHT, LEFT),
    (1, 0): (BOTTOM, TOP),
    (0, -1): (LEFT, RIGHT),
}

# Bullet settings (times in ms)
MAX_BULLETS = 100
BULLET_RADIUS = 3
BULLET_SPEED = 2
BULLET_LIFETIME = 10000
BULLET_FADE_STEPS = 4
BULLET_SPEED_RANGE = (0.5, 5)
BULLET_RADIUS_RANGE = (2, 8)

# Player settings
PLAYER_RADIUS = 5
PLAYER_SPEED = 5
PLAYER_START_DIRECTION = -3 * math.pi / 4
ROTATION_SPEED = math.pi / 32
PLAYER_REMOVAL_DELAY = 1000
EXIT_REMOVAL_DELAY = 500

# Bugs and nests
BUG_RADIUS = 3
BUG_SPEED = 1
BUG_SPAWN_TIME = 5000
NEST_RADIUS = 6
BUGNEST_CREATION_DELAY = 3000
BUGNEST_CREATION_INTERVAL = 20000

# Score
POINTS_PER_BUG = 10

# Rotation commands
ROTATE_CLOCKWISE = 'clockwise'
ROTATE_COUNTER_CLOCKWISE = 'counter_clockwise'

# Difficulty levels
DIFFICULTY_EASY = 'easy'
DIFFICULTY_NORMAL = 'normal'
DIFFICULTY_HARD = 'hard'
