"""
Color palette for Maze Blaster
"""

# Background colors
COLOR_BG = (255, 255, 255)          # Maze background
COLOR_PANEL_BG = (235, 235, 235)    # Score strip

# Maze colors
COLOR_WALL = (0, 0, 0)
COLOR_VISITED_CELL = (0, 255, 0, 25)    # Tint for carved cells (with alpha)

# Text
COLOR_TEXT = (0, 0, 0)

# Player
COLOR_PLAYER = (0, 255, 0)
COLOR_PLAYER_DEAD = (255, 0, 0)
COLOR_PLAYER_ARROW = (0, 68, 0)

# Bullets
COLOR_BULLET = (255, 0, 0)

# Bugs
COLOR_BUG = (128, 0, 128)
COLOR_NEST = (165, 42, 42)
