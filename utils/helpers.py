"""
Helper utility functions for Maze Blaster
"""

import math


def clamp(value, min_value, max_value):
    """Clamp a value between min and max"""
    return max(min_value, min(value, max_value))


def distance(x1, y1, x2, y2):
    """Calculate Euclidean distance between two points"""
    return math.hypot(x2 - x1, y2 - y1)


def circles_collide(x1, y1, r1, x2, y2, r2):
    """Check if two circles overlap (touching does not count)"""
    return distance(x1, y1, x2, y2) < (r1 + r2)


def circles_touch(x1, y1, r1, x2, y2, r2):
    """Check if two circles overlap or touch"""
    return distance(x1, y1, x2, y2) <= (r1 + r2)
