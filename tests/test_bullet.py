import math

import pytest

from entities.bullet import Bullet
from maze.maze_core import MazeGrid
from utils.constants import TOP, RIGHT, BOTTOM, LEFT

from conftest import open_grid


@pytest.fixture
def walled():
    return MazeGrid(3, 3, 30)


def make_bullet(grid, settings, clock, x, y, direction):
    return Bullet(x, y, direction, grid, settings, clock)


def test_initial_values(maze, settings, clock):
    clock.advance(1234)
    bullet = make_bullet(maze, settings, clock, 150, 150, -math.pi / 2)
    assert (bullet.x, bullet.y) == (150, 150)
    assert bullet.radius == 3
    assert bullet.speed == 2
    assert bullet.direction == -math.pi / 2
    assert bullet.birth_time == 1234
    assert bullet.opacity == 1.0


def test_update_moves_by_velocity(settings, clock):
    bullet = make_bullet(open_grid(10, 10), settings, clock, 150, 150, 0.5)
    x, y = bullet.x, bullet.y
    bullet.update()
    assert bullet.x == pytest.approx(x + bullet.dx)
    assert bullet.y == pytest.approx(y + bullet.dy)


def test_bounces_off_closed_top_wall(walled, settings, clock):
    bullet = make_bullet(walled, settings, clock, 45, 45, -math.pi / 2)
    bullet.y = 32
    bullet.update()
    assert bullet.dy >= 0
    assert bullet.y > 32


@pytest.mark.parametrize("x,y,direction,open_walls", [
    (30.3, 30.3, -3 * math.pi / 4, (TOP, LEFT)),
    (59.7, 30.3, -math.pi / 4, (TOP, RIGHT)),
    (30.3, 59.7, 3 * math.pi / 4, (BOTTOM, LEFT)),
    (59.7, 59.7, math.pi / 4, (BOTTOM, RIGHT)),
])
def test_corner_bounces_resync_direction(walled, settings, clock, x, y, direction, open_walls):
    bullet = make_bullet(walled, settings, clock, x, y, direction)
    bullet.reflect_off_walls(walled)

    assert bullet.direction == math.atan2(bullet.dy, bullet.dx)
    assert bullet.direction != pytest.approx(direction)
    # Pointing back into the cell centre
    assert (45 - bullet.x) * bullet.dx > 0
    assert (45 - bullet.y) * bullet.dy > 0


def test_corner_with_open_sides_only_bounces_off_walls(settings, clock):
    grid = MazeGrid(3, 3, 30)
    cell = grid.grid[1][1]
    cell.remove_wall(TOP)
    cell.remove_wall(LEFT)
    bullet = make_bullet(grid, settings, clock, 33, 33, -3 * math.pi / 4)
    dx, dy = bullet.dx, bullet.dy

    bullet.update()
    assert (bullet.dx, bullet.dy) == (dx, dy)


def test_is_dead_after_lifetime(maze, settings, clock):
    bullet = make_bullet(maze, settings, clock, 150, 150, 0)
    assert bullet.is_dead() is False

    clock.advance(settings.bullet_lifetime)
    assert bullet.is_dead() is False

    clock.advance(1)
    assert bullet.is_dead() is True


def test_opacity_fades_linearly(maze, settings, clock):
    bullet = make_bullet(maze, settings, clock, 150, 150, 0)
    clock.advance(settings.bullet_lifetime / 2)
    assert bullet.opacity == pytest.approx(0.5)

    clock.advance(settings.bullet_lifetime)
    assert bullet.opacity == 0.0


def test_outside_grid_flies_straight(walled, settings, clock):
    bullet = make_bullet(walled, settings, clock, 45, -1, -math.pi / 2)
    bullet.update()
    assert bullet.y == pytest.approx(-3)
