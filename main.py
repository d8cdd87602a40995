"""
Maze Blaster - pygame frame driver
Arrow keys: move | Space: fire | Shift (left/right): rotate | R: reset bullets
+/-: bullet speed | [/]: bullet radius | 1/2/3: restart easy/normal/hard | N: new maze
"""

import logging

import pygame

from game.game_board import GameBoard
from game.settings import Settings
from game.sound import default_sounds
from utils.constants import (
    GAME_TITLE, FPS, CANVAS_WIDTH, CANVAS_HEIGHT, SCORE_AREA_HEIGHT,
    ROTATE_CLOCKWISE, ROTATE_COUNTER_CLOCKWISE,
    DIFFICULTY_EASY, DIFFICULTY_NORMAL, DIFFICULTY_HARD
)

logger = logging.getLogger(__name__)

MOVE_KEYS = {
    pygame.K_UP: 'move_up',
    pygame.K_DOWN: 'move_down',
    pygame.K_LEFT: 'move_left',
    pygame.K_RIGHT: 'move_right',
}

ROTATION_KEYS = {
    pygame.K_LSHIFT: ROTATE_COUNTER_CLOCKWISE,
    pygame.K_RSHIFT: ROTATE_CLOCKWISE,
}

DIFFICULTY_KEYS = {
    pygame.K_1: DIFFICULTY_EASY,
    pygame.K_2: DIFFICULTY_NORMAL,
    pygame.K_3: DIFFICULTY_HARD,
}


class MazeBlaster:
    """
    Main game class - turns pygame events into board commands and drives frames
    """
    def __init__(self):
        pygame.mixer.pre_init(frequency=44100, size=-16, channels=2, buffer=512)
        pygame.init()

        self.screen = pygame.display.set_mode((CANVAS_WIDTH, CANVAS_HEIGHT + SCORE_AREA_HEIGHT))
        pygame.display.set_caption(GAME_TITLE)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("arial", 16)
        self.sounds = default_sounds()

        self.difficulty = DIFFICULTY_NORMAL
        self.board = None
        self.new_board()
        self.running = True

    def new_board(self, difficulty=None):
        """Start a fresh arena with a new maze"""
        if difficulty is not None:
            self.difficulty = difficulty
        settings = Settings.for_difficulty(self.difficulty)
        self.board = GameBoard(settings=settings, clock=pygame.time.get_ticks, sounds=self.sounds)
        logger.info("New %s game", self.difficulty)

    def handle_event(self, event):
        board = self.board

        if event.type == pygame.QUIT:
            self.running = False

        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self.running = False
            elif event.key in MOVE_KEYS:
                getattr(board, MOVE_KEYS[event.key])()
            elif event.key == pygame.K_SPACE:
                board.fire_bullet()
            elif event.key == pygame.K_r:
                board.reset_first_bullet()
            elif event.key in ROTATION_KEYS:
                board.set_rotation(ROTATION_KEYS[event.key], True)
            elif event.key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
                board.adjust_bullet_speed(board.settings.bullet_speed + 0.5)
            elif event.key in (pygame.K_MINUS, pygame.K_KP_MINUS):
                board.adjust_bullet_speed(board.settings.bullet_speed - 0.5)
            elif event.key == pygame.K_RIGHTBRACKET:
                board.adjust_bullet_radius(board.settings.bullet_radius + 1)
            elif event.key == pygame.K_LEFTBRACKET:
                board.adjust_bullet_radius(board.settings.bullet_radius - 1)
            elif event.key in DIFFICULTY_KEYS:
                self.new_board(DIFFICULTY_KEYS[event.key])
            elif event.key == pygame.K_n:
                self.new_board()

        elif event.type == pygame.KEYUP:
            if event.key in ROTATION_KEYS:
                board.set_rotation(ROTATION_KEYS[event.key], False)

    def run(self):
        while self.running:
            self.clock.tick(FPS)

            for event in pygame.event.get():
                self.handle_event(event)

            self.board.update()
            self.board.draw(self.screen, self.font)
            pygame.display.flip()

        pygame.quit()


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    MazeBlaster().run()


if __name__ == "__main__":
    main()
