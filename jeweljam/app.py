"""The game window: draws the current screen and feeds input to the manager."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from typing import Callable, Optional

import pygame

from jeweljam.board import (
    BOARD_HEIGHT,
    BOARD_OFFSET_X,
    BOARD_OFFSET_Y,
    BOARD_WIDTH,
    CELL_SIZE,
    NUM_COLS,
    NUM_ROWS,
)
from jeweljam.manager import Action, GameManager, Screen
from jeweljam.menu import (
    BACK_BUTTON,
    BACK_LABEL,
    BACKGROUND,
    BROWN,
    END_MENU_LABELS,
    FRAME,
    GOLDEN,
    HIGHSCORE_LABELS,
    HIGHSCORE_VALUE_POSITION,
    HOVER_BROWN,
    INSTRUCTION_LABELS,
    MAIN_MENU_BUTTONS,
    MAIN_MENU_LABELS,
    MENU_BUTTONS,
    PAUSE_BUTTON,
    PAUSE_MENU_LABELS,
    PLAY_LABELS,
    SCORE_PANEL,
    SCORE_VALUE_POSITION,
    TITLE_BAR,
    Label,
    Rect,
    bear_parts,
    button_at,
)

WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 730
WINDOW_TITLE = "Jewel Jam"
FONT_SIZE = 30
FRAMES_PER_SECOND = 60

_OUTER_BORDER = (0.5, 0.2, 0.0)
_CELL_FILL = (0.8, 0.6, 0.4)
_CELL_BORDER = (0.7, 0.5, 0.3)


def to_screen(x: float, y: float, height: float) -> tuple[float, float]:
    """Flip a point between board coordinates (y up) and window coordinates (y down)."""
    return x, height - y


def _rgb(color: Iterable[float]) -> tuple[int, ...]:
    return tuple(round(channel * 255) for channel in color)


class App:
    """Renders the game with pygame and turns window events into manager clicks."""

    def __init__(self, manager: Optional[GameManager] = None, fullscreen: bool = True) -> None:
        self.manager = manager if manager is not None else GameManager()
        self.fullscreen = fullscreen
        self.surface = pygame.Surface((WINDOW_WIDTH, WINDOW_HEIGHT))
        self.mouse: tuple[float, float] = (0.0, 0.0)
        pygame.font.init()
        self._font = pygame.font.Font(None, FONT_SIZE)
        self._painters: dict[Screen, Callable[[], None]] = {
            Screen.MAIN_MENU: self._draw_main_menu,
            Screen.PLAY: self._draw_play,
            Screen.PAUSE: self._draw_pause_menu,
            Screen.INSTRUCTIONS: self._draw_instructions,
            Screen.HIGHSCORE: self._draw_highscore,
            Screen.END: self._draw_end_menu,
        }

    @property
    def _height(self) -> int:
        return self.surface.get_height()

    # Input

    def handle_motion(self, pos: tuple[int, int]) -> None:
        """Remember where the pointer is, in board coordinates."""
        self.mouse = to_screen(pos[0], pos[1], self._height)

    def handle_mouse(self, pos: tuple[int, int]) -> Action:
        """Pass a left click at a window position on to the manager."""
        self.handle_motion(pos)
        return self.manager.handle_click(*self.mouse)

    def handle_key(self, key: int) -> bool:
        """Escape leaves full screen, then quits; returns whether to keep running."""
        if key != pygame.K_ESCAPE:
            return True
        if self.fullscreen:
            self.fullscreen = False
            return True
        return False

    # Drawing primitives

    def _to_pixels(self, rect: Rect) -> pygame.Rect:
        left, top = to_screen(rect.x, rect.y + rect.height, self._height)
        return pygame.Rect(round(left), round(top), round(rect.width), round(rect.height))

    def _fill(self, rect: Rect, color: Sequence[float]) -> None:
        pygame.draw.rect(self.surface, _rgb(color), self._to_pixels(rect))

    def _border(self, rect: Rect, color: Sequence[float], width: int = 1) -> None:
        pygame.draw.rect(self.surface, _rgb(color), self._to_pixels(rect), width)

    def _points(self, points: Iterable[tuple[float, float]]) -> list[tuple[float, float]]:
        return [to_screen(x, y, self._height) for x, y in points]

    def _text(self, text: str, x: float, y: float, color: Sequence[float]) -> None:
        image = self._font.render(text, True, _rgb(color))
        left, baseline = to_screen(x, y, self._height)
        self.surface.blit(image, (round(left), round(baseline - self._font.get_ascent())))

    def _label(self, label: Label) -> None:
        self._text(label.text, label.x, label.y, label.color)

    def _labels(self, labels: Iterable[Label]) -> None:
        for label in labels:
            self._label(label)

    def _bear(self) -> None:
        for part in bear_parts():
            points = self._points(part.points)
            if part.filled:
                pygame.draw.polygon(self.surface, _rgb(part.color), points)
            else:
                pygame.draw.lines(self.surface, _rgb(part.color), False, points, 1)

    def _frame(self) -> None:
        self.surface.fill(_rgb(BACKGROUND))
        self._border(FRAME, BROWN)
        self._fill(TITLE_BAR, BROWN)

    # Screens

    def _draw_main_menu(self) -> None:
        self._frame()
        hovered = button_at(MAIN_MENU_BUTTONS, *self.mouse)
        for index, button in enumerate(MAIN_MENU_BUTTONS):
            self._fill(button, HOVER_BROWN if index == hovered else BROWN)
        self._labels(MAIN_MENU_LABELS)
        self._bear()

    def _draw_menu(self, labels: Iterable[Label]) -> None:
        self._frame()
        for button in MENU_BUTTONS:
            self._fill(button, BROWN)
        self._labels(labels)

    def _draw_pause_menu(self) -> None:
        self._draw_menu(PAUSE_MENU_LABELS)

    def _draw_end_menu(self) -> None:
        self._draw_menu(END_MENU_LABELS)

    def _draw_instructions(self) -> None:
        self._frame()
        self._labels(INSTRUCTION_LABELS)
        self._fill(BACK_BUTTON, BROWN)
        self._label(BACK_LABEL)

    def _draw_highscore(self) -> None:
        self._frame()
        self._fill(BACK_BUTTON, BROWN)
        self._label(BACK_LABEL)
        self._labels(HIGHSCORE_LABELS)
        x, y = HIGHSCORE_VALUE_POSITION
        self._text(str(self.manager.highscore.highest_score), x, y, BROWN)

    def _draw_play(self) -> None:
        self.surface.fill(_rgb(BACKGROUND))
        outer = Rect(BOARD_OFFSET_X - 2, BOARD_OFFSET_Y - 2, BOARD_WIDTH + 4, BOARD_HEIGHT + 4)
        self._border(outer, _OUTER_BORDER, 3)
        for row in range(NUM_ROWS):
            for col in range(NUM_COLS):
                cell = Rect(
                    BOARD_OFFSET_X + col * CELL_SIZE,
                    BOARD_OFFSET_Y + row * CELL_SIZE,
                    CELL_SIZE,
                    CELL_SIZE,
                )
                self._fill(cell, _CELL_FILL)
                self._border(cell, _CELL_BORDER)
        for gem_row in self.manager.board:
            for gem in gem_row:
                if gem is not None:
                    pygame.draw.polygon(
                        self.surface, _rgb(gem.color), self._points(gem.outline())
                    )
        self._bear()
        self._fill(PAUSE_BUTTON, BROWN)
        self._fill(SCORE_PANEL, BROWN)
        self._labels(PLAY_LABELS)
        x, y = SCORE_VALUE_POSITION
        self._text(str(self.manager.board.score), x, y, GOLDEN)

    def draw(self) -> pygame.Surface:
        """Paint the manager's current screen and return the surface drawn on."""
        self._painters[self.manager.screen]()
        return self.surface

    # Main loop

    def _open_window(self) -> None:
        flags = pygame.FULLSCREEN if self.fullscreen else 0
        self.surface = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT), flags)

    def run(self) -> None:
        """Open the window and process events until the player quits."""
        pygame.init()
        try:
            pygame.display.set_caption(WINDOW_TITLE)
            self._open_window()
            clock = pygame.time.Clock()
            running = True
            while running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type == pygame.KEYDOWN:
                        was_fullscreen = self.fullscreen
                        running = self.handle_key(event.key)
                        if running and was_fullscreen != self.fullscreen:
                            self._open_window()
                    elif event.type == pygame.MOUSEMOTION:
                        self.handle_motion(event.pos)
                    elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                        if self.handle_mouse(event.pos) is Action.QUIT:
                            running = False
                    if not running:
                        break
                if running:
                    self.draw()
                    pygame.display.flip()
                    clock.tick(FRAMES_PER_SECOND)
        finally:
            pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="jeweljam", description="A match-3 puzzle game.")
    parser.add_argument(
        "--windowed", action="store_true", help="start in a window instead of full screen"
    )
    args = parser.parse_args(argv)
    App(GameManager(), fullscreen=not args.windowed).run()
    return 0