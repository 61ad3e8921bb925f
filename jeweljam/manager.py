"""Screen flow of the game: which screen is shown and what a click does there."""

from __future__ import annotations

from enum import Enum, auto
from typing import Callable, Optional

from jeweljam.board import GameBoard, Position
from jeweljam.menu import (
    BACK_BUTTON,
    MAIN_MENU_BUTTONS,
    MENU_BUTTONS,
    PAUSE_BUTTON,
    button_at,
)
from jeweljam.player import Highscore, Player

DEFAULT_PLAYER_NAME = "Player"


class Screen(Enum):
    MAIN_MENU = auto()
    PLAY = auto()
    PAUSE = auto()
    INSTRUCTIONS = auto()
    HIGHSCORE = auto()
    END = auto()


class Action(Enum):
    """What a click did, so the caller knows whether to redraw or stop."""

    NONE = auto()
    NAVIGATE = auto()
    SELECT = auto()
    SWAP = auto()
    QUIT = auto()


class GameManager:
    """Owns the board and the high score and moves between screens on clicks."""

    def __init__(
        self, board: Optional[GameBoard] = None, highscore: Optional[Highscore] = None
    ) -> None:
        self.board = board if board is not None else GameBoard()
        self.highscore = (
            highscore if highscore is not None else Highscore(Player(DEFAULT_PLAYER_NAME, 0))
        )
        self.screen = Screen.MAIN_MENU
        self.selected: Optional[Position] = None
        self._handlers: dict[Screen, Callable[[float, float], Action]] = {
            Screen.MAIN_MENU: self._main_menu_click,
            Screen.PLAY: self._play_click,
            Screen.PAUSE: self._pause_click,
            Screen.INSTRUCTIONS: self._info_click,
            Screen.HIGHSCORE: self._info_click,
            Screen.END: self._end_click,
        }

    def handle_click(self, x: float, y: float) -> Action:
        """React to a left click at a point in board coordinates (y grows upward)."""
        return self._handlers[self.screen](x, y)

    def check_end(self) -> bool:
        return self.screen is Screen.END

    def _navigate(self, screen: Screen) -> Action:
        self.screen = screen
        return Action.NAVIGATE

    def _save_progress(self) -> None:
        self.highscore.player.score = self.board.score
        self.highscore.save_progress()

    def _save_high_score(self) -> None:
        if self.highscore.update_score(self.highscore.player):
            self.highscore.save_high_score()

    def _main_menu_click(self, x: float, y: float) -> Action:
        choice = button_at(MAIN_MENU_BUTTONS, x, y)
        if choice == 0:
            return self._navigate(Screen.PLAY)
        if choice == 1:
            return self._navigate(Screen.INSTRUCTIONS)
        if choice == 2:
            self.highscore.load_high_score()
            return self._navigate(Screen.HIGHSCORE)
        if choice == 3:
            self._save_progress()
            self._save_high_score()
            return Action.QUIT
        return Action.NONE

    def _play_click(self, x: float, y: float) -> Action:
        if PAUSE_BUTTON.contains(x, y):
            return self._navigate(Screen.PAUSE)
        cell = self.board.cell_at(x, y)
        if cell is None:
            return Action.NONE
        if self.selected is None:
            self.selected = cell
            return Action.SELECT
        first, self.selected = self.selected, None
        self.board.swap_gems(*first, *cell)
        self.board.check_and_remove_matches()
        if self.board.score < 0:
            self.screen = Screen.END
        return Action.SWAP

    def _pause_click(self, x: float, y: float) -> Action:
        choice = button_at(MENU_BUTTONS, x, y)
        if choice == 0:
            return self._navigate(Screen.PLAY)
        if choice == 1:
            self._save_progress()
            self._save_high_score()
            self.board.score = 0
            self.selected = None
            return self._navigate(Screen.PLAY)
        if choice == 2:
            return self._navigate(Screen.MAIN_MENU)
        return Action.NONE

    def _info_click(self, x: float, y: float) -> Action:
        if BACK_BUTTON.contains(x, y):
            return self._navigate(Screen.MAIN_MENU)
        return Action.NONE

    def _end_click(self, x: float, y: float) -> Action:
        choice = button_at(MENU_BUTTONS, x, y)
        if choice == 0:
            self.board.score = 0
            self.selected = None
            return self._navigate(Screen.PLAY)
        if choice == 1:
            return self._navigate(Screen.MAIN_MENU)
        if choice == 2:
            self._save_progress()
            return Action.QUIT
        return Action.NONE