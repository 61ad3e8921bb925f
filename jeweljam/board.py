"""The 8x8 board of gems and the rules for matching and swapping them."""

from __future__ import annotations

import random
from collections.abc import Iterator
from typing import Optional

from jeweljam.gems import Circle, Diamond, Gem, Pentagon, Square, Triangle

NUM_ROWS = 8
NUM_COLS = 8
CELL_SIZE = 60.0
BOARD_WIDTH = NUM_COLS * CELL_SIZE
BOARD_HEIGHT = NUM_ROWS * CELL_SIZE
BOARD_OFFSET_X = (1280 - BOARD_WIDTH) / 2.0
BOARD_OFFSET_Y = (720 - BOARD_HEIGHT) / 2.0

SWAP_REWARD = 10
SWAP_PENALTY = 10

Position = tuple[int, int]


def cell_center(row: int, col: int) -> tuple[float, float]:
    """Board coordinates of the centre of a cell."""
    return (
        BOARD_OFFSET_X + col * CELL_SIZE + CELL_SIZE / 2,
        BOARD_OFFSET_Y + row * CELL_SIZE + CELL_SIZE / 2,
    )


def _same_kind(*gems: Optional[Gem]) -> bool:
    first = gems[0]
    if first is None:
        return False
    return all(gem is not None and gem.kind == first.kind for gem in gems[1:])


class GameBoard:
    """A grid of gems with a running score for the swaps made on it."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.score = 0
        self.lives = 0
        self.level = 0
        self._grid: list[list[Optional[Gem]]] = [
            [None] * NUM_COLS for _ in range(NUM_ROWS)
        ]
        self.initialize_board()

    def initialize_board(self) -> None:
        """Fill the board with random gems until no three in a line match."""
        while True:
            self._grid = [
                [self.create_random_gem(row, col) for col in range(NUM_COLS)]
                for row in range(NUM_ROWS)
            ]
            if not self.check_matches():
                return

    def create_random_gem(self, row: int, col: int) -> Gem:
        """A new gem of a random kind centred on the given cell."""
        x, y = cell_center(row, col)
        choice = self.rng.randrange(5)
        if choice == 0:
            return Circle(x, y, CELL_SIZE / 2 - 15)
        if choice == 1:
            return Diamond(x, y, CELL_SIZE / 2 - 5)
        if choice == 2:
            return Pentagon(x, y, CELL_SIZE / 2 - 10)
        if choice == 3:
            return Square(x, y, CELL_SIZE / 2 - 5)
        if choice == 4:
            return Triangle(x, y, CELL_SIZE / 2 - 5)
        return Circle(x, y, CELL_SIZE / 2 - 5)

    def _row_triples(self) -> Iterator[tuple[Position, Position, Position]]:
        for row in range(NUM_ROWS):
            for col in range(NUM_COLS - 2):
                yield (row, col), (row, col + 1), (row, col + 2)

    def _column_triples(self) -> Iterator[tuple[Position, Position, Position]]:
        for row in range(NUM_ROWS - 2):
            for col in range(NUM_COLS):
                yield (row, col), (row + 1, col), (row + 2, col)

    def _is_match(self, triple: tuple[Position, Position, Position]) -> bool:
        return _same_kind(*(self._grid[r][c] for r, c in triple))

    def check_matches(self) -> bool:
        """Whether any three gems of one kind stand in a row or column."""
        return any(self._is_match(t) for t in self._row_triples()) or any(
            self._is_match(t) for t in self._column_triples()
        )

    def find_matches(self) -> list[Position]:
        """Every cell that is part of a match, sorted and without repeats."""
        found: set[Position] = set()
        for triple in (*self._row_triples(), *self._column_triples()):
            if self._is_match(triple):
                found.update(triple)
        return sorted(found)

    def check_and_remove_matches(self) -> list[Position]:
        """Clear matched triples, rows first then columns, and refill the gaps.

        A cleared cell cannot take part in a later triple of the same pass.
        Returns the cells that were refilled, in the order they were cleared.
        """
        emptied: list[Position] = []
        for triples in (self._row_triples(), self._column_triples()):
            for triple in triples:
                if self._is_match(triple):
                    for row, col in triple:
                        self._grid[row][col] = None
                    emptied.extend(triple)
        for row, col in emptied:
            self._grid[row][col] = self.create_random_gem(row, col)
        return emptied

    def generate_new_gem(self, row: int, col: int) -> Gem:
        """Put a fresh random gem in a cell and return it."""
        self._check_position(row, col)
        gem = self.create_random_gem(row, col)
        self._grid[row][col] = gem
        return gem

    def _exchange(self, row1: int, col1: int, row2: int, col2: int) -> None:
        first, second = self._grid[row1][col1], self._grid[row2][col2]
        self._grid[row1][col1], self._grid[row2][col2] = second, first
        for gem, (row, col) in ((second, (row1, col1)), (first, (row2, col2))):
            if gem is not None:
                gem.x, gem.y = cell_center(row, col)

    def swap_gems(self, row1: int, col1: int, row2: int, col2: int) -> bool:
        """Swap two gems; keep the swap only if it makes a match.

        A kept swap clears matches until none remain and adds to the score;
        a rejected swap is undone and costs points. Returns whether it was kept.
        """
        self._check_position(row1, col1)
        self._check_position(row2, col2)
        self._exchange(row1, col1, row2, col2)
        if self._grid[row1][col1] is None or self._grid[row2][col2] is None:
            self.generate_new_gem(row1, col1)
            self.generate_new_gem(row2, col2)
            return False

        if not self.check_matches():
            self._exchange(row1, col1, row2, col2)
            self.score -= SWAP_PENALTY
            return False

        self._clear_after_swap(row1, col1, row2, col2)
        while self.check_matches():
            self._clear_after_swap(row1, col1, row2, col2)
        self.score += SWAP_REWARD
        return True

    def _clear_after_swap(self, row1: int, col1: int, row2: int, col2: int) -> None:
        self.check_and_remove_matches()
        self.generate_new_gem(row1, col1)
        self.generate_new_gem(row2, col2)

    def cell_at(self, x: float, y: float) -> Optional[Position]:
        """The (row, col) of the cell under a board point, or None off the board."""
        if not (BOARD_OFFSET_X <= x < BOARD_OFFSET_X + BOARD_WIDTH):
            return None
        if not (BOARD_OFFSET_Y <= y < BOARD_OFFSET_Y + BOARD_HEIGHT):
            return None
        return int((y - BOARD_OFFSET_Y) // CELL_SIZE), int((x - BOARD_OFFSET_X) // CELL_SIZE)

    @staticmethod
    def _check_position(row: int, col: int) -> None:
        if not (0 <= row < NUM_ROWS and 0 <= col < NUM_COLS):
            raise IndexError(f"cell ({row}, {col}) is off the board")

    def __getitem__(self, position: Position) -> Optional[Gem]:
        row, col = position
        self._check_position(row, col)
        return self._grid[row][col]

    def __setitem__(self, position: Position, gem: Optional[Gem]) -> None:
        row, col = position
        self._check_position(row, col)
        self._grid[row][col] = gem

    def __iter__(self) -> Iterator[tuple[Optional[Gem], ...]]:
        return (tuple(row) for row in self._grid)