"""Layout of the menu screens and the shapes that make up the bear mascot."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional

Point = tuple[float, float]
Color = tuple[float, float, float]

_PI = 3.14159

BACKGROUND: Color = (0.9569, 0.9176, 0.8784)
BROWN: Color = (0.545, 0.271, 0.075)
HOVER_BROWN: Color = (0.645, 0.371, 0.175)
GOLDEN: Color = (1.0, 0.843, 0.0)
CREAM: Color = (0.9569, 0.8471, 0.6824)
WHITE: Color = (1.0, 1.0, 1.0)
BLACK: Color = (0.0, 0.0, 0.0)
PINK: Color = (1.0, 0.5, 0.5)


def check_mouse_click(
    mouse_x: float, mouse_y: float, x: float, y: float, width: float, height: float
) -> bool:
    """Whether a point lies in a rectangle, edges included."""
    return x <= mouse_x <= x + width and y <= mouse_y <= y + height


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle with its origin at the lower left corner."""

    x: float
    y: float
    width: float
    height: float

    def contains(self, x: float, y: float) -> bool:
        return check_mouse_click(x, y, self.x, self.y, self.width, self.height)


@dataclass(frozen=True)
class Label:
    """A line of text drawn with its baseline starting at (x, y)."""

    text: str
    x: float
    y: float
    color: Color = GOLDEN


@dataclass(frozen=True)
class BearPart:
    """One piece of the mascot: a filled polygon or an open line."""

    color: Color
    points: tuple[Point, ...]
    filled: bool = True


def button_at(buttons: Sequence[Rect], x: float, y: float) -> Optional[int]:
    """Index of the first button under the point, or None."""
    return next((i for i, button in enumerate(buttons) if button.contains(x, y)), None)


def circle_points(cx: float, cy: float, radius: float, segments: int) -> list[Point]:
    """Points around a circle, the first and last at angle zero."""
    if segments <= 0:
        raise ValueError("a circle needs at least one segment")
    points = []
    for step in range(segments + 1):
        theta = 2.0 * _PI * step / segments
        points.append((cx + radius * math.cos(theta), cy + radius * math.sin(theta)))
    return points


def ellipse_arc(
    cx: float, cy: float, rx: float, ry: float, start_deg: int, end_deg: int
) -> list[Point]:
    """Points on an ellipse, one per whole degree from start to end inclusive."""
    points = []
    for degree in range(start_deg, end_deg + 1):
        theta = degree * _PI / 180
        points.append((cx + rx * math.cos(theta), cy + ry * math.sin(theta)))
    return points


def _disc(cx: float, cy: float, radius: float, color: Color) -> BearPart:
    return BearPart(color, tuple(circle_points(cx, cy, radius, 100)))


def _ellipse(
    cx: float, cy: float, rx: float, ry: float, color: Color, start: int = 0, end: int = 360,
    filled: bool = True,
) -> BearPart:
    return BearPart(color, tuple(ellipse_arc(cx, cy, rx, ry, start, end)), filled)


def bear_parts() -> list[BearPart]:
    """The mascot's pieces in drawing order, back to front."""
    return [
        _disc(1000.0, 450.0, 50.0, BROWN),
        _ellipse(1000.0, 330.0, 60, 100, BROWN),
        _ellipse(1000.0, 330.0, 40, 70, CREAM),
        _disc(950.0, 500.0, 20.0, BROWN),
        _disc(1050.0, 500.0, 20.0, BROWN),
        _disc(985.0, 470.0, 10.0, WHITE),
        _disc(1015.0, 470.0, 10.0, WHITE),
        _disc(985.0, 470.0, 5.0, BLACK),
        _disc(1015.0, 470.0, 5.0, BLACK),
        _ellipse(1000.0, 440.0, 8, 5, BLACK),
        _ellipse(1000.0, 435.0, 20, 10, BLACK, 210, 330, filled=False),
        _ellipse(1000.0, 425.0, 8, 4, PINK, 180, 360),
        _disc(940.0, 380.0, 20.0, BROWN),
        _disc(1060.0, 380.0, 20.0, BROWN),
        _disc(970.0, 220.0, 20.0, BROWN),
        _disc(1030.0, 220.0, 20.0, BROWN),
    ]


FRAME = Rect(100, 100, 1080, 530)
TITLE_BAR = Rect(200, 620, 900, 60)

MAIN_MENU_BUTTONS = (
    Rect(240, 450, 400, 60),
    Rect(240, 350, 400, 60),
    Rect(240, 250, 400, 60),
    Rect(240, 150, 400, 60),
)
MAIN_MENU_LABELS = (
    Label("JEWEL JAM", 550, 640),
    Label("PLAY", 390, 470),
    Label("INSTRUCTIONS", 350, 370),
    Label("HIGHSCORE", 365, 270),
    Label("QUIT GAME", 370, 170),
)

MENU_BUTTONS = (
    Rect(290, 470, 700, 60),
    Rect(290, 370, 700, 60),
    Rect(290, 270, 700, 60),
)
PAUSE_MENU_LABELS = (
    Label("PAUSE MENU", 550, 640),
    Label("RESUME", 570, 485),
    Label("RESTART", 570, 385),
    Label("QUIT TO MAIN MENU", 500, 285),
)
END_MENU_LABELS = (
    Label("Game Over", 580, 640),
    Label("RETRY", 585, 485),
    Label("MAIN MENU", 560, 385),
    Label("QUIT", 590, 285),
)

PAUSE_BUTTON = Rect(100, 150, 200, 100)
SCORE_PANEL = Rect(100, 450, 200, 100)
PLAY_LABELS = (
    Label("Pause", 175, 200),
    Label("Score", 175, 510),
)
SCORE_VALUE_POSITION: Point = (190, 480)

BACK_BUTTON = Rect(510, 100, 200, 50)
BACK_LABEL = Label("MAIN MENU", 540, 125)

INSTRUCTION_LABELS = (
    Label("JEWEL JAM", 550, 640),
    Label("INSTRUCTIONS", 530, 550, BROWN),
    Label("This is a match-3 game.", 490, 500, BROWN),
    Label("You have to match only 3 similar shapes in a row or column", 300, 450, BROWN),
    Label("4 or more than 3 smilar shape are not considered as a match.", 300, 400, BROWN),
    Label("On every wrong swap your score will be deducted.(-10)", 310, 350, BROWN),
    Label("If score reached below 0 game will over.", 390, 300, BROWN),
    Label(
        "FOR SWAPPING YOU HAVE TO CLICK ON FIRST AND THEN SECOND GEM TO SWAP.",
        150, 250, BROWN,
    ),
    Label("Best of luck for the game!", 480, 200, BROWN),
)
HIGHSCORE_LABELS = (
    Label("JEWEL JAM", 550, 640),
    Label("Score", 600, 510, BROWN),
)
HIGHSCORE_VALUE_POSITION: Point = (615, 480)