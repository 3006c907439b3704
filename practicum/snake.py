"""Rules of the classic snake game on a small square board."""

from __future__ import annotations

import random
from enum import Enum
from typing import Optional, Protocol

__all__ = [
    "Direction",
    "SnakeGame",
    "BOARD_WIDTH",
    "BOARD_HEIGHT",
    "DOT_SIZE",
    "ALL_DOTS",
    "RAND_POS",
    "DELAY_MS",
]

BOARD_WIDTH = 150
BOARD_HEIGHT = 150
DOT_SIZE = 10
ALL_DOTS = 225
RAND_POS = 15
DELAY_MS = 200

Point = tuple[int, int]


class _RandRange(Protocol):
    def randrange(self, stop: int) -> int: ...


class Direction(Enum):
    """A heading as a unit step along x and y (y grows downwards)."""

    LEFT = (-1, 0)
    RIGHT = (1, 0)
    UP = (0, -1)
    DOWN = (0, 1)

    @property
    def opposite(self) -> Direction:
        dx, dy = self.value
        return Direction((-dx, -dy))


class SnakeGame:
    """Snake state: ``body`` holds cell positions in pixels, head first."""

    def __init__(self, rng: Optional[_RandRange] = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.direction = Direction.RIGHT
        self.in_game = True
        self.body: list[Point] = [(50 - i * DOT_SIZE, 50) for i in range(3)]
        self._trail: Optional[Point] = None
        self.apple: Point = (0, 0)
        self.place_apple()

    def place_apple(self) -> None:
        """Put the apple on a random grid cell not covered by the snake."""
        occupied = set(self.body)
        if all(
            (col * DOT_SIZE, row * DOT_SIZE) in occupied
            for col in range(RAND_POS)
            for row in range(RAND_POS)
        ):
            raise RuntimeError("no free cell for the apple")
        while True:
            x = self._rng.randrange(RAND_POS) * DOT_SIZE
            y = self._rng.randrange(RAND_POS) * DOT_SIZE
            if (x, y) not in occupied:
                self.apple = (x, y)
                return

    def turn(self, direction: Direction) -> None:
        """Head the other way, unless that would reverse onto the body."""
        if direction is not self.direction.opposite:
            self.direction = direction

    def tick(self) -> bool:
        """Advance one step; return whether the game is still running."""
        if self.in_game:
            self._check_apple()
            self._check_collision()
            self._move()
        return self.in_game

    def _check_apple(self) -> None:
        if self.body[0] == self.apple:
            self.body.append(self._trail if self._trail is not None else self.body[-1])
            self._trail = None
            self.place_apple()

    def _check_collision(self) -> None:
        head = self.body[0]
        # The cell the tail just left still counts once the snake is long enough.
        others = self.body[5:]
        if len(self.body) >= 5 and self._trail is not None:
            others.append(self._trail)
        x, y = head
        if head in others or not (0 <= x < BOARD_WIDTH and 0 <= y < BOARD_HEIGHT):
            self.in_game = False

    def _move(self) -> None:
        dx, dy = self.direction.value
        x, y = self.body[0]
        self.body.insert(0, (x + dx * DOT_SIZE, y + dy * DOT_SIZE))
        self._trail = self.body.pop()