"""Minesweeper rules: a mine field, flags, chording, a game clock and best times."""

from __future__ import annotations

import argparse
import random
import sys
import time
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol

from practicum.records import Records

__all__ = [
    "Difficulty",
    "Cell",
    "GameTimer",
    "Game",
    "clamp_custom",
    "main",
    "TIME_LIMIT",
    "HIDDEN",
    "FLAG",
    "WRONG_FLAG",
    "MINE",
    "EXPLODED",
    "EMPTY",
]

TIME_LIMIT = 999

HIDDEN = "#"
FLAG = "F"
WRONG_FLAG = "x"
MINE = "*"
EXPLODED = "!"
EMPTY = "."


class _RandRange(Protocol):
    def randrange(self, stop: int) -> int: ...


class Difficulty(Enum):
    """Named board layouts; any other layout counts as custom."""

    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    EXPERT = "Expert"
    CUSTOM = "Custom"

    @property
    def layout(self) -> Optional[tuple[int, int, int]]:
        """Rows, columns and mines of a preset, or None for custom."""
        return _LAYOUTS.get(self)

    @classmethod
    def of(cls, rows: int, columns: int, mines: int) -> Difficulty:
        """The difficulty whose preset matches the layout, else CUSTOM."""
        for difficulty, layout in _LAYOUTS.items():
            if layout == (rows, columns, mines):
                return difficulty
        return cls.CUSTOM


_LAYOUTS = {
    Difficulty.BEGINNER: (9, 12, 14),
    Difficulty.INTERMEDIATE: (16, 16, 40),
    Difficulty.EXPERT: (16, 30, 99),
}


@dataclass(eq=False)
class Cell:
    """One square of the field."""

    row: int
    column: int
    has_mine: bool = False
    adjacent: int = 0
    flagged: bool = False
    opened: bool = False
    blocked: bool = False


class GameTimer:
    """A seconds counter that stops itself at the time limit."""

    def __init__(self) -> None:
        self.elapsed = 0
        self.running = False
        self.on_time_up: Optional[Callable[[], None]] = None

    def start(self) -> None:
        self.running = True

    def stop(self) -> None:
        self.running = False

    def reset(self) -> None:
        """Set the count back to zero without changing whether it runs."""
        self.elapsed = 0

    def tick(self) -> bool:
        """Count one second if running; return True when the limit is reached."""
        if not self.running:
            return False
        self.elapsed += 1
        if self.elapsed >= TIME_LIMIT:
            self.stop()
            if self.on_time_up is not None:
                self.on_time_up()
            return True
        return False

    def label(self) -> str:
        return f"Time:{self.elapsed:03d}"


class Game:
    """A round of Minesweeper; once won or lost every cell is blocked."""

    def __init__(
        self,
        rows: int = 9,
        columns: int = 12,
        mines: int = 14,
        rng: Optional[_RandRange] = None,
        records: Optional[Records] = None,
    ) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._records = records
        self.timer = GameTimer()
        self.timer.on_time_up = self._lose
        self.restart(rows, columns, mines)

    def restart(self, rows: int, columns: int, mines: int) -> None:
        """Lay out a fresh field and restart the clock.

        Raises ValueError for an empty board or more mines than cells.
        """
        if rows < 1 or columns < 1:
            raise ValueError("the board needs at least one row and one column")
        if not 0 <= mines <= rows * columns:
            raise ValueError("mine count must fit on the board")
        self.rows, self.columns, self.mines = rows, columns, mines
        self.won = False
        self.lost = False
        self._exploded: Optional[Cell] = None
        self.cells = [[Cell(r, c) for c in range(columns)] for r in range(rows)]
        self._place_mines()
        self.timer.reset()
        self.timer.start()

    def _place_mines(self) -> None:
        placed = 0
        while placed < self.mines:
            cell = self.cells[self._rng.randrange(self.rows)][
                self._rng.randrange(self.columns)
            ]
            if not cell.has_mine:
                cell.has_mine = True
                placed += 1
        for cell in self._all():
            if not cell.has_mine:
                cell.adjacent = sum(
                    n.has_mine for n in self._around(cell.row, cell.column)
                )

    def _all(self) -> Iterator[Cell]:
        for line in self.cells:
            yield from line

    def _around(self, row: int, column: int, include_self: bool = True) -> Iterator[Cell]:
        for r in range(max(row - 1, 0), min(row + 2, self.rows)):
            for c in range(max(column - 1, 0), min(column + 2, self.columns)):
                if include_self or (r, c) != (row, column):
                    yield self.cells[r][c]

    def _cell(self, row: int, column: int) -> Cell:
        if not (0 <= row < self.rows and 0 <= column < self.columns):
            raise IndexError(f"no cell at ({row}, {column})")
        return self.cells[row][column]

    def _reveal(self, start: Cell) -> None:
        stack = [start]
        while stack:
            cell = stack.pop()
            if cell.opened or cell.flagged:
                continue
            cell.opened = True
            if cell.has_mine:
                if not self.lost:
                    self._exploded = cell
                    self._lose()
                continue
            if cell.adjacent == 0:
                stack.extend(self._around(cell.row, cell.column))

    def _lose(self) -> None:
        if self.lost or self.won:
            return
        self.lost = True
        for cell in self._all():
            if cell.has_mine and not cell.flagged:
                cell.opened = True
            cell.blocked = True
        self.timer.stop()

    def open(self, row: int, column: int) -> None:
        """Open a hidden cell, or chord on one that is already open."""
        cell = self._cell(row, column)
        if cell.blocked:
            return
        if cell.opened:
            self.chord(row, column)
            return
        self.check_win()
        self._reveal(cell)

    def toggle_flag(self, row: int, column: int) -> None:
        """Put a flag on a hidden cell or take it off."""
        cell = self._cell(row, column)
        if cell.blocked:
            return
        if not cell.opened:
            cell.flagged = not cell.flagged
        self.check_win()

    def chord(self, row: int, column: int) -> None:
        """Open all neighbours of an open cell once its flag count matches."""
        cell = self._cell(row, column)
        if cell.blocked or not cell.opened:
            return
        flags = sum(n.flagged for n in self._around(row, column, include_self=False))
        if flags == cell.adjacent:
            for neighbour in list(self._around(row, column)):
                self._reveal(neighbour)
        self.check_win()

    def check_win(self) -> bool:
        """Win when exactly the mined cells are flagged; then save the time."""
        if self.won or self.lost:
            return self.won
        if any(cell.has_mine != cell.flagged for cell in self._all()):
            return False
        self.won = True
        self.timer.stop()
        for cell in self._all():
            if not cell.flagged and not cell.opened:
                cell.opened = True
            cell.blocked = True
        self._save_record()
        return True

    def _save_record(self) -> None:
        records = self._records if self._records is not None else Records()
        name = self.difficulty().value
        try:
            best = records.best_time(name)
        except (ValueError, IndexError):
            return
        if self.timer.elapsed < best:
            records.update(name, self.timer.elapsed)

    def mines_left(self) -> int:
        """Mines minus flags placed; negative when over-flagged."""
        return self.mines - sum(cell.flagged for cell in self._all())

    def difficulty(self) -> Difficulty:
        return Difficulty.of(self.rows, self.columns, self.mines)

    def _symbol(self, cell: Cell) -> str:
        if cell.flagged:
            return WRONG_FLAG if self.lost and not cell.has_mine else FLAG
        if not cell.opened:
            return HIDDEN
        if cell.has_mine:
            return EXPLODED if cell is self._exploded else MINE
        return str(cell.adjacent) if cell.adjacent else EMPTY

    def render(self) -> str:
        """The field as text, one line per row."""
        return "\n".join(
            "".join(self._symbol(cell) for cell in line) for line in self.cells
        )


def clamp_custom(rows: int, columns: int, mines: int) -> tuple[int, int, int]:
    """Bring a custom layout into the allowed ranges."""
    rows = min(max(rows, 9), 24)
    columns = min(max(columns, 9), 36)
    mines = min(max(mines, 1), rows * columns - 1)
    return rows, columns, mines


_HELP = "commands: o ROW COL (open), f ROW COL (flag), c ROW COL (chord), n (new), q (quit)"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Play Minesweeper on the terminal."""
    presets = {d.value.lower(): d for d in _LAYOUTS}
    parser = argparse.ArgumentParser(description="Play Minesweeper in the terminal.")
    layout_group = parser.add_mutually_exclusive_group()
    layout_group.add_argument("--difficulty", choices=sorted(presets), default="beginner")
    layout_group.add_argument(
        "--custom", nargs=3, type=int, metavar=("ROWS", "COLUMNS", "MINES")
    )
    parser.add_argument("--seed", type=int)
    parser.add_argument("--records", default="records.txt")
    args = parser.parse_args(argv)

    if args.custom:
        rows, columns, mines = clamp_custom(*args.custom)
    else:
        rows, columns, mines = presets[args.difficulty].layout  # type: ignore[misc]

    game = Game(rows, columns, mines, random.Random(args.seed), Records(args.records))
    last = time.monotonic()
    actions = {"o": game.open, "f": game.toggle_flag, "c": game.chord}

    while True:
        now = time.monotonic()
        whole = int(now - last)
        for _ in range(whole):
            game.timer.tick()
        last += whole

        print(f"Mines:{game.mines_left()}  {game.timer.label()}")
        print(game.render())
        if game.won:
            print("You won!")
        elif game.lost:
            print("Game over.")

        line = sys.stdin.readline()
        if not line:
            return 0
        words = line.split()
        if not words:
            continue
        command = words[0].lower()
        if command == "q":
            return 0
        if command == "n":
            game.restart(game.rows, game.columns, game.mines)
            last = time.monotonic()
            continue
        if command in actions and len(words) == 3:
            try:
                actions[command](int(words[1]), int(words[2]))
            except (ValueError, IndexError) as error:
                print(error)
            continue
        print(_HELP)