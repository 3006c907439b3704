"""Best completion times per difficulty, kept in a small text file."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Union

__all__ = ["Records", "DEFAULT_RECORDS"]

DEFAULT_RECORDS = (
    "Beginner:    \t999s\n"
    "Intermediate:\t999s\n"
    "Expert:      \t999s"
)

_LINE_INDEX = {"Beginner": 0, "Intermediate": 1, "Expert": 2}


class Records:
    """The records file: one ``name:<TAB>seconds s`` line per difficulty."""

    def __init__(self, path: Union[str, os.PathLike[str]] = "records.txt") -> None:
        self.path = Path(path)
        if not self.path.exists():
            try:
                self.path.write_text(DEFAULT_RECORDS, encoding="utf-8")
            except OSError:
                pass

    def read(self) -> str:
        """The file's text, or the default table when it cannot be read."""
        try:
            return self.path.read_text(encoding="utf-8")
        except OSError:
            return DEFAULT_RECORDS

    def best_time(self, difficulty: str) -> int:
        """Recorded seconds for ``difficulty``; unknown names share the first line.

        Raises ValueError when the line is malformed.
        """
        lines = self.read().split("\n")
        line = lines[_LINE_INDEX.get(str(difficulty), 0)]
        parts = line.split("\t")
        if len(parts) < 2:
            raise ValueError(f"malformed record line: {line!r}")
        text = parts[1].strip()
        try:
            return int(text[:-1])
        except ValueError:
            raise ValueError(f"malformed record time: {text!r}") from None

    def update(self, difficulty: str, seconds: int) -> None:
        """Store ``seconds`` for ``difficulty``; unknown names change nothing."""
        try:
            lines = self.path.read_text(encoding="utf-8").split("\n")
        except OSError:
            return
        index = _LINE_INDEX.get(str(difficulty))
        if index is not None and index < len(lines):
            parts = lines[index].split("\t")
            if len(parts) < 2:
                parts.append("")
            parts[1] = f"{seconds}s"
            lines[index] = "\t".join(parts)
        try:
            self.path.write_text("\n".join(lines), encoding="utf-8")
        except OSError:
            pass