"""Interactive text menu for planning a trip around Russia."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional, TextIO

__all__ = ["Action", "MenuItem", "build_menu", "run", "main", "GREETING", "PROMPT"]

GREETING = "Здравствуй!"
PROMPT = "Путешествие > "


class Action(Enum):
    """What happens when a menu item is chosen."""

    SHOW_MENU = auto()
    EXIT = auto()
    GO_BACK = auto()
    VISIT = auto()


@dataclass(eq=False)
class MenuItem:
    """One entry of the menu tree; the entry at index 0 of a submenu leads back."""

    title: Optional[str]
    action: Action
    parent: Optional[MenuItem] = field(default=None, repr=False)
    children: list[MenuItem] = field(default_factory=list, repr=False)

    def _add(self, title: str, action: Action) -> MenuItem:
        item = MenuItem(title, action, self)
        self.children.append(item)
        return item

    def menu_text(self) -> str:
        """The lines listing the children, with the entry numbered 0 last."""
        if not self.children:
            raise ValueError("this item has no submenu")
        ordered = [*self.children[1:], self.children[0]]
        return "\n".join(item.title or "" for item in ordered)

    def child(self, number: int) -> MenuItem:
        """Return the child chosen by ``number``; raise IndexError if there is none."""
        if not 0 <= number < len(self.children):
            raise IndexError(f"no menu entry numbered {number}")
        return self.children[number]


def build_menu() -> MenuItem:
    """Build the menu tree and return its root."""
    root = MenuItem(None, Action.SHOW_MENU)
    root._add("0 - Закончить путешествие", Action.EXIT)
    travel = root._add("1- Путешествовать по России", Action.SHOW_MENU)

    travel._add("0 - Выйти в главное меню", Action.GO_BACK)
    far_east = travel._add("1 - Дальний Восток", Action.SHOW_MENU)
    travel._add("2 - Алтай", Action.VISIT)
    travel._add("3 - Золотое Кольцо России", Action.VISIT)

    far_east._add("0 - Выйти в предыдущее меню", Action.GO_BACK)
    for title in ("1 - Владивосток", "2 - Сахалин", "3 - Хабаровск"):
        far_east._add(title, Action.VISIT)
    return root


def run(stdin: TextIO, stdout: TextIO) -> None:
    """Drive the menu, reading choices from ``stdin`` until exit or end of input.

    A choice that is not a number of an existing entry shows the same menu again.
    """
    stdout.write(f"{GREETING}\n")
    current: Optional[MenuItem] = build_menu()
    while current is not None:
        if current.action is Action.SHOW_MENU:
            stdout.write(f"{current.menu_text()}\n{PROMPT}")
            line = stdin.readline()
            if not line:
                return
            stdout.write("\n")
            try:
                current = current.child(int(line.strip()))
            except (ValueError, IndexError):
                continue
        elif current.action is Action.EXIT:
            return
        elif current.action is Action.GO_BACK:
            current = current.parent.parent if current.parent else None
        else:
            stdout.write(f"{current.title}\n\n")
            current = current.parent


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the interactive travel menu on the terminal."""
    parser = argparse.ArgumentParser(description="Plan a trip around Russia.")
    parser.parse_args(argv)
    run(sys.stdin, sys.stdout)
    return 0