"""Sorting algorithms, containers, long arithmetic, recursion exercises, a travel menu and Snake and Minesweeper game rules."""

__version__ = "0.1.0"