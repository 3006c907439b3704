"""Recursive enumeration exercises: digit puzzles, palindromes and partitions."""

from __future__ import annotations

import argparse
from collections.abc import Iterator, Sequence
from functools import reduce
from itertools import product
from math import prod
from typing import Optional

from practicum.sorting import quick_sort

__all__ = [
    "numbers_with_product_ratio",
    "palindromes",
    "partitions",
    "partitions_into",
    "format_partition",
    "main",
]


def numbers_with_product_ratio(n: int, m: int) -> Iterator[int]:
    """Yield numbers from ``n`` chosen digits whose digit product is ``m`` times their sum.

    Digits are chosen most significant first; the last digit is never zero,
    while the leading ones may be, so a result can have fewer than ``n`` digits.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    choices = [range(10)] * (n - 1) + [range(1, 10)] if n else []
    for digits in product(*choices):
        if prod(digits) == m * sum(digits):
            yield reduce(lambda number, digit: number * 10 + digit, digits, 0)


def _grow_palindromes(n: int, d: int, number: str) -> Iterator[str]:
    if len(number) == n:
        if sum(int(digit) for digit in number) % d == 0:
            yield number
        return
    if not number and n % 2 == 1:
        for digit in range(1 if n == 1 else 0, 10):
            yield from _grow_palindromes(n, d, str(digit))
    else:
        first = 1 if len(number) == n - 2 else 0
        for digit in range(first, 10):
            edge = str(digit)
            yield from _grow_palindromes(n, d, edge + number + edge)


def palindromes(n: int, d: int) -> Iterator[str]:
    """Yield ``n``-digit palindromes without a leading zero whose digit sum ``d`` divides.

    Raises ZeroDivisionError when ``d`` is zero and ValueError when ``n`` is negative.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    yield from _grow_palindromes(n, d, "")


def _grow_partitions(
    rest: int, terms: tuple[int, ...], limit: Optional[int]
) -> Iterator[tuple[int, ...]]:
    if limit is not None and (len(terms) > limit or rest < 0):
        return
    if rest == 0 and (limit is None or len(terms) == limit):
        yield terms
        return
    for term in range(terms[-1] if terms else 1, rest + 1):
        yield from _grow_partitions(rest - term, terms + (term,), limit)


def partitions(n: int) -> Iterator[tuple[int, ...]]:
    """Yield every way to write ``n`` as a non-decreasing sum of positive terms."""
    yield from _grow_partitions(n, (), None)


def partitions_into(n: int, k: int) -> Iterator[tuple[int, ...]]:
    """Yield every way to write ``n`` as a non-decreasing sum of exactly ``k`` terms."""
    yield from _grow_partitions(n, (), k)


def format_partition(n: int, terms: Sequence[int]) -> str:
    """Render a partition as ``"n = a + b + ..."``."""
    if not terms:
        raise ValueError("a partition needs at least one term")
    return f"{n} = " + " + ".join(str(term) for term in terms)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the demonstration of every exercise and print the results."""
    parser = argparse.ArgumentParser(description="Recursive enumeration demos.")
    parser.parse_args(argv)

    count = 0
    for number in numbers_with_product_ratio(3, 10):
        print(number)
        count += 1
    print(f"количество чисел = {count}")

    count = 0
    for palindrome in palindromes(3, 1):
        print(palindrome)
        count += 1
    print(f"Количество полиндромов = {count}")

    array = [3, 12, 4, 0, 6, -2, -6, 11, 3, 5, 8]
    quick_sort(array)
    print(*array, end=" ")

    for n, found in ((5, partitions(5)), (10, partitions_into(10, 3))):
        count = 0
        for terms in found:
            print(format_partition(n, terms))
            count += 1
        print(f"Количество вариантов = {count}")
    return 0