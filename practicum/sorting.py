"""Classic in-place sorting algorithms over mutable sequences.

Every sorting function rearranges the given sequence in place and returns
``None``, in the manner of :meth:`list.sort`.
"""

from __future__ import annotations

from collections.abc import MutableSequence
from heapq import merge as _merge_sorted
from itertools import chain
from typing import Any

__all__ = [
    "bubble_sort",
    "heapify",
    "heap_sort",
    "insertion_sort",
    "merge",
    "merge_sort",
    "quick_sort",
    "radix_sort",
    "selection_sort",
    "shell_sort",
]


def _swap(items: MutableSequence[Any], i: int, j: int) -> None:
    items[i], items[j] = items[j], items[i]


def bubble_sort(items: MutableSequence[Any]) -> None:
    """Sort by repeatedly swapping adjacent out-of-order pairs."""
    size = len(items)
    for passes in range(size - 1):
        for j in range(size - passes - 1):
            if items[j] > items[j + 1]:
                _swap(items, j, j + 1)


def heapify(items: MutableSequence[Any], size: int, index: int) -> None:
    """Sift ``items[index]`` down within the first ``size`` items of a max-heap."""
    while True:
        largest = index
        left = 2 * index + 1
        right = left + 1
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == index:
            return
        _swap(items, index, largest)
        index = largest


def heap_sort(items: MutableSequence[Any]) -> None:
    """Sort by building a max-heap and repeatedly moving its root to the end."""
    size = len(items)
    for index in range(size // 2 - 1, -1, -1):
        heapify(items, size, index)
    for end in range(size - 1, 0, -1):
        _swap(items, 0, end)
        heapify(items, end, 0)


def insertion_sort(items: MutableSequence[Any]) -> None:
    """Sort by inserting each item into the sorted prefix before it."""
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and items[j] > key:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key


def merge(items: MutableSequence[Any], low: int, mid: int, high: int) -> None:
    """Merge the sorted runs ``items[low:mid + 1]`` and ``items[mid + 1:high + 1]``.

    On equal values the item from the left run comes first.
    """
    left = list(items[low:mid + 1])
    right = list(items[mid + 1:high + 1])
    items[low:high + 1] = list(_merge_sorted(left, right))


def _merge_sort(items: MutableSequence[Any], low: int, high: int) -> None:
    if low < high:
        mid = low + (high - low) // 2
        _merge_sort(items, low, mid)
        _merge_sort(items, mid + 1, high)
        merge(items, low, mid, high)


def merge_sort(items: MutableSequence[Any]) -> None:
    """Stable top-down merge sort."""
    _merge_sort(items, 0, len(items) - 1)


def _partition(items: MutableSequence[Any], low: int, high: int) -> int:
    pivot = items[high]
    boundary = low
    for i in range(low, high):
        if items[i] < pivot:
            _swap(items, boundary, i)
            boundary += 1
    _swap(items, boundary, high)
    return boundary


def quick_sort(items: MutableSequence[Any]) -> None:
    """Quick sort with the last item of each range as pivot."""
    ranges = [(0, len(items) - 1)]
    while ranges:
        low, high = ranges.pop()
        if low < high:
            pivot_index = _partition(items, low, high)
            ranges.append((pivot_index + 1, high))
            ranges.append((low, pivot_index - 1))


def radix_sort(items: MutableSequence[int]) -> None:
    """Least-significant-digit radix sort of non-negative integers.

    Raises ValueError if any item is negative.
    """
    if not items:
        return
    if any(value < 0 for value in items):
        raise ValueError("radix sort requires non-negative integers")
    largest = max(items)
    digit = 1
    while largest // digit > 0:
        buckets: list[list[int]] = [[] for _ in range(10)]
        for value in items:
            buckets[(value // digit) % 10].append(value)
        items[:] = list(chain.from_iterable(buckets))
        digit *= 10


def selection_sort(items: MutableSequence[Any]) -> None:
    """Sort by repeatedly selecting the smallest remaining item."""
    size = len(items)
    for i in range(size - 1):
        smallest = min(range(i, size), key=items.__getitem__)
        _swap(items, i, smallest)


def shell_sort(items: MutableSequence[Any]) -> None:
    """Shell sort with gaps halving from half the length down to one."""
    size = len(items)
    gap = size // 2
    while gap > 0:
        for i in range(gap, size):
            current = items[i]
            j = i
            while j >= gap and items[j - gap] > current:
                items[j] = items[j - gap]
                j -= gap
            items[j] = current
        gap //= 2