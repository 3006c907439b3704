# practicum

A collection of small, self-contained programs and building blocks:

- `practicum.sorting`: bubble, insertion, selection, shell, heap, merge,
  quick and radix sort, together with the `heapify` and `merge` helpers.
- `practicum.containers`: a growable `Vector` and a `DoublyLinkedList`.
- `practicum.long_number`: `LongNumber`, a signed integer of any length
  stored as decimal digits.
- `practicum.recursion`: recursive enumerations of digit puzzles,
  palindromes and integer partitions.
- `practicum.travel`: an interactive text menu for planning a trip.
- `practicum.snake`: the rules of the Snake game.
- `practicum.minesweeper` and `practicum.records`: a Minesweeper game played
  in the terminal, with a best-times table kept in a text file.

The package needs no third-party libraries.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Sorting

Each sorting function rearranges a mutable sequence in place and returns
`None`, like `list.sort`. `merge_sort` is stable. `radix_sort` accepts
non-negative integers only and raises `ValueError` otherwise.

```python
from practicum.sorting import quick_sort

data = [5, -3, 1, 0, -7, 9, -2, 4, -6, 2]
quick_sort(data)
print(data)  # [-7, -6, -3, -2, 0, 1, 2, 4, 5, 9]
```

`heapify(items, size, index)` sifts one item down a max-heap held in the
first `size` items, and `merge(items, low, mid, high)` merges the sorted
runs `items[low:mid + 1]` and `items[mid + 1:high + 1]`.

## Containers

```python
from practicum.containers import DoublyLinkedList, Vector

v = Vector()
v.append(1)
v.append(3)
v.insert(1, 2)
print(len(v), 2 in v)   # 3 True
v.remove_first(1)       # True
print(list(v))          # [2, 3]

items = DoublyLinkedList()
items.append("a")
items.append("b")
print("b" in items, len(items))   # True 2
print(list(reversed(items)))      # ['b', 'a']
```

`remove_first` returns whether a matching item was found. Inserting into a
`Vector` at a position outside `0..len(v)` raises `IndexError`. `str()` of
either container gives its items, each preceded by a space.

## Long numbers

`LongNumber` is built from an `int`, a decimal string (optionally starting
with `-`) or another `LongNumber`; any other string raises `ValueError`.
Plain integers and strings may be used as the other operand of arithmetic
and comparisons.

```python
from practicum.long_number import LongNumber

big = LongNumber("12345678901234567890")
print(big + 1)                       # 12345678901234567891
print(big * LongNumber(2))           # 24691357802469135780
print(LongNumber(10) // 2, LongNumber(10) % 3)   # 5 1
print(big.digit_count(), (-big).is_negative())   # 20 True
```

Division truncates toward zero and the remainder takes the sign of the
dividend. Dividing by zero raises `ZeroDivisionError`.

## Recursion

```python
from practicum.recursion import format_partition, partitions_into

for terms in partitions_into(10, 3):
    print(format_partition(10, terms))   # 10 = 1 + 1 + 8, ...
```

- `numbers_with_product_ratio(n, m)` yields the numbers built from `n`
  digits, the last of which is non-zero, whose digit product is `m` times
  their digit sum. Leading digits may be zero, so a result can be shorter
  than `n` digits.
- `palindromes(n, d)` yields, as strings, the `n`-digit palindromes without
  a leading zero whose digit sum is divisible by `d`.
- `partitions(n)` yields every non-decreasing tuple of positive terms that
  sums to `n`; `partitions_into(n, k)` only those with exactly `k` terms.

## Commands

```
practicum-recursion       # print the recursion examples and their counts
practicum-travel          # walk through the travel menu by entering numbers
practicum-minesweeper     # play Minesweeper in the terminal
```

`practicum-travel` reads menu numbers from standard input until the exit
entry is chosen or input ends; an unknown number shows the same menu
again. The same loop is available as `practicum.travel.run(stdin, stdout)`,
and `build_menu()` returns the menu tree of `MenuItem`s.

`practicum-minesweeper` takes these options:

- `--difficulty {beginner,expert,intermediate}` (default `beginner`)
- `--custom ROWS COLUMNS MINES`, brought into range by `clamp_custom`
- `--seed N` for a repeatable mine layout
- `--records PATH` for the best-times file (default `records.txt`)

It prints the mine counter, the clock and the board, then reads one
command per line: `o ROW COL` opens, `f ROW COL` toggles a flag,
`c ROW COL` chords, `n` starts a new board and `q` quits. The clock
advances by the real time that passed between commands; at 999 seconds
the game is lost.

## Snake

`SnakeGame` holds the state of a 150 by 150 pixel board laid out in 10
pixel cells: `body` lists the snake's cells head first and `apple` is the
apple's position. Call `turn` with a `Direction` to steer (a reversal onto
the body is ignored) and `tick` to advance one step; `tick` returns whether
the game is still running. Pass your own `random.Random` instance to make
apple placement repeatable.

## Minesweeper

`Game` holds a grid of `Cell`s. `open`, `toggle_flag` and `chord` play
moves (opening an already open cell chords), `render` returns the board as
text, and `mines_left` counts mines minus flags. A game is won when exactly
the mined cells are flagged; `check_win` then stores the time through
`Records` if it beats the best for that `Difficulty`. `GameTimer` counts
seconds only when its `tick` is called.

`Records` keeps one line per preset difficulty in a text file, creating it
with 999 seconds for each when it does not exist; `best_time` reads a time
and `update` writes one. Custom boards are not recorded.

## What is not included

Snake and Minesweeper come as game rules and, for Minesweeper, a plain
text terminal interface. There is no graphical window, no mouse or
keyboard-driven display, and no command to play Snake: drive `SnakeGame`
from your own code. There is no settings screen or font choice.