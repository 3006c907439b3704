"""Arbitrary-precision signed integers stored as decimal digits."""

from __future__ import annotations

from itertools import zip_longest
from typing import Iterable, Union

__all__ = ["LongNumber"]

_DIGITS = frozenset("0123456789")

Digits = tuple[int, ...]
Operand = Union["LongNumber", int, str]


def _strip(digits: Iterable[int]) -> Digits:
    """Drop leading zeros, keeping a single zero for a zero value."""
    result = tuple(digits)
    for index, digit in enumerate(result):
        if digit:
            return result[index:]
    return (0,)


def _compare_magnitudes(a: Digits, b: Digits) -> int:
    key_a, key_b = (len(a), a), (len(b), b)
    return (key_a > key_b) - (key_a < key_b)


def _add_magnitudes(a: Digits, b: Digits) -> Digits:
    result = []
    carry = 0
    for x, y in zip_longest(reversed(a), reversed(b), fillvalue=0):
        total = x + y + carry
        result.append(total % 10)
        carry = total // 10
    if carry:
        result.append(carry)
    return _strip(reversed(result))


def _subtract_magnitudes(a: Digits, b: Digits) -> Digits:
    """Return ``a - b`` for magnitudes with ``a >= b``."""
    result = []
    borrow = 0
    for x, y in zip_longest(reversed(a), reversed(b), fillvalue=0):
        diff = x - y - borrow
        borrow = 1 if diff < 0 else 0
        result.append(diff + 10 * borrow)
    return _strip(reversed(result))


def _multiply_magnitudes(a: Digits, b: Digits) -> Digits:
    acc = [0] * (len(a) + len(b))
    for i, x in enumerate(reversed(a)):
        carry = 0
        for j, y in enumerate(reversed(b)):
            total = acc[i + j] + x * y + carry
            acc[i + j] = total % 10
            carry = total // 10
        acc[i + len(b)] += carry
    return _strip(reversed(acc))


def _divmod_magnitudes(a: Digits, b: Digits) -> tuple[Digits, Digits]:
    """Schoolbook long division of magnitudes; ``b`` must not be zero."""
    quotient = []
    remainder: Digits = (0,)
    for digit in a:
        remainder = _strip(remainder + (digit,))
        count = 0
        while _compare_magnitudes(remainder, b) >= 0:
            remainder = _subtract_magnitudes(remainder, b)
            count += 1
        quotient.append(count)
    return _strip(quotient), remainder


class LongNumber:
    """A signed integer of any size held as a sequence of decimal digits.

    Division truncates toward zero and the remainder takes the sign of the
    dividend, so ``a == (a // b) * b + a % b`` always holds.
    """

    __slots__ = ("_negative", "_digits")

    def __init__(self, value: Operand = 0) -> None:
        if isinstance(value, LongNumber):
            negative, digits = value._negative, value._digits
        elif isinstance(value, int):
            negative = value < 0
            digits = tuple(int(char) for char in str(abs(value)))
        elif isinstance(value, str):
            negative, digits = self._parse(value)
        else:
            raise TypeError(f"cannot build a LongNumber from {type(value).__name__}")
        self._digits: Digits = _strip(digits)
        self._negative: bool = negative and self._digits != (0,)

    @staticmethod
    def _parse(text: str) -> tuple[bool, Digits]:
        negative = text.startswith("-")
        body = text[1:] if negative else text
        if not body or not set(body) <= _DIGITS:
            raise ValueError(f"invalid LongNumber literal: {text!r}")
        return negative, tuple(int(char) for char in body)

    @classmethod
    def _from_parts(cls, negative: bool, digits: Digits) -> LongNumber:
        number = cls.__new__(cls)
        number._digits = _strip(digits)
        number._negative = negative and number._digits != (0,)
        return number

    @staticmethod
    def _coerce(value: object) -> LongNumber | None:
        if isinstance(value, LongNumber):
            return value
        if isinstance(value, (int, str)):
            return LongNumber(value)
        return None

    def _compare(self, other: LongNumber) -> int:
        if self._negative != other._negative:
            return -1 if self._negative else 1
        order = _compare_magnitudes(self._digits, other._digits)
        return -order if self._negative else order

    def digit_count(self) -> int:
        """Number of decimal digits, not counting the sign."""
        return len(self._digits)

    def is_negative(self) -> bool:
        """Whether the value is below zero."""
        return self._negative

    def __eq__(self, other: object) -> bool:
        number = self._coerce(other)
        if number is None:
            return NotImplemented
        return self._negative == number._negative and self._digits == number._digits

    def __hash__(self) -> int:
        return hash(int(self))

    def __lt__(self, other: Operand) -> bool:
        number = self._coerce(other)
        if number is None:
            return NotImplemented
        return self._compare(number) < 0

    def __le__(self, other: Operand) -> bool:
        number = self._coerce(other)
        if number is None:
            return NotImplemented
        return self._compare(number) <= 0

    def __gt__(self, other: Operand) -> bool:
        number = self._coerce(other)
        if number is None:
            return NotImplemented
        return self._compare(number) > 0

    def __ge__(self, other: Operand) -> bool:
        number = self._coerce(other)
        if number is None:
            return NotImplemented
        return self._compare(number) >= 0

    def __pos__(self) -> LongNumber:
        return self._from_parts(self._negative, self._digits)

    def __neg__(self) -> LongNumber:
        return self._from_parts(not self._negative, self._digits)

    def __add__(self, other: Operand) -> LongNumber:
        number = self._coerce(other)
        if number is None:
            return NotImplemented
        if self._negative == number._negative:
            return self._from_parts(
                self._negative, _add_magnitudes(self._digits, number._digits)
            )
        if _compare_magnitudes(self._digits, number._digits) >= 0:
            larger, smaller = self, number
        else:
            larger, smaller = number, self
        return self._from_parts(
            larger._negative, _subtract_magnitudes(larger._digits, smaller._digits)
        )

    def __radd__(self, other: Operand) -> LongNumber:
        return self.__add__(other)

    def __sub__(self, other: Operand) -> LongNumber:
        number = self._coerce(other)
        if number is None:
            return NotImplemented
        return self + (-number)

    def __rsub__(self, other: Operand) -> LongNumber:
        number = self._coerce(other)
        if number is None:
            return NotImplemented
        return number - self

    def __mul__(self, other: Operand) -> LongNumber:
        number = self._coerce(other)
        if number is None:
            return NotImplemented
        return self._from_parts(
            self._negative != number._negative,
            _multiply_magnitudes(self._digits, number._digits),
        )

    def __rmul__(self, other: Operand) -> LongNumber:
        return self.__mul__(other)

    def _divmod(self, other: LongNumber) -> tuple[LongNumber, LongNumber]:
        if other._digits == (0,):
            raise ZeroDivisionError("division by zero")
        quotient, remainder = _divmod_magnitudes(self._digits, other._digits)
        return (
            self._from_parts(self._negative != other._negative, quotient),
            self._from_parts(self._negative, remainder),
        )

    def __floordiv__(self, other: Operand) -> LongNumber:
        """Quotient truncated toward zero."""
        number = self._coerce(other)
        if number is None:
            return NotImplemented
        return self._divmod(number)[0]

    def __mod__(self, other: Operand) -> LongNumber:
        """Remainder carrying the sign of the dividend."""
        number = self._coerce(other)
        if number is None:
            return NotImplemented
        return self._divmod(number)[1]

    def __int__(self) -> int:
        magnitude = int("".join(map(str, self._digits)))
        return -magnitude if self._negative else magnitude

    def __bool__(self) -> bool:
        return self._digits != (0,)

    def __str__(self) -> str:
        return ("-" if self._negative else "") + "".join(map(str, self._digits))

    def __repr__(self) -> str:
        return f"LongNumber('{self}')"