"""Numeric helpers shared by the calculators.

All functions are *pure*.
"""

from __future__ import annotations

from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal
from typing import Protocol, TypeVar


class _HasValue(Protocol):
    @property
    def value(self) -> float: ...


T = TypeVar("T", bound=_HasValue)


def to_fixed(value: float, digits: int) -> float:
    """Round like JavaScript ``Number(value.toFixed(digits))``.

    The exact binary value is rounded, ties go away from zero. Python's
    ``round`` rounds ties to even and gives different results on values
    such as ``0.25``.
    """
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def min_max_ratio(a: float, b: float) -> float:
    """Return smaller / larger of two values (callers guard against zeros)."""
    return a / b if a < b else b / a


def sort_by_value_desc(items: Iterable[T]) -> list[T]:
    """Stable sort by ``value``, max → min; equal values keep input order."""
    return sorted(items, key=lambda item: item.value, reverse=True)
