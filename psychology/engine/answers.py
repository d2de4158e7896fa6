"""Reduce the 75 raw test answers to the 5×5 category matrix.

All functions are *pure*.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from psychology.types import ANSWERS_COUNT, MATRIX_SIZE, CategoryMatrix, RawAnswer


# answers feeding one matrix cell
_PICKS_PER_CELL = 3


def _coerce_answers(answers: Sequence[RawAnswer | Mapping[str, Any]]) -> list[RawAnswer]:
    return [a if isinstance(a, RawAnswer) else RawAnswer.model_validate(a) for a in answers]


def calculate_results(answers: Sequence[RawAnswer | Mapping[str, Any]]) -> CategoryMatrix:
    """Return the 5×5 matrix of category sums for a completed test.

    Questions are laid out so that answer ``k`` belongs to category
    ``k % 5``. Inside a category, each sub-item sums three consecutive
    answers of that category.

    Args:
        answers: Exactly 75 answers, as ``RawAnswer`` or ``{"id", "value"}``
            mappings (string values are parsed).

    Returns:
        Matrix where row = category, column = sub-item.

    Raises:
        ValueError: On a wrong answer count or a non-numeric value.
    """
    if len(answers) != ANSWERS_COUNT:
        raise ValueError(f"Expected {ANSWERS_COUNT} answers, got {len(answers)}")
    parsed = _coerce_answers(answers)

    matrix: list[list[int | float]] = [[0] * MATRIX_SIZE for _ in range(MATRIX_SIZE)]
    for i, row in enumerate(matrix):
        k = i
        for j in range(MATRIX_SIZE):
            for _ in range(_PICKS_PER_CELL):
                row[j] += parsed[k].value
                k += MATRIX_SIZE
    return tuple(tuple(row) for row in matrix)


def find_unanswered(answers: Sequence[RawAnswer | Mapping[str, Any]]) -> int:
    """Index of the first answer without a value, ``-1`` if all are answered.

    ``None`` and blank strings count as missing; ``0`` is a valid answer.
    """
    for i, answer in enumerate(answers):
        value = answer.value if isinstance(answer, RawAnswer) else answer.get("value")
        if value is None or (isinstance(value, str) and not value.strip()):
            return i
    return -1
