"""Category matrix → psychological profile (8 tendencies).

All functions are *pure*.
"""

from __future__ import annotations

from collections.abc import Sequence

from psychology.types import Tendency, ensure_matrix


# (row, part) feeding each tendency index; part 0 = negative sum, 1 = positive sum.
# Row 2 is read pos-then-neg, unlike rows 0, 1 and 4. Row 3 is not used.
_TENDENCY_SOURCES: tuple[tuple[int, int], ...] = (
    (1, 0),
    (4, 0),
    (0, 0),
    (2, 1),
    (1, 1),
    (4, 1),
    (0, 1),
    (2, 0),
)


def split_row(row: Sequence[float]) -> tuple[float, float]:
    """Return ``(neg, pos)``: magnitude of negative cells and sum of positive ones."""
    pos = 0
    neg = 0
    for value in row:
        if value > 0:
            pos += value
        else:
            neg += value * -1
    return neg, pos


def get_person_profile(test_result: Sequence[Sequence[float]]) -> tuple[Tendency, ...]:
    """Compute the user's profile from a 5×5 test result.

    Raises:
        ValueError: If *test_result* is not a 5×5 numeric matrix.
    """
    matrix = ensure_matrix(test_result)
    values = [split_row(row) for row in matrix]
    return tuple(
        Tendency(index=i, value=values[row][part])
        for i, (row, part) in enumerate(_TENDENCY_SOURCES)
    )
