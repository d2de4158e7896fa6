"""Value models for test answers, profiles, portraits and team members.

A completed test is stored as a 5×5 category matrix. Everything else
(profile, portrait, user result) is derived from it.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
OctantCode = Literal["A1", "A2", "B1", "B2", "a1", "a2", "b1", "b2"]

OCTANT_CODES: tuple[OctantCode, ...] = ("A1", "A2", "B1", "B2", "a1", "a2", "b1", "b2")

MATRIX_SIZE = 5
ANSWERS_COUNT = 75
PROFILE_SIZE = 8

CategoryMatrix = tuple[tuple[float, ...], ...]
# stored form: personal info (age, sex, status codes) and the integer matrix
DecodedData = tuple[tuple[int, ...], tuple[tuple[int, ...], ...]]


# ---------------------------------------------------------------------------
# Matrix validation
# ---------------------------------------------------------------------------
def _is_number(value: object) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def ensure_matrix(test_result: Sequence[Sequence[float]]) -> CategoryMatrix:
    """Return *test_result* as an immutable 5×5 matrix.

    Raises:
        ValueError: If the input is not 5 rows of 5 finite numbers.
    """
    if isinstance(test_result, (str, bytes)) or not isinstance(test_result, Sequence):
        raise ValueError("Test result must be a 5x5 matrix")
    if len(test_result) != MATRIX_SIZE:
        raise ValueError(f"Test result must have {MATRIX_SIZE} rows, got {len(test_result)}")

    rows: list[tuple[float, ...]] = []
    for i, row in enumerate(test_result):
        if isinstance(row, (str, bytes)) or not isinstance(row, Sequence):
            raise ValueError(f"Row {i} of test result is not a sequence")
        if len(row) != MATRIX_SIZE:
            raise ValueError(f"Row {i} must have {MATRIX_SIZE} values, got {len(row)}")
        if not all(_is_number(v) for v in row):
            raise ValueError(f"Row {i} contains non-numeric values: {list(row)!r}")
        rows.append(tuple(row))
    return tuple(rows)


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------
class RawAnswer(BaseModel):
    """One answer of the 75-question test."""

    model_config = ConfigDict(frozen=True)

    id: str
    value: int | float

    @field_validator("value", mode="before")
    @classmethod
    def parse_value(cls, v: object) -> int | float:
        """Parse numeric strings explicitly, reject anything non-numeric."""
        if isinstance(v, str):
            text = v.strip()
            try:
                parsed: int | float = int(text)
            except ValueError:
                try:
                    parsed = float(text)
                except ValueError:
                    raise ValueError(f"answer value {v!r} is not numeric") from None
            v = parsed
        if not _is_number(v):
            raise ValueError(f"answer value {v!r} is not a finite number")
        return v


class Tendency(BaseModel):
    """One half-axis of the profile (e.g. anxiety or lability)."""

    model_config = ConfigDict(frozen=True)

    index: int = Field(ge=0, le=7)
    value: float


class Octant(BaseModel):
    """One sector of the portrait."""

    model_config = ConfigDict(frozen=True)

    code: OctantCode
    index: int = Field(ge=0, le=7)
    value: float = Field(ge=0.0)


class UserResult(BaseModel):
    """Full result of a single user."""

    model_config = ConfigDict(frozen=True)

    profile: tuple[Tendency, ...]
    portrait: tuple[Octant, ...]
    sorted_octants: tuple[Octant, ...]
    main_octant: Octant
    main_psycho_type_list: tuple[int, ...]
    main_tendency_list: tuple[int, ...]


class Member(BaseModel):
    """A team or pool member with their stored test data."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    name: str
    position: str = ""
    dec_data: DecodedData = Field(alias="decData")
    base_id: int = Field(alias="baseID")

    @field_validator("dec_data")
    @classmethod
    def validate_dec_data(cls, v: DecodedData) -> DecodedData:
        """Check the test matrix part is 5×5."""
        ensure_matrix(v[1])
        return v

    @property
    def test_result(self) -> CategoryMatrix:
        return self.dec_data[1]
