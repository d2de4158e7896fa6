"""Profile → psychological portrait (8 octant areas).

Each octant is the area of the triangle between two adjacent profile axes
(45° apart), so every sector is bounded by axis ``i`` and axis ``i + 1``.

All functions are *pure*.
"""

from __future__ import annotations

from collections.abc import Sequence

from psychology.engine.numeric import to_fixed
from psychology.types import OCTANT_CODES, PROFILE_SIZE, Octant, Tendency


SIN_45 = 0.7071


def _triangle_area(a: float, b: float) -> float:
    return a * b * SIN_45 / 2


def get_person_portrait(profile: Sequence[Tendency]) -> tuple[Octant, ...]:
    """Compute the 8 octants of a profile, rounded to 2 decimals.

    Raises:
        ValueError: If *profile* does not hold exactly 8 tendencies.
    """
    if len(profile) != PROFILE_SIZE:
        raise ValueError(f"Profile must have {PROFILE_SIZE} tendencies, got {len(profile)}")

    axis = [t.value for t in profile][::-1]
    areas = [_triangle_area(axis[i], axis[i + 1]) for i in range(PROFILE_SIZE - 1)]
    # closing sector goes first
    areas.insert(0, _triangle_area(axis[-1], axis[0]))

    # octant codes start from the aggression sector and run backwards
    half = PROFILE_SIZE // 2
    swapped = areas[half:] + areas[:half]

    return tuple(
        Octant(code=OCTANT_CODES[i], index=i, value=to_fixed(value, 2))
        for i, value in enumerate(swapped)
    )
