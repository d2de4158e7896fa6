"""Text lookups driven by result intensities.

The texts themselves come from the content API; these helpers only pick
the right entry for a value. All functions are *pure*.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from pydantic import BaseModel, ConfigDict

from psychology.types import Octant


T = TypeVar("T")

DEFAULT_KEY_BREAKPOINTS: tuple[float, float, float] = (0.2, 0.5, 0.8)
DEFAULT_FAMOUS_BREAKPOINTS: tuple[float, float, float, float] = (0, 42.35, 140, 1000)


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------
class DescWithRange(BaseModel):
    """A description applying to values in ``(range[0], range[1]]``."""

    model_config = ConfigDict(frozen=True)

    desc: str
    range: tuple[float, float]


class DescList(BaseModel):
    """A titled list of range descriptions."""

    model_config = ConfigDict(frozen=True)

    title: str
    options: tuple[DescWithRange, ...]


class DescWithStatus(BaseModel):
    """Chosen description; status 0 = lowest range, 2 = highest, 1 = otherwise."""

    model_config = ConfigDict(frozen=True)

    title: str
    desc: str
    status: int


class Famous(BaseModel):
    """A famous person matching an octant, plus its picture key."""

    model_config = ConfigDict(frozen=True)

    person: str
    picture: str


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def get_index_by_range(value: float, options: Sequence[DescWithRange]) -> int:
    """Index of the first option whose range holds *value*, -1 if none."""
    for i, option in enumerate(options):
        low, high = option.range
        if low < value <= high:
            return i
    return -1


def get_desc_by_range(value: float, desc_list: DescList) -> DescWithStatus:
    """Pick the description for *value* from *desc_list*.

    An empty description with status 1 is returned when no range matches,
    including for an empty option list. Status 2 marks the last option.
    """
    index = get_index_by_range(value, desc_list.options)
    desc = desc_list.options[index].desc if index >= 0 else ""
    if index == 0:
        status = 0
    elif index >= 0 and index == len(desc_list.options) - 1:
        status = 2
    else:
        status = 1
    return DescWithStatus(title=desc_list.title, desc=desc, status=status)


def get_key_result(
    value: float,
    results: Sequence[T],
    breakpoints: Sequence[float] = DEFAULT_KEY_BREAKPOINTS,
) -> T:
    """Pick one of four key results by intensity (default 20% / 50% / 80%)."""
    if value < breakpoints[0]:
        return results[0]
    if value < breakpoints[1]:
        return results[1]
    if value < breakpoints[2]:
        return results[2]
    return results[3]


def get_famous(
    octant: Octant,
    famous_list: Sequence[Sequence[Sequence[str]]],
    sex: int = 0,
    breakpoints: Sequence[float] = DEFAULT_FAMOUS_BREAKPOINTS,
) -> Famous | None:
    """Famous person for an octant's intensity.

    Args:
        octant: The user's octant, usually the main one.
        famous_list: Per octant, three intensity levels, each a list of
            names indexed by *sex*.
        sex: 0 - male, 1 - female, 2 - other.
        breakpoints: Bounds of the three intensity levels.

    Returns:
        Famous entry, or ``None`` if the value is outside the breakpoints.
    """
    value = octant.value
    if value < breakpoints[0] or value > breakpoints[3]:
        return None

    if value < breakpoints[1]:
        level = 0
    elif value < breakpoints[2]:
        level = 1
    else:
        level = 2
    return Famous(
        person=famous_list[octant.index][level][sex],
        picture=f"{octant.index}_{level}_{sex}",
    )
