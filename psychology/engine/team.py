"""Team metrics and candidate selection.

``analyze_team`` scores every member once and returns a frozen
``TeamResult``; all metrics are computed from that snapshot.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict

from psychology.engine.numeric import min_max_ratio, sort_by_value_desc, to_fixed
from psychology.engine.portrait import get_person_portrait
from psychology.engine.profile import get_person_profile
from psychology.engine.user_result import calculate_user_result
from psychology.types import (
    OCTANT_CODES,
    PROFILE_SIZE,
    CategoryMatrix,
    Member,
    Octant,
    Tendency,
    UserResult,
    ensure_matrix,
)


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
MAJOR_OCTANT_SHARE = 0.3
DESC_OCTANT_SHARE = 0.5
INTENSITY_LOW = 0.7
INTENSITY_HIGH = 1.3
# denominator used by loyalty when the bottom half of the profile is empty
LOYALTY_ZERO_FALLBACK = 0.1

SPECIALIZATION_GROUPS: tuple[tuple[str, ...], ...] = (
    OCTANT_CODES,
    ("A1", "A2"),
    ("B1", "B2"),
    ("a1", "a2"),
    ("b1", "b2"),
)


# ---------------------------------------------------------------------------
# Result model
# ---------------------------------------------------------------------------
class TeamResult(BaseModel):
    """Aggregate team profile and portrait plus team metrics."""

    model_config = ConfigDict(frozen=True)

    test_results: tuple[CategoryMatrix, ...]
    members: tuple[UserResult, ...]
    profile: tuple[Tendency, ...]
    portrait: tuple[Octant, ...]
    max_sector: float
    major_octants: tuple[Octant, ...]

    @property
    def members_count(self) -> int:
        return len(self.members)

    @property
    def profile_list(self) -> list[tuple[Tendency, ...]]:
        return [m.profile for m in self.members]

    @property
    def portrait_list(self) -> list[tuple[Octant, ...]]:
        return [m.portrait for m in self.members]

    @property
    def major_codes(self) -> list[str]:
        return [o.code for o in self.major_octants]

    # ------------------------------------------------------------------
    # Team metrics
    # ------------------------------------------------------------------
    def cross_func(self) -> float:
        """Cross-functionality: filled share of the 8 × max-sector circle."""
        if self.max_sector == 0:
            return -1
        max_circle_square = self.max_sector * 8
        fact_circle_square = sum(o.value for o in self.portrait)
        return fact_circle_square / max_circle_square

    def interaction(self) -> float:
        """Smallest / largest of the members' top octant values.

        Returns -1 when every member has an empty portrait rather than the
        NaN a plain 0 / 0 would give, matching the other team sentinels.
        """
        tops = [m.sorted_octants[0].value for m in self.members]
        highest = max(tops)
        if highest == 0:
            return -1
        return min(tops) / highest

    def emotional_comp(self) -> float:
        """Emotional compatibility of the two portrait halves, -1 if one is empty."""
        values = [o.value for o in self.portrait]
        right_sum = sum(values[:4])
        left_sum = sum(values[4:])
        if left_sum == 0 or right_sum == 0:
            return -1
        return min_max_ratio(left_sum, right_sum)

    def loyalty(self) -> float:
        """Loyalty inside the team: tendencies 0, 1, 7 against 3, 4, 5."""
        values = [t.value for t in self.profile]
        top_sum = values[0] + values[1] + values[7]
        bottom_sum = sum(values[3:6])
        if bottom_sum == 0:
            return top_sum / LOYALTY_ZERO_FALLBACK
        return top_sum / bottom_sum

    def leading_member_by_type(self, type_index: int) -> int:
        """Index of the member with the largest octant *type_index*.

        Raises:
            ValueError: If *type_index* is not an octant index.
        """
        if not 0 <= type_index < PROFILE_SIZE:
            raise ValueError(f"Octant index must be in 0..7, got {type_index}")
        values = [portrait[type_index].value for portrait in self.portrait_list]
        return values.index(max(values))

    def commitment(self) -> float:
        """Sum of every member's first attachment/separateness sub-item."""
        return sum(tr[3][0] for tr in self.test_results)

    def desc_indexes(self) -> list[int]:
        """Octant indexes reaching half of the max sector."""
        return [o.index for o in self.portrait if o.value >= self.max_sector * DESC_OCTANT_SHARE]

    def needed_psycho_type(self) -> list[int]:
        """Octant indexes the team lacks (below the major share)."""
        return [o.index for o in self.portrait if o.value < self.max_sector * MAJOR_OCTANT_SHARE]

    # ------------------------------------------------------------------
    # Intensity
    # ------------------------------------------------------------------
    def team_max_intensity(self) -> float:
        """Mean of the members' highest tendency values."""
        peaks = [sort_by_value_desc(profile)[0].value for profile in self.profile_list]
        return sum(peaks) / self.members_count

    def check_intensity(self, member_profile: Sequence[Tendency]) -> bool:
        """Whether a profile's peak stays within 0.7–1.3 of the team intensity."""
        team_intensity = self.team_max_intensity()
        peak = sort_by_value_desc(member_profile)[0].value
        return not (peak > team_intensity * INTENSITY_HIGH or peak < team_intensity * INTENSITY_LOW)

    # ------------------------------------------------------------------
    # Candidates
    # ------------------------------------------------------------------
    def all_candidates(self, pool_members: Sequence[Member], team_members: Sequence[Member]) -> list[Member]:
        """Pool members not in the team, without psychological filters."""
        team_ids = {m.base_id for m in team_members}
        return [m for m in pool_members if m.base_id not in team_ids]

    def is_smb_needed(self, spec_index: int) -> bool:
        """Whether the team still needs someone for specialization *spec_index*.

        Not needed when the group's first two codes are both major octants
        whose values differ by less than 30% of the larger one.
        """
        group = _specialization_group(spec_index)
        codes = self.major_codes
        if group[0] in codes and group[1] in codes:
            spec_octants = [o for o in self.major_octants if o.code in (group[0], group[1])]
            max_octant = spec_octants[0] if spec_octants[0].value > spec_octants[1].value else spec_octants[1]
            if abs(spec_octants[0].value - spec_octants[1].value) < max_octant.value * MAJOR_OCTANT_SHARE:
                return False
        return True

    def candidates(self, spec_index: int, all_candidates: Sequence[Member]) -> list[Member] | None:
        """Candidates the team needs for specialization *spec_index*.

        Returns ``None`` when the specialization is already covered or
        every octant of the team is major. Otherwise keeps candidates with
        a compatible intensity whose two leading octants pair a major team
        octant with an octant of the specialization group.
        """
        group = _specialization_group(spec_index)
        if not self.is_smb_needed(spec_index):
            return None
        if len(self.major_octants) == PROFILE_SIZE:
            return None

        codes = self.major_codes
        selected: list[Member] = []
        for member in all_candidates:
            profile = get_person_profile(member.test_result)
            sorted_octants = sort_by_value_desc(get_person_portrait(profile))
            if not self.check_intensity(profile):
                continue
            first, second = sorted_octants[0].code, sorted_octants[1].code
            if (first in codes and second in group) or (second in codes and first in group):
                selected.append(member)
        return selected

    def unwanted(self, members: Sequence[Member]) -> list[Member]:
        """Members whose intensity does not fit the team ("white crows")."""
        return [m for m in members if not self.check_intensity(get_person_profile(m.test_result))]


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------
def _specialization_group(spec_index: int) -> tuple[str, ...]:
    if not 0 <= spec_index < len(SPECIALIZATION_GROUPS):
        raise ValueError(f"Specialization index must be in 0..{len(SPECIALIZATION_GROUPS) - 1}, got {spec_index}")
    return SPECIALIZATION_GROUPS[spec_index]


def _avg_values(rows: Sequence[Sequence[Tendency | Octant]]) -> list[float]:
    count = len(rows)
    sums = [0.0] * PROFILE_SIZE
    for row in rows:
        for i in range(PROFILE_SIZE):
            sums[i] += row[i].value
    return [to_fixed(total / count, 1) for total in sums]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def analyze_team(test_results: Sequence[Sequence[Sequence[float]]]) -> TeamResult:
    """Score every member and build the team snapshot.

    Args:
        test_results: One 5×5 test result per member.

    Raises:
        ValueError: On an empty team or a malformed test result.
    """
    if not test_results:
        raise ValueError("Team must contain at least one member")

    matrices = tuple(ensure_matrix(tr) for tr in test_results)
    members = tuple(calculate_user_result(m) for m in matrices)

    profile = tuple(
        Tendency(index=i, value=v)
        for i, v in enumerate(_avg_values([m.profile for m in members]))
    )
    portrait = tuple(
        Octant(code=OCTANT_CODES[i], index=i, value=v)
        for i, v in enumerate(_avg_values([m.portrait for m in members]))
    )
    max_sector = sort_by_value_desc(portrait)[0].value
    major_octants = tuple(o for o in portrait if o.value >= max_sector * MAJOR_OCTANT_SHARE)

    logger.debug(
        "Team analyzed: members=%d max_sector=%s major=%s",
        len(members), max_sector, [o.code for o in major_octants],
    )
    return TeamResult(
        test_results=matrices,
        members=members,
        profile=profile,
        portrait=portrait,
        max_sector=max_sector,
        major_octants=major_octants,
    )
