"""Relationship metrics for two users.

All functions are *pure*.
"""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict

from psychology.engine.numeric import min_max_ratio
from psychology.engine.user_result import calculate_user_result
from psychology.types import OCTANT_CODES, Member, Octant, Tendency, UserResult


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
LEFT_HEMISPHERE = OCTANT_CODES[:4]
RIGHT_HEMISPHERE = OCTANT_CODES[4:]

_UNDERSTANDING_FRACTION = 0.125


# ---------------------------------------------------------------------------
# Result models
# ---------------------------------------------------------------------------
class PairResult(BaseModel):
    """Both partners' results plus the seven pair metrics."""

    model_config = ConfigDict(frozen=True)

    partner1: UserResult
    partner2: UserResult
    partner_acceptance: float
    understanding: float
    attraction: tuple[float, float]
    life_attitudes: float
    similarity_thinking: float
    psy_maturity: tuple[float, float]
    complementarity: tuple[int, ...]

    @property
    def profile1(self) -> tuple[Tendency, ...]:
        return self.partner1.profile

    @property
    def profile2(self) -> tuple[Tendency, ...]:
        return self.partner2.profile

    @property
    def portrait1(self) -> tuple[Octant, ...]:
        return self.partner1.portrait

    @property
    def portrait2(self) -> tuple[Octant, ...]:
        return self.partner2.portrait

    @property
    def lead_segment1(self) -> Octant:
        return self.partner1.main_octant

    @property
    def lead_segment2(self) -> Octant:
        return self.partner2.main_octant


class MemberPairScore(BaseModel):
    """Pair result for two members of a list."""

    model_config = ConfigDict(frozen=True)

    member_a_id: str
    member_b_id: str
    result: PairResult


# ---------------------------------------------------------------------------
# Metrics
# ---------------------------------------------------------------------------
def partner_acceptance(partner1: UserResult, partner2: UserResult) -> float:
    """Acceptance of the partner's features: ratio of the main tendencies."""
    max_val1 = partner1.profile[partner1.main_tendency_list[0]].value
    max_val2 = partner2.profile[partner2.main_tendency_list[0]].value
    if max_val1 == 0 or max_val2 == 0:
        return 0
    return min_max_ratio(max_val1, max_val2)


def understanding(partner1: UserResult, partner2: UserResult) -> float:
    """Mutual understanding: 1 minus 1/8 per octant present in only one portrait."""
    result = 1.0
    for octant1, octant2 in zip(partner1.portrait, partner2.portrait):
        if (octant1.value == 0) != (octant2.value == 0):
            result -= _UNDERSTANDING_FRACTION
    return result


def opposite_octant_index(code: str) -> int:
    """Index of the octant diametrically opposite to *code*."""
    common_index = OCTANT_CODES.index(code)
    if common_index < 4:
        return common_index + 4
    return common_index - 4


def attraction(partner1: UserResult, partner2: UserResult) -> tuple[float, float]:
    """Unconscious attraction of each partner to the other.

    Compares each partner's lead octant with the partner's octant lying
    opposite to it.
    """
    lead1 = partner1.main_octant
    lead2 = partner2.main_octant
    opposite1 = partner2.portrait[opposite_octant_index(lead1.code)].value
    opposite2 = partner1.portrait[opposite_octant_index(lead2.code)].value

    if (opposite1 == 0 and lead1.value == 0) or (opposite2 == 0 and lead2.value == 0):
        return (0, 0)
    return (min_max_ratio(opposite1, lead1.value), min_max_ratio(opposite2, lead2.value))


def _same_hemisphere(code1: str, code2: str) -> bool:
    return (code1 in LEFT_HEMISPHERE and code2 in LEFT_HEMISPHERE) or (
        code1 in RIGHT_HEMISPHERE and code2 in RIGHT_HEMISPHERE
    )


def life_attitudes(partner1: UserResult, partner2: UserResult) -> float:
    """Similarity of life attitudes from the lead octant codes."""
    code1 = partner1.main_octant.code
    code2 = partner2.main_octant.code
    if code1 == code2:
        return 1
    # same quarter
    if code1[0] == code2[0]:
        return 0.5
    if _same_hemisphere(code1, code2):
        return 0.25
    return 0


def similarity_thinking(partner1: UserResult, partner2: UserResult) -> float:
    """Similarity of thinking from the lead octant codes."""
    code1 = partner1.main_octant.code
    code2 = partner2.main_octant.code
    if code1 == code2 or code1[0] == code2[0]:
        return 1
    if _same_hemisphere(code1, code2):
        return 0.5
    return 0


def psy_maturity(partner1: UserResult, partner2: UserResult) -> tuple[float, float]:
    """Psychological maturity: share of non-empty octants of each partner."""
    filled1 = [o for o in partner1.portrait if o.value != 0]
    filled2 = [o for o in partner2.portrait if o.value != 0]
    return (len(filled1) / 8, len(filled2) / 8)


def complementarity(partner1: UserResult, partner2: UserResult) -> tuple[int, ...]:
    """Lead octant indexes, collapsed to one when both partners share it."""
    lead1 = partner1.main_octant
    lead2 = partner2.main_octant
    if lead1.code == lead2.code:
        return (lead1.index,)
    return (lead1.index, lead2.index)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def compare_results(partner1: UserResult, partner2: UserResult) -> PairResult:
    """Compute every pair metric for two already aggregated results."""
    return PairResult(
        partner1=partner1,
        partner2=partner2,
        partner_acceptance=partner_acceptance(partner1, partner2),
        understanding=understanding(partner1, partner2),
        attraction=attraction(partner1, partner2),
        life_attitudes=life_attitudes(partner1, partner2),
        similarity_thinking=similarity_thinking(partner1, partner2),
        psy_maturity=psy_maturity(partner1, partner2),
        complementarity=complementarity(partner1, partner2),
    )


def analyze_pair(
    data1: Sequence[Sequence[float]],
    data2: Sequence[Sequence[float]],
) -> PairResult:
    """Score two 5×5 test results and compare them."""
    return compare_results(calculate_user_result(data1), calculate_user_result(data2))


# ---------------------------------------------------------------------------
# Batch helpers
# ---------------------------------------------------------------------------
def pair_compatibility_matrix(members: list[Member]) -> list[MemberPairScore]:
    """Compare every two members (upper triangle only)."""
    resolved = [(m, calculate_user_result(m.test_result)) for m in members]
    results: list[MemberPairScore] = []
    for i, (ma, ra) in enumerate(resolved):
        for mb, rb in resolved[i + 1:]:
            results.append(MemberPairScore(
                member_a_id=ma.id,
                member_b_id=mb.id,
                result=compare_results(ra, rb),
            ))
    return results
