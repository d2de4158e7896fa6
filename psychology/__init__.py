"""Psychological test scoring: user, pair and team results."""

from .engine.answers import calculate_results
from .engine.pair import PairResult, analyze_pair
from .engine.team import TeamResult, analyze_team
from .engine.user_result import calculate_user_result
from .types import OCTANT_CODES, Member, Octant, RawAnswer, Tendency, UserResult

__all__ = [
    "OCTANT_CODES",
    "Member",
    "Octant",
    "PairResult",
    "RawAnswer",
    "TeamResult",
    "Tendency",
    "UserResult",
    "analyze_pair",
    "analyze_team",
    "calculate_results",
    "calculate_user_result",
]
