"""Per-user result: profile, portrait and the main octants / tendencies.

All functions are *pure*.
"""

from __future__ import annotations

from collections.abc import Sequence

from psychology.engine.numeric import sort_by_value_desc
from psychology.engine.portrait import get_person_portrait
from psychology.engine.profile import get_person_profile
from psychology.settings import load_settings
from psychology.types import Octant, Tendency, UserResult


DEFAULT_DIFF = 0.2


def _main_psycho_types(sorted_octants: Sequence[Octant], diff: float) -> tuple[int, ...]:
    first, second = sorted_octants[0], sorted_octants[1]
    # relative to the leading octant
    if first.value - second.value < diff * first.value:
        return (first.index, second.index)
    return (first.index,)


def _main_tendencies(profile: Sequence[Tendency], diff: float) -> tuple[int, ...]:
    first, second = sort_by_value_desc(profile)[:2]
    # absolute difference, not scaled like the octants
    if first.value - second.value < diff:
        return (first.index, second.index)
    return (first.index,)


def calculate_user_result(
    test_result: Sequence[Sequence[float]],
    diff: float = DEFAULT_DIFF,
) -> UserResult:
    """Build the full result for one 5×5 test result.

    Args:
        test_result: The user's category matrix.
        diff: Closeness threshold. The runner-up octant joins
            ``main_psycho_type_list`` when it is within ``diff`` of the
            leader's value (relative); the runner-up tendency joins
            ``main_tendency_list`` when within ``diff`` in absolute terms.

    Returns:
        UserResult with octants sorted max → min.
    """
    profile = get_person_profile(test_result)
    portrait = get_person_portrait(profile)
    sorted_octants = tuple(sort_by_value_desc(portrait))
    return UserResult(
        profile=profile,
        portrait=portrait,
        sorted_octants=sorted_octants,
        main_octant=sorted_octants[0],
        main_psycho_type_list=_main_psycho_types(sorted_octants, diff),
        main_tendency_list=_main_tendencies(profile, diff),
    )


def calculate_user_results(
    test_results: Sequence[Sequence[Sequence[float]]],
    diff: float = DEFAULT_DIFF,
) -> list[UserResult]:
    """Score several users at once, preserving input order."""
    return [calculate_user_result(tr, diff) for tr in test_results]


def is_test_passed(
    test_result: Sequence[Sequence[float]] | None,
    threshold: float | None = None,
) -> bool:
    """Whether the user answered sincerely enough for the result to count.

    The main octant has to exceed *threshold* (defaults to the configured
    ``test_threshold``).
    """
    if not test_result:
        return False
    if threshold is None:
        threshold = load_settings().test_threshold
    return calculate_user_result(test_result).main_octant.value > threshold
