"""Shared helpers for building test matrices."""

import pytest


def matrix_from_profile(profile, attachment=0):
    """Build a 5×5 test result whose profile equals *profile* (non-negative values)."""
    p = profile
    return (
        (-p[2], p[6], 0, 0, 0),
        (-p[0], p[4], 0, 0, 0),
        (p[3], -p[7], 0, 0, 0),
        (attachment, 0, 0, 0, 0),
        (-p[1], p[5], 0, 0, 0),
    )


# axes bounding each octant
OCTANT_AXES = {
    "A1": (3, 4),
    "A2": (2, 3),
    "B1": (1, 2),
    "B2": (0, 1),
    "a1": (7, 0),
    "a2": (6, 7),
    "b1": (5, 6),
    "b2": (4, 5),
}


def single_octant_matrix(code, value=2):
    """Test result whose portrait has only octant *code* filled."""
    profile = [0] * 8
    for axis in OCTANT_AXES[code]:
        profile[axis] = value
    return matrix_from_profile(profile)


@pytest.fixture
def zero_matrix():
    return ((0, 0, 0, 0, 0),) * 5
