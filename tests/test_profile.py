"""Tests for psychology/engine/profile.py and psychology/engine/portrait.py."""

import pytest

from psychology.engine.portrait import get_person_portrait
from psychology.engine.profile import get_person_profile, split_row
from psychology.types import OCTANT_CODES, Tendency


ZERO_ROW = (0, 0, 0, 0, 0)

SAMPLE_MATRIX = (
    (2, -1, 3, 0, -2),
    (1, 1, -3, 2, 0),
    (-2, -2, 4, 1, 0),
    (3, 0, 0, 0, 0),
    (-1, 2, 2, -1, 0),
)


def _values(items):
    return [item.value for item in items]


def _profile(values):
    return [Tendency(index=i, value=v) for i, v in enumerate(values)]


class TestSplitRow:
    def test_mixed(self):
        assert split_row([2, -1, 3, 0, -2]) == (3, 5)

    def test_zeros_contribute_nothing(self):
        assert split_row(ZERO_ROW) == (0, 0)


class TestPersonProfile:
    def test_sample(self):
        profile = get_person_profile(SAMPLE_MATRIX)
        assert [t.index for t in profile] == list(range(8))
        assert _values(profile) == [3, 2, 3, 5, 4, 4, 5, 4]

    def test_row2_reads_pos_then_neg(self):
        """Index 3 takes row 2's positive sum, index 7 its negative sum."""
        matrix = (ZERO_ROW, ZERO_ROW, (4, -1, 0, 0, 0), ZERO_ROW, ZERO_ROW)
        profile = get_person_profile(matrix)
        assert profile[3].value == 4
        assert profile[7].value == 1

    def test_row1_reads_neg_then_pos(self):
        matrix = (ZERO_ROW, (4, -1, 0, 0, 0), ZERO_ROW, ZERO_ROW, ZERO_ROW)
        profile = get_person_profile(matrix)
        assert profile[0].value == 1
        assert profile[4].value == 4

    def test_row3_ignored(self):
        matrix = (ZERO_ROW, ZERO_ROW, ZERO_ROW, (3, -3, 2, 1, -1), ZERO_ROW)
        assert _values(get_person_profile(matrix)) == [0] * 8

    def test_wrong_row_count(self):
        with pytest.raises(ValueError, match="5 rows"):
            get_person_profile([ZERO_ROW] * 4)

    def test_wrong_row_length(self):
        matrix = [ZERO_ROW, ZERO_ROW, (1, 2, 3), ZERO_ROW, ZERO_ROW]
        with pytest.raises(ValueError, match="Row 2"):
            get_person_profile(matrix)

    def test_non_numeric_cell(self):
        matrix = [ZERO_ROW, ZERO_ROW, ("1", 0, 0, 0, 0), ZERO_ROW, ZERO_ROW]
        with pytest.raises(ValueError, match="non-numeric"):
            get_person_profile(matrix)


class TestPersonPortrait:
    def test_sample(self):
        portrait = get_person_portrait(get_person_profile(SAMPLE_MATRIX))
        assert [o.code for o in portrait] == list(OCTANT_CODES)
        assert [o.index for o in portrait] == list(range(8))
        assert _values(portrait) == [7.07, 5.3, 2.12, 2.12, 4.24, 7.07, 7.07, 5.66]

    @pytest.mark.parametrize(
        ("axes", "code"),
        [
            ((3, 4), "A1"),
            ((2, 3), "A2"),
            ((1, 2), "B1"),
            ((0, 1), "B2"),
            ((7, 0), "a1"),
            ((6, 7), "a2"),
            ((5, 6), "b1"),
            ((4, 5), "b2"),
        ],
    )
    def test_sector_between_adjacent_axes(self, axes, code):
        values = [0] * 8
        for axis in axes:
            values[axis] = 2
        portrait = get_person_portrait(_profile(values))
        filled = [o.code for o in portrait if o.value > 0]
        assert filled == [code]
        # 2 * 2 * 0.7071 / 2
        assert next(o.value for o in portrait if o.code == code) == 1.41

    def test_zero_profile(self):
        assert _values(get_person_portrait(_profile([0] * 8))) == [0] * 8

    def test_non_negative(self):
        for matrix in (SAMPLE_MATRIX, ((-3, -3, -3, -3, -3),) * 5, ((3, 3, 3, 3, 3),) * 5):
            portrait = get_person_portrait(get_person_profile(matrix))
            assert all(o.value >= 0 for o in portrait)

    def test_wrong_profile_length(self):
        with pytest.raises(ValueError, match="8 tendencies"):
            get_person_portrait(_profile([1] * 7))
