"""End-to-end scoring: raw answers through to pair and team results."""

from psychology import analyze_pair, analyze_team, calculate_results, calculate_user_result
from psychology.codec import decode_data, encode_data


def _answers(values):
    return [{"id": f"q{i}", "value": str(v)} for i, v in enumerate(values)]


class TestScenarios:
    def test_all_zero_answers(self):
        matrix = calculate_results(_answers([0] * 75))
        assert matrix == ((0, 0, 0, 0, 0),) * 5
        result = calculate_user_result(matrix)
        assert all(t.value == 0 for t in result.profile)
        assert all(o.value == 0 for o in result.portrait)
        assert result.main_octant.value == 0
        assert analyze_team([matrix]).cross_func() == -1

    def test_identical_pair(self):
        values = [(2, 1, 0, -1)[k % 4] for k in range(75)]
        matrix = calculate_results(_answers(values))
        pair = analyze_pair(matrix, matrix)
        lead = pair.partner1.main_octant.index
        assert pair.partner_acceptance == 1
        assert pair.understanding == 1
        assert pair.life_attitudes == 1
        assert pair.similarity_thinking == 1
        assert pair.complementarity == (lead,)

    def test_stored_result_scores_the_same(self):
        values = [(2, 1, 0, -1)[k % 4] for k in range(75)]
        matrix = calculate_results(_answers(values))
        stored = decode_data(encode_data([[3, 1, 0], matrix]))
        assert stored.data is not None
        assert calculate_user_result(stored.data[1]) == calculate_user_result(matrix)
