"""Tests for the heuristic quality scorer."""

import pytest

from translation_service.content.scorer import QualityScorer, score


class TestScore:
    """Tests for score()."""

    def test_short_plain_text(self):
        # 60 + 5 * 0.1 = 60.5, halves round up
        assert score("Hello") == 61

    @pytest.mark.parametrize("length, expected", [(15, 62), (25, 63), (35, 64)])
    def test_half_points_round_up(self, length, expected):
        assert score("a" * length) == expected

    def test_punctuation_bonus(self):
        # 60 + 6 * 0.1 + 5 = 65.6 -> 66
        assert score("Hello!") == 66

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("你好世界", 65),  # 60 + 0.4 + 5
            ("Привет", 66),  # 60 + 0.6 + 5
            ("café", 65),
        ],
    )
    def test_non_ascii_letters_get_bonus(self, text, expected):
        assert score(text) == expected

    def test_length_capped_at_ninety(self):
        assert score("a" * 1000) == 90

    def test_never_exceeds_hundred(self):
        assert score("!" * 1000) == 95
        assert 0 <= score("") <= 100

    def test_deterministic(self):
        text = "The quick brown fox."
        assert score(text) == score(text)


class TestQualityScorer:
    def test_needs_review_below_threshold(self):
        scorer = QualityScorer(review_threshold=70)
        assert scorer.needs_review(69) is True
        assert scorer.needs_review(70) is False

    def test_score_delegates(self):
        assert QualityScorer().score("你好") == score("你好")
