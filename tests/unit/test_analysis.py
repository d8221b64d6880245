"""
Tests for analysis rendering
"""

import pytest

from psyche_predict.models.mbti.trait_scores import TraitScores
from psyche_predict.services.prediction.analysis import render_analysis, risk_tier


@pytest.fixture
def scores():
    return TraitScores.from_primaries(0.75, 0.6, 0.8, 0.55)


class TestRiskTier:
    """Test risk tier thresholds."""

    @pytest.mark.parametrize(
        "risk, expected",
        [
            (0.0, "low"),
            (0.4, "low"),
            (0.41, "medium"),
            (0.7, "medium"),
            (0.71, "high"),
            (1.0, "high"),
        ],
    )
    def test_tiers(self, risk, expected):
        assert risk_tier(risk) == expected


class TestRenderAnalysis:
    """Test the rendered report."""

    def test_header(self, scores):
        text = render_analysis("ENTJ", scores, 0.42, 0.1)
        assert "MBTI type: ENTJ" in text
        assert "Prediction confidence: 42%" in text

    def test_dichotomy_lines(self, scores):
        text = render_analysis("ENTJ", scores, 0.42, 0.1)
        assert "• Extraversion (E): 75% / Introversion (I): 25%" in text
        assert "• Intuition (N): 60% / Sensing (S): 40%" in text
        assert "• Thinking (T): 80% / Feeling (F): 20%" in text
        assert "• Judging (J): 55% / Perceiving (P): 45%" in text

    def test_high_risk_section(self, scores):
        text = render_analysis("ENTJ", scores, 0.5, 0.9)
        assert "HIGH BULLYING RISK (90%)" in text
        assert "Recommendations:" in text

    def test_medium_risk_section(self, scores):
        text = render_analysis("ENTJ", scores, 0.5, 0.6)
        assert "MEDIUM BULLYING RISK (60%)" in text
        assert "conflict resolution" in text

    def test_low_risk_section(self, scores):
        text = render_analysis("ENTJ", scores, 0.5, 0.2)
        assert "LOW BULLYING RISK (20%)" in text
        assert "Recommendations:" not in text

    def test_type_description(self, scores):
        text = render_analysis("ENTJ", scores, 0.5, 0.2)
        assert "TYPE ENTJ CHARACTERISTICS:" in text
        assert "Natural leader" in text

    def test_generic_description_for_uncovered_type(self, scores):
        text = render_analysis("INFP", scores, 0.5, 0.2)
        assert "A unique combination of personality traits" in text

    def test_rendering_leaves_scores_untouched(self, scores):
        before = scores.as_dict()
        render_analysis("ENTJ", scores, 0.5, 0.2)
        assert scores.as_dict() == before
