"""
Tests for trait blend functions

Checks each environmental term, the per-trait weights and clamping.
"""

import pytest

from psyche_predict.models.mbti.profiles import EnvironmentalProfile
from psyche_predict.services.prediction.blending import (
    TRAIT_WEIGHTS,
    blend,
    blend_all,
    blend_extraversion,
    blend_intuition,
    blend_judging,
    blend_thinking,
    clamp,
    environmental_extraversion,
    environmental_intuition,
    environmental_judging,
    environmental_thinking,
    genetic_term,
)


class TestClamp:
    """Test score clamping."""

    @pytest.mark.parametrize("raw, expected", [(-0.3, 0.0), (0.0, 0.0), (0.42, 0.42), (1.0, 1.0), (1.16, 1.0)])
    def test_clamp(self, raw, expected):
        assert clamp(raw) == expected


class TestEnvironmentalExtraversion:
    """Test the environmental extraversion term."""

    def test_neutral(self, neutral_environment):
        """No modifiers leaves 0.5."""
        assert environmental_extraversion(neutral_environment) == 0.5

    def test_first_born(self):
        assert environmental_extraversion(EnvironmentalProfile(birth_order=1)) == pytest.approx(0.65)

    def test_second_born_unchanged(self):
        assert environmental_extraversion(EnvironmentalProfile(birth_order=2)) == 0.5

    @pytest.mark.parametrize("birth_order", [3, 4, 7])
    def test_later_born(self, birth_order):
        profile = EnvironmentalProfile(birth_order=birth_order)
        assert environmental_extraversion(profile) == pytest.approx(0.4)

    @pytest.mark.parametrize(
        "school_type, expected",
        [("ACTIVE", 0.75), ("strict", 0.35), ("Creative", 0.6), ("MONTESSORI", 0.5)],
    )
    def test_school_impact(self, school_type, expected):
        profile = EnvironmentalProfile(school_type=school_type)
        assert environmental_extraversion(profile) == pytest.approx(expected)

    def test_friends_influence(self):
        profile = EnvironmentalProfile(friends_influence=0.5)
        assert environmental_extraversion(profile) == pytest.approx(0.6)

    def test_siblings(self):
        """Only an explicit True adds the siblings bonus."""
        assert environmental_extraversion(EnvironmentalProfile(has_siblings=True)) == pytest.approx(0.6)
        assert environmental_extraversion(EnvironmentalProfile(has_siblings=False)) == 0.5
        assert environmental_extraversion(EnvironmentalProfile(has_siblings=None)) == 0.5

    def test_clamped_at_one(self, social_environment):
        """0.5 + 0.15 + 0.25 + 0.16 + 0.1 = 1.16 is clamped to 1.0."""
        assert environmental_extraversion(social_environment) == 1.0

    def test_strict_later_born(self, strict_environment):
        """0.5 - 0.1 - 0.15 = 0.25."""
        assert environmental_extraversion(strict_environment) == pytest.approx(0.25)


class TestOtherEnvironmentalTerms:
    """Test the intuition, thinking and judging environmental terms."""

    def test_intuition_creative_school(self):
        assert environmental_intuition(EnvironmentalProfile(school_type="creative")) == pytest.approx(0.7)

    def test_intuition_other_school(self):
        assert environmental_intuition(EnvironmentalProfile(school_type="ACTIVE")) == 0.5

    def test_thinking_strict_family(self):
        assert environmental_thinking(EnvironmentalProfile(family_environment="STRICT")) == pytest.approx(0.65)

    def test_thinking_supportive_family(self):
        assert environmental_thinking(EnvironmentalProfile(family_environment="SUPPORTIVE")) == 0.5

    def test_judging_strict_family(self):
        assert environmental_judging(EnvironmentalProfile(family_environment="strict")) == pytest.approx(0.75)

    def test_judging_supportive_family(self):
        assert environmental_judging(EnvironmentalProfile(family_environment="SUPPORTIVE")) == pytest.approx(0.4)

    def test_judging_unknown_family(self):
        assert environmental_judging(EnvironmentalProfile(family_environment="OTHER")) == 0.5


class TestBlendedTraits:
    """Test the weighted genetic/environment combination."""

    def test_weights_sum_to_one(self):
        for genetic_weight, environment_weight in TRAIT_WEIGHTS.values():
            assert genetic_weight + environment_weight == pytest.approx(1.0)

    def test_intuition_is_more_heritable(self):
        """Intuition keeps 70% genetic weight."""
        assert TRAIT_WEIGHTS["intuition"] == (0.7, 0.3)
        assert TRAIT_WEIGHTS["extraversion"] == (0.4, 0.6)

    def test_genetic_term_averages_parents(self, genetic_factory):
        profile = genetic_factory(extraversion=0.9)
        assert genetic_term(profile, "extraversion") == pytest.approx(0.9)

    def test_blend_upper_bound(self):
        assert blend("judging", 1.0, 1.0) == 1.0

    def test_extraversion_scenario(self, extravert_genetic, social_environment):
        """0.4 x 0.9 + 0.6 x 1.0 = 0.96."""
        assert blend_extraversion(extravert_genetic, social_environment) == pytest.approx(0.96)

    def test_intuition_creative(self, genetic_factory):
        """0.7 x 0.8 + 0.3 x 0.7 = 0.77."""
        profile = genetic_factory(intuition=0.8)
        environment = EnvironmentalProfile(school_type="CREATIVE")
        assert blend_intuition(profile, environment) == pytest.approx(0.77)

    def test_thinking_strict(self, low_genetic, strict_environment):
        """0.6 x 0.1 + 0.4 x 0.65 = 0.32."""
        assert blend_thinking(low_genetic, strict_environment) == pytest.approx(0.32)

    def test_judging_strict_outweighs_low_genetics(self, low_genetic, strict_environment):
        """0.5 x 0.1 + 0.5 x 0.75 = 0.425, far above the 0.1 genetic term."""
        judging = blend_judging(low_genetic, strict_environment)
        assert judging == pytest.approx(0.425)
        assert judging > genetic_term(low_genetic, "judging")

    def test_blend_all_neutral(self, neutral_genetic, neutral_environment):
        """A neutral input keeps every trait at 0.5."""
        scores = blend_all(neutral_genetic, neutral_environment)
        for value in scores.as_dict().values():
            assert value == pytest.approx(0.5)

    def test_blend_all_complements(self, low_genetic, strict_environment):
        scores = blend_all(low_genetic, strict_environment)
        assert scores.e + scores.i == pytest.approx(1.0)
        assert scores.n + scores.s == pytest.approx(1.0)
        assert scores.t + scores.f == pytest.approx(1.0)
        assert scores.j + scores.p == pytest.approx(1.0)
