"""
Genetic MBTI Strategy

Formula-driven prediction: each primary trait is a weighted blend of the
parents' mean value and an environmental term (see blending).

Bullying risk rules, accumulated in order then clamped:
    - +0.6 if E > 0.7 and F < 0.3 (high extraversion, low empathy)
    - +0.3 if T > 0.8 and F < 0.4
    - +0.2 if the family environment is STRICT
    - +0.1 if the child explicitly has no siblings

Confidence is the mean distance of all eight scores from 0.5, doubled.
"""

from psyche_predict.models.mbti.profiles import (
    EnvironmentalProfile,
    FamilyEnvironment,
    GeneticProfile,
)
from psyche_predict.models.mbti.trait_scores import TraitScores
from psyche_predict.services.prediction.base import MBTIPredictionStrategy
from psyche_predict.services.prediction.blending import blend_all, clamp

GENETIC_STRATEGY_NAME = "GENETIC_MBTI_STRATEGY"

HIGH_EXTRAVERSION_THRESHOLD = 0.7
LOW_EMPATHY_THRESHOLD = 0.3
HIGH_THINKING_THRESHOLD = 0.8
MODERATE_EMPATHY_THRESHOLD = 0.4

DOMINANCE_RISK = 0.6
COLD_LOGIC_RISK = 0.3
STRICT_FAMILY_RISK = 0.2
NO_SIBLINGS_RISK = 0.1


class GeneticMBTIStrategy(MBTIPredictionStrategy):
    """Genetic prediction: 40% genetics + 60% environment for extraversion."""

    @property
    def name(self) -> str:
        return GENETIC_STRATEGY_NAME

    @property
    def description(self) -> str:
        return "Genetic MBTI prediction (40% genetics + 60% environment)"

    def calculate_traits(
        self, genetic: GeneticProfile, environment: EnvironmentalProfile
    ) -> TraitScores:
        return blend_all(genetic, environment)

    def calculate_bullying_risk(
        self, trait_scores: TraitScores, environment: EnvironmentalProfile
    ) -> float:
        risk = 0.0

        if trait_scores.e > HIGH_EXTRAVERSION_THRESHOLD and trait_scores.f < LOW_EMPATHY_THRESHOLD:
            risk += DOMINANCE_RISK

        if trait_scores.t > HIGH_THINKING_THRESHOLD and trait_scores.f < MODERATE_EMPATHY_THRESHOLD:
            risk += COLD_LOGIC_RISK

        if environment.family_category is FamilyEnvironment.STRICT:
            risk += STRICT_FAMILY_RISK

        if environment.has_siblings is False:
            risk += NO_SIBLINGS_RISK

        return clamp(risk)

    def calculate_confidence(self, trait_scores: TraitScores) -> float:
        deviations = trait_scores.deviations()
        average_deviation = sum(deviations) / len(deviations)
        return clamp(average_deviation * 2)
