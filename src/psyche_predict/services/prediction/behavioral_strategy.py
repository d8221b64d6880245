"""
Behavioral MBTI Strategy

Coarse, environment-dominant approximation based on observable behavior
patterns. Only the parents' thinking values are read.
"""

from psyche_predict.models.mbti.profiles import (
    EnvironmentalProfile,
    FamilyEnvironment,
    GeneticProfile,
    SchoolType,
)
from psyche_predict.models.mbti.trait_scores import TraitScores
from psyche_predict.services.prediction.base import MBTIPredictionStrategy
from psyche_predict.services.prediction.blending import NEUTRAL_BASE, clamp

BEHAVIORAL_STRATEGY_NAME = "BEHAVIORAL_MBTI_STRATEGY"

# Intuition is hard to observe behaviorally
FIXED_INTUITION = 0.6
THINKING_INHERITANCE = 0.8


class BehavioralMBTIStrategy(MBTIPredictionStrategy):
    """
    Behavioral prediction.

    Traits:
        - E: 0.5, +0.3 for an ACTIVE school, +0.2 when friends' influence > 0.7
        - N: fixed at 0.6
        - T: mean parental thinking x 0.8
        - J: 0.5, +0.4 for a STRICT family

    Risk is 0.4 for E > 0.7 (else 0.1), +0.3 for a STRICT family.
    Confidence uses the largest distance from 0.5, not the mean.
    """

    required_genetic_fields = ("father_thinking", "mother_thinking")

    @property
    def name(self) -> str:
        return BEHAVIORAL_STRATEGY_NAME

    @property
    def description(self) -> str:
        return "Behavioral analysis based on observed interaction patterns"

    def calculate_traits(
        self, genetic: GeneticProfile, environment: EnvironmentalProfile
    ) -> TraitScores:
        return TraitScores.from_primaries(
            extraversion=self._estimate_extraversion(environment),
            intuition=FIXED_INTUITION,
            thinking=self._estimate_thinking(genetic),
            judging=self._estimate_judging(environment),
        )

    def _estimate_extraversion(self, environment: EnvironmentalProfile) -> float:
        base = NEUTRAL_BASE
        if environment.school_category is SchoolType.ACTIVE:
            base += 0.3
        if environment.friends_influence is not None and environment.friends_influence > 0.7:
            base += 0.2
        return clamp(base)

    def _estimate_thinking(self, genetic: GeneticProfile) -> float:
        return clamp(genetic.average("thinking") * THINKING_INHERITANCE)

    def _estimate_judging(self, environment: EnvironmentalProfile) -> float:
        base = NEUTRAL_BASE
        if environment.family_category is FamilyEnvironment.STRICT:
            base += 0.4
        return clamp(base)

    def calculate_bullying_risk(
        self, trait_scores: TraitScores, environment: EnvironmentalProfile
    ) -> float:
        risk = 0.4 if trait_scores.e > 0.7 else 0.1
        if environment.family_category is FamilyEnvironment.STRICT:
            risk += 0.3
        return clamp(risk)

    def calculate_confidence(self, trait_scores: TraitScores) -> float:
        return clamp(max(trait_scores.deviations()) * 2)
