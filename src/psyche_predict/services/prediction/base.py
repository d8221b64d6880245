"""
MBTI Prediction Strategy Interface

Every strategy turns a genetic profile and an environmental profile into
a PredictionResult. Strategies hold no mutable state, so one instance can
serve any number of concurrent callers.
"""

from abc import ABC, abstractmethod
from typing import Optional, Tuple

from psyche_predict.models.mbti.mbti_types import DICHOTOMIES
from psyche_predict.models.mbti.prediction_result import PredictionResult
from psyche_predict.models.mbti.profiles import (
    ALL_GENETIC_FIELDS,
    EnvironmentalProfile,
    GeneticProfile,
)
from psyche_predict.models.mbti.trait_scores import TraitScores
from psyche_predict.services.prediction.analysis import render_analysis
from psyche_predict.services.prediction.exceptions import PredictionValidationError

# The primary letter of a dichotomy wins ties
TYPE_THRESHOLD = 0.5


def determine_mbti_type(trait_scores: TraitScores) -> str:
    """
    Derive the four-letter code from trait scores.

    For each dichotomy the primary letter (E, N, T, J) is chosen when its
    score is >= 0.5, otherwise its complement.

    Args:
        trait_scores: All eight trait scores

    Returns:
        Type code in E/I, N/S, T/F, J/P order
    """
    return "".join(
        primary if trait_scores.score(primary) >= TYPE_THRESHOLD else complement
        for primary, complement in DICHOTOMIES
    )


class MBTIPredictionStrategy(ABC):
    """
    Prediction strategy interface.

    Subclasses supply trait scoring, risk and confidence; type derivation
    and analysis rendering are shared so that every strategy derives the
    type code identically.
    """

    # Genetic fields this strategy reads; all must be present
    required_genetic_fields: Tuple[str, ...] = ALL_GENETIC_FIELDS

    @property
    @abstractmethod
    def name(self) -> str:
        """Registered strategy name."""

    @property
    @abstractmethod
    def description(self) -> str:
        """Short human-readable description."""

    @abstractmethod
    def calculate_traits(
        self, genetic: GeneticProfile, environment: EnvironmentalProfile
    ) -> TraitScores:
        """Compute all eight trait scores."""

    @abstractmethod
    def calculate_bullying_risk(
        self, trait_scores: TraitScores, environment: EnvironmentalProfile
    ) -> float:
        """Compute bullying risk in [0, 1]."""

    @abstractmethod
    def calculate_confidence(self, trait_scores: TraitScores) -> float:
        """Compute confidence in [0, 1]."""

    def validate_input(
        self,
        genetic: Optional[GeneticProfile],
        environment: Optional[EnvironmentalProfile],
    ) -> None:
        """
        Check preconditions before any scoring.

        Raises:
            PredictionValidationError: If a profile is absent or a required
                genetic value is missing
        """
        if genetic is None:
            raise PredictionValidationError("Genetic profile is required", ["genetic"])
        if environment is None:
            raise PredictionValidationError("Environmental profile is required", ["environment"])

        missing = genetic.missing_fields(self.required_genetic_fields)
        if missing:
            raise PredictionValidationError(
                f"Missing genetic values for {self.name}: {', '.join(missing)}",
                missing,
            )

    def predict(
        self,
        genetic: Optional[GeneticProfile],
        environment: Optional[EnvironmentalProfile],
    ) -> PredictionResult:
        """
        Run a full prediction.

        Args:
            genetic: Parents' genetic profile
            environment: Environmental profile

        Returns:
            PredictionResult

        Raises:
            PredictionValidationError: If preconditions are not met
        """
        self.validate_input(genetic, environment)

        trait_scores = self.calculate_traits(genetic, environment)
        mbti_type = determine_mbti_type(trait_scores)
        bullying_risk = self.calculate_bullying_risk(trait_scores, environment)
        confidence = self.calculate_confidence(trait_scores)
        analysis = render_analysis(mbti_type, trait_scores, confidence, bullying_risk)

        return PredictionResult(
            mbti_type=mbti_type,
            trait_scores=trait_scores,
            confidence=confidence,
            bullying_risk=bullying_risk,
            analysis=analysis,
            strategy_used=self.name,
        )
