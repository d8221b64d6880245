"""
Trait Score Model

Fixed-shape record of the eight MBTI trait scores.
"""

from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field, model_validator

from psyche_predict.models.mbti.mbti_types import DICHOTOMIES, PersonalityTrait

COMPLEMENT_TOLERANCE = 1e-9


class TraitScores(BaseModel):
    """
    Scores for all eight MBTI traits, each in [0, 1].

    Complementary pairs always sum to 1 (I = 1 - E, S = 1 - N,
    F = 1 - T, P = 1 - J). Serialized with the trait letters as keys.
    """

    model_config = ConfigDict(frozen=True, alias_generator=str.upper, populate_by_name=True)

    e: float = Field(..., ge=0.0, le=1.0, description="Extraversion")
    i: float = Field(..., ge=0.0, le=1.0, description="Introversion")
    n: float = Field(..., ge=0.0, le=1.0, description="Intuition")
    s: float = Field(..., ge=0.0, le=1.0, description="Sensing")
    t: float = Field(..., ge=0.0, le=1.0, description="Thinking")
    f: float = Field(..., ge=0.0, le=1.0, description="Feeling")
    j: float = Field(..., ge=0.0, le=1.0, description="Judging")
    p: float = Field(..., ge=0.0, le=1.0, description="Perceiving")

    @model_validator(mode="after")
    def _check_complements(self) -> "TraitScores":
        for primary, complement in DICHOTOMIES:
            total = self.score(primary) + self.score(complement)
            if abs(total - 1.0) > COMPLEMENT_TOLERANCE:
                raise ValueError(
                    f"{primary} and {complement} must sum to 1, got {total}"
                )
        return self

    @classmethod
    def from_primaries(
        cls, extraversion: float, intuition: float, thinking: float, judging: float
    ) -> "TraitScores":
        """
        Build the full record from the four primary scores.

        Args:
            extraversion: E score in [0, 1]
            intuition: N score in [0, 1]
            thinking: T score in [0, 1]
            judging: J score in [0, 1]

        Returns:
            TraitScores with complements filled in
        """
        return cls(
            e=extraversion,
            i=1 - extraversion,
            n=intuition,
            s=1 - intuition,
            t=thinking,
            f=1 - thinking,
            j=judging,
            p=1 - judging,
        )

    def score(self, code: str) -> float:
        """Score for a trait letter (case-insensitive)."""
        return getattr(self, code.lower())

    def as_dict(self) -> Dict[str, float]:
        """Scores keyed by trait letter, in E, I, N, S, T, F, J, P order."""
        return {
            letter: self.score(letter)
            for pair in DICHOTOMIES
            for letter in pair
        }

    def deviations(self) -> List[float]:
        """Absolute distance of every score from the neutral midpoint 0.5."""
        return [abs(value - 0.5) for value in self.as_dict().values()]

    def to_traits(self) -> List[PersonalityTrait]:
        """Expand into PersonalityTrait records."""
        return [
            PersonalityTrait.create_mbti_trait(code, value)
            for code, value in self.as_dict().items()
        ]
