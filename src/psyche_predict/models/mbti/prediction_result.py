"""
Prediction Result Model

Aggregated outcome of a single prediction.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from psyche_predict.models.mbti.mbti_types import MBTIType
from psyche_predict.models.mbti.trait_scores import TraitScores


class PredictionResult(BaseModel):
    """
    MBTI prediction result.

    Attributes:
        mbti_type: Four-letter type code
        trait_scores: All eight trait scores
        confidence: How decisive the trait scores are (0.0-1.0)
        bullying_risk: Heuristic bullying risk (0.0-1.0)
        analysis: Human-readable report
        strategy_used: Name of the strategy that produced the result
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    mbti_type: str = Field(..., pattern=r"^[EI][NS][TF][JP]$", description="MBTI type code")
    trait_scores: TraitScores = Field(..., description="Scores for all eight traits")
    confidence: float = Field(..., ge=0.0, le=1.0, description="Prediction confidence")
    bullying_risk: float = Field(..., ge=0.0, le=1.0, description="Bullying risk")
    analysis: str = Field(..., description="Rendered analysis text")
    strategy_used: str = Field(..., description="Strategy name")

    @property
    def type_info(self) -> MBTIType:
        """MBTIType enum member for the predicted code."""
        return MBTIType(self.mbti_type)
