"""
MBTI Prediction Models
"""

from psyche_predict.models.mbti.mbti_types import (
    DICHOTOMIES,
    GENERIC_TYPE_DESCRIPTION,
    MBTI_TYPE_INFO,
    TYPE_DESCRIPTIONS,
    MBTIType,
    PersonalityTrait,
    RiskLevel,
    TraitCategory,
    TraitCode,
    get_type_description,
)
from psyche_predict.models.mbti.profiles import (
    ALL_GENETIC_FIELDS,
    GENETIC_FIELDS,
    EnvironmentalProfile,
    FamilyEnvironment,
    GeneticProfile,
    SchoolType,
)
from psyche_predict.models.mbti.trait_scores import TraitScores
from psyche_predict.models.mbti.prediction_result import PredictionResult

__all__ = [
    "DICHOTOMIES",
    "GENERIC_TYPE_DESCRIPTION",
    "MBTI_TYPE_INFO",
    "TYPE_DESCRIPTIONS",
    "MBTIType",
    "PersonalityTrait",
    "RiskLevel",
    "TraitCategory",
    "TraitCode",
    "get_type_description",
    "ALL_GENETIC_FIELDS",
    "GENETIC_FIELDS",
    "EnvironmentalProfile",
    "FamilyEnvironment",
    "GeneticProfile",
    "SchoolType",
    "TraitScores",
    "PredictionResult",
]
