"""
MBTI Prediction Services
"""

from psyche_predict.services.prediction.analysis import render_analysis, risk_tier
from psyche_predict.services.prediction.base import MBTIPredictionStrategy, determine_mbti_type
from psyche_predict.services.prediction.behavioral_strategy import (
    BEHAVIORAL_STRATEGY_NAME,
    BehavioralMBTIStrategy,
)
from psyche_predict.services.prediction.exceptions import (
    PredictionError,
    PredictionValidationError,
    UnknownStrategyError,
)
from psyche_predict.services.prediction.genetic_strategy import (
    GENETIC_STRATEGY_NAME,
    GeneticMBTIStrategy,
)
from psyche_predict.services.prediction.registry import (
    STRATEGIES,
    available_strategies,
    get_strategy,
)
from psyche_predict.services.prediction.prediction_service import PredictionService

__all__ = [
    "render_analysis",
    "risk_tier",
    "MBTIPredictionStrategy",
    "determine_mbti_type",
    "BEHAVIORAL_STRATEGY_NAME",
    "BehavioralMBTIStrategy",
    "PredictionError",
    "PredictionValidationError",
    "UnknownStrategyError",
    "GENETIC_STRATEGY_NAME",
    "GeneticMBTIStrategy",
    "STRATEGIES",
    "available_strategies",
    "get_strategy",
    "PredictionService",
]
