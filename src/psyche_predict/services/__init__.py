"""
Service package

Exports the prediction service and its typed errors.
"""

from psyche_predict.services.prediction import (
    PredictionService,
    PredictionValidationError,
    UnknownStrategyError,
)

__all__ = [
    "PredictionService",
    "PredictionValidationError",
    "UnknownStrategyError",
]
