"""
Psyche Predict configuration module.
"""

from psyche_predict.config.prediction_config import (
    DEFAULT_CONFIG_PATH,
    DEFAULT_STRATEGY_NAME,
    ConfigurationError,
    PredictionConfig,
    get_prediction_config,
    reset_prediction_config,
)

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_STRATEGY_NAME",
    "ConfigurationError",
    "PredictionConfig",
    "get_prediction_config",
    "reset_prediction_config",
]
