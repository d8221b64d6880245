"""
Prediction Service

Single entry point for collaborators: select a strategy by name and run it
on the two profiles. Plain mappings are accepted and validated into profile
models first.
"""

import logging
from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ValidationError

from psyche_predict.config import ConfigurationError, PredictionConfig, get_prediction_config
from psyche_predict.models.mbti.prediction_result import PredictionResult
from psyche_predict.models.mbti.profiles import EnvironmentalProfile, GeneticProfile
from psyche_predict.services.prediction.exceptions import (
    PredictionValidationError,
    UnknownStrategyError,
)
from psyche_predict.services.prediction.registry import get_strategy

logger = logging.getLogger(__name__)

GeneticInput = Union[GeneticProfile, Mapping[str, Any], None]
EnvironmentInput = Union[EnvironmentalProfile, Mapping[str, Any], None]


def _coerce(model_cls: type, data: Any, label: str) -> Optional[BaseModel]:
    """
    Turn caller input into a profile model.

    Raises:
        PredictionValidationError: If the mapping fails model validation
    """
    if data is None or isinstance(data, model_cls):
        return data

    try:
        return model_cls.model_validate(data)
    except ValidationError as e:
        fields = [".".join(str(part) for part in error["loc"]) for error in e.errors()]
        raise PredictionValidationError(
            f"Invalid {label} profile: {', '.join(fields) or 'malformed input'}",
            fields,
        ) from e


class PredictionService:
    """
    MBTI prediction service.

    Stateless wrapper around the strategy registry; safe to share.
    """

    def __init__(self, config: Optional[PredictionConfig] = None):
        """
        Initialize prediction service.

        Args:
            config: Service configuration (default: global configuration)

        Raises:
            ConfigurationError: If the default strategy is not registered
        """
        self.config = config or get_prediction_config()
        try:
            get_strategy(self.config.default_strategy)
        except UnknownStrategyError as e:
            raise ConfigurationError(
                f"Default strategy is not registered: {e.strategy_name} "
                f"(available: {', '.join(e.available)})"
            ) from e

        logger.info(
            f"PredictionService initialized: default_strategy={self.config.default_strategy}"
        )

    def predict(
        self,
        strategy_name: str,
        genetic: GeneticInput,
        environment: EnvironmentInput,
    ) -> PredictionResult:
        """
        Run the named strategy.

        Args:
            strategy_name: Exact registered strategy name
            genetic: GeneticProfile or mapping of its fields
            environment: EnvironmentalProfile or mapping of its fields

        Returns:
            PredictionResult

        Raises:
            UnknownStrategyError: If the strategy is not registered
            PredictionValidationError: If either profile is invalid
        """
        strategy = get_strategy(strategy_name)
        genetic_profile = _coerce(GeneticProfile, genetic, "genetic")
        environment_profile = _coerce(EnvironmentalProfile, environment, "environmental")

        result = strategy.predict(genetic_profile, environment_profile)

        logger.debug(
            f"Prediction via {strategy.name}: type={result.mbti_type}, "
            f"confidence={result.confidence:.3f}, risk={result.bullying_risk:.3f}"
        )
        return result

    def calculate(self, genetic: GeneticInput, environment: EnvironmentInput) -> PredictionResult:
        """Run the configured default strategy."""
        return self.predict(self.config.default_strategy, genetic, environment)
