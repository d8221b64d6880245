"""
Strategy Registry

Read-only lookup of prediction strategies by their exact name, built once
at import time.
"""

from types import MappingProxyType
from typing import Dict, List, Mapping

from psyche_predict.services.prediction.base import MBTIPredictionStrategy
from psyche_predict.services.prediction.behavioral_strategy import BehavioralMBTIStrategy
from psyche_predict.services.prediction.exceptions import UnknownStrategyError
from psyche_predict.services.prediction.genetic_strategy import GeneticMBTIStrategy


def _build_registry(*strategies: MBTIPredictionStrategy) -> Mapping[str, MBTIPredictionStrategy]:
    return MappingProxyType({strategy.name: strategy for strategy in strategies})


STRATEGIES: Mapping[str, MBTIPredictionStrategy] = _build_registry(
    GeneticMBTIStrategy(),
    BehavioralMBTIStrategy(),
)


def get_strategy(name: str) -> MBTIPredictionStrategy:
    """
    Look up a strategy by exact, case-sensitive name.

    Args:
        name: Registered strategy name

    Returns:
        Strategy instance

    Raises:
        UnknownStrategyError: If no strategy is registered under the name
    """
    try:
        return STRATEGIES[name]
    except (KeyError, TypeError):
        raise UnknownStrategyError(str(name), STRATEGIES.keys()) from None


def available_strategies() -> List[Dict[str, str]]:
    """Name and description of every registered strategy."""
    return [
        {"name": strategy.name, "description": strategy.description}
        for strategy in STRATEGIES.values()
    ]
