"""
Prediction Exceptions

Typed failures surfaced by the prediction engine. Both are terminal for
the invocation: no partial result is produced and nothing is retried.
"""

from typing import Iterable, List, Optional


class PredictionError(Exception):
    """Base exception for prediction failures"""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class PredictionValidationError(PredictionError):
    """Raised when a required input is absent or outside its domain"""

    def __init__(self, message: str, fields: Optional[Iterable[str]] = None):
        self.fields: List[str] = list(fields or [])
        super().__init__(message)


class UnknownStrategyError(PredictionError):
    """Raised when the requested strategy name is not registered"""

    def __init__(self, strategy_name: str, available: Iterable[str] = ()):
        self.strategy_name = strategy_name
        self.available: List[str] = list(available)
        super().__init__(f"Strategy not found: {strategy_name}")
