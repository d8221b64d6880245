"""
Prediction API Routes

Thin HTTP adapter over PredictionService. No scoring happens here.
"""

import logging
from functools import lru_cache
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from psyche_predict.models.mbti.prediction_result import PredictionResult
from psyche_predict.schemas import (
    ErrorResponse,
    PredictionRequest,
    StrategyInfo,
    StrategyListResponse,
    ValidationErrorResponse,
)
from psyche_predict.services.prediction import (
    PredictionService,
    PredictionValidationError,
    UnknownStrategyError,
    available_strategies,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/predictions", tags=["Predictions"])


@lru_cache(maxsize=1)
def get_prediction_service() -> PredictionService:
    """Shared PredictionService instance."""
    return PredictionService()


def _run(service: PredictionService, strategy: str, request: PredictionRequest) -> PredictionResult:
    try:
        return service.predict(strategy, request.parents, request.environment)
    except UnknownStrategyError as e:
        logger.warning(f"Rejected prediction request: {e.message}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
    except PredictionValidationError as e:
        logger.warning(f"Rejected prediction request: {e.message}")
        raise HTTPException(status_code=422, detail=e.message)


@router.post(
    "/calculate",
    response_model=PredictionResult,
    responses={422: {"model": ValidationErrorResponse}},
)
def calculate_prediction(
    request: PredictionRequest,
    service: Annotated[PredictionService, Depends(get_prediction_service)],
) -> PredictionResult:
    """
    Predict with the configured default strategy.

    Args:
        request: Parents' genetic profile and environmental profile

    Returns:
        PredictionResult
    """
    return _run(service, service.config.default_strategy, request)


@router.post(
    "/calculate-advanced",
    response_model=PredictionResult,
    responses={404: {"model": ErrorResponse}, 422: {"model": ValidationErrorResponse}},
)
def calculate_advanced(
    request: PredictionRequest,
    strategy: Annotated[str, Query(description="Registered strategy name")],
    service: Annotated[PredictionService, Depends(get_prediction_service)],
) -> PredictionResult:
    """
    Predict with an explicitly named strategy.

    Raises:
        HTTPException: 404 for an unknown strategy, 422 for invalid input
    """
    return _run(service, strategy, request)


@router.get("/strategies", response_model=StrategyListResponse)
def list_strategies() -> StrategyListResponse:
    """List registered strategies."""
    return StrategyListResponse(
        strategies=[StrategyInfo(**info) for info in available_strategies()]
    )
