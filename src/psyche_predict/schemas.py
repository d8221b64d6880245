"""
Pydantic schemas

API request and response models.
"""

from typing import Any, Dict, List, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from psyche_predict.models.mbti.profiles import EnvironmentalProfile, GeneticProfile


class PredictionRequest(BaseModel):
    """Prediction request model"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    parents: GeneticProfile = Field(..., description="Parents' genetic profile")
    environment: EnvironmentalProfile = Field(..., description="Environmental profile")


class StrategyInfo(BaseModel):
    """Registered strategy description"""

    name: str
    description: str


class StrategyListResponse(BaseModel):
    """Strategy list response model"""

    strategies: List[StrategyInfo]


class ErrorResponse(BaseModel):
    """Error response model"""

    detail: str


class ValidationErrorResponse(BaseModel):
    """
    Validation error response model (422)

    detail is a message string when a prediction precondition fails, or
    FastAPI's list of error objects (loc, msg, type) when the request body
    fails schema validation.
    """

    detail: Union[str, List[Dict[str, Any]]]
