"""
FastAPI Main Application

Entry point of the prediction service HTTP adapter.
"""

import logging

from fastapi import FastAPI
from pydantic import BaseModel

from psyche_predict.api.prediction import router as prediction_router
from psyche_predict.config import get_prediction_config

config = get_prediction_config()

logging.basicConfig(
    level=getattr(logging, config.log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

app = FastAPI(
    title=config.api_title,
    description="MBTI personality and bullying-risk prediction",
    version=config.api_version,
)

app.include_router(prediction_router)


class HealthResponse(BaseModel):
    """Health check response model"""

    status: str


@app.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Health check endpoint

    Returns:
        HealthResponse: Service status
    """
    return HealthResponse(status="healthy")
