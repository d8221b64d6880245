"""
Prediction Configuration Module

Configuration dataclass and loaders for the prediction service.

Values come either from environment variables (PSYCHE_*) or from a YAML
file; anything unset keeps its built-in default.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger(__name__)

DEFAULT_STRATEGY_NAME = "GENETIC_MBTI_STRATEGY"

DEFAULT_CONFIG_PATH = Path(__file__).parent / "prediction_config.yaml"

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigurationError(Exception):
    """Raised when configuration values are missing or invalid."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


@dataclass
class PredictionConfig:
    """
    Prediction service configuration.

    Attributes:
        default_strategy: Strategy used when the caller does not name one
        log_level: Root log level for the service
        api_title: Title reported by the HTTP adapter
        api_version: Version reported by the HTTP adapter
    """

    default_strategy: str = DEFAULT_STRATEGY_NAME
    log_level: str = "INFO"
    api_title: str = "Psyche Prediction API"
    api_version: str = "0.1.0"

    @classmethod
    def from_env(cls) -> "PredictionConfig":
        """
        Create configuration from environment variables.

        Environment variables:
        - PSYCHE_DEFAULT_STRATEGY: Default strategy name (default: GENETIC_MBTI_STRATEGY)
        - PSYCHE_LOG_LEVEL: Log level (default: INFO)
        - PSYCHE_API_TITLE: HTTP API title
        """
        return cls(
            default_strategy=os.environ.get("PSYCHE_DEFAULT_STRATEGY", DEFAULT_STRATEGY_NAME),
            log_level=os.environ.get("PSYCHE_LOG_LEVEL", "INFO").upper(),
            api_title=os.environ.get("PSYCHE_API_TITLE", "Psyche Prediction API"),
        )

    @classmethod
    def from_yaml(cls, config_path: Path) -> "PredictionConfig":
        """
        Load configuration from a YAML file.

        Missing keys keep their defaults. A missing file yields the defaults.

        Args:
            config_path: Path to the YAML file

        Returns:
            PredictionConfig instance

        Raises:
            ConfigurationError: If the file does not contain a mapping
        """
        if not config_path.exists():
            logger.info(f"Config file {config_path} not found, using defaults")
            return cls()

        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file {config_path} must contain a mapping")

        prediction = data.get("prediction") or {}
        api = data.get("api") or {}
        logging_section = data.get("logging") or {}

        return cls(
            default_strategy=prediction.get("default_strategy", DEFAULT_STRATEGY_NAME),
            log_level=str(logging_section.get("level", "INFO")).upper(),
            api_title=api.get("title", "Psyche Prediction API"),
            api_version=str(api.get("version", "0.1.0")),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "default_strategy": self.default_strategy,
            "log_level": self.log_level,
            "api_title": self.api_title,
            "api_version": self.api_version,
        }

    def validate(self) -> bool:
        """
        Validate configuration values.

        Returns:
            True if valid

        Raises:
            ConfigurationError: If any value is invalid
        """
        if not self.default_strategy:
            raise ConfigurationError("default_strategy must not be empty")

        if self.log_level not in VALID_LOG_LEVELS:
            raise ConfigurationError(
                f"log_level must be one of {', '.join(VALID_LOG_LEVELS)}, got {self.log_level}"
            )

        return True


# Global configuration instance
_prediction_config: Optional[PredictionConfig] = None


def get_prediction_config(config_path: Optional[Path] = None) -> PredictionConfig:
    """
    Get global prediction configuration instance

    Reads the YAML file when a path is given, otherwise environment variables.

    Args:
        config_path: Optional path to YAML configuration file

    Returns:
        PredictionConfig instance
    """
    global _prediction_config

    if _prediction_config is None:
        if config_path is not None:
            _prediction_config = PredictionConfig.from_yaml(config_path)
        else:
            _prediction_config = PredictionConfig.from_env()
        _prediction_config.validate()

    return _prediction_config


def reset_prediction_config() -> None:
    """Drop the cached global configuration."""
    global _prediction_config
    _prediction_config = None
