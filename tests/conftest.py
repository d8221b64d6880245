"""
Shared fixtures for prediction tests.
"""

import pytest

from psyche_predict.config import reset_prediction_config
from psyche_predict.models.mbti.profiles import EnvironmentalProfile, GeneticProfile


def make_genetic(
    extraversion: float = 0.5,
    intuition: float = 0.5,
    thinking: float = 0.5,
    judging: float = 0.5,
) -> GeneticProfile:
    """Genetic profile with identical values for both parents."""
    return GeneticProfile(
        father_extraversion=extraversion,
        mother_extraversion=extraversion,
        father_intuition=intuition,
        mother_intuition=intuition,
        father_thinking=thinking,
        mother_thinking=thinking,
        father_judging=judging,
        mother_judging=judging,
    )


@pytest.fixture(autouse=True)
def _reset_config():
    """Each test starts without a cached global configuration."""
    reset_prediction_config()
    yield
    reset_prediction_config()


@pytest.fixture
def neutral_genetic() -> GeneticProfile:
    """Both parents at 0.5 on every trait."""
    return make_genetic()


@pytest.fixture
def neutral_environment() -> EnvironmentalProfile:
    """No birth order, unrecognized school, no peers, unknown siblings, neutral family."""
    return EnvironmentalProfile(school_type="BOARDING", family_environment="NEUTRAL")


@pytest.fixture
def extravert_genetic() -> GeneticProfile:
    """Highly extraverted parents, neutral otherwise."""
    return make_genetic(extraversion=0.9)


@pytest.fixture
def social_environment() -> EnvironmentalProfile:
    """First-born at an active school with strong peer influence and siblings."""
    return EnvironmentalProfile(
        birth_order=1,
        school_type="ACTIVE",
        friends_influence=0.8,
        has_siblings=True,
        family_environment="NEUTRAL",
    )


@pytest.fixture
def low_genetic() -> GeneticProfile:
    """All eight parental values at 0.1."""
    return make_genetic(0.1, 0.1, 0.1, 0.1)


@pytest.fixture
def strict_environment() -> EnvironmentalProfile:
    """Fourth child, strict school and family, no peer influence, no siblings."""
    return EnvironmentalProfile(
        birth_order=4,
        school_type="STRICT",
        friends_influence=0.0,
        has_siblings=False,
        family_environment="STRICT",
    )


@pytest.fixture
def genetic_factory():
    """Factory for genetic profiles with identical parents."""
    return make_genetic
