"""
Trait Blend Functions

Genetic-weighted blend of parental trait values and upbringing modifiers:

    P(trait) = w_g * G + w_e * E

where G is the mean of both parents' values and E is an environmental term
starting at 0.5. Every environmental term and every blended score is clamped
to [0, 1].

Weights per trait:
    - Extraversion: 40% genetic, 60% environment
    - Intuition:    70% genetic, 30% environment
    - Thinking:     60% genetic, 40% environment
    - Judging:      50% genetic, 50% environment
"""

from typing import Dict, Tuple

from psyche_predict.models.mbti.profiles import (
    EnvironmentalProfile,
    FamilyEnvironment,
    GeneticProfile,
    SchoolType,
)
from psyche_predict.models.mbti.trait_scores import TraitScores

NEUTRAL_BASE = 0.5

# (genetic weight, environment weight)
TRAIT_WEIGHTS: Dict[str, Tuple[float, float]] = {
    "extraversion": (0.4, 0.6),
    "intuition": (0.7, 0.3),
    "thinking": (0.6, 0.4),
    "judging": (0.5, 0.5),
}

SCHOOL_EXTRAVERSION_IMPACT: Dict[SchoolType, float] = {
    SchoolType.ACTIVE: 0.25,
    SchoolType.STRICT: -0.15,
    SchoolType.CREATIVE: 0.10,
}

FIRST_BORN_BONUS = 0.15
LATER_BORN_PENALTY = 0.1
FRIENDS_INFLUENCE_FACTOR = 0.2
SIBLINGS_BONUS = 0.1

CREATIVE_SCHOOL_BONUS = 0.2
STRICT_FAMILY_THINKING_BONUS = 0.15
STRICT_FAMILY_JUDGING_BONUS = 0.25
SUPPORTIVE_FAMILY_JUDGING_PENALTY = 0.1


def clamp(score: float) -> float:
    """Clamp a score to [0, 1]."""
    return max(0.0, min(1.0, score))


def genetic_term(genetic: GeneticProfile, trait: str) -> float:
    """Mean parental value for an anchor trait, clamped."""
    return clamp(genetic.average(trait))


def blend(trait: str, genetic: float, environmental: float) -> float:
    """Weighted combination of the two terms for a trait, clamped."""
    genetic_weight, environment_weight = TRAIT_WEIGHTS[trait]
    return clamp(genetic * genetic_weight + environmental * environment_weight)


def environmental_extraversion(environment: EnvironmentalProfile) -> float:
    """
    Environmental extraversion term.

    First-borns gain, third-and-later children lose; school type,
    peer influence and siblings add social exposure.
    """
    base = NEUTRAL_BASE

    if environment.birth_order is not None:
        if environment.birth_order == 1:
            base += FIRST_BORN_BONUS
        elif environment.birth_order >= 3:
            base -= LATER_BORN_PENALTY

    base += SCHOOL_EXTRAVERSION_IMPACT.get(environment.school_category, 0.0)

    if environment.friends_influence is not None:
        base += environment.friends_influence * FRIENDS_INFLUENCE_FACTOR

    if environment.has_siblings is True:
        base += SIBLINGS_BONUS

    return clamp(base)


def environmental_intuition(environment: EnvironmentalProfile) -> float:
    base = NEUTRAL_BASE
    if environment.school_category is SchoolType.CREATIVE:
        base += CREATIVE_SCHOOL_BONUS
    return clamp(base)


def environmental_thinking(environment: EnvironmentalProfile) -> float:
    base = NEUTRAL_BASE
    if environment.family_category is FamilyEnvironment.STRICT:
        base += STRICT_FAMILY_THINKING_BONUS
    return clamp(base)


def environmental_judging(environment: EnvironmentalProfile) -> float:
    base = NEUTRAL_BASE
    family = environment.family_category
    if family is FamilyEnvironment.STRICT:
        base += STRICT_FAMILY_JUDGING_BONUS
    elif family is FamilyEnvironment.SUPPORTIVE:
        base -= SUPPORTIVE_FAMILY_JUDGING_PENALTY
    return clamp(base)


def blend_extraversion(genetic: GeneticProfile, environment: EnvironmentalProfile) -> float:
    return blend(
        "extraversion",
        genetic_term(genetic, "extraversion"),
        environmental_extraversion(environment),
    )


def blend_intuition(genetic: GeneticProfile, environment: EnvironmentalProfile) -> float:
    return blend(
        "intuition",
        genetic_term(genetic, "intuition"),
        environmental_intuition(environment),
    )


def blend_thinking(genetic: GeneticProfile, environment: EnvironmentalProfile) -> float:
    return blend(
        "thinking",
        genetic_term(genetic, "thinking"),
        environmental_thinking(environment),
    )


def blend_judging(genetic: GeneticProfile, environment: EnvironmentalProfile) -> float:
    return blend(
        "judging",
        genetic_term(genetic, "judging"),
        environmental_judging(environment),
    )


def blend_all(genetic: GeneticProfile, environment: EnvironmentalProfile) -> TraitScores:
    """
    Compute all eight trait scores.

    Args:
        genetic: Complete genetic profile
        environment: Environmental profile

    Returns:
        TraitScores with complements derived from the four primaries
    """
    return TraitScores.from_primaries(
        extraversion=blend_extraversion(genetic, environment),
        intuition=blend_intuition(genetic, environment),
        thinking=blend_thinking(genetic, environment),
        judging=blend_judging(genetic, environment),
    )
