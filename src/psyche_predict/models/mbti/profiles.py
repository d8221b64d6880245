"""
Prediction Input Models

Pydantic models for the two inputs of a prediction: the parents' genetic
profile and the child's environmental profile.

Both models are frozen. Numeric domains are enforced at construction;
presence of the values a strategy needs is checked by the strategy itself.
"""

from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class SchoolType(str, Enum):
    """Recognized school-type categories. Anything else is neutral."""

    ACTIVE = "ACTIVE"
    STRICT = "STRICT"
    CREATIVE = "CREATIVE"
    NEUTRAL = "NEUTRAL"


class FamilyEnvironment(str, Enum):
    """Recognized family-environment categories. Anything else is neutral."""

    SUPPORTIVE = "SUPPORTIVE"
    STRICT = "STRICT"
    NEUTRAL = "NEUTRAL"


# Localized spellings accepted by earlier clients
SCHOOL_TYPE_ALIASES: Dict[str, SchoolType] = {
    "ACTIVE": SchoolType.ACTIVE,
    "АКТИВНАЯ": SchoolType.ACTIVE,
    "STRICT": SchoolType.STRICT,
    "СТРОГАЯ": SchoolType.STRICT,
    "CREATIVE": SchoolType.CREATIVE,
    "ТВОРЧЕСКАЯ": SchoolType.CREATIVE,
}

# Anchor trait -> (father field, mother field)
GENETIC_FIELDS: Dict[str, Tuple[str, str]] = {
    "extraversion": ("father_extraversion", "mother_extraversion"),
    "intuition": ("father_intuition", "mother_intuition"),
    "thinking": ("father_thinking", "mother_thinking"),
    "judging": ("father_judging", "mother_judging"),
}

ALL_GENETIC_FIELDS: Tuple[str, ...] = tuple(
    field_name for pair in GENETIC_FIELDS.values() for field_name in pair
)


def _normalize(value: Optional[str]) -> str:
    return value.strip().upper() if value else ""


class GeneticProfile(BaseModel):
    """
    Parents' genetic data.

    One value in [0, 1] per parent for each dichotomy anchor trait.
    Values may be absent; strategies that read an absent value reject
    the profile before scoring.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    father_extraversion: Optional[float] = Field(None, ge=0.0, le=1.0)
    father_intuition: Optional[float] = Field(None, ge=0.0, le=1.0)
    father_thinking: Optional[float] = Field(None, ge=0.0, le=1.0)
    father_judging: Optional[float] = Field(None, ge=0.0, le=1.0)

    mother_extraversion: Optional[float] = Field(None, ge=0.0, le=1.0)
    mother_intuition: Optional[float] = Field(None, ge=0.0, le=1.0)
    mother_thinking: Optional[float] = Field(None, ge=0.0, le=1.0)
    mother_judging: Optional[float] = Field(None, ge=0.0, le=1.0)

    def missing_fields(self, field_names: Iterable[str] = ALL_GENETIC_FIELDS) -> List[str]:
        """
        List the requested fields that are absent.

        Args:
            field_names: Field names to check (default: all eight)

        Returns:
            Names of absent fields, in the order requested
        """
        return [name for name in field_names if getattr(self, name) is None]

    def average(self, trait: str) -> float:
        """
        Mean of the father's and mother's value for one anchor trait.

        Args:
            trait: One of extraversion, intuition, thinking, judging

        Returns:
            Genetic term for the trait

        Raises:
            KeyError: If the trait is unknown
            ValueError: If either parent value is absent
        """
        father_field, mother_field = GENETIC_FIELDS[trait]
        father = getattr(self, father_field)
        mother = getattr(self, mother_field)
        if father is None or mother is None:
            raise ValueError(f"Genetic values for {trait} are incomplete")
        return (father + mother) / 2


class EnvironmentalProfile(BaseModel):
    """
    Upbringing conditions of the child.

    Attributes:
        birth_order: Position among siblings, starting at 1
        school_type: ACTIVE, STRICT, CREATIVE or any other tag (neutral)
        friends_influence: Peer influence in [0, 1]
        has_siblings: True, False or None when unknown
        family_environment: SUPPORTIVE, STRICT, NEUTRAL or any other tag (neutral)
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    birth_order: Optional[int] = Field(None, gt=0, strict=True)
    school_type: Optional[str] = None
    friends_influence: Optional[float] = Field(None, ge=0.0, le=1.0)
    has_siblings: Optional[bool] = None
    family_environment: Optional[str] = None

    @property
    def school_category(self) -> SchoolType:
        """School type matched case-insensitively; unrecognized tags are NEUTRAL."""
        return SCHOOL_TYPE_ALIASES.get(_normalize(self.school_type), SchoolType.NEUTRAL)

    @property
    def family_category(self) -> FamilyEnvironment:
        """Family environment matched case-insensitively; unrecognized tags are NEUTRAL."""
        normalized = _normalize(self.family_environment)
        if normalized == FamilyEnvironment.STRICT.value:
            return FamilyEnvironment.STRICT
        if normalized == FamilyEnvironment.SUPPORTIVE.value:
            return FamilyEnvironment.SUPPORTIVE
        return FamilyEnvironment.NEUTRAL

    def environmental_impact(self) -> float:
        """
        Coarse overall environment index in [0, 1].

        Starts at 0.5, adjusted by birth order (first-born +0.1,
        second-born -0.1) and school type (ACTIVE +0.2, STRICT -0.1).
        """
        impact = 0.5

        if self.birth_order == 1:
            impact += 0.1
        elif self.birth_order == 2:
            impact -= 0.1

        school = self.school_category
        if school is SchoolType.ACTIVE:
            impact += 0.2
        elif school is SchoolType.STRICT:
            impact -= 0.1

        return max(0.0, min(1.0, impact))
