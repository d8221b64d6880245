"""
MBTI Type Models

Trait codes, the sixteen MBTI types and their fixed description tables.
All tables are read-only and built once at import time.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Tuple


class TraitCode(str, Enum):
    """
    The eight MBTI trait letters.

    Primary letters (E, N, T, J) are scored directly; the others are
    their complements.
    """

    E = "E"
    I = "I"  # noqa: E741
    N = "N"
    S = "S"
    T = "T"
    F = "F"
    J = "J"
    P = "P"

    @property
    def trait_name(self) -> str:
        return TRAIT_NAMES[self.value]

    @property
    def description(self) -> str:
        return TRAIT_DESCRIPTIONS[self.value]


# Dichotomies in type-code order: (primary, complement)
DICHOTOMIES: Tuple[Tuple[str, str], ...] = (
    ("E", "I"),
    ("N", "S"),
    ("T", "F"),
    ("J", "P"),
)

TRAIT_NAMES: Mapping[str, str] = MappingProxyType(
    {
        "E": "Extraversion",
        "I": "Introversion",
        "N": "Intuition",
        "S": "Sensing",
        "T": "Thinking",
        "F": "Feeling",
        "J": "Judging",
        "P": "Perceiving",
    }
)

TRAIT_DESCRIPTIONS: Mapping[str, str] = MappingProxyType(
    {
        "E": "Oriented towards the outer world, sociable",
        "I": "Oriented towards the inner world, reflective",
        "N": "Focuses on ideas and possibilities",
        "S": "Focuses on facts and concrete reality",
        "T": "Makes decisions based on logic",
        "F": "Makes decisions based on values",
        "J": "Prefers structure and planning",
        "P": "Prefers flexibility and spontaneity",
    }
)


class RiskLevel(str, Enum):
    """Type-level bullying risk group."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def description(self) -> str:
        return {
            "low": "Low risk",
            "medium": "Medium risk",
            "high": "High risk",
        }[self.value]


class MBTIType(str, Enum):
    """The sixteen MBTI type codes."""

    ISTJ = "ISTJ"
    ISFJ = "ISFJ"
    INFJ = "INFJ"
    INTJ = "INTJ"
    ISTP = "ISTP"
    ISFP = "ISFP"
    INFP = "INFP"
    INTP = "INTP"
    ESTP = "ESTP"
    ESFP = "ESFP"
    ENFP = "ENFP"
    ENTP = "ENTP"
    ESTJ = "ESTJ"
    ESFJ = "ESFJ"
    ENFJ = "ENFJ"
    ENTJ = "ENTJ"

    @property
    def label(self) -> str:
        return MBTI_TYPE_INFO[self.value][0]

    @property
    def description(self) -> str:
        return MBTI_TYPE_INFO[self.value][1]

    @property
    def bullying_risk_group(self) -> RiskLevel:
        """Coarse risk group attached to the type itself, independent of scores."""
        if self.value in ("ENTJ", "ESTJ", "ESTP"):
            return RiskLevel.HIGH
        if self.value in ("ENTP", "INTJ"):
            return RiskLevel.MEDIUM
        return RiskLevel.LOW


MBTI_TYPE_INFO: Mapping[str, Tuple[str, str]] = MappingProxyType(
    {
        "ISTJ": ("Inspector", "Responsible, organized, practical"),
        "ISFJ": ("Protector", "Devoted, warm, responsible"),
        "INFJ": ("Counselor", "Insightful, inspiring, persistent"),
        "INTJ": ("Strategist", "Innovative, independent, decisive"),
        "ISTP": ("Craftsman", "Spontaneous, logical, efficient"),
        "ISFP": ("Composer", "Friendly, sensitive, modest"),
        "INFP": ("Healer", "Idealistic, empathetic, creative"),
        "INTP": ("Architect", "Logical, original, curious"),
        "ESTP": ("Dynamo", "Energetic, practical, spontaneous"),
        "ESFP": ("Performer", "Outgoing, friendly, generous"),
        "ENFP": ("Champion", "Enthusiastic, creative, sociable"),
        "ENTP": ("Visionary", "Inventive, clever, direct"),
        "ESTJ": ("Supervisor", "Practical, responsible, organized"),
        "ESFJ": ("Provider", "Caring, popular, harmonious"),
        "ENFJ": ("Teacher", "Charismatic, inspiring, tactful"),
        "ENTJ": ("Commander", "Decisive, leading, strategic"),
    }
)

# Closing section of the rendered analysis. Codes not listed use GENERIC_TYPE_DESCRIPTION.
TYPE_DESCRIPTIONS: Mapping[str, str] = MappingProxyType(
    {
        "ENTJ": "• Natural leader and strategist\n• Decisive, enjoys challenges\n• Can be overly critical",
        "ENFJ": "• Inspirer, charismatic\n• Sensitive to the emotions of others\n• Tries to please everyone",
        "INTJ": "• Strategist, independent thinker\n• Goal-oriented perfectionist\n• Can seem detached",
        "ENTP": "• Innovator, loves debate\n• Quick thinker, enterprising\n• Can be contrarian",
        "ESTJ": "• Organizer, practical\n• Responsible, traditional\n• Can be rigid",
        "ESFJ": "• Caring, popular\n• Responsible, harmonious\n• Sensitive to criticism",
        "ISTJ": "• Responsible, realistic\n• Hard-working, traditional\n• May resist change",
        "ISFJ": "• Protector, devoted\n• Warm, practical\n• Avoids conflict",
    }
)

GENERIC_TYPE_DESCRIPTION = "• A unique combination of personality traits"


def get_type_description(mbti_type: str) -> str:
    """
    Look up the closing description for a type code.

    Args:
        mbti_type: Four-letter type code

    Returns:
        Description block, or the generic line for uncovered codes
    """
    return TYPE_DESCRIPTIONS.get(mbti_type, GENERIC_TYPE_DESCRIPTION)


class TraitCategory(str, Enum):
    """Personality model a trait belongs to."""

    MBTI = "mbti"
    BIG_FIVE = "big_five"
    TEMPERAMENT = "temperament"
    CUSTOM = "custom"


@dataclass(frozen=True)
class PersonalityTrait:
    """
    Single scored personality trait.

    Attributes:
        code: Trait letter (E, I, N, S, T, F, J, P)
        name: Full trait name
        description: Short trait description
        score: Score in [0, 1]
        weight: Weight of the trait in downstream calculations
        category: Personality model the trait belongs to
    """

    code: str
    name: str
    description: str
    score: float
    weight: float = 1.0
    category: TraitCategory = TraitCategory.MBTI

    @classmethod
    def create_mbti_trait(cls, code: str, score: float) -> "PersonalityTrait":
        """Build an MBTI trait, clamping the score to [0, 1]."""
        return cls(
            code=code,
            name=TRAIT_NAMES.get(code, "Unknown"),
            description=TRAIT_DESCRIPTIONS.get(code, "Unknown trait"),
            score=max(0.0, min(1.0, score)),
        )
