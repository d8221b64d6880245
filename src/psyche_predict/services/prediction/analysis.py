"""
Analysis Rendering

Formats already-computed scores into the multi-section report returned
with every prediction. Pure formatting: no score is altered here.
"""

from typing import List

from psyche_predict.models.mbti.mbti_types import get_type_description
from psyche_predict.models.mbti.trait_scores import TraitScores

HIGH_RISK_THRESHOLD = 0.7
MEDIUM_RISK_THRESHOLD = 0.4

_DICHOTOMY_LINES = (
    ("Extraversion", "E", "Introversion", "I"),
    ("Intuition", "N", "Sensing", "S"),
    ("Thinking", "T", "Feeling", "F"),
    ("Judging", "J", "Perceiving", "P"),
)


def _percent(value: float) -> str:
    return f"{value * 100:.0f}%"


def risk_tier(bullying_risk: float) -> str:
    """
    Map a risk value to its narrative tier.

    Returns:
        "high" (> 0.7), "medium" (> 0.4) or "low"
    """
    if bullying_risk > HIGH_RISK_THRESHOLD:
        return "high"
    if bullying_risk > MEDIUM_RISK_THRESHOLD:
        return "medium"
    return "low"


def render_risk_section(bullying_risk: float) -> List[str]:
    """Risk narrative lines for the tier the value falls into."""
    tier = risk_tier(bullying_risk)
    percent = _percent(bullying_risk)

    if tier == "high":
        return [
            f"• HIGH BULLYING RISK ({percent})",
            "• May show aggression towards peers",
            "• Tends to dominate in groups",
            "Recommendations: develop empathy, team sports, work with a psychologist",
        ]
    if tier == "medium":
        return [
            f"• MEDIUM BULLYING RISK ({percent})",
            "• May act aggressively in conflict situations",
            "Recommendations: teach constructive conflict resolution",
        ]
    return [
        f"• LOW BULLYING RISK ({percent})",
        "• Likely to interact peacefully with peers",
    ]


def render_analysis(
    mbti_type: str,
    trait_scores: TraitScores,
    confidence: float,
    bullying_risk: float,
) -> str:
    """
    Render the detailed personality analysis.

    Args:
        mbti_type: Four-letter type code
        trait_scores: All eight trait scores
        confidence: Prediction confidence (0.0-1.0)
        bullying_risk: Bullying risk (0.0-1.0)

    Returns:
        Report text
    """
    lines = [
        "DETAILED PERSONALITY ANALYSIS",
        "",
        f"MBTI type: {mbti_type}",
        f"Prediction confidence: {_percent(confidence)}",
        "",
        "TRAIT DISTRIBUTION:",
    ]

    for primary_name, primary, complement_name, complement in _DICHOTOMY_LINES:
        lines.append(
            f"• {primary_name} ({primary}): {_percent(trait_scores.score(primary))}"
            f" / {complement_name} ({complement}): {_percent(trait_scores.score(complement))}"
        )

    lines.append("")
    lines.append("RISK ANALYSIS:")
    lines.extend(render_risk_section(bullying_risk))

    lines.append("")
    lines.append(f"TYPE {mbti_type} CHARACTERISTICS:")
    lines.append(get_type_description(mbti_type))

    return "\n".join(lines)
