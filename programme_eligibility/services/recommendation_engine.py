"""
Recommendation engine mapping questionnaire scores to review decisions
"""
from typing import NamedTuple, Tuple

from ..models.results import Decision, Recommendation


class RecommendationBand(NamedTuple):
    threshold: int
    label: str
    color: str
    decision: Decision


# Highest threshold first; a score falls in the first band whose threshold it reaches
RECOMMENDATION_BANDS: Tuple[RecommendationBand, ...] = (
    RecommendationBand(80, "Excellent application", "#22c55e", Decision.ACCEPTED),
    RecommendationBand(60, "Good application", "#14b8a6", Decision.ACCEPTED),
    RecommendationBand(40, "Application needs improvement", "#f59e0b", Decision.UNDER_REVIEW),
)

FALLBACK_BAND = RecommendationBand(0, "Insufficient application", "#ef4444", Decision.REJECTED)


def recommend(score: float) -> Recommendation:
    """
    Map a score to a label, a color token and a decision

    Args:
        score: Questionnaire score, nominally 0-100

    Returns:
        Recommendation for the band the score falls in
    """
    band = next(
        (band for band in RECOMMENDATION_BANDS if score >= band.threshold),
        FALLBACK_BAND
    )
    return Recommendation(label=band.label, color=band.color, decision=band.decision)
