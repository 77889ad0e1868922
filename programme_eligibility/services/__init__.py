"""
Services package for the Programme Eligibility Engine
"""

from .criteria_evaluator import (
    CriteriaEvaluator,
    check_eligibility,
    minimum_score_criterion
)
from .questionnaire_scorer import QuestionnaireScorer, calculate_score, score_breakdown
from .recommendation_engine import recommend
from .programme_filter import filter_eligible
from .programme_validator import validate_programme
from .assessment import assess_application

__all__ = [
    "CriteriaEvaluator",
    "QuestionnaireScorer",
    "assess_application",
    "calculate_score",
    "check_eligibility",
    "filter_eligible",
    "minimum_score_criterion",
    "recommend",
    "score_breakdown",
    "validate_programme"
]
