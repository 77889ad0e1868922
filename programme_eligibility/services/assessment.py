"""
Application assessment combining eligibility, questionnaire score and recommendation
"""
from typing import Optional

from ..models.beneficiary import Beneficiary, QuestionnaireResponses
from ..models.programme import Programme
from ..models.results import ApplicationAssessment
from .criteria_evaluator import CriteriaEvaluator, criteria_evaluator
from .questionnaire_scorer import calculate_score
from .recommendation_engine import recommend


def assess_application(
    beneficiary: Beneficiary,
    programme: Programme,
    responses: Optional[QuestionnaireResponses] = None,
    evaluator: Optional[CriteriaEvaluator] = None
) -> ApplicationAssessment:
    """Evaluate one application end to end"""
    verdict = (evaluator or criteria_evaluator).check_eligibility(beneficiary, programme, responses)
    score = calculate_score(responses, programme.criteria)
    return ApplicationAssessment(verdict=verdict, score=score, recommendation=recommend(score))
