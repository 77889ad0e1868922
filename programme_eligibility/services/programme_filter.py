"""
Programme filter selecting the programmes a beneficiary may apply to
"""
import logging
from datetime import date
from typing import Iterable, List, Optional

from ..models.beneficiary import Beneficiary, QuestionnaireResponses
from ..models.programme import Programme
from .criteria_evaluator import CriteriaEvaluator, criteria_evaluator

logger = logging.getLogger(__name__)


def filter_eligible(
    programmes: Iterable[Programme],
    beneficiary: Beneficiary,
    responses: Optional[QuestionnaireResponses] = None,
    today: Optional[date] = None,
    evaluator: Optional[CriteriaEvaluator] = None
) -> List[Programme]:
    """
    Select the programmes a beneficiary may currently apply to

    A programme is kept when it accepts applications (OPEN or IN_PROGRESS),
    today falls inside its operative window, and the beneficiary meets its
    eligibility criteria. Input order is preserved.

    Args:
        programmes: Candidate programmes (copied, never modified)
        beneficiary: Beneficiary record
        responses: Questionnaire answers, if any
        today: Reference day (defaults to the current date)
        evaluator: Criteria evaluator (defaults to the standard criteria)

    Returns:
        Eligible programmes in input order
    """
    reference_day = today or date.today()
    evaluator = evaluator or criteria_evaluator
    candidates = list(programmes or [])

    eligible = []
    for programme in candidates:
        if not programme.accepts_applications:
            logger.debug(f"Skipping {programme.id}: status {programme.status!r} closed to applications")
            continue

        if not programme.is_running_on(reference_day):
            logger.debug(f"Skipping {programme.id}: {reference_day} outside operative window")
            continue

        if evaluator.check_eligibility(beneficiary, programme, responses).eligible:
            eligible.append(programme)

    logger.debug(f"{len(eligible)}/{len(candidates)} programmes eligible for {beneficiary.id or 'beneficiary'}")
    return eligible
