"""
Criteria evaluator for checking a beneficiary against a programme's eligibility criteria
"""
import logging
from typing import Callable, Iterable, Mapping, Optional, Tuple

from ..models.beneficiary import Beneficiary, QuestionnaireResponses
from ..models.programme import Programme
from ..models.results import EligibilityVerdict
from ..utils.validators import as_responses, is_blank
from .questionnaire_scorer import calculate_score

logger = logging.getLogger(__name__)

# (passed, reason_if_failed)
CriterionOutcome = Tuple[bool, Optional[str]]
CriterionHandler = Callable[[Beneficiary, Programme, Mapping], CriterionOutcome]

PASSED: CriterionOutcome = (True, None)


def region_criterion(beneficiary: Beneficiary, programme: Programme, responses: Mapping) -> CriterionOutcome:
    """Beneficiary region must be one of the programme's target regions"""
    if not programme.target_regions:
        return PASSED
    if beneficiary.region_id in programme.target_regions:
        return PASSED
    return False, "Region not eligible"


def sector_criterion(beneficiary: Beneficiary, programme: Programme, responses: Mapping) -> CriterionOutcome:
    """Beneficiary sector must be one of the eligible sectors"""
    sectors = programme.criteria.sectors
    if not sectors:
        return PASSED
    if beneficiary.sector in sectors:
        return PASSED
    return False, "Activity sector not eligible"


def formalization_criterion(beneficiary: Beneficiary, programme: Programme, responses: Mapping) -> CriterionOutcome:
    """Formal enterprises hold a NINEA or an RCCM, either one suffices"""
    if not programme.criteria.formalization_required:
        return PASSED
    if not is_blank(beneficiary.ninea) or not is_blank(beneficiary.rccm):
        return PASSED
    return False, "Formalization required (NINEA or RCCM)"


def min_employees_criterion(beneficiary: Beneficiary, programme: Programme, responses: Mapping) -> CriterionOutcome:
    minimum = programme.criteria.min_employees
    if not minimum:
        return PASSED
    if beneficiary.employee_count >= minimum:
        return PASSED
    return False, f"Insufficient employee count (minimum: {minimum})"


def min_revenue_criterion(beneficiary: Beneficiary, programme: Programme, responses: Mapping) -> CriterionOutcome:
    minimum = programme.criteria.min_revenue
    if not minimum:
        return PASSED
    if beneficiary.revenue >= minimum:
        return PASSED
    return False, "Insufficient revenue"


def minimum_score_criterion(beneficiary: Beneficiary, programme: Programme, responses: Mapping) -> CriterionOutcome:
    """
    Questionnaire score must reach the programme's declared minimum

    Not part of the default criteria. Register it explicitly with
    CriteriaEvaluator.with_criterion("min_score", minimum_score_criterion).
    """
    minimum = programme.criteria.min_score
    if not minimum:
        return PASSED
    score = calculate_score(responses)
    if score >= minimum:
        return PASSED
    return False, f"Insufficient questionnaire score (minimum: {minimum})"


DEFAULT_CRITERIA: Tuple[Tuple[str, CriterionHandler], ...] = (
    ("region", region_criterion),
    ("sector", sector_criterion),
    ("formalization", formalization_criterion),
    ("min_employees", min_employees_criterion),
    ("min_revenue", min_revenue_criterion),
)


class CriteriaEvaluator:
    """Evaluates beneficiaries against programme eligibility criteria"""

    def __init__(self, criteria: Optional[Iterable[Tuple[str, CriterionHandler]]] = None):
        self.criteria: Tuple[Tuple[str, CriterionHandler], ...] = tuple(
            DEFAULT_CRITERIA if criteria is None else criteria
        )

    @property
    def criterion_names(self) -> Tuple[str, ...]:
        return tuple(name for name, _ in self.criteria)

    def with_criterion(self, name: str, handler: CriterionHandler) -> "CriteriaEvaluator":
        """
        Build an evaluator with an extra criterion evaluated after the existing ones

        Args:
            name: Criterion name (must not already be registered)
            handler: Callable returning (passed, reason_if_failed)

        Returns:
            A new evaluator; this one is left unchanged
        """
        if name in self.criterion_names:
            raise ValueError(f"Criterion already registered: {name}")
        return CriteriaEvaluator(self.criteria + ((name, handler),))

    def check_eligibility(
        self,
        beneficiary: Beneficiary,
        programme: Programme,
        responses: Optional[QuestionnaireResponses] = None
    ) -> EligibilityVerdict:
        """
        Check a beneficiary against every applicable criterion of a programme

        Every criterion is evaluated, so the verdict lists all failures.

        Args:
            beneficiary: Beneficiary record
            programme: Programme record
            responses: Questionnaire answers, if any

        Returns:
            EligibilityVerdict with one reason per failed criterion
        """
        answers = as_responses(responses)
        failures = []

        for name, handler in self.criteria:
            passed, reason = self._evaluate_criterion(name, handler, beneficiary, programme, answers)
            if not passed:
                failures.append(reason or f"Criterion not met: {name}")

        verdict = EligibilityVerdict.from_failures(failures)
        logger.debug(
            f"Eligibility of {beneficiary.id or 'beneficiary'} for {programme.id or 'programme'}: "
            f"{verdict.eligible} {list(verdict.reasons)}"
        )
        return verdict

    @staticmethod
    def _evaluate_criterion(
        name: str,
        handler: CriterionHandler,
        beneficiary: Beneficiary,
        programme: Programme,
        responses: Mapping
    ) -> CriterionOutcome:
        """Run a single criterion; a failing handler counts as not applicable"""
        try:
            outcome = handler(beneficiary, programme, responses)
            if isinstance(outcome, bool):
                return outcome, None
            passed, reason = outcome
            return bool(passed), reason
        except Exception as e:
            logger.error(f"Error evaluating criterion {name}: {e}")
            return PASSED


# Default evaluator instance
criteria_evaluator = CriteriaEvaluator()


def check_eligibility(
    beneficiary: Beneficiary,
    programme: Programme,
    responses: Optional[QuestionnaireResponses] = None
) -> EligibilityVerdict:
    """Check eligibility with the default criteria"""
    return criteria_evaluator.check_eligibility(beneficiary, programme, responses)
