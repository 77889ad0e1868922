"""
Questionnaire scorer computing the weighted suitability score of an application
"""
import logging
import math
from typing import Any, Dict, Mapping, Optional, Tuple

from ..models.programme import EligibilityCriteria
from ..models.results import CategoryScore, ScoreBreakdown
from ..rubric import CATEGORY_WEIGHTS, RUBRIC, RubricCategory, RubricItem, validate_rubric
from ..utils.validators import as_responses

logger = logging.getLogger(__name__)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


class QuestionnaireScorer:
    """Scores questionnaire answers against a weighted rubric"""

    def __init__(
        self,
        rubric: Tuple[RubricItem, ...] = RUBRIC,
        weights: Mapping[RubricCategory, int] = CATEGORY_WEIGHTS
    ):
        validate_rubric(rubric, weights, total=None)
        self.rubric = rubric
        self.weights = weights

    @property
    def max_score(self) -> int:
        return sum(self.weights.values())

    def _earned_by_category(self, responses: Any) -> Dict[RubricCategory, int]:
        answers = as_responses(responses)
        earned = {category: 0 for category in self.weights}
        if not answers:
            return earned

        for item in self.rubric:
            if item.predicate.matches(answers.get(item.question)):
                earned[item.category] = earned.get(item.category, 0) + item.points

        return earned

    def _normalize(self, earned: Dict[RubricCategory, int]) -> int:
        max_score = self.max_score
        if max_score <= 0:
            return 0
        score = _round_half_up(sum(earned.values()) / max_score * 100)
        return max(0, min(100, score))

    def calculate_score(
        self,
        responses: Any,
        criteria: Optional[EligibilityCriteria] = None
    ) -> int:
        """
        Calculate the normalized 0-100 score of questionnaire answers

        A programme minimum score is not applied here: the raw normalized
        score is always returned and thresholds are left to the caller.

        Args:
            responses: Answers keyed by question code (anything else scores 0)
            criteria: Programme criteria, accepted but not used for scoring

        Returns:
            Integer score between 0 and 100
        """
        try:
            return self._normalize(self._earned_by_category(responses))
        except Exception as e:
            logger.error(f"Error calculating questionnaire score: {e}")
            return 0

    def score_breakdown(self, responses: Any) -> ScoreBreakdown:
        """
        Break a questionnaire score down by rubric category

        Args:
            responses: Answers keyed by question code

        Returns:
            ScoreBreakdown with earned and maximum points per category
        """
        try:
            earned = self._earned_by_category(responses)
        except Exception as e:
            logger.error(f"Error calculating questionnaire score breakdown: {e}")
            earned = {category: 0 for category in self.weights}

        categories = tuple(
            CategoryScore(
                category=category.value,
                earned=earned.get(category, 0),
                maximum=weight
            )
            for category, weight in self.weights.items()
        )
        return ScoreBreakdown(score=self._normalize(earned), categories=categories)


# Default scorer instance
questionnaire_scorer = QuestionnaireScorer()


def calculate_score(responses: Any, criteria: Optional[EligibilityCriteria] = None) -> int:
    """Score answers with the default rubric"""
    return questionnaire_scorer.calculate_score(responses, criteria)


def score_breakdown(responses: Any) -> ScoreBreakdown:
    """Break answers down with the default rubric"""
    return questionnaire_scorer.score_breakdown(responses)
