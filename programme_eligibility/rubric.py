"""Questionnaire rubric: weighted point table for the diagnostic questionnaire.

Partitions 100 points across six categories. Each category is a list of
independent point contributions keyed by question code and a predicate over
the answer. Category items must sum to the category weight.

Usage:
    from programme_eligibility.rubric import RUBRIC, CATEGORY_WEIGHTS

    for item in RUBRIC:
        if item.predicate.matches(responses.get(item.question)):
            ...
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, FrozenSet, Mapping, Optional, Tuple

from .utils.validators import choice_codes, is_multi_choice, is_single_choice


class RubricCategory(str, Enum):
    GENERAL_INFORMATION = "general_information"
    GOVERNANCE = "governance"
    FINANCIAL_MANAGEMENT = "financial_management"
    COMMERCIALIZATION = "commercialization"
    HUMAN_RESOURCES = "human_resources"
    ENVIRONMENTAL_PRACTICES = "environmental_practices"


CATEGORY_WEIGHTS: Mapping[RubricCategory, int] = MappingProxyType({
    RubricCategory.GENERAL_INFORMATION: 20,
    RubricCategory.GOVERNANCE: 25,
    RubricCategory.FINANCIAL_MANAGEMENT: 25,
    RubricCategory.COMMERCIALIZATION: 15,
    RubricCategory.HUMAN_RESOURCES: 10,
    RubricCategory.ENVIRONMENTAL_PRACTICES: 5,
})

RUBRIC_TOTAL = 100


@dataclass(frozen=True)
class Equals:
    """Single choice equal to an expected code"""

    code: str

    def matches(self, answer: Any) -> bool:
        return is_single_choice(answer) and answer == self.code

    def describe(self) -> str:
        return f"= {self.code}"


@dataclass(frozen=True)
class OneOf:
    """Single choice within an allowed set of codes"""

    codes: FrozenSet[str]

    def matches(self, answer: Any) -> bool:
        return is_single_choice(answer) and answer in self.codes

    def describe(self) -> str:
        return f"in {{{', '.join(sorted(self.codes))}}}"


@dataclass(frozen=True)
class Includes:
    """Multi-select containing a code"""

    code: str

    def matches(self, answer: Any) -> bool:
        return self.code in choice_codes(answer)

    def describe(self) -> str:
        return f"includes {self.code}"


@dataclass(frozen=True)
class NonEmpty:
    """Multi-select with at least one code selected"""

    def matches(self, answer: Any) -> bool:
        return is_multi_choice(answer) and len(answer) > 0

    def describe(self) -> str:
        return "at least one selected"


@dataclass(frozen=True)
class RubricItem:
    category: RubricCategory
    question: str
    predicate: Any
    points: int


def _one_of(*codes: str) -> OneOf:
    return OneOf(frozenset(codes))


_GENERAL = RubricCategory.GENERAL_INFORMATION
_GOVERNANCE = RubricCategory.GOVERNANCE
_FINANCE = RubricCategory.FINANCIAL_MANAGEMENT
_SALES = RubricCategory.COMMERCIALIZATION
_HR = RubricCategory.HUMAN_RESOURCES
_ENVIRONMENT = RubricCategory.ENVIRONMENTAL_PRACTICES

RUBRIC: Tuple[RubricItem, ...] = (
    # A6: formalization documents held, A5: promoter education level
    RubricItem(_GENERAL, "A6", Includes("ninea"), 5),
    RubricItem(_GENERAL, "A6", Includes("rccm"), 5),
    RubricItem(_GENERAL, "A6", Includes("recepisse"), 3),
    RubricItem(_GENERAL, "A6", Includes("manuel"), 2),
    RubricItem(_GENERAL, "A5", _one_of("universitaire", "secondaire"), 5),
    RubricItem(_GOVERNANCE, "B1", Equals("oui"), 5),
    RubricItem(_GOVERNANCE, "B2", Equals("documente"), 5),
    RubricItem(_GOVERNANCE, "B5", _one_of("systematiquement", "partiellement"), 5),
    RubricItem(_GOVERNANCE, "B6", Equals("oui"), 5),
    RubricItem(_GOVERNANCE, "B8", NonEmpty(), 5),
    RubricItem(_FINANCE, "C1", Equals("oui"), 10),
    RubricItem(_FINANCE, "C4", Equals("oui"), 5),
    RubricItem(_FINANCE, "C6", _one_of("systematiques", "informelles"), 5),
    RubricItem(_FINANCE, "C7", _one_of("preparé", "déposé"), 5),
    RubricItem(_SALES, "D1", Equals("oui"), 5),
    RubricItem(_SALES, "D4", _one_of("site", "boutique"), 5),
    RubricItem(_SALES, "D5", Equals("oui"), 5),
    RubricItem(_HR, "E1", Equals("oui"), 5),
    RubricItem(_HR, "E2", Equals("oui"), 5),
    RubricItem(_ENVIRONMENT, "F1", Equals("oui"), 5),
)


def validate_rubric(
    rubric: Tuple[RubricItem, ...],
    weights: Mapping[RubricCategory, int],
    total: Optional[int] = RUBRIC_TOTAL
) -> None:
    """Validate that category items sum to their weights and, unless total is None, weights sum to total."""
    for category, weight in weights.items():
        earned = sum(item.points for item in rubric if item.category == category)
        if earned != weight:
            raise ValueError(f"Rubric category {category.value} items sum to {earned}, expected {weight}")
    unknown = {item.category for item in rubric} - set(weights)
    if unknown:
        raise ValueError(f"Rubric items reference unweighted categories: {unknown}")
    weight_total = sum(weights.values())
    if total is not None and weight_total != total:
        raise ValueError(f"Rubric weights sum to {weight_total}, expected {total}")


validate_rubric(RUBRIC, CATEGORY_WEIGHTS)
