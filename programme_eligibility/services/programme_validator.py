"""
Business-rule validation of programme records
"""
import logging
from typing import Callable, NamedTuple, Tuple

from ..models.programme import KNOWN_STATUSES, Programme
from ..models.results import RuleViolation, ValidationResult
from ..utils.validators import is_blank

logger = logging.getLogger(__name__)


class BusinessRule(NamedTuple):
    rule_id: str
    name: str
    validate: Callable[[Programme], bool]
    message: str


def _positive_budget(programme: Programme) -> bool:
    return programme.budget is None or programme.budget >= 0


def _coherent_dates(programme: Programme) -> bool:
    if programme.start_date and programme.end_date:
        return programme.start_date <= programme.end_date
    return True


def _valid_status(programme: Programme) -> bool:
    return not programme.status or programme.status in KNOWN_STATUSES


def _name_present(programme: Programme) -> bool:
    return not is_blank(programme.name)


PROGRAMME_RULES: Tuple[BusinessRule, ...] = (
    BusinessRule("PROG-001", "Positive budget", _positive_budget, "Budget must be zero or positive"),
    BusinessRule("PROG-002", "Coherent dates", _coherent_dates, "End date must not precede start date"),
    BusinessRule("PROG-003", "Valid status", _valid_status, "Status must be a known programme status"),
    BusinessRule("PROG-004", "Name required", _name_present, "Programme name is required"),
)


def validate_programme(programme: Programme) -> ValidationResult:
    """
    Validate a programme against every business rule

    Args:
        programme: Programme record

    Returns:
        ValidationResult listing every violated rule
    """
    errors = []

    for rule in PROGRAMME_RULES:
        try:
            if not rule.validate(programme):
                errors.append(RuleViolation(rule_id=rule.rule_id, rule_name=rule.name, message=rule.message))
        except Exception as e:
            logger.error(f"Error validating rule {rule.rule_id}: {e}")
            errors.append(RuleViolation(
                rule_id=rule.rule_id,
                rule_name=rule.name,
                message=f"Error during validation: {e}"
            ))

    if errors:
        logger.warning(f"Programme {programme.id or programme.name!r} failed {len(errors)} business rule(s)")

    return ValidationResult(valid=not errors, errors=tuple(errors))
