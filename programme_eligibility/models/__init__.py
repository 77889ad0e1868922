"""
Models package for the Programme Eligibility Engine
"""

from .beneficiary import (
    Answer,
    Beneficiary,
    QuestionnaireResponses
)

from .programme import (
    EligibilityCriteria,
    KNOWN_STATUSES,
    OPEN_STATUSES,
    Programme,
    ProgrammeStatus
)

from .results import (
    ApplicationAssessment,
    CategoryScore,
    Decision,
    ELIGIBLE_REASON,
    EligibilityVerdict,
    Recommendation,
    RuleViolation,
    ScoreBreakdown,
    ValidationResult
)

__all__ = [
    # Beneficiary models
    "Answer",
    "Beneficiary",
    "QuestionnaireResponses",

    # Programme models
    "EligibilityCriteria",
    "KNOWN_STATUSES",
    "OPEN_STATUSES",
    "Programme",
    "ProgrammeStatus",

    # Engine results
    "ApplicationAssessment",
    "CategoryScore",
    "Decision",
    "ELIGIBLE_REASON",
    "EligibilityVerdict",
    "Recommendation",
    "RuleViolation",
    "ScoreBreakdown",
    "ValidationResult"
]
