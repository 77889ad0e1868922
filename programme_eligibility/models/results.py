"""
Pydantic models for the values produced by the eligibility and scoring engine
"""
from enum import Enum
from typing import List, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator


ELIGIBLE_REASON = "Eligible"


class EligibilityVerdict(BaseModel):
    """Outcome of a structural eligibility check"""
    eligible: bool = Field(..., description="Whether every applicable criterion passed")
    reasons: Tuple[str, ...] = Field(..., description="Failed criteria in evaluation order, or ('Eligible',)")

    @model_validator(mode='after')
    def check_reasons(self):
        if self.eligible and self.reasons != (ELIGIBLE_REASON,):
            raise ValueError(f"An eligible verdict must carry exactly ['{ELIGIBLE_REASON}']")
        if not self.eligible and not self.reasons:
            raise ValueError("An ineligible verdict must carry at least one reason")
        return self

    @classmethod
    def from_failures(cls, failures: List[str]) -> "EligibilityVerdict":
        if failures:
            return cls(eligible=False, reasons=tuple(failures))
        return cls(eligible=True, reasons=(ELIGIBLE_REASON,))

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "eligible": False,
                "reasons": ["Region not eligible", "Insufficient revenue"]
            }
        }
    )


class Decision(str, Enum):
    ACCEPTED = "ACCEPTED"
    UNDER_REVIEW = "UNDER_REVIEW"
    REJECTED = "REJECTED"


class Recommendation(BaseModel):
    """Score-derived guidance for the review committee"""
    label: str = Field(..., description="Human-facing label")
    color: str = Field(..., description="Color token for display")
    decision: Decision = Field(..., description="Suggested decision")

    model_config = ConfigDict(frozen=True)


class CategoryScore(BaseModel):
    """Points earned in one rubric category"""
    category: str
    earned: int = Field(..., ge=0)
    maximum: int = Field(..., ge=0)

    model_config = ConfigDict(frozen=True)


class ScoreBreakdown(BaseModel):
    """Per-category view of a questionnaire score"""
    score: int = Field(..., ge=0, le=100, description="Normalized score")
    categories: Tuple[CategoryScore, ...] = Field(default_factory=tuple)

    model_config = ConfigDict(frozen=True)


class RuleViolation(BaseModel):
    """A business rule a record failed"""
    rule_id: str
    rule_name: str
    message: str

    model_config = ConfigDict(frozen=True)


class ValidationResult(BaseModel):
    """Outcome of business-rule validation of a record"""
    valid: bool
    errors: Tuple[RuleViolation, ...] = Field(default_factory=tuple)

    model_config = ConfigDict(frozen=True)


class ApplicationAssessment(BaseModel):
    """Eligibility verdict, questionnaire score and recommendation for one application"""
    verdict: EligibilityVerdict
    score: int = Field(..., ge=0, le=100)
    recommendation: Recommendation

    model_config = ConfigDict(frozen=True)
