"""
Request and response bodies for the HTTP adapter
"""
from datetime import date
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .beneficiary import Beneficiary
from .programme import EligibilityCriteria, Programme
from .results import Recommendation, ScoreBreakdown


class EligibilityCheckRequest(BaseModel):
    """Check one beneficiary against one programme"""
    beneficiary: Beneficiary = Field(..., description="Beneficiary to evaluate")
    programme: Programme = Field(..., description="Programme to evaluate against")
    responses: Dict[str, Any] = Field(
        default_factory=dict,
        description="Questionnaire answers keyed by question code"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "beneficiary": {"region_id": "Dakar", "sector": "Agriculture", "ninea": "123"},
                "programme": {
                    "status": "OUVERT",
                    "target_regions": ["Thiès"],
                    "criteria": {"formalization_required": True}
                },
                "responses": {"B1": "oui", "A6": ["ninea", "rccm"]}
            }
        }
    )


class ProgrammeFilterRequest(BaseModel):
    """Select the programmes a beneficiary may apply to"""
    beneficiary: Beneficiary = Field(..., description="Beneficiary to evaluate")
    programmes: List[Programme] = Field(default_factory=list, description="Candidate programmes")
    responses: Dict[str, Any] = Field(default_factory=dict)
    reference_date: Optional[date] = Field(
        None,
        description="Day to test operative windows against (defaults to today)"
    )


class ProgrammeFilterResponse(BaseModel):
    total_programmes_checked: int
    eligible_count: int
    eligible_programmes: List[Programme] = Field(default_factory=list)


class ScoreRequest(BaseModel):
    """Score a questionnaire"""
    responses: Dict[str, Any] = Field(default_factory=dict)
    criteria: Optional[EligibilityCriteria] = Field(None, description="Programme criteria, if known")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "responses": {
                    "A5": "universitaire",
                    "A6": ["ninea", "rccm"],
                    "B1": "oui",
                    "C1": "oui",
                    "D4": "boutique",
                    "F1": "non"
                }
            }
        }
    )


class ScoreResponse(BaseModel):
    score: int = Field(..., ge=0, le=100)
    breakdown: ScoreBreakdown
    recommendation: Recommendation
