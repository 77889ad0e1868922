"""
API routes for eligibility checking
"""
import logging
from datetime import date, datetime
from zoneinfo import ZoneInfo

from fastapi import APIRouter, HTTPException

from ..config import settings
from ..models.requests import (
    EligibilityCheckRequest,
    ProgrammeFilterRequest,
    ProgrammeFilterResponse
)
from ..models.results import ApplicationAssessment, EligibilityVerdict
from ..services.assessment import assess_application
from ..services.criteria_evaluator import check_eligibility
from ..services.programme_filter import filter_eligible

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/eligibility", tags=["eligibility"])


def current_date() -> date:
    """Today's date in the configured reference timezone"""
    return datetime.now(ZoneInfo(settings.reference_timezone)).date()


@router.post("/check", response_model=EligibilityVerdict)
async def check_programme_eligibility(request: EligibilityCheckRequest):
    """
    Check a beneficiary against one programme's eligibility criteria
    """
    try:
        return check_eligibility(request.beneficiary, request.programme, request.responses)

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error checking eligibility: {e}")
        raise HTTPException(
            status_code=500,
            detail=f"Failed to check eligibility: {str(e)}"
        )


@router.post("/programmes", response_model=ProgrammeFilterResponse)
async def list_eligible_programmes(request: ProgrammeFilterRequest):
    """
    Select the programmes a beneficiary may currently apply to
    """
    try:
        eligible = filter_eligible(
            request.programmes,
            request.beneficiary,
            request.responses,
            today=request.reference_date or current_date()
        )

        logger.info(f"Programme filter: {len(eligible)}/{len(request.programmes)} programmes eligible")
        return ProgrammeFilterResponse(
            total_programmes_checked=len(request.programmes),
            eligible_count=len(eligible),
            eligible_programmes=eligible
        )

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error filtering programmes: {e}")
        raise HTTPException(
            status_code=500,
            detail=f"Failed to filter programmes: {str(e)}"
        )


@router.post("/assess", response_model=ApplicationAssessment)
async def assess(request: EligibilityCheckRequest):
    """
    Evaluate eligibility, questionnaire score and recommendation for one application
    """
    try:
        return assess_application(request.beneficiary, request.programme, request.responses)

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error assessing application: {e}")
        raise HTTPException(
            status_code=500,
            detail=f"Failed to assess application: {str(e)}"
        )
