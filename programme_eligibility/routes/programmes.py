"""
API routes for programme records
"""
import logging

from fastapi import APIRouter, HTTPException

from ..models.programme import Programme
from ..models.results import ValidationResult
from ..services.programme_validator import validate_programme

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/programmes", tags=["programmes"])


@router.post("/validate", response_model=ValidationResult)
async def validate(programme: Programme):
    """
    Validate a programme record against the business rules
    """
    try:
        return validate_programme(programme)

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error validating programme: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to validate programme: {str(e)}")
