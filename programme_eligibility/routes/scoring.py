"""
API routes for questionnaire scoring and recommendations
"""
import logging
from typing import Any, Dict, List

from fastapi import APIRouter, HTTPException, Path

from ..models.requests import ScoreRequest, ScoreResponse
from ..models.results import Recommendation
from ..rubric import CATEGORY_WEIGHTS, RUBRIC
from ..services.questionnaire_scorer import calculate_score, score_breakdown
from ..services.recommendation_engine import recommend

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/scoring", tags=["scoring"])


@router.post("/score", response_model=ScoreResponse)
async def score_questionnaire(request: ScoreRequest):
    """
    Score questionnaire answers and recommend a decision
    """
    try:
        score = calculate_score(request.responses, request.criteria)

        return ScoreResponse(
            score=score,
            breakdown=score_breakdown(request.responses),
            recommendation=recommend(score)
        )

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error scoring questionnaire: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to score questionnaire: {str(e)}")


@router.get("/recommendation/{score}", response_model=Recommendation)
async def get_recommendation(score: int = Path(..., ge=0, le=100, description="Questionnaire score")):
    """
    Get the recommendation for a score
    """
    return recommend(score)


@router.get("/rubric")
async def get_rubric() -> List[Dict[str, Any]]:
    """
    Describe the scoring rubric by category
    """
    return [
        {
            "category": category.value,
            "weight": weight,
            "items": [
                {
                    "question": item.question,
                    "condition": item.predicate.describe(),
                    "points": item.points
                }
                for item in RUBRIC
                if item.category == category
            ]
        }
        for category, weight in CATEGORY_WEIGHTS.items()
    ]
