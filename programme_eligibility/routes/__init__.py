"""
API routes for the Programme Eligibility Engine
"""

from .eligibility import router as eligibility_router
from .programmes import router as programmes_router
from .scoring import router as scoring_router

__all__ = [
    "eligibility_router",
    "programmes_router",
    "scoring_router"
]
