import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from programme_eligibility.config import settings
from programme_eligibility.routes import eligibility_router, programmes_router, scoring_router

# Configure logging
logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger(__name__)


app = FastAPI(
    title=settings.app_name,
    description="Eligibility checks, questionnaire scoring and recommendations for support programmes",
    version=settings.app_version,
    debug=settings.debug
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins_list(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(eligibility_router, prefix=settings.api_prefix)
app.include_router(scoring_router, prefix=settings.api_prefix)
app.include_router(programmes_router, prefix=settings.api_prefix)


@app.get("/")
async def root():
    return {"message": f"{settings.app_name} is running", "version": settings.app_version}


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "programme-eligibility"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("programme_eligibility.main:app", host="0.0.0.0", port=8000, reload=True)
