"""
Health check API endpoints
"""

from fastapi import APIRouter

from grabpic.core.config import settings

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check():
    """
    Liveness probe
    """
    return {"status": "healthy", "version": settings.api_version}


@router.get("/")
async def root():
    """
    Root endpoint
    """
    return {"message": "GrabPic API is running", "status": "healthy"}
