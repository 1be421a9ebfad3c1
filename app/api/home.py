"""
Home/Root API endpoints
"""

from fastapi import APIRouter, Depends

from app.core.config import Config
from app.dependencies.auth import get_app_config

router = APIRouter()


@router.get("/")
async def root(config: Config = Depends(get_app_config)):
    """
    Root endpoint - welcome message and basic service metadata.
    """
    return {
        "message": "Welcome to product page",
        "service": config.service_name,
        "version": config.service_version,
        "environment": config.environment,
    }
