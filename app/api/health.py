"""
Health API endpoints
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from app.core.config import Config
from app.core.logger import logger
from app.db.mongodb import db
from app.dependencies.auth import get_app_config

router = APIRouter()


@router.get("/health")
def health_check(config: Config = Depends(get_app_config)):
    """Basic liveness check"""
    return {
        "status": "healthy",
        "service": config.service_name,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": config.service_version,
    }


@router.get("/health/ready")
async def readiness_check(config: Config = Depends(get_app_config)):
    """Readiness probe - the service is ready once MongoDB answers a ping"""
    check = {"name": "mongodb", "status": "healthy"}
    try:
        if db.client is None:
            raise ConnectionError("MongoDB client not initialized")
        await db.client.admin.command("ping")
    except (PyMongoError, ConnectionError) as e:
        logger.warning(
            "Readiness check failed",
            metadata={"event": "readiness_check_failed", "error": str(e)}
        )
        check["status"] = "unhealthy"

    body = {
        "status": "ready" if check["status"] == "healthy" else "not ready",
        "service": config.service_name,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "checks": [check],
    }
    if check["status"] != "healthy":
        return JSONResponse(status_code=503, content=body)
    return body
