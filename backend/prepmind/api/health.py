import logging

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.orm import Session

from prepmind.models.database import get_db
from prepmind.services.gateway import ai_gateway
from prepmind.services.sandbox import sandbox_service

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("/")
async def health_check():

    return {
        "status": "healthy",
        "service": "PrepMind API",
        "version": "1.0.0"
    }

@router.get("/ready")
async def readiness_check(db: Session = Depends(get_db)):
    try:
        db.execute(text("SELECT 1"))
        database = "ok"
    except Exception as e:
        logger.error("Database readiness check failed: %s", e)
        database = "unavailable"

    return {
        "status": "ready" if database == "ok" else "degraded",
        "dependencies": {
            "database": database,
            "gemini": "configured" if ai_gateway.configured else "missing api key",
            "sandbox_languages": sorted(sandbox_service.executors),
        }
    }
