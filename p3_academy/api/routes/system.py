import logging
from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from p3_academy.api.deps import get_current_admin_user, get_db
from p3_academy.core.config import settings
from p3_academy.models.user import User
from p3_academy.schemas.response import BaseResponseModel
from p3_academy.services.ai_router import ai_router

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/system/health", response_model=BaseResponseModel[Dict[str, Any]])
async def system_health(db: Session = Depends(get_db)) -> Any:
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error(f"Database health check failed: {str(e)}")
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Database unavailable")

    return BaseResponseModel(
        code=status.HTTP_200_OK,
        message="System healthy",
        data={
            "status": "healthy",
            "database": "connected",
            "version": settings.VERSION,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        },
    )


@router.get("/ai/health", response_model=BaseResponseModel[Dict[str, Any]])
async def ai_health() -> Any:
    return BaseResponseModel(
        code=status.HTTP_200_OK,
        message="AI provider status",
        data=await ai_router.get_health_status(),
    )


@router.post("/ai/reset-circuit-breakers", response_model=BaseResponseModel[Dict[str, Any]])
async def reset_circuit_breakers(
    current_user: User = Depends(get_current_admin_user),
) -> Any:
    ai_router.reset_circuit_breakers()
    logger.info(f"Circuit breakers reset by user {current_user.id}")
    return BaseResponseModel(
        code=status.HTTP_200_OK,
        message="Circuit breakers reset",
        data={"reset": True},
    )
