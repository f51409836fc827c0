# File: report_api/api/v1/routes_health.py

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from report_api.api.deps import get_db
from report_api.schemas.report import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse, summary="Service and store health")
def health(db: Session = Depends(get_db)):
    """
    Always 200; the ``db`` field says whether the store answered SELECT 1.
    """
    try:
        db.execute(text("SELECT 1"))
        db_status = "connected"
    except SQLAlchemyError as exc:
        logger.warning("Health check could not reach the store: %s", exc)
        db_status = "unavailable"

    return HealthResponse(status="ok", db=db_status, time=datetime.now(timezone.utc))
