import logging
import os
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from beerlog.core.config import settings
from beerlog.db import database
from beerlog.db.database import get_db
from beerlog.schemas.health import HealthCheckResponse

logger = logging.getLogger(__name__)

router = APIRouter()

REQUIRED_ENV_VARS = ("DATABASE_URL",)


@router.get("/health")
async def health_check(db: Session = Depends(get_db)) -> HealthCheckResponse:
    """
    Health check endpoint that verifies database connectivity and reports
    missing environment configuration as warnings.

    Returns 200 if the database is healthy, 503 otherwise.
    """
    database_health = database.health_check(db)

    warnings = {}
    missing = [name for name in REQUIRED_ENV_VARS if not os.getenv(name)]
    if missing:
        warnings["environment"] = f"Missing environment variables: {', '.join(missing)}"

    response = HealthCheckResponse(
        service="beerlog-api",
        version=settings.VERSION,
        environment=settings.RUN_MODE,
        timestamp=datetime.now(timezone.utc).isoformat(),
        healthy=database_health.healthy,
        database=database_health,
        warnings=warnings,
    )

    if database_health.healthy:
        return response

    logger.warning("Health check failed: %s", database_health.message)
    raise HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=response.model_dump()
    )
