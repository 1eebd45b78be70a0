"""
Development helpers, only served when RUN_MODE is "dev".
"""

from typing import Any, List, Optional

from fastapi import APIRouter, HTTPException, Query, status

from beerlog.core.config import settings
from beerlog.core.security import DEFAULT_TEST_SUBJECT, create_test_token
from beerlog.schemas.token import DevToken

router = APIRouter()


@router.get("/token", response_model=DevToken)
async def generate_test_token(
    cognito_sub: Optional[str] = None,
    groups: List[str] = Query(default=[]),
) -> Any:
    """
    Issue a test token for local development.
    """
    if not settings.is_dev:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail={
                "error": "Test tokens are only available in development mode",
                "code": "FORBIDDEN",
            },
        )

    return create_test_token(cognito_sub or DEFAULT_TEST_SUBJECT, groups=groups)
