"""
Authentication dependencies.

The identity subject is resolved from gateway headers first and, in dev mode
only, from a bearer test token.
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from beerlog.api.v1.errors import http_error
from beerlog.core.config import settings
from beerlog.core.errors import BeerLogError
from beerlog.core.security import decode_test_token, groups_from_headers, subject_from_headers
from beerlog.db.database import get_db
from beerlog.models.user_profile import UserProfile
from beerlog.services.user_profile_service import user_profile_service

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def _test_token_claims(
    credentials: Optional[HTTPAuthorizationCredentials],
) -> Optional[Dict[str, Any]]:
    if credentials is None or not settings.is_dev:
        return None
    return decode_test_token(credentials.credentials)


def get_identity_subject(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Optional[str]:
    """
    Resolve the caller's identity subject, or None for anonymous callers.
    """
    subject = subject_from_headers(request.headers)
    if subject:
        return subject

    claims = _test_token_claims(credentials)
    if claims:
        logger.debug("Test token accepted in dev mode")
        return claims["sub"]

    return None


def require_identity_subject(subject: Optional[str] = Depends(get_identity_subject)) -> str:
    if not subject:
        logger.warning("Request without identity subject")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={"error": "Authentication required", "code": "UNAUTHORIZED"},
            headers={"WWW-Authenticate": "Bearer"},
        )
    return subject


def get_current_profile(
    db: Session = Depends(get_db),
    subject: str = Depends(require_identity_subject),
) -> UserProfile:
    """
    Return the profile of the authenticated caller.

    Raises:
        HTTPException: 401 without identity, 404 when the caller has no profile
    """
    try:
        return user_profile_service.get_profile(db, subject)
    except BeerLogError as e:
        raise http_error(e) from e


def get_groups(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> List[str]:
    groups = groups_from_headers(request.headers)
    if groups:
        return groups

    claims = _test_token_claims(credentials)
    if claims:
        return list(claims.get("groups") or [])
    return []


def require_admin(
    subject: str = Depends(require_identity_subject),
    groups: List[str] = Depends(get_groups),
) -> str:
    """Allow the request only for members of an admin group."""
    if not set(groups) & set(settings.admin_groups):
        logger.warning("Admin access denied for subject=%s", subject)
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail={"error": "Administrator access required", "code": "FORBIDDEN"},
        )
    return subject
