"""
Identity extraction.

Requests reach the API through a gateway whose authorizer has already verified the
caller and forwards the identity subject (and group membership) as headers. In
dev mode, HS256 test tokens signed with ``SECRET_KEY`` are accepted as well so the
API can be exercised locally without the gateway.
"""

from datetime import UTC, datetime, timedelta
from typing import Any, Dict, List, Mapping, Optional

from jose import jwt

from beerlog.core.config import settings

SUBJECT_HEADERS = (
    "X-Cognito-Sub",
    "X-Amzn-Cognito-Sub",
    "X-Amz-User-Sub",
    "X-User-Sub",
)
PROXY_SUBJECT_HEADER = "X-Amzn-Requestcontext-Authorizer-Claims-Sub"
PROXY_REQUEST_ID_HEADER = "X-Amzn-Requestid"

GROUP_HEADERS = (
    "X-Cognito-Groups",
    "X-Amzn-Cognito-Groups",
    "X-Amzn-Requestcontext-Authorizer-Claims-Cognito-Groups",
)

DEFAULT_TEST_SUBJECT = "test-user-sub"


def subject_from_headers(headers: Mapping[str, str]) -> Optional[str]:
    """
    Get the identity subject set by the gateway authorizer.

    Args:
        headers: Request headers (case-insensitive mapping)

    Returns:
        The subject if one of the known headers carries it, None otherwise
    """
    for header in SUBJECT_HEADERS:
        value = headers.get(header)
        if value:
            return value

    # Lambda proxy integration forwards claims only alongside its request id
    if headers.get(PROXY_REQUEST_ID_HEADER):
        value = headers.get(PROXY_SUBJECT_HEADER)
        if value:
            return value

    return None


def groups_from_headers(headers: Mapping[str, str]) -> List[str]:
    for header in GROUP_HEADERS:
        value = headers.get(header)
        if value:
            return [group.strip() for group in value.split(",") if group.strip()]
    return []


def create_test_token(
    subject: str,
    groups: Optional[List[str]] = None,
    expires_delta: Optional[timedelta] = None,
) -> Dict[str, Any]:
    """
    Create a signed test token for local development.

    Returns:
        Dict with the token, its subject and the expiry as a unix timestamp
    """
    if expires_delta:
        expire = datetime.now(UTC) + expires_delta
    else:
        expire = datetime.now(UTC) + timedelta(minutes=settings.TEST_TOKEN_EXPIRE_MINUTES)

    to_encode: Dict[str, Any] = {"exp": expire, "sub": subject}
    if groups:
        to_encode["groups"] = groups
    token = jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)
    return {"token": token, "cognito_sub": subject, "expires_at": int(expire.timestamp())}


def decode_test_token(token: str) -> Optional[Dict[str, Any]]:
    """Return the claims of a valid test token, or None when it does not verify."""
    try:
        claims = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except jwt.JWTError:
        return None
    if not claims.get("sub"):
        return None
    return claims
