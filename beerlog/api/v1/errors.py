"""
Mapping of domain errors to HTTP responses.
"""

from typing import Dict, Type

from fastapi import HTTPException, status

from beerlog.core.errors import (
    AccessDenied,
    BeerLogError,
    DuplicateCheckIn,
    InvalidArgument,
    NotFoundError,
    ProfileAlreadyExists,
    TooFarForCheckIn,
)

ERROR_STATUS_CODES: Dict[Type[BeerLogError], int] = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    InvalidArgument: status.HTTP_400_BAD_REQUEST,
    TooFarForCheckIn: status.HTTP_400_BAD_REQUEST,
    DuplicateCheckIn: status.HTTP_400_BAD_REQUEST,
    AccessDenied: status.HTTP_403_FORBIDDEN,
    ProfileAlreadyExists: status.HTTP_409_CONFLICT,
}


def http_error(error: BeerLogError) -> HTTPException:
    """Build the HTTPException for a domain error, using the closest mapped base class."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    for cls in type(error).__mro__:
        if cls in ERROR_STATUS_CODES:
            status_code = ERROR_STATUS_CODES[cls]
            break

    return HTTPException(
        status_code=status_code,
        detail={"error": error.message, "code": error.code},
    )
