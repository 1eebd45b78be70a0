"""
Domain errors.

Every expected failure of a service operation is one of these. They carry a stable
``code`` that the HTTP layer sends back to clients next to the message.
"""

from typing import Optional


class BeerLogError(Exception):
    """Base exception for expected, caller-recoverable failures."""

    code = "INTERNAL_SERVER_ERROR"
    default_message = "Unexpected error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidArgument(BeerLogError):
    """Raised for non-positive ids, non-positive radii or malformed input."""

    code = "INVALID_PARAMETER"
    default_message = "Invalid argument"


class InvalidCoordinate(InvalidArgument):
    """Raised when a latitude/longitude is out of range or zero (unset)."""

    code = "INVALID_COORDINATE"
    default_message = "Invalid coordinates provided"


class NotFoundError(BeerLogError):
    code = "NOT_FOUND"
    default_message = "Resource not found"


class BreweryNotFound(NotFoundError):
    code = "BREWERY_NOT_FOUND"
    default_message = "Brewery not found"


class VisitNotFound(NotFoundError):
    code = "VISIT_NOT_FOUND"
    default_message = "Visit not found"


class ProfileNotFound(NotFoundError):
    code = "PROFILE_NOT_FOUND"
    default_message = "User profile not found"


class TooFarForCheckIn(BeerLogError):
    code = "LOCATION_TOO_FAR"
    default_message = "Too far from brewery for check-in"


class DuplicateCheckIn(BeerLogError):
    code = "DUPLICATE_CHECKIN"
    default_message = "Already checked in within the last hour"


class AccessDenied(BeerLogError):
    code = "FORBIDDEN"
    default_message = "Access denied"


class ProfileAlreadyExists(BeerLogError):
    code = "PROFILE_EXISTS"
    default_message = "Profile already exists"
