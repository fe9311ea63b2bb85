"""
Exceptions raised by the authentication core and translated into error
responses at the HTTP boundary.
"""
from enum import Enum
from typing import Dict, Optional


class ErrorClassification(str, Enum):
    """Client error categories reported by the authentication core.

    Values equal the member names so plain strings such as ``"NOT_FOUND"``
    compare equal to the members.
    """

    BAD_REQUEST = "BAD_REQUEST"
    NOT_ACCEPTABLE = "NOT_ACCEPTABLE"
    NOT_FOUND = "NOT_FOUND"


class AuthAPIError(Exception):
    """Base exception for authentication API errors."""

    def __init__(self, code: Optional[str], description: Optional[str] = None):
        self.code = code
        self.description = description
        super().__init__(description or code or "")


class AuthAPIClientError(AuthAPIError):
    """Raised when a request cannot be served because of the client's input."""

    def __init__(
        self,
        code: Optional[str],
        description: Optional[str] = None,
        error_type: ErrorClassification = ErrorClassification.BAD_REQUEST,
        properties: Optional[Dict[str, str]] = None,
    ):
        super().__init__(code=code, description=description)
        self.error_type = error_type
        self.properties = properties


class AuthAPIServerError(AuthAPIError):
    """Raised on faults inside the service or its collaborators."""
