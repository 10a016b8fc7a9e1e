"""Exceptions raised by the search client."""

from typing import List, Optional


class SearchClientError(Exception):
    pass


class ConfigurationError(SearchClientError, ValueError):
    """Raised when the key/secret pair is missing or empty."""


class AuthError(SearchClientError):
    """Raised when the token exchange fails or returns a non-bearer token."""

    def __init__(self, message: str, status_code: Optional[int] = None,
                 errors: Optional[List[dict]] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.errors = errors or []


class UnauthenticatedError(SearchClientError):
    """Raised when searching without a bearer token."""


class TransportError(SearchClientError):
    """Network-level failure. ``status_code`` is 0 when no response arrived."""

    def __init__(self, message: str, status_code: int = 0):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class UpstreamError(SearchClientError):
    """Non-2xx or unreadable response from the search endpoint."""

    def __init__(self, message: str, status_code: int, errors: Optional[List[dict]] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.errors = errors or []
