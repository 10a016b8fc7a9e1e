"""
Twitter Search - application-only search client
Obtains a bearer token from a key/secret pair and searches tweets with it.
"""

__version__ = "0.1.0"
__author__ = "Developer"

from .auth import Credentials
from .client import SearchClient, create_client
from .errors import (
    AuthError,
    ConfigurationError,
    SearchClientError,
    TransportError,
    UnauthenticatedError,
    UpstreamError,
)
from .outcome import Err, Ok

__all__ = [
    "SearchClient",
    "create_client",
    "Credentials",
    "Ok",
    "Err",
    "SearchClientError",
    "ConfigurationError",
    "AuthError",
    "UnauthenticatedError",
    "TransportError",
    "UpstreamError",
]
