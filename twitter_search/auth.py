"""
Authentication Module
Application-only credentials for the Twitter search API.
"""

import os
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from .errors import ConfigurationError
from .utils import encode_basic_credentials


@dataclass(frozen=True)
class Credentials:
    """Consumer key/secret pair of a Twitter developer app."""

    key: str
    secret: str

    def __post_init__(self):
        for value in (self.key, self.secret):
            if not isinstance(value, str) or not value.strip():
                raise ConfigurationError("Missing required authentication credentials")

    @classmethod
    def coerce(cls, value: Union["Credentials", Tuple[str, str]]) -> "Credentials":
        """Accept a Credentials instance or a ``(key, secret)`` pair."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, (tuple, list)) or len(value) != 2:
            raise ConfigurationError("Credentials must be a (key, secret) pair")
        return cls(*value)

    @classmethod
    def from_env(cls, key: Optional[str] = None, secret: Optional[str] = None) -> "Credentials":
        """
        Build credentials, falling back to the environment.

        Args:
            key: Twitter API Key (or from env TWITTER_API_KEY)
            secret: Twitter API Secret (or from env TWITTER_API_SECRET)
        """
        return cls(
            key=key or os.getenv("TWITTER_API_KEY"),
            secret=secret or os.getenv("TWITTER_API_SECRET"),
        )

    def basic_authorization(self) -> str:
        """Value of the ``Authorization`` header for the token request."""
        return "Basic " + encode_basic_credentials(self.key, self.secret)

    def __repr__(self) -> str:
        return f"Credentials(key={self.key!r}, secret='***')"
