"""Typed values for authentication operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class TokenPair:
    """An OAuth 1.0a token and its secret."""

    token: str
    secret: str

    @classmethod
    def from_response(cls, data: Mapping[str, Any]) -> TokenPair:
        return cls(token=data["oauth_token"], secret=data["oauth_token_secret"])

    def __repr__(self) -> str:
        return f"TokenPair(token={self.token!r}, secret='***')"


@dataclass
class AuthStatus:
    """Current authentication status."""

    authenticated: bool
    subdomain: str | None = None
    masked_token: str | None = None
    source: str | None = None  # "config_file", "env_var", or None
    config_path: str | None = None
