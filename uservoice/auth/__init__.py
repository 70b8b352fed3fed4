"""Authentication utilities for the UserVoice SDK."""

from .credentials import clear_config, get_auth_status, load_config, resolve_settings, save_config
from .provider import OAuthProvider
from .types import AuthStatus, TokenPair

__all__ = [
    "clear_config",
    "get_auth_status",
    "load_config",
    "resolve_settings",
    "save_config",
    "OAuthProvider",
    "AuthStatus",
    "TokenPair",
]
