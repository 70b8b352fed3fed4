"""UserVoice Python SDK - Client for the UserVoice REST API."""

from .client import UserVoiceClient
from .collection import Collection
from .config import SDK_VERSION as __version__
from .exceptions import APIError, ApplicationError, NotFound, Unauthorized, UserVoiceSDKError

__all__ = [
    "UserVoiceClient",
    "Collection",
    "UserVoiceSDKError",
    "APIError",
    "Unauthorized",
    "NotFound",
    "ApplicationError",
]
