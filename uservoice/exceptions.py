"""Custom exceptions raised by the UserVoice SDK."""

from __future__ import annotations

from typing import Any, Optional


class UserVoiceSDKError(Exception):
    """Base exception for all SDK specific failures."""


class APIError(UserVoiceSDKError):
    """Raised when the UserVoice API reports an error envelope."""

    def __init__(
        self,
        message: str,
        error_type: Optional[str] = None,
        status_code: Optional[int] = None,
        response: Optional[Any] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.status_code = status_code
        self.response = response


class Unauthorized(APIError):
    """Raised when credentials are missing, rejected or lack permission."""


class NotFound(APIError):
    """Raised for missing records and for responses that are not collections."""


class ApplicationError(APIError):
    """Raised when the server reports an internal application fault."""


ERROR_TYPES: dict[str, type[APIError]] = {
    "unauthorized": Unauthorized,
    "record_not_found": NotFound,
    "application_error": ApplicationError,
}
