"""Shared HTTP request utilities for the UserVoice client."""

from __future__ import annotations

import json
from typing import Any

import httpx

from .config import API_CLIENT
from .exceptions import ERROR_TYPES, APIError


def build_headers() -> dict[str, str]:
    """Build the JSON request headers sent with every API call."""
    return {
        "Content-Type": "application/json",
        "API-Client": API_CLIENT,
        "Accept": "application/json",
    }


def raise_for_errors(result: Any, response: httpx.Response | None = None) -> None:
    """Raise the typed error described by an ``errors`` envelope, if present.

    The HTTP status is not consulted: a non-null ``errors`` object is a
    failure even on a 200, and its absence is a success.
    """
    if not isinstance(result, dict):
        return

    errors = result.get("errors")
    if errors is None:
        return

    if isinstance(errors, dict):
        error_type = errors.get("type")
        message = errors.get("message") or "UserVoice API call failed"
    else:
        error_type = None
        message = str(errors)

    error_cls = ERROR_TYPES.get(error_type, APIError)
    raise error_cls(
        message,
        error_type=error_type,
        status_code=response.status_code if response is not None else None,
        response=response,
    )


def handle_response(response: httpx.Response) -> Any:
    """Parse a response body and map error envelopes to exceptions."""
    if not response.content:
        return {}

    try:
        result = response.json()
    except json.JSONDecodeError as e:
        raise APIError(
            message=response.text or f"Invalid JSON response: {e}",
            status_code=response.status_code,
            response=response,
        ) from e

    raise_for_errors(result, response)
    return result


def build_paged_path(path: str, per_page: int, page: int) -> str:
    """Append pagination parameters, joining with ``&`` if a query string exists."""
    separator = "&" if "?" in path else "?"
    return f"{path}{separator}per_page={per_page}&page={page}"
