"""Configuration helpers for the UserVoice SDK."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version
from typing import Optional

DEFAULT_DOMAIN = "uservoice.com"
DEFAULT_PROTOCOL = "https"
DEFAULT_TIMEOUT_SECONDS = 30.0

# OAuth 1.0a out-of-band callback: the verifier is shown to the user instead
# of being redirected back.
OUT_OF_BAND = "oob"

# Server-enforced page cap for list endpoints.
PER_PAGE = 100

try:
    SDK_VERSION = version("uservoice")
except PackageNotFoundError:
    SDK_VERSION = "0.1.0"

API_CLIENT = f"uservoice-python-{SDK_VERSION}"


def value_or_default(value: Optional[str], default: str) -> str:
    """Return ``default`` only when ``value`` is None."""

    if value is None:
        return default
    return value


def build_server_location(
    subdomain: str,
    domain: Optional[str] = None,
    protocol: Optional[str] = None,
) -> str:
    """Build ``protocol://subdomain.domain`` with the SDK defaults applied."""

    protocol = value_or_default(protocol, DEFAULT_PROTOCOL)
    domain = value_or_default(domain, DEFAULT_DOMAIN)
    return f"{protocol}://{subdomain}.{domain}".rstrip("/")
