"""Synchronous HTTP client for the UserVoice SDK."""

from __future__ import annotations

import copy
import logging
import threading
from typing import Any

import httpx

from ._http import build_headers, handle_response
from .auth.constants import (
    ERROR_AUTHORIZE_FIRST,
    ERROR_NO_REQUEST_TOKEN,
    LOGIN_AS_OWNER_PATH,
    LOGIN_AS_PATH,
)
from .auth.credentials import resolve_settings
from .auth.provider import OAuthProvider
from .auth.types import TokenPair
from .collection import Collection
from .config import DEFAULT_TIMEOUT_SECONDS, OUT_OF_BAND, build_server_location, value_or_default
from .exceptions import Unauthorized

logger = logging.getLogger(__name__)


class UserVoiceClient:
    """Synchronous client for the UserVoice API.

    Example:
        >>> from uservoice import UserVoiceClient
        >>> client = UserVoiceClient("mysite", "API_KEY", "API_SECRET")
        >>> owner = client.login_as_owner()
        >>> for ticket in owner.get_collection("/api/v1/tickets", limit=10):
        ...     print(ticket["subject"])

    Login methods never mutate the receiver: each returns a new client bound
    to the obtained access token, sharing the same HTTP transport.
    """

    def __init__(
        self,
        subdomain: str,
        api_key: str,
        api_secret: str | None = None,
        *,
        callback: str | None = None,
        token: str | None = None,
        secret: str | None = None,
        domain: str | None = None,
        protocol: str | None = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        """Initialize the UserVoice client.

        Args:
            subdomain: Your UserVoice subdomain ("mysite" for mysite.uservoice.com).
            api_key: OAuth consumer key of a UserVoice API client.
            api_secret: OAuth consumer secret (default: api_key).
            callback: OAuth callback URL (default: out-of-band, "oob").
            token: Existing access token, if already authorized.
            secret: Secret of the existing access token.
            domain: Host suffix (default: uservoice.com).
            protocol: URL scheme (default: https).
            timeout: Request timeout in seconds (default: 30).
        """
        self.subdomain = subdomain
        self.server_location = build_server_location(subdomain, domain, protocol)
        self._provider = OAuthProvider(
            self.server_location,
            api_key,
            value_or_default(api_secret, api_key),
            value_or_default(callback, OUT_OF_BAND),
            timeout=timeout,
        )
        self._client = httpx.Client(timeout=timeout)
        self._owns_transport = True
        self._token_lock = threading.Lock()

        self.request_token: TokenPair | None = None
        self.access_token: TokenPair | None = (
            TokenPair(token, value_or_default(secret, "")) if token else None
        )

    @classmethod
    def from_settings(cls, **overrides: Any) -> UserVoiceClient:
        """Build a client from explicit overrides, USERVOICE_* env vars or ~/.uservoice.

        Raises:
            Unauthorized: If no subdomain or API key can be resolved.
        """
        timeout = overrides.pop("timeout", DEFAULT_TIMEOUT_SECONDS)
        settings = resolve_settings(**overrides)
        if "subdomain" not in settings or "api_key" not in settings:
            raise Unauthorized(
                "No UserVoice credentials found. Run 'uservoice auth login', "
                "set USERVOICE_SUBDOMAIN and USERVOICE_API_KEY, or pass them explicitly."
            )
        return cls(
            settings["subdomain"],
            settings["api_key"],
            settings.get("api_secret"),
            token=settings.get("access_token"),
            secret=settings.get("access_token_secret"),
            domain=settings.get("domain"),
            protocol=settings.get("protocol"),
            timeout=timeout,
        )

    # -- authentication -------------------------------------------------

    def _fetch_request_token(self) -> TokenPair:
        request_token = self._provider.get_request_token()
        with self._token_lock:
            self.request_token = request_token
        return request_token

    def authorize_url(self) -> str:
        """Obtain a request token and return the URL where the user authorizes it."""
        request_token = self._fetch_request_token()
        return self._provider.get_authorization_url(request_token)

    def login_with_access_token(self, token: str, secret: str) -> UserVoiceClient:
        """Return a new client making calls with the given access token."""
        derived = copy.copy(self)
        derived.access_token = TokenPair(token, secret)
        derived.request_token = None
        derived._token_lock = threading.Lock()
        derived._owns_transport = False
        return derived

    def login_with_verifier(self, verifier: str) -> UserVoiceClient:
        """Exchange the verifier from the authorization step for an access token.

        Args:
            verifier: The oauth_verifier passed to the callback or shown
                out-of-band to the user.

        Raises:
            Unauthorized: If authorize_url() was not called first, or the
                exchange is rejected.
        """
        with self._token_lock:
            request_token = self.request_token
        if request_token is None:
            raise Unauthorized(ERROR_AUTHORIZE_FIRST)

        access_token = self._provider.get_access_token(request_token, verifier)
        return self.login_with_access_token(access_token.token, access_token.secret)

    def login_as_owner(self) -> UserVoiceClient:
        """Log in as the first account owner of the subdomain.

        Requires a trusted API client.
        """
        request_token = self._fetch_request_token()
        result = self.post(LOGIN_AS_OWNER_PATH, {"request_token": request_token.token})
        return self._login_from_token_response(result)

    def login_as(self, email: str) -> UserVoiceClient:
        """Log in as the user with the given email address.

        Requires a trusted API client.
        """
        request_token = self._fetch_request_token()
        result = self.post(
            LOGIN_AS_PATH,
            {"request_token": request_token.token, "user": {"email": email}},
        )
        return self._login_from_token_response(result)

    def _login_from_token_response(self, result: Any) -> UserVoiceClient:
        token = result.get("token") if isinstance(result, dict) else None
        if not isinstance(token, dict):
            raise Unauthorized(ERROR_NO_REQUEST_TOKEN)
        logger.debug("Delegated login succeeded for %s", self.subdomain)
        access_token = TokenPair.from_response(token)
        return self.login_with_access_token(access_token.token, access_token.secret)

    # -- requests ---------------------------------------------------------

    def _signing_token(self) -> TokenPair | None:
        if self.access_token is not None:
            return self.access_token
        with self._token_lock:
            return self.request_token

    def request(self, method: str, path: str, params: dict[str, Any] | None = None) -> Any:
        """Make a signed API call and return the parsed JSON body.

        Args:
            method: HTTP verb.
            path: Path below the server location, including any query string.
            params: Parameters sent as a JSON body.

        Raises:
            Unauthorized, NotFound, ApplicationError, APIError: When the body
                carries an ``errors`` envelope.
        """
        logger.debug("%s %s%s", method, self.server_location, path)
        response = self._client.request(
            method,
            f"{self.server_location}{path}",
            headers=build_headers(),
            json=params,
            auth=self._provider.auth_for(self._signing_token()),
        )
        return handle_response(response)

    def get(self, path: str) -> Any:
        """Make a GET call. Include query parameters in ``path``."""
        return self.request("GET", path)

    def delete(self, path: str) -> Any:
        """Make a DELETE call."""
        return self.request("DELETE", path)

    def post(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """Make a POST call with ``params`` as the JSON body."""
        return self.request("POST", path, params)

    def put(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """Make a PUT call with ``params`` as the JSON body."""
        return self.request("PUT", path, params)

    def get_collection(self, path: str, limit: int | None = None) -> Collection:
        """Lazily page through the list resource at ``path``."""
        return Collection(self, path, limit=limit)

    def close(self) -> None:
        """Release the underlying HTTP client resources."""
        if self._owns_transport:
            self._client.close()

    def __enter__(self) -> UserVoiceClient:
        return self

    def __exit__(self, exc_type: type | None, exc: BaseException | None, traceback: Any) -> None:
        self.close()
