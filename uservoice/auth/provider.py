"""OAuth 1.0a provider for UserVoice.

Wraps Authlib's httpx integration: request-token fetch, authorization URL,
verifier exchange, and per-request signing. Handshake failures are raised as
``Unauthorized`` so callers only deal with the SDK's error taxonomy.
"""

from __future__ import annotations

import logging

import httpx
from authlib.integrations.base_client import OAuthError
from authlib.integrations.httpx_client import OAuth1Auth, OAuth1Client

from ..config import DEFAULT_TIMEOUT_SECONDS
from ..exceptions import Unauthorized
from .constants import ACCESS_TOKEN_PATH, AUTHORIZE_PATH, REQUEST_TOKEN_PATH
from .types import TokenPair

logger = logging.getLogger(__name__)


class OAuthProvider:
    """OAuth 1.0a consumer bound to one UserVoice server location."""

    def __init__(
        self,
        server_location: str,
        consumer_key: str,
        consumer_secret: str,
        callback: str,
        *,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self.server_location = server_location
        self.consumer_key = consumer_key
        self.consumer_secret = consumer_secret
        self.callback = callback
        self._timeout = timeout

    def _oauth_client(self, token: TokenPair | None = None) -> OAuth1Client:
        return OAuth1Client(
            self.consumer_key,
            client_secret=self.consumer_secret,
            token=token.token if token else None,
            token_secret=token.secret if token else None,
            redirect_uri=self.callback,
            timeout=self._timeout,
        )

    def get_request_token(self) -> TokenPair:
        """Fetch a fresh request token from the provider."""
        logger.debug("Fetching request token from %s", self.server_location)
        with self._oauth_client() as oauth:
            try:
                data = oauth.fetch_request_token(f"{self.server_location}{REQUEST_TOKEN_PATH}")
            except (OAuthError, httpx.HTTPError) as e:
                raise Unauthorized(f"Could not get Request Token: {e}") from e
        return TokenPair.from_response(data)

    def get_authorization_url(self, request_token: TokenPair) -> str:
        """Build the URL where the user authorizes ``request_token``."""
        with self._oauth_client() as oauth:
            return oauth.create_authorization_url(
                f"{self.server_location}{AUTHORIZE_PATH}",
                request_token=request_token.token,
            )

    def get_access_token(self, request_token: TokenPair, verifier: str) -> TokenPair:
        """Exchange an authorized request token and its verifier for an access token."""
        logger.debug("Exchanging verifier for access token at %s", self.server_location)
        with self._oauth_client(request_token) as oauth:
            try:
                data = oauth.fetch_access_token(
                    f"{self.server_location}{ACCESS_TOKEN_PATH}",
                    verifier=verifier,
                )
            except (OAuthError, httpx.HTTPError) as e:
                raise Unauthorized(f"Could not get Access Token: {e}") from e
        return TokenPair.from_response(data)

    def auth_for(self, token: TokenPair | None) -> httpx.Auth:
        """Signing strategy for API calls made with ``token`` (consumer-only if None)."""
        return OAuth1Auth(
            self.consumer_key,
            client_secret=self.consumer_secret,
            token=token.token if token else None,
            token_secret=token.secret if token else None,
        )
