"""Constants for UserVoice authentication and configuration."""

from __future__ import annotations

# OAuth 1.0a endpoints, relative to the subdomain's server location
REQUEST_TOKEN_PATH = "/oauth/request_token"
AUTHORIZE_PATH = "/oauth/authorize"
ACCESS_TOKEN_PATH = "/oauth/access_token"

# Delegated login endpoints (trusted API clients only)
LOGIN_AS_OWNER_PATH = "/api/v1/users/login_as_owner"
LOGIN_AS_PATH = "/api/v1/users/login_as"

# Credential storage
CONFIG_DIR = ".uservoice"
CONFIG_FILE = "config.json"

# Environment variables, by settings key
ENV_VARS = {
    "subdomain": "USERVOICE_SUBDOMAIN",
    "api_key": "USERVOICE_API_KEY",
    "api_secret": "USERVOICE_API_SECRET",
    "access_token": "USERVOICE_ACCESS_TOKEN",
    "access_token_secret": "USERVOICE_ACCESS_TOKEN_SECRET",
    "domain": "USERVOICE_DOMAIN",
    "protocol": "USERVOICE_PROTOCOL",
}

# Error messages
ERROR_NO_REQUEST_TOKEN = "Could not get Request Token"
ERROR_AUTHORIZE_FIRST = "No request token. Call authorize_url() before login_with_verifier()."
