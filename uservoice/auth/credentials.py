"""Credential storage for the UserVoice SDK.

Stores consumer credentials and access tokens in ~/.uservoice/config.json
with restrictive permissions.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any

from .constants import CONFIG_DIR, CONFIG_FILE, ENV_VARS
from .types import AuthStatus


def get_config_path() -> Path:
    return Path.home() / CONFIG_DIR / CONFIG_FILE


def load_config() -> dict[str, Any] | None:
    """Load config from ~/.uservoice/config.json.

    Returns None if file doesn't exist, is corrupt, or is not a dict.
    """
    config_path = get_config_path()
    if not config_path.exists():
        return None
    try:
        data = json.loads(config_path.read_text())
        if not isinstance(data, dict):
            return None
        return data
    except (json.JSONDecodeError, OSError):
        return None


def save_config(**settings: str | None) -> None:
    """Merge ``settings`` into the config file with an atomic write.

    Keys whose value is None are left untouched. Directory is 0700 and the
    file 0600.
    """
    config_path = get_config_path()
    config_dir = config_path.parent
    config_dir.mkdir(parents=True, exist_ok=True)
    os.chmod(config_dir, 0o700)

    data = load_config() or {}
    data.update({k: v for k, v in settings.items() if v is not None})
    content = json.dumps(data, indent=2)

    fd, tmp_path = tempfile.mkstemp(dir=config_dir, prefix=".config_", suffix=".tmp")
    try:
        with os.fdopen(fd, "w") as f:
            f.write(content)
        os.chmod(tmp_path, 0o600)
        os.replace(tmp_path, config_path)
    except BaseException:
        if os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise


def clear_config() -> bool:
    """Delete the config file. Returns True if a file was removed."""
    config_path = get_config_path()
    if config_path.exists():
        config_path.unlink()
        return True
    return False


def _is_set(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def resolve_settings(**explicit: str | None) -> dict[str, str]:
    """Resolve client settings using the standard precedence chain.

    Order, per key: explicit argument > USERVOICE_* env var > config file.
    Empty strings are treated as missing. Keys with no value anywhere are
    omitted from the result.
    """
    config = load_config() or {}
    resolved: dict[str, str] = {}
    for key, env_var in ENV_VARS.items():
        for candidate in (explicit.get(key), os.environ.get(env_var), config.get(key)):
            if _is_set(candidate):
                resolved[key] = candidate
                break
    return resolved


def _mask_token(token: str) -> str:
    if len(token) >= 12:
        return token[:4] + "..." + token[-4:]
    return "***"


def get_auth_status() -> AuthStatus:
    """Check whether an access token is available (env var > config file)."""
    config_path = str(get_config_path())

    env_token = os.environ.get(ENV_VARS["access_token"])
    if _is_set(env_token):
        return AuthStatus(
            authenticated=True,
            subdomain=os.environ.get(ENV_VARS["subdomain"]),
            masked_token=_mask_token(env_token),
            source="env_var",
            config_path=config_path,
        )

    config = load_config() or {}
    config_token = config.get("access_token")
    if _is_set(config_token):
        return AuthStatus(
            authenticated=True,
            subdomain=config.get("subdomain"),
            masked_token=_mask_token(config_token),
            source="config_file",
            config_path=config_path,
        )

    return AuthStatus(authenticated=False, config_path=config_path)
