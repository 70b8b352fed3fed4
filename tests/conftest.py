"""Test configuration for UserVoice SDK tests."""

import pytest

from uservoice import UserVoiceClient


@pytest.fixture
def client():
    """Shared UserVoiceClient fixture for sync tests."""
    client = UserVoiceClient("mysite", "key", "secret")
    yield client
    client.close()


@pytest.fixture
def config_path(tmp_path, monkeypatch):
    """Redirect the credentials file to a temp directory."""
    path = tmp_path / ".uservoice" / "config.json"
    monkeypatch.setattr("uservoice.auth.credentials.get_config_path", lambda: path)
    for var in (
        "USERVOICE_SUBDOMAIN",
        "USERVOICE_API_KEY",
        "USERVOICE_API_SECRET",
        "USERVOICE_ACCESS_TOKEN",
        "USERVOICE_ACCESS_TOKEN_SECRET",
        "USERVOICE_DOMAIN",
        "USERVOICE_PROTOCOL",
    ):
        monkeypatch.delenv(var, raising=False)
    return path
