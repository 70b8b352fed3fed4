"""CLI command modules."""

from __future__ import annotations

from typing import Any

import typer
from rich.console import Console

from uservoice.exceptions import UserVoiceSDKError

_console = Console()


def get_authenticated_client() -> Any:
    """Get a UserVoiceClient bound to the stored access token, or exit."""
    from uservoice.client import UserVoiceClient

    try:
        client = UserVoiceClient.from_settings()
    except UserVoiceSDKError as e:
        _console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    if client.access_token is None:
        client.close()
        _console.print("[red]Not authenticated. Run 'uservoice auth login' first.[/red]")
        raise typer.Exit(1)

    return client
