"""Raw API commands for the UserVoice CLI."""

from __future__ import annotations

import json
from typing import Any

import typer
from rich.console import Console
from rich.table import Table

from uservoice.cli.commands import get_authenticated_client
from uservoice.exceptions import UserVoiceSDKError

app = typer.Typer(help="Call UserVoice API endpoints")
console = Console()


def _parse_data(data: str | None) -> dict[str, Any] | None:
    if data is None:
        return None
    try:
        params = json.loads(data)
    except json.JSONDecodeError as e:
        console.print(f"[red]--data is not valid JSON: {e}[/red]")
        raise typer.Exit(1)
    if not isinstance(params, dict):
        console.print("[red]--data must be a JSON object.[/red]")
        raise typer.Exit(1)
    return params


def _call(method: str, path: str, params: dict[str, Any] | None = None) -> None:
    client = get_authenticated_client()

    try:
        result = client.request(method, path, params)
        console.print_json(data=result)
    except UserVoiceSDKError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)
    finally:
        client.close()


@app.command()
def get(path: str = typer.Argument(help="API path, e.g. /api/v1/users/current")) -> None:
    """Make a GET request and print the JSON response."""
    _call("GET", path)


@app.command()
def delete(path: str = typer.Argument(help="API path")) -> None:
    """Make a DELETE request and print the JSON response."""
    _call("DELETE", path)


@app.command()
def post(
    path: str = typer.Argument(help="API path"),
    data: str = typer.Option(None, help="JSON object sent as the request body"),
) -> None:
    """Make a POST request and print the JSON response."""
    _call("POST", path, _parse_data(data))


@app.command()
def put(
    path: str = typer.Argument(help="API path"),
    data: str = typer.Option(None, help="JSON object sent as the request body"),
) -> None:
    """Make a PUT request and print the JSON response."""
    _call("PUT", path, _parse_data(data))


@app.command("list")
def list_items(
    path: str = typer.Argument(help="List endpoint, e.g. /api/v1/tickets"),
    limit: int = typer.Option(None, help="Maximum number of items to fetch"),
    field: str = typer.Option("title", help="Item field shown next to the id"),
) -> None:
    """Page through a list endpoint and print a table."""
    client = get_authenticated_client()

    try:
        collection = client.get_collection(path, limit=limit)
        if collection.is_empty():
            console.print("[yellow]No items found.[/yellow]")
            return

        table = Table(title=f"{path} ({len(collection)} of {collection.total_records})")
        table.add_column("ID", style="cyan", no_wrap=True)
        table.add_column(field.capitalize(), max_width=60)

        for item in collection:
            value = str(item.get(field, ""))
            if len(value) > 57:
                value = value[:57] + "..."
            table.add_row(str(item.get("id", "")), value)

        console.print(table)
    except UserVoiceSDKError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)
    finally:
        client.close()
