"""Authentication commands for the UserVoice CLI."""

from __future__ import annotations

import webbrowser

import typer
from rich.console import Console

from uservoice.auth.credentials import clear_config, get_auth_status, resolve_settings, save_config
from uservoice.cli.commands import get_authenticated_client
from uservoice.client import UserVoiceClient
from uservoice.exceptions import UserVoiceSDKError

app = typer.Typer(help="Manage authentication")
console = Console()

CURRENT_USER_PATH = "/api/v1/users/current"


@app.command()
def login(
    subdomain: str = typer.Option(None, help="UserVoice subdomain (mysite for mysite.uservoice.com)"),
    api_key: str = typer.Option(None, help="API client key"),
    api_secret: str = typer.Option(None, help="API client secret"),
    domain: str = typer.Option(None, help="Host suffix (default: uservoice.com)"),
    protocol: str = typer.Option(None, help="URL scheme (default: https)"),
    open_browser: bool = typer.Option(True, "--browser/--no-browser", help="Open the authorize URL"),
) -> None:
    """Authorize the CLI with OAuth and store the access token.

    Prints the authorization URL, then asks for the verifier UserVoice shows
    once you allow access.
    """
    settings = resolve_settings(
        subdomain=subdomain,
        api_key=api_key,
        api_secret=api_secret,
        domain=domain,
        protocol=protocol,
    )
    if "subdomain" not in settings or "api_key" not in settings:
        console.print("[red]A subdomain and API key are required (--subdomain, --api-key).[/red]")
        raise typer.Exit(1)

    client = UserVoiceClient(
        settings["subdomain"],
        settings["api_key"],
        settings.get("api_secret"),
        domain=settings.get("domain"),
        protocol=settings.get("protocol"),
    )

    try:
        auth_url = client.authorize_url()

        console.print("\n[bold]Authorize the CLI in your browser:[/bold]")
        console.print(f"  {auth_url}\n")
        if open_browser:
            webbrowser.open(auth_url)

        verifier = typer.prompt("Verifier")
        authorized = client.login_with_verifier(verifier.strip())
    except UserVoiceSDKError as e:
        console.print(f"\n[red]Authentication failed: {e}[/red]")
        raise typer.Exit(1)
    finally:
        client.close()

    save_config(
        subdomain=settings["subdomain"],
        api_key=settings["api_key"],
        api_secret=settings.get("api_secret"),
        domain=settings.get("domain"),
        protocol=settings.get("protocol"),
        access_token=authorized.access_token.token,
        access_token_secret=authorized.access_token.secret,
    )
    console.print("\n[green]Successfully authenticated![/green]")


@app.command()
def logout() -> None:
    """Remove stored credentials."""
    if clear_config():
        console.print("[green]Successfully logged out.[/green]")
    else:
        console.print("[yellow]No credentials found.[/yellow]")


@app.command()
def status() -> None:
    """Show current authentication status."""
    auth_status = get_auth_status()

    if not auth_status.authenticated:
        console.print("[yellow]Not authenticated.[/yellow]")
        console.print("Run [bold]uservoice auth login[/bold] to authenticate.")
        raise typer.Exit(1)

    console.print("[green]Authenticated[/green]")
    if auth_status.subdomain:
        console.print(f"  Subdomain: {auth_status.subdomain}")
    console.print(f"  Access Token: {auth_status.masked_token}")
    console.print(f"  Source: {auth_status.source}")

    client = get_authenticated_client()
    try:
        user = client.get(CURRENT_USER_PATH).get("user", {})
        if user.get("email"):
            console.print(f"  User: {user['email']}")
        console.print("\n[green]Access token is valid.[/green]")
    except UserVoiceSDKError as e:
        console.print(f"\n[yellow]Warning: Could not verify access token: {e}[/yellow]")
    finally:
        client.close()
