"""Main entry point for the UserVoice CLI."""

from __future__ import annotations

import logging

try:
    import typer
except ImportError:
    import sys

    print("UserVoice CLI requires extras: pip install uservoice[cli]")
    sys.exit(1)

from .commands import api, auth

app = typer.Typer(
    name="uservoice",
    help=(
        "UserVoice CLI - OAuth login for a UserVoice subdomain and signed calls "
        "to its REST API (raw requests and paginated lists)"
    ),
    no_args_is_help=True,
)

app.add_typer(auth.app, name="auth")
app.add_typer(api.app, name="api")


def _version_callback(value: bool) -> None:
    """Handle --version and exit early."""
    if value:
        from uservoice import __version__

        typer.echo(f"uservoice {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log OAuth exchanges, requests and page fetches to stderr.",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show the CLI version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """Configure SDK logging before any subcommand runs."""
    _ = version
    if verbose:
        logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
        logging.getLogger("uservoice").setLevel(logging.DEBUG)


@app.command()
def version() -> None:
    """Show the CLI version."""
    from uservoice import __version__

    typer.echo(f"uservoice {__version__}")


if __name__ == "__main__":
    app()
