"""CLI for obtaining a VK access token."""

import asyncio
import json
import logging
import os
from pathlib import Path

import httpx
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .authorizer import Authorizer
from .config import AuthorizerConfig
from .exceptions import AuthorizationFailedError, VKAuthError
from .models import AccessToken, Credentials

app = typer.Typer(help="VK OAuth implicit-flow login")
console = Console()


def load_env():
    """Load environment from local.env if present."""
    for parent in [Path.cwd()] + list(Path.cwd().parents)[:3]:
        env_file = parent / "local.env"
        if env_file.exists():
            with open(env_file) as f:
                for line in f:
                    line = line.strip()
                    if line and not line.startswith("#") and "=" in line:
                        key, _, value = line.partition("=")
                        value = value.strip().strip('"').strip("'")
                        os.environ.setdefault(key.strip(), value)
            break


async def _fetch_token(credentials: Credentials, config: AuthorizerConfig) -> AccessToken:
    async with Authorizer.builder().with_config(config).build() as auth:
        return await auth.get_token(credentials.client_id, credentials.identifier, credentials.secret)


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Log protocol steps")):
    """VK OAuth implicit-flow login."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        )


@app.command()
def token(
    json_output: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
):
    """Log in with VK_APP_ID, VK_EMAIL, VK_PASSWORD and print the access token."""
    load_env()

    try:
        credentials = Credentials.from_env()
    except ValueError as e:
        console.print(f"[red]Missing configuration:[/red] {e}")
        console.print("[dim]Set VK_APP_ID, VK_EMAIL, VK_PASSWORD in environment or local.env[/dim]")
        raise typer.Exit(1)

    try:
        config = AuthorizerConfig.from_env()
    except ValueError as e:
        console.print(f"[red]Invalid configuration:[/red] {e}")
        console.print("[dim]Check VK_AUTHORIZE_URL, VK_TIMEOUT, VK_USER_AGENT in environment or local.env[/dim]")
        raise typer.Exit(1)

    try:
        access_token = asyncio.run(_fetch_token(credentials, config))
    except AuthorizationFailedError as e:
        console.print(f"[red]Authentication failed:[/red] {e}")
        raise typer.Exit(1)
    except VKAuthError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    except httpx.HTTPError as e:
        console.print(f"[red]Connection failed:[/red] {e}")
        raise typer.Exit(1)
    except (httpx.InvalidURL, ValueError) as e:
        console.print(f"[red]Malformed redirect data:[/red] {e}")
        raise typer.Exit(1)

    if json_output:
        console.print(json.dumps(access_token.to_dict(), indent=2))
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("User ID")
    table.add_column("Expires in")
    table.add_column("Access token")
    table.add_row(access_token.user_id, str(access_token.expires_in), access_token.access_token)
    console.print(table)


if __name__ == "__main__":
    app()
