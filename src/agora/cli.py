"""CLI interface for Agora.

Runs the web front end and queries the backend API from the command line.
"""

import asyncio
import json
import logging
import sys
from pathlib import Path

import click
import httpx

from agora.client import ApiError, build_api
from agora.config import Config

config_option = click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover agora.toml)",
)

base_url_option = click.option(
    "--base-url",
    "-u",
    default=None,
    help="Backend API base URL (overrides config)",
)


@click.group()
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable debug logging",
)
def cli(verbose: bool) -> None:
    """Agora - discussion board front end."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@config_option
@base_url_option
@click.option(
    "--host",
    default=None,
    help="Host to bind to (overrides config)",
)
@click.option(
    "--port",
    "-p",
    type=int,
    default=None,
    help="Port to bind to (overrides config)",
)
def serve(
    config_path: Path | None,
    base_url: str | None,
    host: str | None,
    port: int | None,
) -> None:
    """Start the web server."""
    from agora.server import run_server

    config = _load_config(config_path).with_overrides(
        host=host, port=port, base_url=base_url
    )

    click.echo(f"Starting server on {config.server.host}:{config.server.port}")
    click.echo(f"Backend API: {config.api.effective_base_url}")
    click.echo(f"Panel breakpoint: {config.shell.breakpoint}px")

    run_server(config)


@cli.command()
@config_option
@base_url_option
def routes(config_path: Path | None, base_url: str | None) -> None:
    """List backend API routes with their resolved URLs."""
    config = _load_config(config_path).with_overrides(base_url=base_url)
    asyncio.run(_routes(config))


async def _routes(config: Config) -> None:
    async with httpx.AsyncClient(timeout=config.api.timeout) as client:
        api = build_api(client, config.api.base_url)
        for endpoint in api.endpoints():
            methods = ", ".join(endpoint.methods)
            click.echo(f"{methods:<8} {endpoint.path()}")


@cli.command()
@config_option
@base_url_option
@click.option(
    "--raw",
    is_flag=True,
    help="Print status, headers and body instead of the user list",
)
def users(config_path: Path | None, base_url: str | None, raw: bool) -> None:
    """Fetch the user list from the backend API."""
    config = _load_config(config_path).with_overrides(base_url=base_url)
    asyncio.run(_users(config, raw))


async def _users(config: Config, raw: bool) -> None:
    """Fetch and print users.

    Args:
        config: Application configuration
        raw: Print the full response envelope
    """
    try:
        async with httpx.AsyncClient(timeout=config.api.timeout) as client:
            api = build_api(client, config.api.base_url)
            if raw:
                response = await api.users.get()
                click.echo(f"Status: {response.status}")
                for name, value in response.headers.items():
                    click.echo(f"{name}: {value}")
                click.echo(json.dumps(response.body, indent=2, ensure_ascii=False))
                return

            body = await api.users.get_body()
    except ApiError as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)

    if not body["users"]:
        click.echo("No users.")
        return
    for user in body["users"]:
        click.echo(f"{user['id']}\t{user['name']}\t{user['email']}")


def _load_config(config_path: Path | None) -> Config:
    try:
        return Config.load(config_path)
    except (FileNotFoundError, ValueError) as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)
