"""
Config - Get and set the fullnode RPC URL.
"""

from __future__ import annotations

import sys

import click

from ..config import ConfigError, config_path, load_url, save_url


@click.group()
def config() -> None:
    """Get and set the fullnode RPC URL."""


@config.command()
@click.option("--url", required=True, help="Fullnode RPC URL, e.g. https://rpc.example.org")
def setup(url: str) -> None:
    """Store the fullnode RPC URL."""
    try:
        path = save_url(url)
    except ConfigError as exc:
        click.secho(f"ERROR: {exc}", fg="red")
        sys.exit(exc.exit_code)
    click.secho("SUCCESS: URL saved.", fg="green")
    click.echo(f"  URL: {load_url(path)}")
    click.echo(f"  Config: {path}")


@config.command("list")
def list_config() -> None:
    """Show the stored configuration."""
    try:
        url = load_url()
    except ConfigError as exc:
        click.secho(f"ERROR: {exc}", fg="red")
        sys.exit(exc.exit_code)
    click.echo(f"URL: {url}")
    click.echo(f"Config: {config_path()}")
