"""
pchain client CLI

Command-line client for a ParallelChain fullnode.

Commands:
  parse   - Encode / decode data exchanged with contracts
  config  - Get and set the fullnode RPC URL
  info    - Show client information
"""

from __future__ import annotations

import sys

import click

from . import __version__
from .config import ConfigError, load_url


# ============ Banner ============


def _print_banner() -> None:
    border = click.style("  ◆ ═══════════════════════════════════════ ◆", fg="cyan")
    click.echo()
    click.echo(border)
    click.echo()
    click.echo(
        click.style("        P C H A I N", fg="bright_white", bold=True)
        + click.style(f"        v{__version__}", dim=True)
    )
    click.secho("        ─── ParallelChain Client ───", fg="cyan")
    click.echo()
    click.echo(border)
    click.echo()


# ============ Main CLI Group ============


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="pchain-client")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """pchain client - ParallelChain command-line client."""
    if ctx.invoked_subcommand is None:
        _print_banner()
        click.echo(ctx.get_help())


# ============ Top-level Commands ============

from .commands.config import config
from .commands.parse import parse

cli.add_command(parse)
cli.add_command(config)


# ============ Info ============


@cli.command()
def info() -> None:
    """Show client information."""
    _print_banner()

    click.secho("  Status ─────────────────────────────────", fg="cyan")
    click.echo()
    try:
        url = load_url()
        url_text = click.style(url, fg="bright_white")
    except ConfigError:
        url_text = click.style("not configured", fg="yellow") + click.style(
            "  (run: pchain-client config setup --url <URL>)", dim=True
        )
    click.echo(click.style("  RPC URL:     ", dim=True) + url_text)
    click.echo()

    click.secho("  Commands ───────────────────────────────", fg="cyan")
    click.echo()
    commands = [
        ("parse base64-encoding", "Encode / decode base64url"),
        ("parse call-result    ", "Decode a contract call result"),
        ("parse call-arguments ", "Encode contract call arguments"),
        ("config setup         ", "Store the fullnode RPC URL"),
        ("config list          ", "Show the stored configuration"),
    ]
    for cmd, desc in commands:
        click.echo(
            click.style("  ", dim=True)
            + click.style(cmd, fg="bright_white", bold=True)
            + click.style("  ◇  ", fg="cyan")
            + click.style(desc, dim=True)
        )
    click.echo()


# ============ Entry Points ============


def main() -> None:
    """pchain client entry point."""
    # Ensure UTF-8 output on Windows (for Unicode box-drawing / symbols)
    if sys.platform == "win32":
        try:
            sys.stdout.reconfigure(encoding="utf-8")  # type: ignore[union-attr]
            sys.stderr.reconfigure(encoding="utf-8")  # type: ignore[union-attr]
        except (AttributeError, OSError):
            pass
    cli()


if __name__ == "__main__":
    main()
