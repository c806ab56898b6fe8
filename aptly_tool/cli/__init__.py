"""
Unified CLI entry point for aptly-tool operations using Click.

This module provides the main CLI group and shared options.
"""

import sys
from typing import Optional

import click

from . import publish, show_targets
from .base import AptlyToolGroup
from .._version import __version__
from ..utils.constants import DEFAULT_CONFIG_PATH, ENV_API_URL, EXIT_USER_INTERRUPT


# ============================================================================
# CLI Group
# ============================================================================


@click.group(cls=AptlyToolGroup, context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="aptly-tool")
@click.option(
    "--config",
    type=click.Path(dir_okay=False),
    help=f"Path to aptly-tool config file (default: {DEFAULT_CONFIG_PATH})",
)
@click.option(
    "--api-url",
    envvar=ENV_API_URL,
    help=f"aptly API root URL, overrides the config file (env: {ENV_API_URL})",
)
@click.option(
    "-d",
    "--debug",
    count=True,
    help="Increase verbosity (use -d for INFO, -dd for DEBUG, -ddd for DEBUG with HTTP logs)",
)
@click.pass_context
def cli(ctx: click.Context, config: Optional[str], api_url: Optional[str], debug: int) -> None:
    """Aptly Tool - Publish Debian packages to aptly-managed apt repositories."""
    # Store shared options in context for subcommands to access
    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["api_url"] = api_url
    ctx.obj["debug"] = debug


# Register subcommands
cli.add_command(publish.publish)
cli.add_command(show_targets.show_targets)


# ============================================================================
# Main Entry Point
# ============================================================================


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()  # pylint: disable=no-value-for-parameter  # Click handles parameters
    except KeyboardInterrupt:
        click.echo("\n\nOperation cancelled by user", err=True)
        sys.exit(EXIT_USER_INTERRUPT)


__all__ = ["cli", "main"]
