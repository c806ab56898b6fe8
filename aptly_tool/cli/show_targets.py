"""
Show-targets command for aptly-tool CLI.

Lists the local repos and published repos that ``publish`` accepts, so a
valid ``--local-repo`` can be picked without reading aptly's API by hand.
"""

import sys

import click
import httpx

from ..api import AptlyClient
from ..utils import setup_logging
from ..utils.argument_resolver import ArgumentResolver
from ..utils.constants import EXIT_GENERAL_ERROR, EXIT_SUCCESS
from ..utils.error_handling import handle_generic_error, handle_http_error
from .base import AptlyToolCommand


@click.command("show-targets", cls=AptlyToolCommand)
@click.pass_context
def show_targets(ctx: click.Context) -> None:
    """List local repos and publish endpoints available as publish targets."""
    setup_logging(ctx.obj["debug"], use_wrapping=True)

    try:
        with AptlyClient.create_from_config_file(ctx.obj["config"], api_url=ctx.obj["api_url"]) as client:
            resolver = ArgumentResolver.from_settings(client, client.settings)

            click.echo("Local repos:")
            for name in resolver.available_repos() or []:
                click.echo(f"  - {name}")

            click.echo("Publish endpoints:")
            for endpoint in resolver.available_targets():
                serving = ", ".join(f"{source.component}={source.name}" for source in endpoint.sources)
                line = f"  - {endpoint.storage}:/{endpoint.distribution}"
                click.echo(f"{line} ({serving})" if serving else line)

        sys.exit(EXIT_SUCCESS)

    except httpx.HTTPError as e:
        handle_http_error(e, "listing publish targets")
        sys.exit(EXIT_GENERAL_ERROR)
    except (ValueError, OSError) as e:
        handle_generic_error(e, "listing publish targets")
        sys.exit(EXIT_GENERAL_ERROR)


__all__ = ["show_targets"]
