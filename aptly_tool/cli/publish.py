"""
Publish command for aptly-tool CLI.

This module provides the publish command: upload a .deb, add it to a local
repo, snapshot the repo and switch the published repo to the snapshot.
"""

import sys
from typing import Optional

import click
import httpx

from ..api import AptlyClient
from ..exceptions import ResolutionError
from ..services import PublishPipeline
from ..utils import register_secret, setup_logging
from ..utils.argument_resolver import ArgumentResolver
from ..utils.constants import ENV_PASSPHRASE, EXIT_GENERAL_ERROR, EXIT_SUCCESS
from ..utils.error_handling import handle_generic_error, handle_http_error
from ..utils.logging_utils import log_list_items, log_summary_separator
from .base import AptlyToolCommand


def _echo_progress(message: str) -> None:
    click.echo(message, err=True)


@click.command(
    cls=AptlyToolCommand,
    context_settings={"ignore_unknown_options": True, "allow_extra_args": True},
)
@click.option("--package", metavar="PACKAGE", help="Required. Path to the DEB package file")
@click.option("--local-repo", metavar="LOCAL_REPO", help="Required. aptly local repository to add the DEB package to")
@click.option(
    "--passphrase",
    envvar=ENV_PASSPHRASE,
    metavar="PASSPHRASE",
    help=f"Required. GPG key passphrase (env: {ENV_PASSPHRASE})",
)
@click.option("--strict", is_flag=True, help="Exit with an error if switching the published repo fails")
@click.option("--dry-run", is_flag=True, help="Validate arguments against aptly and print the plan without publishing")
@click.pass_context
def publish(  # pylint: disable=too-many-arguments,too-many-positional-arguments
    ctx: click.Context,
    package: Optional[str],
    local_repo: Optional[str],
    passphrase: Optional[str],
    strict: bool,
    dry_run: bool,
) -> None:
    """Publish a Debian package to an aptly repository."""
    config = ctx.obj["config"]
    api_url = ctx.obj["api_url"]
    debug = ctx.obj["debug"]

    setup_logging(debug, use_wrapping=True)
    if passphrase:
        register_secret(passphrase)

    try:
        with AptlyClient.create_from_config_file(config, api_url=api_url) as client:
            resolver = ArgumentResolver.from_settings(client, client.settings)
            context = resolver.resolve(
                package=package,
                local_repo=local_repo,
                passphrase=passphrase,
                unknown_args=ctx.args,
            )

            pipeline = PublishPipeline(client, strict=strict, progress=_echo_progress)

            if dry_run:
                click.echo(f"Dry run: would publish {context.package_identifier} to {context.local_repo}")
                for line in pipeline.plan(context):
                    click.echo(f"  {line}")
                sys.exit(EXIT_SUCCESS)

            result = pipeline.run(context)

        log_summary_separator("PUBLISH SUMMARY")
        log_list_items(result.completed_stages, prefix="  completed: ")

        if result.succeeded:
            click.echo(
                f"Published {context.package_identifier} to {context.publish_prefix}:/{context.distribution}"
                f" as snapshot {context.snapshot_name}"
            )
            sys.exit(EXIT_SUCCESS)

        if not result.exit_ok:
            sys.exit(EXIT_GENERAL_ERROR)

        click.echo(
            f"Snapshot {context.snapshot_name} was created but {result.failed_stage} failed: {result.error}",
            err=True,
        )
        sys.exit(EXIT_SUCCESS)

    except ResolutionError as e:
        for error in e.errors:
            click.echo(error, err=True)
        click.echo(ctx.get_help(), err=True)
        sys.exit(e.exit_code)
    except httpx.HTTPError as e:
        handle_http_error(e, "publish operation")
        sys.exit(EXIT_GENERAL_ERROR)
    except (ValueError, OSError) as e:
        handle_generic_error(e, "publish operation")
        sys.exit(EXIT_GENERAL_ERROR)


__all__ = ["publish"]
