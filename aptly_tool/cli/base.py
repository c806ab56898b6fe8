"""
Click command classes shared by every aptly-tool command.

Usage errors (unknown options, options missing their value) exit with the
tool's general error status instead of click's default of 2.
"""

from typing import Any, List, Optional

import click

from ..utils.constants import EXIT_GENERAL_ERROR


class _UsageExitMixin:
    """Rewrite the exit code of usage errors raised while parsing arguments."""

    def make_context(
        self, info_name: Optional[str], args: List[str], parent: Optional[click.Context] = None, **extra: Any
    ) -> click.Context:
        try:
            return super().make_context(info_name, args, parent=parent, **extra)  # type: ignore[misc]
        except click.UsageError as e:
            e.exit_code = EXIT_GENERAL_ERROR
            raise


class AptlyToolGroup(_UsageExitMixin, click.Group):
    """Command group whose usage errors exit with status 1."""


class AptlyToolCommand(_UsageExitMixin, click.Command):
    """Command whose usage errors exit with status 1."""


__all__ = ["AptlyToolGroup", "AptlyToolCommand"]
