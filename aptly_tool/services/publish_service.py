"""
Publish pipeline for aptly.

Runs the four publish stages in a fixed order against an aptly server:

    UPLOAD -> ADD_TO_REPO -> SNAPSHOT -> PUBLISH

Each stage is a single API call whose request is fully determined by the
resolved ``PublishContext``. A failed upload, add or snapshot aborts the
run. A failed publish is logged and, unless the pipeline is strict, does
not fail the run.
"""

import logging
from enum import Enum
from typing import Callable, List, Optional, Tuple, TYPE_CHECKING

import httpx

from ..models.context import PublishContext
from ..models.results import PublishResult
from ..utils.error_handling import handle_generic_error, handle_http_error
from ..utils.logging_utils import log_operation_complete, log_operation_start

if TYPE_CHECKING:
    from ..api import AptlyClient


class PublishStage(str, Enum):
    """Publish pipeline stages, in execution order."""

    UPLOAD = "upload"
    ADD_TO_REPO = "add-to-repo"
    SNAPSHOT = "snapshot"
    PUBLISH = "publish"


StageAction = Callable[[], object]


class PublishPipeline:
    """
    Sequential executor for the publish stages.

    Args:
        client: aptly API client
        strict: Treat a failed publish stage as fatal
        progress: Receives one human-readable line before each stage and on
            each failure (default: ``logging.warning``)
    """

    def __init__(
        self,
        client: "AptlyClient",
        *,
        strict: bool = False,
        progress: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.client = client
        self.strict = strict
        self._progress = progress or logging.warning

    def is_fatal(self, stage: PublishStage) -> bool:
        """Whether a failure in ``stage`` fails the whole run."""
        return stage is not PublishStage.PUBLISH or self.strict

    def run(self, context: PublishContext) -> PublishResult:
        """
        Execute all stages in order, stopping at the first fatal failure.

        Args:
            context: Resolved publish parameters

        Returns:
            PublishResult recording completed stages and any failure
        """
        result = PublishResult()

        for stage, announcement, failure, action in self._stages(context):
            self._progress(announcement)
            log_operation_start(stage.value, local_repo=context.local_repo)
            try:
                action()
            except httpx.HTTPError as e:
                handle_http_error(e, stage.value)
                self._fail(result, stage, failure, e)
            except (ValueError, OSError) as e:
                handle_generic_error(e, stage.value)
                self._fail(result, stage, failure, e)
            else:
                result.mark_completed(stage.value)
                log_operation_complete(stage.value)
                continue

            if result.fatal:
                break

        return result

    def plan(self, context: PublishContext) -> List[str]:
        """
        Describe the requests a run would issue, without issuing them.

        Returns:
            One ``"<stage>: <METHOD> <path>"`` line per stage
        """
        return [
            f"{PublishStage.UPLOAD.value}: POST /files/{context.package_identifier} ({context.package_file})",
            f"{PublishStage.ADD_TO_REPO.value}: POST /repos/{context.local_repo}/file/{context.package_identifier}",
            f"{PublishStage.SNAPSHOT.value}: POST /repos/{context.local_repo}/snapshots"
            f" (Name={context.snapshot_name})",
            f"{PublishStage.PUBLISH.value}: PUT /publish/{context.publish_prefix}:/{context.distribution}"
            f" ({context.component}={context.snapshot_name})",
        ]

    def _fail(self, result: PublishResult, stage: PublishStage, failure: str, error: Exception) -> None:
        fatal = self.is_fatal(stage)
        self._progress(failure)
        if not fatal:
            logging.warning("%s failed but is not fatal; use --strict to fail the run", stage.value)
        result.mark_failed(stage.value, str(error), fatal=fatal)

    def _stages(self, context: PublishContext) -> List[Tuple[PublishStage, str, str, StageAction]]:
        client = self.client
        return [
            (
                PublishStage.UPLOAD,
                "Uploading package...",
                "Unable to upload package",
                lambda: client.upload_file(context.package_identifier, str(context.package_file)),
            ),
            (
                PublishStage.ADD_TO_REPO,
                "Adding package to local repo...",
                "Unable to add package to local repo",
                lambda: client.add_uploaded_files(context.local_repo, context.package_identifier),
            ),
            (
                PublishStage.SNAPSHOT,
                f"Creating snapshot '{context.snapshot_name}' from local repo...",
                "Unable to create snapshot",
                lambda: client.create_snapshot(context.local_repo, context.snapshot_name),
            ),
            (
                PublishStage.PUBLISH,
                "Publishing repo...",
                "Unable to publish snapshot",
                lambda: client.switch_published_snapshot(
                    context.publish_prefix,
                    context.distribution,
                    context.snapshot_name,
                    context.passphrase,
                    component=context.component,
                ),
            ),
        ]


__all__ = ["PublishStage", "PublishPipeline"]
