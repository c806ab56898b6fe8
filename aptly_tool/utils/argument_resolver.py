"""
Publish argument resolution.

Turns the raw command line values into a validated, fully derived
``PublishContext``. Every problem is collected and reported together; the
resolver only raises once all checks have run.
"""

import logging
from datetime import datetime
from typing import Callable, Iterable, List, Optional, Sequence, cast

import httpx

from ..exceptions import ResolutionError
from ..models.aptly_api import PublishedRepoResponse
from ..models.context import PublishContext
from ..models.settings import AptlySettings
from ..models.validation import ValidationResult
from ..protocols.repository_protocol import RepositoryDirectory
from .constants import DEFAULT_COMPONENT, DEFAULT_STORAGE_TYPE, RESERVED_REPO_NAMES
from .naming import (
    filter_reserved,
    package_identifier,
    publish_distribution,
    publish_prefix,
    snapshot_name,
)
from .validation import (
    validate_distribution,
    validate_local_repo,
    validate_package_file,
    validate_publish_prefix,
)


class ArgumentResolver:
    """
    Resolves publish arguments against an aptly repository directory.

    Args:
        directory: Source of the local repo and published repo listings
        storage_type: Storage backend type for publish prefixes (default ``s3``)
        component: Component snapshots are published under (default ``main``)
        reserved_names: Repo names never accepted as targets (default ``["upstream"]``)
        clock: Returns the invocation time used in snapshot names
    """

    def __init__(
        self,
        directory: RepositoryDirectory,
        *,
        storage_type: str = DEFAULT_STORAGE_TYPE,
        component: str = DEFAULT_COMPONENT,
        reserved_names: Optional[Iterable[str]] = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.directory = directory
        self.storage_type = storage_type
        self.component = component
        self.reserved_names = list(RESERVED_REPO_NAMES if reserved_names is None else reserved_names)
        self.clock = clock

    @classmethod
    def from_settings(
        cls, directory: RepositoryDirectory, settings: AptlySettings, clock: Callable[[], datetime] = datetime.now
    ) -> "ArgumentResolver":
        """Create a resolver using the publishing conventions from settings."""
        return cls(
            directory,
            storage_type=settings.storage_type,
            component=settings.component,
            reserved_names=settings.reserved_names,
            clock=clock,
        )

    def resolve(
        self,
        *,
        package: Optional[str] = None,
        local_repo: Optional[str] = None,
        passphrase: Optional[str] = None,
        unknown_args: Sequence[str] = (),
    ) -> PublishContext:
        """
        Validate the raw arguments and derive the publish context.

        Unknown arguments are reported on their own, before any request to
        aptly is made.

        Args:
            package: Path to the .deb package
            local_repo: Target local repo name
            passphrase: GPG key passphrase
            unknown_args: Command line tokens that matched no known flag

        Returns:
            Fully resolved PublishContext

        Raises:
            ResolutionError: With every problem found
        """
        if unknown_args:
            raise ResolutionError(f"Unknown argument: {arg}" for arg in unknown_args)

        result = ValidationResult()

        if not passphrase:
            result.add_error("You must declare the passphrase using the --passphrase flag")

        result.extend(validate_package_file(package))

        if not local_repo:
            result.extend(validate_local_repo(local_repo, []))
        else:
            self._validate_remote(local_repo, result)

        if result.has_errors:
            for error in result.errors:
                logging.debug("Resolution error: %s", error)
            raise ResolutionError(result.errors)

        # The checks above guarantee these are set
        package, local_repo, passphrase = cast(str, package), cast(str, local_repo), cast(str, passphrase)

        context = PublishContext(
            package_file=package,
            package_identifier=package_identifier(package),
            local_repo=local_repo,
            snapshot_name=snapshot_name(local_repo, self.clock()),
            publish_prefix=publish_prefix(local_repo, self.storage_type),
            distribution=publish_distribution(local_repo),
            passphrase=passphrase,
            component=self.component,
        )
        logging.debug("Resolved publish context: %r", context)
        return context

    def _validate_remote(self, local_repo: str, result: ValidationResult) -> None:
        """Check the local repo, prefix and distribution against aptly's listings."""
        repos = self.available_repos(result)
        if repos is not None:
            result.extend(validate_local_repo(local_repo, repos))

        prefix = publish_prefix(local_repo, self.storage_type)
        distribution = publish_distribution(local_repo)

        endpoints = self._list_endpoints(result)
        if endpoints is None:
            if not distribution:
                result.extend(validate_distribution(distribution, prefix, []))
            return

        prefix_result = validate_publish_prefix(prefix, self._storages(endpoints))
        result.extend(prefix_result)
        if prefix_result.has_errors and distribution:
            # Distributions of an unknown prefix would only add noise
            return

        distributions = sorted({endpoint.distribution for endpoint in endpoints if endpoint.storage == prefix})
        result.extend(validate_distribution(distribution, prefix, distributions))

    def available_repos(self, result: Optional[ValidationResult] = None) -> Optional[List[str]]:
        """
        List the local repo names that may be published to.

        Args:
            result: Collects the failure if the listing cannot be fetched;
                when omitted the error propagates

        Returns:
            Sorted non-reserved repo names, or None if the listing failed
        """
        try:
            repos = self.directory.list_repos()
        except httpx.HTTPError as e:
            if result is None:
                raise
            result.add_error(f"Unable to list local repos from aptly: {e}")
            return None
        return filter_reserved((repo.name for repo in repos), self.reserved_names)

    def available_targets(self) -> List[PublishedRepoResponse]:
        """
        List the published repos a local repo may be published to.

        Returns:
            Published repos on non-reserved storage endpoints, sorted by endpoint and distribution
        """
        endpoints = self.directory.list_publish_endpoints()
        storages = set(self._storages(endpoints))
        targets = [endpoint for endpoint in endpoints if endpoint.storage in storages]
        return sorted(targets, key=lambda endpoint: (endpoint.storage, endpoint.distribution))

    def _list_endpoints(self, result: ValidationResult) -> Optional[List[PublishedRepoResponse]]:
        try:
            return self.directory.list_publish_endpoints()
        except httpx.HTTPError as e:
            result.add_error(f"Unable to list publish endpoints from aptly: {e}")
            return None

    def _storages(self, endpoints: Iterable[PublishedRepoResponse]) -> List[str]:
        return filter_reserved((endpoint.storage for endpoint in endpoints), self.reserved_names)


__all__ = ["ArgumentResolver"]
