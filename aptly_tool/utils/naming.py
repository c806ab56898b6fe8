"""
Naming conventions shared by local repos, snapshots and published repos.

Local repositories are named ``<endpoint>-<distribution>``, e.g.
``ubuntu-bionic`` or ``schoolbox-unstable-bionic``. The first
hyphen-delimited token names the storage endpoint the repo is published
to; everything after the first hyphen is the distribution, which may
itself contain hyphens.

All functions here are pure and never touch the network.
"""

from datetime import datetime
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from .constants import (
    DEFAULT_STORAGE_TYPE,
    REPO_NAME_SEPARATOR,
    RESERVED_REPO_NAMES,
    SNAPSHOT_TIMESTAMP_FORMAT,
)


def package_identifier(package_file: str) -> str:
    """
    Return the base filename of a package, used as its upload directory.

    Examples:
        >>> package_identifier("package-artifacts/php-pdo-sqlsrv_5.10.1-1_amd64.deb")
        'php-pdo-sqlsrv_5.10.1-1_amd64.deb'
    """
    return Path(package_file).name


def snapshot_name(local_repo: str, now: datetime) -> str:
    """
    Build a snapshot name from a local repo name and a timestamp.

    Two snapshots of the same repo taken within the same minute get the
    same name; aptly rejects the second one.

    Examples:
        >>> snapshot_name("ubuntu-bionic", datetime(2024, 1, 1, 0, 0))
        'ubuntu-bionic-202401010000'
    """
    return f"{local_repo}{REPO_NAME_SEPARATOR}{now.strftime(SNAPSHOT_TIMESTAMP_FORMAT)}"


def split_local_repo_name(local_repo: str) -> Tuple[str, str]:
    """
    Split a local repo name into its endpoint token and distribution.

    The distribution is empty when the name has no hyphen.

    Examples:
        >>> split_local_repo_name("schoolbox-unstable-bionic")
        ('schoolbox', 'unstable-bionic')
        >>> split_local_repo_name("ubuntu")
        ('ubuntu', '')
    """
    token, _, distribution = local_repo.partition(REPO_NAME_SEPARATOR)
    return token, distribution


def publish_prefix(local_repo: str, storage_type: str = DEFAULT_STORAGE_TYPE) -> str:
    """
    Derive the publish prefix (storage endpoint) for a local repo.

    Examples:
        >>> publish_prefix("ubuntu-bionic")
        's3:ubuntu'
    """
    token, _ = split_local_repo_name(local_repo)
    return f"{storage_type}:{token}"


def publish_distribution(local_repo: str) -> str:
    """
    Derive the published distribution for a local repo.

    Examples:
        >>> publish_distribution("ubuntu-bionic")
        'bionic'
    """
    _, distribution = split_local_repo_name(local_repo)
    return distribution


def is_reserved(name: str, reserved_names: Optional[Iterable[str]] = None) -> bool:
    """
    Check whether a repo name or storage endpoint is reserved.

    A name is reserved when any of its hyphen-delimited tokens equals a
    reserved name; a leading ``<storage type>:`` is ignored, so
    ``s3:upstream`` and ``upstream-bionic`` are both reserved.

    Examples:
        >>> is_reserved("upstream")
        True
        >>> is_reserved("s3:upstream")
        True
        >>> is_reserved("ubuntu-bionic")
        False
    """
    reserved = set(RESERVED_REPO_NAMES if reserved_names is None else reserved_names)
    bare = name.split(":", 1)[-1]
    return any(token in reserved for token in bare.split(REPO_NAME_SEPARATOR))


def filter_reserved(names: Iterable[str], reserved_names: Optional[Iterable[str]] = None) -> List[str]:
    """
    Drop reserved names and duplicates, returning the rest sorted.

    Args:
        names: Repo names or storage endpoints
        reserved_names: Reserved names (default: ``RESERVED_REPO_NAMES``)

    Returns:
        Sorted list of distinct, non-reserved names
    """
    reserved = list(RESERVED_REPO_NAMES if reserved_names is None else reserved_names)
    return sorted({name for name in names if not is_reserved(name, reserved)})


__all__ = [
    "package_identifier",
    "snapshot_name",
    "split_local_repo_name",
    "publish_prefix",
    "publish_distribution",
    "is_reserved",
    "filter_reserved",
]
