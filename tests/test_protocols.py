"""Tests for protocol modules."""

import inspect
from typing import Protocol

from aptly_tool.api import AptlyClient
from aptly_tool.protocols import RepositoryDirectory
from aptly_tool.protocols.repository_protocol import RepositoryDirectory as Directory


def test_repository_directory_import():
    """Test that RepositoryDirectory can be imported from protocols package."""
    assert RepositoryDirectory is not None
    assert RepositoryDirectory == Directory


def test_repository_directory_is_protocol():
    """Test that RepositoryDirectory is a Protocol type."""
    assert issubclass(Directory, Protocol)  # type: ignore[arg-type]


def test_repository_directory_interface():
    """Test that RepositoryDirectory only needs the two listings."""
    assert hasattr(Directory, "list_repos")
    assert hasattr(Directory, "list_publish_endpoints")

    assert list(inspect.signature(Directory.list_repos).parameters) == ["self"]
    assert list(inspect.signature(Directory.list_publish_endpoints).parameters) == ["self"]


def test_fake_directory_satisfies_protocol(directory):
    """Test that an in-memory directory is accepted at runtime."""
    assert isinstance(directory, RepositoryDirectory)


def test_aptly_client_satisfies_protocol(aptly_client):
    """Test that the API client can be handed to the resolver as a directory."""
    assert isinstance(aptly_client, RepositoryDirectory)
    assert isinstance(aptly_client, AptlyClient)


def test_object_without_listings_is_rejected():
    """Test that objects lacking the listings do not satisfy the protocol."""

    class NotADirectory:
        def list_repos(self):
            return []

    assert not isinstance(NotADirectory(), RepositoryDirectory)
