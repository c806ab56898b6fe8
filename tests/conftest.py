"""
Test fixtures and mock data for aptly-tool tests.

This module provides common fixtures, mock aptly API payloads, and an
in-memory repository directory for testing the aptly-tool package.

HTTP calls are mocked with respx; routes are registered with full URLs so
paths containing ``:`` (publish prefixes) match exactly.
"""

import logging
from datetime import datetime
from typing import Any, Dict, List

import httpx
import pytest
import respx

from aptly_tool.models.aptly_api import LocalRepoResponse, PublishedRepoResponse
from aptly_tool.models.settings import AptlySettings

API_URL = "http://aptly.test/api"

PACKAGE_NAME = "php-pdo-sqlsrv_5.10.1-1_amd64.deb"


class FakeRepositoryDirectory:
    """In-memory RepositoryDirectory recording how often it was queried."""

    def __init__(self, repos: List[Dict[str, Any]], published: List[Dict[str, Any]]) -> None:
        self.repos = [LocalRepoResponse.model_validate(repo) for repo in repos]
        self.published = [PublishedRepoResponse.model_validate(item) for item in published]
        self.calls: List[str] = []

    def list_repos(self) -> List[LocalRepoResponse]:
        self.calls.append("list_repos")
        return list(self.repos)

    def list_publish_endpoints(self) -> List[PublishedRepoResponse]:
        self.calls.append("list_publish_endpoints")
        return list(self.published)


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo handler changes made by setup_logging during CLI invocations."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def api_url():
    """aptly API root used by every test."""
    return API_URL


@pytest.fixture
def settings():
    """Settings pointing at the mocked aptly API."""
    return AptlySettings(api_url=API_URL, timeout=5)


@pytest.fixture
def httpx_mock():
    """Provide respx mock for HTTP mocking."""
    with respx.mock(assert_all_called=False) as mock:
        yield mock


@pytest.fixture
def aptly_client(settings, httpx_mock):
    """Real AptlyClient whose HTTP traffic goes to respx."""
    from aptly_tool.api import AptlyClient

    client = AptlyClient(settings)
    yield client
    client.close()


@pytest.fixture
def repos_payload():
    """``GET /repos`` response body."""
    return [
        {"Name": "ubuntu-bionic", "Comment": "", "DefaultDistribution": "bionic", "DefaultComponent": "main"},
        {"Name": "schoolbox-unstable-bionic", "Comment": "", "DefaultDistribution": "", "DefaultComponent": ""},
        {"Name": "upstream", "Comment": "3rd party cache", "DefaultDistribution": "", "DefaultComponent": ""},
    ]


@pytest.fixture
def publish_payload():
    """``GET /publish`` response body."""
    return [
        {
            "Storage": "s3:ubuntu",
            "Prefix": ".",
            "Distribution": "bionic",
            "SourceKind": "snapshot",
            "Sources": [{"Component": "main", "Name": "ubuntu-bionic-202301010000"}],
            "Architectures": ["amd64"],
        },
        {
            "Storage": "s3:schoolbox",
            "Prefix": ".",
            "Distribution": "unstable-bionic",
            "SourceKind": "snapshot",
            "Sources": [{"Component": "main", "Name": "schoolbox-unstable-bionic-202301010000"}],
            "Architectures": ["amd64"],
        },
        {
            "Storage": "s3:upstream",
            "Prefix": ".",
            "Distribution": "bionic",
            "SourceKind": "snapshot",
            "Sources": [],
            "Architectures": ["amd64"],
        },
    ]


@pytest.fixture
def directory(repos_payload, publish_payload):
    """In-memory repository directory built from the mock payloads."""
    return FakeRepositoryDirectory(repos_payload, publish_payload)


@pytest.fixture
def fixed_clock():
    """Clock returning 2024-01-01 00:00."""
    return lambda: datetime(2024, 1, 1, 0, 0)


@pytest.fixture
def deb_file(tmp_path):
    """A .deb package file on disk."""
    path = tmp_path / PACKAGE_NAME
    path.write_bytes(b"!<arch>\ndebian-binary   fake package content")
    return path


@pytest.fixture
def listing_routes(httpx_mock, repos_payload, publish_payload):
    """Register the two listing endpoints used during argument resolution."""
    return {
        "repos": httpx_mock.get(f"{API_URL}/repos").mock(return_value=httpx.Response(200, json=repos_payload)),
        "publish": httpx_mock.get(f"{API_URL}/publish").mock(return_value=httpx.Response(200, json=publish_payload)),
    }


@pytest.fixture
def pipeline_routes(httpx_mock):
    """Register successful responses for the four publish stages of ubuntu-bionic."""
    return {
        "upload": httpx_mock.post(f"{API_URL}/files/{PACKAGE_NAME}").mock(
            return_value=httpx.Response(200, json=[f"{PACKAGE_NAME}/{PACKAGE_NAME}"])
        ),
        "add": httpx_mock.post(f"{API_URL}/repos/ubuntu-bionic/file/{PACKAGE_NAME}").mock(
            return_value=httpx.Response(
                200,
                json={
                    "FailedFiles": [],
                    "Report": {"Warnings": [], "Added": ["php-pdo-sqlsrv_5.10.1-1_amd64 added"], "Removed": []},
                },
            )
        ),
        "snapshot": httpx_mock.post(f"{API_URL}/repos/ubuntu-bionic/snapshots").mock(
            return_value=httpx.Response(
                201,
                json={
                    "Name": "ubuntu-bionic-202401010000",
                    "CreatedAt": "2024-01-01T00:00:00Z",
                    "Description": "Snapshot from local repo [ubuntu-bionic]",
                },
            )
        ),
        "publish": httpx_mock.put(f"{API_URL}/publish/s3:ubuntu:/bionic").mock(
            return_value=httpx.Response(
                200,
                json={
                    "Storage": "s3:ubuntu",
                    "Prefix": ".",
                    "Distribution": "bionic",
                    "SourceKind": "snapshot",
                    "Sources": [{"Component": "main", "Name": "ubuntu-bionic-202401010000"}],
                },
            )
        ),
    }


@pytest.fixture
def temp_config_file(tmp_path):
    """Create a temporary TOML config file."""
    path = tmp_path / "config.toml"
    path.write_text(f'[aptly]\napi_url = "{API_URL}"\ntimeout = 30\n')
    return path
