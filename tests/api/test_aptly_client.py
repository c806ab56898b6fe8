"""Tests for AptlyClient and its API mixins."""

import json
import logging

import httpx
import pytest

from aptly_tool.api import AptlyClient
from aptly_tool.models.settings import AptlySettings

API_URL = "http://aptly.test/api"

PACKAGE_NAME = "php-pdo-sqlsrv_5.10.1-1_amd64.deb"


class TestAptlyClientInit:
    """Test AptlyClient initialization."""

    def test_init(self, settings):
        """Test client attributes come from settings."""
        client = AptlyClient(settings)

        assert client.base_url == API_URL
        assert client.timeout == 5
        assert client.session.auth is None
        client.close()

    def test_init_with_basic_auth(self):
        """Test that configured credentials enable basic auth."""
        client = AptlyClient(AptlySettings(api_url=API_URL, username="ci", password="secret"))

        assert isinstance(client.session.auth, httpx.BasicAuth)
        client.close()

    def test_url(self, aptly_client):
        """Test URL building."""
        assert aptly_client._url("repos") == f"{API_URL}/repos"
        assert aptly_client._url("/publish") == f"{API_URL}/publish"

    def test_context_manager(self, settings):
        """Test that the session is closed on exit."""
        with AptlyClient(settings) as client:
            session = client.session

        assert session.is_closed

    def test_create_from_config_file(self, temp_config_file):
        """Test creating a client from a config file."""
        client = AptlyClient.create_from_config_file(str(temp_config_file))

        assert client.base_url == API_URL
        assert client.timeout == 30
        client.close()

    def test_create_from_config_file_override(self, temp_config_file):
        """Test that overrides take precedence over the file."""
        client = AptlyClient.create_from_config_file(str(temp_config_file), api_url="http://other.test/api")

        assert client.base_url == "http://other.test/api"
        client.close()


class TestCheckResponse:
    """Test check_response."""

    def test_success(self, aptly_client):
        """Test that 2xx responses pass."""
        request = httpx.Request("GET", f"{API_URL}/repos")
        aptly_client.check_response(httpx.Response(201, request=request), "list")

    def test_client_error(self, aptly_client):
        """Test that 4xx responses raise with the body in the message."""
        request = httpx.Request("POST", f"{API_URL}/repos/ubuntu-bionic/snapshots")
        response = httpx.Response(400, request=request, text="snapshot with name already exists\n")

        with pytest.raises(httpx.HTTPStatusError) as exc_info:
            aptly_client.check_response(response, "create snapshot")

        assert str(exc_info.value) == "Failed to create snapshot: 400 - snapshot with name already exists"
        assert exc_info.value.response.status_code == 400

    def test_server_error_dump_redacts_passphrase(self, aptly_client, caplog):
        """Test that the 5xx request dump never shows the passphrase."""
        body = {"Signing": {"Passphrase": "hunter2", "Batch": True}, "Snapshots": []}
        request = httpx.Request("PUT", f"{API_URL}/publish/s3:ubuntu:/bionic", json=body)
        response = httpx.Response(500, request=request, text="gpg failed")

        with pytest.raises(httpx.HTTPStatusError):
            aptly_client.check_response(response, "publish")

        assert "SERVER ERROR (500) during publish" in caplog.text
        assert "hunter2" not in caplog.text
        assert "[REDACTED]" in caplog.text


class TestListings:
    """Test the repository directory listings."""

    def test_list_repos(self, aptly_client, listing_routes):
        """Test GET /repos."""
        repos = aptly_client.list_repos()

        assert [repo.name for repo in repos] == ["ubuntu-bionic", "schoolbox-unstable-bionic", "upstream"]
        assert repos[0].default_distribution == "bionic"
        assert listing_routes["repos"].call_count == 1

    def test_list_publish_endpoints(self, aptly_client, listing_routes):
        """Test GET /publish."""
        endpoints = aptly_client.list_publish_endpoints()

        assert [(e.storage, e.distribution) for e in endpoints] == [
            ("s3:ubuntu", "bionic"),
            ("s3:schoolbox", "unstable-bionic"),
            ("s3:upstream", "bionic"),
        ]
        assert endpoints[0].sources[0].name == "ubuntu-bionic-202301010000"

    def test_list_repos_error(self, aptly_client, httpx_mock):
        """Test that a failed listing raises."""
        httpx_mock.get(f"{API_URL}/repos").mock(return_value=httpx.Response(401, text="unauthorized"))

        with pytest.raises(httpx.HTTPStatusError):
            aptly_client.list_repos()


class TestUpload:
    """Test FileManagerMixin.upload_file."""

    def test_upload_file(self, aptly_client, httpx_mock, deb_file):
        """Test multipart upload to the per-package directory."""
        captured = {}

        def handler(request):
            captured["content_type"] = request.headers["content-type"]
            captured["body"] = request.read()
            return httpx.Response(200, json=[f"{PACKAGE_NAME}/{PACKAGE_NAME}"])

        route = httpx_mock.post(f"{API_URL}/files/{PACKAGE_NAME}").mock(side_effect=handler)

        stored = aptly_client.upload_file(PACKAGE_NAME, str(deb_file))

        assert stored == [f"{PACKAGE_NAME}/{PACKAGE_NAME}"]
        assert route.called
        assert captured["content_type"].startswith("multipart/form-data")
        assert b'name="file"' in captured["body"]
        assert f'filename="{PACKAGE_NAME}"'.encode() in captured["body"]
        assert b"fake package content" in captured["body"]

    def test_upload_file_failure(self, aptly_client, httpx_mock, deb_file):
        """Test that a rejected upload raises."""
        httpx_mock.post(f"{API_URL}/files/{PACKAGE_NAME}").mock(return_value=httpx.Response(500, text="disk full"))

        with pytest.raises(httpx.HTTPStatusError, match="500 - disk full"):
            aptly_client.upload_file(PACKAGE_NAME, str(deb_file))

    def test_upload_file_plain_text_answer(self, aptly_client, httpx_mock, deb_file):
        """Test that a 200 with a non-JSON body still counts as uploaded."""
        httpx_mock.post(f"{API_URL}/files/{PACKAGE_NAME}").mock(return_value=httpx.Response(200, text="uploaded"))

        assert aptly_client.upload_file(PACKAGE_NAME, str(deb_file)) == []

    def test_upload_missing_file(self, aptly_client, tmp_path):
        """Test that a vanished package file raises OSError."""
        with pytest.raises(OSError):
            aptly_client.upload_file(PACKAGE_NAME, str(tmp_path / PACKAGE_NAME))


class TestRepositoryOperations:
    """Test RepositoryManagerMixin operations."""

    def test_add_uploaded_files(self, aptly_client, pipeline_routes, caplog):
        """Test POST /repos/{name}/file/{dir}."""
        with caplog.at_level(logging.INFO):
            report = aptly_client.add_uploaded_files("ubuntu-bionic", PACKAGE_NAME)

        assert not report.has_failures
        assert report.report.added == ["php-pdo-sqlsrv_5.10.1-1_amd64 added"]
        assert pipeline_routes["add"].called
        assert "aptly: php-pdo-sqlsrv_5.10.1-1_amd64 added" in caplog.text

    def test_add_uploaded_files_with_failures(self, aptly_client, httpx_mock, caplog):
        """Test that refused files are logged but do not raise."""
        httpx_mock.post(f"{API_URL}/repos/ubuntu-bionic/file/{PACKAGE_NAME}").mock(
            return_value=httpx.Response(
                200,
                json={"FailedFiles": ["/aptly/upload/bad.deb"], "Report": {"Warnings": ["bad.deb: not a package"]}},
            )
        )

        report = aptly_client.add_uploaded_files("ubuntu-bionic", PACKAGE_NAME)

        assert report.has_failures
        assert "aptly failed to add file: /aptly/upload/bad.deb" in caplog.text
        assert f"aptly refused 1 file(s) from {PACKAGE_NAME}" in caplog.text
        assert "bad.deb: not a package" in caplog.text

    def test_add_uploaded_files_plain_text_answer(self, aptly_client, httpx_mock):
        """Test that a 200 with a non-JSON body is an empty report, not an error."""
        httpx_mock.post(f"{API_URL}/repos/ubuntu-bionic/file/{PACKAGE_NAME}").mock(
            return_value=httpx.Response(200, text="OK")
        )

        report = aptly_client.add_uploaded_files("ubuntu-bionic", PACKAGE_NAME)

        assert not report.has_failures
        assert report.report.added == []

    def test_create_snapshot_empty_answer(self, aptly_client, httpx_mock):
        """Test that a 201 without a snapshot body returns None."""
        httpx_mock.post(f"{API_URL}/repos/ubuntu-bionic/snapshots").mock(return_value=httpx.Response(201))

        assert aptly_client.create_snapshot("ubuntu-bionic", "ubuntu-bionic-202401010000") is None

    def test_create_snapshot(self, aptly_client, httpx_mock):
        """Test POST /repos/{name}/snapshots sends the snapshot name."""
        captured = {}

        def handler(request):
            captured["body"] = json.loads(request.read())
            return httpx.Response(201, json={"Name": "ubuntu-bionic-202401010000"})

        httpx_mock.post(f"{API_URL}/repos/ubuntu-bionic/snapshots").mock(side_effect=handler)

        snapshot = aptly_client.create_snapshot("ubuntu-bionic", "ubuntu-bionic-202401010000")

        assert snapshot.name == "ubuntu-bionic-202401010000"
        assert captured["body"] == {"Name": "ubuntu-bionic-202401010000"}

    def test_create_snapshot_name_taken(self, aptly_client, httpx_mock):
        """Test that aptly refusing a duplicate snapshot name raises."""
        httpx_mock.post(f"{API_URL}/repos/ubuntu-bionic/snapshots").mock(
            return_value=httpx.Response(400, json={"error": "snapshot with name already exists"})
        )

        with pytest.raises(httpx.HTTPStatusError):
            aptly_client.create_snapshot("ubuntu-bionic", "ubuntu-bionic-202401010000")


class TestPublishOperations:
    """Test PublishManagerMixin operations."""

    def test_switch_published_snapshot(self, aptly_client, httpx_mock):
        """Test PUT /publish/{prefix}:/{distribution} request body."""
        captured = {}

        def handler(request):
            captured["body"] = json.loads(request.read())
            return httpx.Response(200, json={"Storage": "s3:ubuntu", "Distribution": "bionic"})

        httpx_mock.put(f"{API_URL}/publish/s3:ubuntu:/bionic").mock(side_effect=handler)

        published = aptly_client.switch_published_snapshot(
            "s3:ubuntu", "bionic", "ubuntu-bionic-202401010000", "hunter2"
        )

        assert published.storage == "s3:ubuntu"
        assert captured["body"] == {
            "Signing": {"Passphrase": "hunter2", "Batch": True},
            "Snapshots": [{"Component": "main", "Name": "ubuntu-bionic-202401010000"}],
        }

    def test_switch_published_snapshot_component(self, aptly_client, httpx_mock):
        """Test publishing under another component."""
        captured = {}

        def handler(request):
            captured["body"] = json.loads(request.read())
            return httpx.Response(200, json={})

        httpx_mock.put(f"{API_URL}/publish/s3:schoolbox:/unstable-bionic").mock(side_effect=handler)

        aptly_client.switch_published_snapshot(
            "s3:schoolbox", "unstable-bionic", "snap", "secret", component="contrib"
        )

        assert captured["body"]["Snapshots"] == [{"Component": "contrib", "Name": "snap"}]

    def test_switch_published_snapshot_failure(self, aptly_client, httpx_mock):
        """Test that a failed publish raises."""
        httpx_mock.put(f"{API_URL}/publish/s3:ubuntu:/bionic").mock(
            return_value=httpx.Response(404, json={"error": "published repo not found"})
        )

        with pytest.raises(httpx.HTTPStatusError) as exc_info:
            aptly_client.switch_published_snapshot("s3:ubuntu", "bionic", "snap", "secret")

        assert exc_info.value.response.status_code == 404
