"""
Pytest fixtures for testing.

Provides a mocked Azure Blob Storage service chain, blob listing helpers and
a clean environment for settings tests.
"""

from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock, Mock

import pytest

from report_sync.services.blob_storage import BlobStorageClient

TEST_CONNECTION_STRING = (
    "DefaultEndpointsProtocol=https;AccountName=teststorage;"
    "AccountKey=dGVzdGtleQ==;EndpointSuffix=core.windows.net"
)
TEST_CONTAINER = "reports"

SETTINGS_ENV_VARS = [
    "STORAGE_CONNECTION_STRING",
    "REPORTS_CONTAINER_NAME",
    "REPORTS_DIRECTORY",
    "REPORTS_FAIL_ON_DOWNLOAD_ERROR",
    "LOG_LEVEL",
]

T0 = datetime(2024, 1, 1, tzinfo=timezone.utc)


def make_blob(name, last_modified):
    """Build a listing entry shaped like azure.storage.blob.BlobProperties."""
    blob = Mock()
    # Mock(name=...) names the mock itself, so set the attribute afterwards
    blob.name = name
    blob.last_modified = last_modified
    return blob


def minutes(n):
    return T0 + timedelta(minutes=n)


@pytest.fixture(autouse=True)
def clean_settings_env(monkeypatch):
    """Keep settings variables of the developer shell out of the tests."""
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def mock_blob_service():
    """
    Mocked BlobServiceClient.

    list_blobs() returns an empty listing and download_blob() streams
    b"mock data" until a test overrides them.
    """
    mock_service = MagicMock()
    mock_container = MagicMock()
    mock_blob_client = MagicMock()

    mock_service.get_container_client.return_value = mock_container
    mock_service.get_blob_client.return_value = mock_blob_client
    mock_container.list_blobs.return_value = []
    mock_blob_client.download_blob.return_value.readinto.side_effect = (
        lambda stream: stream.write(b"mock data")
    )

    return mock_service


@pytest.fixture
def storage_client(mock_blob_service):
    """BlobStorageClient wired to the mocked service client."""
    client = BlobStorageClient(TEST_CONNECTION_STRING)
    client._client = mock_blob_service
    return client


@pytest.fixture
def reports_dir(tmp_path):
    """Reports directory that does not exist yet."""
    return tmp_path / "reports"


def set_listing(mock_blob_service, blobs):
    mock_blob_service.get_container_client.return_value.list_blobs.return_value = blobs


def set_content(mock_blob_service, content):
    mock_blob_service.get_blob_client.return_value.download_blob.return_value.readinto.side_effect = (
        lambda stream: stream.write(content)
    )
