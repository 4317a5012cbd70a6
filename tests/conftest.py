"""Test configuration and fixtures for bucketfs."""

import boto3
import pytest
from moto import mock_aws

from bucketfs.core.events import MemorySink
from fakes import InMemoryStore


@pytest.fixture
def sink():
    """In-memory event sink."""
    return MemorySink()


@pytest.fixture
def memory_store():
    """Small bucket with nested folders."""
    return InMemoryStore(
        [
            "docs/readme.txt",
            "photos/beach.jpg",
            "photos/trip/day1.jpg",
            "photos/trip/day2.jpg",
            "photos/trip/raw/day1.cr2",
            "root.txt",
        ]
    )


@pytest.fixture
def aws_credentials(monkeypatch):
    """Fake credentials so boto3 never reaches a real account."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")


@pytest.fixture
def s3_client(aws_credentials):
    """Mocked S3 client with an empty ``test-bucket``."""
    with mock_aws():
        client = boto3.client("s3", region_name="us-east-1")
        client.create_bucket(Bucket="test-bucket")
        yield client
