"""Pytest fixtures for aws-adapters tests (moto-backed AWS resources)."""

import os

import pytest
from moto import mock_aws


@pytest.fixture(scope="function")
def aws_credentials():
    """Set fake AWS credentials for moto."""
    os.environ["AWS_ACCESS_KEY_ID"] = "testing"
    os.environ["AWS_SECRET_ACCESS_KEY"] = "testing"
    os.environ["AWS_SECURITY_TOKEN"] = "testing"
    os.environ["AWS_SESSION_TOKEN"] = "testing"
    os.environ["AWS_DEFAULT_REGION"] = "us-east-1"


@pytest.fixture
def moto_aws(aws_credentials):
    """Enable moto mock for S3, SQS, EventBridge."""
    with mock_aws():
        yield


@pytest.fixture
def sqs_queue(moto_aws):
    """Create an SQS queue and return its URL."""
    import boto3

    client = boto3.client("sqs", region_name="us-east-1")
    resp = client.create_queue(QueueName="test-queue")
    return resp["QueueUrl"]


@pytest.fixture
def s3_bucket(moto_aws):
    """Create the media bucket."""
    import boto3

    client = boto3.client("s3", region_name="us-east-1")
    client.create_bucket(Bucket="test-media-bucket")
    return "test-media-bucket"


@pytest.fixture
def event_bus(moto_aws):
    """Create a custom EventBridge bus and return its name."""
    import boto3

    client = boto3.client("events", region_name="us-east-1")
    client.create_event_bus(Name="test-dbox-bus")
    return "test-dbox-bus"
