"""
Pytest configuration and shared fixtures for AWS Config Anonymizer tests.

Uses moto and botocore's Stubber to fake AWS Config, so the MCP tools can be
tested without real AWS credentials.
"""

import os
import sys

import pytest

# Add parent directory to path for server imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


@pytest.fixture(autouse=True)
def set_aws_credentials():
    """
    Set mock AWS credentials for moto.
    This runs automatically before each test.
    """
    os.environ["AWS_ACCESS_KEY_ID"] = "testing"
    os.environ["AWS_SECRET_ACCESS_KEY"] = "testing"
    os.environ["AWS_REGION"] = "us-east-1"
    os.environ["AWS_DEFAULT_REGION"] = "us-east-1"
    yield


@pytest.fixture
def config_client():
    """Provide an AWS Config client (stub it before use)."""
    import boto3

    return boto3.client("config", region_name="us-east-1")


@pytest.fixture
def sample_configuration_item():
    """A Configuration Item shaped like the ones AWS Config delivers to S3."""
    return {
        "version": "1.3",
        "accountId": "123456789012",
        "configurationItemCaptureTime": "2024-05-01T12:00:00.000Z",
        "configurationItemStatus": "OK",
        "configurationStateId": "1714564800000",
        "arn": "arn:aws:ec2:us-east-1:123456789012:instance/i-0123456789abcdef0",
        "resourceType": "AWS::EC2::Instance",
        "resourceId": "i-0123456789abcdef0",
        "resourceName": "web-server-1",
        "awsRegion": "us-east-1",
        "availabilityZone": "us-east-1a",
        "tags": {"Env": "prod", "Owner": "alice"},
        "relatedEvents": [],
        "relationships": [
            {
                "resourceType": "AWS::EC2::SecurityGroup",
                "resourceId": "sg-0123456789abcdef0",
                "relationshipName": "Is associated with SecurityGroup",
            },
            {
                "resourceType": "AWS::IAM::Role",
                "resourceName": "web-role",
                "relationshipName": "Is attached to Role",
            },
        ],
        "configuration": {
            "instanceId": "i-0123456789abcdef0",
            "instanceType": "t3.micro",
            "iamInstanceProfile": {
                "arn": "arn:aws:iam::123456789012:instance-profile/web",
                "id": "AIPAEXAMPLE",
            },
            "keyName": "deploy-key",
            "subnetId": "subnet-0123",
            "monitoring": {"state": "disabled"},
            "blockDeviceMappings": [
                {"deviceName": "/dev/xvda", "ebs": {"volumeId": "vol-0123", "deleteOnTermination": True}},
            ],
            "ownerArn": "arn:aws:iam::123456789012:user/alice",
            "launchTime": 1714564800,
        },
        "supplementaryConfiguration": {},
    }
