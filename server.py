"""
AWS Config Anonymizer - MCP Server for sharing Configuration Items

A local MCP (Model Context Protocol) server that lets AI agents work with AWS
Config Configuration Items without leaking account IDs, resource names, or
ARNs. Every item returned by a tool has been through the anonymizer.

Tools:
    - anonymize_configuration_item: Anonymize a Configuration Item document
    - get_anonymized_config_history: Fetch and anonymize recent Configuration
      Items for a resource from AWS Config

Safety Constraints:
    - At most 10 Configuration Items per history request
    - The requested resource ID is never echoed back
"""

import json
import logging
import os
from datetime import datetime
from typing import Any, Union

import boto3
from botocore.exceptions import ClientError, NoCredentialsError
from dotenv import load_dotenv
from mcp.server.fastmcp import FastMCP

from config_anonymizer import anonymize

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)

# Initialize MCP server
mcp = FastMCP(
    "aws-config-anonymizer",
    instructions="MCP Server for retrieving and sharing anonymized AWS Config Configuration Items"
)

# Safety constants
MAX_HISTORY_ITEMS = 10


def get_config_client():
    """Create and return an AWS Config client using environment credentials."""
    return boto3.client(
        "config",
        aws_access_key_id=os.getenv("AWS_ACCESS_KEY_ID"),
        aws_secret_access_key=os.getenv("AWS_SECRET_ACCESS_KEY"),
        region_name=os.getenv("AWS_REGION", "us-east-1")
    )


def to_snapshot_item(item: dict[str, Any]) -> dict[str, Any]:
    """
    Convert a Configuration Item from the API shape to the delivered shape.

    The Config API returns "configuration" as a JSON-encoded string, while
    snapshots and notifications carry it as an object. Decoding it lets the
    anonymizer walk into it instead of replacing it wholesale. Datetimes are
    rendered as ISO-8601 strings.
    """
    converted = {}
    for key, value in item.items():
        if isinstance(value, datetime):
            value = value.isoformat()
        elif key == "configuration" and isinstance(value, str):
            try:
                value = json.loads(value)
            except ValueError:
                logger.debug("Configuration field is not JSON, keeping it as a string")
        converted[key] = value
    return converted


@mcp.tool()
def anonymize_configuration_item(document: Union[dict[str, Any], list[Any]]) -> dict[str, Any]:
    """
    Anonymize an AWS Config Configuration Item document.

    Account IDs, names, resource IDs, ARNs and tags are replaced by fixed
    placeholders. The document keeps its shape: same keys, same array lengths.

    Args:
        document: A Configuration Item object, or an array of them.

    Returns:
        A dictionary containing:
        - status: "success"
        - document: The anonymized document

    Example usage:
        anonymize_configuration_item({"accountId": "123456789012", "resourceName": "prod-db"})
    """
    return {
        "status": "success",
        "document": anonymize(document)
    }


@mcp.tool()
def get_anonymized_config_history(resource_type: str, resource_id: str, limit: int = 1) -> dict[str, Any]:
    """
    Fetch recent Configuration Items for a resource and anonymize them.

    Args:
        resource_type: The AWS Config resource type.
                       Example: "AWS::S3::Bucket" or "AWS::EC2::Instance"
        resource_id: The resource ID as known to AWS Config.
        limit: How many Configuration Items to return (1-10). Defaults to 1.

    Returns:
        A dictionary containing:
        - status: "success" or "error"
        - resource_type: The queried resource type
        - item_count: Number of Configuration Items returned
        - configuration_items: The anonymized Configuration Items, newest first

    Example usage:
        get_anonymized_config_history("AWS::S3::Bucket", "my-bucket")
        get_anonymized_config_history("AWS::EC2::Instance", "i-0123456789abcdef0", 5)
    """
    # Enforce safety limit
    if limit < 1:
        limit = 1
    if limit > MAX_HISTORY_ITEMS:
        limit = MAX_HISTORY_ITEMS

    try:
        client = get_config_client()

        response = client.get_resource_config_history(
            resourceType=resource_type,
            resourceId=resource_id,
            limit=limit
        )

        items = [to_snapshot_item(item) for item in response.get("configurationItems", [])]

        return {
            "status": "success",
            "resource_type": resource_type,
            "item_count": len(items),
            "configuration_items": anonymize(items)
        }

    except NoCredentialsError:
        return {
            "status": "error",
            "resource_type": resource_type,
            "message": "AWS credentials not found. Please set AWS_ACCESS_KEY_ID, AWS_SECRET_ACCESS_KEY, and AWS_REGION environment variables."
        }
    except ClientError as e:
        error_code = e.response.get("Error", {}).get("Code", "Unknown")
        return {
            "status": "error",
            "resource_type": resource_type,
            "message": f"AWS Error ({error_code})"
        }
    except Exception as e:
        logger.warning(f"Config history lookup failed: {type(e).__name__}")
        return {
            "status": "error",
            "resource_type": resource_type,
            "message": f"Unexpected error: {type(e).__name__}"
        }


if __name__ == "__main__":
    # Run the MCP server using stdio transport
    mcp.run()
