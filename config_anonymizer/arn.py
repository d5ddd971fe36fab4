"""
ARN helpers built on botocore's ArnParser.

An ARN has the form ``arn:partition:service:region:account-id:resource``.
Redaction keeps partition, service and region and replaces the account ID
and the resource.
"""

import logging

from botocore.utils import ArnParser

from .rules import ACCOUNT_ID_PLACEHOLDER, ARN_PLACEHOLDER, ARN_RESOURCE_PLACEHOLDER

logger = logging.getLogger(__name__)

ARN_PREFIX = "arn:"
ARN_SECTIONS = 6

_parser = ArnParser()


def is_arn(value) -> bool:
    """Return True if value is a string shaped like an ARN."""
    if not isinstance(value, str) or not value.startswith(ARN_PREFIX):
        return False
    return value.count(":") >= ARN_SECTIONS - 1


def parse_arn(value: str) -> dict[str, str]:
    """
    Parse an ARN into its parts.

    Returns:
        A dict with partition, service, region, account and resource keys.

    Raises:
        ValueError: If value is not an ARN (botocore's InvalidArnException
                    is a ValueError).
    """
    if not isinstance(value, str) or not value.startswith(ARN_PREFIX):
        raise ValueError(f"Not an ARN: {value!r}")
    return _parser.parse_arn(value)


def format_arn(parts: dict[str, str]) -> str:
    """Serialize ARN parts back to canonical ARN text."""
    return ":".join([
        "arn",
        parts["partition"],
        parts["service"],
        parts["region"],
        parts["account"],
        parts["resource"],
    ])


def redact_arn(value: str) -> str:
    """
    Replace the account ID and resource of an ARN with placeholders.

    Never raises. Input that does not parse as an ARN becomes
    ``arn:aws:REDACTED``.

    Example:
        redact_arn("arn:aws:iam::123456789012:role/admin")
        # "arn:aws:iam::000000000000:REDACTED"
    """
    try:
        parts = parse_arn(value)
    except ValueError:
        logger.debug("Unparseable ARN replaced with placeholder")
        return ARN_PLACEHOLDER

    parts["account"] = ACCOUNT_ID_PLACEHOLDER
    parts["resource"] = ARN_RESOURCE_PLACEHOLDER
    return format_arn(parts)
