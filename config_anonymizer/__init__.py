"""
Config Anonymizer - Redaction of AWS Config Configuration Items

This package turns a Configuration Item document (a JSON object, or an array
of them) into a structurally identical document with identifying fields
(account IDs, names, resource IDs, ARNs, tags) replaced by fixed placeholders,
so the result can be shared in bug reports or used as a test fixture.

Architecture:
    - ConfigItemAnonymizer: recursive walker applying the field rules
    - rules: placeholder values and the exact-key rule table
    - arn: ARN detection and redaction (botocore's ArnParser)
    - cli: command-line shell (file in, JSON out)

Example:
    from config_anonymizer import anonymize

    anonymize({"accountId": "123456789012", "resourceName": "prod-db"})
    # {"accountId": "000000000000", "resourceName": "REDACTED_NAME"}
"""

from .arn import is_arn, redact_arn
from .engine import ConfigItemAnonymizer, anonymize, get_default_anonymizer

__all__ = [
    "ConfigItemAnonymizer",
    "anonymize",
    "get_default_anonymizer",
    "is_arn",
    "redact_arn",
]
