"""
Field Rules - Fixed redaction rules for Configuration Item keys.

Two kinds of rules are applied to every key of a JSON object:
    - Substring rule: any key containing "name" (case-insensitive) is replaced
      with NAME_PLACEHOLDER. This rule is checked first.
    - Exact-key rules: FIELD_RULES maps a lower-cased key to a FieldAction.

Note:
    "resourcename" is listed in FIELD_RULES but can never fire, because the
    substring rule intercepts every key containing "name" before the exact-key
    lookup. RESOURCE_NAME_PLACEHOLDER is therefore never emitted.
"""

from enum import Enum
from types import MappingProxyType

ACCOUNT_ID_PLACEHOLDER = "000000000000"
NAME_PLACEHOLDER = "REDACTED_NAME"
RESOURCE_ID_PLACEHOLDER = "REDACTED_RESOURCE_ID"
RESOURCE_NAME_PLACEHOLDER = "REDACTED_RESOURCE_NAME"
CONFIGURATION_PLACEHOLDER = "REDACTED_CONFIGURATION"
ARN_PLACEHOLDER = "arn:aws:REDACTED"
ARN_RESOURCE_PLACEHOLDER = "REDACTED"
TAGS_PLACEHOLDER = MappingProxyType({"REDACTED": "REDACTED"})

NAME_SUBSTRING = "name"


class FieldAction(Enum):
    """What to do with the value stored under a matched key."""
    ACCOUNT_ID = "account_id"
    RESOURCE_ID = "resource_id"
    RESOURCE_NAME = "resource_name"
    ARN = "arn"
    TAGS = "tags"
    CONFIGURATION = "configuration"
    RELATIONSHIPS = "relationships"


FIELD_RULES = MappingProxyType({
    "accountid": FieldAction.ACCOUNT_ID,
    "resourceid": FieldAction.RESOURCE_ID,
    "resourcename": FieldAction.RESOURCE_NAME,  # unreachable, see module docstring
    "arn": FieldAction.ARN,
    "tags": FieldAction.TAGS,
    "configuration": FieldAction.CONFIGURATION,
    "relationships": FieldAction.RELATIONSHIPS,
})


def is_name_key(lower_key: str) -> bool:
    """Return True if the (already lower-cased) key falls under the name rule."""
    return NAME_SUBSTRING in lower_key
