"""
ConfigItemAnonymizer - Recursive anonymizer for AWS Config Configuration Items.

The anonymizer walks an arbitrary JSON value (as produced by json.loads) and:
1. Replaces ARN strings with a redacted ARN (account ID and resource removed)
2. Applies key-driven rules to objects (names, account IDs, tags, ...)
3. Recurses into nested objects and arrays, preserving document shape

It is total: any JSON value is accepted and no exception is raised for
malformed or unexpected substructures. Inputs are never mutated.
"""

import logging
from typing import Any, Optional

from .arn import is_arn, redact_arn
from .rules import (
    ACCOUNT_ID_PLACEHOLDER,
    ARN_PLACEHOLDER,
    CONFIGURATION_PLACEHOLDER,
    FIELD_RULES,
    NAME_PLACEHOLDER,
    RESOURCE_ID_PLACEHOLDER,
    RESOURCE_NAME_PLACEHOLDER,
    TAGS_PLACEHOLDER,
    FieldAction,
    is_name_key,
)

logger = logging.getLogger(__name__)


class ConfigItemAnonymizer:
    """
    Anonymizer for Configuration Item documents.

    Example:
        anonymizer = ConfigItemAnonymizer()

        anonymizer.anonymize({"accountId": "123456789012", "tags": {"Env": "prod"}})
        # {"accountId": "000000000000", "tags": {"REDACTED": "REDACTED"}}

        anonymizer.anonymize([{"resourceName": "db-1"}, {"resourceName": "db-2"}])
        # [{"resourceName": "REDACTED_NAME"}, {"resourceName": "REDACTED_NAME"}]

    The walk uses an explicit work stack rather than recursion, so document
    depth is limited by memory only.

    Thread Safety:
        The anonymizer holds no mutable state and can be shared freely.
    """

    def anonymize(self, value: Any) -> Any:
        """
        Anonymize any JSON value.

        Arrays are anonymized element by element, objects go through the
        field rules (see anonymize_map), ARN strings are redacted and every
        other scalar is returned unchanged.
        """
        return self._walk(value)

    def anonymize_map(self, item: dict[str, Any]) -> dict[str, Any]:
        """
        Apply the field rules to every key of an object.

        The output has exactly the same keys as the input.
        """
        return self._walk(item)

    def _walk(self, value: Any) -> Any:
        # Each entry is (input value, output container, slot in that container).
        # Containers are created before their children are filled in.
        root = [None]
        stack = [(value, root, 0)]
        while stack:
            value, container, slot = stack.pop()
            if isinstance(value, dict):
                redacted = {}
                container[slot] = redacted
                for key, field_value in value.items():
                    self._anonymize_field(key, field_value, redacted, stack)
            elif isinstance(value, list):
                items = [None] * len(value)
                container[slot] = items
                stack.extend((item, items, index) for index, item in enumerate(value))
            elif isinstance(value, str) and is_arn(value):
                container[slot] = redact_arn(value)
            else:
                container[slot] = value
        return root[0]

    def _anonymize_field(self, key: str, value: Any, redacted: dict[str, Any], stack: list) -> None:
        lower_key = key.lower()

        # ARN values are redacted before the key rules run; a key rule may
        # still override the result.
        if isinstance(value, str) and is_arn(value):
            value = redact_arn(value)

        if is_name_key(lower_key):
            redacted[key] = NAME_PLACEHOLDER
            return

        action = FIELD_RULES.get(lower_key)

        if action is FieldAction.ACCOUNT_ID:
            redacted[key] = ACCOUNT_ID_PLACEHOLDER
        elif action is FieldAction.RESOURCE_ID:
            redacted[key] = RESOURCE_ID_PLACEHOLDER
        elif action is FieldAction.RESOURCE_NAME:
            redacted[key] = RESOURCE_NAME_PLACEHOLDER
        elif action is FieldAction.ARN:
            redacted[key] = ARN_PLACEHOLDER
        elif action is FieldAction.TAGS:
            redacted[key] = dict(TAGS_PLACEHOLDER)
        elif action is FieldAction.CONFIGURATION:
            if isinstance(value, dict):
                redacted[key] = None
                stack.append((value, redacted, key))
            else:
                redacted[key] = CONFIGURATION_PLACEHOLDER
        elif action is FieldAction.RELATIONSHIPS:
            redacted[key] = self._anonymize_relationships(value, stack)
        elif isinstance(value, (dict, list)):
            redacted[key] = None
            stack.append((value, redacted, key))
        else:
            redacted[key] = value

    def _anonymize_relationships(self, value: Any, stack: list) -> Any:
        # Only object elements are rewritten; anything else is kept as is.
        if not isinstance(value, list):
            return value
        items = list(value)
        for index, element in enumerate(value):
            if isinstance(element, dict):
                stack.append((element, items, index))
        return items




# Shared instance for convenience
_default_anonymizer: Optional[ConfigItemAnonymizer] = None


def get_default_anonymizer() -> ConfigItemAnonymizer:
    """
    Get the shared ConfigItemAnonymizer instance.

    The anonymizer is stateless, so one instance serves every caller.
    """
    global _default_anonymizer
    if _default_anonymizer is None:
        _default_anonymizer = ConfigItemAnonymizer()
    return _default_anonymizer


def anonymize(value: Any) -> Any:
    """Anonymize a JSON value with the shared anonymizer."""
    return get_default_anonymizer().anonymize(value)
