"""
==============================================================================
Validation Utilities Module
==============================================================================

Validation helpers for raw request input.

This module implements:
- parse_leading_int: Leading-integer parsing of path and query values
- RequiredFieldsValidator: Presence checks for product payloads

Presence Rules:
--------------
A required field is missing when it is:
- absent from the payload
- null
- an empty or whitespace-only string

Falsy but meaningful values such as ``0`` or ``False`` count as present.

==============================================================================
"""

from __future__ import annotations

import re
from typing import Any, Iterable, List, Mapping, Optional, Tuple


_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)")


def parse_leading_int(value: Any) -> Optional[int]:
    """
    Parse the leading integer of a value.

    Example:
        >>> parse_leading_int("12abc")
        12
        >>> parse_leading_int("abc") is None
        True

    Args:
        value: Raw value (usually a path or query string)

    Returns:
        Parsed integer, or None when no leading integer exists
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value

    match = _LEADING_INT.match(str(value))
    if not match:
        return None
    return int(match.group(1))


class RequiredFieldsValidator:
    """
    Validator for required product fields.

    Example:
        >>> validator = RequiredFieldsValidator(["name", "gvtId"])
        >>> validator.validate({"name": "Alpha", "gvtId": 0})
        (True, [])
        >>> validator.validate({"name": " "})
        (False, ['name', 'gvtId'])
    """

    def __init__(self, fields: Iterable[str]) -> None:
        self._fields: Tuple[str, ...] = tuple(fields)

    @property
    def fields(self) -> Tuple[str, ...]:
        return self._fields

    @staticmethod
    def is_present(value: Any) -> bool:
        """Check that a single value counts as supplied."""
        if value is None:
            return False
        if isinstance(value, str) and not value.strip():
            return False
        return True

    def missing(self, payload: Mapping[str, Any]) -> List[str]:
        """List required fields that are missing, in declaration order."""
        return [
            field for field in self._fields
            if not self.is_present(payload.get(field))
        ]

    def validate(self, payload: Mapping[str, Any]) -> Tuple[bool, List[str]]:
        """
        Validate a payload.

        Returns:
            Tuple of (is_valid, missing_fields)
        """
        missing = self.missing(payload)
        return not missing, missing
