"""
==============================================================================
Utilities Package
==============================================================================

Utility classes and functions for the application.

Modules:
--------
- validators: Leading-integer parsing and required-field checks

==============================================================================
"""

from .validators import RequiredFieldsValidator, parse_leading_int

__all__ = [
    "RequiredFieldsValidator",
    "parse_leading_int",
]
