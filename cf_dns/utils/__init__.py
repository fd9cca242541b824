"""
Utility functions and helpers.

This package contains input validation for record commands.
"""

from .validators import (
    normalize_record_type,
    validate_record_fields,
    validate_record_type,
)

__all__ = ["normalize_record_type", "validate_record_fields", "validate_record_type"]
