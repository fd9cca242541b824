"""
Validators - Input checks for DNS record commands

Record content is passed to the provider as typed; only the presence of a
type, name and content is checked here, plus the shape of the type.
"""

import logging
import re

logger = logging.getLogger(__name__)

RECORD_TYPE_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9]*$")


def normalize_record_type(record_type: str) -> str:
    """Return the record type in the upper-case form providers expect."""
    return record_type.strip().upper()


def validate_record_type(record_type: str) -> bool:
    """
    Validate a DNS record type such as A, AAAA, CNAME or TXT.

    Args:
        record_type: The record type to validate

    Returns:
        True if valid, False otherwise
    """
    if not record_type or not isinstance(record_type, str):
        return False

    if not RECORD_TYPE_PATTERN.match(record_type.strip()):
        logger.warning(f"Invalid DNS record type: {record_type}")
        return False

    return True


def validate_record_fields(record_type: str, name: str, content: str = None) -> bool:
    """
    Check that the fields of a record are present.

    Args:
        record_type: Record type
        name: Record name
        content: Record content; not checked when None

    Returns:
        True if all given fields are present, False otherwise
    """
    if not validate_record_type(record_type):
        return False

    if not name or not name.strip():
        logger.warning("DNS record name is empty")
        return False

    if content is not None and not content.strip():
        logger.warning(f"DNS record content is empty for {name}")
        return False

    return True
