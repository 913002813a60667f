"""Parsing utilities for identifiers and node results."""

import re

from typing import Any

from block_explorer.helpers.constants import HASH_HEX_LENGTH


_HASH_PATTERN = re.compile(rf"[0-9a-fA-F]{{{HASH_HEX_LENGTH}}}")


class IdentifierValidationError(ValueError):
    """Raised when a caller-supplied identifier has invalid syntax."""


def _parse_hash(value: str, kind: str) -> str:
    if not isinstance(value, str) or not _HASH_PATTERN.fullmatch(value):
        msg = f"Invalid {kind}: expected {HASH_HEX_LENGTH} hex characters"
        raise IdentifierValidationError(msg)
    return value.lower()


def parse_block_hash(value: str) -> str:
    """Validate and normalize a block hash.

    Args:
        value: Block hash as supplied by the caller

    Returns:
        str: Lowercase hex block hash

    Raises:
        IdentifierValidationError: If value is not 64 hex characters

    Example:
        >>> parse_block_hash("00" * 32)
        '0000000000000000000000000000000000000000000000000000000000000000'
    """
    return _parse_hash(value, "block hash")


def parse_txid(value: str) -> str:
    """Validate and normalize a transaction id.

    Args:
        value: Transaction id as supplied by the caller

    Returns:
        str: Lowercase hex transaction id

    Raises:
        IdentifierValidationError: If value is not 64 hex characters
    """
    return _parse_hash(value, "transaction id")


def parse_block_count(value: Any) -> int:
    """Parse a ``getblockcount`` result.

    Args:
        value: Raw JSON result from the node

    Returns:
        int: Chain height

    Raises:
        ValueError: If value is not a non-negative integer

    Example:
        >>> parse_block_count(840000)
        840000
    """
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        msg = f"Block count is not a non-negative integer: {value!r}"
        raise ValueError(msg)
    return value


__all__ = [
    "IdentifierValidationError",
    "parse_block_count",
    "parse_block_hash",
    "parse_txid",
]
