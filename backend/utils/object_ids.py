"""Helpers for validating and parsing MongoDB ObjectId strings.

Only syntax is checked here: a valid identifier is exactly 24 hexadecimal
characters. Whether a document with that identifier exists is up to the store.
"""

from bson import ObjectId
from bson.errors import InvalidId


class InvalidObjectIdError(ValueError):
    """Raised when a path identifier is not a syntactically valid ObjectId."""

    def __init__(self, value: object):
        super().__init__(f"Invalid ID format: {value!r}")
        self.value = value


def is_valid_object_id(value: object) -> bool:
    """Return True if value is a 24-character hexadecimal string.

    Args:
        value: Candidate identifier taken from a request path.

    Returns:
        bool: Whether the value can be turned into an ObjectId.
    """
    if not isinstance(value, str):
        return False
    return ObjectId.is_valid(value)


def parse_object_id(value: str) -> ObjectId:
    """Convert a path identifier into an ObjectId.

    Args:
        value: Identifier string from the request path.

    Returns:
        ObjectId: Parsed identifier.

    Raises:
        InvalidObjectIdError: If value is not a 24-character hex string.
    """
    if not is_valid_object_id(value):
        raise InvalidObjectIdError(value)
    try:
        return ObjectId(value)
    except (InvalidId, TypeError) as exc:
        raise InvalidObjectIdError(value) from exc


def id_filter(value: str) -> dict:
    """Build a strict `_id` filter, rejecting malformed identifiers."""
    return {"_id": parse_object_id(value)}


def lenient_id_filter(value: str) -> dict:
    """Build an `_id` filter that falls back to a literal string match.

    Valid ObjectId strings are matched as ObjectIds; anything else is matched
    against `_id` as the raw string.
    """
    if is_valid_object_id(value):
        return {"_id": ObjectId(value)}
    return {"_id": value}
