"""Well-known status tokens for a Payload.

These constants are the shared vocabulary between the domain layer (which
sets a status) and the presentation layer (which branches on it). Every
member's value is its own name, so a member compares equal to the bare
string a caller might have stored instead.
"""

from enum import StrEnum
from typing import Any


class PayloadStatus(StrEnum):
    """Outcome classification of a domain operation."""

    ACCEPTED = "ACCEPTED"
    AUTHENTICATED = "AUTHENTICATED"
    AUTHORIZED = "AUTHORIZED"
    CREATED = "CREATED"
    DELETED = "DELETED"
    ERROR = "ERROR"
    FAILURE = "FAILURE"
    FOUND = "FOUND"
    NOT_ACCEPTED = "NOT_ACCEPTED"
    NOT_AUTHENTICATED = "NOT_AUTHENTICATED"
    NOT_AUTHORIZED = "NOT_AUTHORIZED"
    NOT_CREATED = "NOT_CREATED"
    NOT_DELETED = "NOT_DELETED"
    NOT_FOUND = "NOT_FOUND"
    NOT_UPDATED = "NOT_UPDATED"
    NOT_VALID = "NOT_VALID"
    PROCESSING = "PROCESSING"
    SUCCESS = "SUCCESS"
    UPDATED = "UPDATED"
    VALID = "VALID"


_KNOWN_TOKENS = frozenset(member.value for member in PayloadStatus)


def is_known_status(value: Any) -> bool:
    """Return True if value is one of the well-known status tokens.

    Accepts members and plain strings alike. Anything else (None, numbers,
    unhashable values) is simply not a known token.
    """
    return isinstance(value, str) and value in _KNOWN_TOKENS
