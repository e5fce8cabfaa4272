"""Identifier checks for values bound to uuid primary keys."""

import uuid


def is_uuid(value: str | None) -> bool:
    """Whether value parses as a UUID (any version, any accepted spelling).

    The hosted tables key rows by uuid; asyncpg rejects anything else bound
    to those columns, so callers check before querying.
    """
    if not value:
        return False
    try:
        uuid.UUID(value)
    except (ValueError, TypeError, AttributeError):
        return False
    return True
