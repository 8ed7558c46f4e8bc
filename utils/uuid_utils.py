"""UUID parsing for ids handed in by callers."""

from __future__ import annotations

import uuid
from typing import Optional, Union


def parse_uuid(value: Union[str, uuid.UUID, None]) -> Optional[uuid.UUID]:
    """Parse a primary-key id.

    Returns:
        The UUID, or None when the value is empty or malformed.

    Examples:
        >>> parse_uuid("fc5d5ffb-36cc-4c8d-a288-f5215af7fb80")
        UUID('fc5d5ffb-36cc-4c8d-a288-f5215af7fb80')
        >>> parse_uuid("not-an-id") is None
        True
    """
    if value is None:
        return None
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value).strip())
    except ValueError:
        return None


__all__ = ["parse_uuid"]
