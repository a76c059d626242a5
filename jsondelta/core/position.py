"""Textual position lookup for top-level keys.

Positions only order the final listing; they never affect which paths are
reported as different. The lookup is a plain substring search for the
quoted key in the raw document text, so a quoted string value that happens
to equal the key can win over the real key if it comes first.

Convention: rows and columns are both 1-based. The column is the offset of
the opening quote within its line.
"""
from __future__ import annotations

import logging
from typing import Optional

from .types import Position

logger = logging.getLogger(__name__)

# Ordering key for keys that cannot be located; sorts before every real hit.
SENTINEL_POSITION: Position = (0, 0)


def locate(source_text: str, key: str) -> Optional[Position]:
    """Return the (row, column) of the first ``"key"`` in the text, or None."""
    offset = source_text.find(f'"{key}"')
    if offset < 0:
        return None
    row = source_text.count("\n", 0, offset) + 1
    column = offset - source_text.rfind("\n", 0, offset)
    return (row, column)


def locate_or_sentinel(source_text: str, key: str) -> Position:
    """locate(), falling back to SENTINEL_POSITION on a miss."""
    position = locate(source_text, key)
    if position is None:
        logger.debug("key %r not found in source text, using %s", key, SENTINEL_POSITION)
        return SENTINEL_POSITION
    return position
