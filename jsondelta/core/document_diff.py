"""Top-level comparison of two parsed documents.

Classifies every top-level member of either document, attaches the nested
comparator records to changed containers, and gives each member a
(row, column) ordering key taken from the raw text of one document.

Algorithm:
1. Enumerate the union of top-level members (A's keys in order, then
   B-only keys; indices for array roots).
2. Classify each member: removed, added, unchanged or changed.
3. Changed members holding the same container kind on both sides get the
   full nested diff; any other change is a leaf.
4. Resolve positions against the configured source text. Members absent
   from that side, and array indices, take the sentinel without a lookup.
5. Report entries in discovery order; DiffReport.ordered gives the stable
   (row, column) sort.

Roots without members (two scalars, or an empty container against a
value of another kind) produce one root entry with segment None.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

from .json_diff import compare
from .position import SENTINEL_POSITION, locate_or_sentinel
from .types import (
    Change,
    DiffPolicy,
    DiffRecord,
    DiffReport,
    KeyEntry,
    Position,
    Segment,
)
from .values import is_container, iter_members, same_container_kind, values_equal

logger = logging.getLogger(__name__)


def diff_documents(
    root_a: Any,
    root_b: Any,
    text_a: str,
    text_b: str,
    policy: Optional[DiffPolicy] = None,
) -> DiffReport:
    """
    Compare two document roots and build the top-level report.

    Args:
        root_a: Parsed value of the first (older) document
        root_b: Parsed value of the second (newer) document
        text_a: Raw text of the first document
        text_b: Raw text of the second document
        policy: Comparison settings, DiffPolicy.default() when omitted

    Returns:
        DiffReport with one entry per top-level member of either root
    """
    policy = policy or DiffPolicy.default()
    source_text = text_a if policy.position_source == "a" else text_b

    entries: List[KeyEntry] = []
    for segment, in_a, in_b, value_a, value_b in iter_members(root_a, root_b):
        in_source = in_a if policy.position_source == "a" else in_b
        entries.append(
            _classify(
                segment,
                in_a,
                in_b,
                value_a,
                value_b,
                _position(source_text, segment, in_source),
                policy,
            )
        )

    # No members to report: scalar roots, or an empty container on one side
    if not entries:
        equal = values_equal(root_a, root_b)
        if not equal or not is_container(root_a):
            change = Change.UNCHANGED if equal else Change.CHANGED
            entries.append(KeyEntry(None, change, SENTINEL_POSITION))

    report = DiffReport(
        entries=entries,
        size_a=len(text_a.encode("utf-8")),
        size_b=len(text_b.encode("utf-8")),
    )
    logger.info(
        "compared %d top-level entries: %s",
        len(entries),
        ", ".join(f"{c.value}={n}" for c, n in report.counts().items()),
    )
    return report


def _classify(
    segment: Segment,
    in_a: bool,
    in_b: bool,
    value_a: Any,
    value_b: Any,
    position: Position,
    policy: DiffPolicy,
) -> KeyEntry:
    if in_a and not in_b:
        return KeyEntry(segment, Change.ADDED_ON_LEFT, position)
    if in_b and not in_a:
        return KeyEntry(segment, Change.ADDED_ON_RIGHT, position)
    if values_equal(value_a, value_b):
        return KeyEntry(segment, Change.UNCHANGED, position)

    records: List[DiffRecord] = []
    if same_container_kind(value_a, value_b):
        records = list(
            compare(value_a, value_b, (segment,), policy.include_unchanged)
        )
    return KeyEntry(segment, Change.CHANGED, position, records)


def _position(source_text: str, segment: Segment, in_source: bool) -> Position:
    if not in_source or not isinstance(segment, str):
        return SENTINEL_POSITION
    return locate_or_sentinel(source_text, segment)
