"""Core types and logic for jsondelta."""

from .digest import stream_sha256_hex
from .document_diff import diff_documents
from .json_diff import compare, json_diff
from .position import SENTINEL_POSITION, locate, locate_or_sentinel
from .types import (
    Change,
    DiffPolicy,
    DiffRecord,
    DiffReport,
    KeyEntry,
    Position,
    Segment,
    ValueKind,
)
from .values import (
    is_container,
    iter_members,
    kind_of,
    same_container_kind,
    values_equal,
)

__all__ = [
    # Core types
    "Change",
    "DiffPolicy",
    "DiffRecord",
    "DiffReport",
    "KeyEntry",
    "Position",
    "Segment",
    "ValueKind",
    # Digests
    "stream_sha256_hex",
    # Value comparison
    "compare",
    "json_diff",
    "is_container",
    "iter_members",
    "kind_of",
    "same_container_kind",
    "values_equal",
    # Positions
    "SENTINEL_POSITION",
    "locate",
    "locate_or_sentinel",
    # Top-level diff
    "diff_documents",
]
