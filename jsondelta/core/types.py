from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple, Union

# A path segment is an object key or an array index.
Segment = Union[str, int]
Position = Tuple[int, int]


class Change(Enum):
    """
    Classification of one path when comparing document A against document B.

    ADDED_ON_LEFT: present only in A (reported as removed)
    ADDED_ON_RIGHT: present only in B (reported as added)
    CHANGED: present in both, structurally unequal
    UNCHANGED: present in both, structurally equal
    """

    ADDED_ON_LEFT = "removed"
    ADDED_ON_RIGHT = "added"
    CHANGED = "changed"
    UNCHANGED = "unchanged"


class ValueKind(Enum):
    """Kind of a parsed JSON value."""

    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"


@dataclass(frozen=True)
class DiffRecord:
    """One comparator result: a path and how it differs."""

    path: Tuple[Segment, ...]
    change: Change

    @property
    def segment(self) -> Optional[Segment]:
        return self.path[-1] if self.path else None

    @property
    def depth(self) -> int:
        return len(self.path)


@dataclass(frozen=True)
class KeyEntry:
    """
    A top-level member of the compared documents.

    Attributes:
        segment: Top-level key (or index for array roots); None for scalar roots
        change: Classification of the member
        position: (row, column) ordering key, (0, 0) when unresolved
        records: Nested records below a changed container, depth-first
    """

    segment: Optional[Segment]
    change: Change
    position: Position
    records: List[DiffRecord] = field(default_factory=list)


@dataclass(frozen=True)
class DiffReport:
    """
    Result of comparing two documents.

    Attributes:
        entries: Top-level entries in discovery order (A's keys, then B-only keys)
        size_a: Length of document A's raw text in bytes
        size_b: Length of document B's raw text in bytes
    """

    entries: List[KeyEntry]
    size_a: int = 0
    size_b: int = 0

    @property
    def ordered(self) -> List[KeyEntry]:
        """Entries stable-sorted by (row, column)."""
        return sorted(self.entries, key=lambda e: e.position)

    @property
    def changed_entries(self) -> List[KeyEntry]:
        return [e for e in self.entries if e.change is Change.CHANGED]

    @property
    def has_differences(self) -> bool:
        return any(e.change is not Change.UNCHANGED for e in self.entries)

    @property
    def length_order(self) -> str:
        if self.size_a < self.size_b:
            return "Less"
        if self.size_a > self.size_b:
            return "Greater"
        return "Equal"

    def counts(self) -> Dict[Change, int]:
        totals = {change: 0 for change in Change}
        for entry in self.entries:
            totals[entry.change] += 1
        return totals


@dataclass(frozen=True)
class DiffPolicy:
    """
    Configuration for a document comparison.

    Attributes:
        include_unchanged: If True, nested trees also carry UNCHANGED records.
        position_source: Which raw text ("a" or "b") top-level keys are
            located in. Keys absent from that side get the sentinel position.
    """

    include_unchanged: bool = False
    position_source: str = "b"

    def __post_init__(self) -> None:
        if self.position_source not in ("a", "b"):
            raise ValueError(
                f"position_source must be 'a' or 'b', got {self.position_source!r}"
            )

    @classmethod
    def default(cls) -> "DiffPolicy":
        """Create default policy: differences only, positions from B."""
        return cls()

    @classmethod
    def verbose(cls) -> "DiffPolicy":
        """Create verbose policy - nested trees list unchanged members too."""
        return cls(include_unchanged=True)
