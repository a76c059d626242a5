"""Recursive structural comparison of two JSON values.

Yields one DiffRecord per differing path, depth-first.

Ordering guarantees:
- dict: keys of the first value in insertion order, then keys only in the
  second value in its insertion order
- list: by index, up to the longer of the two lengths
- a changed container's own record precedes its children's records

Descent rules:
- recurse only when both sides are objects or both are arrays
- any other unequal pair (kind mismatch, scalar vs scalar) is a leaf change
- int vs float treated as the same numeric kind; bool is never a number
"""
from __future__ import annotations

from typing import Any, Iterator, List, Tuple

from .types import Change, DiffRecord, Segment
from .values import is_container, iter_members, same_container_kind, values_equal


def compare(
    a: Any,
    b: Any,
    path: Tuple[Segment, ...] = (),
    include_unchanged: bool = False,
) -> Iterator[DiffRecord]:
    """Lazily compare two JSON values.

    Args:
        a: Value from the first (older) document.
        b: Value from the second (newer) document.
        path: Segments leading to ``a``/``b``; prefixed onto every record.
        include_unchanged: Also yield UNCHANGED records for equal members.

    Yields:
        DiffRecord for each member present on one side only, each unequal
        member (followed by its nested records when it descends), and, when
        requested, each equal member.
    """
    if not is_container(a) and not is_container(b):
        if not values_equal(a, b):
            yield DiffRecord(path, Change.CHANGED)
        elif include_unchanged:
            yield DiffRecord(path, Change.UNCHANGED)
        return

    for segment, in_a, in_b, value_a, value_b in iter_members(a, b):
        child = path + (segment,)
        if in_a and not in_b:
            yield DiffRecord(child, Change.ADDED_ON_LEFT)
        elif in_b and not in_a:
            yield DiffRecord(child, Change.ADDED_ON_RIGHT)
        elif not values_equal(value_a, value_b):
            yield DiffRecord(child, Change.CHANGED)
            if same_container_kind(value_a, value_b):
                yield from compare(value_a, value_b, child, include_unchanged)
        elif include_unchanged:
            yield DiffRecord(child, Change.UNCHANGED)


def json_diff(a: Any, b: Any, include_unchanged: bool = False) -> List[DiffRecord]:
    """Eager form of compare(): all records from the root, as a list."""
    return list(compare(a, b, include_unchanged=include_unchanged))

