"""Kind tests and structural equality for parsed JSON values.

Values are the plain Python objects produced by ``json.loads``: dict, list,
str, int, float, bool and None. Nothing in this module mutates its inputs.

Equality is kind-sensitive: ``True`` never equals ``1``, an empty object
never equals an empty array. Integers and floats share the NUMBER kind and
compare by numeric value.
"""
from __future__ import annotations

from typing import Any, Iterator, Tuple

from .types import Segment, ValueKind

# (segment, in_a, in_b, value_a, value_b)
Member = Tuple[Segment, bool, bool, Any, Any]


def kind_of(value: Any) -> ValueKind:
    """Return the JSON kind of a parsed value."""
    # bool before int: bool subclasses int
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if value is None:
        return ValueKind.NULL
    if isinstance(value, dict):
        return ValueKind.OBJECT
    if isinstance(value, (list, tuple)):
        return ValueKind.ARRAY
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    raise TypeError(f"Unsupported JSON value type: {type(value)!r}")


def is_container(value: Any) -> bool:
    """True for objects and arrays."""
    return kind_of(value) in (ValueKind.OBJECT, ValueKind.ARRAY)


def same_container_kind(a: Any, b: Any) -> bool:
    """True when both values are objects or both are arrays."""
    kind = kind_of(a)
    return kind in (ValueKind.OBJECT, ValueKind.ARRAY) and kind is kind_of(b)


def values_equal(a: Any, b: Any) -> bool:
    """Deep structural equality, sensitive to value kind."""
    kind = kind_of(a)
    if kind is not kind_of(b):
        return False
    if kind is ValueKind.OBJECT:
        if len(a) != len(b):
            return False
        return all(key in b and values_equal(a[key], b[key]) for key in a)
    if kind is ValueKind.ARRAY:
        if len(a) != len(b):
            return False
        return all(values_equal(x, y) for x, y in zip(a, b))
    return a == b


def iter_members(a: Any, b: Any) -> Iterator[Member]:
    """
    Enumerate the members of two values in one deterministic union order.

    If either side is an object, its keys are enumerated: keys of ``a`` in
    insertion order, then keys only in ``b`` in ``b``'s insertion order. A
    non-object side contributes no keys.

    Otherwise, if either side is an array, indices ``0 .. max(len)`` are
    enumerated; a non-array side has length zero.

    Two scalars have no members.
    """
    a_kind = kind_of(a)
    b_kind = kind_of(b)

    if ValueKind.OBJECT in (a_kind, b_kind):
        left = a if a_kind is ValueKind.OBJECT else {}
        right = b if b_kind is ValueKind.OBJECT else {}
        for key in left:
            in_b = key in right
            yield key, True, in_b, left[key], right[key] if in_b else None
        for key in right:
            if key not in left:
                yield key, False, True, None, right[key]
        return

    if ValueKind.ARRAY in (a_kind, b_kind):
        left = a if a_kind is ValueKind.ARRAY else ()
        right = b if b_kind is ValueKind.ARRAY else ()
        for i in range(max(len(left), len(right))):
            in_a = i < len(left)
            in_b = i < len(right)
            yield (
                i,
                in_a,
                in_b,
                left[i] if in_a else None,
                right[i] if in_b else None,
            )

