"""Equality and shape helpers shared by the wrapper types."""

from __future__ import annotations

from typing import Any

import msgspec

__all__ = ['as_pair', 'strict_equals']


def strict_equals(left: Any, right: Any) -> bool:
    """Compare without type coercion, at every level.

    Identity always matches. Otherwise both operands must have exactly the
    same type. Lists, tuples, dicts and wrapper structs are compared element
    by element with the same rule, so ``[0]`` never matches ``[False]`` and
    ``Some(1)`` never matches ``Some(1.0)``. Other values fall back to ``==``.

    Examples:
        >>> strict_equals([1, 2], [1, 2])
        True
        >>> strict_equals({'a': 1}, {'a': True})
        False
    """
    if left is right:
        return True
    if type(left) is not type(right):
        return False

    if isinstance(left, list | tuple):
        return len(left) == len(right) and all(strict_equals(a, b) for a, b in zip(left, right, strict=True))

    if isinstance(left, dict):
        # Insertion order is significant.
        return len(left) == len(right) and all(
            strict_equals(left_key, right_key) and strict_equals(left_value, right_value)
            for (left_key, left_value), (right_key, right_value) in zip(left.items(), right.items(), strict=True)
        )

    if isinstance(left, msgspec.Struct):
        return all(strict_equals(getattr(left, name), getattr(right, name)) for name in left.__struct_fields__)

    return bool(left == right)


def as_pair(value: Any) -> tuple[Any, Any] | None:
    """Return ``value`` as a 2-tuple when it is a tuple or list of length two."""
    if isinstance(value, tuple | list) and len(value) == 2:
        return value[0], value[1]
    return None
