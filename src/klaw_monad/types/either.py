"""Either type: Left[L] | Right[R] for two-way branching.

Right is the primary path: ``map``, ``flat_map`` and iteration act on the
right value and leave a Left untouched.
"""

from __future__ import annotations

import copy
from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

import msgspec

from klaw_monad._internal.compare import as_pair, strict_equals
from klaw_monad.errors import (
    CannotUnwrapLeftFromRightError,
    CannotUnwrapRightFromLeftError,
    ExpectedEitherError,
    FlatMapMustReturnEitherError,
    UnzipExpectedRightWithTupleError,
)

if TYPE_CHECKING:
    from klaw_monad.types.lazy import LazyEither
    from klaw_monad.types.option import Option
    from klaw_monad.types.result import Result

__all__ = [
    'Either',
    'Left',
    'Right',
    'cond',
    'from_nullable',
    'lazy',
    'sequence',
    'traverse',
    'try_catch',
]


class Either[L, R]:
    """Base class of Left and Right.

    Either values have no truthiness: use ``is_right()`` or ``is_left()``.
    """

    __slots__ = ()

    def is_right(self) -> bool:
        raise NotImplementedError

    def is_left(self) -> bool:
        raise NotImplementedError

    def unwrap(self) -> R:
        raise NotImplementedError

    def flat_map[U](self, f: Callable[[R], Either[L, U]]) -> Either[L, U]:
        raise NotImplementedError

    def match[U](self, on_left: Callable[[L], U], on_right: Callable[[R], U]) -> U:
        raise NotImplementedError

    def and_then[U](self, f: Callable[[R], Either[L, U]]) -> Either[L, U]:
        """Alias for flat_map()."""
        return self.flat_map(f)

    def fold[U](self, left_fn: Callable[[L], U], right_fn: Callable[[R], U]) -> U:
        """Alias for match(): left_fn for Left, right_fn for Right."""
        return self.match(left_fn, right_fn)

    def __iter__(self) -> Iterator[R]:
        """Yield the right value once when Right, nothing otherwise."""
        if self.is_right():
            yield self.unwrap()

    def __bool__(self) -> NoReturn:
        msg = f'{type(self).__name__} has no truth value, use is_right() or is_left()'
        raise TypeError(msg)


class Right[R](msgspec.Struct, Either[Any, R], frozen=True, gc=False):
    """Right variant of Either, the primary path.

    Examples:
        >>> Right(10).map(lambda x: x + 1)
        Right(value=11)
        >>> Right(10).swap()
        Left(value=10)
    """

    value: R

    def is_right(self) -> TypeIs[Right[R]]:
        """Return True since this is Right."""
        return True

    def is_left(self) -> TypeIs[Left[Any]]:
        """Return False since this is Right."""
        return False

    def is_right_and(self, predicate: Callable[[R], Any]) -> bool:
        """Return the truthiness of predicate(value)."""
        return bool(predicate(self.value))

    def is_left_and(self, _predicate: Callable[[Any], Any]) -> bool:
        return False

    def map[U](self, f: Callable[[R], U]) -> Right[U]:
        """Apply f to the right value."""
        return Right(f(self.value))

    def map_left(self, _f: Callable[[Any], Any]) -> Right[R]:
        """Return self unchanged since this is Right."""
        return self

    def bimap[U](self, _left_fn: Callable[[Any], Any], right_fn: Callable[[R], U]) -> Right[U]:
        """Apply right_fn to the right value."""
        return Right(right_fn(self.value))

    def flat_map[L, U](self, f: Callable[[R], Either[L, U]]) -> Either[L, U]:
        """Apply a function that returns an Either to the right value.

        Args:
            f: Function that takes R and returns Either[L, U].

        Returns:
            The Either returned by f.

        Raises:
            FlatMapMustReturnEitherError: If f returns anything else.
        """
        result = f(self.value)
        if not isinstance(result, Either):
            raise FlatMapMustReturnEitherError(result)
        return result

    def filter[L](self, predicate: Callable[[R], bool], left_value: L) -> Either[L, R]:
        """Keep the value if ``predicate`` returns exactly True, else Left(left_value)."""
        if predicate(self.value) is True:
            return self
        return Left(left_value)

    def for_all(self, f: Callable[[R], Any]) -> Right[R]:
        """Call f with the right value and return self."""
        f(self.value)
        return self

    def inspect(self, f: Callable[[R], Any]) -> Right[R]:
        """Call f with the right value and return self."""
        f(self.value)
        return self

    def for_left(self, _f: Callable[[Any], Any]) -> Right[R]:
        return self

    def match[U](self, _on_left: Callable[[Any], U], on_right: Callable[[R], U]) -> U:
        """Return on_right(value)."""
        return on_right(self.value)

    def swap(self) -> Left[R]:
        """Return Left(value)."""
        return Left(self.value)

    def unwrap(self) -> R:
        """Return the right value."""
        return self.value

    def unwrap_left(self) -> NoReturn:
        """Raise since this is Right.

        Raises:
            CannotUnwrapLeftFromRightError: Always.
        """
        raise CannotUnwrapLeftFromRightError

    def expect(self, _msg: str) -> R:
        """Return the right value, ignoring the message."""
        return self.value

    def unwrap_or(self, _default: R) -> R:
        return self.value

    def unwrap_or_else(self, _f: Callable[[Any], R]) -> R:
        return self.value

    def contains(self, value: Any) -> bool:
        """Check whether the right value strictly equals ``value``."""
        return strict_equals(self.value, value)

    def contains_left(self, _value: Any) -> bool:
        return False

    def flatten(self) -> Either[Any, Any]:
        """Remove one level of nesting.

        Right(Right(x)) becomes Right(x) and Right(Left(x)) becomes Left(x).
        A Right holding a non-Either value is returned unchanged.
        """
        if isinstance(self.value, Either):
            return self.value
        return self

    def and_[L, U](self, other: Either[L, U]) -> Either[L, U]:
        """Return other since this is Right."""
        return other

    def or_(self, _other: Either[Any, R]) -> Right[R]:
        """Return self since this is Right."""
        return self

    def xor(self, other: Either[R, R]) -> Either[R, R]:
        """Return self if other is Left, otherwise Left(value).

        When both sides are Right the result keeps this side's value,
        moved to the left: ``Right(10).xor(Right(20)) == Left(10)``.
        """
        if other.is_left():
            return self
        return Left(self.value)

    def map_or[U](self, _default: U, f: Callable[[R], U]) -> U:
        """Apply f to the right value."""
        return f(self.value)

    def map_or_else[U](self, _default_fn: Callable[[Any], U], f: Callable[[R], U]) -> U:
        """Apply f to the right value; the default function is not called."""
        return f(self.value)

    def zip[L, U](self, other: Either[L, U]) -> Either[L, tuple[R, U]]:
        """Pair two right values, or return other when it is Left."""
        if other.is_right():
            return Right((self.value, other.unwrap()))
        return other  # type: ignore[return-value]

    def zip_with[L, U, V](self, other: Either[L, U], f: Callable[[R, U], V]) -> Either[L, V]:
        """Combine two right values with f, or return other when it is Left."""
        if other.is_right():
            return Right(f(self.value, other.unwrap()))
        return other  # type: ignore[return-value]

    def unzip(self) -> tuple[Right[Any], Right[Any]]:
        """Split Right((a, b)) into (Right(a), Right(b)).

        Raises:
            UnzipExpectedRightWithTupleError: If the value is not a 2-item
                tuple or list.
        """
        pair = as_pair(self.value)
        if pair is None:
            raise UnzipExpectedRightWithTupleError(actual=self.value)
        return Right(pair[0]), Right(pair[1])

    def to_option(self) -> Option[R]:
        """Return Some(value)."""
        from klaw_monad.types.option import Some

        return Some(self.value)

    def to_result(self) -> Result[R, Any]:
        """Return Ok(value)."""
        from klaw_monad.types.result import Ok

        return Ok(self.value)

    def cloned(self) -> Right[R]:
        """Return a new Right holding a deep copy of the value."""
        return Right(copy.deepcopy(self.value))


class Left[L](msgspec.Struct, Either[L, Any], frozen=True, gc=False):
    """Left variant of Either, the secondary path.

    Examples:
        >>> Left('boom').map(lambda x: x + 1)
        Left(value='boom')
        >>> Left('boom').unwrap_or(0)
        0
    """

    value: L

    def is_right(self) -> TypeIs[Right[Any]]:
        """Return False since this is Left."""
        return False

    def is_left(self) -> TypeIs[Left[L]]:
        """Return True since this is Left."""
        return True

    def is_right_and(self, _predicate: Callable[[Any], Any]) -> bool:
        return False

    def is_left_and(self, predicate: Callable[[L], Any]) -> bool:
        """Return the truthiness of predicate(value)."""
        return bool(predicate(self.value))

    def map(self, _f: Callable[[Any], Any]) -> Left[L]:
        """Return self unchanged since this is Left."""
        return self

    def map_left[U](self, f: Callable[[L], U]) -> Left[U]:
        """Apply f to the left value."""
        return Left(f(self.value))

    def bimap[U](self, left_fn: Callable[[L], U], _right_fn: Callable[[Any], Any]) -> Left[U]:
        """Apply left_fn to the left value."""
        return Left(left_fn(self.value))

    def flat_map(self, _f: Callable[[Any], Either[L, Any]]) -> Left[L]:
        """Return self; f is not called."""
        return self

    def filter(self, _predicate: Callable[[Any], bool], _left_value: Any) -> Left[L]:
        return self

    def for_all(self, _f: Callable[[Any], Any]) -> Left[L]:
        return self

    def inspect(self, _f: Callable[[Any], Any]) -> Left[L]:
        return self

    def for_left(self, f: Callable[[L], Any]) -> Left[L]:
        """Call f with the left value and return self."""
        f(self.value)
        return self

    def match[U](self, on_left: Callable[[L], U], _on_right: Callable[[Any], U]) -> U:
        """Return on_left(value)."""
        return on_left(self.value)

    def swap(self) -> Right[L]:
        """Return Right(value)."""
        return Right(self.value)

    def unwrap(self) -> NoReturn:
        """Raise since this is Left.

        Raises:
            CannotUnwrapRightFromLeftError: Always.
        """
        raise CannotUnwrapRightFromLeftError

    def unwrap_left(self) -> L:
        """Return the left value."""
        return self.value

    def expect(self, msg: str) -> NoReturn:
        """Raise with the given message.

        Raises:
            CannotUnwrapRightFromLeftError: Always, carrying ``msg``.
        """
        raise CannotUnwrapRightFromLeftError(msg)

    def unwrap_or[R](self, default: R) -> R:
        """Return the default value."""
        return default

    def unwrap_or_else[R](self, f: Callable[[L], R]) -> R:
        """Return f called with the left value."""
        return f(self.value)

    def contains(self, _value: Any) -> bool:
        return False

    def contains_left(self, value: Any) -> bool:
        """Check whether the left value strictly equals ``value``."""
        return strict_equals(self.value, value)

    def flatten(self) -> Left[L]:
        return self

    def and_(self, _other: Either[L, Any]) -> Left[L]:
        """Return self since this is Left."""
        return self

    def or_[R](self, other: Either[Any, R]) -> Either[Any, R]:
        """Return other since this is Left."""
        return other

    def xor[R](self, other: Either[L, R]) -> Either[L, R]:
        """Return other if it is Right, otherwise self (the first Left wins)."""
        if other.is_right():
            return other
        return self

    def map_or[U](self, default: U, _f: Callable[[Any], U]) -> U:
        """Return the default value."""
        return default

    def map_or_else[U](self, default_fn: Callable[[L], U], _f: Callable[[Any], U]) -> U:
        """Return default_fn called with the left value."""
        return default_fn(self.value)

    def zip(self, _other: Either[L, Any]) -> Left[L]:
        return self

    def zip_with(self, _other: Either[L, Any], _f: Callable[[Any, Any], Any]) -> Left[L]:
        return self

    def unzip(self) -> tuple[Left[L], Left[L]]:
        """Return (self, self): a Left is duplicated."""
        return self, self

    def to_option(self) -> Option[Any]:
        """Return Nothing."""
        from klaw_monad.types.option import Nothing

        return Nothing

    def to_result(self) -> Result[Any, L]:
        """Return Err(value)."""
        from klaw_monad.types.result import Err

        return Err(self.value)

    def cloned(self) -> Left[L]:
        """Return a new Left holding a deep copy of the value."""
        return Left(copy.deepcopy(self.value))


# --- Constructors ---


def from_nullable[L, R](value: R | None, left_value: L = None) -> Either[L, R]:
    """Return Right(value), or Left(left_value) when value is None."""
    if value is None:
        return Left(left_value)
    return Right(value)


def try_catch[R](callback: Callable[[], R]) -> Either[Exception, R]:
    """Run ``callback`` and capture an exception as Left.

    Only ``Exception`` subclasses are captured; KeyboardInterrupt and
    friends propagate.

    Examples:
        >>> try_catch(lambda: 1 // 0)
        Left(value=ZeroDivisionError('integer division or modulo by zero'))
    """
    try:
        return Right(callback())
    except Exception as e:  # noqa: BLE001
        return Left(e)


def cond[L, R](condition: bool, right_value: R, left_value: L) -> Either[L, R]:
    """Return Right(right_value) if condition holds, else Left(left_value)."""
    if condition:
        return Right(right_value)
    return Left(left_value)


def lazy(callback: Callable[..., Either[Any, Any]], arguments: Sequence[Any] = ()) -> LazyEither[Any, Any]:
    """Defer ``callback(*arguments)`` behind a LazyEither."""
    from klaw_monad.types.lazy import LazyEither

    return LazyEither(callback, arguments)


# --- Collections ---


def sequence[L, R](eithers: Iterable[Either[L, R]]) -> Either[L, list[R]]:
    """Collect right values, stopping at the first Left.

    The iterable is consumed only up to the first Left, so generators are
    not drained past it.

    Args:
        eithers: Iterable of Either values.

    Returns:
        Right(list of right values) if every element is Right, otherwise
        the first Left by position.

    Raises:
        ExpectedEitherError: If an element is not an Either.

    Examples:
        >>> sequence([Right(1), Right(2)])
        Right(value=[1, 2])
        >>> sequence([Right(1), Left('x'), Right(3)])
        Left(value='x')
    """
    values: list[R] = []
    for either in eithers:
        if not isinstance(either, Either):
            raise ExpectedEitherError.from_value(either)
        if either.is_left():
            return either  # type: ignore[return-value]
        values.append(either.unwrap())
    return Right(values)


def traverse[T, L, R](items: Iterable[T], f: Callable[[T], Either[L, R]]) -> Either[L, list[R]]:
    """Map ``f`` over ``items`` and sequence the results.

    ``f`` is not called for any item after the first Left it returns.
    Exceptions raised by ``f`` propagate unchanged.

    Raises:
        ExpectedEitherError: If f returns something other than an Either.
    """
    return sequence(f(item) for item in items)
