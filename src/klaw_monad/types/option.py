"""Option type: Some[T] | Nothing for optional values."""

from __future__ import annotations

import copy
import warnings
from collections.abc import Callable, Iterator, Mapping, Sequence
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

import msgspec
import wrapt

from klaw_monad._internal.compare import as_pair, strict_equals
from klaw_monad.errors import (
    CannotUnwrapNothingError,
    ExpectedOptionError,
    FlatMapMustReturnOptionError,
    TransposeExpectedSomeWithResultError,
    UnzipExpectedSomeWithTupleError,
)

if TYPE_CHECKING:
    from klaw_monad.types.lazy import LazyOption
    from klaw_monad.types.result import Err, Ok, Result

__all__ = [
    'Nothing',
    'NothingType',
    'Option',
    'Some',
    'ensure',
    'from_key',
    'from_nullable',
    'from_return',
    'from_value',
    'lift',
]


class Option[T]:
    """Base class of Some and Nothing.

    Holds the operations that are the same for both variants and are
    expressed through ``is_some``/``unwrap``. Variant-specific behaviour
    lives on ``Some`` and ``NothingType``; ``LazyOption`` forwards
    everything to the Option its producer returns.

    Option values have no truthiness: use ``is_some()`` or ``is_none()``.
    """

    __slots__ = ()

    def is_some(self) -> bool:
        raise NotImplementedError

    def is_none(self) -> bool:
        raise NotImplementedError

    def unwrap(self) -> T:
        raise NotImplementedError

    def for_all(self, f: Callable[[T], Any]) -> Option[T]:
        raise NotImplementedError

    def flat_map[U](self, f: Callable[[T], Option[U]]) -> Option[U]:
        raise NotImplementedError

    def is_defined(self) -> bool:
        """Alias for is_some()."""
        return self.is_some()

    def is_empty(self) -> bool:
        """Alias for is_none()."""
        return self.is_none()

    def get(self) -> T:
        """Alias for unwrap()."""
        return self.unwrap()

    def and_then[U](self, f: Callable[[T], Option[U]]) -> Option[U]:
        """Alias for flat_map()."""
        return self.flat_map(f)

    def if_defined(self, f: Callable[[T], Any]) -> None:
        """Call ``f`` with the value if present.

        Deprecated: use ``for_all()``, which also returns the option.
        """
        warnings.warn(
            'Option.if_defined() is deprecated, use Option.for_all() instead',
            DeprecationWarning,
            stacklevel=2,
        )
        self.for_all(f)

    def match[U](self, on_some: Callable[[T], U], on_none: Callable[[], U]) -> U:
        """Dispatch on the variant.

        Args:
            on_some: Called with the value when Some.
            on_none: Called with no arguments when Nothing.

        Returns:
            Whatever the selected branch returns.
        """
        if self.is_some():
            return on_some(self.unwrap())
        return on_none()

    def unwrap_or_abort(self, status: int = 404, message: str | None = None) -> T:
        """Return the value, or abort through the configured abort handler.

        Args:
            status: Status code passed to the handler.
            message: Optional message passed to the handler.

        Raises:
            AbortError: With the default handler, when this is Nothing.
        """
        from klaw_monad.abort import abort_unless

        abort_unless(self.is_some(), status, message)
        return self.unwrap()

    def unwrap_or_abort_unless(
        self,
        condition: Callable[[T], Any] | bool,
        status: int = 404,
        message: str | None = None,
    ) -> T:
        """Return the value if present and ``condition`` holds, else abort.

        Args:
            condition: A bool, or a predicate called with the value.
            status: Status code passed to the handler.
            message: Optional message passed to the handler.
        """
        from klaw_monad.abort import abort_unless

        abort_unless(self.is_some(), status, message)
        value = self.unwrap()
        ok = bool(condition(value)) if callable(condition) else bool(condition)
        abort_unless(ok, status, message)
        return value

    def __iter__(self) -> Iterator[T]:
        """Yield the value once when Some, nothing otherwise."""
        if self.is_some():
            yield self.unwrap()

    def __bool__(self) -> NoReturn:
        msg = f'{type(self).__name__} has no truth value, use is_some() or is_none()'
        raise TypeError(msg)


class Some[T](msgspec.Struct, Option[T], frozen=True, gc=False):
    """Some variant of Option containing a value of type T.

    Examples:
        >>> some = Some(42)
        >>> some.unwrap()
        42
        >>> some.map(lambda x: x * 2)
        Some(value=84)
        >>> some.filter(lambda x: x > 50)
        Nothing
    """

    value: T

    def is_some(self) -> TypeIs[Some[T]]:
        """Return True since this is Some."""
        return True

    def is_none(self) -> TypeIs[NothingType]:
        """Return False since this is Some."""
        return False

    def unwrap(self) -> T:
        """Return the contained value."""
        return self.value

    def expect(self, _msg: str) -> T:
        """Return the contained value, ignoring the message."""
        return self.value

    def unwrap_or(self, _default: T) -> T:
        """Return the contained value, ignoring the default."""
        return self.value

    def unwrap_or_default(self) -> T:
        """Return the contained value."""
        return self.value

    def unwrap_or_else(self, _f: Callable[[], T]) -> T:
        """Return the contained value; the fallback is not called."""
        return self.value

    def unwrap_or_raise(self, _exc: BaseException) -> T:
        """Return the contained value; the exception is not raised."""
        return self.value

    def to_nullable(self) -> T:
        """Return the contained value."""
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Some[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Some value.

        Returns:
            Some containing the result of applying f to the value.
        """
        return Some(f(self.value))

    def flat_map[U](self, f: Callable[[T], Option[U]]) -> Option[U]:
        """Apply a function that returns an Option to the contained value.

        Args:
            f: Function that takes T and returns Option[U].

        Returns:
            The Option returned by f.

        Raises:
            FlatMapMustReturnOptionError: If f returns anything else.
        """
        result = f(self.value)
        if not isinstance(result, Option):
            raise FlatMapMustReturnOptionError(result)
        return result

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Keep the value only if ``predicate`` returns exactly True.

        Truthy results such as ``1`` or a non-empty list do not count.
        """
        if predicate(self.value) is True:
            return self
        return Nothing

    def filter_not(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Keep the value only if ``predicate`` returns exactly False."""
        if predicate(self.value) is False:
            return self
        return Nothing

    def select(self, value: Any) -> Option[T]:
        """Keep the value if it strictly equals ``value``."""
        if strict_equals(self.value, value):
            return self
        return Nothing

    def reject(self, value: Any) -> Option[T]:
        """Drop the value if it strictly equals ``value``."""
        if strict_equals(self.value, value):
            return Nothing
        return self

    def and_[U](self, other: Option[U]) -> Option[U]:
        """Return other since this is Some."""
        return other

    def or_(self, _other: Option[T]) -> Some[T]:
        """Return self since this is Some."""
        return self

    def or_else(self, _f: Callable[[], Option[T]]) -> Some[T]:
        """Return self; the fallback is not called."""
        return self

    def xor(self, other: Option[T]) -> Option[T]:
        """Return self if other is Nothing, otherwise Nothing."""
        if other.is_none():
            return self
        return Nothing

    def map_or[U](self, _default: U, f: Callable[[T], U]) -> U:
        """Apply f to the contained value."""
        return f(self.value)

    def map_or_else[U](self, _default_fn: Callable[[], U], f: Callable[[T], U]) -> U:
        """Apply f to the contained value; the default function is not called."""
        return f(self.value)

    def map_or_default[U](self, f: Callable[[T], U]) -> U:
        """Apply f to the contained value and return the result unwrapped."""
        return f(self.value)

    def zip[U](self, other: Option[U]) -> Option[tuple[T, U]]:
        """Combine two Some values into a tuple.

        If other is Some, returns Some((self.value, other.value)).
        Otherwise returns Nothing.
        """
        if other.is_some():
            return Some((self.value, other.unwrap()))
        return Nothing

    def zip_with[U, R](self, other: Option[U], f: Callable[[T, U], R]) -> Option[R]:
        """Combine two Some values with f."""
        if other.is_some():
            return Some(f(self.value, other.unwrap()))
        return Nothing

    def unzip(self) -> tuple[Option[Any], Option[Any]]:
        """Split Some((a, b)) into (Option(a), Option(b)).

        Each half goes through ``from_nullable``, so a ``None`` element
        becomes Nothing.

        Raises:
            UnzipExpectedSomeWithTupleError: If the value is not a 2-item
                tuple or list.
        """
        pair = as_pair(self.value)
        if pair is None:
            raise UnzipExpectedSomeWithTupleError(actual=self.value)
        return from_nullable(pair[0]), from_nullable(pair[1])

    def flatten(self) -> Option[Any]:
        """Remove one level of nesting.

        Some(Some(x)) becomes Some(x). A Some holding a non-Option value
        is returned unchanged.
        """
        if isinstance(self.value, Option):
            return self.value
        return self

    def fold_left[U](self, initial: U, f: Callable[[U, T], U]) -> U:
        """Return f(initial, value)."""
        return f(initial, self.value)

    def fold_right[U](self, initial: U, f: Callable[[T, U], U]) -> U:
        """Return f(value, initial)."""
        return f(self.value, initial)

    def contains(self, value: Any) -> bool:
        """Check whether the contained value strictly equals ``value``."""
        return strict_equals(self.value, value)

    def is_some_and(self, predicate: Callable[[T], Any]) -> bool:
        """Return the truthiness of predicate(value)."""
        return bool(predicate(self.value))

    def is_none_or(self, predicate: Callable[[T], Any]) -> bool:
        """Return the truthiness of predicate(value)."""
        return bool(predicate(self.value))

    def inspect(self, f: Callable[[T], Any]) -> Some[T]:
        """Call f with the contained value and return self."""
        f(self.value)
        return self

    def for_all(self, f: Callable[[T], Any]) -> Some[T]:
        """Call f with the contained value and return self."""
        f(self.value)
        return self

    def transpose(self) -> Result[Option[Any], Any]:
        """Turn Some(Result) into Result(Option).

        Some(Ok(x)) becomes Ok(Some(x)) and Some(Err(e)) becomes Err(e).

        Raises:
            TransposeExpectedSomeWithResultError: If the value is not a Result.
        """
        from klaw_monad.types.result import Ok, Result

        if not isinstance(self.value, Result):
            raise TransposeExpectedSomeWithResultError.from_value(self.value)
        if self.value.is_ok():
            return Ok(Some(self.value.unwrap()))
        return self.value

    def ok_or[E](self, _err: E) -> Ok[T]:
        """Convert to Result, returning Ok(value)."""
        from klaw_monad.types.result import Ok

        return Ok(self.value)

    def ok_or_else[E](self, _f: Callable[[], E]) -> Ok[T]:
        """Convert to Result, returning Ok(value)."""
        from klaw_monad.types.result import Ok

        return Ok(self.value)

    def cloned(self) -> Some[T]:
        """Return a new Some holding a deep copy of the value."""
        return Some(copy.deepcopy(self.value))


class NothingType(msgspec.Struct, Option[Any], frozen=True, gc=False):
    """Nothing variant of Option representing absence of a value.

    ``NothingType`` is not a factory. Calling it builds a separate
    instance that compares equal to ``Nothing`` but fails ``is Nothing``,
    so use the ``Nothing`` singleton. Operations on Nothing short-circuit
    without calling the functions they are given.

    Examples:
        >>> Nothing.map(lambda x: x * 2)
        Nothing
        >>> Nothing.unwrap_or(0)
        0
    """

    def __repr__(self) -> str:
        return 'Nothing'

    def __copy__(self) -> NothingType:
        return self

    def __deepcopy__(self, _memo: dict[int, Any]) -> NothingType:
        return self

    def __reduce__(self) -> str:
        return 'Nothing'

    def is_some(self) -> TypeIs[Some[Any]]:
        """Return False since this is Nothing."""
        return False

    def is_none(self) -> TypeIs[NothingType]:
        """Return True since this is Nothing."""
        return True

    def unwrap(self) -> NoReturn:
        """Raise since Nothing holds no value.

        Raises:
            CannotUnwrapNothingError: Always.
        """
        raise CannotUnwrapNothingError

    def expect(self, msg: str) -> NoReturn:
        """Raise with the given message.

        Raises:
            CannotUnwrapNothingError: Always, carrying ``msg``.
        """
        raise CannotUnwrapNothingError(msg)

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value."""
        return default

    def unwrap_or_default(self) -> None:
        """Return None, the default for a missing value."""
        return None

    def unwrap_or_else[T](self, f: Callable[[], T]) -> T:
        """Return the result of calling f."""
        return f()

    def unwrap_or_raise(self, exc: BaseException) -> NoReturn:
        """Raise the given exception."""
        raise exc

    def to_nullable(self) -> None:
        """Return None."""
        return None

    def map(self, _f: Callable[[Any], Any]) -> NothingType:
        """Return Nothing; f is not called."""
        return self

    def flat_map(self, _f: Callable[[Any], Option[Any]]) -> NothingType:
        """Return Nothing; f is not called."""
        return self

    def filter(self, _predicate: Callable[[Any], bool]) -> NothingType:
        """Return Nothing; the predicate is not called."""
        return self

    def filter_not(self, _predicate: Callable[[Any], bool]) -> NothingType:
        """Return Nothing; the predicate is not called."""
        return self

    def select(self, _value: Any) -> NothingType:
        return self

    def reject(self, _value: Any) -> NothingType:
        return self

    def and_(self, _other: Option[Any]) -> NothingType:
        """Return Nothing since this is Nothing."""
        return self

    def or_[T](self, other: Option[T]) -> Option[T]:
        """Return other since this is Nothing."""
        return other

    def or_else[T](self, f: Callable[[], Option[T]]) -> Option[T]:
        """Return the Option produced by f."""
        return f()

    def xor[T](self, other: Option[T]) -> Option[T]:
        """Return other if it is Some, otherwise Nothing."""
        if other.is_some():
            return other
        return self

    def map_or[U](self, default: U, _f: Callable[[Any], U]) -> U:
        """Return the default value."""
        return default

    def map_or_else[U](self, default_fn: Callable[[], U], _f: Callable[[Any], U]) -> U:
        """Return the result of calling default_fn."""
        return default_fn()

    def map_or_default(self, _f: Callable[[Any], Any]) -> None:
        """Return None without calling f."""
        return None

    def zip(self, _other: Option[Any]) -> NothingType:
        return self

    def zip_with(self, _other: Option[Any], _f: Callable[[Any, Any], Any]) -> NothingType:
        return self

    def unzip(self) -> tuple[NothingType, NothingType]:
        """Return (Nothing, Nothing)."""
        return self, self

    def flatten(self) -> NothingType:
        return self

    def fold_left[U](self, initial: U, _f: Callable[[U, Any], U]) -> U:
        """Return initial unchanged."""
        return initial

    def fold_right[U](self, initial: U, _f: Callable[[Any, U], U]) -> U:
        """Return initial unchanged."""
        return initial

    def contains(self, _value: Any) -> bool:
        return False

    def is_some_and(self, _predicate: Callable[[Any], Any]) -> bool:
        return False

    def is_none_or(self, _predicate: Callable[[Any], Any]) -> bool:
        return True

    def inspect(self, _f: Callable[[Any], Any]) -> NothingType:
        return self

    def for_all(self, _f: Callable[[Any], Any]) -> NothingType:
        return self

    def transpose(self) -> Ok[NothingType]:
        """Return Ok(Nothing)."""
        from klaw_monad.types.result import Ok

        return Ok(self)

    def ok_or[E](self, err: E) -> Err[E]:
        """Convert to Result, returning Err(err)."""
        from klaw_monad.types.result import Err

        return Err(err)

    def ok_or_else[E](self, f: Callable[[], E]) -> Err[E]:
        """Convert to Result, returning Err(f())."""
        from klaw_monad.types.result import Err

        return Err(f())

    def cloned(self) -> NothingType:
        """Return Nothing."""
        return self


# Singleton instance of Nothing
Nothing: NothingType = NothingType()


# --- Constructors ---


def from_nullable[T](value: T | None) -> Option[T]:
    """Wrap ``value`` in Some unless it is None.

    Examples:
        >>> from_nullable(0)
        Some(value=0)
        >>> from_nullable(None)
        Nothing
    """
    if value is None:
        return Nothing
    return Some(value)


def from_value[T](value: T, none_value: Any = None) -> Option[T]:
    """Wrap ``value`` in Some unless it strictly equals ``none_value``.

    Args:
        value: The candidate value.
        none_value: Sentinel meaning "absent". Compared without type
            coercion, so ``from_value(0, False)`` is Some(0).

    Examples:
        >>> from_value(-1, none_value=-1)
        Nothing
        >>> from_value(-1.0, none_value=-1)
        Some(value=-1.0)
    """
    if strict_equals(value, none_value):
        return Nothing
    return Some(value)


def from_key(container: Any, key: Any) -> Option[Any]:
    """Look up ``key`` in ``container`` without raising.

    Mappings are checked with ``in``. Sequences take non-negative in-range
    integer indices. Other subscriptable objects are indexed directly and
    a LookupError counts as missing. Strings and bytes are not treated as
    containers.

    Returns:
        Some(value) when the key is present with a non-None value,
        Nothing otherwise.

    Examples:
        >>> from_key({'a': 1}, 'a')
        Some(value=1)
        >>> from_key({'a': None}, 'a')
        Nothing
        >>> from_key([10, 20], 5)
        Nothing
    """
    if key is None or isinstance(container, str | bytes | bytearray):
        return Nothing

    if isinstance(container, Mapping):
        if key not in container:
            return Nothing
        return from_nullable(container[key])

    if isinstance(container, Sequence):
        if type(key) is not int or not 0 <= key < len(container):
            return Nothing
        return from_nullable(container[key])

    if not hasattr(container, '__getitem__'):
        return Nothing

    try:
        value = container[key]
    except LookupError:
        return Nothing
    return from_nullable(value)


def from_return(
    callback: Callable[..., Any],
    arguments: Sequence[Any] = (),
    none_value: Any = None,
) -> LazyOption[Any]:
    """Defer ``callback(*arguments)`` and wrap its return value.

    The callback runs on first use of the returned LazyOption; its result
    goes through ``from_value`` with ``none_value``.
    """
    from klaw_monad.types.lazy import LazyOption

    def produce(*args: Any) -> Option[Any]:
        return from_value(callback(*args), none_value)

    return LazyOption(produce, arguments)


def ensure(value: Any, none_value: Any = None) -> Option[Any]:
    """Coerce ``value`` into an Option.

    - An Option is returned unchanged.
    - A callable becomes a LazyOption. When forced, an Option result is
      used as-is and anything else goes through ``from_value``.
    - Anything else goes through ``from_value``.
    """
    if isinstance(value, Option):
        return value

    if callable(value):
        from klaw_monad.types.lazy import LazyOption

        def produce() -> Option[Any]:
            result = value()
            if isinstance(result, Option):
                return result
            return from_value(result, none_value)

        return LazyOption(produce)

    return from_value(value, none_value)


def lift(callback: Callable[..., Any], none_value: Any = None) -> Callable[..., Option[Any]]:
    """Turn a plain function into one that takes and returns Options.

    The lifted function returns Nothing as soon as any argument is
    Nothing. Otherwise it unwraps every argument, calls ``callback`` and
    passes the return value through ``ensure``.

    Raises:
        ExpectedOptionError: If the lifted function is called with an
            argument that is not an Option.

    Examples:
        >>> add = lift(lambda a, b: a + b)
        >>> add(Some(1), Some(5))
        Some(value=6)
        >>> add(Some(1), Nothing)
        Nothing
    """

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[..., Any],
        instance: Any,
        args: tuple[Option[Any], ...],
        kwargs: dict[str, Option[Any]],
    ) -> Option[Any]:
        options = (*args, *kwargs.values())
        for option in options:
            if not isinstance(option, Option):
                raise ExpectedOptionError.from_value(option)
        if any(option.is_none() for option in options):
            return Nothing
        values = [option.unwrap() for option in args]
        named = {name: option.unwrap() for name, option in kwargs.items()}
        return ensure(wrapped(*values, **named), none_value)

    return wrapper(callback)
