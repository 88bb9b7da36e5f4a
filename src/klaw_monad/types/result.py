"""Result type: Ok[T] | Err[E] for explicit error handling."""

from __future__ import annotations

import copy
from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

import msgspec

from klaw_monad._internal.compare import strict_equals
from klaw_monad.errors import (
    CannotUnwrapErrError,
    CannotUnwrapOkError,
    FlatMapMustReturnResultError,
    TransposeExpectedOkWithOptionError,
)

if TYPE_CHECKING:
    from klaw_monad.types.option import Option

__all__ = ['Err', 'Ok', 'Result']


class Result[T, E]:
    """Base class of Ok and Err.

    Result values have no truthiness: use ``is_ok()`` or ``is_err()``.
    """

    __slots__ = ()

    def is_ok(self) -> bool:
        raise NotImplementedError

    def unwrap(self) -> T:
        raise NotImplementedError

    def and_then[U](self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        raise NotImplementedError

    def flat_map[U](self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Alias for and_then()."""
        return self.and_then(f)

    def into_ok(self) -> Option[T]:
        """Alias for ok()."""
        return self.ok()  # type: ignore[attr-defined]

    def into_err(self) -> Option[E]:
        """Alias for err()."""
        return self.err()  # type: ignore[attr-defined]

    def __iter__(self) -> Iterator[T]:
        """Yield the success value once when Ok, nothing otherwise."""
        if self.is_ok():
            yield self.unwrap()

    def __bool__(self) -> NoReturn:
        msg = f'{type(self).__name__} has no truth value, use is_ok() or is_err()'
        raise TypeError(msg)


class Ok[T](msgspec.Struct, Result[T, Any], frozen=True, gc=False):
    """Success variant of Result containing a value of type T.

    Examples:
        >>> ok = Ok(42)
        >>> ok.unwrap()
        42
        >>> ok.map(lambda x: x * 2)
        Ok(value=84)
        >>> ok.ok()
        Some(value=42)
    """

    value: T

    def is_ok(self) -> TypeIs[Ok[T]]:
        """Return True since this is Ok.

        This method provides type narrowing - after checking is_ok(),
        the type checker knows the result is Ok[T].
        """
        return True

    def is_err(self) -> TypeIs[Err[Any]]:
        """Return False since this is Ok."""
        return False

    def is_ok_and(self, predicate: Callable[[T], Any]) -> bool:
        """Return the truthiness of predicate(value)."""
        return bool(predicate(self.value))

    def is_err_and(self, _predicate: Callable[[Any], Any]) -> bool:
        return False

    def unwrap(self) -> T:
        """Return the contained Ok value."""
        return self.value

    def unwrap_err(self) -> NoReturn:
        """Raise since this is Ok.

        Raises:
            CannotUnwrapOkError: Always.
        """
        raise CannotUnwrapOkError(value=self.value)

    def expect(self, _msg: str) -> T:
        """Return the contained Ok value, ignoring the message."""
        return self.value

    def expect_err(self, msg: str) -> NoReturn:
        """Raise with the given message.

        Raises:
            CannotUnwrapOkError: Always, carrying ``msg``.
        """
        raise CannotUnwrapOkError(msg, value=self.value)

    def unwrap_or(self, _default: T) -> T:
        """Return the contained Ok value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, _f: Callable[[Any], T]) -> T:
        """Return the contained Ok value; the fallback is not called."""
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Ok value.

        Returns:
            Ok containing the result of applying f to the value.
        """
        return Ok(f(self.value))

    def map_err(self, _f: Callable[[Any], Any]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def map_or[U](self, _default: U, f: Callable[[T], U]) -> U:
        """Apply f to the contained value."""
        return f(self.value)

    def map_or_else[U](self, _default_fn: Callable[[Any], U], f: Callable[[T], U]) -> U:
        """Apply f to the contained value; the default function is not called."""
        return f(self.value)

    def and_then[U, E](self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Apply a function that returns a Result to the contained value.

        Also known as flatmap or bind.

        Args:
            f: Function that takes T and returns Result[U, E].

        Returns:
            The Result returned by f.

        Raises:
            FlatMapMustReturnResultError: If f returns anything else.
        """
        result = f(self.value)
        if not isinstance(result, Result):
            raise FlatMapMustReturnResultError(result)
        return result

    def and_[U, E](self, other: Result[U, E]) -> Result[U, E]:
        """Return other since this is Ok."""
        return other

    def or_(self, _other: Result[T, Any]) -> Ok[T]:
        """Return self since this is Ok."""
        return self

    def or_else(self, _f: Callable[[Any], Result[T, Any]]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def ok(self) -> Option[T]:
        """Convert to Option, returning Some(value)."""
        from klaw_monad.types.option import Some

        return Some(self.value)

    def err(self) -> Option[Any]:
        """Convert to Option, returning Nothing."""
        from klaw_monad.types.option import Nothing

        return Nothing

    def contains(self, value: Any) -> bool:
        """Check whether the Ok value strictly equals ``value``."""
        return strict_equals(self.value, value)

    def contains_err(self, _value: Any) -> bool:
        return False

    def inspect(self, f: Callable[[T], Any]) -> Ok[T]:
        """Call f with the Ok value and return self."""
        f(self.value)
        return self

    def inspect_err(self, _f: Callable[[Any], Any]) -> Ok[T]:
        return self

    def flatten(self) -> Result[Any, Any]:
        """Remove one level of nesting.

        Ok(Ok(x)) becomes Ok(x) and Ok(Err(e)) becomes Err(e). An Ok
        holding a non-Result value is returned unchanged.
        """
        if isinstance(self.value, Result):
            return self.value
        return self

    def transpose(self) -> Option[Result[Any, Any]]:
        """Turn Ok(Option) into Option(Result).

        Ok(Some(x)) becomes Some(Ok(x)) and Ok(Nothing) becomes Nothing.

        Raises:
            TransposeExpectedOkWithOptionError: If the value is not an Option.
        """
        from klaw_monad.types.option import Nothing, Option, Some

        if not isinstance(self.value, Option):
            raise TransposeExpectedOkWithOptionError.from_value(self.value)
        if self.value.is_some():
            return Some(Ok(self.value.unwrap()))
        return Nothing

    def cloned(self) -> Ok[T]:
        """Return a new Ok holding a deep copy of the value."""
        return Ok(copy.deepcopy(self.value))


class Err[E](msgspec.Struct, Result[Any, E], frozen=True, gc=False):
    """Error variant of Result containing an error of type E.

    Examples:
        >>> err = Err('not found')
        >>> err.unwrap_or(0)
        0
        >>> err.map_err(str.upper)
        Err(error='NOT FOUND')
    """

    error: E

    def is_ok(self) -> TypeIs[Ok[Any]]:
        """Return False since this is Err."""
        return False

    def is_err(self) -> TypeIs[Err[E]]:
        """Return True since this is Err.

        This method provides type narrowing - after checking is_err(),
        the type checker knows the result is Err[E].
        """
        return True

    def is_ok_and(self, _predicate: Callable[[Any], Any]) -> bool:
        return False

    def is_err_and(self, predicate: Callable[[E], Any]) -> bool:
        """Return the truthiness of predicate(error)."""
        return bool(predicate(self.error))

    def unwrap(self) -> NoReturn:
        """Raise since this is Err.

        Raises:
            CannotUnwrapErrError: Always, with the error in the message.
        """
        raise CannotUnwrapErrError(error=self.error)

    def unwrap_err(self) -> E:
        """Return the contained error."""
        return self.error

    def expect(self, msg: str) -> NoReturn:
        """Raise with the given message.

        Raises:
            CannotUnwrapErrError: Always, carrying ``msg``.
        """
        raise CannotUnwrapErrError(msg, error=self.error)

    def expect_err(self, _msg: str) -> E:
        """Return the contained error, ignoring the message."""
        return self.error

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value."""
        return default

    def unwrap_or_else[T](self, f: Callable[[E], T]) -> T:
        """Return the result of calling f with the error."""
        return f(self.error)

    def map(self, _f: Callable[[Any], Any]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def map_err[F](self, f: Callable[[E], F]) -> Err[F]:
        """Apply a function to the contained error.

        Args:
            f: Function to apply to the error.

        Returns:
            Err containing the result of applying f to the error.
        """
        return Err(f(self.error))

    def map_or[U](self, default: U, _f: Callable[[Any], U]) -> U:
        """Return the default value."""
        return default

    def map_or_else[U](self, default_fn: Callable[[E], U], _f: Callable[[Any], U]) -> U:
        """Return default_fn called with the error."""
        return default_fn(self.error)

    def and_then(self, _f: Callable[[Any], Result[Any, E]]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def and_(self, _other: Result[Any, E]) -> Err[E]:
        """Return self since this is Err."""
        return self

    def or_[T, F](self, other: Result[T, F]) -> Result[T, F]:
        """Return other since this is Err."""
        return other

    def or_else[T, F](self, f: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """Apply a function to the error that returns a Result.

        Args:
            f: Function that takes E and returns Result[T, F].

        Returns:
            The Result returned by f.
        """
        return f(self.error)

    def ok(self) -> Option[Any]:
        """Convert to Option, returning Nothing."""
        from klaw_monad.types.option import Nothing

        return Nothing

    def err(self) -> Option[E]:
        """Convert to Option, returning Some(error)."""
        from klaw_monad.types.option import Some

        return Some(self.error)

    def contains(self, _value: Any) -> bool:
        return False

    def contains_err(self, value: Any) -> bool:
        """Check whether the error strictly equals ``value``."""
        return strict_equals(self.error, value)

    def inspect(self, _f: Callable[[Any], Any]) -> Err[E]:
        return self

    def inspect_err(self, f: Callable[[E], Any]) -> Err[E]:
        """Call f with the error and return self."""
        f(self.error)
        return self

    def flatten(self) -> Err[E]:
        return self

    def transpose(self) -> Option[Err[E]]:
        """Return Some(Err(error))."""
        from klaw_monad.types.option import Some

        return Some(self)

    def cloned(self) -> Err[E]:
        """Return a new Err holding a deep copy of the error."""
        return Err(copy.deepcopy(self.error))
