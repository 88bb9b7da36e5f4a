"""Error types raised by Option, Result and Either operations.

Every error derives from ``MonadError`` so callers can catch anything the
library raises in one place. Each family also derives from the builtin a
caller would reach for first (``RuntimeError`` for unwrapping, ``TypeError``
for shape mismatches, ``ValueError`` for unzip).
"""

from __future__ import annotations

from typing import Any

__all__ = [
    'CannotUnwrapErrError',
    'CannotUnwrapLeftFromRightError',
    'CannotUnwrapNothingError',
    'CannotUnwrapOkError',
    'CannotUnwrapRightFromLeftError',
    'ExpectedEitherError',
    'ExpectedOptionError',
    'ExpectedTypeError',
    'FlatMapError',
    'FlatMapMustReturnEitherError',
    'FlatMapMustReturnOptionError',
    'FlatMapMustReturnResultError',
    'InvalidCallbackError',
    'InvalidLazyEitherCallbackError',
    'InvalidLazyOptionCallbackError',
    'MonadError',
    'TransposeError',
    'TransposeExpectedOkWithOptionError',
    'TransposeExpectedSomeWithResultError',
    'UnwrapError',
    'UnzipError',
    'UnzipExpectedRightWithTupleError',
    'UnzipExpectedSomeWithTupleError',
]


def _type_name(value: Any) -> str:
    return type(value).__name__


class MonadError(Exception):
    """Base class for every error raised by klaw-monad."""


# --- Unwrapping ---


class UnwrapError(MonadError, RuntimeError):
    """A value was extracted from the variant that does not hold one."""

    default_message = 'Cannot unwrap value'

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class CannotUnwrapNothingError(UnwrapError):
    """unwrap() or expect() was called on Nothing."""

    default_message = 'Called unwrap on Nothing'


class CannotUnwrapErrError(UnwrapError):
    """unwrap() or expect() was called on Err."""

    default_message = 'Called unwrap on Err'

    def __init__(self, message: str | None = None, *, error: Any = None) -> None:
        self.error = error
        if message is None and error is not None:
            message = f'Called unwrap on Err: {error!r}'
        super().__init__(message)


class CannotUnwrapOkError(UnwrapError):
    """unwrap_err() or expect_err() was called on Ok."""

    default_message = 'Called unwrap_err on Ok'

    def __init__(self, message: str | None = None, *, value: Any = None) -> None:
        self.value = value
        if message is None and value is not None:
            message = f'Called unwrap_err on Ok: {value!r}'
        super().__init__(message)


class CannotUnwrapRightFromLeftError(UnwrapError):
    """unwrap() or expect() was called on Left."""

    default_message = 'Cannot unwrap Right value from Left.'


class CannotUnwrapLeftFromRightError(UnwrapError):
    """unwrap_left() was called on Right."""

    default_message = 'Cannot unwrap Left value from Right.'


# --- Shape mismatches ---


class ExpectedTypeError(MonadError, TypeError):
    """A value of the wrong family was produced where a wrapper was required."""

    expected = 'wrapper'

    def __init__(self, message: str, actual: Any = None) -> None:
        self.actual = actual
        super().__init__(message)

    @classmethod
    def from_value(cls, actual: Any) -> ExpectedTypeError:
        """Build the error describing ``actual``."""
        return cls(f'Expected instance of {cls.expected}, got {_type_name(actual)}', actual)


class ExpectedOptionError(ExpectedTypeError):
    """A lazy producer or combinator returned something other than an Option."""

    expected = 'Option'


class ExpectedEitherError(ExpectedTypeError):
    """A lazy producer, sequence element or traverse callback was not an Either."""

    expected = 'Either'


class TransposeError(MonadError, TypeError):
    """transpose() was called on a wrapper whose payload has the wrong shape."""

    template = '{name}'

    def __init__(self, message: str, actual: Any = None) -> None:
        self.actual = actual
        super().__init__(message)

    @classmethod
    def from_value(cls, actual: Any) -> TransposeError:
        """Build the error describing ``actual``."""
        return cls(cls.template.format(name=_type_name(actual)), actual)


class TransposeExpectedSomeWithResultError(TransposeError):
    """Option.transpose() found a Some that does not hold a Result."""

    template = 'Option.transpose expects Some(Result), got Some({name})'


class TransposeExpectedOkWithOptionError(TransposeError):
    """Result.transpose() found an Ok that does not hold an Option."""

    template = 'Result.transpose expects Ok(Option), got Ok({name})'


class UnzipError(MonadError, ValueError):
    """unzip() was called on a wrapper whose payload is not a pair."""

    default_message = 'unzip expects a pair'

    def __init__(self, message: str | None = None, actual: Any = None) -> None:
        self.actual = actual
        super().__init__(message or self.default_message)


class UnzipExpectedSomeWithTupleError(UnzipError):
    """Option.unzip() found a Some that does not hold a pair."""

    default_message = 'Option.unzip expects Some((a, b)).'


class UnzipExpectedRightWithTupleError(UnzipError):
    """Either.unzip() found a Right that does not hold a pair."""

    default_message = 'Either.unzip expects Right((a, b)).'


class FlatMapError(MonadError, TypeError):
    """A flat_map() callback returned a value outside its family."""

    family = 'a wrapper'

    def __init__(self, actual: Any = None) -> None:
        self.actual = actual
        super().__init__(
            f'Callables passed to flat_map() must return {self.family}, '
            f'got {_type_name(actual)}. Maybe you should use map() instead?'
        )


class FlatMapMustReturnOptionError(FlatMapError):
    """Option.flat_map() callback did not return an Option."""

    family = 'an Option'


class FlatMapMustReturnEitherError(FlatMapError):
    """Either.flat_map() callback did not return an Either."""

    family = 'an Either'


class FlatMapMustReturnResultError(FlatMapError):
    """Result.and_then() callback did not return a Result."""

    family = 'a Result'


# --- Lazy construction ---


class InvalidCallbackError(MonadError, TypeError):
    """A lazy wrapper was constructed with something that is not callable."""

    def __init__(self, callback: Any = None) -> None:
        self.callback = callback
        super().__init__(f'Invalid callback given: {_type_name(callback)} is not callable')


class InvalidLazyOptionCallbackError(InvalidCallbackError):
    """LazyOption was given a non-callable producer."""


class InvalidLazyEitherCallbackError(InvalidCallbackError):
    """LazyEither was given a non-callable producer."""
