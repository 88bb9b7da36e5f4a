"""Deferred, memoized Option and Either wrappers.

A lazy wrapper holds a producer and its arguments. The first operation
that needs the value runs the producer, checks that it returned the right
family, caches it, and forwards the operation to it. Every later operation
forwards to the cached instance, so ``LazyOption(f).or_(x)`` returns the
Some that ``f`` produced, not the wrapper.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any

from klaw_monad._internal.sync import Lazy
from klaw_monad._logging import get_logger
from klaw_monad.errors import (
    ExpectedEitherError,
    ExpectedOptionError,
    InvalidLazyEitherCallbackError,
    InvalidLazyOptionCallbackError,
)
from klaw_monad.types.either import Either
from klaw_monad.types.option import Option

__all__ = ['LazyEither', 'LazyOption']

logger = get_logger(__name__)

_OPTION_METHODS = (
    'is_some',
    'is_none',
    'unwrap',
    'expect',
    'unwrap_or',
    'unwrap_or_else',
    'unwrap_or_raise',
    'unwrap_or_default',
    'to_nullable',
    'map',
    'flat_map',
    'filter',
    'filter_not',
    'select',
    'reject',
    'and_',
    'or_',
    'or_else',
    'xor',
    'map_or',
    'map_or_else',
    'map_or_default',
    'zip',
    'zip_with',
    'unzip',
    'flatten',
    'fold_left',
    'fold_right',
    'contains',
    'is_some_and',
    'is_none_or',
    'inspect',
    'for_all',
    'transpose',
    'ok_or',
    'ok_or_else',
    'cloned',
    'match',
)

_EITHER_METHODS = (
    'is_right',
    'is_left',
    'is_right_and',
    'is_left_and',
    'map',
    'map_left',
    'bimap',
    'flat_map',
    'filter',
    'for_all',
    'inspect',
    'for_left',
    'match',
    'swap',
    'unwrap',
    'unwrap_left',
    'expect',
    'unwrap_or',
    'unwrap_or_else',
    'contains',
    'contains_left',
    'flatten',
    'and_',
    'or_',
    'xor',
    'map_or',
    'map_or_else',
    'zip',
    'zip_with',
    'unzip',
    'to_option',
    'to_result',
    'cloned',
)


def _forward(name: str, owner: str) -> Callable[..., Any]:
    """Build a method that runs ``name`` on the forced instance."""

    def method(self: Any, *args: Any, **kwargs: Any) -> Any:
        return getattr(self.force(), name)(*args, **kwargs)

    method.__name__ = name
    method.__qualname__ = f'{owner}.{name}'
    method.__doc__ = f'Force the wrapper and call ``{name}`` on the result.'
    return method


def _producer_name(callback: Callable[..., Any]) -> str:
    return getattr(callback, '__qualname__', None) or repr(callback)


class LazyOption[T](Option[T]):
    """An Option whose value is produced on first use.

    Args:
        callback: Producer returning an Option.
        arguments: Positional arguments passed to the producer.

    Raises:
        InvalidLazyOptionCallbackError: If ``callback`` is not callable.

    Examples:
        >>> calls = []
        >>> opt = LazyOption(lambda: calls.append(1) or Some(5))
        >>> opt.map(lambda x: x * 2)
        Some(value=10)
        >>> opt.unwrap(), len(calls)
        (5, 1)
    """

    __slots__ = ('_arguments', '_callback', '_lazy')

    def __init__(self, callback: Callable[..., Option[T]], arguments: Sequence[Any] = ()) -> None:
        if not callable(callback):
            raise InvalidLazyOptionCallbackError(callback)
        self._callback = callback
        self._arguments = tuple(arguments)
        self._lazy: Lazy[Option[T]] = Lazy(self._produce)

    @classmethod
    def create(cls, callback: Callable[..., Option[T]], arguments: Sequence[Any] = ()) -> LazyOption[T]:
        """Alternate constructor, same as ``LazyOption(callback, arguments)``."""
        return cls(callback, arguments)

    def _produce(self) -> Option[T]:
        option = self._callback(*self._arguments)
        if not isinstance(option, Option):
            raise ExpectedOptionError.from_value(option)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug('lazy value forced', kind='option', producer=_producer_name(self._callback))
        return option

    def force(self) -> Option[T]:
        """Run the producer if needed and return the cached Option.

        Raises:
            ExpectedOptionError: If the producer returned something else.
                Nothing is cached, so the next call retries.
        """
        return self._lazy.get()

    def is_evaluated(self) -> bool:
        """Check whether the producer has already run successfully."""
        return self._lazy.is_initialized()

    def __repr__(self) -> str:
        if self._lazy.is_initialized():
            return f'LazyOption({self._lazy.peek()!r})'
        return 'LazyOption(<unevaluated>)'


class LazyEither[L, R](Either[L, R]):
    """An Either whose value is produced on first use.

    Args:
        callback: Producer returning an Either.
        arguments: Positional arguments passed to the producer.

    Raises:
        InvalidLazyEitherCallbackError: If ``callback`` is not callable.
    """

    __slots__ = ('_arguments', '_callback', '_lazy')

    def __init__(self, callback: Callable[..., Either[L, R]], arguments: Sequence[Any] = ()) -> None:
        if not callable(callback):
            raise InvalidLazyEitherCallbackError(callback)
        self._callback = callback
        self._arguments = tuple(arguments)
        self._lazy: Lazy[Either[L, R]] = Lazy(self._produce)

    @classmethod
    def create(cls, callback: Callable[..., Either[L, R]], arguments: Sequence[Any] = ()) -> LazyEither[L, R]:
        """Alternate constructor, same as ``LazyEither(callback, arguments)``."""
        return cls(callback, arguments)

    def _produce(self) -> Either[L, R]:
        either = self._callback(*self._arguments)
        if not isinstance(either, Either):
            raise ExpectedEitherError.from_value(either)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug('lazy value forced', kind='either', producer=_producer_name(self._callback))
        return either

    def force(self) -> Either[L, R]:
        """Run the producer if needed and return the cached Either.

        Raises:
            ExpectedEitherError: If the producer returned something else.
                Nothing is cached, so the next call retries.
        """
        return self._lazy.get()

    def is_evaluated(self) -> bool:
        """Check whether the producer has already run successfully."""
        return self._lazy.is_initialized()

    def __repr__(self) -> str:
        if self._lazy.is_initialized():
            return f'LazyEither({self._lazy.peek()!r})'
        return 'LazyEither(<unevaluated>)'


for _name in _OPTION_METHODS:
    setattr(LazyOption, _name, _forward(_name, 'LazyOption'))

for _name in _EITHER_METHODS:
    setattr(LazyEither, _name, _forward(_name, 'LazyEither'))

del _name
