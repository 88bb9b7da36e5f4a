"""Thread-safe once-initialization primitives built on aiologic.

aiologic locks work the same from plain threads and from event loops, so
a lazy value shared between a worker pool and async code is still
initialized exactly once.
"""

from __future__ import annotations

from collections.abc import Callable

import aiologic

__all__ = ['Lazy', 'OnceCell']


class OnceCell[T]:
    """A cell that can be written to exactly once.

    The set/unset state is tracked separately from the stored value, so
    ``None`` (or ``Nothing``) is a perfectly valid payload. If the
    initializer raises, the cell stays empty and the next call retries.

    Examples:
        >>> cell: OnceCell[int] = OnceCell()
        >>> cell.is_set()
        False
        >>> cell.get_or_init(lambda: 42)
        42
        >>> cell.get_or_init(lambda: 100)
        42
    """

    __slots__ = ('_is_set', '_lock', '_value')

    def __init__(self) -> None:
        self._lock = aiologic.Lock()
        self._value: T | None = None
        self._is_set = False

    def get(self) -> T | None:
        """Get the value if set, otherwise None."""
        return self._value if self._is_set else None

    def get_or_init(self, init: Callable[[], T]) -> T:
        """Get the value, or initialize it with the given function.

        Only one thread runs ``init`` at a time; the others wait on the
        lock and then read the stored value.

        Args:
            init: Function to call to initialize the value.

        Returns:
            The stored or newly initialized value.
        """
        if self._is_set:
            return self._value  # type: ignore[return-value]

        with self._lock:
            if not self._is_set:
                self._value = init()
                self._is_set = True
            return self._value  # type: ignore[return-value]

    def is_set(self) -> bool:
        """Check if the value has been set."""
        return self._is_set


class Lazy[T]:
    """A lazily initialized value.

    The initialization function runs on first access and its result is
    cached. A raising initializer leaves nothing cached.
    """

    __slots__ = ('_cell', '_init')

    def __init__(self, init: Callable[[], T]) -> None:
        self._cell: OnceCell[T] = OnceCell()
        self._init = init

    def get(self) -> T:
        """Get the value, initializing if necessary."""
        return self._cell.get_or_init(self._init)

    def peek(self) -> T | None:
        """Return the cached value without initializing."""
        return self._cell.get()

    def is_initialized(self) -> bool:
        """Check if the value has been initialized."""
        return self._cell.is_set()
