"""Abort capability behind ``Option.unwrap_or_abort``.

The library has no idea which web framework (if any) hosts it, so aborting
is an injected callable with the signature ``(condition, status, message)``.
The default raises ``AbortError``; a host installs its own handler through
``klaw_monad.config.init(abort_handler=...)``.
"""

from __future__ import annotations

import logging

from klaw_monad._logging import get_logger

__all__ = ['AbortError', 'abort_unless', 'default_abort_unless']

logger = get_logger(__name__)


class AbortError(Exception):
    """Request handling was aborted with an HTTP-style status."""

    def __init__(self, status: int = 404, message: str = '') -> None:
        self.status = status
        self.message = message
        super().__init__(f'{status}: {message}' if message else str(status))


def default_abort_unless(condition: bool, status: int, message: str) -> None:
    """Raise ``AbortError`` unless ``condition`` holds."""
    if condition:
        return
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug('request aborted', status=status, message=message)
    raise AbortError(status, message)


def abort_unless(condition: bool, status: int = 404, message: str | None = None) -> None:
    """Dispatch to the configured abort handler.

    Args:
        condition: When true, nothing happens.
        status: Status code handed to the handler.
        message: Optional message handed to the handler.
    """
    from klaw_monad.config import get_config

    get_config().abort_handler(condition, status, message or '')
