"""Structured logging for klaw-monad.

Uses structlog's ProcessorFormatter so structlog events and stdlib records
share one renderer. Library loggers wrap stdlib loggers, which keeps an
unconfigured host silent: events are filtered by the stdlib level until
``configure_logging`` (or ``klaw_monad.config.init``) installs a handler.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = [
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    'get_logger',
    'remove_log_hook',
]


def _get_shared_processors() -> list[Any]:
    """Get processors shared between structlog and stdlib foreign logs."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        structlog.stdlib.ExtraAdder(),
        _create_hook_processor(),
    ]


def _get_structlog_processors() -> list[Any]:
    """Get the full processor chain for structlog loggers."""
    return [
        structlog.stdlib.filter_by_level,
        *_get_shared_processors(),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]


def _get_renderer(json_output: bool = True) -> Any:
    """Get the appropriate renderer based on output format."""
    if json_output:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(
    level: str = 'INFO',
    *,
    json_output: bool = True,
) -> None:
    """Configure structlog with ProcessorFormatter for unified output.

    Args:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
        json_output: If True, emit JSON logs. If False, use console output.
    """
    structlog.configure(
        processors=_get_structlog_processors(),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_get_shared_processors(),
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _get_renderer(json_output),
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))


def get_logger(name: str | None = None) -> Any:
    """Get a structlog logger bound to the stdlib logger ``name``.

    Until ``configure_logging`` runs, structlog's default chain renders each
    event before the stdlib level discards it, so hot paths guard debug
    events with ``logger.isEnabledFor(logging.DEBUG)``.

    Args:
        name: Logger name, usually the caller's ``__name__``.

    Returns:
        A lazily bound structlog BoundLogger.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


# --- Logging Hooks ---

_log_hooks: list[Callable[[dict[str, Any]], None]] = []


def add_log_hook(hook: Callable[[dict[str, Any]], None]) -> None:
    """Register a hook to be called with a copy of each log entry.

    Args:
        hook: Callable that receives the event dict.
    """
    _log_hooks.append(hook)


def remove_log_hook(hook: Callable[[dict[str, Any]], None]) -> None:
    """Remove a previously registered log hook."""
    if hook in _log_hooks:
        _log_hooks.remove(hook)


def clear_log_hooks() -> None:
    """Remove all registered log hooks."""
    _log_hooks.clear()


def _create_hook_processor() -> Callable[[Any, str, dict[str, Any]], dict[str, Any]]:
    """Create a processor that invokes log hooks."""

    def hook_processor(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        for hook in _log_hooks:
            try:
                hook(event_dict.copy())
            except Exception:  # noqa: BLE001, S112
                continue  # a broken hook must not break logging
        return event_dict

    return hook_processor
