"""Library configuration: MonadConfig and initialization."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from dataclasses import dataclass

from klaw_monad._logging import configure_logging, get_logger
from klaw_monad.abort import default_abort_unless

__all__ = [
    'MonadConfig',
    'get_config',
    'init',
    'reset_config',
]

logger = get_logger(__name__)

_LOG_LEVELS = frozenset({'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'})
_FALSY = frozenset({'0', 'false', 'no', 'off'})


@dataclass(frozen=True)
class MonadConfig:
    """Configuration for klaw-monad.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None leaves logging alone.
        json_logs: Emit JSON logs when logging is configured.
        abort_handler: Callable ``(condition, status, message)`` used by
            ``Option.unwrap_or_abort`` and ``Option.unwrap_or_abort_unless``.
    """

    log_level: str | None = None
    json_logs: bool = True
    abort_handler: Callable[[bool, int, str], None] = default_abort_unless


# Active configuration (set by init())
_config: MonadConfig | None = None


def _detect_log_level() -> str | None:
    """Read KLAW_MONAD_LOG_LEVEL, ignoring unknown values."""
    env_level = os.environ.get('KLAW_MONAD_LOG_LEVEL', '').upper()
    if not env_level:
        return None
    if env_level not in _LOG_LEVELS:
        logging.warning("Unknown KLAW_MONAD_LOG_LEVEL value '%s', ignoring", env_level)
        return None
    return env_level


def _detect_json_logs() -> bool:
    """Read KLAW_MONAD_JSON_LOGS; anything but a falsy word means JSON."""
    env_value = os.environ.get('KLAW_MONAD_JSON_LOGS', '').lower()
    return env_value not in _FALSY


def init(
    log_level: str | None = None,
    *,
    json_logs: bool | None = None,
    abort_handler: Callable[[bool, int, str], None] | None = None,
) -> MonadConfig:
    """Initialize klaw-monad with the given configuration.

    Explicit arguments win over the environment, which wins over defaults.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). Falls back to
            KLAW_MONAD_LOG_LEVEL. None leaves logging unconfigured.
        json_logs: JSON (True) or console (False) output. Falls back to
            KLAW_MONAD_JSON_LOGS.
        abort_handler: Replacement for ``default_abort_unless``.

    Returns:
        The MonadConfig that was set.

    Example:
        ```python
        from klaw_monad.config import init

        def abort(condition, status, message):
            if not condition:
                raise HTTPException(status, message)

        init(log_level='DEBUG', abort_handler=abort)
        ```
    """
    global _config  # noqa: PLW0603

    resolved_level = log_level.upper() if log_level is not None else _detect_log_level()
    resolved_json = json_logs if json_logs is not None else _detect_json_logs()

    _config = MonadConfig(
        log_level=resolved_level,
        json_logs=resolved_json,
        abort_handler=abort_handler or default_abort_unless,
    )

    if resolved_level is not None:
        configure_logging(resolved_level, json_output=resolved_json)
        logger.info('klaw-monad configured', log_level=resolved_level, json_logs=resolved_json)

    return _config


def get_config() -> MonadConfig:
    """Get the active configuration.

    Returns the defaults when ``init()`` has not been called, so the
    library works without any setup.
    """
    if _config is None:
        return MonadConfig()
    return _config


def reset_config() -> None:
    """Forget the active configuration."""
    global _config  # noqa: PLW0603
    _config = None
