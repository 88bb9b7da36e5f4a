"""Tests for logging configuration and hooks."""

from __future__ import annotations

import logging
from typing import Any

import pytest

from klaw_monad._logging import (
    add_log_hook,
    clear_log_hooks,
    configure_logging,
    get_logger,
    remove_log_hook,
)


@pytest.fixture(autouse=True)
def cleanup_hooks() -> None:
    """Clear log hooks before and after each test."""
    clear_log_hooks()
    yield
    clear_log_hooks()


class TestLogHooks:
    """Tests for logging hooks functionality."""

    def test_hook_receives_log_events(self) -> None:
        """Registered hooks receive log entry dicts."""
        received: list[dict[str, Any]] = []
        configure_logging(level='DEBUG', json_output=True)
        add_log_hook(received.append)

        get_logger('klaw_monad.test').info('Test message', extra_field='extra_value')

        entries = [e for e in received if e.get('event') == 'Test message']
        assert len(entries) == 1
        assert entries[0]['extra_field'] == 'extra_value'
        assert entries[0]['level'] == 'info'

    def test_multiple_hooks_all_called(self) -> None:
        """Multiple registered hooks are all called."""
        calls: list[str] = []
        configure_logging(level='DEBUG', json_output=True)
        add_log_hook(lambda _: calls.append('hook1'))
        add_log_hook(lambda _: calls.append('hook2'))

        get_logger('klaw_monad.test').info('Test')

        assert 'hook1' in calls
        assert 'hook2' in calls

    def test_removed_hook_not_called(self) -> None:
        """remove_log_hook stops delivery."""
        received: list[dict[str, Any]] = []
        configure_logging(level='DEBUG', json_output=True)
        add_log_hook(received.append)
        remove_log_hook(received.append)

        get_logger('klaw_monad.test').info('Test')

        assert received == []

    def test_remove_unknown_hook_is_noop(self) -> None:
        """Removing a hook that was never added does nothing."""
        remove_log_hook(lambda _: None)

    def test_hook_failure_does_not_break_logging(self) -> None:
        """A raising hook does not stop later hooks."""
        received: list[dict[str, Any]] = []

        def broken(_: dict[str, Any]) -> None:
            raise RuntimeError('hook failed')

        configure_logging(level='DEBUG', json_output=True)
        add_log_hook(broken)
        add_log_hook(received.append)

        get_logger('klaw_monad.test').warning('still logged')

        assert any(e.get('event') == 'still logged' for e in received)

    def test_level_filters_before_hooks(self) -> None:
        """Events below the configured level never reach hooks."""
        received: list[dict[str, Any]] = []
        configure_logging(level='WARNING', json_output=False)
        add_log_hook(received.append)

        get_logger('klaw_monad.test').debug('too quiet')

        assert received == []


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_sets_root_level(self) -> None:
        """The root logger level follows the requested level."""
        configure_logging(level='ERROR')
        assert logging.getLogger().level == logging.ERROR

    def test_unknown_level_defaults_to_info(self) -> None:
        """An unknown level name falls back to INFO."""
        configure_logging(level='chatty')
        assert logging.getLogger().level == logging.INFO

    def test_single_handler(self) -> None:
        """Reconfiguring replaces the root handler."""
        configure_logging()
        configure_logging()
        assert len(logging.getLogger().handlers) == 1
