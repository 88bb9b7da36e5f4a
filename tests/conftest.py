"""Pytest configuration and shared fixtures for klaw-monad tests."""

import pytest

from klaw_monad._logging import clear_log_hooks
from klaw_monad.config import reset_config


@pytest.fixture
def clean_state():
    """Reset configuration and log hooks around a test."""
    reset_config()
    clear_log_hooks()
    yield
    reset_config()
    clear_log_hooks()


@pytest.fixture
def counter():
    """A call counter: ``counter.calls`` grows each time ``counter(x)`` runs."""

    class Counter:
        def __init__(self):
            self.calls = []

        def __call__(self, *args):
            self.calls.append(args)
            return args[0] if args else None

    return Counter()
