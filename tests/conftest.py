"""
Pytest configuration and shared fixtures for Underbar tests.
"""

import pytest

from underbar.runtime import advanced, timers
from underbar.runtime.timers import VirtualTimer


@pytest.fixture
def virtual_timer():
    """Virtual clock and scheduler starting at t=0."""
    return VirtualTimer()


@pytest.fixture
def virtual_defaults(monkeypatch, virtual_timer):
    """Install a virtual timer as the process-wide scheduler and clock."""
    monkeypatch.setattr(timers, "_default_scheduler", virtual_timer)
    monkeypatch.setattr(timers, "_default_clock", virtual_timer)
    return virtual_timer


@pytest.fixture
def seeded_rng(monkeypatch):
    """Seed the shuffle generator, restoring the previous one afterwards."""
    monkeypatch.setattr(advanced, "_rng", advanced._rng)
    advanced.set_seed(1234)


@pytest.fixture
def call_recorder():
    """Factory for functions that record their calls and return a counter."""

    def _create(result=None):
        calls = []

        def recorded(*args, **kwargs):
            calls.append((args, kwargs))
            return result if result is not None else len(calls)

        recorded.calls = calls
        return recorded

    return _create
