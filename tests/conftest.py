"""Pytest configuration and shared fixtures for tofupilot tests."""

import asyncio
import os

import pytest


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Auto-cleanup: Clear TofuPilot environment variables before each test.

    This prevents a developer's real key or URL from leaking into tests.
    """
    for key in list(os.environ.keys()):
        if key.startswith("TOFUPILOT_"):
            monkeypatch.delenv(key, raising=False)

    yield


@pytest.fixture
def sleep_calls(monkeypatch):
    """Patch asyncio.sleep to return immediately and record requested delays."""
    calls: list[float] = []
    real_sleep = asyncio.sleep

    async def fake_sleep(delay, *args, **kwargs):
        calls.append(delay)
        await real_sleep(0)

    monkeypatch.setattr(asyncio, "sleep", fake_sleep)
    return calls
