"""Tests for the async SandboxRunner."""

import asyncio

import pytest

from colonybot import ColonyConfig, Role

from services.sandbox.runner import SandboxRunner
from services.sandbox.state import starter_room


@pytest.fixture
async def runner(monkeypatch: pytest.MonkeyPatch) -> SandboxRunner:
    """Start a fast sandbox runner, tear it down after the test."""
    monkeypatch.setenv("SANDBOX_TICK_INTERVAL", "0.01")
    monkeypatch.setenv("SANDBOX_TICKS", "0")
    r = SandboxRunner(starter_room(), ColonyConfig())
    await r.start()
    yield r  # type: ignore[misc]
    await r.stop()


class TestSandboxRunner:
    async def test_ticks_advance(self, runner: SandboxRunner):
        await asyncio.sleep(0.2)
        assert runner.ticks_run > 1
        assert runner.room.time() == runner.ticks_run + 1

    async def test_colony_bootstraps(self, runner: SandboxRunner):
        await asyncio.sleep(0.1)
        names = [a.name for a in runner.room.live_agents()]
        assert names
        assert runner.room.get(names[0]).role == Role.GENERALIST

    async def test_stops_after_tick_limit(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("SANDBOX_TICK_INTERVAL", "0")
        monkeypatch.setenv("SANDBOX_TICKS", "25")
        r = SandboxRunner(starter_room())
        await r.start()
        await asyncio.wait_for(r.finished.wait(), timeout=5)
        await r.stop()
        assert r.ticks_run == 25
        assert r.last_report is not None and r.last_report.tick == 25
