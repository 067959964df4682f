"""SandboxRunner — drives a colony against the in-memory host on a timer."""

import asyncio
import logging
import os

from colonybot import ColonyConfig

from services.colony.controller import ColonyController, TickReport
from services.colony.loop import game_loop
from services.sandbox.state import SandboxRoom, starter_room

logger = logging.getLogger(__name__)

DEFAULT_TICK_INTERVAL = 1.0
DEFAULT_MAX_TICKS = 0  # 0 = run until stopped


class SandboxRunner:
    """Ticks a ColonyController at a configurable interval.

    The sandbox room serves as every host interface at once.
    """

    def __init__(
        self,
        room: SandboxRoom | None = None,
        config: ColonyConfig | None = None,
    ) -> None:
        self._room = room if room is not None else starter_room()
        self._controller = ColonyController(
            self._room, self._room, self._room, self._room, config or ColonyConfig.from_env()
        )
        self._tick_interval = float(
            os.environ.get("SANDBOX_TICK_INTERVAL", DEFAULT_TICK_INTERVAL)
        )
        self._max_ticks = int(os.environ.get("SANDBOX_TICKS", DEFAULT_MAX_TICKS))
        self._ticks_run = 0
        self._last_report: TickReport | None = None
        self._running = False
        self._tick_task: asyncio.Task[None] | None = None
        self.finished = asyncio.Event()

    @property
    def room(self) -> SandboxRoom:
        return self._room

    @property
    def controller(self) -> ColonyController:
        return self._controller

    @property
    def ticks_run(self) -> int:
        return self._ticks_run

    @property
    def last_report(self) -> TickReport | None:
        return self._last_report

    async def start(self) -> None:
        """Start the tick loop."""
        self._running = True
        self._tick_task = asyncio.create_task(self._tick_loop())
        logger.info("Sandbox started (tick interval: %.2fs)", self._tick_interval)

    async def stop(self) -> None:
        """Clean shutdown."""
        self._running = False
        if self._tick_task is not None:
            self._tick_task.cancel()
            try:
                await self._tick_task
            except asyncio.CancelledError:
                pass
        logger.info("Sandbox stopped after %d ticks", self._ticks_run)

    async def _tick_loop(self) -> None:
        while self._running:
            self._do_tick()
            if self._max_ticks and self._ticks_run >= self._max_ticks:
                self._running = False
                self.finished.set()
                break
            await asyncio.sleep(self._tick_interval)

    def _do_tick(self) -> None:
        """Execute one tick: run the colony, then advance the room clock."""
        report = game_loop(self._controller)
        self._last_report = report
        self._ticks_run += 1
        self._room.advance_tick()

        logger.info(
            "[tick %d] %d agents advanced, %d spawned, controller progress %d",
            report.tick,
            report.advanced,
            len(report.spawned),
            self._room.controller_progress,
        )
