"""Entry point: python -m services.sandbox"""

import asyncio
import logging
import signal

from services.colony.loop import setup_logging
from services.sandbox.runner import SandboxRunner


async def main() -> None:
    setup_logging(logging.INFO)

    runner = SandboxRunner()
    loop = asyncio.get_running_loop()

    stop_event = asyncio.Event()

    def _signal_handler() -> None:
        logging.getLogger(__name__).info("Shutdown signal received")
        stop_event.set()

    for sig in (signal.SIGINT, signal.SIGTERM):
        loop.add_signal_handler(sig, _signal_handler)

    await runner.start()
    logging.getLogger(__name__).info("Sandbox is running. Press Ctrl+C to stop.")

    stop_wait = asyncio.create_task(stop_event.wait())
    done_wait = asyncio.create_task(runner.finished.wait())
    await asyncio.wait({stop_wait, done_wait}, return_when=asyncio.FIRST_COMPLETED)
    for task in (stop_wait, done_wait):
        task.cancel()
    await runner.stop()


if __name__ == "__main__":
    asyncio.run(main())
