"""Per-tick entry point handed to the host."""

import logging

from services.colony.controller import ColonyController, TickReport

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"

_logging_ready = False


def setup_logging(level: int = logging.INFO) -> None:
    """Configure logging on the first call only."""
    global _logging_ready
    if _logging_ready:
        return
    logging.basicConfig(level=level, format=LOG_FORMAT)
    _logging_ready = True


def game_loop(controller: ColonyController) -> TickReport:
    """Run one colony tick, sweeping dead agents' memory periodically."""
    setup_logging()

    report = controller.tick()

    if report.tick % controller.config.memory_gc_interval == 0:
        logger.info("[tick %d] Running memory cleanup", report.tick)
        controller.cleanup_memory()

    return report
