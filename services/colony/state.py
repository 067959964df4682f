"""In-memory state for the Colony Controller.

Holds one AgentStateMachine per live agent plus the colony-wide transition
counters. Lost on process restart; everything that must survive lives in
agent memory.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from colonybot import AgentStateMachine, TransitionCounters

logger = logging.getLogger(__name__)


@dataclass
class ColonyState:
    """Machine table and counters owned by a single controller."""

    machines: dict[str, AgentStateMachine] = field(default_factory=dict)
    counters: TransitionCounters = field(default_factory=TransitionCounters)
    last_memory_sweep: int = 0

    def get_machine(self, name: str) -> AgentStateMachine | None:
        return self.machines.get(name)

    def add_machine(self, machine: AgentStateMachine) -> None:
        self.machines[machine.name] = machine

    def drop_missing(self, live_names: Iterable[str]) -> list[str]:
        """Retire and remove machines whose agents are no longer live.

        Returns the removed names.
        """
        live = set(live_names)
        gone = [name for name in self.machines if name not in live]
        for name in gone:
            self.machines.pop(name).retire(self.counters)
            logger.info("Dropped state machine for %s", name)
        return gone
