"""Per-tick context objects and colony-wide transition counters."""

from collections import Counter
from dataclasses import dataclass, field

from colonybot.host.interfaces import Actions, MemoryStore, RoomQuery
from colonybot.models.memory import StateName

# Task states whose occupancy is counted colony-wide
COUNTED_STATES: frozenset[StateName] = frozenset(
    {StateName.HARVEST, StateName.BUILD, StateName.UPGRADE}
)

DEFAULT_BUILDER_CAP = 2


@dataclass
class TransitionCounters:
    """How many agents currently occupy each counted task state.

    Every `enter()` done by an entry hook is matched by exactly one `leave()`
    in the exit hook.
    """

    _counts: Counter[StateName] = field(default_factory=Counter)

    def enter(self, state: StateName) -> None:
        if state in COUNTED_STATES:
            self._counts[state] += 1

    def leave(self, state: StateName) -> None:
        if state not in COUNTED_STATES:
            return
        if self._counts[state] <= 0:
            raise ValueError(f"Unbalanced exit from {state!r}")
        self._counts[state] -= 1

    def count(self, state: StateName) -> int:
        return self._counts[state]

    @property
    def building(self) -> int:
        return self._counts[StateName.BUILD]

    @property
    def upgrading(self) -> int:
        return self._counts[StateName.UPGRADE]

    @property
    def harvesting(self) -> int:
        return self._counts[StateName.HARVEST]

    def total(self) -> int:
        return sum(self._counts.values())


@dataclass(frozen=True)
class TickContext:
    """What a task state may touch while executing one tick."""

    room: RoomQuery
    actions: Actions
    memory: MemoryStore

    @property
    def tick(self) -> int:
        return self.room.time()


@dataclass(frozen=True)
class DecisionContext:
    """Read-only inputs to a role decision policy. No action primitives."""

    room: RoomQuery
    memory: MemoryStore
    counters: TransitionCounters
    builder_cap: int = DEFAULT_BUILDER_CAP
