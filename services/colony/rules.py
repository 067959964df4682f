"""Colony population rules — pure functions for role balancing and budgets."""

import logging
from collections import Counter
from dataclasses import dataclass, field

from colonybot import (
    AgentMemory,
    ColonyConfig,
    MemoryStore,
    Role,
    RoomQuery,
    StateName,
    StructureKind,
    total_spawn_capacity,
)
from colonybot.config import DEFAULT_MIN_GENERALISTS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PopulationSnapshot:
    """Live agents counted by role label and by current task label.

    Agents without a memory record count toward `total` only.
    """

    total: int = 0
    roles: Counter[Role] = field(default_factory=Counter)
    states: Counter[StateName] = field(default_factory=Counter)

    def count(self, role: Role) -> int:
        return self.roles[role]

    def in_state(self, state: StateName) -> int:
        return self.states[state]

    def with_birth(self, role: Role) -> "PopulationSnapshot":
        """Snapshot including one more agent of `role`, produced this tick."""
        roles = Counter(self.roles)
        roles[role] += 1
        states = Counter(self.states)
        states[StateName.IDLE] += 1
        return PopulationSnapshot(total=self.total + 1, roles=roles, states=states)


def take_snapshot(room: RoomQuery, memory: MemoryStore) -> PopulationSnapshot:
    """Scan live agents' memory records into a population snapshot."""
    roles: Counter[Role] = Counter()
    states: Counter[StateName] = Counter()
    total = 0
    for agent in room.live_agents():
        total += 1
        record: AgentMemory | None = memory.get(agent.name)
        if record is None:
            continue
        roles[record.role] += 1
        states[record.current_state] += 1
    return PopulationSnapshot(total=total, roles=roles, states=states)


def supported_miners(source_count: int, deposit_count: int) -> int:
    """How many miner/hauler pairs the room can keep busy."""
    return max(0, min(source_count, deposit_count))


def next_role(
    snapshot: PopulationSnapshot,
    source_count: int,
    deposit_count: int,
    min_generalists: int = DEFAULT_MIN_GENERALISTS,
) -> Role:
    """Pick the role for the next agent.

    1. Fewer than `min_generalists` agents in total → generalist
    2. No source/container pairing possible → generalist
    3. Miners or haulers below the supported count → whichever is behind
       (miner first on a tie)
    4. Builders kept at or below upgraders
    """
    if snapshot.total < min_generalists:
        return Role.GENERALIST

    supported = supported_miners(source_count, deposit_count)
    if supported == 0:
        return Role.GENERALIST

    miners = snapshot.count(Role.MINER)
    haulers = snapshot.count(Role.HAULER)
    if miners < supported or haulers < supported:
        if miners < supported and (miners <= haulers or haulers >= supported):
            return Role.MINER
        return Role.HAULER

    if snapshot.count(Role.BUILDER) < snapshot.count(Role.UPGRADER):
        return Role.BUILDER
    return Role.UPGRADER


def production_budget(
    room: RoomQuery, snapshot: PopulationSnapshot, config: ColonyConfig
) -> int:
    """Energy to size the next loadout against.

    A nearly empty colony sizes against what it has right now so it can always
    recover; otherwise against the full spawn+extension capacity.
    """
    if snapshot.total < config.min_generalists:
        return room.energy_available()
    return total_spawn_capacity(room)


def deposit_count(room: RoomQuery) -> int:
    return len(room.structures(StructureKind.CONTAINER))


def production_name(role: Role, tick: int, sequence: int) -> str:
    """Unique agent name: role, game time, and a per-tick counter."""
    return f"{role}-{tick}-{sequence}"
