"""ColonyController — per-tick driver for every agent plus production decisions."""

import functools
import logging
from dataclasses import dataclass, field

from colonybot import (
    Actions,
    AgentMemory,
    AgentStateMachine,
    AgentView,
    ColonyConfig,
    DecisionContext,
    MemoryStore,
    Production,
    Role,
    RoomQuery,
    Structure,
    StructureKind,
    TickContext,
    loadout_cost,
)

from agents import dispatch
from services.colony.rules import (
    PopulationSnapshot,
    deposit_count,
    next_role,
    production_budget,
    production_name,
    take_snapshot,
)
from services.colony.state import ColonyState

logger = logging.getLogger(__name__)


@dataclass
class TickReport:
    """What happened during one controller tick."""

    tick: int
    advanced: int = 0
    failed: list[str] = field(default_factory=list)
    dropped: list[str] = field(default_factory=list)
    spawned: list[str] = field(default_factory=list)


class ColonyController:
    """Owns the agent state machines for one room.

    Each tick: advance every live agent, drop machines of dead agents, then
    produce new agents while the population is below the floor.
    """

    def __init__(
        self,
        room: RoomQuery,
        actions: Actions,
        memory: MemoryStore,
        production: Production,
        config: ColonyConfig | None = None,
    ) -> None:
        self._room = room
        self._actions = actions
        self._memory = memory
        self._production = production
        self._config = config or ColonyConfig()
        self._state = ColonyState()

    @property
    def state(self) -> ColonyState:
        """Expose state for testing."""
        return self._state

    @property
    def config(self) -> ColonyConfig:
        return self._config

    @property
    def room(self) -> RoomQuery:
        return self._room

    def tick(self) -> TickReport:
        """Run one full colony tick."""
        report = TickReport(tick=self._room.time())
        agents = list(self._room.live_agents())

        tick_ctx = TickContext(room=self._room, actions=self._actions, memory=self._memory)
        decision_ctx = DecisionContext(
            room=self._room,
            memory=self._memory,
            counters=self._state.counters,
            builder_cap=self._config.builder_cap,
        )

        for agent in agents:
            machine = self._state.get_machine(agent.name)
            if machine is None:
                machine = self._create_machine(agent)
            try:
                machine.advance(agent, tick_ctx, decision_ctx)
                report.advanced += 1
            except Exception:
                logger.exception("[tick %d] %s: tick failed", report.tick, agent.name)
                report.failed.append(agent.name)

        report.dropped = self._state.drop_missing(a.name for a in agents)
        report.spawned = self.run_production(len(agents))
        return report

    def run_production(self, population: int) -> list[str]:
        """Request new agents from idle spawns while below the population floor.

        Returns the names of agents whose production was accepted.
        """
        if population >= self._config.population_floor:
            return []

        tick = self._room.time()
        snapshot = take_snapshot(self._room, self._memory)
        source_count = len(self._room.sources())
        deposits = deposit_count(self._room)
        spawned: list[str] = []

        for spawn in self._room.structures(StructureKind.SPAWN):
            if snapshot.total >= self._config.population_floor:
                break
            if spawn.spawning:
                continue

            # Re-evaluated per spawn so earlier births this tick are counted
            role = next_role(snapshot, source_count, deposits, self._config.min_generalists)
            name = self._try_spawn(spawn, role, snapshot, tick, len(spawned))
            if name is not None:
                spawned.append(name)
                snapshot = snapshot.with_birth(role)

        return spawned

    def cleanup_memory(self) -> list[str]:
        """Delete memory records of agents that are no longer live."""
        live = {a.name for a in self._room.live_agents()}
        removed = [name for name in list(self._memory.names()) if name not in live]
        for name in removed:
            logger.info("Deleting memory for dead agent %s", name)
            self._memory.delete(name)
        self._state.last_memory_sweep = self._room.time()
        return removed

    def _try_spawn(
        self,
        spawn: Structure,
        role: Role,
        snapshot: PopulationSnapshot,
        tick: int,
        sequence: int,
    ) -> str | None:
        budget = production_budget(self._room, snapshot, self._config)
        body = dispatch.build_loadout(role, budget, self._config.max_body_parts)
        cost = loadout_cost(body)
        available = self._room.energy_available()
        if not body or cost > available:
            logger.debug(
                "[tick %d] %s: waiting for energy (%d/%d) to produce %s",
                tick,
                spawn.id,
                available,
                cost,
                role,
            )
            return None

        name = production_name(role, tick, sequence)
        code = self._production.spawn_agent(spawn, body, name, AgentMemory(role=role))
        if not code.ok:
            logger.warning("[tick %d] %s: couldn't produce %s: %s", tick, spawn.id, name, code)
            return None

        logger.info(
            "[tick %d] %s: producing %s with %d parts (cost %d)",
            tick,
            spawn.id,
            name,
            len(body),
            cost,
        )
        return name

    def _create_machine(self, agent: AgentView) -> AgentStateMachine:
        memory = self._memory.get(agent.name)
        if memory is None:
            logger.warning("No memory for %s, running it as a generalist", agent.name)
            role = Role.GENERALIST
        else:
            role = memory.role
        machine = AgentStateMachine(
            agent.name, role, functools.partial(dispatch.choose_next_state, role)
        )
        self._state.add_machine(machine)
        logger.info("New state machine for %s (%s)", agent.name, role)
        return machine
