"""In-memory host for running a colony without a real simulation.

SandboxRoom implements every host interface the core consumes: room queries,
action primitives, durable agent memory (stored as JSON like a real host
would), and agent production.
"""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from pydantic import ValidationError

from colonybot import (
    CARRY_CAPACITY,
    ENERGY,
    ActionCode,
    AgentMemory,
    AgentView,
    BodyPart,
    ConstructionSite,
    Position,
    RoomObject,
    Source,
    Store,
    Structure,
    StructureKind,
    count_parts,
    loadout_cost,
)

from services.sandbox.rules import (
    BUILD_RANGE,
    HARVEST_RANGE,
    TRANSFER_RANGE,
    UPGRADE_RANGE,
    build_yield,
    harvest_yield,
    split_cost,
    step_toward,
    upgrade_yield,
)

logger = logging.getLogger(__name__)

# Capacity of each facility kind when none is given
DEFAULT_CAPACITY: dict[StructureKind, int] = {
    StructureKind.SPAWN: 300,
    StructureKind.EXTENSION: 50,
    StructureKind.STORAGE: 1_000_000,
    StructureKind.CONTAINER: 2000,
    StructureKind.TOWER: 1000,
}


@dataclass
class SandboxAgent:
    name: str
    pos: Position
    body: tuple[BodyPart, ...]
    energy: int = 0

    @property
    def capacity(self) -> int:
        return count_parts(self.body, BodyPart.CARRY) * CARRY_CAPACITY

    def parts(self, part: BodyPart) -> int:
        return count_parts(self.body, part)

    def view(self) -> AgentView:
        return AgentView(
            name=self.name,
            pos=self.pos,
            store=Store(capacity=self.capacity, contents={ENERGY: self.energy}),
            body=self.body,
        )


@dataclass
class SandboxStructure:
    id: str
    kind: StructureKind
    pos: Position
    energy: int = 0
    capacity: int = 0
    spawning: bool = False

    def view(self) -> Structure:
        store = None
        if self.capacity > 0:
            store = Store(capacity=self.capacity, contents={ENERGY: self.energy})
        return Structure(
            id=self.id, kind=self.kind, pos=self.pos, store=store, spawning=self.spawning
        )


@dataclass
class SandboxSource:
    id: str
    pos: Position
    energy: int
    energy_capacity: int = 3000

    def view(self) -> Source:
        return Source(
            id=self.id, pos=self.pos, energy=self.energy, energy_capacity=self.energy_capacity
        )


@dataclass
class SandboxSite:
    id: str
    pos: Position
    kind: StructureKind
    progress: int = 0
    progress_total: int = 100

    def view(self) -> ConstructionSite:
        return ConstructionSite(
            id=self.id,
            pos=self.pos,
            kind=self.kind,
            progress=self.progress,
            progress_total=self.progress_total,
        )


@dataclass
class SandboxRoom:
    """A single room with mutable objects, exposed as read-only snapshots."""

    name: str = "sim"
    current_tick: int = 1
    controller_progress: int = 0
    _agents: dict[str, SandboxAgent] = field(default_factory=dict)
    _structures: dict[str, SandboxStructure] = field(default_factory=dict)
    _sources: dict[str, SandboxSource] = field(default_factory=dict)
    _sites: dict[str, SandboxSite] = field(default_factory=dict)
    _memory: dict[str, str] = field(default_factory=dict)
    said: dict[str, str] = field(default_factory=dict)

    # --- Setup ---

    def pos(self, x: int, y: int) -> Position:
        return Position(x=x, y=y, room=self.name)

    def add_agent(
        self,
        name: str,
        x: int,
        y: int,
        body: Sequence[BodyPart] = (BodyPart.WORK, BodyPart.CARRY, BodyPart.MOVE),
        energy: int = 0,
        memory: AgentMemory | None = None,
    ) -> SandboxAgent:
        agent = SandboxAgent(name=name, pos=self.pos(x, y), body=tuple(body), energy=energy)
        self._agents[name] = agent
        if memory is not None:
            self.set(name, memory)
        return agent

    def add_structure(
        self,
        object_id: str,
        kind: StructureKind,
        x: int,
        y: int,
        energy: int = 0,
        capacity: int | None = None,
    ) -> SandboxStructure:
        if capacity is None:
            capacity = DEFAULT_CAPACITY.get(kind, 0)
        structure = SandboxStructure(
            id=object_id, kind=kind, pos=self.pos(x, y), energy=energy, capacity=capacity
        )
        self._structures[object_id] = structure
        return structure

    def add_source(self, object_id: str, x: int, y: int, energy: int = 3000) -> SandboxSource:
        source = SandboxSource(id=object_id, pos=self.pos(x, y), energy=energy)
        self._sources[object_id] = source
        return source

    def add_site(
        self,
        object_id: str,
        x: int,
        y: int,
        kind: StructureKind = StructureKind.EXTENSION,
        progress_total: int = 100,
    ) -> SandboxSite:
        site = SandboxSite(
            id=object_id, pos=self.pos(x, y), kind=kind, progress_total=progress_total
        )
        self._sites[object_id] = site
        return site

    def remove(self, object_id: str) -> None:
        """Destroy an object or kill an agent."""
        for table in (self._agents, self._structures, self._sources, self._sites):
            table.pop(object_id, None)

    def agent(self, name: str) -> SandboxAgent:
        return self._agents[name]

    def structure(self, object_id: str) -> SandboxStructure:
        return self._structures[object_id]

    def source(self, object_id: str) -> SandboxSource:
        return self._sources[object_id]

    def advance_tick(self) -> int:
        """Advance to the next tick; spawns finish their work."""
        self.current_tick += 1
        for structure in self._structures.values():
            structure.spawning = False
        return self.current_tick

    # --- RoomQuery ---

    def time(self) -> int:
        return self.current_tick

    def live_agents(self) -> list[AgentView]:
        return [a.view() for a in self._agents.values()]

    def structures(self, kind: StructureKind | None = None) -> list[Structure]:
        return [s.view() for s in self._structures.values() if kind is None or s.kind == kind]

    def sources(self, active_only: bool = False) -> list[Source]:
        return [s.view() for s in self._sources.values() if not active_only or s.energy > 0]

    def construction_sites(self) -> list[ConstructionSite]:
        return [s.view() for s in self._sites.values()]

    def resolve(self, object_id: str) -> RoomObject | None:
        if object_id in self._structures:
            return self._structures[object_id].view()
        if object_id in self._sources:
            return self._sources[object_id].view()
        if object_id in self._sites:
            return self._sites[object_id].view()
        if object_id in self._agents:
            return self._agents[object_id].view()
        return None

    def energy_available(self) -> int:
        return sum(s.energy for s in self._spawn_supply())

    def distance(self, a: Position, b: Position) -> int:
        return a.range_to(b)

    # --- Actions ---

    def move_to(self, agent: AgentView, target: Position) -> ActionCode:
        record = self._agents.get(agent.name)
        if record is None:
            return ActionCode.INVALID_TARGET
        if record.parts(BodyPart.MOVE) == 0:
            return ActionCode.NO_BODYPART
        record.pos = step_toward(record.pos, target)
        return ActionCode.OK

    def harvest(self, agent: AgentView, source: Source) -> ActionCode:
        record = self._agents.get(agent.name)
        target = self._sources.get(source.id)
        if record is None or target is None:
            return ActionCode.INVALID_TARGET
        if record.pos.range_to(target.pos) > HARVEST_RANGE:
            return ActionCode.NOT_IN_RANGE
        if record.parts(BodyPart.WORK) == 0:
            return ActionCode.NO_BODYPART
        if target.energy == 0:
            return ActionCode.NOT_ENOUGH_RESOURCES
        amount = harvest_yield(
            record.parts(BodyPart.WORK), target.energy, record.capacity - record.energy
        )
        target.energy -= amount
        record.energy += amount
        return ActionCode.OK

    def transfer(
        self, agent: AgentView, target: Structure, resource: str = ENERGY
    ) -> ActionCode:
        record = self._agents.get(agent.name)
        structure = self._structures.get(target.id)
        if record is None or structure is None or structure.capacity == 0:
            return ActionCode.INVALID_TARGET
        if record.pos.range_to(structure.pos) > TRANSFER_RANGE:
            return ActionCode.NOT_IN_RANGE
        if record.energy == 0:
            return ActionCode.NOT_ENOUGH_RESOURCES
        free = structure.capacity - structure.energy
        if free == 0:
            return ActionCode.FULL
        amount = min(free, record.energy)
        record.energy -= amount
        structure.energy += amount
        return ActionCode.OK

    def withdraw(
        self, agent: AgentView, target: Structure, resource: str = ENERGY
    ) -> ActionCode:
        record = self._agents.get(agent.name)
        structure = self._structures.get(target.id)
        if record is None or structure is None or structure.capacity == 0:
            return ActionCode.INVALID_TARGET
        if record.pos.range_to(structure.pos) > TRANSFER_RANGE:
            return ActionCode.NOT_IN_RANGE
        free = record.capacity - record.energy
        if free == 0:
            return ActionCode.FULL
        if structure.energy == 0:
            return ActionCode.NOT_ENOUGH_RESOURCES
        amount = min(free, structure.energy)
        structure.energy -= amount
        record.energy += amount
        return ActionCode.OK

    def build(self, agent: AgentView, site: ConstructionSite) -> ActionCode:
        record = self._agents.get(agent.name)
        target = self._sites.get(site.id)
        if record is None or target is None:
            return ActionCode.INVALID_TARGET
        if record.pos.range_to(target.pos) > BUILD_RANGE:
            return ActionCode.NOT_IN_RANGE
        if record.parts(BodyPart.WORK) == 0:
            return ActionCode.NO_BODYPART
        if record.energy == 0:
            return ActionCode.NOT_ENOUGH_RESOURCES
        amount = build_yield(
            record.parts(BodyPart.WORK), record.energy, target.progress_total - target.progress
        )
        record.energy -= amount
        target.progress += amount
        if target.progress >= target.progress_total:
            del self._sites[target.id]
            self.add_structure(target.id, target.kind, target.pos.x, target.pos.y)
            logger.info("[tick %d] %s finished building %s", self.current_tick, agent.name, target.id)
        return ActionCode.OK

    def upgrade_controller(self, agent: AgentView, controller: Structure) -> ActionCode:
        record = self._agents.get(agent.name)
        target = self._structures.get(controller.id)
        if record is None or target is None or target.kind != StructureKind.CONTROLLER:
            return ActionCode.INVALID_TARGET
        if record.pos.range_to(target.pos) > UPGRADE_RANGE:
            return ActionCode.NOT_IN_RANGE
        if record.parts(BodyPart.WORK) == 0:
            return ActionCode.NO_BODYPART
        if record.energy == 0:
            return ActionCode.NOT_ENOUGH_RESOURCES
        amount = upgrade_yield(record.parts(BodyPart.WORK), record.energy)
        record.energy -= amount
        self.controller_progress += amount
        return ActionCode.OK

    def say(self, agent: AgentView, message: str) -> None:
        self.said[agent.name] = message

    # --- MemoryStore ---

    def get(self, name: str) -> AgentMemory | None:
        raw = self._memory.get(name)
        if raw is None:
            return None
        try:
            return AgentMemory.from_json(raw)
        except ValidationError as e:
            logger.warning("Discarding unreadable memory for %s: %s", name, e)
            return None

    def set(self, name: str, memory: AgentMemory) -> None:
        self._memory[name] = memory.to_json()

    def delete(self, name: str) -> None:
        self._memory.pop(name, None)

    def names(self) -> Iterable[str]:
        return list(self._memory)

    def set_raw(self, name: str, raw: str) -> None:
        """Store an arbitrary memory payload, bypassing validation."""
        self._memory[name] = raw

    # --- Production ---

    def spawn_agent(
        self,
        spawn: Structure,
        body: Sequence[BodyPart],
        name: str,
        memory: AgentMemory,
    ) -> ActionCode:
        facility = self._structures.get(spawn.id)
        if facility is None or facility.kind != StructureKind.SPAWN:
            return ActionCode.INVALID_TARGET
        if not body:
            return ActionCode.INVALID_ARGS
        if name in self._agents or name in self._memory:
            return ActionCode.NAME_EXISTS
        if facility.spawning:
            return ActionCode.BUSY

        supply = self._spawn_supply()
        balances = split_cost([s.energy for s in supply], loadout_cost(body))
        if balances is None:
            return ActionCode.NOT_ENOUGH_RESOURCES
        for structure, balance in zip(supply, balances):
            structure.energy = balance

        facility.spawning = True
        self.add_agent(name, facility.pos.x, facility.pos.y + 1, body=body, memory=memory)
        return ActionCode.OK

    def _spawn_supply(self) -> list[SandboxStructure]:
        return [
            s
            for s in self._structures.values()
            if s.kind in (StructureKind.SPAWN, StructureKind.EXTENSION)
        ]


def starter_room(name: str = "sim") -> SandboxRoom:
    """A small room: one spawn, two extensions, two sources with containers,
    a controller and a pending construction site."""
    room = SandboxRoom(name=name)
    room.add_structure("spawn-1", StructureKind.SPAWN, 25, 25, energy=300)
    room.add_structure("ext-1", StructureKind.EXTENSION, 24, 24, energy=50)
    room.add_structure("ext-2", StructureKind.EXTENSION, 26, 24, energy=50)
    room.add_structure("ctrl", StructureKind.CONTROLLER, 30, 35)
    room.add_source("src-a", 10, 10)
    room.add_source("src-b", 40, 12)
    room.add_structure("cont-a", StructureKind.CONTAINER, 11, 11)
    room.add_structure("cont-b", StructureKind.CONTAINER, 39, 13)
    room.add_site("site-1", 27, 27)
    return room
