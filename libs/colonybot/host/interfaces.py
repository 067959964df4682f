"""Narrow contracts with the host simulation.

The core never reimplements any of these; it only calls them. All calls are
synchronous and return immediately.
"""

from collections.abc import Iterable, Sequence
from enum import StrEnum
from typing import Protocol

from colonybot.models.catalogue import BodyPart
from colonybot.models.memory import AgentMemory
from colonybot.models.objects import (
    ENERGY,
    AgentView,
    ConstructionSite,
    Position,
    RoomObject,
    Source,
    Structure,
    StructureKind,
)


class ActionCode(StrEnum):
    """Result of an action primitive or a production request."""

    OK = "ok"
    NOT_IN_RANGE = "not_in_range"
    NOT_ENOUGH_RESOURCES = "not_enough_resources"
    FULL = "full"
    INVALID_TARGET = "invalid_target"
    NO_BODYPART = "no_bodypart"
    TIRED = "tired"
    BUSY = "busy"
    NAME_EXISTS = "name_exists"
    INVALID_ARGS = "invalid_args"

    @property
    def ok(self) -> bool:
        return self is ActionCode.OK


class RoomQuery(Protocol):
    """Side-effect free reads of the operational area."""

    def time(self) -> int: ...

    def live_agents(self) -> Sequence[AgentView]: ...

    def structures(self, kind: StructureKind | None = None) -> Sequence[Structure]: ...

    def sources(self, active_only: bool = False) -> Sequence[Source]: ...

    def construction_sites(self) -> Sequence[ConstructionSite]: ...

    def resolve(self, object_id: str) -> RoomObject | None: ...

    def energy_available(self) -> int: ...

    def distance(self, a: Position, b: Position) -> int: ...


class Actions(Protocol):
    """Action primitives. Each returns OK or a typed failure."""

    def move_to(self, agent: AgentView, target: Position) -> ActionCode: ...

    def harvest(self, agent: AgentView, source: Source) -> ActionCode: ...

    def transfer(
        self, agent: AgentView, target: Structure, resource: str = ENERGY
    ) -> ActionCode: ...

    def withdraw(
        self, agent: AgentView, target: Structure, resource: str = ENERGY
    ) -> ActionCode: ...

    def build(self, agent: AgentView, site: ConstructionSite) -> ActionCode: ...

    def upgrade_controller(
        self, agent: AgentView, controller: Structure
    ) -> ActionCode: ...

    def say(self, agent: AgentView, message: str) -> None: ...


class MemoryStore(Protocol):
    """Durable per-agent memory keyed by agent name."""

    def get(self, name: str) -> AgentMemory | None: ...

    def set(self, name: str, memory: AgentMemory) -> None: ...

    def delete(self, name: str) -> None: ...

    def names(self) -> Iterable[str]: ...


class Production(Protocol):
    """Requests creation of new agents at a spawn."""

    def spawn_agent(
        self,
        spawn: Structure,
        body: Sequence[BodyPart],
        name: str,
        memory: AgentMemory,
    ) -> ActionCode: ...
