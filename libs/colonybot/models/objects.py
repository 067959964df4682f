"""Read-only snapshots of room objects as reported by the host each tick.

Snapshots are never kept across ticks. Task states remember object ids and
resolve them again through the room query every tick.
"""

from dataclasses import dataclass, field
from enum import StrEnum

from colonybot.models.catalogue import BodyPart

ENERGY = "energy"


class StructureKind(StrEnum):
    """Stationary facilities a room can contain."""

    SPAWN = "spawn"
    EXTENSION = "extension"
    STORAGE = "storage"
    CONTAINER = "container"
    TOWER = "tower"
    CONTROLLER = "controller"
    ROAD = "road"
    WALL = "wall"
    RAMPART = "rampart"


@dataclass(frozen=True)
class Position:
    """A tile position inside a room."""

    x: int
    y: int
    room: str = "sim"

    def range_to(self, other: "Position") -> int:
        """Chebyshev distance; positions in other rooms are infinitely far."""
        if self.room != other.room:
            return 10**9
        return max(abs(self.x - other.x), abs(self.y - other.y))

    def is_near_to(self, other: "Position") -> bool:
        return self.range_to(other) <= 1


@dataclass(frozen=True)
class Store:
    """Resource inventory with a shared capacity across resource kinds."""

    capacity: int = 0
    contents: dict[str, int] = field(default_factory=dict)

    def used(self, resource: str = ENERGY) -> int:
        """Return the amount of `resource` held."""
        return self.contents.get(resource, 0)

    def total_used(self) -> int:
        return sum(self.contents.values())

    def free(self, resource: str = ENERGY) -> int:
        """Return how much more of `resource` fits."""
        return max(0, self.capacity - self.total_used())

    def is_empty(self, resource: str = ENERGY) -> bool:
        return self.used(resource) == 0

    def is_full(self, resource: str = ENERGY) -> bool:
        return self.free(resource) == 0


@dataclass(frozen=True)
class AgentView:
    """A live agent as seen this tick."""

    name: str
    pos: Position
    store: Store
    body: tuple[BodyPart, ...] = ()


@dataclass(frozen=True)
class Structure:
    """A facility. `store` is None for kinds that hold no resources."""

    id: str
    kind: StructureKind
    pos: Position
    store: Store | None = None
    spawning: bool = False

    def stored(self, resource: str = ENERGY) -> int:
        return self.store.used(resource) if self.store is not None else 0

    def free_capacity(self, resource: str = ENERGY) -> int:
        return self.store.free(resource) if self.store is not None else 0

    def capacity(self) -> int:
        return self.store.capacity if self.store is not None else 0


@dataclass(frozen=True)
class Source:
    """A harvestable energy source."""

    id: str
    pos: Position
    energy: int
    energy_capacity: int = 3000

    @property
    def active(self) -> bool:
        return self.energy > 0


@dataclass(frozen=True)
class ConstructionSite:
    """A structure under construction."""

    id: str
    pos: Position
    kind: StructureKind
    progress: int = 0
    progress_total: int = 1

    @property
    def remaining(self) -> int:
        return max(0, self.progress_total - self.progress)


RoomObject = AgentView | Structure | Source | ConstructionSite
