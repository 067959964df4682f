"""Room search helpers shared by the role policies.

Every search is a single linear scan. Distance ties keep the first object
in the room's iteration order.
"""

from collections.abc import Callable, Iterable
from enum import StrEnum
from typing import TypeVar

from colonybot.host.interfaces import RoomQuery
from colonybot.models.objects import (
    AgentView,
    ConstructionSite,
    Position,
    Source,
    Structure,
    StructureKind,
)
from colonybot.states import HarvestState, TaskState, UpgradeState, WithdrawState

T = TypeVar("T", Structure, Source, ConstructionSite)

# Facilities whose combined capacity bounds the production budget
SPAWN_KINDS = (StructureKind.SPAWN, StructureKind.EXTENSION)


class EnergyAuthority(StrEnum):
    """Where an agent is allowed to get energy from."""

    STORAGE_OR_CONTAINERS = "storage_or_containers"
    ANYWHERE = "anywhere"  # storage, then containers, then sources


def find_nearest(
    room: RoomQuery,
    origin: Position,
    candidates: Iterable[T],
    predicate: Callable[[T], bool] | None = None,
) -> T | None:
    """Return the candidate closest to `origin`, or None if there are none."""
    best: T | None = None
    best_range = 0
    for obj in candidates:
        if predicate is not None and not predicate(obj):
            continue
        distance = room.distance(origin, obj.pos)
        if best is None or distance < best_range:
            best = obj
            best_range = distance
    return best


def find_first(
    candidates: Iterable[T], predicate: Callable[[T], bool] | None = None
) -> T | None:
    """Return the first candidate matching `predicate` in iteration order."""
    for obj in candidates:
        if predicate is None or predicate(obj):
            return obj
    return None


def structures_of(room: RoomQuery, *kinds: StructureKind) -> list[Structure]:
    """All structures of the given kinds, preserving the room's order."""
    return [s for s in room.structures() if s.kind in kinds]


def total_spawn_capacity(room: RoomQuery) -> int:
    """Maximum energy the room can spend on production.

    This is the sum of the capacities of every spawn and extension.
    """
    return sum(s.capacity() for s in structures_of(room, *SPAWN_KINDS))


def find_controller(room: RoomQuery) -> Structure | None:
    return find_first(room.structures(StructureKind.CONTROLLER))


def upgrade_controller(room: RoomQuery) -> UpgradeState | None:
    """An UpgradeState for the room controller, if the room has one."""
    controller = find_controller(room)
    if controller is None:
        return None
    return UpgradeState(controller.id)


def source_at_index(room: RoomQuery, index: int) -> Source | None:
    """The room's source at a stable index (over all sources, active or not)."""
    sources = room.sources()
    if 0 <= index < len(sources):
        return sources[index]
    return None


def find_energy(
    room: RoomQuery, agent: AgentView, authority: EnergyAuthority
) -> TaskState | None:
    """Pick where an empty agent should refill.

    Storage outranks containers, which outrank harvesting a source directly.
    Returns None when no allowed supplier has energy.
    """
    storage = find_nearest(
        room,
        agent.pos,
        room.structures(StructureKind.STORAGE),
        lambda s: s.stored() > 0,
    )
    if storage is not None:
        return WithdrawState(storage.id)

    container = find_nearest(
        room,
        agent.pos,
        room.structures(StructureKind.CONTAINER),
        lambda s: s.stored() > 0,
    )
    if container is not None:
        return WithdrawState(container.id)

    if authority is EnergyAuthority.ANYWHERE:
        source = find_nearest(room, agent.pos, room.sources(active_only=True))
        if source is not None:
            return HarvestState(source.id)

    return None
