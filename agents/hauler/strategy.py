"""Hauler strategy — moves energy out of containers, never harvests.

Priority order when a new task is needed:
1. Empty → withdraw from the container holding the most energy, else Idle
2. Nearest storage with room → deliver
3. Nearest spawn or extension with room → deliver
4. Nearest tower with room → deliver
5. Upgrade the room controller
6. Idle
"""

from colonybot.context import DecisionContext
from colonybot.helpers.search import SPAWN_KINDS, find_nearest, structures_of, upgrade_controller
from colonybot.models.objects import AgentView, Structure, StructureKind
from colonybot.states import DeliverState, IdleState, TaskState, WithdrawState


def fullest_container(ctx: DecisionContext) -> Structure | None:
    """The container with the most stored energy; first found wins ties."""
    best: Structure | None = None
    for container in ctx.room.structures(StructureKind.CONTAINER):
        stored = container.stored()
        if stored > 0 and (best is None or stored > best.stored()):
            best = container
    return best


def choose_next_state(agent: AgentView, ctx: DecisionContext) -> TaskState:
    """Hauler decision ladder — returns the next task state."""
    room = ctx.room

    if agent.store.is_empty():
        container = fullest_container(ctx)
        if container is None:
            return IdleState()
        return WithdrawState(container.id)

    for kinds in ((StructureKind.STORAGE,), SPAWN_KINDS, (StructureKind.TOWER,)):
        target = find_nearest(
            room, agent.pos, structures_of(room, *kinds), lambda s: s.free_capacity() > 0
        )
        if target is not None:
            return DeliverState(target.id)

    upgrade = upgrade_controller(room)
    if upgrade is not None:
        return upgrade

    return IdleState()
