"""Miner strategy — stays on one source and fills the container beside it.

The miner's source is bound once and kept in agent memory. A new binding goes
to whichever source has the fewest live miners bound to it.

Priority order when a new task is needed:
1. Empty → harvest the bound source (Idle while it is depleted)
2. Container next to the bound source with room → deliver
3. Nearest container with room → deliver
4. Upgrade the room controller
5. Idle

Miners never deliver to storage.
"""

import logging

from colonybot.context import DecisionContext
from colonybot.helpers.search import find_nearest, source_at_index, upgrade_controller
from colonybot.models.memory import Role
from colonybot.models.objects import AgentView, StructureKind
from colonybot.states import DeliverState, HarvestState, IdleState, TaskState

logger = logging.getLogger(__name__)


def miners_per_source(ctx: DecisionContext, source_count: int, exclude: str = "") -> list[int]:
    """Count live miners bound to each source index."""
    counts = [0] * source_count
    for other in ctx.room.live_agents():
        if other.name == exclude:
            continue
        memory = ctx.memory.get(other.name)
        if memory is None or memory.role != Role.MINER:
            continue
        index = memory.bound_source_index
        if index is not None and 0 <= index < source_count:
            counts[index] += 1
    return counts


def bound_source_index(agent: AgentView, ctx: DecisionContext) -> int | None:
    """Return the agent's source index, binding and persisting one if needed."""
    source_count = len(ctx.room.sources())
    if source_count == 0:
        return None

    memory = ctx.memory.get(agent.name)
    if memory is not None and memory.bound_source_index is not None:
        if memory.bound_source_index < source_count:
            return memory.bound_source_index

    counts = miners_per_source(ctx, source_count, exclude=agent.name)
    index = counts.index(min(counts))
    if memory is not None:
        ctx.memory.set(agent.name, memory.with_bound_source(index))
    logger.info("Bound miner %s to source #%d", agent.name, index)
    return index


def choose_next_state(agent: AgentView, ctx: DecisionContext) -> TaskState:
    """Miner decision ladder — returns the next task state."""
    room = ctx.room
    index = bound_source_index(agent, ctx)
    source = source_at_index(room, index) if index is not None else None

    if agent.store.is_empty():
        if source is None or not source.active:
            return IdleState()
        return HarvestState(source.id)

    containers = room.structures(StructureKind.CONTAINER)
    if source is not None:
        beside = find_nearest(
            room,
            agent.pos,
            containers,
            lambda c: c.free_capacity() > 0 and room.distance(c.pos, source.pos) <= 1,
        )
        if beside is not None:
            return DeliverState(beside.id)

    nearest = find_nearest(room, agent.pos, containers, lambda c: c.free_capacity() > 0)
    if nearest is not None:
        return DeliverState(nearest.id)

    upgrade = upgrade_controller(room)
    if upgrade is not None:
        return upgrade

    return IdleState()
