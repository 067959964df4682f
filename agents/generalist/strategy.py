"""Generalist strategy — pure function, no actions.

Priority order when a new task is needed:
1. Empty → withdraw from storage, else a stocked container, else harvest the
   nearest active source
2. Room energy below spawn+extension capacity → feed the nearest spawn/extension
3. Fewer than `builder_cap` agents building and at least one upgrading →
   build the nearest construction site
4. Upgrade the room controller
5. Idle
"""

import logging

from colonybot.context import DecisionContext
from colonybot.helpers.search import (
    SPAWN_KINDS,
    EnergyAuthority,
    find_energy,
    find_nearest,
    structures_of,
    total_spawn_capacity,
    upgrade_controller,
)
from colonybot.models.objects import AgentView
from colonybot.states import BuildState, DeliverState, IdleState, TaskState

logger = logging.getLogger(__name__)


def choose_next_state(agent: AgentView, ctx: DecisionContext) -> TaskState:
    """Generalist decision ladder — returns the next task state."""
    room = ctx.room

    # 1. Refill
    if agent.store.is_empty():
        refill = find_energy(room, agent, EnergyAuthority.ANYWHERE)
        if refill is None:
            logger.warning("No energy found for %s", agent.name)
            return IdleState()
        return refill

    # 2. Feed production facilities
    if room.energy_available() < total_spawn_capacity(room):
        target = find_nearest(
            room,
            agent.pos,
            structures_of(room, *SPAWN_KINDS),
            lambda s: s.free_capacity() > 0,
        )
        if target is not None:
            return DeliverState(target.id)

    # 3. Build, but only while someone keeps the controller going
    if ctx.counters.building < ctx.builder_cap and ctx.counters.upgrading > 0:
        site = find_nearest(room, agent.pos, room.construction_sites())
        if site is not None:
            return BuildState(site.id)

    # 4. Upgrade
    upgrade = upgrade_controller(room)
    if upgrade is not None:
        return upgrade

    return IdleState()
