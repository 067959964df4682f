"""Builder strategy — pure function, no actions.

Priority order when a new task is needed:
1. Empty → withdraw from storage, else the nearest stocked container, else Idle
2. Build the nearest construction site
3. Upgrade the room controller
4. Idle
"""

from colonybot.context import DecisionContext
from colonybot.helpers.search import (
    EnergyAuthority,
    find_energy,
    find_nearest,
    upgrade_controller,
)
from colonybot.models.objects import AgentView
from colonybot.states import BuildState, IdleState, TaskState


def choose_next_state(agent: AgentView, ctx: DecisionContext) -> TaskState:
    """Builder decision ladder — returns the next task state."""
    room = ctx.room

    if agent.store.is_empty():
        refill = find_energy(room, agent, EnergyAuthority.STORAGE_OR_CONTAINERS)
        return refill if refill is not None else IdleState()

    site = find_nearest(room, agent.pos, room.construction_sites())
    if site is not None:
        return BuildState(site.id)

    upgrade = upgrade_controller(room)
    if upgrade is not None:
        return upgrade

    return IdleState()
