"""Upgrader strategy — keeps the controller fed.

Priority order when a new task is needed:
1. Empty → withdraw from the nearest stocked container, else harvest the
   nearest active source, else Idle
2. Upgrade the room controller
3. Idle
"""

import logging

from colonybot.context import DecisionContext
from colonybot.helpers.search import find_nearest, upgrade_controller
from colonybot.models.objects import AgentView, StructureKind
from colonybot.states import HarvestState, IdleState, TaskState, WithdrawState

logger = logging.getLogger(__name__)


def choose_next_state(agent: AgentView, ctx: DecisionContext) -> TaskState:
    """Upgrader decision ladder — returns the next task state."""
    room = ctx.room

    if agent.store.is_empty():
        container = find_nearest(
            room,
            agent.pos,
            room.structures(StructureKind.CONTAINER),
            lambda c: c.stored() > 0,
        )
        if container is not None:
            return WithdrawState(container.id)

        source = find_nearest(room, agent.pos, room.sources(active_only=True))
        if source is not None:
            return HarvestState(source.id)

        logger.warning("No sources found for %s", agent.name)
        return IdleState()

    upgrade = upgrade_controller(room)
    if upgrade is not None:
        return upgrade

    return IdleState()
