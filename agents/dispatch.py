"""Role dispatch — the one place a Role is mapped onto its policies."""

from colonybot.context import DecisionContext
from colonybot.models.catalogue import MAX_BODY_PARTS, BodyPart
from colonybot.models.memory import Role
from colonybot.models.objects import AgentView
from colonybot.states import TaskState

from agents.builder import loadout as builder_loadout
from agents.builder import strategy as builder_strategy
from agents.generalist import loadout as generalist_loadout
from agents.generalist import strategy as generalist_strategy
from agents.hauler import loadout as hauler_loadout
from agents.hauler import strategy as hauler_strategy
from agents.miner import loadout as miner_loadout
from agents.miner import strategy as miner_strategy
from agents.upgrader import loadout as upgrader_loadout
from agents.upgrader import strategy as upgrader_strategy


def choose_next_state(role: Role, agent: AgentView, ctx: DecisionContext) -> TaskState:
    """Run the decision ladder for `role`.

    Raises:
        ValueError: If the role is unknown.
    """
    match role:
        case Role.GENERALIST:
            return generalist_strategy.choose_next_state(agent, ctx)
        case Role.MINER:
            return miner_strategy.choose_next_state(agent, ctx)
        case Role.HAULER:
            return hauler_strategy.choose_next_state(agent, ctx)
        case Role.BUILDER:
            return builder_strategy.choose_next_state(agent, ctx)
        case Role.UPGRADER:
            return upgrader_strategy.choose_next_state(agent, ctx)
        case _:
            raise ValueError(f"Unknown role: {role!r}")


def build_loadout(role: Role, budget: int, max_parts: int = MAX_BODY_PARTS) -> list[BodyPart]:
    """Size a loadout for `role` within `budget`.

    Raises:
        ValueError: If the role is unknown or the budget is negative.
    """
    match role:
        case Role.GENERALIST:
            return generalist_loadout.build_loadout(budget, max_parts)
        case Role.MINER:
            return miner_loadout.build_loadout(budget, max_parts)
        case Role.HAULER:
            return hauler_loadout.build_loadout(budget, max_parts)
        case Role.BUILDER:
            return builder_loadout.build_loadout(budget, max_parts)
        case Role.UPGRADER:
            return upgrader_loadout.build_loadout(budget, max_parts)
        case _:
            raise ValueError(f"Unknown role: {role!r}")
