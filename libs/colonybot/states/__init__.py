"""Task states an agent can be running."""

from colonybot.states.base import CONTINUE, EXIT, Outcome, TaskState, TickResult
from colonybot.states.build import BuildState
from colonybot.states.deliver import DeliverState
from colonybot.states.harvest import HarvestState
from colonybot.states.idle import IdleState
from colonybot.states.upgrade import UpgradeState
from colonybot.states.withdraw import WithdrawState

__all__ = [
    "BuildState",
    "CONTINUE",
    "DeliverState",
    "EXIT",
    "HarvestState",
    "IdleState",
    "Outcome",
    "TaskState",
    "TickResult",
    "UpgradeState",
    "WithdrawState",
]
