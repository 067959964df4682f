"""Idle — fallback when no ladder step applies."""

from dataclasses import dataclass

from colonybot.context import TickContext
from colonybot.models.memory import StateName
from colonybot.models.objects import AgentView
from colonybot.states.base import EXIT, TaskState, TickResult


@dataclass(frozen=True)
class IdleState(TaskState):
    """Does nothing and asks for a new decision on every tick."""

    NAME = StateName.IDLE
    EMOTE = "💤"

    def tick(self, agent: AgentView, ctx: TickContext) -> TickResult:
        return EXIT
