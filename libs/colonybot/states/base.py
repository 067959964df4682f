"""Task state contract — tick results plus entry and exit hooks."""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar

from colonybot.context import TickContext, TransitionCounters
from colonybot.host.interfaces import ActionCode
from colonybot.models.memory import StateName
from colonybot.models.objects import AgentView, Position

logger = logging.getLogger(__name__)


class Outcome(StrEnum):
    """What the state machine should do after a tick."""

    CONTINUE = "continue"  # keep the current state
    EXIT = "exit"  # done or impossible: choose a new state
    CHANGE_STATE = "change_state"  # switch to an explicit next state


@dataclass(frozen=True)
class TickResult:
    outcome: Outcome
    next_state: "TaskState | None" = None

    @classmethod
    def change(cls, state: "TaskState") -> "TickResult":
        return cls(outcome=Outcome.CHANGE_STATE, next_state=state)


CONTINUE = TickResult(outcome=Outcome.CONTINUE)
EXIT = TickResult(outcome=Outcome.EXIT)


class TaskState(ABC):
    """One unit of executable behavior.

    Subclasses are frozen dataclasses holding only target ids. Targets are
    resolved again through the room every tick; an unresolvable target
    always yields EXIT.
    """

    NAME: ClassVar[StateName]
    EMOTE: ClassVar[str] = "🌀"

    @abstractmethod
    def tick(self, agent: AgentView, ctx: TickContext) -> TickResult:
        """Run one step of the task for `agent`."""

    def on_start(
        self, agent: AgentView, ctx: TickContext, counters: TransitionCounters
    ) -> None:
        """Entry hook: status signal, memory label, counter increment.

        The counter is incremented only once every other step has succeeded.
        """
        ctx.actions.say(agent, self.EMOTE)
        memory = ctx.memory.get(agent.name)
        if memory is not None and memory.current_state != self.NAME:
            ctx.memory.set(agent.name, memory.with_state(self.NAME))
        logger.info("[tick %d] %s: -> %s", ctx.tick, agent.name, self.describe())
        counters.enter(self.NAME)

    def on_exit(self, counters: TransitionCounters) -> None:
        """Exit hook: undo whatever on_start counted."""
        counters.leave(self.NAME)

    def describe(self) -> str:
        return str(self.NAME)

    def _follow_up(
        self,
        agent: AgentView,
        ctx: TickContext,
        code: ActionCode,
        target: Position,
        verb: str,
    ) -> TickResult:
        """Map an action result onto a tick result.

        NOT_IN_RANGE moves once toward the target and keeps the state;
        any other failure abandons it.
        """
        if code.ok:
            return CONTINUE
        if code is ActionCode.NOT_IN_RANGE:
            ctx.actions.move_to(agent, target)
            return CONTINUE
        logger.warning("[tick %d] %s: couldn't %s: %s", ctx.tick, agent.name, verb, code)
        return EXIT
