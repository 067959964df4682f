"""AgentStateMachine — drives one agent's current task state tick by tick."""

import logging
from collections.abc import Callable

from colonybot.context import DecisionContext, TickContext, TransitionCounters
from colonybot.models.memory import Role
from colonybot.models.objects import AgentView
from colonybot.states import Outcome, TaskState

logger = logging.getLogger(__name__)

DecidePolicy = Callable[[AgentView, DecisionContext], TaskState]


class AgentStateMachine:
    """Holds the current task state for one agent.

    A machine with no state yet behaves as if leaving an implicit Idle state:
    the first `advance()` asks the decision policy for a state and runs its
    entry hook, without an exit hook.
    """

    def __init__(self, name: str, role: Role, decide: DecidePolicy) -> None:
        self._name = name
        self._role = role
        self._decide = decide
        self._state: TaskState | None = None
        self._transitions = 0

    @property
    def name(self) -> str:
        return self._name

    @property
    def role(self) -> Role:
        return self._role

    @property
    def current_state(self) -> TaskState | None:
        return self._state

    @property
    def transitions(self) -> int:
        """How many states this machine has entered."""
        return self._transitions

    def advance(
        self, agent: AgentView, tick_ctx: TickContext, decision_ctx: DecisionContext
    ) -> TaskState:
        """Run one tick of the current state, transitioning if it ended.

        Returns the state that is current after the tick.
        """
        counters = decision_ctx.counters

        if self._state is None:
            return self._enter(self._decide(agent, decision_ctx), agent, tick_ctx, counters)

        result = self._state.tick(agent, tick_ctx)
        if result.outcome is Outcome.CONTINUE:
            return self._state

        self._state.on_exit(counters)
        self._state = None
        if result.outcome is Outcome.CHANGE_STATE and result.next_state is not None:
            next_state = result.next_state
        else:
            next_state = self._decide(agent, decision_ctx)
        return self._enter(next_state, agent, tick_ctx, counters)

    def retire(self, counters: TransitionCounters) -> None:
        """Run the exit hook of the current state; used when the agent is gone."""
        if self._state is not None:
            self._state.on_exit(counters)
            logger.debug("%s: retired from %s", self._name, self._state.describe())
            self._state = None

    def _enter(
        self,
        state: TaskState,
        agent: AgentView,
        tick_ctx: TickContext,
        counters: TransitionCounters,
    ) -> TaskState:
        state.on_start(agent, tick_ctx, counters)
        self._state = state
        self._transitions += 1
        return state
