"""Withdraw energy from a storage or container until full."""

from dataclasses import dataclass

from colonybot.context import TickContext
from colonybot.models.memory import StateName
from colonybot.models.objects import ENERGY, AgentView, Structure
from colonybot.states.base import CONTINUE, EXIT, TaskState, TickResult


@dataclass(frozen=True)
class WithdrawState(TaskState):
    structure_id: str
    resource: str = ENERGY

    NAME = StateName.WITHDRAW
    EMOTE = "📤"

    def tick(self, agent: AgentView, ctx: TickContext) -> TickResult:
        if agent.store.is_full(self.resource):
            return EXIT

        structure = ctx.room.resolve(self.structure_id)
        if not isinstance(structure, Structure):
            return EXIT
        if structure.stored(self.resource) == 0:
            return EXIT

        if ctx.room.distance(agent.pos, structure.pos) > 1:
            ctx.actions.move_to(agent, structure.pos)
            return CONTINUE

        code = ctx.actions.withdraw(agent, structure, self.resource)
        return self._follow_up(agent, ctx, code, structure.pos, "withdraw")

    def describe(self) -> str:
        return f"withdraw({self.structure_id})"
