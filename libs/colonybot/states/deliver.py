"""Transfer carried energy into a structure (spawn, extension, storage, ...)."""

from dataclasses import dataclass

from colonybot.context import TickContext
from colonybot.models.memory import StateName
from colonybot.models.objects import ENERGY, AgentView, Structure
from colonybot.states.base import EXIT, TaskState, TickResult


@dataclass(frozen=True)
class DeliverState(TaskState):
    structure_id: str
    resource: str = ENERGY

    NAME = StateName.DELIVER
    EMOTE = "💪"

    def tick(self, agent: AgentView, ctx: TickContext) -> TickResult:
        if agent.store.is_empty(self.resource):
            return EXIT

        structure = ctx.room.resolve(self.structure_id)
        if not isinstance(structure, Structure):
            return EXIT

        code = ctx.actions.transfer(agent, structure, self.resource)
        return self._follow_up(agent, ctx, code, structure.pos, "transfer")

    def describe(self) -> str:
        return f"deliver({self.structure_id})"
