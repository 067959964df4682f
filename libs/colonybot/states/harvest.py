"""Harvest energy from a source until full."""

from dataclasses import dataclass

from colonybot.context import TickContext
from colonybot.models.memory import StateName
from colonybot.models.objects import AgentView, Source
from colonybot.states.base import CONTINUE, EXIT, TaskState, TickResult


@dataclass(frozen=True)
class HarvestState(TaskState):
    source_id: str

    NAME = StateName.HARVEST
    EMOTE = "⚡"

    def tick(self, agent: AgentView, ctx: TickContext) -> TickResult:
        if agent.store.is_full():
            return EXIT

        source = ctx.room.resolve(self.source_id)
        if not isinstance(source, Source):
            return EXIT

        if ctx.room.distance(agent.pos, source.pos) > 1:
            ctx.actions.move_to(agent, source.pos)
            return CONTINUE

        code = ctx.actions.harvest(agent, source)
        return self._follow_up(agent, ctx, code, source.pos, "harvest")

    def describe(self) -> str:
        return f"harvest({self.source_id})"
