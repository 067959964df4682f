"""Spend carried energy on a construction site."""

from dataclasses import dataclass

from colonybot.context import TickContext
from colonybot.models.memory import StateName
from colonybot.models.objects import AgentView, ConstructionSite
from colonybot.states.base import CONTINUE, EXIT, TaskState, TickResult


@dataclass(frozen=True)
class BuildState(TaskState):
    site_id: str

    NAME = StateName.BUILD
    EMOTE = "⚒️"

    def tick(self, agent: AgentView, ctx: TickContext) -> TickResult:
        if agent.store.is_empty():
            return EXIT

        site = ctx.room.resolve(self.site_id)
        if not isinstance(site, ConstructionSite) or site.remaining == 0:
            return EXIT

        # Step off whatever we were standing on before building
        if ctx.room.distance(agent.pos, site.pos) > 1:
            ctx.actions.move_to(agent, site.pos)
            return CONTINUE

        code = ctx.actions.build(agent, site)
        return self._follow_up(agent, ctx, code, site.pos, "build")

    def describe(self) -> str:
        return f"build({self.site_id})"
