"""Upgrade the room controller with carried energy."""

from dataclasses import dataclass

from colonybot.context import TickContext
from colonybot.models.memory import StateName
from colonybot.models.objects import AgentView, Structure, StructureKind
from colonybot.states.base import EXIT, TaskState, TickResult


@dataclass(frozen=True)
class UpgradeState(TaskState):
    controller_id: str

    NAME = StateName.UPGRADE
    EMOTE = "⬆️"

    def tick(self, agent: AgentView, ctx: TickContext) -> TickResult:
        if agent.store.is_empty():
            return EXIT

        controller = ctx.room.resolve(self.controller_id)
        if not isinstance(controller, Structure) or controller.kind != StructureKind.CONTROLLER:
            return EXIT

        code = ctx.actions.upgrade_controller(agent, controller)
        return self._follow_up(agent, ctx, code, controller.pos, "upgrade")

    def describe(self) -> str:
        return f"upgrade({self.controller_id})"
