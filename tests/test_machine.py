"""Unit tests for AgentStateMachine transitions and counter bookkeeping."""

import pytest

from colonybot import (
    AgentMemory,
    AgentStateMachine,
    AgentView,
    DecisionContext,
    HarvestState,
    IdleState,
    Role,
    TaskState,
    TickContext,
    TickResult,
    TransitionCounters,
    UpgradeState,
)
from colonybot.states.base import CONTINUE

from services.sandbox.state import SandboxRoom


def _make_policy(*states: TaskState):
    """A decision policy that hands out `states` in order, then Idle."""
    queue = list(states)
    calls: list[str] = []

    def decide(agent: AgentView, ctx: DecisionContext) -> TaskState:
        calls.append(agent.name)
        return queue.pop(0) if queue else IdleState()

    decide.calls = calls  # type: ignore[attr-defined]
    return decide


class _Redirect(IdleState):
    """Ends by naming its successor explicitly."""

    def tick(self, agent, ctx):
        return TickResult.change(UpgradeState("ctrl"))


class _Forever(IdleState):
    def tick(self, agent, ctx):
        return CONTINUE


class TestFirstTick:
    def test_decides_and_enters(
        self, room: SandboxRoom, tick_ctx: TickContext, decision_ctx: DecisionContext
    ):
        agent = room.add_agent("a", 1, 1, energy=10).view()
        machine = AgentStateMachine("a", Role.UPGRADER, _make_policy(UpgradeState("ctrl")))
        state = machine.advance(agent, tick_ctx, decision_ctx)
        assert state == UpgradeState("ctrl")
        assert machine.current_state == state
        assert decision_ctx.counters.upgrading == 1
        assert machine.transitions == 1


class TestTransitions:
    def test_continue_keeps_state_without_deciding(
        self, room: SandboxRoom, tick_ctx: TickContext, decision_ctx: DecisionContext
    ):
        agent = room.add_agent("a", 1, 1).view()
        policy = _make_policy(_Forever())
        machine = AgentStateMachine("a", Role.GENERALIST, policy)
        machine.advance(agent, tick_ctx, decision_ctx)
        machine.advance(agent, tick_ctx, decision_ctx)
        machine.advance(agent, tick_ctx, decision_ctx)
        assert len(policy.calls) == 1
        assert machine.transitions == 1

    def test_exit_asks_policy_again(
        self, room: SandboxRoom, tick_ctx: TickContext, decision_ctx: DecisionContext
    ):
        # Agent is empty so the upgrade ends immediately
        agent = room.add_agent("a", 1, 1).view()
        policy = _make_policy(UpgradeState("ctrl"), HarvestState("src"))
        machine = AgentStateMachine("a", Role.GENERALIST, policy)
        machine.advance(agent, tick_ctx, decision_ctx)
        state = machine.advance(agent, tick_ctx, decision_ctx)
        assert state == HarvestState("src")
        assert decision_ctx.counters.upgrading == 0
        assert decision_ctx.counters.harvesting == 1
        assert len(policy.calls) == 2

    def test_change_state_skips_policy(
        self, room: SandboxRoom, tick_ctx: TickContext, decision_ctx: DecisionContext
    ):
        agent = room.add_agent("a", 1, 1).view()
        policy = _make_policy(_Redirect())
        machine = AgentStateMachine("a", Role.GENERALIST, policy)
        machine.advance(agent, tick_ctx, decision_ctx)
        state = machine.advance(agent, tick_ctx, decision_ctx)
        assert state == UpgradeState("ctrl")
        assert len(policy.calls) == 1

    def test_counters_balance_over_many_ticks(
        self, room: SandboxRoom, tick_ctx: TickContext, decision_ctx: DecisionContext
    ):
        room.add_source("src", 2, 2)
        agent = room.add_agent("a", 1, 1, energy=0)
        states = [HarvestState("src"), UpgradeState("ctrl")] * 10
        machine = AgentStateMachine("a", Role.GENERALIST, _make_policy(*states))
        for _ in range(40):
            machine.advance(agent.view(), tick_ctx, decision_ctx)
        counters = decision_ctx.counters
        assert counters.total() <= 1
        assert counters.count(machine.current_state.NAME) in (0, 1)

    def test_failing_policy_leaves_counters_balanced(
        self, room: SandboxRoom, tick_ctx: TickContext, decision_ctx: DecisionContext
    ):
        agent = room.add_agent("a", 1, 1).view()
        calls = []

        def decide(agent, ctx):
            calls.append(1)
            if len(calls) > 1:
                raise RuntimeError("boom")
            return UpgradeState("ctrl")

        machine = AgentStateMachine("a", Role.GENERALIST, decide)
        machine.advance(agent, tick_ctx, decision_ctx)
        with pytest.raises(RuntimeError):
            machine.advance(agent, tick_ctx, decision_ctx)
        assert decision_ctx.counters.upgrading == 0
        assert machine.current_state is None

    def test_failing_entry_hook_leaves_counters_balanced(
        self,
        room: SandboxRoom,
        tick_ctx: TickContext,
        decision_ctx: DecisionContext,
        monkeypatch: pytest.MonkeyPatch,
    ):
        agent = room.add_agent(
            "a", 1, 1, energy=10, memory=AgentMemory(role=Role.UPGRADER)
        ).view()

        def broken_set(name, memory):
            raise RuntimeError("memory unavailable")

        monkeypatch.setattr(room, "set", broken_set)
        machine = AgentStateMachine("a", Role.UPGRADER, _make_policy(UpgradeState("ctrl")))
        with pytest.raises(RuntimeError):
            machine.advance(agent, tick_ctx, decision_ctx)
        assert decision_ctx.counters.upgrading == 0
        assert machine.current_state is None


class TestRetire:
    def test_retire_runs_exit_hook(
        self, room: SandboxRoom, tick_ctx: TickContext, decision_ctx: DecisionContext
    ):
        agent = room.add_agent("a", 1, 1, energy=10).view()
        machine = AgentStateMachine("a", Role.UPGRADER, _make_policy(UpgradeState("ctrl")))
        machine.advance(agent, tick_ctx, decision_ctx)
        machine.retire(decision_ctx.counters)
        assert decision_ctx.counters.upgrading == 0
        assert machine.current_state is None

    def test_retire_without_state(self, counters: TransitionCounters):
        machine = AgentStateMachine("a", Role.UPGRADER, _make_policy())
        machine.retire(counters)
        assert counters.total() == 0
