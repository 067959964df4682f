"""Shared test fixtures."""

import pytest
from colonybot import (
    ColonyConfig,
    DecisionContext,
    StructureKind,
    TickContext,
    TransitionCounters,
)

from services.colony.controller import ColonyController
from services.sandbox.state import SandboxRoom


@pytest.fixture
def room() -> SandboxRoom:
    """A bare room: one stocked spawn and a controller."""
    r = SandboxRoom()
    r.add_structure("spawn-1", StructureKind.SPAWN, 25, 25, energy=300)
    r.add_structure("ctrl", StructureKind.CONTROLLER, 30, 35)
    return r


@pytest.fixture
def counters() -> TransitionCounters:
    return TransitionCounters()


@pytest.fixture
def tick_ctx(room: SandboxRoom) -> TickContext:
    return TickContext(room=room, actions=room, memory=room)


@pytest.fixture
def decision_ctx(room: SandboxRoom, counters: TransitionCounters) -> DecisionContext:
    return DecisionContext(room=room, memory=room, counters=counters)


@pytest.fixture
def controller(room: SandboxRoom) -> ColonyController:
    """A controller wired to the sandbox room for every host interface."""
    return ColonyController(room, room, room, room, ColonyConfig())
