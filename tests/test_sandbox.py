"""Unit tests for the sandbox host: mechanics and host interfaces."""

from colonybot import ActionCode, AgentMemory, BodyPart, Role, StructureKind

from services.sandbox.rules import (
    build_yield,
    harvest_yield,
    split_cost,
    step_toward,
    upgrade_yield,
)
from services.sandbox.state import SandboxRoom, starter_room


class TestMechanics:
    def test_step_toward_diagonal(self, room: SandboxRoom):
        assert step_toward(room.pos(0, 0), room.pos(5, 3)) == room.pos(1, 1)

    def test_step_stops_adjacent(self, room: SandboxRoom):
        assert step_toward(room.pos(4, 4), room.pos(5, 5)) == room.pos(4, 4)

    def test_yields_are_bounded(self):
        assert harvest_yield(3, 100, 4) == 4
        assert harvest_yield(3, 1, 50) == 1
        assert build_yield(2, 7, 100) == 7
        assert upgrade_yield(4, 2) == 2

    def test_split_cost_in_order(self):
        assert split_cost([300, 50, 50], 320) == [0, 30, 50]

    def test_split_cost_short(self):
        assert split_cost([100, 50], 200) is None


class TestMemoryStore:
    def test_stored_as_json(self, room: SandboxRoom):
        room.set("a", AgentMemory(role=Role.MINER))
        assert room.get("a") == AgentMemory(role=Role.MINER)
        assert list(room.names()) == ["a"]

    def test_unreadable_record(self, room: SandboxRoom):
        room.set_raw("a", "{not json")
        assert room.get("a") is None

    def test_delete_missing_is_noop(self, room: SandboxRoom):
        room.delete("nobody")
        assert list(room.names()) == []


class TestProduction:
    def test_spawn_spends_energy_and_marks_busy(self, room: SandboxRoom):
        spawn = room.structures(StructureKind.SPAWN)[0]
        body = [BodyPart.WORK, BodyPart.CARRY, BodyPart.MOVE]
        code = room.spawn_agent(spawn, body, "w", AgentMemory(role=Role.GENERALIST))
        assert code is ActionCode.OK
        assert room.energy_available() == 100
        assert room.structure("spawn-1").spawning
        assert room.agent("w").body == tuple(body)

    def test_busy_until_next_tick(self, room: SandboxRoom):
        spawn = room.structures(StructureKind.SPAWN)[0]
        memory = AgentMemory(role=Role.GENERALIST)
        room.spawn_agent(spawn, [BodyPart.MOVE], "w1", memory)
        assert room.spawn_agent(spawn, [BodyPart.MOVE], "w2", memory) is ActionCode.BUSY
        room.advance_tick()
        assert room.spawn_agent(spawn, [BodyPart.MOVE], "w2", memory) is ActionCode.OK

    def test_not_enough_energy(self, room: SandboxRoom):
        spawn = room.structures(StructureKind.SPAWN)[0]
        body = [BodyPart.CLAIM]
        code = room.spawn_agent(spawn, body, "c", AgentMemory(role=Role.GENERALIST))
        assert code is ActionCode.NOT_ENOUGH_RESOURCES

    def test_only_spawns_produce(self, room: SandboxRoom):
        controller = room.structures(StructureKind.CONTROLLER)[0]
        code = room.spawn_agent(
            controller, [BodyPart.MOVE], "x", AgentMemory(role=Role.GENERALIST)
        )
        assert code is ActionCode.INVALID_TARGET


class TestStarterRoom:
    def test_layout(self):
        room = starter_room()
        assert len(room.sources()) == 2
        assert len(room.structures(StructureKind.CONTAINER)) == 2
        assert room.energy_available() == 400
        assert len(room.construction_sites()) == 1
