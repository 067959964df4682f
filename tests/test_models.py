"""Unit tests for the data models: catalogue, memory, room snapshots."""

import pytest
from pydantic import ValidationError

from colonybot import (
    CARRY_CAPACITY,
    ENERGY,
    PARTS,
    AgentMemory,
    BodyPart,
    Position,
    Role,
    Source,
    StateName,
    Store,
    Structure,
    StructureKind,
    count_parts,
    loadout_cost,
    part_cost,
)


class TestCatalogue:
    def test_every_part_is_priced(self):
        for part in BodyPart:
            assert part in PARTS
            assert PARTS[part].part == part

    def test_core_part_costs(self):
        assert part_cost(BodyPart.MOVE) == 50
        assert part_cost(BodyPart.WORK) == 100
        assert part_cost(BodyPart.CARRY) == 50

    def test_loadout_cost(self):
        assert loadout_cost([BodyPart.WORK, BodyPart.CARRY, BodyPart.MOVE]) == 200
        assert loadout_cost([]) == 0

    def test_count_parts(self):
        body = [BodyPart.WORK, BodyPart.WORK, BodyPart.MOVE]
        assert count_parts(body, BodyPart.WORK) == 2
        assert count_parts(body, BodyPart.CARRY) == 0

    def test_carry_capacity(self):
        assert CARRY_CAPACITY == 50


class TestAgentMemory:
    def test_defaults_to_idle(self):
        memory = AgentMemory(role=Role.MINER)
        assert memory.current_state == StateName.IDLE
        assert memory.bound_source_index is None

    def test_with_state_returns_copy(self):
        memory = AgentMemory(role=Role.HAULER)
        updated = memory.with_state(StateName.WITHDRAW)
        assert updated.current_state == StateName.WITHDRAW
        assert memory.current_state == StateName.IDLE

    def test_json_keeps_all_fields(self):
        memory = AgentMemory(role=Role.MINER, current_state=StateName.HARVEST).with_bound_source(1)
        restored = AgentMemory.from_json(memory.to_json())
        assert restored == memory

    def test_unknown_role_rejected(self):
        with pytest.raises(ValidationError):
            AgentMemory.from_json('{"role": "pirate"}')

    def test_negative_source_index_rejected(self):
        with pytest.raises(ValidationError):
            AgentMemory(role=Role.MINER, bound_source_index=-1)

    def test_frozen(self):
        memory = AgentMemory(role=Role.BUILDER)
        with pytest.raises(ValidationError):
            memory.role = Role.UPGRADER  # type: ignore[misc]


class TestPosition:
    def test_chebyshev_range(self):
        assert Position(0, 0).range_to(Position(3, 1)) == 3
        assert Position(5, 5).range_to(Position(5, 5)) == 0

    def test_other_room_is_far(self):
        assert Position(0, 0, "a").range_to(Position(0, 0, "b")) > 1000

    def test_is_near_to(self):
        assert Position(1, 1).is_near_to(Position(2, 2))
        assert not Position(1, 1).is_near_to(Position(3, 1))


class TestStore:
    def test_free_and_full(self):
        store = Store(capacity=50, contents={ENERGY: 50})
        assert store.is_full()
        assert store.free() == 0

    def test_empty(self):
        store = Store(capacity=50)
        assert store.is_empty()
        assert store.free() == 50

    def test_structure_without_store(self):
        controller = Structure(id="c", kind=StructureKind.CONTROLLER, pos=Position(0, 0))
        assert controller.stored() == 0
        assert controller.free_capacity() == 0
        assert controller.capacity() == 0

    def test_source_active(self):
        assert Source(id="s", pos=Position(0, 0), energy=10).active
        assert not Source(id="s", pos=Position(0, 0), energy=0).active
