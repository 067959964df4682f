"""Colony Bot — task state machines and role policies for tick-driven worker agents."""

from colonybot.agent import AgentStateMachine, DecidePolicy
from colonybot.config import ColonyConfig
from colonybot.context import (
    COUNTED_STATES,
    DecisionContext,
    TickContext,
    TransitionCounters,
)
from colonybot.helpers.bodies import cycle_pattern, fallback, fill_in_order, repeat_block
from colonybot.helpers.search import (
    EnergyAuthority,
    find_controller,
    find_energy,
    find_first,
    find_nearest,
    source_at_index,
    structures_of,
    total_spawn_capacity,
    upgrade_controller,
)
from colonybot.host.interfaces import (
    ActionCode,
    Actions,
    MemoryStore,
    Production,
    RoomQuery,
)
from colonybot.models.catalogue import (
    CARRY_CAPACITY,
    MAX_BODY_PARTS,
    PARTS,
    BodyPart,
    PartSpec,
    count_parts,
    loadout_cost,
    part_cost,
)
from colonybot.models.memory import AgentMemory, Role, StateName
from colonybot.models.objects import (
    ENERGY,
    AgentView,
    ConstructionSite,
    Position,
    RoomObject,
    Source,
    Store,
    Structure,
    StructureKind,
)
from colonybot.states import (
    CONTINUE,
    EXIT,
    BuildState,
    DeliverState,
    HarvestState,
    IdleState,
    Outcome,
    TaskState,
    TickResult,
    UpgradeState,
    WithdrawState,
)

__all__ = [
    # State machine
    "AgentStateMachine",
    "COUNTED_STATES",
    "DecidePolicy",
    "DecisionContext",
    "TickContext",
    "TransitionCounters",
    # Task states
    "BuildState",
    "CONTINUE",
    "DeliverState",
    "EXIT",
    "HarvestState",
    "IdleState",
    "Outcome",
    "TaskState",
    "TickResult",
    "UpgradeState",
    "WithdrawState",
    # Host interfaces
    "ActionCode",
    "Actions",
    "MemoryStore",
    "Production",
    "RoomQuery",
    # Models
    "AgentMemory",
    "AgentView",
    "BodyPart",
    "CARRY_CAPACITY",
    "ColonyConfig",
    "ConstructionSite",
    "ENERGY",
    "MAX_BODY_PARTS",
    "PARTS",
    "PartSpec",
    "Position",
    "Role",
    "RoomObject",
    "Source",
    "StateName",
    "Store",
    "Structure",
    "StructureKind",
    # Helpers
    "EnergyAuthority",
    "count_parts",
    "cycle_pattern",
    "fallback",
    "fill_in_order",
    "find_controller",
    "find_energy",
    "find_first",
    "find_nearest",
    "loadout_cost",
    "part_cost",
    "repeat_block",
    "source_at_index",
    "structures_of",
    "total_spawn_capacity",
    "upgrade_controller",
]
