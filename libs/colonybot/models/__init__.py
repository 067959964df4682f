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

__all__ = [
    "AgentMemory",
    "AgentView",
    "BodyPart",
    "CARRY_CAPACITY",
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
    "count_parts",
    "loadout_cost",
    "part_cost",
]
