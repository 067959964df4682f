"""Body part catalogue — part costs and loadout helpers."""

from collections.abc import Iterable
from enum import StrEnum

from pydantic import BaseModel, Field

# Largest body a production facility will accept
MAX_BODY_PARTS = 50


class BodyPart(StrEnum):
    """Every physical component an agent body can be built from."""

    MOVE = "move"
    WORK = "work"
    CARRY = "carry"
    ATTACK = "attack"
    RANGED_ATTACK = "ranged_attack"
    HEAL = "heal"
    CLAIM = "claim"
    TOUGH = "tough"


class PartSpec(BaseModel):
    """A body part and what it costs to produce."""

    part: BodyPart
    cost: int = Field(gt=0)


PARTS: dict[BodyPart, PartSpec] = {
    BodyPart.MOVE: PartSpec(part=BodyPart.MOVE, cost=50),
    BodyPart.WORK: PartSpec(part=BodyPart.WORK, cost=100),
    BodyPart.CARRY: PartSpec(part=BodyPart.CARRY, cost=50),
    BodyPart.ATTACK: PartSpec(part=BodyPart.ATTACK, cost=80),
    BodyPart.RANGED_ATTACK: PartSpec(part=BodyPart.RANGED_ATTACK, cost=150),
    BodyPart.HEAL: PartSpec(part=BodyPart.HEAL, cost=250),
    BodyPart.CLAIM: PartSpec(part=BodyPart.CLAIM, cost=600),
    BodyPart.TOUGH: PartSpec(part=BodyPart.TOUGH, cost=10),
}

# Energy a single CARRY part can hold
CARRY_CAPACITY = 50


def part_cost(part: BodyPart) -> int:
    """Return the production cost of a single body part."""
    return PARTS[part].cost


def loadout_cost(parts: Iterable[BodyPart]) -> int:
    """Return the total production cost of a loadout."""
    return sum(part_cost(p) for p in parts)


def count_parts(parts: Iterable[BodyPart], part: BodyPart) -> int:
    """Count how many of `part` a loadout contains."""
    return sum(1 for p in parts if p == part)
