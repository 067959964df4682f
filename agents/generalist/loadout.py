"""Generalist loadout — balanced WORK/CARRY/MOVE blocks."""

from colonybot.helpers.bodies import repeat_block
from colonybot.models.catalogue import MAX_BODY_PARTS, BodyPart

BLOCK: tuple[BodyPart, ...] = (BodyPart.WORK, BodyPart.CARRY, BodyPart.MOVE, BodyPart.MOVE)

# Smallest useful worker, produced when a full block is unaffordable
DEFAULT: tuple[BodyPart, ...] = (BodyPart.WORK, BodyPart.CARRY, BodyPart.MOVE)


def build_loadout(budget: int, max_parts: int = MAX_BODY_PARTS) -> list[BodyPart]:
    return repeat_block(BLOCK, budget, default=DEFAULT, max_parts=max_parts)
