"""Builder loadout — repeated blueprint blocks."""

from colonybot.helpers.bodies import repeat_block
from colonybot.models.catalogue import MAX_BODY_PARTS, BodyPart

BLUEPRINT: tuple[BodyPart, ...] = (
    BodyPart.MOVE,
    BodyPart.CARRY,
    BodyPart.WORK,
    BodyPart.WORK,
    BodyPart.MOVE,
    BodyPart.MOVE,
)

DEFAULT: tuple[BodyPart, ...] = (BodyPart.WORK, BodyPart.CARRY, BodyPart.MOVE)


def build_loadout(budget: int, max_parts: int = MAX_BODY_PARTS) -> list[BodyPart]:
    return repeat_block(BLUEPRINT, budget, default=DEFAULT, max_parts=max_parts)
