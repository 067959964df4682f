"""Miner loadout — a mobile base, then mostly WORK parts."""

from colonybot.helpers.bodies import cycle_pattern, fallback
from colonybot.models.catalogue import MAX_BODY_PARTS, BodyPart, loadout_cost

BASE: tuple[BodyPart, ...] = (BodyPart.MOVE, BodyPart.MOVE, BodyPart.CARRY, BodyPart.WORK)

# Two WORK for every MOVE
PATTERN: tuple[BodyPart, ...] = (BodyPart.WORK, BodyPart.WORK, BodyPart.MOVE)

DEFAULT: tuple[BodyPart, ...] = (BodyPart.WORK, BodyPart.CARRY, BodyPart.MOVE)


def build_loadout(budget: int, max_parts: int = MAX_BODY_PARTS) -> list[BodyPart]:
    if budget < loadout_cost(BASE) or max_parts < len(BASE):
        return fallback(DEFAULT, budget, max_parts)
    return cycle_pattern(PATTERN, budget, base=BASE, max_parts=max_parts)
