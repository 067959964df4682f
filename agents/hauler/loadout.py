"""Hauler loadout — CARRY-heavy, topped up with MOVE."""

from colonybot.helpers.bodies import fill_in_order
from colonybot.models.catalogue import MAX_BODY_PARTS, BodyPart

M, C = BodyPart.MOVE, BodyPart.CARRY

# Added one part at a time until the next one is unaffordable
TARGET: tuple[BodyPart, ...] = (M, C, M, C, M, C, C, M, C, C, M, C, C, M)


def build_loadout(budget: int, max_parts: int = MAX_BODY_PARTS) -> list[BodyPart]:
    return fill_in_order(TARGET, budget, filler=BodyPart.MOVE, max_parts=max_parts)
