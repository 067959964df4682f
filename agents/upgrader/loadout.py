"""Upgrader loadout — shares the builder blueprint."""

from colonybot.helpers.bodies import repeat_block
from colonybot.models.catalogue import MAX_BODY_PARTS, BodyPart

from agents.builder.loadout import BLUEPRINT, DEFAULT


def build_loadout(budget: int, max_parts: int = MAX_BODY_PARTS) -> list[BodyPart]:
    return repeat_block(BLUEPRINT, budget, default=DEFAULT, max_parts=max_parts)
