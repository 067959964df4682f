from colonybot.helpers.bodies import cycle_pattern, fallback, fill_in_order, repeat_block
from colonybot.helpers.search import (
    SPAWN_KINDS,
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

__all__ = [
    "EnergyAuthority",
    "SPAWN_KINDS",
    "cycle_pattern",
    "fallback",
    "fill_in_order",
    "find_controller",
    "find_energy",
    "find_first",
    "find_nearest",
    "repeat_block",
    "source_at_index",
    "structures_of",
    "total_spawn_capacity",
    "upgrade_controller",
]
