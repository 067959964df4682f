"""Sandbox mechanics — pure functions for movement and per-action yields.

Deliberately minimal: enough to exercise the colony end to end, not a model
of any particular game.
"""

from colonybot import Position

HARVEST_RANGE = 1
TRANSFER_RANGE = 1
BUILD_RANGE = 3
UPGRADE_RANGE = 3

HARVEST_PER_WORK = 2
BUILD_PER_WORK = 5
UPGRADE_PER_WORK = 1


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def step_toward(pos: Position, target: Position) -> Position:
    """One tile closer to `target` (diagonals allowed); stays put when adjacent."""
    if pos.range_to(target) <= 1:
        return pos
    return Position(
        x=pos.x + _sign(target.x - pos.x),
        y=pos.y + _sign(target.y - pos.y),
        room=pos.room,
    )


def harvest_yield(work_parts: int, source_energy: int, free: int) -> int:
    """Energy moved from a source into an agent this tick."""
    return max(0, min(work_parts * HARVEST_PER_WORK, source_energy, free))


def build_yield(work_parts: int, carried: int, remaining: int) -> int:
    """Progress added to a construction site this tick (1 energy per point)."""
    return max(0, min(work_parts * BUILD_PER_WORK, carried, remaining))


def upgrade_yield(work_parts: int, carried: int) -> int:
    """Energy spent on the controller this tick."""
    return max(0, min(work_parts * UPGRADE_PER_WORK, carried))


def split_cost(balances: list[int], cost: int) -> list[int] | None:
    """Deduct `cost` from `balances` in order.

    Returns the new balances, or None if their total is short of `cost`.
    """
    if sum(balances) < cost:
        return None
    remaining = cost
    result: list[int] = []
    for balance in balances:
        taken = min(balance, remaining)
        remaining -= taken
        result.append(balance - taken)
    return result
