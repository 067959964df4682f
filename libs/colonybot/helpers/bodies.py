"""Loadout construction primitives used by the per-role loadout policies.

Every primitive stays within both the energy budget and `max_parts`.
"""

from collections.abc import Sequence

from colonybot.models.catalogue import MAX_BODY_PARTS, BodyPart, loadout_cost, part_cost


def _check_budget(budget: int) -> None:
    if budget < 0:
        raise ValueError(f"Budget must not be negative, got {budget}")


def fallback(
    default: Sequence[BodyPart], budget: int, max_parts: int = MAX_BODY_PARTS
) -> list[BodyPart]:
    """The default loadout if it is affordable and small enough, otherwise nothing."""
    _check_budget(budget)
    if loadout_cost(default) <= budget and len(default) <= max_parts:
        return list(default)
    return []


def repeat_block(
    block: Sequence[BodyPart],
    budget: int,
    default: Sequence[BodyPart] = (),
    max_parts: int = MAX_BODY_PARTS,
) -> list[BodyPart]:
    """Add whole copies of `block` while they stay within budget.

    Below the cost of one block, falls back to `default`.
    """
    _check_budget(budget)
    block_cost = loadout_cost(block)
    copies = min(budget // block_cost, max_parts // len(block))
    if copies == 0:
        return fallback(default, budget, max_parts)
    return list(block) * copies


def fill_in_order(
    parts: Sequence[BodyPart],
    budget: int,
    filler: BodyPart | None = None,
    max_parts: int = MAX_BODY_PARTS,
) -> list[BodyPart]:
    """Add `parts` one at a time, in order, stopping at the first unaffordable one.

    Afterwards, spends the remaining budget on `filler` if given.
    """
    _check_budget(budget)
    body: list[BodyPart] = []
    cost = 0
    for part in parts:
        if len(body) >= max_parts or cost + part_cost(part) > budget:
            break
        body.append(part)
        cost += part_cost(part)

    if filler is not None:
        while len(body) < max_parts and cost + part_cost(filler) <= budget:
            body.append(filler)
            cost += part_cost(filler)

    return body


def cycle_pattern(
    pattern: Sequence[BodyPart],
    budget: int,
    base: Sequence[BodyPart],
    max_parts: int = MAX_BODY_PARTS,
) -> list[BodyPart]:
    """Extend `base` with `pattern` repeated part by part while affordable.

    Unaffordable parts are skipped so a cheaper part later in the pattern can
    still be added; stops when a full pass adds nothing.

    Raises:
        ValueError: If `base` alone is over budget or longer than `max_parts`.
    """
    _check_budget(budget)
    body = list(base)
    cost = loadout_cost(body)
    if cost > budget or len(body) > max_parts:
        raise ValueError(f"Base loadout doesn't fit ({cost} energy, {len(body)} parts)")
    added = True
    while added and len(body) < max_parts:
        added = False
        for part in pattern:
            if len(body) >= max_parts:
                break
            if cost + part_cost(part) <= budget:
                body.append(part)
                cost += part_cost(part)
                added = True
    return body
