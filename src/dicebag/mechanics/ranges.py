"""Structural [min, max] of a dice bag, computed without sampling."""
from __future__ import annotations

from typing import Iterable

from dicebag.models.groups import Bonus, DieGroup


def group_span(group: DieGroup | Bonus) -> tuple[int, int]:
    """Unsigned (low, high) contribution of one group."""
    if isinstance(group, Bonus):
        return group.bonus, group.bonus
    per_low, per_high = group.cutoff.bounds(group.size)
    survivors = group.true_count
    return per_low * survivors, per_high * survivors


def add_to_range(group: DieGroup | Bonus, acc: tuple[int, int]) -> tuple[int, int]:
    """Fold one group into the running range, keeping min <= max."""
    low, high = group_span(group)
    first = group.op.apply(acc[0], low)
    second = group.op.apply(acc[1], high)
    if first > second:
        return second, first
    return first, second


def calculate_range(groups: Iterable[DieGroup | Bonus]) -> tuple[int, int]:
    """Range of a sequence of groups. Explosions are not accounted for."""
    acc = (0, 0)
    for group in groups:
        acc = add_to_range(group, acc)
    return acc
