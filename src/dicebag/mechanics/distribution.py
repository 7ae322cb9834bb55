"""Sampled frequency distributions of a dice bag."""
from __future__ import annotations

import logging
import random
import threading
from typing import TYPE_CHECKING

from dicebag.mechanics.roller import EXPLOSION_LIMIT, sample_total

if TYPE_CHECKING:
    from dicebag.models.bag import DiceBag

logger = logging.getLogger(__name__)


def seed_counts(bag: DiceBag) -> dict[int, int]:
    """Every integer in the bag's range, inclusive, at zero."""
    low, high = bag.range
    return {value: 0 for value in range(low, high + 1)}


def make_count_distribution(
    bag: DiceBag,
    roll_count: int,
    rng: random.Random | None = None,
    cancel: threading.Event | None = None,
    explosion_limit: int = EXPLOSION_LIMIT,
) -> dict[int, int]:
    """Roll ``bag`` ``roll_count`` times and count each total.

    Totals outside the structural range (exploding or subtracted dice) get
    their own keys. ``cancel`` is checked between rolls.
    """
    rng = rng if rng is not None else random
    counts = seed_counts(bag)
    for done in range(roll_count):
        if cancel is not None and cancel.is_set():
            logger.info("Distribution cancelled after %d of %d rolls.", done, roll_count)
            break
        total = sample_total(bag, rng, explosion_limit)
        counts[total] = counts.get(total, 0) + 1
    return dict(sorted(counts.items()))


def to_percentages(counts: dict[int, int], roll_count: int) -> dict[int, float]:
    if roll_count <= 0:
        return {value: 0.0 for value in counts}
    return {value: n / roll_count * 100.0 for value, n in counts.items()}


def make_frequency_distribution(
    bag: DiceBag,
    roll_count: int,
    rng: random.Random | None = None,
    cancel: threading.Event | None = None,
    explosion_limit: int = EXPLOSION_LIMIT,
) -> dict[int, float]:
    """Same as the count distribution, as percentages of ``roll_count``."""
    counts = make_count_distribution(bag, roll_count, rng, cancel, explosion_limit)
    return to_percentages(counts, roll_count)


def mean(counts: dict[int, int]) -> float:
    rolls = sum(counts.values())
    if rolls == 0:
        return 0.0
    return sum(value * n for value, n in counts.items()) / rolls


def histogram_payload(distribution: dict[int, float]) -> tuple[list[tuple[int, float]], int]:
    """(value, frequency) pairs plus their count, as plain data."""
    pairs = [(value, float(freq)) for value, freq in distribution.items()]
    return pairs, len(pairs)
