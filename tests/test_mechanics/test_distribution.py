"""Tests for src/dicebag/mechanics/distribution.py."""
from __future__ import annotations

import random
import threading

import pytest

from dicebag.mechanics.distribution import (
    histogram_payload,
    make_count_distribution,
    make_frequency_distribution,
    mean,
    seed_counts,
    to_percentages,
)
from dicebag.parsing import parse


class TestCountDistribution:
    def test_seeded_with_whole_range(self):
        assert seed_counts(parse("2d4")) == {v: 0 for v in range(2, 9)}

    def test_counts_sum_to_rolls(self, rng):
        counts = make_count_distribution(parse("2d6"), 1000, rng=rng)
        assert sum(counts.values()) == 1000
        assert list(counts) == list(range(2, 13))

    def test_zero_rolls(self, rng):
        counts = make_count_distribution(parse("1d4+1"), 0, rng=rng)
        assert counts == {2: 0, 3: 0, 4: 0, 5: 0}

    def test_one_sided_dice(self, rng):
        assert make_count_distribution(parse("3d1+2"), 50, rng=rng) == {5: 50}

    def test_totals_outside_range_get_keys(self, rng):
        # Subtracted dice can land outside the structural range.
        bag = parse("1d6-1d6")
        assert bag.range == (0, 0)
        counts = make_count_distribution(bag, 2000, rng=rng)
        assert sum(counts.values()) == 2000
        assert min(counts) == -5
        assert max(counts) == 5
        assert list(counts) == sorted(counts)

    def test_exploding_dice_extend_keys(self):
        counts = make_count_distribution(parse("1d1!"), 10, rng=random.Random(0), explosion_limit=3)
        assert counts == {1: 0, 4: 10}

    def test_cancel_stops_early(self, rng):
        cancel = threading.Event()
        cancel.set()
        counts = make_count_distribution(parse("1d6"), 1000, rng=rng, cancel=cancel)
        assert sum(counts.values()) == 0

    def test_d10_mean(self, rng):
        counts = make_count_distribution(parse("1d10"), 20000, rng=rng)
        assert mean(counts) == pytest.approx(5.5, abs=0.1)


class TestFrequencyDistribution:
    def test_percentages_sum_to_hundred(self, rng):
        freq = make_frequency_distribution(parse("3d6"), 2000, rng=rng)
        assert sum(freq.values()) == pytest.approx(100.0)
        assert set(freq) == set(range(3, 19))

    def test_uniform_die_is_roughly_flat(self, rng):
        freq = make_frequency_distribution(parse("1d4"), 20000, rng=rng)
        for value in range(1, 5):
            assert freq[value] == pytest.approx(25.0, abs=2.0)

    def test_zero_rolls_gives_zeros(self):
        assert to_percentages({1: 0, 2: 0}, 0) == {1: 0.0, 2: 0.0}

    def test_bag_methods(self, rng):
        bag = parse("1d1+1")
        assert bag.make_count_distribution(10, rng=rng) == {2: 10}
        assert bag.make_frequency_distribution(10, rng=rng) == {2: 100.0}


class TestHelpers:
    def test_mean_of_empty(self):
        assert mean({1: 0, 2: 0}) == 0.0

    def test_mean(self):
        assert mean({1: 1, 3: 3}) == pytest.approx(2.5)

    def test_histogram_payload(self):
        pairs, length = histogram_payload({2: 25.0, 3: 75})
        assert pairs == [(2, 25.0), (3, 75.0)]
        assert length == 2
