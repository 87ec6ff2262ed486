"""Tests for the page count policy."""

import random

import pytest

from storyweaver.core.page_count import (
    FIXED_PAGE_COUNTS,
    RANGED_PAGE_COUNTS,
    coerce_reading_length,
    resolve_count,
)
from storyweaver.core.types import PageCountPolicy, ReadingLength


class TestFixedPolicy:
    """Tests for the fixed policy."""

    @pytest.mark.parametrize(
        "length,expected",
        [("short", 5), ("medium", 7), ("long", 15)],
    )
    def test_fixed_counts(self, length, expected):
        assert resolve_count(length) == expected

    def test_accepts_enum(self):
        assert resolve_count(ReadingLength.LONG, policy=PageCountPolicy.FIXED) == 15

    def test_ignores_rng(self):
        assert resolve_count("short", rng=random.Random(99)) == 5


class TestRangedPolicy:
    """Tests for the ranged policy."""

    @pytest.mark.parametrize("length", list(ReadingLength))
    def test_counts_stay_in_range(self, length):
        low, high = RANGED_PAGE_COUNTS[length]
        rng = random.Random(7)
        for _ in range(50):
            count = resolve_count(length, rng=rng, policy=PageCountPolicy.RANGED)
            assert low <= count <= high

    def test_seeded_rng_is_reproducible(self):
        first = resolve_count("long", rng=random.Random(42), policy="ranged")
        second = resolve_count("long", rng=random.Random(42), policy="ranged")
        assert first == second

    def test_ranges(self):
        assert RANGED_PAGE_COUNTS[ReadingLength.SHORT] == (3, 4)
        assert RANGED_PAGE_COUNTS[ReadingLength.MEDIUM] == (5, 7)
        assert RANGED_PAGE_COUNTS[ReadingLength.LONG] == (8, 12)


class TestCoerceReadingLength:
    """Tests for coerce_reading_length."""

    def test_normalizes_case_and_whitespace(self):
        assert coerce_reading_length("  SHORT ") is ReadingLength.SHORT

    def test_unknown_value_falls_back_to_medium(self, caplog):
        with caplog.at_level("WARNING"):
            assert coerce_reading_length("epic") is ReadingLength.MEDIUM
        assert "Unknown reading length" in caplog.text

    def test_none_falls_back_to_medium(self):
        assert coerce_reading_length(None) is ReadingLength.MEDIUM

    def test_unknown_value_still_resolves_a_count(self):
        assert resolve_count("epic") == FIXED_PAGE_COUNTS[ReadingLength.MEDIUM]
