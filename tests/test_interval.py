"""Tests for interval shapes and neighbour merging."""

import math
from dataclasses import FrozenInstanceError
from typing import get_type_hints

import pytest

from oner_quantize import Infinite, Interval, Lower, Range, Upper
from oner_quantize.interval import merge_neighbours_with_same_class


class TestMatches:
    """Coverage tests for each interval shape."""

    def test_lower_excludes_its_bound(self):
        interval = Interval.lower(10, "a")
        assert interval.matches(9)
        assert not interval.matches(10)

    def test_range_is_half_open(self):
        interval = Interval.range(10, 20, "a")
        assert not interval.matches(9)
        assert interval.matches(10)
        assert interval.matches(19)
        assert not interval.matches(20)

    def test_upper_includes_its_bound(self):
        interval = Interval.upper(20, "a")
        assert not interval.matches(19)
        assert interval.matches(20)
        assert interval.matches(10_000)

    def test_infinite_matches_everything(self):
        interval = Interval.infinite("a")
        assert interval.matches(-1e300)
        assert interval.matches(1e300)
        assert interval.matches(float("nan"))

    def test_nan_only_matches_infinite(self):
        nan = float("nan")
        assert not Interval.lower(10.0, "a").matches(nan)
        assert not Interval.range(10.0, 20.0, "a").matches(nan)
        assert not Interval.upper(20.0, "a").matches(nan)


class TestShapes:
    """Construction, bounds and rendering."""

    def test_factories_build_expected_shapes(self):
        assert Interval.lower(1, "a") == Lower(below=1, class_="a")
        assert Interval.range(1, 2, "a") == Range(from_=1, below=2, class_="a")
        assert Interval.upper(2, "a") == Upper(from_=2, class_="a")
        assert Interval.infinite("a") == Infinite(class_="a")

    def test_matches_signatures_agree(self):
        hints = {
            get_type_hints(shape.matches)["value"]
            for shape in (Lower, Range, Upper, Infinite)
        }
        assert hints == {get_type_hints(Interval.matches)["value"]}

    def test_shapes_with_same_fields_are_not_equal(self):
        assert Lower(below=1, class_="a") != Upper(from_=1, class_="a")

    @pytest.mark.parametrize(
        "interval, bounds",
        [
            (Interval.lower(5, "a"), (None, 5)),
            (Interval.range(1, 5, "a"), (1, 5)),
            (Interval.upper(5, "a"), (5, None)),
            (Interval.infinite("a"), (None, None)),
        ],
    )
    def test_bounds(self, interval, bounds):
        assert (interval.lower_bound, interval.upper_bound) == bounds

    def test_range_rejects_empty_span(self):
        with pytest.raises(ValueError, match="must be < below"):
            Interval.range(5, 5, "a")

        with pytest.raises(ValueError):
            Interval.range(6, 5, "a")

    def test_intervals_are_immutable(self):
        interval = Interval.lower(5, "a")
        with pytest.raises(FrozenInstanceError):
            interval.below = 6  # type: ignore[misc]

    def test_intervals_are_hashable(self):
        assert len({Interval.lower(5, "a"), Interval.lower(5, "a")}) == 1

    def test_str(self):
        assert str(Interval.lower(85, "p")) == "< 85 → p"
        assert str(Interval.range(10, 100, "b")) == "10 to 100 → b"
        assert str(Interval.upper(85, "d")) == ">= 85 → d"
        assert str(Interval.infinite("p")) == "any → p"

    @pytest.mark.parametrize(
        "lower_bound, upper_bound, expected",
        [
            (None, None, Infinite(class_="a")),
            (None, 5, Lower(below=5, class_="a")),
            (5, None, Upper(from_=5, class_="a")),
            (1, 5, Range(from_=1, below=5, class_="a")),
        ],
    )
    def test_spanning(self, lower_bound, upper_bound, expected):
        assert Interval.spanning(lower_bound, upper_bound, "a") == expected

    def test_spanning_keeps_zero_bound(self):
        """A bound of 0 is still a bound."""
        assert Interval.spanning(0, None, "a") == Upper(from_=0, class_="a")
        assert Interval.spanning(None, 0, "a") == Lower(below=0, class_="a")


class TestMergeNeighbours:
    """Merging runs of adjacent same-class intervals."""

    def test_empty(self):
        assert merge_neighbours_with_same_class([]) == []

    def test_nothing_to_merge(self):
        intervals = [
            Interval.lower(10, "a"),
            Interval.range(10, 20, "b"),
            Interval.upper(20, "a"),
        ]
        assert merge_neighbours_with_same_class(intervals) == intervals

    def test_lower_and_upper_become_infinite(self):
        merged = merge_neighbours_with_same_class(
            [Interval.lower(10, "a"), Interval.upper(10, "a")]
        )
        assert merged == [Interval.infinite("a")]

    def test_lower_absorbs_range(self):
        merged = merge_neighbours_with_same_class(
            [Interval.lower(10, "a"), Interval.range(10, 20, "a"), Interval.upper(20, "b")]
        )
        assert merged == [Interval.lower(20, "a"), Interval.upper(20, "b")]

    def test_upper_absorbs_range(self):
        merged = merge_neighbours_with_same_class(
            [Interval.lower(10, "a"), Interval.range(10, 20, "b"), Interval.upper(20, "b")]
        )
        assert merged == [Interval.lower(10, "a"), Interval.upper(10, "b")]

    def test_long_run_of_ranges(self):
        merged = merge_neighbours_with_same_class(
            [
                Interval.lower(10, "a"),
                Interval.range(10, 20, "b"),
                Interval.range(20, 30, "b"),
                Interval.range(30, 40, "b"),
                Interval.upper(40, "a"),
            ]
        )
        assert merged == [
            Interval.lower(10, "a"),
            Interval.range(10, 40, "b"),
            Interval.upper(40, "a"),
        ]

    def test_does_not_mutate_input(self):
        intervals = [Interval.lower(10, "a"), Interval.upper(10, "a")]
        merge_neighbours_with_same_class(intervals)
        assert intervals == [Interval.lower(10, "a"), Interval.upper(10, "a")]

    def test_float_bounds(self):
        merged = merge_neighbours_with_same_class(
            [
                Interval.lower(0.5, "a"),
                Interval.range(0.5, math.pi, "a"),
                Interval.upper(math.pi, "c"),
            ]
        )
        assert merged == [Interval.lower(math.pi, "a"), Interval.upper(math.pi, "c")]
