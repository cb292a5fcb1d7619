"""Split detection, trimming and interval building.

All functions work on ``data``: (value, class) pairs already sorted by value.
A split is an index into ``data``; split ``i`` falls between ``data[i - 1]``
and ``data[i]``.
"""

from collections.abc import Sequence
from itertools import pairwise
from typing import TypeVar

from oner_quantize.errors import QuantizeInvariantError
from oner_quantize.interval import Interval
from oner_quantize.util import frequency_count, most_frequent_class

A = TypeVar("A")
C = TypeVar("C")


def candidate_splits(data: Sequence[tuple[A, C]]) -> list[int]:
    """Return every index where the value increases over its predecessor."""
    return [
        index
        for index, (previous, current) in enumerate(pairwise(data), start=1)
        if current[0] > previous[0]
    ]


def _segment_class(data: Sequence[tuple[A, C]], start: int, until: int) -> C | None:
    return most_frequent_class(label for _, label in data[start:until])


def _no_dominant_class(
    data: Sequence[tuple[A, C]], start: int, until: int, small: int
) -> bool:
    counts = frequency_count(label for _, label in data[start:until])
    return all(count <= small for count in counts.values())


def _next_split_same_class(
    data: Sequence[tuple[A, C]], start: int, until: int, next_split: int | None
) -> bool:
    if next_split is None:
        return False
    return _segment_class(data, start, until) == _segment_class(
        data, until, next_split
    )


def trim_splits(
    splits: Sequence[int], small: int, data: Sequence[tuple[A, C]]
) -> list[int]:
    """Drop splits that would close a small or redundant segment.

    Walks the candidates left to right, tracking where the current segment
    starts. A split is dropped when no class in the segment it closes occurs
    more than ``small`` times, or when the following segment has the same
    majority class. A kept split starts the next segment.
    """
    keep: list[int] = []
    start_index = 0
    for position, head in enumerate(splits):
        next_split = splits[position + 1] if position + 1 < len(splits) else None
        if _no_dominant_class(data, start_index, head, small):
            continue
        if _next_split_same_class(data, start_index, head, next_split):
            continue
        keep.append(head)
        start_index = head
    return keep


def intervals_from_splits(
    splits: Sequence[int], data: Sequence[tuple[A, C]]
) -> list[Interval[A, C]]:
    """Turn split indices into labeled intervals.

    The first split bounds a `Lower` interval and the last an `Upper` one,
    with a `Range` between each consecutive pair. No splits gives a single
    `Infinite` interval. Each interval takes its segment's majority class.

    Raises:
        QuantizeInvariantError: If a segment is empty
    """

    def majority(start: int, until: int) -> C:
        if start >= until:
            raise QuantizeInvariantError(
                f"Found no classes for segment [{start}, {until}) while building "
                f"intervals from splits {list(splits)} over {len(data)} values.\n"
                f"This is a bug in oner_quantize, not a problem with the input."
            )
        return _segment_class(data, start, until)

    if not splits:
        return [Interval.infinite(majority(0, len(data)))]

    first, last = splits[0], splits[-1]
    intervals: list[Interval[A, C]] = [
        Interval.lower(data[first][0], majority(0, first))
    ]
    for start, until in pairwise(splits):
        intervals.append(
            Interval.range(data[start][0], data[until][0], majority(start, until))
        )
    intervals.append(Interval.upper(data[last][0], majority(last, len(data))))
    return intervals
