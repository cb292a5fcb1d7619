import logging
import operator
from collections.abc import Iterable, Sequence
from itertools import pairwise
from typing import TypeVar

from oner_quantize.errors import LengthMismatchError
from oner_quantize.interval import Interval, merge_neighbours_with_same_class
from oner_quantize.splits import candidate_splits, intervals_from_splits, trim_splits
from oner_quantize.util import DEFAULT_SMALL

logger = logging.getLogger(__name__)

A = TypeVar("A")
C = TypeVar("C")


def _is_comparable(value: object) -> bool:
    # NaN-like values are the ones that are not equal to themselves
    return value == value


def sort_pairs(attribute: Sequence[A], classes: Sequence[C]) -> list[tuple[A, C]]:
    """Pair each attribute value with its class and sort by value.

    The sort is stable, so pairs with equal values keep their input order.
    Values that do not compare equal to themselves (such as NaN) cannot be
    ordered; they are placed after every comparable value, in input order.

    Comparable values must form a chain once sorted: each value has to be
    ``<=`` the next. Values that are only partially ordered against each
    other (such as overlapping sets) cannot be split into intervals.

    Raises:
        LengthMismatchError: If ``attribute`` and ``classes`` differ in length
        ValueError: If two sorted neighbours are not ordered against each other
    """
    if len(attribute) != len(classes):
        raise LengthMismatchError(len(attribute), len(classes))

    pairs = list(zip(attribute, classes))
    comparable = [pair for pair in pairs if _is_comparable(pair[0])]
    incomparable = [pair for pair in pairs if not _is_comparable(pair[0])]
    if incomparable:
        logger.debug(
            "Placing %d incomparable attribute values after %d ordered values",
            len(incomparable),
            len(comparable),
        )

    ordered = sorted(comparable, key=lambda pair: pair[0])
    for (previous, _), (current, _) in pairwise(ordered):
        if not previous <= current:
            raise ValueError(
                f"Attribute values {previous!r} and {current!r} are not ordered "
                f"against each other.\n"
                f"Every pair of attribute values must compare with <=; only "
                f"values unequal to themselves (such as NaN) may be unordered.\n"
                f"Hint: map partially ordered values onto a total order first."
            )
    return ordered + incomparable


def find_intervals(
    attribute: Sequence[A], classes: Sequence[C], small: int = DEFAULT_SMALL
) -> list[Interval[A, C]]:
    """Quantize an attribute into an ordered list of labeled intervals.

    Args:
        attribute: A single attribute (feature, column), typically numeric
        classes: The class of each attribute value, position by position
        small: Small disjunct threshold. Every interval must have at least
            one class occurring more than ``small`` times.

    Returns:
        Non-overlapping intervals in ascending order that together cover
        every value. Neighbouring intervals never share a class.

    Raises:
        LengthMismatchError: If ``attribute`` and ``classes`` differ in length
        ValueError: If there are no values, values are not mutually ordered,
            or ``small`` is negative
        TypeError: If ``small`` is not an integer (a bool does not count)

    Example:
        >>> intervals = find_intervals(
        ...     [1, 10, 3, 1, 20, 30, 100],
        ...     ["a", "b", "a", "a", "b", "b", "c"],
        ...     small=2,
        ... )
        >>> [str(interval) for interval in intervals]
        ['< 10 → a', '10 to 100 → b', '>= 100 → c']
    """
    if isinstance(small, bool):
        raise TypeError(f"small must be a non-negative int, got bool: {small!r}")
    try:
        small = operator.index(small)
    except TypeError:
        raise TypeError(
            f"small must be a non-negative int, got {type(small).__name__}: "
            f"{small!r}"
        ) from None
    if small < 0:
        raise ValueError(
            f"small must be a non-negative int, got {small}.\n"
            f"Hint: use small=0 to disable small disjunct suppression."
        )

    data = sort_pairs(attribute, classes)
    if not data:
        raise ValueError(
            "find_intervals() requires at least one attribute value.\n"
            "Example: find_intervals([1, 2, 3], ['a', 'a', 'b'], small=1)"
        )

    splits = candidate_splits(data)
    trimmed = trim_splits(splits, small, data)
    intervals = merge_neighbours_with_same_class(intervals_from_splits(trimmed, data))

    logger.debug(
        "Quantized %d values: %d candidate splits, %d kept, %d intervals "
        "(small=%d)",
        len(data),
        len(splits),
        len(trimmed),
        len(intervals),
        small,
    )
    return intervals


def quantize(intervals: Iterable[Interval[A, C]], value: A) -> Interval[A, C] | None:
    """Find the interval that applies to ``value``.

    Returns the first interval, in list order, that contains ``value``, or
    None when none does.

    Example:
        >>> intervals = [
        ...     Interval.lower(15, "x"),
        ...     Interval.range(15, 20, "y"),
        ...     Interval.upper(20, "z"),
        ... ]
        >>> quantize(intervals, 15).class_
        'y'
    """
    return next((interval for interval in intervals if interval.matches(value)), None)
