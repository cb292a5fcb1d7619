from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from typing_extensions import override

A = TypeVar("A")
C = TypeVar("C")


class Interval(ABC, Generic[A, C]):
    """A labeled span of attribute values.

    Concrete shapes are `Lower`, `Range`, `Upper` and `Infinite`. Bounds are
    half-open: the lower bound is inclusive and the upper bound exclusive.
    """

    class_: C

    @abstractmethod
    def matches(self, value: A) -> bool:
        """Return True if ``value`` falls inside this interval."""
        pass

    @property
    @abstractmethod
    def lower_bound(self) -> A | None:
        """Inclusive lower bound, or None when unbounded below."""
        pass

    @property
    @abstractmethod
    def upper_bound(self) -> A | None:
        """Exclusive upper bound, or None when unbounded above."""
        pass

    @staticmethod
    def lower(below: A, class_: C) -> "Lower[A, C]":
        return Lower(below=below, class_=class_)

    @staticmethod
    def range(from_: A, below: A, class_: C) -> "Range[A, C]":
        return Range(from_=from_, below=below, class_=class_)

    @staticmethod
    def upper(from_: A, class_: C) -> "Upper[A, C]":
        return Upper(from_=from_, class_=class_)

    @staticmethod
    def infinite(class_: C) -> "Infinite[A, C]":
        return Infinite(class_=class_)

    @staticmethod
    def spanning(
        lower_bound: A | None, upper_bound: A | None, class_: C
    ) -> "Interval[A, C]":
        """Build the shape covering ``[lower_bound, upper_bound)``.

        None on either side means the interval is unbounded on that side.
        """
        if lower_bound is None and upper_bound is None:
            return Infinite(class_=class_)
        if lower_bound is None:
            return Lower(below=upper_bound, class_=class_)
        if upper_bound is None:
            return Upper(from_=lower_bound, class_=class_)
        return Range(from_=lower_bound, below=upper_bound, class_=class_)


@dataclass(frozen=True, kw_only=True)
class Lower(Interval[A, C]):
    """Every value strictly below ``below``."""

    below: A
    class_: C

    @override
    def matches(self, value: A) -> bool:
        return value < self.below

    @property
    @override
    def lower_bound(self) -> A | None:
        return None

    @property
    @override
    def upper_bound(self) -> A | None:
        return self.below

    def __str__(self) -> str:
        return f"< {self.below} → {self.class_}"


@dataclass(frozen=True, kw_only=True)
class Range(Interval[A, C]):
    """Values from ``from_`` (inclusive) up to ``below`` (exclusive)."""

    from_: A
    below: A
    class_: C

    def __post_init__(self) -> None:
        if not self.from_ < self.below:
            raise ValueError(
                f"Range from_ ({self.from_!r}) must be < below ({self.below!r})"
            )

    @override
    def matches(self, value: A) -> bool:
        return self.from_ <= value < self.below

    @property
    @override
    def lower_bound(self) -> A | None:
        return self.from_

    @property
    @override
    def upper_bound(self) -> A | None:
        return self.below

    def __str__(self) -> str:
        return f"{self.from_} to {self.below} → {self.class_}"


@dataclass(frozen=True, kw_only=True)
class Upper(Interval[A, C]):
    """Every value at or above ``from_``."""

    from_: A
    class_: C

    @override
    def matches(self, value: A) -> bool:
        return value >= self.from_

    @property
    @override
    def lower_bound(self) -> A | None:
        return self.from_

    @property
    @override
    def upper_bound(self) -> A | None:
        return None

    def __str__(self) -> str:
        return f">= {self.from_} → {self.class_}"


@dataclass(frozen=True, kw_only=True)
class Infinite(Interval[A, C]):
    """The whole value domain."""

    class_: C

    @override
    def matches(self, value: A) -> bool:
        return True

    @property
    @override
    def lower_bound(self) -> A | None:
        return None

    @property
    @override
    def upper_bound(self) -> A | None:
        return None

    def __str__(self) -> str:
        return f"any → {self.class_}"


def merge_neighbours_with_same_class(
    intervals: Sequence[Interval[A, C]],
) -> list[Interval[A, C]]:
    """Collapse each run of adjacent intervals that share a class.

    The merged interval runs from the lower bound of the first interval in
    the run to the upper bound of the last. Order is preserved.

    Example:
        >>> merge_neighbours_with_same_class([
        ...     Interval.lower(10, "a"),
        ...     Interval.range(10, 20, "a"),
        ...     Interval.upper(20, "b"),
        ... ])
        [Lower(below=20, class_='a'), Upper(from_=20, class_='b')]
    """
    merged: list[Interval[A, C]] = []
    for interval in intervals:
        if merged and merged[-1].class_ == interval.class_:
            previous = merged[-1]
            merged[-1] = Interval.spanning(
                previous.lower_bound, interval.upper_bound, previous.class_
            )
        else:
            merged.append(interval)
    return merged
