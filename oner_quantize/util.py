"""Utility constants and frequency helpers for oner_quantize.

Majority-class ties are resolved in favour of the class seen first in the
segment, following ``Counter.most_common`` ordering. The result is stable
across runs and platforms.
"""

from collections import Counter
from collections.abc import Hashable, Iterable
from typing import TypeVar

# Holte's recommended small disjunct threshold
DEFAULT_SMALL = 6

C = TypeVar("C", bound=Hashable)


def frequency_count(labels: Iterable[C]) -> Counter[C]:
    """Count occurrences of each label, keyed in first-seen order."""
    return Counter(labels)


def most_frequent_class(labels: Iterable[C]) -> C | None:
    """Return the most common label, or None when there are no labels."""
    ranked = frequency_count(labels).most_common(1)
    if not ranked:
        return None
    return ranked[0][0]
