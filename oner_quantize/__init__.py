from importlib.resources import files

from .core import find_intervals, quantize, sort_pairs
from .errors import LengthMismatchError, QuantizeInvariantError
from .interval import (
    Infinite,
    Interval,
    Lower,
    Range,
    Upper,
    merge_neighbours_with_same_class,
)
from .util import DEFAULT_SMALL

# Load documentation files for programmatic access by agents and code-aware tools
_docs_path = files(__package__) / "docs"
docs = {
    "readme": (_docs_path / "README.md").read_text(encoding="utf-8"),
    "api": (_docs_path / "API.md").read_text(encoding="utf-8"),
}

__all__ = [
    "Interval",
    "Lower",
    "Range",
    "Upper",
    "Infinite",
    "find_intervals",
    "quantize",
    "sort_pairs",
    "merge_neighbours_with_same_class",
    "LengthMismatchError",
    "QuantizeInvariantError",
    "DEFAULT_SMALL",
    "docs",
]
