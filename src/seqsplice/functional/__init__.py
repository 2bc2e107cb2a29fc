"""Functional primitives for seqsplice.

This package provides generic operations over ordered sequences. Utilities
are stateless and side-effect-free (``for_each`` and ``reverse_in_place``
aside, whose effects are their contract) so they can be chained freely by
the caller.
"""

from seqsplice.functional.reshape import (
    chunk,
    filter_,
    remove,
    reverse,
    reverse_in_place,
    unique,
)
from seqsplice.functional.search import (
    NOT_FOUND,
    every,
    find,
    find_index,
    includes,
    index_of,
    last_index_of,
    some,
)
from seqsplice.functional.transform import flat, flat_map, for_each, map_, reduce

__all__ = [
    "map_",
    "reduce",
    "filter_",
    "some",
    "every",
    "find",
    "find_index",
    "for_each",
    "includes",
    "index_of",
    "last_index_of",
    "flat",
    "flat_map",
    "reverse",
    "reverse_in_place",
    "unique",
    "chunk",
    "remove",
    "NOT_FOUND",
]
