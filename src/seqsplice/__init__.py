"""Generic functional-style operations over ordered sequences."""

from seqsplice.functional import (
    NOT_FOUND,
    chunk,
    every,
    filter_,
    find,
    find_index,
    flat,
    flat_map,
    for_each,
    includes,
    index_of,
    last_index_of,
    map_,
    reduce,
    remove,
    reverse,
    reverse_in_place,
    some,
    unique,
)

__version__ = "0.1.0"

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
