"""Membership tests and lookups over ordered sequences.

Predicate-based lookups (``some``, ``every``, ``find``, ``find_index``) stop
scanning as soon as the answer is known. Value-based lookups (``includes``,
``index_of``, ``last_index_of``) compare with ``==``.

Not-found results are sentinels, never exceptions: ``-1`` for index lookups
and ``(default, False)`` for ``find``.
"""

import typing as tp

from seqsplice.core.types import Predicate, T

__all__ = [
    "some",
    "every",
    "find",
    "find_index",
    "includes",
    "index_of",
    "last_index_of",
    "NOT_FOUND",
]

NOT_FOUND = -1


# =============================================================================
# Predicate Lookups
# =============================================================================


def some(sequence: tp.Sequence[T], predicate: Predicate[T]) -> bool:
    """Return True if any element satisfies ``predicate``.

    Stops at the first match. Empty input gives False.
    """
    for item in sequence:
        if predicate(item):
            return True
    return False


def every(sequence: tp.Sequence[T], predicate: Predicate[T]) -> bool:
    """Return True if all elements satisfy ``predicate``.

    Stops at the first failure. Empty input gives True (vacuous truth).
    """
    for item in sequence:
        if not predicate(item):
            return False
    return True


def find(
    sequence: tp.Sequence[T],
    predicate: Predicate[T],
    default: tp.Optional[T] = None,
) -> tp.Tuple[tp.Optional[T], bool]:
    """Return the first element satisfying ``predicate``.

    The ``found`` flag disambiguates a matching element that happens to equal
    ``default`` from a miss.

    Args:
        sequence: Elements to scan in order.
        predicate: Match condition.
        default: Value reported when nothing matches.

    Returns:
        ``(element, True)`` for the first match, else ``(default, False)``.

    Example:
        >>> find([1, 2, 3, 4, 5], lambda x: x > 3)
        (4, True)
        >>> find([1, 2, 3, 4, 5], lambda x: x > 5)
        (None, False)
    """
    for item in sequence:
        if predicate(item):
            return item, True
    return default, False


def find_index(sequence: tp.Sequence[T], predicate: Predicate[T]) -> int:
    """Return the index of the first element satisfying ``predicate``, or -1."""
    for index, item in enumerate(sequence):
        if predicate(item):
            return index
    return NOT_FOUND


# =============================================================================
# Value Lookups
# =============================================================================


def includes(sequence: tp.Sequence[T], value: T) -> bool:
    """Return True if some element compares equal to ``value``."""
    return index_of(sequence, value) != NOT_FOUND


def index_of(sequence: tp.Sequence[T], value: T) -> int:
    """Return the index of the first element equal to ``value``, or -1.

    Unlike ``list.index`` this never raises on a miss, and works for any
    sequence type (``numpy`` arrays included, which lack ``.index``).
    """
    for index, item in enumerate(sequence):
        if item == value:
            return index
    return NOT_FOUND


def last_index_of(sequence: tp.Sequence[T], value: T) -> int:
    """Return the index of the last element equal to ``value``, or -1.

    Scans from the end so the first hit is the answer.
    """
    for index in range(len(sequence) - 1, -1, -1):
        if sequence[index] == value:
            return index
    return NOT_FOUND
