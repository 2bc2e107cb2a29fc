"""Operations that select, reorder, or regroup the elements of a sequence.

    - **filter_**: Keep the elements matching a predicate.
    - **reverse**: New list with the elements in reverse order.
    - **reverse_in_place**: Reverse the caller's own storage.
    - **unique**: Drop repeated values, keeping first occurrences.
    - **chunk**: Split into consecutive groups of a fixed size.
    - **remove**: Drop every element whose value is in an exclusion sequence.

All operations except ``reverse_in_place`` allocate and return a new list and
leave the input untouched. ``unique`` and ``remove`` need hashable elements.
"""

import numbers
import typing as tp
from collections.abc import MutableSequence

from seqsplice.core.types import H, Predicate, T
from seqsplice.logger.logger import logger

__all__ = [
    "filter_",
    "reverse",
    "reverse_in_place",
    "unique",
    "chunk",
    "remove",
]

S = tp.TypeVar("S")


def filter_(sequence: tp.Sequence[T], predicate: Predicate[T]) -> tp.List[T]:
    """Return the elements satisfying ``predicate``, in their original order.

    An empty match gives ``[]``, never ``None``.
    """
    return [item for item in sequence if predicate(item)]


# =============================================================================
# Reordering
# =============================================================================


def reverse(sequence: tp.Sequence[T]) -> tp.List[T]:
    """Return a new list with the elements of ``sequence`` in reverse order.

    The input is never modified. Use :func:`reverse_in_place` to reverse the
    caller's storage instead.
    """
    n = len(sequence)
    return [sequence[n - 1 - i] for i in range(n)]


def reverse_in_place(sequence: S) -> S:
    """Reverse ``sequence`` in its own storage and return the same object.

    Works on any ``MutableSequence`` (``list``, ``collections.deque``, ...) and
    on containers supporting slice assignment such as ``numpy.ndarray``.

    Args:
        sequence: Mutable ordered container.

    Returns:
        ``sequence`` itself, now reversed.

    Raises:
        TypeError: If ``sequence`` cannot be modified in place (``tuple``,
            ``str``, ``range``, ...).
    """
    if isinstance(sequence, MutableSequence):
        sequence.reverse()
        return sequence

    try:
        sequence[:] = sequence[::-1]  # type: ignore[index]
    except TypeError as e:
        raise TypeError(
            f"reverse_in_place requires a mutable sequence, got {type(sequence).__name__}"
        ) from e
    return sequence


# =============================================================================
# Regrouping
# =============================================================================


def unique(sequence: tp.Sequence[H]) -> tp.List[H]:
    """Return the distinct values of ``sequence`` in first-seen order.

    Example:
        >>> unique([1, 2, 2, 3, 4, 4, 5])
        [1, 2, 3, 4, 5]

    Raises:
        TypeError: If an element is unhashable.
    """
    seen: tp.Set[H] = set()
    result: tp.List[H] = []
    for item in sequence:
        if item not in seen:
            seen.add(item)
            result.append(item)
    return result


def chunk(sequence: tp.Sequence[T], size: int) -> tp.List[tp.List[T]]:
    """Split ``sequence`` into consecutive lists of at most ``size`` elements.

    Every chunk has exactly ``size`` elements except possibly the last one.
    Chunks are fresh lists; mutating them does not touch ``sequence``.

    Args:
        sequence: Elements to split.
        size: Maximum chunk length. A non-positive size gives ``[]``.

    Returns:
        List of chunks whose concatenation equals ``list(sequence)``.

    Raises:
        TypeError: If ``size`` is not an integer.

    Example:
        >>> chunk(range(10), 3)
        [[0, 1, 2], [3, 4, 5], [6, 7, 8], [9]]
    """
    if isinstance(size, bool) or not isinstance(size, numbers.Integral):
        raise TypeError(f"chunk size must be an integer, got {type(size).__name__}")
    if size <= 0:
        logger.debug("chunk called with non-positive size %s; returning []", size)
        return []

    size = int(size)
    return [
        list(sequence[start : start + size]) for start in range(0, len(sequence), size)
    ]


def remove(sequence: tp.Sequence[H], exclude: tp.Iterable[H]) -> tp.List[H]:
    """Return the elements of ``sequence`` whose value is not in ``exclude``.

    The exclusion values are loaded into a set once per call, so each
    membership check is O(1) on average regardless of how many values are
    excluded. Surviving elements keep their relative order.

    Args:
        sequence: Source elements.
        exclude: Values to drop. Duplicates are irrelevant.

    Returns:
        A new list without excluded values.

    Raises:
        TypeError: If an element of either argument is unhashable.
    """
    excluded = set(exclude)
    if len(sequence) == 0:
        return []
    return [item for item in sequence if item not in excluded]
