"""Element-wise transformations and folds over ordered sequences.

This module provides the operations that visit every element of a sequence
exactly once, in source order:

    - **map_**: Apply a transform to each element.
    - **reduce**: Left-to-right fold into a single accumulated value.
    - **for_each**: Run a side-effecting callable on each element.
    - **flat**: Concatenate a sequence of sequences one level deep.
    - **flat_map**: Transform each element into a sequence and concatenate.

Every function returns a new ``list`` (or a scalar) and never mutates its
input. Exceptions raised by caller-supplied callables propagate unchanged.

Examples:
    >>> from seqsplice.functional.transform import map_, reduce, flat_map
    >>> map_([1, 2, 3], lambda x: x * 2)
    [2, 4, 6]
    >>> reduce([1, 2, 3, 4], lambda acc, x: acc + x, 0)
    10
    >>> flat_map([1, 2], lambda n: [n, n])
    [1, 1, 2, 2]
"""

import typing as tp

from seqsplice.core.types import A, Effect, Reducer, T, Transform, U

__all__ = [
    "map_",
    "reduce",
    "for_each",
    "flat",
    "flat_map",
]


def map_(sequence: tp.Sequence[T], transform: Transform[T, U]) -> tp.List[U]:
    """Apply ``transform`` to every element and collect the results.

    The trailing underscore keeps the builtin ``map`` usable alongside.

    Args:
        sequence: Source elements.
        transform: Callable applied once per element, in order.

    Returns:
        A new list with ``result[i] == transform(sequence[i])``. Same length
        as the input; empty input gives an empty list.
    """
    return [transform(item) for item in sequence]


def reduce(sequence: tp.Sequence[T], reducer: Reducer[A, T], initial: A) -> A:
    """Fold ``sequence`` from left to right into a single value.

    Computes ``reducer(...reducer(reducer(initial, s[0]), s[1])..., s[-1])``.
    Order matters for non-commutative reducers.

    Args:
        sequence: Source elements.
        reducer: Callable taking ``(accumulator, element)`` and returning the
            next accumulator.
        initial: Starting accumulator, returned as-is for empty input.

    Returns:
        The final accumulator.
    """
    result = initial
    for item in sequence:
        result = reducer(result, item)
    return result


def for_each(sequence: tp.Sequence[T], effect: Effect[T]) -> None:
    """Call ``effect`` on each element strictly in source order.

    Calls are sequential: ``effect(sequence[i])`` returns before
    ``effect(sequence[i + 1])`` starts. Return values are discarded.
    """
    for item in sequence:
        effect(item)


def flat(sequences: tp.Sequence[tp.Iterable[T]]) -> tp.List[T]:
    """Concatenate sub-sequences into one list, one level deep.

    Args:
        sequences: Sequence whose items are themselves iterables.

    Returns:
        A new list holding the elements of ``sequences[0]``, then
        ``sequences[1]``, and so on.

    Raises:
        TypeError: If an item of ``sequences`` is not iterable.
    """
    result: tp.List[T] = []
    for sub in sequences:
        result.extend(sub)
    return result


def flat_map(
    sequence: tp.Sequence[T], transform: Transform[T, tp.Iterable[U]]
) -> tp.List[U]:
    """Map each element to an iterable and concatenate the results.

    Equivalent to ``flat(map_(sequence, transform))`` but each transformed
    iterable is consumed straight into the output, so the nested
    intermediate list is never built.

    Args:
        sequence: Source elements.
        transform: Callable returning an iterable for each element.

    Returns:
        A new flattened list.
    """
    result: tp.List[U] = []
    for item in sequence:
        result.extend(transform(item))
    return result
