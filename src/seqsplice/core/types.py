"""Reusable type definitions for the seqsplice operations.

This module provides the type variables and callable aliases shared by the
functional modules so that signatures stay consistent across the package.

Type Aliases:
    Predicate: A callable mapping an element to a boolean.
    Transform: A callable mapping an element of one type to another.
    Reducer: A callable combining an accumulator and an element.
    Effect: A callable run for its side effect on each element.

Equality-based operations only need ``==`` on the element type. Hash-based
operations (``unique``, ``remove``) additionally need the element type to be
hashable, which is expressed with the ``H`` type variable bound to
``collections.abc.Hashable``.
"""

import typing as tp
from collections.abc import Hashable

__all__ = [
    "T",
    "U",
    "A",
    "H",
    "Predicate",
    "Transform",
    "Reducer",
    "Effect",
]

T = tp.TypeVar("T")
U = tp.TypeVar("U")
# Accumulator type for folds
A = tp.TypeVar("A")
H = tp.TypeVar("H", bound=Hashable)

Predicate = tp.Callable[[T], bool]
Transform = tp.Callable[[T], U]
Reducer = tp.Callable[[A, T], A]
Effect = tp.Callable[[T], tp.Any]
