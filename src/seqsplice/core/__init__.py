"""Core type definitions and settings."""

from seqsplice.core.config import Settings
from seqsplice.core.types import Predicate, Transform, Reducer, Effect

__all__ = [
    "Settings",
    "Predicate",
    "Transform",
    "Reducer",
    "Effect",
]
