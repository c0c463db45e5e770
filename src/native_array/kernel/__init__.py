"""Kernel layer - pure abstractions for native-array."""

from native_array.kernel.curry import curry
from native_array.kernel.maybe import NOTHING, Maybe, just

__all__ = [
    "Maybe",
    "NOTHING",
    "just",
    "curry",
]
