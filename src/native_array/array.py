"""Helper functions for working directly against Python sequences.

All of these functions are immutable: they never change the state of the
passed arguments and every sequence they produce is a fresh tuple. They are
meant to be used when implementing wrapper packages, not directly.

Characteristics of native functions:
- They may not raise on well-typed input,
- They may not mutate their parameters,
- They are all curried, and
- They may not return None where a value may be absent; they return Maybe.
"""

from __future__ import annotations

import builtins
import math
from collections.abc import Callable, Sequence
from functools import cmp_to_key
from typing import Any, TypeVar

from native_array.assumptions import assumption
from native_array.kernel.maybe import NOTHING, Maybe, just
from native_array.registry import default_registry, native

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")


def _compare(x: Any, y: Any) -> int:
    return -1 if x < y else 1 if x > y else 0


@native("length :: Array a -> Int")
def length(a: Sequence[A]) -> int:
    """Get the number of elements within a sequence."""
    return len(a)


assumption("length", lambda: length([]), 0)
assumption("length", lambda: length([1, 2, 3]), 3)


@native("find_map :: Array a -> (a -> Maybe b) -> Maybe b")
def find_map(a: Sequence[A], f: Callable[[A], Maybe[B]]) -> Maybe[B]:
    """Locate a mapped element within a sequence.

    Returns the first Just produced by `f`, or Nothing when no element maps
    to a value. `f` is not applied to any element after the first hit.
    """
    for item in a:
        result = f(item)
        if result.is_just():
            return result
    return NOTHING


assumption("find_map", lambda: find_map([])(just), NOTHING)
assumption(
    "find_map",
    lambda: find_map([1, 2, 3, 4])(lambda x: just(x * 10) if x > 2 else NOTHING),
    just(30),
)
assumption("find_map", lambda: find_map([1, 2, 3])(lambda _: NOTHING), NOTHING)


@native("append :: Array a -> a -> Array a")
def append(a: Sequence[A], item: A) -> tuple[A, ...]:
    """Append an element onto the end of a sequence."""
    return (*a, item)


assumption("append", lambda: append([1, 2, 3])(4), (1, 2, 3, 4))
assumption("append", lambda: append([])(4), (4,))


@native("prepend :: a -> Array a -> Array a")
def prepend(item: A, a: Sequence[A]) -> tuple[A, ...]:
    """Add an element onto the front of a sequence."""
    return (item, *a)


assumption("prepend", lambda: prepend(0)([1, 2, 3]), (0, 1, 2, 3))
assumption("prepend", lambda: prepend(0)([]), (0,))


@native("slice :: Array a -> Int -> Int -> Array a")
def slice(a: Sequence[A], start: int, end: int) -> tuple[A, ...]:
    """Slice elements from `start` up to but excluding `end`.

    Negative indices count from the end of the sequence. Out of range and
    inverted bounds give an empty result.
    """
    return tuple(a[start:end])


assumption("slice", lambda: slice([1, 2, 3, 4])(1)(3), (2, 3))
assumption("slice", lambda: slice([1, 2, 3, 4])(3)(-1), ())
assumption("slice", lambda: slice([1, 2, 3, 4])(10)(12), ())
assumption("slice", lambda: slice([1, 2, 3, 4])(1)(100), (2, 3, 4))


@native("at :: Array a -> Int -> Maybe a")
def at(a: Sequence[A], index: int) -> Maybe[A]:
    """A safe way to read the value at an index.

    Negative indices are out of range here, unlike slice.
    """
    if index < 0 or index >= len(a):
        return NOTHING
    return just(a[index])


assumption("at", lambda: at([1, 2, 3, 4])(3), just(4))
assumption("at", lambda: at([1, 2, 3, 4])(9), NOTHING)
assumption("at", lambda: at([1, 2, 3, 4])(-2), NOTHING)


@native("range :: Int -> Int -> Array Int")
def range(lower: int, upper: int) -> tuple[int, ...]:
    """Create a range of integers from `lower` up to, but not including, `upper`.

    When `lower` is larger than `upper` the range is descending.
    """
    if lower < upper:
        return tuple(builtins.range(lower, upper))
    return tuple(builtins.range(lower, upper, -1))


assumption("range", lambda: range(1)(10), (1, 2, 3, 4, 5, 6, 7, 8, 9))
assumption("range", lambda: range(10)(1), (10, 9, 8, 7, 6, 5, 4, 3, 2))
assumption("range", lambda: range(5)(5), ())


@native("concat :: Array a -> Array a -> Array a")
def concat(a1: Sequence[A], a2: Sequence[A]) -> tuple[A, ...]:
    """Combine two sequences by appending the second onto the first."""
    return (*a1, *a2)


assumption("concat", lambda: concat([])([]), ())
assumption("concat", lambda: concat([1, 2])([3, 4]), (1, 2, 3, 4))


@native("reduce :: Array a -> (() -> b) -> (a -> Array a -> b) -> b")
def reduce(a: Sequence[A], f_nil: Callable[[], B], f_cons: Callable[[A, tuple[A, ...]], B]) -> B:
    """Treat the sequence as a list made of Nil and Cons cells.

    Calls `f_nil()` for an empty sequence, otherwise `f_cons(head, tail)`.
    """
    if len(a) == 0:
        return f_nil()
    return f_cons(a[0], tuple(a[1:]))


assumption("reduce", lambda: reduce([])(dict)(lambda h, t: {"head": h, "tail": t}), {})
assumption(
    "reduce",
    lambda: reduce([1, 2, 3])(dict)(lambda h, t: {"head": h, "tail": t}),
    {"head": 1, "tail": (2, 3)},
)


@native("zip_with :: (a -> b -> c) -> Array a -> Array b -> Array c")
def zip_with(f: Callable[[A, B], C], a1: Sequence[A], a2: Sequence[B]) -> tuple[C, ...]:
    """Apply a function to pairs of elements at the same index.

    Elements past the end of the shorter sequence are discarded.
    """
    return tuple(f(x, y) for x, y in zip(a1, a2))


_mul = lambda x, y: x * y  # noqa: E731
assumption("zip_with", lambda: zip_with(_mul)([])([]), ())
assumption("zip_with", lambda: zip_with(_mul)([1, 2, 3])([]), ())
assumption("zip_with", lambda: zip_with(_mul)([1, 2, 3])([4, 5, 6, 7]), (4, 10, 18))
assumption("zip_with", lambda: zip_with(_mul)([1, 2, 3, 4, 5, 6])([4, 5, 6]), (4, 10, 18))


@native("map :: (a -> b) -> Array a -> Array b")
def map(f: Callable[[A], B], a: Sequence[A]) -> tuple[B, ...]:
    """Apply a function to every element."""
    return tuple(f(item) for item in a)


assumption("map", lambda: map(lambda x: x * 2)([]), ())
assumption("map", lambda: map(lambda x: x * 2)([1, 2, 3]), (2, 4, 6))


def _to_string(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
        return repr(value)
    if isinstance(value, (list, tuple)):
        # nested sequences flatten with a bare comma
        return ",".join(_to_string(item) for item in value)
    return str(value)


@native("join :: Array a -> String -> String")
def join(a: Sequence[A], sep: str) -> str:
    """Convert every element to a string and concatenate them with `sep`.

    None renders as the empty string, booleans as `true` / `false`, integral
    floats without a fraction (`1.0` -> `1`) and nested lists or tuples as
    their elements joined by a bare comma. Everything else uses str().
    """
    return sep.join(_to_string(item) for item in a)


assumption("join", lambda: join([1, 2, 3])(", "), "1, 2, 3")
assumption("join", lambda: join([])(", "), "")
assumption("join", lambda: join([None, True, 1])("-"), "-true-1")
assumption("join", lambda: join([1.0, [1, 2]])(","), "1,1,2")


@native("filter :: (a -> Bool) -> Array a -> Array a")
def filter(predicate: Callable[[A], bool], a: Sequence[A]) -> tuple[A, ...]:
    """Keep the elements for which the predicate holds."""
    return tuple(item for item in a if predicate(item))


assumption(
    "filter",
    lambda: filter(lambda n: n > 5)([1, 10, 2, 9, 3, 8, 4, 7, 5, 6]),
    (10, 9, 8, 7, 6),
)


@native("sort :: (a -> a -> Int) -> Array a -> Array a")
def sort(compare: Callable[[A, A], int], a: Sequence[A]) -> tuple[A, ...]:
    """Sort the elements with the passed compare function.

    - compare(x, y) < 0 puts x before y.
    - compare(x, y) == 0 keeps x and y in their input order (the sort is stable).
    - compare(x, y) > 0 puts y before x.

    compare must return the same value for the same pair of elements; when it
    does not, the resulting order is undefined.
    """
    return tuple(sorted(a, key=cmp_to_key(compare)))


assumption("sort", lambda: sort(_compare)([1, 9, 2, 8, 3, 7, 4, 6, 5]), (1, 2, 3, 4, 5, 6, 7, 8, 9))
assumption(
    "sort",
    lambda: sort(_compare)(["one", "nine", "two", "eight", "three", "seven", "four", "six", "five"]),
    ("eight", "five", "four", "nine", "one", "seven", "six", "three", "two"),
)


findMap = find_map
zipWith = zip_with

default_registry().alias("findMap", "find_map")
default_registry().alias("zipWith", "zip_with")


__all__ = [
    "append",
    "at",
    "concat",
    "filter",
    "findMap",
    "find_map",
    "join",
    "length",
    "map",
    "prepend",
    "range",
    "reduce",
    "slice",
    "sort",
    "zipWith",
    "zip_with",
]
