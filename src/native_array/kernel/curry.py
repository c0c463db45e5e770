"""Currying for fixed-arity native functions."""

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any


def curry(func: Callable[..., Any], arity: int | None = None) -> Callable[..., Any]:
    """Transform a function of N positional arguments so it can be applied
    one argument (or several) at a time.

    ``f(a, b, c)``, ``f(a)(b)(c)`` and ``f(a, b)(c)`` are all equivalent.
    Supplying more than N arguments raises TypeError.

    Args:
        func: Function to curry
        arity: Number of positional arguments; defaults to the number of
            parameters in func's code object

    Returns:
        Curried version of the function

    Example:
        >>> def add(a, b, c):
        ...     return a + b + c
        >>> curry(add)(1)(2)(3)
        6
    """
    expected = func.__code__.co_argcount if arity is None else arity

    def bind(collected: tuple[Any, ...]) -> Callable[..., Any]:
        @wraps(func)
        def curried(*args: Any) -> Any:
            supplied = collected + args
            if len(supplied) > expected:
                raise TypeError(
                    f"{func.__name__}() takes {expected} arguments "
                    f"but {len(supplied)} were given"
                )
            if len(supplied) == expected:
                return func(*supplied)
            return bind(supplied)

        curried.arity = expected - len(collected)  # type: ignore[attr-defined]
        return curried

    return bind(())
