"""Optional value - pure and dependency-free."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, Literal, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Maybe(Generic[T]):
    """
    Presence or absence of a value.

    Kinds:
    - just: A value is present, carried in `value` (which may itself be None)
    - nothing: No value; `value` is always None
    """

    kind: Literal["just", "nothing"]
    value: T | None = None

    @staticmethod
    def Just(value: Any) -> Maybe[Any]:
        return Maybe(kind="just", value=value)

    @staticmethod
    def Nothing() -> Maybe[Any]:
        return NOTHING

    def is_just(self) -> bool:
        return self.kind == "just"

    def is_nothing(self) -> bool:
        return self.kind == "nothing"

    def get(self) -> T:
        if self.kind == "nothing":
            raise ValueError("Maybe has no value.")
        return self.value  # type: ignore[return-value]

    def with_default(self, default: T) -> T:
        """Return the carried value, or `default` when there is none."""
        if self.kind == "nothing":
            return default
        return self.value  # type: ignore[return-value]

    def map(self, func: Callable[[T], U]) -> Maybe[U]:
        if self.kind == "nothing":
            return NOTHING
        return Maybe(kind="just", value=func(self.value))  # type: ignore[arg-type]

    def bind(self, func: Callable[[T], Maybe[U]]) -> Maybe[U]:
        if self.kind == "nothing":
            return NOTHING
        return func(self.value)  # type: ignore[arg-type]

    def __repr__(self) -> str:
        if self.kind == "nothing":
            return "Nothing"
        return f"Just({self.value!r})"


NOTHING: Maybe[Any] = Maybe(kind="nothing")


def just(value: T) -> Maybe[T]:
    """Shorthand for Maybe.Just."""
    return Maybe(kind="just", value=value)
