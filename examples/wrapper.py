"""Building a small wrapper type on top of the native sequence functions."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import native_array as native
from native_array import Maybe, setup_logger


@dataclass(frozen=True)
class List:
    items: tuple[Any, ...] = ()

    def append(self, item: Any) -> List:
        return List(native.append(self.items)(item))

    def at(self, index: int) -> Maybe[Any]:
        return native.at(self.items)(index)

    def head(self) -> Maybe[Any]:
        return native.reduce(self.items)(Maybe.Nothing)(lambda h, _: Maybe.Just(h))

    def sorted_by(self, compare: Callable[[Any, Any], int]) -> List:
        return List(native.sort(compare)(self.items))

    def __str__(self) -> str:
        return "[" + native.join(self.items)(", ") + "]"


def main() -> None:
    logger = setup_logger("native_array", level="INFO")
    native.verify_assumptions()

    xs = List().append(3).append(1).append(2)
    logger.info("list: %s", xs)
    logger.info("head: %r", xs.head())
    logger.info("at(7): %r", xs.at(7))
    logger.info("sorted: %s", xs.sorted_by(lambda a, b: a - b))

    registry = native.default_registry()
    for name in registry.names():
        logger.info("%-8s %s", name, registry.signature_of(name))


if __name__ == "__main__":
    main()
