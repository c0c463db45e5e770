"""Native function registry.

Every exported sequence operation is registered here together with its
Haskell-style type signature, so wrapper packages can discover what the
module exports and how each function is typed.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict

from native_array.kernel.curry import curry
from native_array.logger import logger


class NativeFunction(BaseModel):
    """Definition of an exported native function."""

    model_config = ConfigDict(frozen=True)

    name: str
    signature: str
    description: str
    arity: int


class NativeRegistry:
    """Registry for native functions and their definitions."""

    def __init__(self) -> None:
        self._functions: dict[str, Callable[..., Any]] = {}
        self._definitions: dict[str, NativeFunction] = {}
        self._aliases: dict[str, str] = {}

    def register(
        self,
        func: Callable[..., Any],
        signature: str,
        description: str = "",
        name: str | None = None,
    ) -> NativeFunction:
        """Register a function under its name with its signature."""
        name = name or func.__name__
        if name in self._definitions or name in self._aliases:
            raise ValueError(f"Native function '{name}' is already registered")

        definition = NativeFunction(
            name=name,
            signature=signature,
            description=description,
            arity=getattr(func, "arity", func.__code__.co_argcount),
        )
        self._functions[name] = func
        self._definitions[name] = definition
        logger.debug("Registered native function %s :: %s", name, signature)
        return definition

    def alias(self, alias: str, name: str) -> None:
        """Export an existing function under a second name."""
        if name not in self._definitions:
            raise KeyError(f"No native function named '{name}'")
        if alias in self._definitions or alias in self._aliases:
            raise ValueError(f"Native function '{alias}' is already registered")
        self._aliases[alias] = name

    def get(self, name: str) -> NativeFunction:
        """Get a function definition by name or alias."""
        name = self._aliases.get(name, name)
        if name not in self._definitions:
            raise KeyError(f"No native function named '{name}'")
        return self._definitions[name]

    def signature_of(self, name: str) -> str:
        return self.get(name).signature

    def names(self) -> list[str]:
        """Registered function names, without aliases."""
        return sorted(self._definitions)

    def exports(self) -> dict[str, Callable[..., Any]]:
        """Export table: every name and alias mapped to its callable."""
        table = dict(self._functions)
        for alias, name in self._aliases.items():
            table[alias] = self._functions[name]
        return dict(sorted(table.items()))

    def __contains__(self, name: object) -> bool:
        return name in self._definitions or name in self._aliases

    def __len__(self) -> int:
        return len(self._definitions)


_default = NativeRegistry()


def default_registry() -> NativeRegistry:
    """The registry populated by native_array.array."""
    return _default


def native(
    signature: str,
    registry: NativeRegistry | None = None,
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Curry a function and register it as a native function.

    The first paragraph of the function's docstring becomes its description.

    Example:
        >>> @native("length :: Array a -> Int")
        ... def length(a):
        ...     return len(a)
    """
    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        curried = curry(func)
        doc = (func.__doc__ or "").strip()
        description = " ".join(doc.split("\n\n")[0].split())
        target = registry if registry is not None else _default
        target.register(curried, signature, description)
        return curried

    return decorator
