"""Error types for native-array."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from native_array.assumptions import AssumptionResult


class NativeError(Exception):
    """Base class for errors raised by native-array tooling.

    The sequence operations themselves never raise; these errors come from
    the registry and assumption layers only.
    """


class AssumptionError(NativeError):
    """Error raised when one or more declared assumptions do not hold.

    This error preserves the failed results for reporting and debugging.
    """

    def __init__(self, message: str, failures: list[AssumptionResult]) -> None:
        self.failures = failures
        super().__init__(message)

    def __repr__(self) -> str:
        return f"AssumptionError({super().__repr__()}, failures={len(self.failures)})"
