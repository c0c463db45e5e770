"""Assumptions: example equalities declared next to native functions.

Each native function states a few `actual == expected` examples at its
definition site. They are recorded here and checked on demand.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict

from native_array.errors import AssumptionError
from native_array.logger import logger


class Assumption(BaseModel):
    """A single declared example for a native function."""

    model_config = ConfigDict(frozen=True)

    function: str
    check: Callable[[], Any]
    expected: Any
    label: str = ""


@dataclass(frozen=True)
class AssumptionResult:
    assumption: Assumption
    actual: Any
    passed: bool

    def describe(self) -> str:
        label = f" [{self.assumption.label}]" if self.assumption.label else ""
        return (
            f"{self.assumption.function}{label}: "
            f"expected {self.assumption.expected!r}, got {self.actual!r}"
        )


_book: list[Assumption] = []


def assumption(
    function: str,
    check: Callable[[], Any],
    expected: Any,
    label: str = "",
) -> Assumption:
    """Record that `check()` should equal `expected` for `function`."""
    entry = Assumption(function=function, check=check, expected=expected, label=label)
    _book.append(entry)
    logger.debug("Recorded assumption for %s", function)
    return entry


def recorded(names: Iterable[str] | None = None) -> list[Assumption]:
    """Recorded assumptions, optionally restricted to some function names."""
    if names is None:
        return list(_book)
    wanted = set(names)
    return [a for a in _book if a.function in wanted]


def _evaluate(entry: Assumption) -> AssumptionResult:
    try:
        actual = entry.check()
    except Exception as exc:
        return AssumptionResult(assumption=entry, actual=exc, passed=False)
    return AssumptionResult(assumption=entry, actual=actual, passed=actual == entry.expected)


def check_assumptions(names: Iterable[str] | None = None) -> list[AssumptionResult]:
    """Evaluate recorded assumptions.

    An exception raised while evaluating a check counts as a failure, with
    the exception stored as the actual value.

    Args:
        names: Function names to check; all functions when None

    Returns:
        One result per evaluated assumption, in declaration order
    """
    results = [_evaluate(entry) for entry in recorded(names)]
    failed = [r for r in results if not r.passed]
    for result in failed:
        logger.warning("Assumption failed: %s", result.describe())
    logger.info(
        "Checked %d assumptions: %d passed, %d failed",
        len(results),
        len(results) - len(failed),
        len(failed),
    )
    return results


def verify_assumptions(names: Iterable[str] | None = None) -> list[AssumptionResult]:
    """Check assumptions and raise AssumptionError if any fail.

    Raises:
        AssumptionError: Listing every failed assumption
    """
    results = check_assumptions(names)
    failures = [r for r in results if not r.passed]
    if failures:
        details = "; ".join(r.describe() for r in failures)
        raise AssumptionError(f"{len(failures)} assumption(s) failed: {details}", failures)
    return results
