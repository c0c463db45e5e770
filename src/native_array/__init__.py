from .array import (
    append,
    at,
    concat,
    filter,
    findMap,
    find_map,
    join,
    length,
    map,
    prepend,
    range,
    reduce,
    slice,
    sort,
    zipWith,
    zip_with,
)
from .assumptions import (
    Assumption,
    AssumptionResult,
    assumption,
    check_assumptions,
    verify_assumptions,
)
from .errors import AssumptionError, NativeError
from .kernel import NOTHING, Maybe, curry, just
from .logger import setup_logger
from .registry import NativeFunction, NativeRegistry, default_registry, native

__all__ = [
    # Sequence operations
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
    # Kernel
    "Maybe",
    "NOTHING",
    "just",
    "curry",
    # Registry
    "NativeFunction",
    "NativeRegistry",
    "default_registry",
    "native",
    # Assumptions
    "Assumption",
    "AssumptionResult",
    "assumption",
    "check_assumptions",
    "verify_assumptions",
    # Errors
    "NativeError",
    "AssumptionError",
    # Logging
    "setup_logger",
]
