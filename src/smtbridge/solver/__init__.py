"""Solver dispatch and result handling.

Note: the Python Z3 bindings are optional. Importing this package should not
require Z3 unless you explicitly use the in-process Z3 backend.
"""

from .base import SMT_QUERY_KIND, QueryCallback, query_label
from .choice import SolverChoice
from .dispatcher import SolverDispatcher, result_from_solver_response, solver_answered
from .result import CheckResult, QueryResult
from .solver_command import SolverCommand
from .values import decode_value, parse_values

try:
    from .z3_backend import Z3QueryCallback  # type: ignore
except Exception:  # pragma: no cover
    Z3QueryCallback = None  # type: ignore

__all__ = [
    "SMT_QUERY_KIND",
    "QueryCallback",
    "query_label",
    "SolverChoice",
    "SolverDispatcher",
    "result_from_solver_response",
    "solver_answered",
    "CheckResult",
    "QueryResult",
    "SolverCommand",
    "decode_value",
    "parse_values",
    "Z3QueryCallback",
]
