"""
Check and query result types.
"""
from dataclasses import dataclass
from enum import Enum


class CheckResult(Enum):
    """Aggregated verdict of a satisfiability check."""
    SATISFIABLE = "sat"
    UNSATISFIABLE = "unsat"
    UNKNOWN = "unknown"
    CONFLICTING = "conflicting"
    ERROR = "error"


@dataclass(frozen=True)
class QueryResult:
    """Reply of a query callback.

    Attributes:
        success: False if the backend could not be run at all
        response: Solver output on success, otherwise an error message
    """
    success: bool
    response: str = ""

    def __str__(self) -> str:
        if self.success:
            return self.response
        return f"Query failed: {self.response}"
