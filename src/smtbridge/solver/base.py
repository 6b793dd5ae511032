"""
Interface between the dispatcher and whatever actually runs a solver.
"""
from typing import Protocol

from .result import QueryResult

# Request-kind tag prefixed to every query label.
SMT_QUERY_KIND = "smt-query"


class QueryCallback(Protocol):
    """Protocol for functions that send a query to one solver backend.

    This allows pluggable transports (subprocess, in-process bindings,
    remote services) behind the same dispatcher.
    """

    def __call__(self, label: str, query: str) -> QueryResult:
        """Run ``query`` on the backend named in ``label``.

        Args:
            label: ``SMT_QUERY_KIND`` followed by a space and the backend
                identifier, e.g. ``"smt-query z3 rlimit=1000000"``
            query: Complete SMT-LIB2 script

        Returns:
            QueryResult with the solver output, or success=False if the
            backend is unavailable
        """
        ...


def query_label(solver_command: str) -> str:
    """Build the request label for a backend identifier."""
    return f"{SMT_QUERY_KIND} {solver_command}"


def solver_command_from_label(label: str) -> str:
    """Strip the request-kind tag from a label.

    Raises:
        ValueError: If the label does not start with the request-kind tag
    """
    prefix = SMT_QUERY_KIND + " "
    if not label.startswith(prefix):
        raise ValueError(f"Not an SMT query label: {label!r}")
    return label[len(prefix):]
