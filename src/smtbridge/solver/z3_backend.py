"""
In-process Z3 backend.

Evaluates the query script with the Z3 Python bindings instead of a solver
process. Replies have the same text form the ``z3`` binary would print.
"""
import shlex
import time
from typing import Optional

import z3

from .base import solver_command_from_label
from .result import QueryResult


class Z3QueryCallback:
    """Query callback answering ``z3`` backend labels in-process.

    Each query runs in a fresh Z3 context, so no solver state leaks between
    queries. Command-line parameters in the label (``rlimit=...``) are not
    applied. Labels for other backends are reported as unavailable.
    """

    def __init__(self):
        self.last_time_ms: Optional[float] = None

    def __call__(self, label: str, query: str) -> QueryResult:
        try:
            command = shlex.split(solver_command_from_label(label))
        except ValueError as e:
            return QueryResult(False, str(e))
        if not command or command[0] != "z3":
            return QueryResult(False, f"Not a z3 backend: {' '.join(command)}")

        ctx = z3.Context()
        start_time = time.time()
        try:
            output = z3.Z3_eval_smtlib2_string(ctx.ref(), query)
        except z3.Z3Exception as e:
            return QueryResult(False, str(e))
        finally:
            self.last_time_ms = (time.time() - start_time) * 1000
        return QueryResult(True, output)
