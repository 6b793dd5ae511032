"""
Dispatch of accumulated SMT-LIB2 scripts to solver backends.

Each enabled backend receives the same query, one at a time, and the
replies are reduced to a single verdict:
- the first sat/unsat answer wins
- a later, different sat/unsat answer makes the verdict CONFLICTING and
  stops the loop
- unknown only replaces a missing answer
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

from ..errors import smt_assert
from ..model.expression import Expression
from ..model.sorts import Kind
from ..translator.encoder import SMTLib2Encoder
from .base import QueryCallback, query_label
from .choice import SolverChoice
from .result import CheckResult, QueryResult
from .values import parse_values

logger = logging.getLogger(__name__)

# Reserved prefix of the constants bound to expressions being evaluated.
EVAL_PREFIX = "EVALEXPR_"


def result_from_solver_response(response: str) -> CheckResult:
    """Classify a raw reply by its first line."""
    if response.startswith("sat"):
        return CheckResult.SATISFIABLE
    elif response.startswith("unsat"):
        return CheckResult.UNSATISFIABLE
    elif response.startswith("unknown"):
        return CheckResult.UNKNOWN
    return CheckResult.ERROR


def solver_answered(result: CheckResult) -> bool:
    """True for the definitive verdicts, sat and unsat."""
    return result in (CheckResult.SATISFIABLE, CheckResult.UNSATISFIABLE)


class SolverDispatcher:
    """Runs the encoder's script against every enabled backend.

    Attributes:
        encoder: Session encoder whose script is sent
        callback: Function performing the actual solver call
        enabled_solvers: Backends to consult, in ``solver_commands`` order
        unhandled_queries: Queries for which no backend gave a usable answer
    """

    def __init__(
        self,
        encoder: SMTLib2Encoder,
        callback: QueryCallback,
        enabled_solvers: Optional[SolverChoice] = None,
    ):
        self.encoder = encoder
        self.callback = callback
        self.enabled_solvers = enabled_solvers if enabled_solvers is not None else SolverChoice.all()
        self.unhandled_queries: List[str] = []

    def check(self, expressions_to_evaluate: Sequence[Expression] = ()) -> Tuple[CheckResult, List[str]]:
        """Check the current script and evaluate the given Int/Bool expressions.

        Never raises for backend problems; ERROR means no backend produced a
        usable answer, and the query is then kept in ``unhandled_queries``.

        Returns:
            (verdict, raw value tokens); values are only present for a
            SATISFIABLE verdict
        """
        query = self.dump_query(expressions_to_evaluate)

        last_result = CheckResult.ERROR
        final_values: List[str] = []
        for solver in self.enabled_solvers.solver_commands():
            reply = self._run(solver, query)
            if not reply.success:
                logger.debug("No answer from %s: %s", solver, reply.response)
                continue

            result = result_from_solver_response(reply.response)
            logger.debug("%s answered %s", solver, result.name)
            if solver_answered(result):
                if not solver_answered(last_result):
                    last_result = result
                    if result == CheckResult.SATISFIABLE:
                        final_values = parse_values(reply.response)
                elif last_result != result:
                    logger.warning("Solvers disagree: %s answered %s", solver, result.name)
                    last_result = CheckResult.CONFLICTING
                    break
            elif result == CheckResult.UNKNOWN and last_result == CheckResult.ERROR:
                last_result = result

        if last_result == CheckResult.ERROR:
            logger.warning("No solver could handle the query; recorded as unhandled")
            self.unhandled_queries.append(query)
        return last_result, final_values

    def _run(self, solver: str, query: str) -> QueryResult:
        label = query_label(solver)
        logger.debug("Sending query to %s", label)
        try:
            return self.callback(label, query)
        except Exception as e:
            logger.exception("Query callback raised for %s", label)
            return QueryResult(False, str(e))

    def dump_query(self, expressions_to_evaluate: Sequence[Expression] = ()) -> str:
        """Return the exact text ``check`` would send, without sending it."""
        script = self.encoder.full_script()
        return script + self.check_sat_and_get_values_command(expressions_to_evaluate)

    def check_sat_and_get_values_command(self, expressions_to_evaluate: Sequence[Expression]) -> str:
        if not expressions_to_evaluate:
            return "(check-sat)\n"

        command = ""
        for i, expr in enumerate(expressions_to_evaluate):
            kind = expr.sort.kind if expr.sort is not None else None
            smt_assert(
                kind in (Kind.INT, Kind.BOOL),
                "Invalid sort for expression to evaluate.",
            )
            sort = "Int" if kind == Kind.INT else "Bool"
            command += f"(declare-const {EVAL_PREFIX}{i} {sort})\n"
            command += f"(assert (= {EVAL_PREFIX}{i} {self.encoder.expr_text(expr)}))\n"
        command += "(check-sat)\n"
        command += "(get-value ("
        for i in range(len(expressions_to_evaluate)):
            command += f"{EVAL_PREFIX}{i} "
        command += "))\n"
        return command
