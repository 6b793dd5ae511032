"""Query callback running SMT solver binaries as subprocesses.

The backend identifier in the request label (e.g. ``z3 rlimit=1000000``)
selects the executable and its extra arguments; the query is handed to the
solver as a temporary ``.smt2`` file.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, Tuple
import logging
import os
import shlex
import shutil
import subprocess
import tempfile
import time

from .base import solver_command_from_label
from .result import QueryResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SolverSpec:
    """Executable and fixed arguments of one SMT solver."""

    name: str
    argv: Tuple[str, ...]

    @property
    def executable(self) -> str:
        return self.argv[0]

    def is_available(self) -> bool:
        """Return True if the executable appears runnable on this system."""
        exe = self.executable
        if os.path.sep in exe or (os.path.altsep and os.path.altsep in exe):
            return os.path.exists(exe) and os.access(exe, os.X_OK)
        return shutil.which(exe) is not None

    def command_line(self, smt2_file: Path, extra_args: Sequence[str] = ()) -> List[str]:
        return [*self.argv, *extra_args, str(smt2_file)]


_KNOWN_SOLVERS = {
    "z3": SolverSpec("z3", ("z3", "-smt2")),
    "cvc4": SolverSpec("cvc4", ("cvc4", "--lang", "smt2", "--produce-models")),
    "cvc5": SolverSpec("cvc5", ("cvc5", "--lang", "smt2", "--produce-models")),
    "yices": SolverSpec("yices", ("yices-smt2",)),
    "boolector": SolverSpec("boolector", ("boolector", "--smt2")),
    "bitwuzla": SolverSpec("bitwuzla", ("bitwuzla", "--smt2")),
}


def resolve_solver(name_or_path: str) -> SolverSpec:
    """Map a known solver name to its spec; anything else is run as given."""
    known = _KNOWN_SOLVERS.get(name_or_path)
    if known is not None:
        return known
    p = Path(name_or_path)
    return SolverSpec(p.name or name_or_path, (name_or_path,))


def split_solver_command(solver_command: str) -> Tuple[SolverSpec, Tuple[str, ...]]:
    """Split a backend identifier into the solver spec and its extra arguments.

    >>> split_solver_command("z3 rlimit=1000000")[1]
    ('rlimit=1000000',)
    """
    parts = shlex.split(solver_command)
    if not parts:
        raise ValueError("Empty solver command")
    return resolve_solver(parts[0]), tuple(parts[1:])


class SolverCommand:
    """Query callback that runs the labelled solver binary.

    Args:
        timeout_s: Wall-clock limit per solver run. Defaults to
            $SMTBRIDGE_SOLVER_TIMEOUT (seconds) when set.

    Attributes:
        last_time_ms: Duration of the most recent solver run
    """

    def __init__(self, timeout_s: Optional[float] = None):
        if timeout_s is None:
            env = os.environ.get("SMTBRIDGE_SOLVER_TIMEOUT")
            if env:
                timeout_s = float(env)
        self.timeout_s = timeout_s
        self.last_time_ms: Optional[float] = None

    def __call__(self, label: str, query: str) -> QueryResult:
        return self.solve(label, query)

    def solve(self, label: str, query: str) -> QueryResult:
        try:
            spec, extra_args = split_solver_command(solver_command_from_label(label))
        except ValueError as e:
            return QueryResult(False, str(e))

        if not spec.is_available():
            logger.info("Solver %s not found", spec.name)
            return QueryResult(False, f"Solver not found: {spec.name}")

        with tempfile.TemporaryDirectory(prefix="smtbridge-") as td:
            smt2_path = Path(td) / "query.smt2"
            smt2_path.write_text(query)
            argv = spec.command_line(smt2_path, extra_args)
            logger.debug("Running %s", " ".join(argv))

            t0 = time.time()
            try:
                p = subprocess.run(
                    argv,
                    stdout=subprocess.PIPE,
                    stderr=subprocess.PIPE,
                    text=True,
                    timeout=self.timeout_s,
                )
            except subprocess.TimeoutExpired:
                logger.info("Solver %s timed out after %ss", spec.name, self.timeout_s)
                return QueryResult(False, f"Solver {spec.name} timed out")
            except OSError as e:
                logger.info("Solver %s could not be started: %s", spec.name, e)
                return QueryResult(False, str(e))
            finally:
                self.last_time_ms = (time.time() - t0) * 1000.0

        logger.debug("Solver %s finished in %.2fms", spec.name, self.last_time_ms)
        if p.returncode != 0 and not p.stdout:
            logger.info("Solver %s failed with exit code %d", spec.name, p.returncode)
            return QueryResult(False, p.stderr or f"{spec.name} exited with {p.returncode}")
        return QueryResult(True, p.stdout)
