"""
Selection of the solver backends a dispatcher consults.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List
import os

# Backend identifiers, in the order they are consulted.
Z3_COMMAND = "z3 rlimit=1000000"
CVC4_COMMAND = "cvc4"


@dataclass(frozen=True)
class SolverChoice:
    """Which backends are enabled.

    Users can override the default by setting $SMTBRIDGE_SOLVERS to a
    comma separated list (``z3,cvc4``), ``all`` or ``none``.
    """

    z3: bool = True
    cvc4: bool = True

    @classmethod
    def all(cls) -> SolverChoice:
        return cls(z3=True, cvc4=True)

    @classmethod
    def none(cls) -> SolverChoice:
        return cls(z3=False, cvc4=False)

    @classmethod
    def z3_only(cls) -> SolverChoice:
        return cls(z3=True, cvc4=False)

    @classmethod
    def cvc4_only(cls) -> SolverChoice:
        return cls(z3=False, cvc4=True)

    @classmethod
    def from_string(cls, text: str) -> SolverChoice:
        """Parse ``all``, ``none`` or a comma separated list of solver names.

        Raises:
            ValueError: If a name is not a known solver
        """
        text = text.strip()
        if text == "all":
            return cls.all()
        if text in ("", "none"):
            return cls.none()

        enabled = {}
        for name in text.split(","):
            name = name.strip()
            if name not in ("z3", "cvc4"):
                raise ValueError(f"Unknown solver: {name!r}")
            enabled[name] = True
        return cls(z3=enabled.get("z3", False), cvc4=enabled.get("cvc4", False))

    @classmethod
    def from_env(cls) -> SolverChoice:
        env = os.environ.get("SMTBRIDGE_SOLVERS")
        if env is None:
            return cls.all()
        return cls.from_string(env)

    def __or__(self, other: SolverChoice) -> SolverChoice:
        return SolverChoice(z3=self.z3 or other.z3, cvc4=self.cvc4 or other.cvc4)

    def __and__(self, other: SolverChoice) -> SolverChoice:
        return SolverChoice(z3=self.z3 and other.z3, cvc4=self.cvc4 and other.cvc4)

    def solver_commands(self) -> List[str]:
        """Backend identifiers for the enabled solvers, in consultation order."""
        commands: List[str] = []
        if self.z3:
            commands.append(Z3_COMMAND)
        if self.cvc4:
            commands.append(CVC4_COMMAND)
        return commands
