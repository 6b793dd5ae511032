"""
Tests for backend selection.
"""
import pytest

from smtbridge.solver import SolverChoice


def test_default_enables_all():
    assert SolverChoice() == SolverChoice.all()
    assert SolverChoice.all().solver_commands() == ["z3 rlimit=1000000", "cvc4"]


def test_single_solvers():
    assert SolverChoice.z3_only().solver_commands() == ["z3 rlimit=1000000"]
    assert SolverChoice.cvc4_only().solver_commands() == ["cvc4"]
    assert SolverChoice.none().solver_commands() == []


def test_from_string():
    assert SolverChoice.from_string("all") == SolverChoice.all()
    assert SolverChoice.from_string("none") == SolverChoice.none()
    assert SolverChoice.from_string("cvc4") == SolverChoice.cvc4_only()
    assert SolverChoice.from_string(" z3 , cvc4 ") == SolverChoice.all()


def test_from_string_unknown_solver():
    with pytest.raises(ValueError):
        SolverChoice.from_string("z3,eldarica")


def test_from_env(monkeypatch):
    monkeypatch.delenv("SMTBRIDGE_SOLVERS", raising=False)
    assert SolverChoice.from_env() == SolverChoice.all()

    monkeypatch.setenv("SMTBRIDGE_SOLVERS", "z3")
    assert SolverChoice.from_env() == SolverChoice.z3_only()


def test_combination():
    assert SolverChoice.z3_only() | SolverChoice.cvc4_only() == SolverChoice.all()
    assert SolverChoice.all() & SolverChoice.cvc4_only() == SolverChoice.cvc4_only()
