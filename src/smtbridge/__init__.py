"""
SMT-LIB2 bridge for program-verification expression trees.

This package encodes typed sort/expression trees as SMT-LIB2 scripts,
dispatches them to one or more external solvers and decodes their replies.
"""

__version__ = "0.1.0"

from .errors import SMTBridgeError, SMTAssertionError, SExprParseError
from .model import (
    Sort,
    IntSort,
    BoolSort,
    BitVectorSort,
    ArraySort,
    TupleSort,
    FunctionSort,
    SortSort,
    SortProvider,
    Expression,
)
from .translator import SMTLib2Encoder
from .solver import (
    CheckResult,
    QueryResult,
    SolverChoice,
    SolverDispatcher,
    SolverCommand,
    parse_values,
)
from .parsing import SExpr, SExprParser, parse_sexprs

__all__ = [
    "SMTBridgeError",
    "SMTAssertionError",
    "SExprParseError",
    "Sort",
    "IntSort",
    "BoolSort",
    "BitVectorSort",
    "ArraySort",
    "TupleSort",
    "FunctionSort",
    "SortSort",
    "SortProvider",
    "Expression",
    "SMTLib2Encoder",
    "CheckResult",
    "QueryResult",
    "SolverChoice",
    "SolverDispatcher",
    "SolverCommand",
    "parse_values",
    "SExpr",
    "SExprParser",
    "parse_sexprs",
]
