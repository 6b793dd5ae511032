"""
SMT-LIB2 script encoder.

Accumulates an SMT-LIB2 script from declarations and assertions over the
sort/expression model, mirroring the solver's incremental push/pop scopes
as a stack of text buffers.
"""
from typing import Dict, List, Optional, Sequence, Tuple

from ..errors import SMTAssertionError, smt_assert
from ..model.expression import Expression
from ..model.sorts import (
    ArraySort,
    BitVectorSort,
    BoolSort,
    FunctionSort,
    IntSort,
    Sort,
    SortSort,
    TupleSort,
)


class SMTLib2Encoder:
    """Translates sorts and expressions to SMT-LIB2 and tracks session state.

    State:
        - scope stack: one text buffer per push level, never empty
        - declaration table: symbol name -> sort, session-wide
        - sort-name cache: sort instance -> SMT-LIB2 text
        - tuple registry: (quoted name, declaration) pairs already emitted

    The declaration table, sort cache and tuple registry are not rolled back
    by ``pop``; only the emitted text is.
    """

    def __init__(self, query_timeout: Optional[int] = None):
        """Create an encoder and write the preamble.

        Args:
            query_timeout: Optional solver timeout hint in milliseconds
        """
        self.query_timeout = query_timeout
        self._scopes: List[str] = []
        self._variables: Dict[str, Sort] = {}
        self._sort_names: Dict[Sort, str] = {}
        self._user_sorts: List[Tuple[str, str]] = []
        self.reset()

    def reset(self) -> None:
        """Clear all state and write the fixed preamble into a single scope."""
        self._scopes = [""]
        self._variables.clear()
        self._sort_names.clear()
        self._user_sorts.clear()
        self.write("(set-option :produce-models true)")
        if self.query_timeout is not None:
            self.write(f"(set-option :timeout {self.query_timeout})")
        self.write("(set-logic ALL)")

    def push(self) -> None:
        self._scopes.append("")

    def pop(self) -> None:
        smt_assert(len(self._scopes) > 1, "Cannot pop the outermost scope")
        self._scopes.pop()

    @property
    def depth(self) -> int:
        """Number of open scopes (at least 1)."""
        return len(self._scopes)

    @property
    def declared_variables(self) -> Dict[str, Sort]:
        return dict(self._variables)

    @property
    def user_sorts(self) -> List[Tuple[str, str]]:
        return list(self._user_sorts)

    def declare_variable(self, name: str, sort: Sort) -> None:
        """Declare a constant, or a function if ``sort`` is a FunctionSort."""
        smt_assert(sort is not None, f"Missing sort for {name}")
        if isinstance(sort, FunctionSort):
            self.declare_function(name, sort)
        elif name not in self._variables:
            self._variables[name] = sort
            self.write(f"(declare-fun |{name}| () {self.sort_text(sort)})")

    def declare_function(self, name: str, sort: FunctionSort) -> None:
        smt_assert(isinstance(sort, FunctionSort), f"{name} is not a function sort")
        # Keyed by name only: a second declaration with another signature is dropped.
        if name not in self._variables:
            domain = self.sorts_text(sort.domain)
            codomain = self.sort_text(sort.codomain)
            self._variables[name] = sort
            self.write(f"(declare-fun |{name}| {domain} {codomain})")

    def add_assertion(self, expr: Expression) -> None:
        self.write(f"(assert {self.expr_text(expr)})")

    def full_script(self) -> str:
        """Return the accumulated script, outermost scope first."""
        return "".join(self._scopes)

    def write(self, data: str) -> None:
        """Append a line to the innermost scope."""
        smt_assert(bool(self._scopes), "Scope stack is empty")
        self._scopes[-1] += data + "\n"

    # Sort translation

    def sort_text(self, sort: Sort) -> str:
        """Return the SMT-LIB2 name of ``sort``, cached per sort instance.

        Tuple sorts are declared as datatypes in the current scope the first
        time they are rendered.
        """
        if sort not in self._sort_names:
            self._sort_names[sort] = self._sort_to_string(sort)
        return self._sort_names[sort]

    def sorts_text(self, sorts: Sequence[Sort]) -> str:
        """Render a parenthesized sort list, as used for function domains."""
        text = "("
        for sort in sorts:
            text += self.sort_text(sort) + " "
        return text + ")"

    def _sort_to_string(self, sort: Sort) -> str:
        if isinstance(sort, IntSort):
            return "Int"
        elif isinstance(sort, BoolSort):
            return "Bool"
        elif isinstance(sort, BitVectorSort):
            return f"(_ BitVec {sort.size})"
        elif isinstance(sort, ArraySort):
            smt_assert(sort.domain is not None and sort.range is not None, "Incomplete array sort")
            return f"(Array {self.sort_text(sort.domain)} {self.sort_text(sort.range)})"
        elif isinstance(sort, TupleSort):
            return self._declare_tuple(sort)
        raise SMTAssertionError(f"Invalid SMT sort: {type(sort).__name__}")

    def _declare_tuple(self, sort: TupleSort) -> str:
        tuple_name = f"|{sort.name}|"
        if not any(name == tuple_name for name, _ in self._user_sorts):
            smt_assert(len(sort.members) == len(sort.components), "Malformed tuple sort")
            decl = f"(declare-datatypes (({tuple_name} 0)) ((({tuple_name}"
            for member, component in zip(sort.members, sort.components):
                decl += f" (|{member}| {self.sort_text(component)})"
            decl += "))))"
            self._user_sorts.append((tuple_name, decl))
            self.write(decl)
        return tuple_name

    # Expression translation

    def expr_text(self, expr: Expression) -> str:
        """Render ``expr`` as an SMT-LIB2 term."""
        if not expr.arguments:
            return expr.name

        if expr.name == "int2bv":
            return self._int2bv_text(expr)
        elif expr.name == "bv2int":
            return self._bv2int_text(expr)
        elif expr.name == "const_array":
            smt_assert(len(expr.arguments) == 2, "const_array takes two arguments")
            sort_sort = expr.arguments[0].sort
            smt_assert(isinstance(sort_sort, SortSort), "const_array needs a sort placeholder")
            array_sort = sort_sort.inner
            smt_assert(isinstance(array_sort, ArraySort), "const_array needs an array sort")
            return f"((as const {self.sort_text(array_sort)}) {self.expr_text(expr.arguments[1])})"
        elif expr.name == "tuple_get":
            smt_assert(len(expr.arguments) == 2, "tuple_get takes two arguments")
            tuple_sort = expr.arguments[0].sort
            smt_assert(isinstance(tuple_sort, TupleSort), "tuple_get needs a tuple-sorted argument")
            index = int(expr.arguments[1].name)
            smt_assert(0 <= index < len(tuple_sort.members), f"Tuple index out of range: {index}")
            return f"(|{tuple_sort.members[index]}| {self.expr_text(expr.arguments[0])})"
        elif expr.name == "tuple_constructor":
            tuple_sort = expr.sort
            smt_assert(isinstance(tuple_sort, TupleSort), "tuple_constructor needs a tuple sort")
            args = "".join(" " + self.expr_text(arg) for arg in expr.arguments)
            return f"(|{tuple_sort.name}|{args})"

        args = "".join(" " + self.expr_text(arg) for arg in expr.arguments)
        return f"({expr.name}{args})"

    def _int2bv_text(self, expr: Expression) -> str:
        # Solvers treat bitvectors as unsigned, so negative values get an
        # explicit two's complement.
        smt_assert(len(expr.arguments) == 2, "int2bv takes two arguments")
        size = int(expr.arguments[1].name)
        arg = self.expr_text(expr.arguments[0])
        conv = f"(_ int2bv {size})"
        return f"(ite (>= {arg} 0) ({conv} {arg}) (bvneg ({conv} (- {arg}))))"

    def _bv2int_text(self, expr: Expression) -> str:
        smt_assert(len(expr.arguments) == 1, "bv2int takes one argument")
        int_sort = expr.sort
        smt_assert(isinstance(int_sort, IntSort), "bv2int must have an Int sort")

        arg = self.expr_text(expr.arguments[0])
        nat = f"(bv2nat {arg})"
        if not int_sort.is_signed:
            return nat

        bv_sort = expr.arguments[0].sort
        smt_assert(isinstance(bv_sort, BitVectorSort), "bv2int argument must be a bitvector")
        pos = bv_sort.size - 1
        return f"(ite (= ((_ extract {pos} {pos}) {arg}) #b0) {nat} (- (bv2nat (bvneg {arg}))))"
