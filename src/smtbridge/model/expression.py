"""
Expression tree model.

An expression is an operator or symbol name applied to an ordered list of
argument expressions. Leaves (no arguments) are literals or references to
declared symbols and are rendered verbatim.
"""
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from .sorts import ArraySort, BitVectorSort, IntSort, Sort, SortSort, TupleSort


@dataclass(frozen=True)
class Expression:
    """A node in a logical expression tree.

    Attributes:
        name: Operator, function symbol, literal or variable name
        arguments: Child expressions (empty for leaves)
        sort: Sort of this expression, if known
    """
    name: str
    arguments: Tuple["Expression", ...] = ()
    sort: Optional[Sort] = None

    def __post_init__(self):
        object.__setattr__(self, "arguments", tuple(self.arguments))

    @property
    def is_leaf(self) -> bool:
        return not self.arguments


def literal(value, sort: Optional[Sort] = None) -> Expression:
    """Build a leaf for a constant. Booleans become ``true``/``false``."""
    if isinstance(value, bool):
        text = "true" if value else "false"
    else:
        text = str(value)
    return Expression(text, (), sort)


def variable(name: str, sort: Sort) -> Expression:
    return Expression(name, (), sort)


def apply(name: str, *arguments: Expression, sort: Optional[Sort] = None) -> Expression:
    return Expression(name, tuple(arguments), sort)


def int2bv(value: Expression, size: int) -> Expression:
    """Convert an integer expression to a bitvector of ``size`` bits."""
    return Expression(
        "int2bv", (value, literal(size)), BitVectorSort(size)
    )


def bv2int(value: Expression, sort: IntSort) -> Expression:
    """Convert a bitvector expression to an integer of the given signedness."""
    return Expression("bv2int", (value,), sort)


def const_array(array_sort: ArraySort, fill: Expression) -> Expression:
    """Array of ``array_sort`` holding ``fill`` at every index."""
    placeholder = Expression("array_sort", (), SortSort(array_sort))
    return Expression("const_array", (placeholder, fill), array_sort)


def tuple_get(tuple_expr: Expression, index: int) -> Expression:
    """Project component ``index`` out of a tuple-sorted expression."""
    tuple_sort = tuple_expr.sort
    result_sort = None
    if isinstance(tuple_sort, TupleSort) and 0 <= index < len(tuple_sort.components):
        result_sort = tuple_sort.components[index]
    return Expression("tuple_get", (tuple_expr, literal(index)), result_sort)


def tuple_constructor(tuple_sort: TupleSort, arguments: Sequence[Expression]) -> Expression:
    return Expression("tuple_constructor", tuple(arguments), tuple_sort)
