"""Sort and expression data model."""

from .sorts import (
    Kind,
    Sort,
    IntSort,
    BoolSort,
    BitVectorSort,
    ArraySort,
    TupleSort,
    FunctionSort,
    SortSort,
    SortProvider,
)
from .expression import (
    Expression,
    literal,
    variable,
    apply,
    int2bv,
    bv2int,
    const_array,
    tuple_get,
    tuple_constructor,
)

__all__ = [
    "Kind",
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
    "literal",
    "variable",
    "apply",
    "int2bv",
    "bv2int",
    "const_array",
    "tuple_get",
    "tuple_constructor",
]
