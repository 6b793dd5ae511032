"""
Sort model for logical expressions.

Sorts are immutable. The encoder caches sort names by instance identity,
so callers should reuse one instance per logical sort.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from ..errors import smt_assert


class Kind(Enum):
    """Sort variant tag."""
    INT = "int"
    BOOL = "bool"
    BITVECTOR = "bitvector"
    ARRAY = "array"
    TUPLE = "tuple"
    FUNCTION = "function"
    SORT = "sort"


@dataclass(frozen=True, eq=False)
class Sort:
    """Base class of all sorts."""

    @property
    def kind(self) -> Kind:
        raise NotImplementedError


@dataclass(frozen=True, eq=False)
class IntSort(Sort):
    """Mathematical integer, optionally tagged as signed.

    The signedness flag only matters for ``bv2int`` conversions.
    """
    is_signed: bool = True

    @property
    def kind(self) -> Kind:
        return Kind.INT


@dataclass(frozen=True, eq=False)
class BoolSort(Sort):

    @property
    def kind(self) -> Kind:
        return Kind.BOOL


@dataclass(frozen=True, eq=False)
class BitVectorSort(Sort):
    size: int = 256

    @property
    def kind(self) -> Kind:
        return Kind.BITVECTOR


@dataclass(frozen=True, eq=False)
class ArraySort(Sort):
    domain: Sort
    range: Sort

    @property
    def kind(self) -> Kind:
        return Kind.ARRAY


@dataclass(frozen=True, eq=False)
class TupleSort(Sort):
    """Named record sort, emitted as an SMT-LIB datatype.

    Attributes:
        name: Datatype (and constructor) name
        members: Accessor names, one per component
        components: Component sorts
    """
    name: str
    members: Tuple[str, ...] = ()
    components: Tuple[Sort, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "members", tuple(self.members))
        object.__setattr__(self, "components", tuple(self.components))
        smt_assert(
            len(self.members) == len(self.components),
            f"Tuple sort {self.name} has {len(self.members)} members "
            f"but {len(self.components)} components",
        )

    @property
    def kind(self) -> Kind:
        return Kind.TUPLE


@dataclass(frozen=True, eq=False)
class FunctionSort(Sort):
    domain: Tuple[Sort, ...]
    codomain: Sort

    def __post_init__(self):
        object.__setattr__(self, "domain", tuple(self.domain))

    @property
    def kind(self) -> Kind:
        return Kind.FUNCTION


@dataclass(frozen=True, eq=False)
class SortSort(Sort):
    """Sort of an expression that stands for a sort (e.g. in ``const_array``)."""
    inner: Sort

    @property
    def kind(self) -> Kind:
        return Kind.SORT


class SortProvider:
    """Shared sort instances for the common primitive sorts."""
    bool_sort = BoolSort()
    int_sort = IntSort(is_signed=True)
    uint_sort = IntSort(is_signed=False)
