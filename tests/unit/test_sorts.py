"""
Tests for the sort and expression model.
"""
import pytest

from smtbridge.errors import SMTAssertionError
from smtbridge.model import (
    ArraySort,
    BitVectorSort,
    Expression,
    FunctionSort,
    IntSort,
    Kind,
    SortProvider,
    SortSort,
    TupleSort,
    const_array,
    int2bv,
    literal,
    tuple_get,
)


def test_sort_kinds():
    """Each sort variant reports its kind."""
    assert IntSort().kind == Kind.INT
    assert SortProvider.bool_sort.kind == Kind.BOOL
    assert BitVectorSort(8).kind == Kind.BITVECTOR
    assert ArraySort(IntSort(), IntSort()).kind == Kind.ARRAY
    assert TupleSort("t", ["a"], [IntSort()]).kind == Kind.TUPLE
    assert FunctionSort([IntSort()], IntSort()).kind == Kind.FUNCTION
    assert SortSort(IntSort()).kind == Kind.SORT


def test_sort_provider_signedness():
    assert SortProvider.int_sort.is_signed
    assert not SortProvider.uint_sort.is_signed


def test_tuple_sort_length_mismatch():
    """Members and components must have the same length."""
    with pytest.raises(SMTAssertionError):
        TupleSort("t", ["a", "b"], [IntSort()])


def test_sorts_are_immutable():
    sort = BitVectorSort(8)
    with pytest.raises(Exception):
        sort.size = 16


def test_sorts_compare_by_identity():
    """Structurally identical sorts built separately are distinct."""
    a = BitVectorSort(8)
    b = BitVectorSort(8)
    assert a == a
    assert a != b


def test_expression_leaf():
    x = Expression("x", (), SortProvider.int_sort)
    assert x.is_leaf
    assert not Expression("+", (x, x)).is_leaf


def test_literal_booleans():
    assert literal(True).name == "true"
    assert literal(False).name == "false"
    assert literal(42).name == "42"


def test_builders_shape():
    """Builders produce the argument layout the encoder expects."""
    x = Expression("x", (), SortProvider.int_sort)
    conv = int2bv(x, 8)
    assert conv.name == "int2bv"
    assert conv.arguments[1].name == "8"
    assert conv.sort.size == 8

    arr = ArraySort(SortProvider.int_sort, SortProvider.int_sort)
    ca = const_array(arr, literal(0))
    assert isinstance(ca.arguments[0].sort, SortSort)
    assert ca.arguments[0].sort.inner is arr

    pair = TupleSort("pair", ["fst", "snd"], [SortProvider.int_sort, SortProvider.bool_sort])
    p = Expression("p", (), pair)
    get = tuple_get(p, 1)
    assert get.arguments[1].name == "1"
    assert get.sort is SortProvider.bool_sort
