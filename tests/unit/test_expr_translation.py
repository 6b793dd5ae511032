"""
Tests for expression-to-SMT-LIB2 translation, including the special-cased
conversion, array and tuple operators.
"""
import pytest

from smtbridge.errors import SMTAssertionError
from smtbridge.model import (
    ArraySort,
    BitVectorSort,
    Expression,
    IntSort,
    SortProvider,
    TupleSort,
    apply,
    bv2int,
    const_array,
    int2bv,
    literal,
    tuple_constructor,
    tuple_get,
    variable,
)
from smtbridge.translator import SMTLib2Encoder


@pytest.fixture
def encoder():
    return SMTLib2Encoder()


def test_leaf_renders_name(encoder):
    assert encoder.expr_text(literal(5)) == "5"
    assert encoder.expr_text(variable("x", SortProvider.int_sort)) == "x"
    assert encoder.expr_text(Expression("#b0101")) == "#b0101"


def test_application(encoder):
    x = variable("x", SortProvider.int_sort)
    expr = apply("+", x, apply("*", literal(2), x))
    assert encoder.expr_text(expr) == "(+ x (* 2 x))"


def test_unknown_operator_passes_through(encoder):
    expr = apply("|my_fn|", literal(1), literal(2))
    assert encoder.expr_text(expr) == "(|my_fn| 1 2)"


def test_int2bv_literal(encoder):
    expr = int2bv(literal(5), 8)
    assert encoder.expr_text(expr) == (
        "(ite (>= 5 0) ((_ int2bv 8) 5) (bvneg ((_ int2bv 8) (- 5))))"
    )


def test_int2bv_nested_argument(encoder):
    x = variable("x", SortProvider.int_sort)
    expr = int2bv(apply("+", x, literal(1)), 16)
    assert encoder.expr_text(expr) == (
        "(ite (>= (+ x 1) 0) ((_ int2bv 16) (+ x 1)) "
        "(bvneg ((_ int2bv 16) (- (+ x 1)))))"
    )


def test_bv2int_unsigned(encoder):
    v = variable("v", BitVectorSort(8))
    expr = bv2int(v, SortProvider.uint_sort)
    assert encoder.expr_text(expr) == "(bv2nat v)"


def test_bv2int_signed(encoder):
    v = variable("v", BitVectorSort(8))
    expr = bv2int(v, SortProvider.int_sort)
    assert encoder.expr_text(expr) == (
        "(ite (= ((_ extract 7 7) v) #b0) (bv2nat v) (- (bv2nat (bvneg v))))"
    )


def test_bv2int_requires_int_sort(encoder):
    v = variable("v", BitVectorSort(8))
    with pytest.raises(SMTAssertionError):
        encoder.expr_text(Expression("bv2int", (v,), BitVectorSort(8)))


def test_bv2int_signed_requires_bitvector_argument(encoder):
    x = variable("x", SortProvider.int_sort)
    with pytest.raises(SMTAssertionError):
        encoder.expr_text(bv2int(x, SortProvider.int_sort))


def test_const_array(encoder):
    arr = ArraySort(SortProvider.int_sort, BitVectorSort(8))
    expr = const_array(arr, literal("#x00"))
    assert encoder.expr_text(expr) == "((as const (Array Int (_ BitVec 8))) #x00)"


def test_const_array_requires_sort_placeholder(encoder):
    arr = ArraySort(SortProvider.int_sort, SortProvider.int_sort)
    bad = Expression("const_array", (Expression("a", (), arr), literal(0)), arr)
    with pytest.raises(SMTAssertionError):
        encoder.expr_text(bad)


def test_tuple_get(encoder):
    pair = TupleSort("pair", ["fst", "snd"], [SortProvider.int_sort, SortProvider.bool_sort])
    p = variable("p", pair)
    assert encoder.expr_text(tuple_get(p, 0)) == "(|fst| p)"
    assert encoder.expr_text(tuple_get(p, 1)) == "(|snd| p)"


def test_tuple_get_out_of_range(encoder):
    pair = TupleSort("pair", ["fst"], [SortProvider.int_sort])
    p = variable("p", pair)
    with pytest.raises(SMTAssertionError):
        encoder.expr_text(tuple_get(p, 1))


def test_tuple_constructor(encoder):
    pair = TupleSort("pair", ["fst", "snd"], [SortProvider.int_sort, SortProvider.bool_sort])
    expr = tuple_constructor(pair, [literal(3), literal(True)])
    assert encoder.expr_text(expr) == "(|pair| 3 true)"


def test_add_assertion(encoder):
    x = variable("x", IntSort())
    encoder.declare_variable("x", x.sort)
    encoder.add_assertion(apply("=", int2bv(x, 8), literal("#xff")))

    script = encoder.full_script()
    assert script.endswith(
        "(assert (= (ite (>= x 0) ((_ int2bv 8) x) (bvneg ((_ int2bv 8) (- x)))) #xff))\n"
    )
