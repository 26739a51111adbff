import pytest
from hypothesis import given, strategies as st

from cella import errors
from cella.types.codec import Kind, PAYLOAD_MAX, PAYLOAD_MIN
from cella.types.heap import Heap, expect, expect_list, typename_of
from cella.types.value import EMPTY, Value

numbers = st.lists(st.integers(min_value=-1000, max_value=1000), max_size=20)

# -----------------------------------------------------
# Constructors and accessors
# -----------------------------------------------------

def test_numbers_are_inline(heap):
    n = heap.make_number(42)
    assert n.kind is Kind.NUMBER
    assert heap.number_of(n) == 42
    assert heap.make_number(-7).payload == -7
    assert len(heap.pairs) == len(heap.records) == 0


def test_numbers_wrap_to_fixed_width(heap):
    assert heap.number_of(heap.make_number(PAYLOAD_MAX + 1)) == PAYLOAD_MIN
    assert heap.number_of(heap.make_number(PAYLOAD_MIN - 1)) == PAYLOAD_MAX


def test_pair_accessors(heap):
    p = heap.make_pair(heap.make_number(1), heap.make_number(2))
    assert p.kind is Kind.PAIR
    assert heap.car_of(p) == heap.make_number(1)
    assert heap.cdr_of(p) == heap.make_number(2)


def test_symbol_text_and_interning(heap):
    a = heap.make_symbol("lambda")
    assert heap.symbol_text(a) == "lambda"
    assert heap.make_symbol("lambda") == a
    assert heap.make_symbol("set!") != a


def test_procedure_record(heap):
    params = heap.make_list([heap.make_symbol("x")])
    body = heap.make_symbol("x")
    proc = heap.make_procedure(None, params, body)
    record = heap.procedure_of(proc)
    assert record.creation_environment is None
    assert heap.equal(record.parameters, params)
    assert record.body == body


def test_primitive_records(heap):
    fn = lambda h, args: EMPTY
    b = heap.make_builtin("noop", fn)
    f = heap.make_special_form("quoteish", fn)
    assert heap.builtin_of(b).name == "noop"
    assert heap.special_form_of(f).fn is fn
    assert b.kind is Kind.BUILTIN_PROCEDURE
    assert f.kind is Kind.SPECIAL_FORM


@pytest.mark.parametrize(
    "accessor",
    ["car_of", "cdr_of", "symbol_text", "procedure_of", "builtin_of", "special_form_of"],
)
def test_accessor_type_mismatch(heap, accessor):
    with pytest.raises(errors.CellaTypeMismatch):
        getattr(heap, accessor)(heap.make_number(3))


def test_number_of_rejects_symbols(heap):
    with pytest.raises(errors.CellaTypeMismatch):
        heap.number_of(heap.make_symbol("x"))


def test_stale_handle_is_out_of_bounds(heap):
    with pytest.raises(errors.CellaOutOfBounds):
        heap.car_of(Value(Kind.PAIR, 99))


def test_heaps_are_independent():
    h1, h2 = Heap(capacity=16), Heap(capacity=16)
    p = h1.make_pair(EMPTY, EMPTY)
    with pytest.raises(errors.CellaOutOfBounds):
        h2.car_of(p)
    assert h1.make_symbol("a") == h2.make_symbol("a")  # both handle 0
    assert h2.symbol_text(h2.make_symbol("b")) == "b"


# -----------------------------------------------------
# Downcasts
# -----------------------------------------------------

def test_expect(heap):
    n = heap.make_number(1)
    assert expect(n, Kind.NUMBER) is n
    with pytest.raises(errors.CellaTypeMismatch):
        expect(n, Kind.PAIR)
    with pytest.raises(errors.CellaTypeMismatch):
        expect(EMPTY, Kind.PAIR)


def test_expect_list_accepts_empty(heap):
    assert expect_list(EMPTY) is EMPTY
    p = heap.make_pair(EMPTY, EMPTY)
    assert expect_list(p) is p
    with pytest.raises(errors.CellaTypeMismatch):
        expect_list(heap.make_number(1))


def test_typename_of(heap):
    assert typename_of(EMPTY) == "null"
    assert typename_of(heap.make_number(0)) == "number"
    assert typename_of(heap.make_symbol("a")) == "symbol"
    assert typename_of(heap.make_pair(EMPTY, EMPTY)) == "pair"


# -----------------------------------------------------
# Lists
# -----------------------------------------------------

def test_make_list_right_folds(heap, build):
    lst = heap.make_list([heap.make_number(i) for i in (1, 2, 3)])
    assert heap.equal(lst, build([1, 2, 3]))
    assert heap.make_list([]) is EMPTY
    assert [heap.number_of(v) for v in heap.iter_list(lst)] == [1, 2, 3]


def test_iter_list_rejects_improper_lists(heap, build):
    dotted = build(([1, 2], 3))
    with pytest.raises(errors.CellaMalformedList):
        heap.to_pylist(dotted)


def test_to_pylist_rejects_non_lists(heap):
    with pytest.raises(errors.CellaTypeMismatch):
        heap.to_pylist(heap.make_number(1))


# -----------------------------------------------------
# Equality
# -----------------------------------------------------

@given(numbers)
def test_list_equality_is_structural(xs):
    heap = Heap(capacity=1024)
    a = heap.make_list([heap.make_number(x) for x in xs])
    b = heap.make_list([heap.make_number(x) for x in xs])
    assert heap.equal(a, b)
    if xs:
        assert a != b  # distinct arena slots
        changed = heap.make_list([heap.make_number(x) for x in xs[:-1]] + [heap.make_number(xs[-1] + 1)])
        assert not heap.equal(a, changed)
        truncated = heap.make_list([heap.make_number(x) for x in xs[:-1]])
        assert not heap.equal(a, truncated)


def test_nested_pair_equality(heap, build):
    assert heap.equal(build([1, [2, 3], "a"]), build([1, [2, 3], "a"]))
    assert not heap.equal(build([1, [2, 3]]), build([1, [2, 4]]))
    assert heap.equal(build(([1], 2)), build(([1], 2)))
    assert not heap.equal(build(([1], 2)), build([1, 2]))


def test_equality_across_kinds(heap):
    one = heap.make_number(1)
    sym = heap.make_symbol("one")
    assert heap.equal(EMPTY, EMPTY)
    assert not heap.equal(EMPTY, heap.make_number(0))
    assert not heap.equal(heap.make_number(0), EMPTY)
    assert not heap.equal(one, sym)
    assert heap.equal(sym, heap.make_symbol("one"))
    # Procedures compare by handle
    p1 = heap.make_procedure(None, EMPTY, one)
    p2 = heap.make_procedure(None, EMPTY, one)
    assert heap.equal(p1, p1)
    assert not heap.equal(p1, p2)
