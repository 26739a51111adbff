import pytest

from cella.interpreter import Interpreter
from cella.types.heap import Heap
from cella.types.value import Value


# Expressions are written as nested Python data and converted on a heap:
#   int   -> number
#   str   -> interned symbol
#   list  -> proper list ([] is the empty list)
#   tuple -> dotted list: (items, tail)
#   Value -> used as-is
def to_value(heap: Heap, form):
    if isinstance(form, Value):
        return form
    if isinstance(form, bool):
        raise TypeError("booleans are not Cella values")
    if isinstance(form, int):
        return heap.make_number(form)
    if isinstance(form, str):
        return heap.make_symbol(form)
    if isinstance(form, list):
        return heap.make_list([to_value(heap, f) for f in form])
    if isinstance(form, tuple):
        items, tail = form
        result = to_value(heap, tail)
        for f in reversed(items):
            result = heap.make_pair(to_value(heap, f), result)
        return result
    raise TypeError(f"cannot convert {form!r}")


@pytest.fixture
def heap():
    """Fresh, small heap so tests never share handles."""
    return Heap(capacity=4096)


@pytest.fixture
def interp(heap):
    """Interpreter with the builtin catalogue installed."""
    return Interpreter(heap)


@pytest.fixture
def build(heap):
    return lambda form: to_value(heap, form)


@pytest.fixture
def run(interp, build):
    """Evaluate a Python-data expression in the global environment."""
    return lambda form: interp.eval(build(form))
