"""Debug rendering of values and environments.

Nothing in the evaluator depends on this module; it is used by the
interpreter host, the smoke demo and the tests.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from cella.types.codec import Kind
from cella.types.environment import Environment, frames
from cella.types.heap import Heap
from cella.types.value import Value


def _write_pair(buffer: StringIO, value: Value, heap: Heap) -> None:
    buffer.write("(")
    first = True
    while value.kind is Kind.PAIR:
        cell = heap.pair_of(value)
        if not first:
            buffer.write(" ")
        _write_value(buffer, cell.car, heap)
        first = False
        value = cell.cdr
    if value.kind is not Kind.EMPTY:
        buffer.write(" . ")
        _write_value(buffer, value, heap)
    buffer.write(")")


def _write_value(buffer: StringIO, value: Value, heap: Heap) -> None:
    kind = value.kind
    if kind is Kind.EMPTY:
        buffer.write("'()")
    elif kind is Kind.NUMBER:
        buffer.write(str(value.payload))
    elif kind is Kind.SYMBOL:
        buffer.write(heap.symbol_text(value))
    elif kind is Kind.PAIR:
        _write_pair(buffer, value, heap)
    elif kind is Kind.PROCEDURE:
        buffer.write(f"<procedure[{value.payload}]>")
    elif kind is Kind.BUILTIN_PROCEDURE:
        buffer.write(f"<builtin-procedure[{heap.builtin_of(value).name}]>")
    else:
        buffer.write(f"<special-form[{heap.special_form_of(value).name}]>")


def render(value: Value, heap: Heap) -> str:
    """External representation of `value`, e.g. `(1 2 . 3)`."""
    with StringIO() as buffer:
        _write_value(buffer, value, heap)
        return buffer.getvalue()


def render_env(env: Optional[Environment], heap: Heap) -> str:
    """One line per frame, innermost first."""
    with StringIO() as buffer:
        buffer.write("Env {\n")
        for frame in frames(env):
            buffer.write(f"\t{heap.symbol_text(frame.symbol)}: ")
            _write_value(buffer, frame.value, heap)
            buffer.write("\n")
        buffer.write("}")
        return buffer.getvalue()
