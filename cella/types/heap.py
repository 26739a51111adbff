"""The heap: pools plus the constructors and accessors over them.

A Heap owns three append-only pools:
- `pairs`: PairCell records,
- `symbols`: interned symbol texts,
- `records`: Procedure and Primitive records.

Every constructor returns a tagged Value; every accessor checks the value's
kind first and raises CellaTypeMismatch when it does not match. Numbers are
the exception to pooling: they are stored inline in the payload.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, Iterator

from cella.config import get_pool_capacity
from cella.errors import CellaMalformedList, CellaTypeMismatch
from cella.types.codec import Kind, sign_extend
from cella.types.pool import Pool, SymbolPool
from cella.types.records import (
    BuiltinFn,
    PairCell,
    Primitive,
    Procedure,
    SpecialFormFn,
)
from cella.types.value import EMPTY, Value

if TYPE_CHECKING:
    from cella.types.environment import Environment

logger = logging.getLogger(__name__)


_TYPENAMES = {
    Kind.EMPTY: "null",
    Kind.NUMBER: "number",
    Kind.SYMBOL: "symbol",
    Kind.PAIR: "pair",
    Kind.PROCEDURE: "procedure",
    Kind.BUILTIN_PROCEDURE: "builtin procedure",
    Kind.SPECIAL_FORM: "special form",
}


def typename_of(value: Value) -> str:
    return _TYPENAMES[value.kind]


def expect(value: Value, kind: Kind) -> Value:
    """Downcast-or-fail: return `value` if it has `kind`, else raise."""
    if value.kind is not kind:
        raise CellaTypeMismatch(
            f"Expected {_TYPENAMES[kind]}, got {typename_of(value)}"
        )
    return value


def expect_list(value: Value) -> Value:
    """Nullable downcast: accept a pair or the empty list."""
    if value.kind is not Kind.PAIR and value.kind is not Kind.EMPTY:
        raise CellaTypeMismatch(f"Expected list, got {typename_of(value)}")
    return value


class Heap:
    """Explicit evaluation state: the pools every value handle points into."""

    __slots__ = ("pairs", "symbols", "records")

    def __init__(self, capacity: int | None = None):
        if capacity is None:
            capacity = get_pool_capacity()
        self.pairs: Pool[PairCell] = Pool("pairs", capacity)
        self.symbols: SymbolPool = SymbolPool("symbols", capacity)
        self.records: Pool[Procedure | Primitive] = Pool("records", capacity)

    def __repr__(self):
        return f"<Heap {self.pairs!r} {self.symbols!r} {self.records!r}>"

    # --- Constructors ---
    @staticmethod
    def make_number(n: int) -> Value:
        # Fixed-width: wraps into the signed payload range
        return Value(Kind.NUMBER, sign_extend(n))

    def make_symbol(self, text: str) -> Value:
        return Value(Kind.SYMBOL, self.symbols.intern(text))

    def make_pair(self, car: Value, cdr: Value) -> Value:
        return Value(Kind.PAIR, self.pairs.allocate(PairCell(car, cdr)))

    def make_list(self, values: Iterable[Value]) -> Value:
        """Right-fold `values` into a proper list."""
        result = EMPTY
        for v in reversed(list(values)):
            result = self.make_pair(v, result)
        return result

    def make_procedure(
        self, env: Environment | None, params: Value, body: Value
    ) -> Value:
        handle = self.records.allocate(Procedure(env, expect_list(params), body))
        logger.debug("allocated procedure %d", handle)
        return Value(Kind.PROCEDURE, handle)

    def make_builtin(self, name: str, fn: BuiltinFn) -> Value:
        return Value(Kind.BUILTIN_PROCEDURE, self.records.allocate(Primitive(name, fn)))

    def make_special_form(self, name: str, fn: SpecialFormFn) -> Value:
        return Value(Kind.SPECIAL_FORM, self.records.allocate(Primitive(name, fn)))

    # --- Accessors ---
    def pair_of(self, value: Value) -> PairCell:
        return self.pairs.lookup(expect(value, Kind.PAIR).payload)

    def car_of(self, value: Value) -> Value:
        return self.pair_of(value).car

    def cdr_of(self, value: Value) -> Value:
        return self.pair_of(value).cdr

    def symbol_text(self, value: Value) -> str:
        return self.symbols.lookup(expect(value, Kind.SYMBOL).payload)

    @staticmethod
    def number_of(value: Value) -> int:
        return expect(value, Kind.NUMBER).payload

    def procedure_of(self, value: Value) -> Procedure:
        return self.records.lookup(expect(value, Kind.PROCEDURE).payload)

    def builtin_of(self, value: Value) -> Primitive:
        return self.records.lookup(expect(value, Kind.BUILTIN_PROCEDURE).payload)

    def special_form_of(self, value: Value) -> Primitive:
        return self.records.lookup(expect(value, Kind.SPECIAL_FORM).payload)

    # --- Lists ---
    def iter_list(self, value: Value) -> Iterator[Value]:
        """Yield the elements of a proper list.

        Raises CellaMalformedList when a tail is neither a pair nor the empty
        list; elements before the bad tail have already been yielded.
        """
        while value.kind is Kind.PAIR:
            cell = self.pairs.lookup(value.payload)
            yield cell.car
            value = cell.cdr
        if value.kind is not Kind.EMPTY:
            raise CellaMalformedList(
                f"List terminated by {typename_of(value)} instead of '()"
            )

    def to_pylist(self, value: Value) -> list[Value]:
        return list(self.iter_list(expect_list(value)))

    # --- Equality ---
    def equal(self, a: Value, b: Value) -> bool:
        """Structural equality: deep for pairs, tag and payload for the rest."""
        while True:
            if a.kind is not b.kind:
                return False
            if a.kind is not Kind.PAIR:
                # Symbols are interned, so handle equality is text equality
                return a.payload == b.payload
            if a.payload == b.payload:
                return True
            pa, pb = self.pair_of(a), self.pair_of(b)
            if not self.equal(pa.car, pb.car):
                return False
            # Iterate down the cdr chain to keep long lists off the call stack
            a, b = pa.cdr, pb.cdr
