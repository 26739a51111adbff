"""Runtime environment for Cella.

An environment is a persistent singly-linked chain of frames, each binding
one symbol to one value. `None` is the empty chain. Extending conses a new
frame in front of an existing chain and never touches the frames already
there, so a chain can be shared by any number of procedures and callers.
The only mutation is `set!`, which overwrites the value of the nearest frame
binding a symbol.
"""

from __future__ import annotations

from typing import Iterator, Optional

from cella.errors import CellaUnboundSymbol
from cella.types.codec import Kind
from cella.types.heap import Heap, expect
from cella.types.value import Value


class Environment:
    """One binding plus a link to the enclosing frame."""

    __slots__ = ("parent", "symbol", "value")

    def __init__(self, parent: Optional[Environment], symbol: Value, value: Value):
        self.parent: Environment | None = parent
        self.symbol: Value = expect(symbol, Kind.SYMBOL)
        self.value: Value = value

    def __repr__(self) -> str:
        depth = sum(1 for _ in frames(self))
        return f"<Environment {self.symbol!r}={self.value!r} depth={depth}>"


def frames(env: Optional[Environment]) -> Iterator[Environment]:
    """Iterate the chain, innermost frame first."""
    while env is not None:
        yield env
        env = env.parent


def extend(env: Optional[Environment], symbol: Value, value: Value) -> Environment:
    return Environment(env, symbol, value)


def find_frame(
    env: Optional[Environment], symbol: Value, heap: Heap | None = None
) -> Environment:
    """Return the nearest frame binding `symbol`.

    Raises CellaUnboundSymbol if no frame in the chain binds it. `heap` is
    only used to name the symbol in the error message.
    """
    expect(symbol, Kind.SYMBOL)
    for frame in frames(env):
        if frame.symbol.payload == symbol.payload:
            return frame
    name = heap.symbol_text(symbol) if heap is not None else f"#{symbol.payload}"
    raise CellaUnboundSymbol(f"Unbound Symbol: `{name}`")


def lookup(env: Optional[Environment], symbol: Value, heap: Heap | None = None) -> Value:
    return find_frame(env, symbol, heap).value


def set_value(
    env: Optional[Environment], symbol: Value, value: Value, heap: Heap | None = None
) -> None:
    """Overwrite the nearest binding of `symbol`; never creates one."""
    find_frame(env, symbol, heap).value = value
