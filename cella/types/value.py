from __future__ import annotations

from cella.types.codec import Kind, encode, decode_kind, decode_payload


class Value:
    """A tagged value: a kind plus an integer payload.

    The payload is the number itself for NUMBER, and a pool handle for every
    other kind except EMPTY. `==` compares the tag and payload only; deep
    equality of pairs is `Heap.equal`.
    """

    __slots__ = ("kind", "payload")

    def __init__(self, kind: Kind, payload: int = 0):
        object.__setattr__(self, "kind", Kind(kind))
        object.__setattr__(self, "payload", payload)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, Value)
            and self.kind == other.kind
            and self.payload == other.payload
        )

    def __hash__(self) -> int:
        return hash((self.kind, self.payload))

    def __repr__(self):
        if self.kind is Kind.EMPTY:
            return "Value(EMPTY)"
        return f"Value({self.kind.name}, {self.payload})"

    @property
    def word(self) -> int:
        """The packed 64-bit form of this value."""
        return encode(self.kind, self.payload)

    @classmethod
    def from_word(cls, word: int) -> Value:
        kind = decode_kind(word)
        if kind is Kind.EMPTY:
            return EMPTY
        return cls(kind, decode_payload(word, signed=kind is Kind.NUMBER))


EMPTY = Value(Kind.EMPTY)

CALLABLE_KINDS = frozenset(
    {Kind.PROCEDURE, Kind.BUILTIN_PROCEDURE, Kind.SPECIAL_FORM}
)
SELF_EVALUATING_KINDS = frozenset(
    {Kind.EMPTY, Kind.NUMBER} | CALLABLE_KINDS
)
