"""Packing of a kind tag and an integer payload into one 64-bit word.

The kind occupies the top KIND_BITS bits and the payload the remaining low
bits. Nothing here validates its input: payloads wider than the field are
masked, negative payloads are stored two's complement.
"""

from __future__ import annotations

from enum import IntEnum


KIND_BITS = 3
WORD_BITS = 64
PAYLOAD_BITS = WORD_BITS - KIND_BITS

KIND_MASK = ((1 << KIND_BITS) - 1) << PAYLOAD_BITS
PAYLOAD_MASK = (1 << PAYLOAD_BITS) - 1

# Range of a signed payload (numbers are stored inline)
PAYLOAD_MIN = -(1 << (PAYLOAD_BITS - 1))
PAYLOAD_MAX = (1 << (PAYLOAD_BITS - 1)) - 1


class Kind(IntEnum):
    """Closed set of value kinds. Must fit in KIND_BITS."""

    EMPTY = 0
    NUMBER = 1
    SYMBOL = 2
    PAIR = 3
    PROCEDURE = 4
    BUILTIN_PROCEDURE = 5
    SPECIAL_FORM = 6


def encode(kind: Kind, payload: int) -> int:
    return (int(kind) << PAYLOAD_BITS) | (payload & PAYLOAD_MASK)


def decode_kind(word: int) -> Kind:
    return Kind((word & KIND_MASK) >> PAYLOAD_BITS)


def decode_payload(word: int, signed: bool = False) -> int:
    payload = word & PAYLOAD_MASK
    if signed:
        return sign_extend(payload)
    return payload


def sign_extend(payload: int) -> int:
    """Interpret the low PAYLOAD_BITS of `payload` as a two's complement integer."""
    payload &= PAYLOAD_MASK
    if payload > PAYLOAD_MAX:
        payload -= 1 << PAYLOAD_BITS
    return payload
