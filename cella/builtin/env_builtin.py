"""Built-in procedures for the Cella runtime environment.

This module defines the fixed primitive catalogue (arithmetic and pair
operations) and `global_environment`, which binds the builtins and the
special forms into a fresh environment chain.
"""
from __future__ import annotations

from cella import LispValue
from cella.errors import CellaArityError
from cella.evaluation.special_forms import SPECIAL_FORMS
from cella.types.codec import Kind
from cella.types.environment import Environment, extend
from cella.types.heap import Heap, expect


def _fixed_args(heap: Heap, args: LispValue, name: str, count: int) -> list[LispValue]:
    """Unpack exactly `count` arguments or raise CellaArityError."""
    values = heap.to_pylist(args)
    if not values:
        plural = "argument" if count == 1 else "arguments"
        raise CellaArityError(f"Builtin `{name}` takes {count} {plural}, none given!")
    if len(values) != count:
        plural = "argument" if count == 1 else "arguments"
        raise CellaArityError(
            f"Builtin `{name}` takes exactly {count} {plural}, {len(values)} given!"
        )
    return values


# -------------------------------
# Arithmetic
# -------------------------------
def add(heap: Heap, args: LispValue) -> LispValue:
    """Return the sum of all arguments; (+) is 0."""
    total = 0
    for x in heap.iter_list(args):
        total += heap.number_of(x)
    return heap.make_number(total)


def mul(heap: Heap, args: LispValue) -> LispValue:
    """Return the product of all arguments; (*) is 1."""
    product = 1
    for x in heap.iter_list(args):
        product *= heap.number_of(x)
    return heap.make_number(product)


# -------------------------------
# Pairs
# -------------------------------
def cons(heap: Heap, args: LispValue) -> LispValue:
    car, cdr = _fixed_args(heap, args, "cons", 2)
    return heap.make_pair(car, cdr)


def car(heap: Heap, args: LispValue) -> LispValue:
    (arg,) = _fixed_args(heap, args, "car", 1)
    return heap.car_of(expect(arg, Kind.PAIR))


def cdr(heap: Heap, args: LispValue) -> LispValue:
    (arg,) = _fixed_args(heap, args, "cdr", 1)
    return heap.cdr_of(expect(arg, Kind.PAIR))


BUILTINS = {
    "+": add,
    "*": mul,
    "cons": cons,
    "car": car,
    "cdr": cdr,
}


def register(heap: Heap, env: Environment | None = None) -> Environment | None:
    """Bind every builtin, then every special form, in front of `env`."""
    for name, fn in BUILTINS.items():
        env = extend(env, heap.make_symbol(name), heap.make_builtin(name, fn))
    for name, form in SPECIAL_FORMS.items():
        env = extend(env, heap.make_symbol(name), heap.make_special_form(name, form))
    return env


def global_environment(heap: Heap) -> Environment:
    """A fresh chain holding the builtin and special-form catalogue."""
    return register(heap)
