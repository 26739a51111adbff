"""Records stored in the heap's pools."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from cella.types.value import Value

if TYPE_CHECKING:
    from cella.types.environment import Environment
    from cella.types.heap import Heap

# Builtins receive their evaluated arguments as a list value.
BuiltinFn = Callable[["Heap", Value], Value]
# Special forms receive the unevaluated operand list, the calling environment,
# the heap and the evaluator.
SpecialFormFn = Callable[..., Value]


@dataclass(frozen=True)
class PairCell:
    car: Value
    cdr: Value


@dataclass(frozen=True)
class Procedure:
    """A user procedure: single body expression closed over its defining env."""

    creation_environment: Environment | None
    parameters: Value
    body: Value


@dataclass(frozen=True)
class Primitive:
    """A builtin procedure or special form implemented in Python."""

    name: str
    fn: Callable[..., Value]
