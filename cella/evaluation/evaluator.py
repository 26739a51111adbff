"""Core evaluator for the Cella interpreter.

Evaluation is a direct recursion over three syntactic cases:
- self-evaluating values (the empty list, numbers and callables) are returned as-is,
- symbols are resolved in the environment,
- pairs are applications `(operator . operands)`.

There is no dedicated syntax for special forms: `lambda` and `set!` are
ordinary values bound in the environment and only distinguished at apply time.
"""

from __future__ import annotations

import logging

from cella import Expression, LispValue
from cella.types.codec import Kind
from cella.types.environment import Environment, lookup
from cella.errors import CellaMalformedList
from cella.types.heap import Heap, typename_of
from cella.types.value import SELF_EVALUATING_KINDS
from cella.evaluation.apply import apply

logger = logging.getLogger(__name__)


def evaluate(expr: Expression, env: Environment | None, heap: Heap) -> LispValue:
    """Evaluate `expr` in `env`. Errors propagate as CellaError subclasses."""
    kind = expr.kind
    if kind in SELF_EVALUATING_KINDS:
        return expr
    if kind is Kind.SYMBOL:
        return lookup(env, expr, heap)
    # Only pairs are left
    cell = heap.pair_of(expr)
    if cell.cdr.kind is not Kind.PAIR and cell.cdr.kind is not Kind.EMPTY:
        raise CellaMalformedList(
            f"Operands of an application must be a list, got {typename_of(cell.cdr)}"
        )
    logger.debug("apply %r", expr)
    return apply(cell.car, cell.cdr, env, heap, evaluate)

