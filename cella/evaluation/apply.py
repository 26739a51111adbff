"""Application engine for Cella.

This module centralizes function application semantics for the interpreter:
- User procedures bind parameters to operands evaluated in the caller's
  environment, extending the procedure's creation environment.
- Builtins receive their operands already evaluated, as a list.
- Special forms receive their operands unevaluated, with the calling
  environment, and decide themselves what to evaluate.

The evaluator is passed in as `evaluate_fn` so this module does not import it.
"""

from __future__ import annotations

import logging

from cella import EvaluatorFn, Expression, LispValue
from cella.errors import CellaMalformedList, CellaNotCallable, CellaNullApplication
from cella.types.codec import Kind
from cella.types.environment import Environment, extend
from cella.types.heap import Heap, expect, typename_of

logger = logging.getLogger(__name__)


def evaluate_list(
    args: Expression,
    env: Environment | None,
    heap: Heap,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Evaluate each element of a list left to right, returning a new list."""
    return heap.make_list([evaluate_fn(arg, env, heap) for arg in heap.iter_list(args)])


def apply_procedure(
    fn: LispValue,
    operands: Expression,
    env: Environment | None,
    heap: Heap,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply a user procedure.

    Parameters and operands are walked in lockstep and binding stops at the
    shorter of the two: missing arguments leave parameters unbound, surplus
    operands are never evaluated.
    """
    proc = heap.procedure_of(fn)
    new_env = proc.creation_environment
    param, operand = proc.parameters, operands
    while param.kind is Kind.PAIR and operand.kind is Kind.PAIR:
        param_cell = heap.pair_of(param)
        operand_cell = heap.pair_of(operand)
        arg = evaluate_fn(operand_cell.car, env, heap)
        new_env = extend(new_env, expect(param_cell.car, Kind.SYMBOL), arg)
        param, operand = param_cell.cdr, operand_cell.cdr
    if operand.kind is not Kind.PAIR and operand.kind is not Kind.EMPTY:
        raise CellaMalformedList(
            f"Operand list terminated by {typename_of(operand)} instead of '()"
        )
    return evaluate_fn(proc.body, new_env, heap)


def apply_builtin(
    fn: LispValue,
    operands: Expression,
    env: Environment | None,
    heap: Heap,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    builtin = heap.builtin_of(fn)
    args = evaluate_list(operands, env, heap, evaluate_fn)
    return builtin.fn(heap, args)


def apply_special_form(
    fn: LispValue,
    operands: Expression,
    env: Environment | None,
    heap: Heap,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    form = heap.special_form_of(fn)
    return form.fn(operands, env, heap, evaluate_fn)


_DISPATCH = {
    Kind.PROCEDURE: apply_procedure,
    Kind.BUILTIN_PROCEDURE: apply_builtin,
    Kind.SPECIAL_FORM: apply_special_form,
}


def apply(
    operator: Expression,
    operands: Expression,
    env: Environment | None,
    heap: Heap,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Evaluate `operator` in `env` and apply the result to `operands`.

    Raises CellaNullApplication for the empty list in operator position and
    CellaNotCallable for any other value that is not a procedure.
    """
    fn = evaluate_fn(operator, env, heap)
    if fn.kind is Kind.EMPTY:
        raise CellaNullApplication("Cannot call null as a procedure!")
    handler = _DISPATCH.get(fn.kind)
    if handler is None:
        raise CellaNotCallable(
            f"Cannot call value of type {typename_of(fn)} as a procedure!"
        )
    logger.debug("dispatch %s", typename_of(fn))
    return handler(fn, operands, env, heap, evaluate_fn)
