from cella import EvaluatorFn
from cella import Expression, LispValue
from cella.errors import CellaArityError
from cella.types.codec import Kind
from cella.types.environment import Environment, set_value
from cella.types.heap import Heap, expect
from cella.types.value import EMPTY


def set_form(
    tail: Expression,
    env: Environment | None,
    heap: Heap,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (set! symbol value)
    Mutates the nearest existing binding of `symbol`; assigning an unbound
    symbol raises CellaUnboundSymbol. The result is the empty list.
    """
    if tail.kind is Kind.EMPTY:
        raise CellaArityError("Special form `set!` takes 2 arguments, none given!")
    forms = heap.to_pylist(tail)
    if len(forms) != 2:
        raise CellaArityError(
            f"Special form `set!` takes exactly 2 arguments, {len(forms)} given!"
        )
    var_sym, val_expr = forms
    expect(var_sym, Kind.SYMBOL)
    value = evaluate_fn(val_expr, env, heap)
    set_value(env, var_sym, value, heap)
    return EMPTY
