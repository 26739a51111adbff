from cella import EvaluatorFn
from cella import Expression, LispValue
from cella.errors import CellaArityError
from cella.types.codec import Kind
from cella.types.environment import Environment
from cella.types.heap import Heap, expect, expect_list


def lambda_form(
    tail: Expression,
    env: Environment | None,
    heap: Heap,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (lambda (x1 x2 ...) body)
    The body is exactly one expression; there is no implicit sequencing.
    The procedure closes over the defining environment `env`.
    """
    if tail.kind is Kind.EMPTY:
        raise CellaArityError("Special form `lambda` takes 2 arguments, none given!")
    forms = heap.to_pylist(tail)
    if len(forms) != 2:
        raise CellaArityError(
            f"Special form `lambda` takes a parameter list and one body expression, {len(forms)} given!"
        )
    params, body = forms
    for param in heap.to_pylist(expect_list(params)):
        expect(param, Kind.SYMBOL)
    return heap.make_procedure(env, params, body)
