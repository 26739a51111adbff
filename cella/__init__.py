# Core type aliases for Cella's runtime.
# Every runtime entity is a tagged `Value` (see cella.types.value); code and
# data share that representation, so an expression is just a Value that
# happens to be evaluated.
#
# Naming guidance:
# - Expression: a Value in operator/operand position, not yet evaluated.
# - LispValue:  a Value produced by evaluation.
# Both aliases resolve to `Value`; they only document intent.

from typing import Callable

from cella.types.value import Value

LispValue = Value
Expression = Value

# Evaluator function type: passed to apply and special forms so they can
# recurse without importing the evaluator.
EvaluatorFn = Callable[..., LispValue]
