from __future__ import annotations

import logging
from typing import Iterable

from cella import Expression, LispValue
from cella.builtin.env_builtin import global_environment
from cella.debug_utils.pprint import render, render_env
from cella.errors import CellaError
from cella.evaluation.evaluator import evaluate
from cella.types.environment import Environment
from cella.types.heap import Heap
from cella.types.value import Value

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Owns a heap and a global environment, and builds expressions on it.
    `eval` lets errors propagate; `run` is the fatal boundary.
    """
    def __init__(self, heap: Heap | None = None):
        self.heap = heap if heap is not None else Heap()
        self.env: Environment = global_environment(self.heap)

    # --- Construction surface ---
    def num(self, n: int) -> Value:
        return self.heap.make_number(n)

    def sym(self, text: str) -> Value:
        return self.heap.make_symbol(text)

    def cons(self, car: Value, cdr: Value) -> Value:
        return self.heap.make_pair(car, cdr)

    def list(self, *values: Value) -> Value:
        return self.heap.make_list(values)

    # --- Evaluation surface ---
    def eval(self, expr: Expression, env: Environment | None = None) -> LispValue:
        """Evaluate `expr` in `env` (the global environment by default)."""
        return evaluate(expr, self.env if env is None else env, self.heap)

    def run(self, expr: Expression, env: Environment | None = None) -> LispValue:
        """Evaluate `expr`; any Cella error terminates the process."""
        try:
            return self.eval(expr, env)
        except CellaError as e:
            logger.critical("%s: %s", type(e).__name__, e)
            raise SystemExit(1) from e

    def run_all(self, exprs: Iterable[Expression]) -> LispValue:
        result: LispValue = None  # type: ignore[assignment]
        for expr in exprs:
            result = self.run(expr)
        return result

    def render(self, value: Value) -> str:
        return render(value, self.heap)

    def render_env(self, env: Environment | None = None) -> str:
        return render_env(self.env if env is None else env, self.heap)
