"""Smoke demo: evaluates three small programs and prints the results."""

import logging

from cella.config import get_log_level
from cella.interpreter import Interpreter


def demo_lambda_application(interp: Interpreter) -> None:
    # ((lambda (x y) (* x (+ y 1))) 2 3)
    s, n, L = interp.sym, interp.num, interp.list
    lamb = L(s("lambda"), L(s("x"), s("y")),
             L(s("*"), s("x"), L(s("+"), s("y"), n(1))))
    print(interp.render(lamb))
    print(interp.render(interp.run(L(lamb, n(2), n(3)))))


def demo_set_bang(interp: Interpreter) -> None:
    # (set! lambda 1337)
    s, n, L = interp.sym, interp.num, interp.list
    result = interp.run(L(s("set!"), s("lambda"), n(1337)))
    print(interp.render_env())
    print(interp.render(result))


def demo_cons_car_cdr(interp: Interpreter) -> None:
    # (cons 1 (cons 2 (cons 3 '())))
    s, n, L = interp.sym, interp.num, interp.list
    program = L(s("cons"), n(1),
                L(s("cons"), n(2),
                  L(s("cons"), n(3), interp.list())))
    print(interp.render(interp.run(L(s("car"), program))))
    print(interp.render(interp.run(L(s("cdr"), program))))


def main() -> int:
    logging.basicConfig(level=get_log_level(), format="%(levelname)s %(name)s: %(message)s")
    demo_lambda_application(Interpreter())
    demo_set_bang(Interpreter())
    demo_cons_car_cdr(Interpreter())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
