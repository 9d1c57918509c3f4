"""Demonstration driver: builds a sample program, evaluates it in the empty environment, and prints the program
and its value. Also uses the error handling context manager. Installed as the lceval script.
"""

import argparse
import os
import sys

from lceval import numerical
from lceval.display import free_position, string_of_expr, string_of_value
from lceval.env import initial_env
from lceval.error import ErrorHandler
from lceval.evaluator import evaluate
from lceval.term import Abs, App, Var, free_vars, is_closed

PROGRAMS = {
    "identity": App(Abs("x", Var("x")), Abs("y", Var("y"))),
    "const": App(App(numerical.CONST, Abs("a", Var("a"))), Abs("b", Var("b"))),
    "arith": App(App(numerical.PLUS, numerical.church(2)), numerical.church(3)),
    "unbound": App(Abs("x", Var("z")), Abs("y", Var("y"))),
}
NUMERIC = {"arith"}


def run(name, error_handler=None):
    """Evaluates the named sample program and prints it and its result. If error_handler is given, a warning
    pointing at the first free variable is printed before evaluating an open program.
    """
    expression = PROGRAMS[name]
    rendered = string_of_expr(expression)
    print("Evaluating expression: " + rendered)

    if error_handler is not None and not is_closed(expression):
        free = sorted(free_vars(expression))[0]
        start = free_position(expression, free)
        error_handler.warn("'{}' has free variable '{}'", (rendered, free), start=start, end=start + len(free))

    result = evaluate(initial_env(), expression)
    print("Result: " + string_of_value(result))

    if name in NUMERIC:
        print(f"Decoded: {numerical.unchurch(result)}")
    return result


def main(argv=None):
    """Runs the lceval demonstration. Called from the lceval executable script."""
    assert sys.version_info >= (3, 8), "lceval cannot be run with python < 3.8"

    with ErrorHandler() as error_handler:
        parser = argparse.ArgumentParser(description="Evaluate a sample untyped lambda calculus program.")
        parser.add_argument("program", help="sample program to evaluate (default: identity)", nargs="?",
                            choices=sorted(PROGRAMS), default="identity")
        parser.add_argument("--recursion-limit", type=int, default=None,
                            help="python recursion limit to evaluate under")
        parser.add_argument("--no-color", action="store_true", help="disable colored error output")
        args = parser.parse_args(argv)

        if args.no_color:
            os.environ["NO_COLOR"] = "1"
        if args.recursion_limit is not None:
            sys.setrecursionlimit(args.recursion_limit)

        run(args.program, error_handler)


if __name__ == "__main__":
    main()
