import unittest

from lceval.display import free_position, string_of_expr, string_of_value
from lceval.env import EMPTY, extend
from lceval.evaluator import evaluate
from lceval.numerical import SUCCESSOR
from lceval.term import Abs, App, Var
from lceval.value import Closure, Constant


class DisplayTestCase(unittest.TestCase):

    def test_string_of_expr(self):
        cases = {
            Var("x"): "x",
            Abs("x", Var("x")): "(λx. x)",
            App(Var("f"), Var("x")): "(f x)",
            App(Abs("x", Var("x")), Abs("y", Var("y"))): "((λx. x) (λy. y))",
            Abs("f", Abs("x", App(Var("f"), App(Var("f"), Var("x"))))): "(λf. (λx. (f (f x))))",
        }
        for expr, expected in cases.items():
            self.assertEqual(expected, string_of_expr(expr), expected)

        self.assertRaises(TypeError, string_of_expr, None)

    def test_string_of_value(self):
        result = evaluate(EMPTY, App(Abs("x", Var("x")), Abs("y", Var("y"))))
        self.assertEqual("Closure(λy. y)", string_of_value(result))

        # captured bindings are not shown
        captured = Closure(extend(EMPTY, "z", Constant(1)), "y", App(Var("z"), Var("y")))
        self.assertEqual("Closure(λy. (z y))", string_of_value(captured))

        self.assertEqual("42", string_of_value(Constant(42)))
        self.assertEqual("<primitive succ>", string_of_value(SUCCESSOR))

    def test_free_position(self):
        cases = {
            (Var("z"), "z"): 0,
            (Var("z"), "y"): -1,
            (Abs("z", Var("z")), "z"): -1,
            (App(Abs("x", Var("z")), Abs("y", Var("y"))), "z"): 6,
            (App(Abs("z", Var("z")), Var("z")), "z"): 9,
            (App(Var("f"), Abs("x", App(Var("x"), Var("zz")))), "zz"): 11,
        }
        for (expr, name), expected in cases.items():
            self.assertEqual(expected, free_position(expr, name), name)
            if expected != -1:
                self.assertEqual(name, string_of_expr(expr)[expected:expected + len(name)])


if __name__ == '__main__':
    unittest.main()
