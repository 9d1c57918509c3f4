import unittest

from lceval import numerical
from lceval.env import EMPTY
from lceval.error import GenericException
from lceval.evaluator import evaluate
from lceval.term import Abs, App, Var


def value_of(expr):
    return evaluate(EMPTY, expr)


class ChurchNumeralTestCase(unittest.TestCase):

    def test_church(self):
        should_fail = [-2, 0.3, 4.0, True, "3", None]
        for case in should_fail:
            self.assertRaises(GenericException, numerical.church, case)

        should_pass = {
            0: Abs("f", Abs("x", Var("x"))),
            3: Abs("f", Abs("x", App(Var("f"), App(Var("f"), App(Var("f"), Var("x")))))),
        }
        for case, result in should_pass.items():
            self.assertEqual(result, numerical.church(case))

    def test_unchurch(self):
        for num in [0, 1, 7]:
            self.assertEqual(num, numerical.unchurch(value_of(numerical.church(num))), num)

        should_fail = [numerical.TRUE, numerical.CONST, Abs("f", Abs("x", App(Var("f"), Var("f"))))]
        for case in should_fail:
            self.assertRaises(GenericException, numerical.unchurch, value_of(case))

    def test_arithmetic(self):
        two, three = numerical.church(2), numerical.church(3)
        cases = {
            App(numerical.SUCC, three): 4,
            App(App(numerical.PLUS, two), three): 5,
            App(App(numerical.MULT, two), three): 6,
            App(App(numerical.PLUS, numerical.church(0)), App(numerical.SUCC, two)): 3,
        }
        for expr, expected in cases.items():
            self.assertEqual(expected, numerical.unchurch(value_of(expr)), expr)


class ChurchBooleanTestCase(unittest.TestCase):

    def test_unchurch_bool(self):
        self.assertTrue(numerical.unchurch_bool(value_of(numerical.TRUE)))
        self.assertFalse(numerical.unchurch_bool(value_of(numerical.FALSE)))

        # λp.p FALSE TRUE
        negate = Abs("p", App(App(Var("p"), numerical.FALSE), numerical.TRUE))
        self.assertFalse(numerical.unchurch_bool(value_of(App(negate, numerical.TRUE))))

        should_fail = [numerical.church(2), numerical.IDENTITY]
        for case in should_fail:
            self.assertRaises(GenericException, numerical.unchurch_bool, value_of(case))


if __name__ == '__main__':
    unittest.main()
