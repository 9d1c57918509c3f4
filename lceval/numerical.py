"""Church encodings of natural numbers and booleans, plus the usual combinators over them.

Encodings are built as ordinary expressions. Decoding works on evaluated values: the value is applied to host-level
Primitive/Constant values and the host result is read back, so no inspection of closure bodies is needed.

Source: https://en.wikipedia.org/wiki/Church_encoding
"""

from lceval.error import GenericException
from lceval.evaluator import apply
from lceval.term import Abs, App, Var
from lceval.value import Constant, Primitive

IDENTITY = Abs("x", Var("x"))
CONST = Abs("x", Abs("y", Var("x")))

TRUE = Abs("t", Abs("f", Var("t")))
FALSE = Abs("t", Abs("f", Var("f")))

# λn.λf.λx.f (n f x)
SUCC = Abs("n", Abs("f", Abs("x", App(Var("f"), App(App(Var("n"), Var("f")), Var("x"))))))
# λm.λn.λf.λx.m f (n f x)
PLUS = Abs("m", Abs("n", Abs("f", Abs("x", App(App(Var("m"), Var("f")), App(App(Var("n"), Var("f")), Var("x")))))))
# λm.λn.λf.m (n f)
MULT = Abs("m", Abs("n", Abs("f", App(Var("m"), App(Var("n"), Var("f"))))))


def church(num):
    """Returns the Church numeral λf.λx.f (f (... x)) for natural number num."""
    if isinstance(num, bool) or not isinstance(num, int) or num < 0:
        raise GenericException("expected natural number, got '{}'", str(num), internal=True)

    body = Var("x")
    for __ in range(num):
        body = App(Var("f"), body)
    return Abs("f", Abs("x", body))


def _successor(value):
    if not isinstance(value, Constant) or not isinstance(value.datum, int):
        raise GenericException("'{}' is not a Church numeral", str(value))
    return Constant(value.datum + 1)


SUCCESSOR = Primitive("succ", _successor)


def unchurch(value):
    """Returns the int encoded by the Church numeral value."""
    result = apply(apply(value, SUCCESSOR), Constant(0))
    if not isinstance(result, Constant) or isinstance(result.datum, bool) or not isinstance(result.datum, int):
        raise GenericException("'{}' is not a Church numeral", str(result))
    return result.datum


def unchurch_bool(value):
    """Returns the bool encoded by the Church boolean value."""
    result = apply(apply(value, Constant(True)), Constant(False))
    if not isinstance(result, Constant) or not isinstance(result.datum, bool):
        raise GenericException("'{}' is not a Church boolean", str(result))
    return result.datum
