"""Call-by-value, environment-based evaluator for the untyped lambda calculus.

The evaluator consists of two mutually recursive procedures:
    - evaluate: evaluates an expression in an environment that provides values for its free variables
    - apply: applies the value of a function to the value of its argument (one beta-reduction step)

Abstractions are already values, so evaluating one just captures the current environment in a closure; the body
is not looked at until the closure is applied. Applications evaluate the function, then the argument, then hand
both values to apply.

Instead of substituting the argument for the parameter throughout the body (b[x:=v]), apply evaluates the body in
the closure's environment extended with x bound to v. References to x find v first; free variables fall through
to the bindings that were visible where the abstraction was defined, which gives lexical scope.
"""

from lceval.env import extend, lookup
from lceval.error import GenericException, NotApplicable, UnboundVariable
from lceval.term import Abs, App, Var
from lceval.value import Closure, Constant, Primitive


def evaluate(env, expr):
    """Returns the value expr denotes under env. Raises UnboundVariable if expr references a name env lacks."""
    if isinstance(expr, Var):
        value = lookup(env, expr.name)
        if value is None:
            raise UnboundVariable(expr.name)
        return value

    if isinstance(expr, Abs):
        return Closure(env, expr.param, expr.body)

    if isinstance(expr, App):
        fn_value = evaluate(env, expr.fn)
        arg_value = evaluate(env, expr.arg)
        return apply(fn_value, arg_value)

    raise TypeError(f"not an expression: {expr!r}")


def apply(fn_value, arg_value):
    """Applies fn_value to arg_value. Raises NotApplicable if fn_value is not a function, and GenericException if a
    primitive produces something that is not a value.
    """
    if isinstance(fn_value, Closure):
        return evaluate(extend(fn_value.env, fn_value.var, arg_value), fn_value.body)

    if isinstance(fn_value, Primitive):
        result = fn_value.fn(arg_value)
        if not isinstance(result, (Closure, Primitive, Constant)):
            raise GenericException("primitive '{}' returned '{}', which is not a value", (fn_value.name, repr(result)),
                                   internal=True)
        return result

    raise NotApplicable(fn_value)
