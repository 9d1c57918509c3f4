"""Text rendering of expressions and values. Only used for display; evaluation never depends on it."""

from lceval.term import Abs, App, Var
from lceval.value import Closure


def string_of_expr(expr):
    """Fully parenthesized rendering: x, (λx. e), (e1 e2)."""
    if isinstance(expr, Var):
        return expr.name
    if isinstance(expr, Abs):
        return f"(λ{expr.param}. {string_of_expr(expr.body)})"
    if isinstance(expr, App):
        return f"({string_of_expr(expr.fn)} {string_of_expr(expr.arg)})"
    raise TypeError(f"not an expression: {expr!r}")


def string_of_value(value):
    """Closures render as Closure(λx. body); captured environments are not shown."""
    if isinstance(value, Closure):
        return f"Closure(λ{value.var}. {string_of_expr(value.body)})"
    return str(value)


def free_position(expr, name):
    """Returns the offset of the first free occurrence of name in string_of_expr(expr), or -1 if name is not free."""
    if isinstance(expr, Var):
        return 0 if expr.name == name else -1

    if isinstance(expr, Abs):
        if expr.param == name:
            return -1
        offset = free_position(expr.body, name)
        return offset if offset == -1 else len(f"(λ{expr.param}. ") + offset

    offset = free_position(expr.fn, name)
    if offset != -1:
        return 1 + offset
    offset = free_position(expr.arg, name)
    return offset if offset == -1 else len(f"({string_of_expr(expr.fn)} ") + offset
