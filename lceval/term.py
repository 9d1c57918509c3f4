"""Expressions of the untyped lambda calculus.

An expression is one of three immutable node kinds:

```
<expr> ::= Var(name)          ; "variable"
         | Abs(param, body)   ; "abstraction": λparam.body
         | App(fn, arg)       ; "application": (fn arg)
```

Nodes are plain frozen dataclasses and are never mutated once built, so subtrees can be shared freely between
expressions.
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Var:
    """Reference to a bound or free identifier."""
    name: str


@dataclass(frozen=True)
class Abs:
    """Function literal binding param within body."""
    param: str
    body: "Expr"


@dataclass(frozen=True)
class App:
    """Application of fn to arg."""
    fn: "Expr"
    arg: "Expr"


Expr = Union[Var, Abs, App]


def free_vars(expr):
    """Returns the set of names occurring free in expr."""
    if isinstance(expr, Var):
        return {expr.name}
    if isinstance(expr, Abs):
        return free_vars(expr.body) - {expr.param}
    return free_vars(expr.fn) | free_vars(expr.arg)


def is_closed(expr):
    """Whether or not expr has no free variables."""
    return not free_vars(expr)
