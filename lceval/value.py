"""Runtime values: what evaluation produces.

Closures are the only values an expression can denote by itself. Primitive and Constant are host-level values
that can only enter a program through an environment binding; they exist so that results can be inspected from
Python (see numerical.py) and so that applying a non-function is an ordinary, reportable error.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Union

from lceval.env import Environment
from lceval.term import Expr


@dataclass(frozen=True)
class Closure:
    """A function value: the body of an abstraction paired with the environment it was evaluated in."""
    env: Environment
    var: str
    body: Expr


@dataclass(frozen=True)
class Primitive:
    """A host function of one argument. Applying it calls fn on the argument value."""
    name: str
    fn: Callable[[Any], Any] = field(compare=False)

    def __str__(self):
        return f"<primitive {self.name}>"


@dataclass(frozen=True)
class Constant:
    """An opaque host datum. Constants cannot be applied."""
    datum: Any

    def __str__(self):
        return str(self.datum)


Value = Union[Closure, Primitive, Constant]
