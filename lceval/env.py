"""Runtime environments: persistent chains of (name, value) bindings.

An environment is either the empty environment or a binding layered on top of a parent environment. Extension
never touches the parent, so an environment captured by a closure stays valid no matter how often it is extended
afterwards.
"""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class Environment:
    """One layer of the chain. EMPTY is the only layer without a parent."""
    name: Optional[str] = None
    value: Any = None
    parent: Optional["Environment"] = None

    @property
    def is_empty(self):
        return self.parent is None

    def bindings(self):
        """Yields (name, value) pairs from most recent to oldest, shadowed bindings included."""
        layer = self
        while not layer.is_empty:
            yield layer.name, layer.value
            layer = layer.parent

    def __repr__(self):
        names = ", ".join(name for name, __ in self.bindings())
        return f"Environment([{names}])"


EMPTY = Environment()


def initial_env():
    """Returns the canonical empty environment used for top-level evaluation."""
    return EMPTY


def extend(env, name, value):
    """Returns env with (name, value) added as the most recent binding. env itself is left untouched."""
    return Environment(name, value, env)


def lookup(env, name):
    """Returns the value of the most recent binding for name in env, or None if name is unbound."""
    for bound_name, value in env.bindings():
        if bound_name == name:
            return value
    return None
