"""Environments: ordered name-to-value binding chains used to resolve identifiers.

An Environment is a persistent linked list of Bindings. Extending one never touches the original, it prepends new
nodes that share the old list as their tail, so a closure can hold on to the exact environment it was created in
without copying it.
"""

from dataclasses import dataclass
from typing import Optional

from dunq.core.data import FALSE, PRIMOP_NAMES, TRUE, Binding, BoolV, PrimV
from dunq.lang.error import ArityError, UnboundIdentifierError


@dataclass(frozen=True, eq=False)
class Environment:
    """One node of the chain. The empty environment has no binding and no rest."""
    binding: Optional[Binding] = None
    rest: Optional["Environment"] = None

    @classmethod
    def from_bindings(cls, *bindings):
        """Returns an Environment whose lookup order is the order of bindings."""
        env = cls()
        for binding in reversed(bindings):
            env = cls(binding, env)
        return env

    @property
    def names(self):
        return [binding.name for binding in self]

    def __iter__(self):
        env = self
        while env.binding is not None:
            yield env.binding
            env = env.rest

    def __len__(self):
        return sum(1 for __ in self)

    def __repr__(self):
        return f"Environment({', '.join(self.names)})"


EMPTY_ENV = Environment()

# process-wide, read-only: boolean literals and one PrimV per primitive operator
TOP_ENV = Environment.from_bindings(
    Binding(TRUE, BoolV(True)),
    Binding(FALSE, BoolV(False)),
    *(Binding(op, PrimV(op)) for op in PRIMOP_NAMES),
)


def lookup(name, env):
    """Retrieves the value of the first Binding of name in env (innermost scope wins)."""
    for binding in env:
        if binding.name == name:
            return binding.val
    raise UnboundIdentifierError("reference to unbound identifier '{}'", name)


def extend(env, names, values):
    """Returns a new Environment binding names to values, in order, in front of env. env itself is unchanged."""
    names, values = list(names), list(values)
    if len(names) != len(values):
        msg = "expected {} argument(s), got {}"
        raise ArityError(msg, (len(names), len(values)), diagnosis=False)

    for name, value in zip(reversed(names), reversed(values)):
        env = Environment(Binding(name, value), env)
    return env
