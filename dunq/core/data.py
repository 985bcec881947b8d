"""Foundational DUNQ types: symbols, AST nodes (ExprC), runtime values (Value) and bindings.

An ExprC is generally the input to evaluation, which may be one of the following:

```
NumC     ; a real number
StringC  ; a string
IdC      ; an identifier
IfC      ; a conditional consisting of test, then and else clauses
LamC     ; a function literal: parameter names and a body
AppC     ; a function application: function position and arguments
```

A Value is generally the result of evaluation: NumV, BoolV, StringV, PrimV (a primitive operator reference) or CloV
(a closure). All of them are immutable, so ASTs, values and environments can be shared freely.
"""

from dataclasses import dataclass
from typing import Tuple, Union


class Symbol(str):
    """Bare symbol of a generic term. Compares equal to its text, but is distinguishable from a string literal."""

    def __repr__(self):
        return f"Symbol({str.__repr__(self)})"


IF = Symbol("if")
LAM = Symbol("lam")

TRUE = Symbol("true")
FALSE = Symbol("false")

PRIMOP_NAMES = tuple(Symbol(op) for op in ("+", "-", "*", "/", "<=", "equal?"))


class ExprC:
    """Superclass of all AST nodes."""


@dataclass(frozen=True)
class NumC(ExprC):
    n: Union[int, float]


@dataclass(frozen=True)
class StringC(ExprC):
    s: str


@dataclass(frozen=True)
class IdC(ExprC):
    id: Symbol


@dataclass(frozen=True)
class IfC(ExprC):
    test: ExprC
    then: ExprC
    orelse: ExprC


@dataclass(frozen=True)
class LamC(ExprC):
    params: Tuple[Symbol, ...]
    body: ExprC


@dataclass(frozen=True)
class AppC(ExprC):
    fun: ExprC
    args: Tuple[ExprC, ...]


class Value:
    """Superclass of all runtime values."""


@dataclass(frozen=True)
class NumV(Value):
    n: Union[int, float]


@dataclass(frozen=True)
class BoolV(Value):
    b: bool


@dataclass(frozen=True)
class StringV(Value):
    s: str


@dataclass(frozen=True)
class PrimV(Value):
    op: Symbol


@dataclass(frozen=True)
class CloV(Value):
    """Closure: parameters and body of a LamC plus the environment in effect where the LamC was evaluated."""
    params: Tuple[Symbol, ...]
    body: ExprC
    env: "Environment"  # environment.Environment


@dataclass(frozen=True)
class Binding:
    """Deferred substitution: maps a name to a value."""
    name: Symbol
    val: Value
