"""Evaluator: reduces an ExprC to a Value under an Environment.

Evaluation is eager (call-by-value) with lexical scoping: arguments are evaluated left to right before a call, and a
closure's body runs in the environment captured when its LamC was evaluated, extended with the call's bindings. The
caller's environment is never visible to the callee.

Recursion is the only looping mechanism and there is no tail-call elimination, so every DUNQ call costs a few Python
frames. Deeply recursive programs are bounded by sys.getrecursionlimit() (see `dunq --recursion-limit`).
"""

from dunq.core.data import AppC, BoolV, CloV, IdC, IfC, LamC, NumC, NumV, PrimV, StringC, StringV
from dunq.core.environment import extend, lookup
from dunq.core.serializer import serialize
from dunq.lang.error import (
    ArityError,
    DivideByZeroError,
    NotCallableError,
    TypeMismatchError,
    UnknownOperatorError,
    UnknownTermError,
)


def evaluate(node, env):
    """Evaluates node under env. Errors propagate to the caller, nothing is recovered here."""
    if isinstance(node, NumC):
        return NumV(node.n)
    elif isinstance(node, StringC):
        return StringV(node.s)
    elif isinstance(node, IdC):
        return lookup(node.id, env)
    elif isinstance(node, IfC):
        test = evaluate(node.test, env)
        if not isinstance(test, BoolV):
            msg = "conditional test evaluated to '{}', expected a boolean"
            raise TypeMismatchError(msg, serialize(test), diagnosis=False)
        return evaluate(node.then if test.b else node.orelse, env)
    elif isinstance(node, LamC):
        return CloV(node.params, node.body, env)
    elif isinstance(node, AppC):
        fun = evaluate(node.fun, env)
        args = [evaluate(arg, env) for arg in node.args]
        return apply(fun, args)

    raise UnknownTermError("cannot evaluate '{}'", repr(node))


def apply(fun, args):
    """Applies an evaluated function position to evaluated arguments."""
    if isinstance(fun, PrimV):
        return apply_primop(fun.op, args)
    elif isinstance(fun, CloV):
        return evaluate(fun.body, extend(fun.env, fun.params, args))

    raise NotCallableError("'{}' is not a function or primop", serialize(fun))


def apply_primop(op, args):
    if op not in PRIMOPS:
        raise UnknownOperatorError("unknown primop '{}'", op)
    if len(args) != 2:
        raise ArityError("'{}' expects exactly 2 arguments, got {}", (op, len(args)))
    return PRIMOPS[op](op, *args)


def _numbers(op, left, right):
    """Unwraps two NumVs, raises TypeMismatchError for anything else."""
    for arg in (left, right):
        if not isinstance(arg, NumV):
            raise TypeMismatchError("'{}' expects numbers, got '{}'", (op, serialize(arg)))
    return left.n, right.n


def _add(op, left, right):
    a, b = _numbers(op, left, right)
    return NumV(a + b)


def _sub(op, left, right):
    a, b = _numbers(op, left, right)
    return NumV(a - b)


def _mul(op, left, right):
    a, b = _numbers(op, left, right)
    return NumV(a * b)


def _div(op, left, right):
    a, b = _numbers(op, left, right)
    if b == 0:
        raise DivideByZeroError("'{}' divides {} by zero", (op, serialize(left)))
    return NumV(a / b)


def _leq(op, left, right):
    a, b = _numbers(op, left, right)
    return BoolV(a <= b)


def _equal(op, left, right):
    """Structural equality over numbers, strings and booleans. Any other pairing is false, never an error."""
    if isinstance(left, NumV) and isinstance(right, NumV):
        return BoolV(left.n == right.n)
    elif isinstance(left, StringV) and isinstance(right, StringV):
        return BoolV(left.s == right.s)
    elif isinstance(left, BoolV) and isinstance(right, BoolV):
        return BoolV(left.b == right.b)
    return BoolV(False)


PRIMOPS = {
    "+": _add,
    "-": _sub,
    "*": _mul,
    "/": _div,
    "<=": _leq,
    "equal?": _equal,
}
