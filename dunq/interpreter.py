"""DUNQ interpreter: a small expression-based functional language with numbers, strings, conditionals, first-class
lexically scoped closures and a fixed set of binary primitive operators.

Basic program flow:
    1. Reader (optional): S-expression text -> generic terms, see dunq/lang/reader.py
    2. Parser: generic terms -> ExprC tree, see dunq/core/parser.py
    3. Evaluator: ExprC + Environment -> Value, see dunq/core/evaluator.py
    4. Serializer: Value -> canonical string, see dunq/core/serializer.py

Every evaluation starts from TOP_ENV, which binds `true`, `false` and the primitive operators `+ - * / <= equal?`.
"""

from dunq.core.environment import TOP_ENV
from dunq.core.evaluator import evaluate
from dunq.core.parser import parse
from dunq.core.serializer import serialize


def interp(term):
    """Parses and evaluates a generic term under TOP_ENV, returning the Value."""
    return evaluate(parse(term), TOP_ENV)


def run(term):
    """Parses, evaluates and serializes a generic term. The only entry point most callers need."""
    return serialize(interp(term))
