"""Parser from generic terms to DUNQ ASTs.

Formally, DUNQ grammar over generic terms can be defined as

```
<ExprC> ::= <num>                        ; NumC
          | <string>                     ; StringC
          | <symbol>                     ; IdC (reserved words are not filtered out)
          | (if <ExprC> <ExprC> <ExprC>)  ; IfC
          | (lam (<symbol>*) <ExprC>)     ; LamC
          | (<ExprC> <ExprC>*)            ; AppC
```

Generic terms are what dunq.lang.reader produces: int/float, str, Symbol and lists (or tuples) of those.
"""

from dunq.core.data import IF, LAM, AppC, IdC, IfC, LamC, NumC, StringC, Symbol
from dunq.lang.error import ParseError
from dunq.lang.reader import write


def is_number(term):
    return isinstance(term, (int, float)) and not isinstance(term, bool)


def is_sequence(term):
    return isinstance(term, (list, tuple))


def parse(term):
    """Converts term to the proper ExprC, raises ParseError if term is not a valid DUNQ term."""
    if is_number(term):
        return NumC(term)
    elif isinstance(term, Symbol):
        return IdC(term)  # not checking if reserved
    elif isinstance(term, str):
        return StringC(term)
    elif is_sequence(term):
        if not term:
            raise ParseError("'{}' is an empty application", write(term))
        elif isinstance(term[0], Symbol) and term[0] == IF:
            return parse_if(term)
        elif isinstance(term[0], Symbol) and term[0] == LAM:
            return parse_lam(term)
        return parse_app(term)

    raise ParseError("'{}' is unrecognized input", write(term))


def parse_if(term):
    """(if test then else)"""
    if len(term) != 4:
        raise ParseError("'{}' is a malformed conditional", write(term))

    __, test, then, orelse = term
    return IfC(parse(test), parse(then), parse(orelse))


def parse_lam(term):
    """(lam (param ...) body)"""
    if len(term) != 3 or not is_sequence(term[1]) or not all(isinstance(param, Symbol) for param in term[1]):
        raise ParseError("'{}' is a malformed lambda", write(term))

    __, params, body = term
    return LamC(tuple(params), parse(body))


def parse_app(term):
    """(fun arg ...), arguments keep their order"""
    fun, *args = term
    return AppC(parse(fun), tuple(parse(arg) for arg in args))
