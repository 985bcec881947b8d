"""Reader for DUNQ source text. Converts text into the generic terms consumed by dunq.core.parser and back.

Grammar can be loosely defined as follows:

```
<term>    ::= <number> | <string> | <symbol> | "(" <term>* ")"
<number>  ::= decimal integer or real, optionally signed    ; 1, -2, 3.5, .5, 1e3
<string>  ::= '"' <char>* '"'                               ; no escapes: a string ends at the next '"'
<symbol>  ::= any other run of characters without whitespace, parens or '"'

<comment> ::= ";;" <char>*                                  ; up to end of line
```

Numbers become int (no '.' or exponent) or float, strings become str and symbols become Symbol.
"""

import re

from dunq.core.data import Symbol
from dunq.lang.error import ParseError


_TOKEN = re.compile(r'"[^"]*"?|;;[^\n]*|[()]|[^\s()"]+')
_NUMBER = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


def tokenize(source):
    """Splits source into parens, string literals and atoms. Comments are dropped."""
    tokens = []
    for match in _TOKEN.finditer(source):
        token = match.group()
        if token.startswith(";;"):
            continue
        if token.startswith('"') and (len(token) == 1 or not token.endswith('"')):
            raise ParseError("'{}' has an unterminated string literal", token)
        tokens.append(token)
    return tokens


def paren_balance(source):
    """Number of parens opened but not yet closed in source. Parens inside string literals don't count."""
    balance = 0
    for match in _TOKEN.finditer(source):
        token = match.group()
        if token == "(":
            balance += 1
        elif token == ")":
            balance -= 1
    return balance


def read(source):
    """Reads exactly one term from source."""
    tokens = tokenize(source)
    if not tokens:
        raise ParseError("expected a term, got empty input")

    term = _read_from_tokens(tokens)
    if tokens:
        raise ParseError("unexpected '{}' after term", tokens[0])
    return term


def read_many(source):
    """Reads every term in source, in order."""
    tokens = tokenize(source)
    terms = []
    while tokens:
        terms.append(_read_from_tokens(tokens))
    return terms


def _read_from_tokens(tokens):
    if not tokens:
        raise ParseError("unexpected EOF while reading")

    token = tokens.pop(0)
    if token == "(":
        items = []
        while True:
            if not tokens:
                raise ParseError("unexpected EOF while reading list")
            if tokens[0] == ")":
                tokens.pop(0)
                return items
            items.append(_read_from_tokens(tokens))

    if token == ")":
        raise ParseError("unexpected '{}'", token)
    return atom(token)


def atom(token):
    """Converts a single non-paren token to a number, string or Symbol."""
    if token.startswith('"'):
        return token[1:-1]
    if _NUMBER.fullmatch(token):
        if "." in token or "e" in token.lower():
            return float(token)
        return int(token)
    return Symbol(token)


def write(term):
    """Text form of a generic term. Inverse of read for terms without '"' inside strings."""
    if isinstance(term, Symbol):
        return str(term)
    if isinstance(term, str):
        return f'"{term}"'
    if isinstance(term, (list, tuple)):
        return "(" + " ".join(write(item) for item in term) + ")"
    return repr(term)
