"""Serializer: renders a DUNQ value to its canonical string form.

```
NumV     ; Python's repr of the number: 3, 1.0, -0.5, 1e+20, inf, nan
BoolV    ; true | false
StringV  ; the text wrapped in double quotes
PrimV    ; #<primop>
CloV     ; #<procedure>
```

Strings are not escaped, so a string containing '"' renders ambiguously. Session warns when that happens.
"""

from dunq.core.data import BoolV, CloV, NumV, PrimV, StringV
from dunq.lang.error import UnknownValueError


PRIMOP = "#<primop>"
PROCEDURE = "#<procedure>"


def serialize(value):
    """Returns the string representation of any DUNQ value."""
    if isinstance(value, NumV):
        return repr(value.n)
    elif isinstance(value, BoolV):
        return "true" if value.b else "false"
    elif isinstance(value, StringV):
        return f'"{value.s}"'
    elif isinstance(value, PrimV):
        return PRIMOP
    elif isinstance(value, CloV):
        return PROCEDURE

    raise UnknownValueError("encountered unknown value '{}'", repr(value))


def is_ambiguous(value):
    """Whether serialize(value) cannot be read back unambiguously."""
    return isinstance(value, StringV) and '"' in value.s
