"""Render values back to text.

readable=True produces text the reader accepts again (quoted, escaped strings);
readable=False produces display text with raw string contents.
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Iterable

from mal import LispValue
from mal.types.value import Kind, kind_of

_ESCAPES = str.maketrans({"\\": "\\\\", '"': '\\"', "\n": "\\n"})


def escape_string(s: str) -> str:
    return '"' + s.translate(_ESCAPES) + '"'


def render_number(n: int | float) -> str:
    """Positional notation only: the reader has no exponent syntax."""
    text = repr(n)
    if isinstance(n, int) or not math.isfinite(n) or "e" not in text:
        return text
    text = format(Decimal(text), "f")
    return text if "." in text else text + ".0"


def render(value: LispValue, readable: bool = True) -> str:
    match kind_of(value):
        case Kind.NIL:
            return "nil"
        case Kind.UNDEFINED:
            return "undefined"
        case Kind.BOOLEAN:
            return "true" if value else "false"
        case Kind.NUMBER:
            return render_number(value)
        case Kind.STRING:
            return escape_string(value) if readable else value
        case Kind.SYMBOL:
            return value.name
        case Kind.KEYWORD:
            return f":{value.name}"
        case Kind.LIST:
            return "(" + render_all(value, readable) + ")"
        case Kind.VECTOR:
            return "[" + render_all(value, readable) + "]"
        case Kind.MAP:
            items = (f"{render(k, readable)} {render(v, readable)}" for k, v in value.items())
            return "{" + " ".join(items) + "}"
        case Kind.ATOM:
            return f"(atom {render(value.value, readable)})"
        case Kind.CLOSURE:
            return "#<function>"
        case Kind.NATIVE:
            return f"#<native-function {value.name}>"
        case _:
            return f"#<foreign {value!r}>"


def render_all(values: Iterable[LispValue], readable: bool = True, sep: str = " ") -> str:
    return sep.join(render(v, readable) for v in values)
