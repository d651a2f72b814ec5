# Core type aliases for mal's data model.
# Numbers, strings and booleans are plain Python int/float/str/bool; every other
# variant (Nil, Undefined, Symbol, Keyword, List, Vector, HashMap, Atom, Closure,
# NativeFunction) lives in mal.types.
#
# Naming guidance:
# - SExpression: Use in reader/quasiquote code to denote syntactic forms (code-as-data).
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any` and are interchangeable, since forms are values.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
# Forms are values; the alias documents intent at reader/expander seams
SExpression = LispValue

# Evaluator function type: (form, env) -> value
EvaluatorFn = Callable[..., LispValue]
