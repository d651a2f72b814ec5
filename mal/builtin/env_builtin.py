"""Built-in functions for the mal runtime environment.

This module defines arithmetic, comparison, sequence and map processing,
atoms, printing and reading, predicates, and the registration helper that
installs them into the root environment. Every function receives the calling
environment and a list of already evaluated arguments, and validates its own
arity and argument types.
"""
from __future__ import annotations

from functools import reduce
from pathlib import Path
from typing import Callable

from mal import LispValue
from mal.errors import IndexOutOfRange, MalError
from mal.evaluation.apply import apply as apply_engine
from mal.logging_config import get_logger
from mal.printer import render, render_all
from mal.reader.parser import read_str
from mal.types.atom import Atom
from mal.types.checks import check_all, check_arity, check_even_length, check_min_arity, check_type
from mal.types.environment import Environment
from mal.types.hash_map import HashMap
from mal.types.native_fn import NativeFunction
from mal.types.nil import Nil, Undefined
from mal.types.sequence import List, Vector
from mal.types.symbol import Keyword, Symbol
from mal.types.value import CALLABLE, SEQUENTIAL, Kind, equal, kind_of

logger = get_logger(__name__)

NUMBER = Kind.NUMBER


# -------------------------------
# Arithmetic
# -------------------------------
def _divide(a, b):
    if b == 0:
        raise MalError("Division by zero")
    if isinstance(a, int) and isinstance(b, int) and a % b == 0:
        return a // b
    return a / b


def add(env: Environment, args: list[LispValue]) -> LispValue:
    """Return the numeric sum of all arguments (0 for none)."""
    check_all(args, NUMBER)
    return sum(args, 0)


def sub(env: Environment, args: list[LispValue]) -> LispValue:
    """Subtract all subsequent numbers from the first; (-) is 0 and (- x) is x."""
    check_all(args, NUMBER)
    if not args:
        return 0
    result = args[0]
    for x in args[1:]:
        result -= x
    return result


def mul(env: Environment, args: list[LispValue]) -> LispValue:
    """Return the product of all arguments (1 for none)."""
    check_all(args, NUMBER)
    result = 1
    for x in args:
        result *= x
    return result


def div(env: Environment, args: list[LispValue]) -> LispValue:
    """Divide left-to-right; one argument gives its reciprocal. Exact integer quotients stay integers."""
    check_min_arity(Symbol("/"), args, 1)
    check_all(args, NUMBER)
    if len(args) == 1:
        return _divide(1, args[0])
    return reduce(_divide, args)


def floor_div(env: Environment, args: list[LispValue]) -> LispValue:
    """Floor division left-to-right; one argument gives floor(1 / x)."""
    check_min_arity(Symbol("//"), args, 1)
    check_all(args, NUMBER)

    def _floor(a, b):
        if b == 0:
            raise MalError("Division by zero")
        return a // b

    if len(args) == 1:
        return _floor(1, args[0])
    return reduce(_floor, args)


# -------------------------------
# Comparison
# -------------------------------
def equals(env: Environment, args: list[LispValue]) -> bool:
    """Return true if every adjacent pair of arguments is structurally equal."""
    check_min_arity(Symbol("="), args, 1)
    return all(equal(a, b) for a, b in zip(args, args[1:]))


def _chain(name: str, op: Callable[[LispValue, LispValue], bool]):
    def compare(env: Environment, args: list[LispValue]) -> bool:
        check_min_arity(Symbol(name), args, 1)
        check_all(args, NUMBER)
        return all(op(a, b) for a, b in zip(args, args[1:]))

    compare.__name__ = name
    compare.__doc__ = f"Chainable {name}: true if it holds for all adjacent pairs."
    return compare


lt = _chain("<", lambda a, b: a < b)
lte = _chain("<=", lambda a, b: a <= b)
gt = _chain(">", lambda a, b: a > b)
gte = _chain(">=", lambda a, b: a >= b)


# -------------------------------
# Sequences
# -------------------------------
def list_builtin(env: Environment, args: list[LispValue]) -> List:
    return List(args)


def vector_builtin(env: Environment, args: list[LispValue]) -> Vector:
    return Vector(args)


def is_list(env: Environment, args: list[LispValue]) -> bool:
    check_arity(Symbol("list?"), args, 1)
    return kind_of(args[0]) is Kind.LIST


def is_vector(env: Environment, args: list[LispValue]) -> bool:
    check_arity(Symbol("vector?"), args, 1)
    return kind_of(args[0]) is Kind.VECTOR


def is_empty(env: Environment, args: list[LispValue]) -> bool:
    check_arity(Symbol("empty?"), args, 1)
    seq = check_type(args[0], *SEQUENTIAL, Kind.MAP)
    return len(seq) == 0


def count(env: Environment, args: list[LispValue]) -> int:
    """Number of items in a sequence or map; nil counts as empty."""
    check_arity(Symbol("count"), args, 1)
    if args[0] is Nil:
        return 0
    return len(check_type(args[0], *SEQUENTIAL, Kind.MAP))


def cons(env: Environment, args: list[LispValue]) -> List:
    """Prepend a value to a sequence, producing a new List."""
    check_arity(Symbol("cons"), args, 2)
    head, tail = args
    check_type(tail, *SEQUENTIAL)
    return List((head, *tail))


def concat(env: Environment, args: list[LispValue]) -> List:
    """Join any number of sequences into a new List."""
    check_all(args, *SEQUENTIAL)
    return List(item for seq in args for item in seq)


def nth(env: Environment, args: list[LispValue]) -> LispValue:
    check_arity(Symbol("nth"), args, 2)
    seq, index = args
    check_type(seq, *SEQUENTIAL)
    check_type(index, NUMBER)
    if isinstance(index, float) and not index.is_integer():
        raise IndexOutOfRange(seq, index)
    item = seq.get(int(index))
    if item is Undefined:
        raise IndexOutOfRange(seq, index)
    return item


def first(env: Environment, args: list[LispValue]) -> LispValue:
    """First element, or nil for an empty sequence or nil."""
    check_arity(Symbol("first"), args, 1)
    if args[0] is Nil:
        return Nil
    item = check_type(args[0], *SEQUENTIAL).first()
    return Nil if item is Undefined else item


def rest(env: Environment, args: list[LispValue]) -> List:
    """Everything after the first element, always as a List."""
    check_arity(Symbol("rest"), args, 1)
    if args[0] is Nil:
        return List()
    return check_type(args[0], *SEQUENTIAL).rest()


# -------------------------------
# Maps
# -------------------------------
def hash_map(env: Environment, args: list[LispValue]) -> HashMap:
    return HashMap.from_sequence(List(args))


def is_map(env: Environment, args: list[LispValue]) -> bool:
    check_arity(Symbol("map?"), args, 1)
    return kind_of(args[0]) is Kind.MAP


def assoc(env: Environment, args: list[LispValue]) -> HashMap:
    check_min_arity(Symbol("assoc"), args, 1)
    m = check_type(args[0], Kind.MAP)
    check_even_length(List(args[1:]), 2)
    return m.assoc(*args[1:])


def dissoc(env: Environment, args: list[LispValue]) -> HashMap:
    check_min_arity(Symbol("dissoc"), args, 1)
    m = check_type(args[0], Kind.MAP)
    return m.dissoc(*args[1:])


def get(env: Environment, args: list[LispValue]) -> LispValue:
    """(get m k) => value, or nil when m is nil or k is absent."""
    check_arity(Symbol("get"), args, 2)
    m, key = args
    if m is Nil:
        return Nil
    value = check_type(m, Kind.MAP).get(key)
    return Nil if value is Undefined else value


def contains(env: Environment, args: list[LispValue]) -> bool:
    check_arity(Symbol("contains?"), args, 2)
    m, key = args
    return check_type(m, Kind.MAP).contains(key)


def keys(env: Environment, args: list[LispValue]) -> List:
    check_arity(Symbol("keys"), args, 1)
    return List(check_type(args[0], Kind.MAP).keys())


def vals(env: Environment, args: list[LispValue]) -> List:
    check_arity(Symbol("vals"), args, 1)
    return List(check_type(args[0], Kind.MAP).values())


# -------------------------------
# Atoms
# -------------------------------
def atom(env: Environment, args: list[LispValue]) -> Atom:
    check_arity(Symbol("atom"), args, 1)
    return Atom(args[0])


def is_atom(env: Environment, args: list[LispValue]) -> bool:
    check_arity(Symbol("atom?"), args, 1)
    return kind_of(args[0]) is Kind.ATOM


def deref(env: Environment, args: list[LispValue]) -> LispValue:
    check_arity(Symbol("deref"), args, 1)
    return check_type(args[0], Kind.ATOM).value


def reset(env: Environment, args: list[LispValue]) -> LispValue:
    check_arity(Symbol("reset!"), args, 2)
    cell, value = args
    return check_type(cell, Kind.ATOM).reset(value)


def swap(env: Environment, args: list[LispValue]) -> LispValue:
    """(swap! a f x y) sets a to (f @a x y) and returns the new value."""
    check_min_arity(Symbol("swap!"), args, 2)
    cell, fn, *extra = args
    check_type(cell, Kind.ATOM)
    check_type(fn, *CALLABLE)
    return cell.reset(apply_engine(fn, [cell.value, *extra], env))


# -------------------------------
# Printing and reading
# -------------------------------
def pr_str(env: Environment, args: list[LispValue]) -> str:
    return render_all(args, True, " ")


def str_builtin(env: Environment, args: list[LispValue]) -> str:
    return render_all(args, False, "")


def prn(env: Environment, args: list[LispValue]) -> LispValue:
    print(render_all(args, True, " "))
    return Nil


def println(env: Environment, args: list[LispValue]) -> LispValue:
    print(render_all(args, False, " "))
    return Nil


def read_string(env: Environment, args: list[LispValue]) -> LispValue:
    """Parse the first form in a string; nil when the string holds none."""
    check_arity(Symbol("read-string"), args, 1)
    form = read_str(check_type(args[0], Kind.STRING))
    return Nil if form is None else form


def slurp(env: Environment, args: list[LispValue]) -> str:
    """Read a whole file as UTF-8 text."""
    check_arity(Symbol("slurp"), args, 1)
    path = Path(check_type(args[0], Kind.STRING))
    logger.debug("slurp %s", path)
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        raise MalError(f"Cannot read file {path}: {e.strerror or e}") from e


# -------------------------------
# Symbols and predicates
# -------------------------------
def symbol(env: Environment, args: list[LispValue]) -> Symbol:
    check_arity(Symbol("symbol"), args, 1)
    return Symbol(check_type(args[0], Kind.STRING))


def keyword(env: Environment, args: list[LispValue]) -> Keyword:
    check_arity(Symbol("keyword"), args, 1)
    value = check_type(args[0], Kind.STRING, Kind.KEYWORD)
    return value if isinstance(value, Keyword) else Keyword(value)


def _predicate(name: str, test: Callable[[LispValue], bool]):
    def predicate(env: Environment, args: list[LispValue]) -> bool:
        check_arity(Symbol(name), args, 1)
        return test(args[0])

    predicate.__name__ = name
    return predicate


is_nil = _predicate("nil?", lambda v: v is Nil)
is_true = _predicate("true?", lambda v: v is True)
is_false = _predicate("false?", lambda v: v is False)
is_symbol = _predicate("symbol?", lambda v: kind_of(v) is Kind.SYMBOL)
is_keyword = _predicate("keyword?", lambda v: kind_of(v) is Kind.KEYWORD)
is_string = _predicate("string?", lambda v: kind_of(v) is Kind.STRING)
is_number = _predicate("number?", lambda v: kind_of(v) is Kind.NUMBER)
is_fn = _predicate("fn?", lambda v: kind_of(v) in CALLABLE)
is_sequential = _predicate("sequential?", lambda v: kind_of(v) in SEQUENTIAL)


# -------------------------------
# Function application
# -------------------------------
def apply(env: Environment, args: list[LispValue]) -> LispValue:
    """(apply f a b [c d]) calls f with a, b, c, d."""
    check_min_arity(Symbol("apply"), args, 2)
    fn, *middle, last = args
    check_type(fn, *CALLABLE)
    check_type(last, *SEQUENTIAL)
    return apply_engine(fn, [*middle, *last], env)


def map_builtin(env: Environment, args: list[LispValue]) -> List:
    """(map f seq) => List of (f item) for each item."""
    check_arity(Symbol("map"), args, 2)
    fn, seq = args
    check_type(fn, *CALLABLE)
    check_type(seq, *SEQUENTIAL)
    return List(apply_engine(fn, [item], env) for item in seq)


# -------------------------------
# Registration
# -------------------------------
BUILTINS: dict[str, Callable[[Environment, list[LispValue]], LispValue]] = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "//": floor_div,
    "=": equals,
    "<": lt,
    "<=": lte,
    ">": gt,
    ">=": gte,
    "list": list_builtin,
    "list?": is_list,
    "vector": vector_builtin,
    "vector?": is_vector,
    "empty?": is_empty,
    "count": count,
    "cons": cons,
    "concat": concat,
    "nth": nth,
    "first": first,
    "rest": rest,
    "hash-map": hash_map,
    "map?": is_map,
    "assoc": assoc,
    "dissoc": dissoc,
    "get": get,
    "contains?": contains,
    "keys": keys,
    "vals": vals,
    "atom": atom,
    "atom?": is_atom,
    "deref": deref,
    "reset!": reset,
    "swap!": swap,
    "pr-str": pr_str,
    "str": str_builtin,
    "prn": prn,
    "println": println,
    "read-string": read_string,
    "slurp": slurp,
    "symbol": symbol,
    "keyword": keyword,
    "nil?": is_nil,
    "true?": is_true,
    "false?": is_false,
    "symbol?": is_symbol,
    "keyword?": is_keyword,
    "string?": is_string,
    "number?": is_number,
    "fn?": is_fn,
    "sequential?": is_sequential,
    "apply": apply,
    "map": map_builtin,
}


def register(env: Environment) -> None:
    """Register all builtin functions into the given (root) environment."""
    env.update({Symbol(name): NativeFunction(fn, name) for name, fn in BUILTINS.items()})
