"""Core evaluator and trampoline for the mal interpreter.

Evaluation runs an explicit (form, env) loop. Special forms in tail position
(let*, do, if, quasiquote, eval) hand back a TailCall and closure application
rebinds the loop state directly, so user-level recursion through those paths
never grows the Python stack.
"""

from __future__ import annotations

from mal import SExpression, LispValue
from mal.errors import NotCallable
from mal.types.environment import Environment
from mal.types.hash_map import HashMap
from mal.types.lambda_fn import Closure
from mal.types.native_fn import NativeFunction
from mal.types.nil import Nil
from mal.types.sequence import List, Vector
from mal.types.symbol import Symbol
from mal.types.tail_call import TailCall
from mal.evaluation.special_forms import SPECIAL_FORMS


def eval_ast(expr: SExpression, env: Environment) -> LispValue:
    """
    Structural evaluation: symbols resolve through the environment and
    containers are rebuilt with each element evaluated (non-tail).
    """
    match expr:
        case Symbol():
            return env.lookup(expr)
        case List():
            return List(evaluate(item, env) for item in expr)
        case Vector():
            return Vector(evaluate(item, env) for item in expr)
        case HashMap():
            return HashMap((k, evaluate(v, env)) for k, v in expr.items())

    # --- Atoms return as-is ---
    return expr


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """
    Trampoline evaluator: reduce `expr` in `env` to a final value.
    """
    while True:
        if not isinstance(expr, List):
            return eval_ast(expr, env)
        if not expr:
            return Nil

        head = expr[0]
        # --- Special forms handling ---
        if isinstance(head, Symbol) and head in SPECIAL_FORMS:
            result = SPECIAL_FORMS[head](expr.rest(), env, evaluate)
            if isinstance(result, TailCall):
                expr, env = result.form, result.env
                continue
            return result

        # --- Application ---
        fn, *args = eval_ast(expr, env)
        match fn:
            case Closure():
                expr, env = fn.body, fn.extend_env(args)
            case NativeFunction():
                return fn(env, args)
            case _:
                raise NotCallable(fn)
