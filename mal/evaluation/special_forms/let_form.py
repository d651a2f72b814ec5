from mal import EvaluatorFn
from mal import SExpression
from mal.types.checks import check_arity, check_even_length, check_type
from mal.types.environment import Environment
from mal.types.symbol import Symbol
from mal.types.tail_call import TailCall
from mal.types.value import Kind, SEQUENTIAL

LET = Symbol("let*")


def let_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> TailCall:
    """
    (let* (name1 expr1 name2 expr2 ...) body)
    Each expr is evaluated in the new scope as it grows, so later bindings
    see earlier ones. The body is in tail position.
    """
    check_arity(LET, tail, 2)

    bindings, body = tail
    check_type(bindings, *SEQUENTIAL)
    check_even_length(bindings, 2)

    local_env = Environment(outer=env)
    for name, val_expr in bindings.group(2):
        check_type(name, Kind.SYMBOL)
        local_env.set(name, evaluate_fn(val_expr, local_env))
    return TailCall(body, local_env)
