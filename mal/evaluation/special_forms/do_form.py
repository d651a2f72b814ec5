from mal import EvaluatorFn
from mal import SExpression
from mal.types.checks import check_min_arity
from mal.types.environment import Environment
from mal.types.symbol import Symbol
from mal.types.tail_call import TailCall

DO = Symbol("do")


def do_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> TailCall:
    check_min_arity(DO, tail, 1)
    for e in tail[:-1]:
        evaluate_fn(e, env)
    return TailCall(tail[-1], env)
