from mal import EvaluatorFn
from mal import SExpression
from mal.types.checks import check_arity
from mal.types.environment import Environment
from mal.types.symbol import Symbol
from mal.types.tail_call import TailCall

EVAL = Symbol("eval")


def eval_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> TailCall:
    # The produced form runs in the global scope, not the lexical call site.
    check_arity(EVAL, tail, 1)
    form = evaluate_fn(tail[0], env)
    return TailCall(form, env.root)
