from mal import EvaluatorFn
from mal import SExpression
from mal.errors import ParametersError
from mal.types.environment import Environment
from mal.types.nil import Nil
from mal.types.symbol import Symbol
from mal.types.tail_call import TailCall
from mal.types.value import is_truthy

IF = Symbol("if")


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> TailCall:
    # (if cond then) behaves as (if cond then nil)
    if len(tail) not in (2, 3):
        raise ParametersError(IF, 3, len(tail))

    cond = evaluate_fn(tail[0], env)
    if is_truthy(cond):
        return TailCall(tail[1], env)
    elif len(tail) > 2:
        return TailCall(tail[2], env)
    else:
        return TailCall(Nil, env)
