from mal import EvaluatorFn
from mal import SExpression, LispValue
from mal.types.bind import parse_params
from mal.types.checks import check_arity, check_type
from mal.types.environment import Environment
from mal.types.lambda_fn import Closure
from mal.types.symbol import Symbol
from mal.types.value import SEQUENTIAL

FN = Symbol("fn*")


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (fn* (a b & rest) body): the current env is captured by reference
    check_arity(FN, tail, 2)

    params, body = tail
    check_type(params, *SEQUENTIAL)
    return Closure(parse_params(params), body, env)
