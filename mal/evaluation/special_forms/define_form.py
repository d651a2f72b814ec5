from mal import EvaluatorFn
from mal import SExpression, LispValue
from mal.types.checks import check_arity, check_type
from mal.types.environment import Environment
from mal.types.symbol import Symbol
from mal.types.value import Kind

DEF = Symbol("def!")


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (def! name value)
    Not a tail position: the bound value is the result.
    """
    check_arity(DEF, tail, 2)

    name, val_expr = tail
    check_type(name, Kind.SYMBOL)
    value = evaluate_fn(val_expr, env)  # normal evaluation
    return env.set(name, value)
