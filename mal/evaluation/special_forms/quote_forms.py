from mal import SExpression, LispValue, EvaluatorFn
from mal.types.checks import check_arity
from mal.types.environment import Environment
from mal.types.sequence import List
from mal.types.symbol import Symbol
from mal.types.tail_call import TailCall

QUOTE = Symbol("quote")
QUASIQUOTE = Symbol("quasiquote")
UNQUOTE = Symbol("unquote")
SPLICE_UNQUOTE = Symbol("splice-unquote")
CONS = Symbol("cons")
CONCAT = Symbol("concat")


def _is_splice(item: SExpression) -> bool:
    return isinstance(item, List) and len(item) > 0 and item[0] is SPLICE_UNQUOTE


def quasiquote(expr: SExpression) -> SExpression:
    """
    Rewrite a quasiquoted template into code that builds it.

        `x            => (quote x)          for anything but a non-empty List
        `(unquote y)  => y
        `((splice-unquote y) . rest) => (concat y `rest)
        `(x1 . rest)  => (cons `x1 `rest)

    Pure: nothing is evaluated and no environment is consulted. The list
    spine is walked iteratively from the right; only nesting recurses.
    """
    if not isinstance(expr, List) or not expr:
        return List((QUOTE, expr))

    # The left-most suffix that starts with `unquote` ends the walk: it is
    # replaced by its argument and nothing to its right is examined.
    stop = len(expr)
    result: SExpression = List((QUOTE, List()))
    for i, item in enumerate(expr):
        if item is UNQUOTE:
            check_arity(UNQUOTE, expr.slice(i + 1), 1)
            stop = i
            result = expr[i + 1]
            break

    for item in reversed(expr.slice(0, stop)):
        if _is_splice(item):
            check_arity(SPLICE_UNQUOTE, item.rest(), 1)
            result = List((CONCAT, item[1], result))
        else:
            result = List((CONS, quasiquote(item), result))
    return result


def quote_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    check_arity(QUOTE, tail, 1)
    return tail[0]


def quasiquote_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> TailCall:
    # The expansion is code; it is evaluated by the loop in the same env.
    check_arity(QUASIQUOTE, tail, 1)
    return TailCall(quasiquote(tail[0]), env)
