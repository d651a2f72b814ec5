"""Application outside the trampoline.

Native functions that take functions as arguments (apply, map, swap!) call
them through here. A closure invoked this way runs to completion immediately:
its body is evaluated by a fresh call to the evaluator, so such calls are not
tail-call optimised. That is acceptable because they are leaves of the primary
control flow, not links in it.
"""

from __future__ import annotations

from mal import LispValue
from mal.errors import NotCallable
from mal.types.environment import Environment
from mal.types.lambda_fn import Closure
from mal.types.native_fn import NativeFunction
from mal.evaluation.evaluator import evaluate


def apply(
    head: Closure | NativeFunction | object,
    args: list[LispValue],
    env: Environment | None = None,
) -> LispValue:
    """Apply either a Closure or a NativeFunction to already evaluated args.

    - For Closure, bind args in a child of the captured env and evaluate the body.
    - For NativeFunction, invoke it with the caller env.
    - Otherwise, raise NotCallable.
    """
    if isinstance(head, Closure):
        return evaluate(head.body, head.extend_env(list(args)))
    elif isinstance(head, NativeFunction):
        return head(env, list(args))
    else:
        raise NotCallable(head)
