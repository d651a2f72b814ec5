from mal import SExpression
from mal.types.environment import Environment


class TailCall:
    """Returned by a special form whose result is `form` evaluated in `env`.

    The evaluator loop reassigns its state from it instead of recursing.
    """

    __slots__ = ("form", "env")

    def __init__(self, form: SExpression, env: Environment):
        self.form = form
        self.env = env
