from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterable, Literal

from mal import SExpression, LispValue
from mal.builtin.env_builtin import register
from mal.config import get_prelude_root, is_debug
from mal.evaluation.evaluator import evaluate
from mal.logging_config import get_logger
from mal.printer import render, escape_string
from mal.reader.parser import lex, read_str, TokenStream
from mal.types.environment import Environment
from mal.types.nil import Nil
from mal.types.sequence import Vector
from mal.types.symbol import Symbol

logger = get_logger(__name__)

ARGV = Symbol("*ARGV*")

LOAD_FILE = '(def! load-file (fn* (path) (eval (read-string (str "(do nil " (slurp path) "\n)")))))'


class Interpreter:
    """
    Orchestrates reading, evaluating and printing mal code.
    Maintains one root Environment across calls so definitions persist.
    """

    def __init__(
        self,
        eval_fn: Callable[[SExpression, Environment], LispValue] | None = None,
        prelude: str | None | Literal['auto'] = 'auto',
        argv: Iterable[str] = (),
    ):
        self.eval_fn = eval_fn or evaluate
        self.debug = is_debug()
        self.env: Environment = Environment()
        register(self.env)
        self.env.set(ARGV, Vector(argv))
        self.rep(LOAD_FILE)

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            core = get_prelude_root() / 'core.mal'
            if core.is_file():
                logger.info("Loading prelude %s", core)
                self.eval_prelude(core.read_text(encoding='utf-8'))
            else:
                # Be permissive: no prelude found -> proceed
                logger.warning("No prelude found at %s", core)
        elif prelude:
            self.eval_prelude(prelude)

    def eval_prelude(self, code: str) -> None:
        """Evaluate every top-level form of `code` for effect."""
        stream = TokenStream(lex(code))
        for expr in stream.parse_all():
            self.eval_fn(expr, self.env)

    def read(self, code: str) -> SExpression | None:
        form = read_str(code)
        if self.debug:
            logger.debug("read %s", "<nothing>" if form is None else render(form))
        return form

    def eval_form(self, form: SExpression) -> LispValue:
        result = self.eval_fn(form, self.env)
        if self.debug:
            logger.debug("result %s", render(result))
        return result

    def eval(self, code: str) -> LispValue:
        """Read one top-level form from `code` and evaluate it; nil for empty input."""
        form = self.read(code)
        if form is None:
            return Nil
        return self.eval_form(form)

    def rep(self, code: str) -> str:
        """Read, evaluate and print one form; empty input prints as ''."""
        form = self.read(code)
        if form is None:
            return ""
        return render(self.eval_form(form), True)

    def load_file(self, path: str | Path) -> LispValue:
        logger.info("Loading file %s", path)
        return self.eval(f"(load-file {escape_string(str(path))})")
