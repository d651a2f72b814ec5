"""Registry of special forms for the mal evaluator.

Maps interned Symbols to handler functions that implement non-standard
evaluation rules. Every handler takes (args, env, evaluate_fn) and returns
either a final value or a TailCall for the evaluator loop to continue with.
"""

from mal.evaluation.special_forms.define_form import DEF, define_form
from mal.evaluation.special_forms.let_form import LET, let_form
from mal.evaluation.special_forms.do_form import DO, do_form
from mal.evaluation.special_forms.if_form import IF, if_form
from mal.evaluation.special_forms.lambda_form import FN, lambda_form
from mal.evaluation.special_forms.quote_forms import QUOTE, QUASIQUOTE, quote_form, quasiquote_form
from mal.evaluation.special_forms.eval_form import EVAL, eval_form

SPECIAL_FORMS = {
    DEF: define_form,
    LET: let_form,
    DO: do_form,
    IF: if_form,
    FN: lambda_form,
    QUOTE: quote_form,
    QUASIQUOTE: quasiquote_form,
    EVAL: eval_form,
}
