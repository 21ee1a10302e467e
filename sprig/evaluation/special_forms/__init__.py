"""Registry of special forms for the Sprig evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table before ordinary function application, so a
new special form is a new entry here. Handlers take (operands, env, evaluate_fn).
"""

from sprig.types.symbol import Symbol
from sprig.evaluation.special_forms.def_form import def_form
from sprig.evaluation.special_forms.let_form import let_form
from sprig.evaluation.special_forms.do_form import do_form
from sprig.evaluation.special_forms.if_form import if_form
from sprig.evaluation.special_forms.fn_form import fn_form
from sprig.evaluation.special_forms.quote_form import quote_form

SPECIAL_FORMS = {
    Symbol("def!"): def_form,
    Symbol("let*"): let_form,
    Symbol("do"): do_form,
    Symbol("if"): if_form,
    Symbol("fn*"): fn_form,
    Symbol("quote"): quote_form,
}
