"""Registry of special forms for the Kappa evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table to dispatch special forms before ordinary
function application. Handlers take the unevaluated rest of the form, the
current environment and the evaluator to recurse with.
"""

from kappa.types.symbol import Symbol
from kappa.evaluation.special_forms.quote_form import quote_form
from kappa.evaluation.special_forms.if_form import if_form
from kappa.evaluation.special_forms.def_form import def_form
from kappa.evaluation.special_forms.do_form import do_form
from kappa.evaluation.special_forms.let_form import let_form
from kappa.evaluation.special_forms.fn_form import fn_form

SPECIAL_FORMS = {
    Symbol("quote"): quote_form,
    Symbol("if"): if_form,
    Symbol("def"): def_form,
    Symbol("do"): do_form,
    Symbol("let"): let_form,
    Symbol("fn"): fn_form,
}
