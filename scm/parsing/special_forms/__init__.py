"""Registry of special-form grammars for the scm parser.

Maps each reserved Form to the handler that turns its operand syntax into an
expression node. The parser consults this table only after checking that the
head symbol is not a local binding and not a primitive.
"""

from scm.types.primitives import Form
from scm.parsing.special_forms.begin_form import begin_form
from scm.parsing.special_forms.quote_form import quote_form
from scm.parsing.special_forms.if_form import if_form, cond_form
from scm.parsing.special_forms.lambda_form import lambda_form
from scm.parsing.special_forms.define_form import define_form
from scm.parsing.special_forms.let_forms import let_form, letrec_form
from scm.parsing.special_forms.set_form import set_form

SPECIAL_FORM_PARSERS = {
    Form.BEGIN: begin_form,
    Form.QUOTE: quote_form,
    Form.IF: if_form,
    Form.COND: cond_form,
    Form.LAMBDA: lambda_form,
    Form.DEFINE: define_form,
    Form.LET: let_form,
    Form.LETREC: letrec_form,
    Form.SET: set_form,
}
