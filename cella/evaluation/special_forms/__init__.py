"""Registry of special forms for the Cella evaluator.

Maps names to handler functions that receive their operands unevaluated.
Unlike builtins these are not dispatched on syntax: `global_environment`
binds each one to its name as a SPECIAL_FORM value, so they can be shadowed
or reassigned like any other binding.
"""

from cella.evaluation.special_forms.lambda_form import lambda_form
from cella.evaluation.special_forms.set_form import set_form

SPECIAL_FORMS = {
    "lambda": lambda_form,
    "set!": set_form,
}
