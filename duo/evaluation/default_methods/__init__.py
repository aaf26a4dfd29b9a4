"""Registry of default methods for the Duo evaluator.

Maps message names to handlers that need their own evaluation order (lazy
branches, loops, output) instead of eager argument evaluation. The evaluator
consults this table by name before any slot lookup, so these names cannot be
redefined by user code.
"""

from duo.evaluation.default_methods.if_form import if_form
from duo.evaluation.default_methods.print_form import print_form
from duo.evaluation.default_methods.clone_form import clone_form
from duo.evaluation.default_methods.do_while_form import do_while_form

DEFAULT_METHODS = {
    "if": if_form,
    "print": print_form,
    "clone": clone_form,
    "doWhile": do_while_form,
}
