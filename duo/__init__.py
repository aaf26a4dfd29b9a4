# Core type aliases for Duo's data model.
# Numbers and strings are plain Python int/float/str; everything else is one of
# the classes in duo.types. Message trees double as runtime values, so there is
# no separate AST type.
#
# Naming guidance:
# - Node:     Use in reader/parser code to denote syntax (a Message tree or literal).
# - DuoValue: Use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any` and are interchangeable; a macro receives Nodes
# as ordinary values.

from typing import Any, Callable

# Runtime value alias
DuoValue = Any
# Syntax alias (Message trees and literals)
Node = DuoValue

# Sink for the `print` method; receives the display form of a value
PrintFn = Callable[[str], None]
