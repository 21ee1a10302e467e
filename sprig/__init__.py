# Core type aliases for Sprig's data model.
# Atoms use plain Python values (int, bool, str) and the Nil singleton; symbols,
# keywords, vectors, maps and functions have small dedicated classes in
# sprig.types. The same values represent both code (forms) and runtime values.
#
# Naming guidance:
# - SExpression: Use in reader/printer code to denote syntactic forms.
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
# Forms alias (interchangeable with LispValue)
SExpression = LispValue

# Evaluator function type passed into special forms and the application engine
EvaluatorFn = Callable[..., LispValue]
