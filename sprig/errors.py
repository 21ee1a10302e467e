
class SprigError(Exception):
    """ Base class for all Sprig errors"""
    pass


# -------------------------------
# Reader errors
# -------------------------------
class ParseError(SprigError):
    """ Raised when source text is malformed or incomplete"""


class EmptyInput(ParseError):
    """ Raised when the source holds no forms (only whitespace or comments)"""


class UnterminatedString(ParseError):
    """ Raised when input ends before a string literal's closing quote"""


class UnexpectedEof(ParseError):
    """ Raised when input ends inside an open list, vector, map or quote form"""


class UnexpectedClosingDelimiter(ParseError):
    """ Raised when a closing ), ] or } has no matching opener"""


class InvalidToken(ParseError):
    """ Raised when a token cannot be read as any value"""


class NestingTooDeep(ParseError):
    """ Raised when forms nest deeper than the reader can follow"""


# -------------------------------
# Evaluation errors
# -------------------------------
class EvalError(SprigError):
    """ Raised when evaluation of a form fails"""


class UnboundSymbol(EvalError):
    """ Raised when a symbol is not bound anywhere on the environment chain"""


class ArityError(EvalError):
    """ Raised when the number of arguments passed to a form or builtin is incorrect"""


class SprigTypeError(EvalError):
    """ Raised when the kinds of arguments passed to a form or builtin are incorrect"""


class DivisionByZero(EvalError):
    """ Raised when dividing by zero"""


class IntegerOverflow(EvalError):
    """ Raised when an arithmetic result leaves the signed 64-bit range"""


class NotAFunction(EvalError):
    """ Raised when the head of an application is not callable"""


class InvalidSpecialForm(EvalError):
    """ Raised when a special form is syntactically malformed"""
