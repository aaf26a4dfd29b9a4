
class DuoError(Exception):
    """ Base class for all Duo errors"""
    pass

class DuoLexicalError(DuoError):
    """ Raised when the source contains a character no token rule accepts"""
    pass

class DuoSyntaxError(DuoError):
    """ Raised when the token sequence does not form an expression"""

class DuoUndefinedSlot(DuoError):
    """ Raised when a slot is read, called or updated before it is defined"""

class DuoRedefinedSlot(DuoError):
    """ Raised when := targets a name already defined in the same scope"""

class DuoArityError(DuoError):
    """ Raised when the number of arguments passed to a function is incorrect"""

class DuoTypeError(DuoError):
    """ Raised when an operator or method gets operands of the wrong kind"""

class DuoNotCallable(DuoError):
    """ Raised when call syntax is applied to a value that cannot be called"""

class DuoZeroDivision(DuoError):
    """ Raised when / or % has a zero divisor"""

class DuoRecursionError(DuoError):
    """ Raised when evaluation exhausts the host call stack"""
