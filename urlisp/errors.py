
class UrLispError(Exception):
    """ Base class for all UrLisp errors"""
    pass


class UrLispSyntaxError(UrLispError):
    """ Raised when the token stream does not form an expression"""

    def __init__(self, message: str, position: int | None = None):
        super().__init__(message)
        self.position = position

    def __str__(self):
        return f"Parse Error: {self.args[0]}"


class UrLispLexError(UrLispSyntaxError):
    """ Raised when the lexer meets a malformed token"""

    def __init__(self, message: str, position: int, char: str = ""):
        super().__init__(message, position)
        self.char = char


class UrLispRuntimeError(UrLispError):
    """ Base class for errors raised while evaluating an expression"""

    def __init__(self, obj, message: str):
        super().__init__(message)
        self.obj = obj
        self.message = message

    def __str__(self):
        return f"Lisp Error: {self.obj}: {self.message}"


class UrLispUnboundSymbol(UrLispRuntimeError):
    """ Raised when a symbol is used before it is bound"""


class UrLispArityError(UrLispRuntimeError):
    """ Raised when the number of arguments passed to a callable is incorrect"""


class UrLispTypeError(UrLispRuntimeError):
    """ Raised when a primitive receives an operand of the wrong type"""


class UrLispNotCallable(UrLispRuntimeError):
    """ Raised when the operator of a call form is not a callable value"""


class UrLispEmptyListError(UrLispRuntimeError):
    """ Raised when the empty list is evaluated as a call form"""


class UrLispCondError(UrLispRuntimeError):
    """ Raised when no cond clause applies or a clause is malformed"""


class UrLispOverflowError(UrLispRuntimeError):
    """ Raised when integer arithmetic leaves the signed 64-bit range"""


class UrLispBootstrapError(UrLispError):
    """ Raised when a prelude definition fails to parse or evaluate"""

    def __init__(self, name: str, cause: UrLispError):
        super().__init__(f"Bootstrap of '{name}' failed: {cause}")
        self.name = name
        self.cause = cause
