from typing import Optional


class BellaError(Exception):
    """Exception type used to propagate Bella runtime errors.

    Every runtime failure is fatal to the current run. Subclasses name the
    kind of failure; ``kind`` is the name reported to the user.
    """
    kind = 'Error'

    def __init__(self, message: str):
        super().__init__(f"{self.kind}: {message}")
        self.message = message


class DuplicateDeclaration(BellaError):
    kind = 'DuplicateDeclaration'


class UnboundVariable(BellaError):
    kind = 'UnboundVariable'


class NotCallable(BellaError):
    kind = 'NotCallable'


class ArityMismatch(BellaError):
    kind = 'ArityMismatch'


class BellaTypeError(BellaError):
    """An operator or built-in applied to a value of the wrong kind."""
    kind = 'TypeError'


class IndexOutOfRange(BellaError):
    kind = 'IndexOutOfRange'


class ParseError(Exception):
    """Raised by the front end for malformed Bella source."""
    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        if line is not None:
            message = f"{message} at {line}:{column}"
        super().__init__(message)
        self.line = line
        self.column = column
