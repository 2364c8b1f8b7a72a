
class BlispError(Exception):
    """ Base class for all blisp host-level errors"""
    pass

class BlispInvalidSymbol(BlispError):
    """ Raised when a non-symbol is used as a binding name"""
    pass

class BlispSyntaxError(BlispError):
    """ Raised when source text does not match the grammar"""

    def __init__(self, message: str, filename: str = "<input>", line: int = 0, column: int = 0):
        super().__init__(f"{filename}:{line}:{column}: {message}")
        self.filename = filename
        self.line = line
        self.column = column
