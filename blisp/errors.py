class BlispError(Exception):
    """ Base class for all blisp errors"""
    pass


class BlispSyntaxError(BlispError):
    """ Raised when source text does not match the grammar"""

    def __init__(self, message: str, position: int = 0, source: str = ""):
        super().__init__(message)
        self.message = message
        self.position = position
        self.source = source

    @property
    def line(self) -> int:
        return self.source.count("\n", 0, self.position) + 1

    @property
    def column(self) -> int:
        return self.position - (self.source.rfind("\n", 0, self.position) + 1) + 1

    def describe(self, filename: str = "<stdin>") -> str:
        return f"{filename}:{self.line}:{self.column}: error: {self.message}"


class BlispNestingError(BlispError):
    """ Raised when a value is nested deeper than the interpreter can reduce or print"""
