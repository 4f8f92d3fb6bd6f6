"""Error taxonomy for parsing and executing commands."""


class ParseError(Exception):
    """Raised when a line of input cannot be turned into a command."""

    pass


class UnrecognizedCommandError(ParseError):
    """Raised when the input matches no known command shape."""

    def __init__(self, raw: str):
        super().__init__(f"{raw} doesn't exist as a command")
        self.raw = raw


class InvalidInputError(ParseError):
    """Raised when a known command keyword has malformed or missing arguments."""

    def __init__(self, kind: str):
        super().__init__(f"Invalid input for {kind}!")
        self.kind = kind


class BoundsError(IndexError):
    """Raised when a position does not refer to an existing task."""

    def __init__(self, index: int, size: int):
        super().__init__(f"index {index} out of range for {size} task(s)")
        self.index = index
        self.size = size
