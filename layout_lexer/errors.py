"""Exception types raised by the layout lexer."""


class LayoutLexError(Exception):
    """Base class for layout lexer errors."""


class ClosedStreamError(LayoutLexError, ValueError):
    """Read attempted on a stream that has already been closed."""

    def __init__(self, stream=None):
        self.stream = stream
        name = getattr(stream, 'name', None)
        where = f" {name!r}" if isinstance(name, str) else ""
        super().__init__(f"Cannot read from closed stream{where}")
