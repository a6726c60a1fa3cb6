"""
Error handling system for the Awesome language.
Every error carries enough context to produce a diagnostic.
"""


class AwesomeError(Exception):
    """Base class for all Awesome language errors."""

    def __init__(self, message, line=None, column=None, filename=None):
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column
        self.filename = filename

    def __str__(self):
        location = ""
        if self.filename:
            location += f"File \"{self.filename}\""
        if self.line is not None:
            location += f", line {self.line}" if location else f"line {self.line}"
        if self.column is not None:
            location += f", column {self.column}"

        if location:
            return f"{self.__class__.__name__}: {location}\n  {self.message}"
        return f"{self.__class__.__name__}: {self.message}"


class LexerError(AwesomeError):
    """Error during lexical analysis."""
    pass


class MalformedIndentError(LexerError):
    """An indent width does not line up with the open blocks."""

    def __init__(self, width, current, line=None, column=None, filename=None):
        super().__init__(
            f"Bad indent level, got {width} indents, expected > {current}",
            line, column, filename,
        )
        self.width = width
        self.current = current


class MissingBlockHeaderError(LexerError):
    """Indentation increased without a block-opening ':'."""

    def __init__(self, width, current, line=None, column=None, filename=None):
        super().__init__(
            f"Missing ':' before indented block "
            f"(got {width} indents, current level is {current})",
            line, column, filename,
        )
        self.width = width
        self.current = current


class AwesomeRuntimeError(AwesomeError):
    """Runtime execution error."""
    pass


class MethodNotFoundError(AwesomeRuntimeError):
    """Method lookup failed on the receiver's class."""

    def __init__(self, method_name, receiver_class=None):
        if receiver_class is not None:
            message = f"Method not found: {method_name} (in {receiver_class!r})"
        else:
            message = f"Method not found: {method_name}"
        super().__init__(message)
        self.method_name = method_name
        self.receiver_class = receiver_class


class ArgumentCountError(AwesomeRuntimeError):
    """A user-defined method was called with the wrong number of arguments."""

    def __init__(self, method_name, expected, given):
        super().__init__(
            f"{method_name}: expected {expected} arguments but got {given}."
        )
        self.method_name = method_name
        self.expected = expected
        self.given = given
