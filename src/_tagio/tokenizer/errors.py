from enum import Enum, auto, unique


@unique
class ErrorKind(Enum):
    INVALID_TEXT = auto()
    INVALID_PREFIX = auto()
    INVALID_SUFFIX = auto()
    NO_CLOSE_TAG = auto()
    INVALID_ENCODING = auto()
    READ_ERROR = auto()


class TagError(Exception):
    """
    Base for all errors raised while reading a tag document. Errors are
    compared by their kind and the line they were found at, so a returned
    error can be checked against TagSyntaxError(ErrorKind.NO_CLOSE_TAG, 3).
    """

    def __init__(self, kind, line=None, message=None):
        """
        :param kind: The ErrorKind.
        :param line: The 1-based line number where the offending
            token starts, or None if unknown.
        :param message: Optional human readable description.
        """
        self.kind = kind
        self.line = line
        if message is None:
            message = kind.name.lower().replace("_", " ")
        if line is not None:
            message = f"{message} at line {line}"
        super().__init__(message)

    def __eq__(self, other):
        if not isinstance(other, TagError):
            return NotImplemented
        return (type(self), self.kind, self.line) == (
            type(other),
            other.kind,
            other.line,
        )

    def __hash__(self):
        return hash((type(self), self.kind, self.line))

    def __repr__(self):
        return f"{type(self).__name__}({self.kind}, line={self.line})"


class TagSyntaxError(TagError):
    """
    Raised by the tokenizer and the parser when the document is not
    valid tag syntax, e.g. a line without a colon (ErrorKind.INVALID_TEXT)
    or a <text> block that is never closed (ErrorKind.NO_CLOSE_TAG).
    """

    def at_line(self, line):
        """
        :returns: The same error, located at the given line.
        """
        return type(self)(self.kind, line)


class TagReadError(TagError):
    """
    Raised when the underlying stream fails to read. The original
    OSError is available as __cause__.
    """

    def __init__(self, line=None, message=None):
        super().__init__(ErrorKind.READ_ERROR, line, message)
