from _tagio.tokenizer.errors import ErrorKind, TagSyntaxError
from _tagio.tokenizer.token import Token
from _tagio.tokenizer.token_kind import TokenKind

OPEN_TAG = b"<text>"
CLOSE_TAG = b"</text>"

NEED_MORE_DATA = (0, None, None)


def strip_terminator(line):
    """
    Remove the carriage return left over from a \\r\\n line terminator.
    """
    if line.endswith(b"\r"):
        return line[:-1]
    return line


def is_skippable(line):
    """
    Blank lines and lines starting with '#' do not produce tokens.
    """
    stripped = line.strip()
    return not stripped or stripped.startswith(b"#")


def opens_text_block(line):
    _, colon, rest = line.partition(b":")
    return bool(colon) and OPEN_TAG in rest


class TagSplitter:
    """
    Split function for tag documents which remembers how much of the
    buffer it has already searched. When split asks for more data, the
    next call has to be given the same buffer extended with more bytes, so
    line terminators and closing markers are only searched for in the new
    bytes. Any other result starts over at the next call.
    """

    def __init__(self):
        self.reset()

    def reset(self):
        # Bytes from the start of the buffer known to hold no b"\n".
        self.line_searched = 0
        # Bytes from the start of the buffer known to hold no CLOSE_TAG.
        self.close_searched = 0

    def split(self, data, at_eof):
        """
        Given the currently buffered bytes, decide what the start of the
        buffer is.

        >>> splitter = TagSplitter()
        >>> splitter.split(b"# comment\\nkey:value\\n", False)
        (10, None, None)
        >>> splitter.split(b"key:val", False)
        (0, None, None)
        >>> splitter.split(b"key:value\\n", False)
        (10, Token(kind=<TokenKind.LINE: 1>, data=b'key:value', line=1), None)

        :param data: The bytes buffered so far, starting right after the
            previously consumed token.
        :param at_eof: Whether data is all that will ever be available.
        :returns: Tuple of advance, token and error. advance is the number
            of bytes from the start of data that are consumed. token is the
            Token found or None if the consumed bytes were blank or a comment.
            error is a TagSyntaxError if data can never be valid. (0, None,
            None) means more data is needed, or, at_eof, that the data is
            exhausted.
        """
        result = self.split_line(data, at_eof)
        if result != NEED_MORE_DATA:
            self.reset()
        return result

    def first_line(self, data, at_eof):
        """
        :returns: Tuple of the first line in data (with any trailing \\r) and
            the number of bytes it occupies including its terminator, or None
            if the line is not terminated yet and more data may follow.
        """
        end = data.find(b"\n", self.line_searched)
        if end < 0:
            self.line_searched = len(data)
            if not at_eof:
                return None
            return data, len(data)
        return data[:end], end + 1

    def split_line(self, data, at_eof):
        if not data:
            return NEED_MORE_DATA
        found = self.first_line(data, at_eof)
        if found is None:
            return NEED_MORE_DATA
        line, advance = found
        if is_skippable(line):
            return advance, None, None
        if opens_text_block(line):
            return self.split_text_block(data, line, at_eof)
        return advance, Token(TokenKind.LINE, bytes(strip_terminator(line))), None

    def split_text_block(self, data, line, at_eof):
        """
        Split a token running from the start of data to the end of the line
        holding the first </text> after the opening <text> marker.
        """
        open_at = line.index(OPEN_TAG, line.index(b":"))
        search_from = max(
            open_at + len(OPEN_TAG), self.close_searched - len(CLOSE_TAG) + 1
        )
        close_at = data.find(CLOSE_TAG, search_from)
        if close_at < 0:
            self.close_searched = len(data)
            if at_eof:
                return 0, None, TagSyntaxError(ErrorKind.NO_CLOSE_TAG)
            return NEED_MORE_DATA
        end = data.find(b"\n", close_at + len(CLOSE_TAG))
        if end < 0:
            if not at_eof:
                return NEED_MORE_DATA
            end = len(data)
            advance = end
        else:
            advance = end + 1
        block = bytes(strip_terminator(data[:end]))
        return advance, Token(TokenKind.TEXT_BLOCK, block), None


def split_tag(data, at_eof):
    """
    Split the start of data without knowledge of earlier calls, see
    TagSplitter.split.
    """
    return TagSplitter().split(data, at_eof)
