"""
A parser consumes from an iterator of tokens (see _tagio.tokenizer) and
generates the pairs of the tag document. A token is either a line of the form
"key:value" or a key followed by a <text> block which the parser cuts out
and checks for valid prefix and suffix.
"""

from enum import Enum, auto, unique

from _tagio.document import Pair
from _tagio.tokenizer import CLOSE_TAG, OPEN_TAG, ErrorKind, TagSyntaxError


@unique
class ParserState(Enum):
    IDLE = auto()
    EXPECTING_TEXT_CLOSE = auto()


def strip_adjacent_newlines(text):
    """
    Remove one line terminator directly after the opening marker and one
    directly before the closing marker of a text block.
    """
    if text.startswith(b"\r\n"):
        text = text[2:]
    elif text.startswith(b"\n"):
        text = text[1:]
    if text.endswith(b"\r\n"):
        text = text[:-2]
    elif text.endswith(b"\n"):
        text = text[:-1]
    return text


class TagParser:
    """
    Parser of the tag document format, ie. consumes the output of
    the TagTokenizer and is an iterable of Pair.

    >>> buffer = io.BytesIO(b"a: 1\\nb:<text>\\nline\\n</text>")
    >>> list(TagParser(iter(TagTokenizer(buffer))))
    [Pair(key='a', value='1'), Pair(key='b', value='line')]

    While a text block is open, further tokens are taken to be lines of the
    block, so the parser also accepts a tokenizer that only splits lines.
    """

    def __init__(self, tokens, encoding="utf-8", errors="surrogateescape"):
        """
        :param tokens: iterator of tokens, ie. TagTokenizer.
        :param encoding: The encoding of keys and values.
        :param errors: How to handle bytes that are not valid in encoding,
            see bytes.decode. By default they are kept as surrogates, so
            value.encode(encoding, "surrogateescape") gives back the bytes.
        """
        self.tokens = tokens
        self.encoding = encoding
        self.errors = errors
        self.state = ParserState.IDLE
        self._key = None
        self._text = []
        self._text_line = None

    def __iter__(self):
        for token in self.tokens:
            pair = self.parse_token(token)
            if pair is not None:
                yield pair
        if self.state == ParserState.EXPECTING_TEXT_CLOSE:
            raise TagSyntaxError(ErrorKind.NO_CLOSE_TAG, self._text_line)

    def decode(self, data, line):
        try:
            return data.decode(self.encoding, self.errors)
        except UnicodeDecodeError as err:
            raise TagSyntaxError(ErrorKind.INVALID_ENCODING, line) from err

    def parse_token(self, token):
        """
        :returns: The pair completed by the token, or None if the token
            is part of a text block that is not yet closed.
        """
        if self.state == ParserState.EXPECTING_TEXT_CLOSE:
            self._text.append(b"\n")
            return self.collect_text(token.data, token.line)

        key, colon, rest = token.data.partition(b":")
        if not colon:
            raise TagSyntaxError(ErrorKind.INVALID_TEXT, token.line)
        key = self.decode(key.strip(), token.line)

        content = rest.lstrip()
        if content.startswith(OPEN_TAG):
            self.open_text(key, token.line)
            return self.collect_text(content[len(OPEN_TAG) :], token.line)
        if OPEN_TAG in rest:
            raise TagSyntaxError(ErrorKind.INVALID_PREFIX, token.line)
        return Pair(key, self.decode(rest.strip(), token.line))

    def open_text(self, key, line):
        self.state = ParserState.EXPECTING_TEXT_CLOSE
        self._key = key
        self._text = []
        self._text_line = line

    def collect_text(self, data, line):
        """
        Add data to the open text block. If data holds the closing marker,
        check what follows it on the line and complete the pair.

        :param data: Contents of the text block.
        :param line: The line number data starts on.
        """
        text, close, suffix = data.partition(CLOSE_TAG)
        self._text.append(text)
        if not close:
            return None

        suffix = suffix.strip()
        if suffix and not suffix.startswith(b"#"):
            raise TagSyntaxError(ErrorKind.INVALID_SUFFIX, line + text.count(b"\n"))

        value = strip_adjacent_newlines(b"".join(self._text))
        pair = Pair(self._key, self.decode(value, self._text_line))
        self.state = ParserState.IDLE
        self._key = None
        self._text = []
        self._text_line = None
        return pair
