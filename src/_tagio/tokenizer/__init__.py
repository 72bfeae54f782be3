"""
In this module, the tokenizer splits a stream of tag document contents into
tokens. The splitting is done by a TagSplitter, which looks at the bytes
buffered so far and either consumes a blank or comment line, returns a
token, returns an error, or asks for more data. When asked again with more
data it continues searching where it left off. TagTokenizer drives a
splitter over a stream, so tokens are delimited the same regardless of where the
stream's reads happen to end.

A token is either one line of the form "key:value", or, when a <text> marker
follows the colon, everything up to the end of the line with the closing
</text> marker. Checking the contents of the token is up to the parser.
"""

from .errors import ErrorKind, TagError, TagReadError, TagSyntaxError
from .split import CLOSE_TAG, OPEN_TAG, TagSplitter, split_tag
from .tag_tokenizer import DEFAULT_BUFFER_SIZE, TagTokenizer
from .token import Token
from .token_kind import TokenKind

__all__ = [
    "CLOSE_TAG",
    "DEFAULT_BUFFER_SIZE",
    "ErrorKind",
    "OPEN_TAG",
    "TagError",
    "TagReadError",
    "TagSplitter",
    "TagSyntaxError",
    "TagTokenizer",
    "Token",
    "TokenKind",
    "split_tag",
]
