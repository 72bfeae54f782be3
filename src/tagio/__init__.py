import tagio.version
from _tagio.document import Document, Pair
from _tagio.reading import lazy_read, parse, read
from _tagio.tokenizer.errors import ErrorKind, TagError, TagReadError, TagSyntaxError

__author__ = """TagIO developers"""

__version__ = tagio.version.version

__all__ = [
    "Document",
    "ErrorKind",
    "Pair",
    "TagError",
    "TagReadError",
    "TagSyntaxError",
    "lazy_read",
    "parse",
    "read",
]
