import logging
import pathlib
from contextlib import contextmanager

from _tagio.document import Document
from _tagio.parser import TagParser
from _tagio.tokenizer import DEFAULT_BUFFER_SIZE, TagError, TagReadError, TagTokenizer

logger = logging.getLogger(__name__)


def open_filestream(path):
    logger.debug("Opening tag file %s", path)
    try:
        return open(path, "rb")
    except OSError as err:
        raise TagReadError(message=f"Could not open tag file {path}: {err}") from err


@contextmanager
def lazy_read(
    filelike,
    buffer_size=DEFAULT_BUFFER_SIZE,
    encoding="utf-8",
    errors="surrogateescape",
):
    """
    Lazily reads a tag document, ie.

    >>> with lazy_read("/my/file.tag") as pairs:
    ...     for key, value in pairs:
    ...         print(key, value)

    Pairs are generated as the file is read, so a TagError for malformed
    contents is only raised when iteration reaches it.

    :param filelike: Path to the file, or a byte (or text) stream.
    :param buffer_size: Size of each read from the stream.
    :param encoding: Encoding of keys and values.
    :param errors: Handling of bytes that are not valid in encoding, see
        bytes.decode.
    """
    stream = filelike
    did_open = False
    if isinstance(filelike, (str, pathlib.Path)):
        stream = open_filestream(filelike)
        did_open = True

    try:
        tokenizer = TagTokenizer(stream, buffer_size=buffer_size)
        yield iter(TagParser(iter(tokenizer), encoding=encoding, errors=errors))
    finally:
        if did_open:
            stream.close()


def read(
    filelike,
    buffer_size=DEFAULT_BUFFER_SIZE,
    encoding="utf-8",
    errors="surrogateescape",
):
    """
    Reads a tag document and returns its pairs, ie.
    document = read("/my/file.tag"). The value of the first "name"
    key is then found at document.get_all("name")[0].

    :raises TagError: If the contents are not a valid tag document or
        the stream could not be read.
    """
    with lazy_read(
        filelike, buffer_size=buffer_size, encoding=encoding, errors=errors
    ) as pairs:
        document = Document(pairs)
    logger.debug("Read %d pairs from tag document", len(document))
    return document


def parse(
    stream, buffer_size=DEFAULT_BUFFER_SIZE, encoding="utf-8", errors="surrogateescape"
):
    """
    Parse the full contents of stream.

    >>> document, error = parse(io.BytesIO(b"key: value"))
    >>> error is None
    True
    >>> document
    Document([Pair(key='key', value='value')])

    :returns: Tuple of the Document and None on success, or None and the
        first TagError found. Callers have to check the error before using
        the document.
    """
    try:
        document = read(
            stream, buffer_size=buffer_size, encoding=encoding, errors=errors
        )
        return document, None
    except TagError as err:
        logger.debug("Parsing tag document failed: %s", err)
        return None, err
