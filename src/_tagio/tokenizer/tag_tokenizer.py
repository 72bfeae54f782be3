import logging

from _tagio.tokenizer.errors import TagReadError
from _tagio.tokenizer.split import TagSplitter

logger = logging.getLogger(__name__)

DEFAULT_BUFFER_SIZE = 4096


class TagTokenizer:
    """
    Iterable of tokens for a given stream of tag document contents. Reads
    the stream in chunks of buffer_size and repeatedly applies a TagSplitter to
    the buffered data, reading more whenever the splitter can not decide.

    >>> buffer = io.BytesIO(b"# comment\\nkey: value\\n")
    >>> [t.data for t in TagTokenizer(buffer)]
    [b'key: value']

    """

    def __init__(self, stream, buffer_size=DEFAULT_BUFFER_SIZE):
        """
        :param stream: A byte stream containing tag data. Text streams are
            also accepted and are encoded as utf-8.
        :param buffer_size: Number of bytes (or characters) requested from
            the stream on each read.
        """
        if buffer_size < 1:
            raise ValueError(f"buffer_size has to be positive, got {buffer_size}")
        self.stream = stream
        self.buffer_size = buffer_size
        self.line = 1

    def read_chunk(self):
        try:
            chunk = self.stream.read(self.buffer_size)
        except OSError as err:
            raise TagReadError(self.line, f"Could not read tag stream: {err}") from err
        if chunk is None:
            raise TagReadError(
                self.line,
                "Tag stream has no data available, non-blocking streams are not "
                "supported",
            )
        if isinstance(chunk, str):
            chunk = chunk.encode("utf-8")
        return chunk

    def __iter__(self):
        splitter = TagSplitter()
        buffer = bytearray()
        at_eof = False
        while True:
            advance, token, error = splitter.split(buffer, at_eof)
            if error is not None:
                raise error.at_line(self.line)
            if advance == 0 and token is None:
                if at_eof:
                    return
                chunk = self.read_chunk()
                if not chunk:
                    at_eof = True
                    continue
                buffer += chunk
                if len(buffer) > len(chunk):
                    logger.debug("Tag buffer grown to %d bytes", len(buffer))
                continue
            if token is not None:
                token.line = self.line
            self.line += buffer.count(b"\n", 0, advance)
            del buffer[:advance]
            if token is not None:
                yield token
