from dataclasses import dataclass

from _tagio.tokenizer.token_kind import TokenKind


@dataclass
class Token:
    """
    A token in a tag document. For TokenKind.LINE the data is one line
    without its terminator, for TokenKind.TEXT_BLOCK it runs from the start
    of the line opening a <text> block to the end of the line holding the
    closing </text>.
    """

    kind: TokenKind
    data: bytes
    line: int = 1

