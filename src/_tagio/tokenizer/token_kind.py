from enum import Enum, auto, unique


@unique
class TokenKind(Enum):
    LINE = auto()
    TEXT_BLOCK = auto()
