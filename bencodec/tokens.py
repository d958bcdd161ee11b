from enum import Enum
from typing import NamedTuple, Optional, Union


class TokenType(Enum):
    STRING = "s"
    INTEGER = "i"
    LIST_OPEN = "l"
    DICT_OPEN = "d"
    END = "e"


class Token(NamedTuple):
    """
    one lexical atom of a bencoded buffer

    Attributes:
        type: kind of token
        value: raw bytes for strings, int for integers, None for markers
        offset: byte offset of the token's first byte in the buffer
    """
    type: TokenType
    value: Optional[Union[bytes, int]]
    offset: int
