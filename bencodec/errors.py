from typing import Any, Optional, Tuple


class BencodeError(ValueError):
    """
    base class for every bencode failure

    Attributes:
        position: byte offset in the input where the problem was detected
        token_index: index into the token stream, set by the parser
    """

    def __init__(self, message: str, position: Optional[int] = None, token_index: Optional[int] = None):
        super().__init__(message)
        self.position: Optional[int] = position
        self.token_index: Optional[int] = token_index


class BencodeDecodeError(BencodeError):
    """raised when a buffer is not valid bencode"""


class UnexpectedByteError(BencodeDecodeError):
    """a byte that cannot start any token"""


class MalformedStringError(BencodeDecodeError):
    """bad length prefix, or fewer bytes available than declared"""


class MalformedIntegerError(BencodeDecodeError):
    """unterminated integer, non-digit body, or non-canonical form in strict mode"""


class UnbalancedStructureError(BencodeDecodeError):
    """an open marker that is never closed, or an end marker with nothing to close"""


class InvalidDictionaryError(BencodeDecodeError):
    """odd number of elements, a non-string key, or unsorted keys in strict mode"""


class NestingTooDeepError(BencodeDecodeError):
    pass


class TrailingDataError(BencodeDecodeError):
    pass


class BencodeEncodeError(BencodeError):
    """
    raised when a value cannot be bencoded

    Attributes:
        path: keys and list indexes leading from the root to the bad element
    """

    def __init__(self, message: str, path: Tuple[Any, ...] = ()):
        super().__init__(message)
        self.path: Tuple[Any, ...] = path


class UnsupportedTypeError(BencodeEncodeError, TypeError):
    pass
