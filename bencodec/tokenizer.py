import re
from typing import List, Optional, Tuple, Union

from .config import MAX_INTEGER_DIGITS, DecodeOptions
from .errors import MalformedIntegerError, MalformedStringError, UnexpectedByteError
from .tokens import Token, TokenType

_INTEGER_BODY = re.compile(rb"-?[0-9]+")

_MARKERS = {
    b"l": TokenType.LIST_OPEN,
    b"d": TokenType.DICT_OPEN,
    b"e": TokenType.END,
}

BytesLike = Union[bytes, bytearray, memoryview]


def _as_bytes(buffer: BytesLike) -> bytes:
    if isinstance(buffer, bytes):
        return buffer
    if isinstance(buffer, (bytearray, memoryview)):
        return bytes(buffer)
    raise TypeError(f"expected a bytes-like buffer, got {type(buffer).__name__}")


def _scan_string(data: bytes, pos: int, strict: bool) -> Tuple[Token, int]:
    colon = data.find(b":", pos)
    if colon == -1:
        raise MalformedStringError(f"string length at offset {pos} is not followed by ':'", position=pos)

    prefix = data[pos:colon]
    if not prefix.isdigit():
        raise MalformedStringError(f"invalid string length {prefix[:20]!r} at offset {pos}", position=pos)
    if strict and len(prefix) > 1 and prefix.startswith(b"0"):
        raise MalformedStringError(f"string length with leading zero at offset {pos}", position=pos)

    # a prefix with more digits than the buffer length can never fit
    if len(prefix.lstrip(b"0")) > len(str(len(data))):
        raise MalformedStringError(
            f"string at offset {pos} declares a length longer than the whole buffer", position=pos
        )

    length = int(prefix.lstrip(b"0") or b"0")
    start = colon + 1
    end = start + length
    if end > len(data):
        raise MalformedStringError(
            f"string at offset {pos} declares {length} bytes but only {len(data) - start} remain",
            position=pos
        )
    return Token(TokenType.STRING, data[start:end], pos), end


def _scan_integer(data: bytes, pos: int, strict: bool) -> Tuple[Token, int]:
    end = data.find(b"e", pos + 1)
    if end == -1:
        raise MalformedIntegerError(f"integer at offset {pos} has no terminating 'e'", position=pos)

    body = data[pos + 1:end]
    if not _INTEGER_BODY.fullmatch(body):
        raise MalformedIntegerError(f"invalid integer {body[:20]!r} at offset {pos}", position=pos)
    if strict:
        digits = body.lstrip(b"-")
        if body == b"-0":
            raise MalformedIntegerError(f"negative zero at offset {pos}", position=pos)
        if len(digits) > 1 and digits.startswith(b"0"):
            raise MalformedIntegerError(f"integer with leading zero at offset {pos}", position=pos)

    if len(body.lstrip(b"-")) > MAX_INTEGER_DIGITS:
        raise MalformedIntegerError(
            f"integer at offset {pos} has more than {MAX_INTEGER_DIGITS} digits", position=pos
        )
    try:
        number = int(body)
    except ValueError as e:
        raise MalformedIntegerError(f"integer at offset {pos} cannot be converted: {e}", position=pos) from e

    return Token(TokenType.INTEGER, number, pos), end + 1


def tokenize(buffer: BytesLike, options: Optional[DecodeOptions] = None) -> List[Token]:
    """
    split a bencoded buffer into a flat list of tokens

    open and end markers are emitted unpaired, matching them up is left to the parser

    Args:
        buffer: raw bencoded bytes
        options: decode options, only `strict` is used here

    Returns:
        tokens in buffer order

    Raises:
        UnexpectedByteError: a byte that cannot start a token
        MalformedStringError: bad length prefix or truncated payload
        MalformedIntegerError: bad or unterminated integer
    """
    data = _as_bytes(buffer)
    strict = options is not None and options.strict

    tokens: List[Token] = []
    pos = 0
    while pos < len(data):
        lead = data[pos:pos + 1]
        if lead.isdigit():
            token, pos = _scan_string(data, pos, strict)
        elif lead == b"i":
            token, pos = _scan_integer(data, pos, strict)
        elif lead in _MARKERS:
            token = Token(_MARKERS[lead], None, pos)
            pos += 1
        else:
            raise UnexpectedByteError(f"unexpected byte {lead!r} at offset {pos}", position=pos)
        tokens.append(token)

    return tokens
