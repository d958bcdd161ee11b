from .config import DEFAULT_MAX_DEPTH, MAX_INTEGER_DIGITS, DecodeOptions
from .decoder import decode
from .encoder import encode
from .errors import (
    BencodeDecodeError,
    BencodeEncodeError,
    BencodeError,
    InvalidDictionaryError,
    MalformedIntegerError,
    MalformedStringError,
    NestingTooDeepError,
    TrailingDataError,
    UnbalancedStructureError,
    UnexpectedByteError,
    UnsupportedTypeError,
)
from .parser import parse, parse_value
from .tokenizer import tokenize
from .tokens import Token, TokenType

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "MAX_INTEGER_DIGITS",
    "BencodeDecodeError",
    "BencodeEncodeError",
    "BencodeError",
    "DecodeOptions",
    "InvalidDictionaryError",
    "MalformedIntegerError",
    "MalformedStringError",
    "NestingTooDeepError",
    "Token",
    "TokenType",
    "TrailingDataError",
    "UnbalancedStructureError",
    "UnexpectedByteError",
    "UnsupportedTypeError",
    "decode",
    "encode",
    "parse",
    "parse_value",
    "tokenize",
]
