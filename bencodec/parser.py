from typing import Any, Dict, List, Optional, Sequence, Tuple

from .config import DecodeOptions
from .errors import InvalidDictionaryError, NestingTooDeepError, UnbalancedStructureError
from .tokens import Token, TokenType


def _parse_container(tokens: Sequence[Token], open_index: int, depth: int,
                     options: DecodeOptions) -> Tuple[List[Any], List[int], int]:
    """
    parse the elements of the container opened at open_index

    Returns:
        tuple of (elements, token index where each element starts, index after the matching end)
    """
    items: List[Any] = []
    starts: List[int] = []
    index = open_index + 1
    while index < len(tokens):
        if tokens[index].type is TokenType.END:
            return items, starts, index + 1
        starts.append(index)
        item, index = _parse_value(tokens, index, depth, options)
        items.append(item)

    opener = tokens[open_index]
    kind = "list" if opener.type is TokenType.LIST_OPEN else "dictionary"
    raise UnbalancedStructureError(
        f"{kind} opened at offset {opener.offset} is never closed",
        position=opener.offset, token_index=open_index
    )


def _pair_items(tokens: Sequence[Token], open_index: int, end_index: int, items: List[Any],
                starts: List[int], options: DecodeOptions) -> Dict[bytes, Any]:
    if len(items) % 2:
        closer = tokens[end_index]
        raise InvalidDictionaryError(
            f"dictionary at offset {tokens[open_index].offset} has a key with no value",
            position=closer.offset, token_index=end_index
        )

    result: Dict[bytes, Any] = {}
    previous: Optional[bytes] = None
    for i in range(0, len(items), 2):
        key = items[i]
        key_token = tokens[starts[i]]
        if not isinstance(key, bytes):
            raise InvalidDictionaryError(
                f"dictionary key at offset {key_token.offset} is not a byte string",
                position=key_token.offset, token_index=starts[i]
            )
        if options.strict and previous is not None and key <= previous:
            raise InvalidDictionaryError(
                f"dictionary key {key!r} at offset {key_token.offset} is duplicated or out of order",
                position=key_token.offset, token_index=starts[i]
            )
        result[key] = items[i + 1]
        previous = key
    return result


def _parse_value(tokens: Sequence[Token], index: int, depth: int, options: DecodeOptions) -> Tuple[Any, int]:
    token = tokens[index]

    if token.type in (TokenType.STRING, TokenType.INTEGER):
        return token.value, index + 1

    if token.type is TokenType.END:
        raise UnbalancedStructureError(
            f"end marker at offset {token.offset} has no matching open",
            position=token.offset, token_index=index
        )

    if depth >= options.max_depth:
        raise NestingTooDeepError(
            f"nesting at offset {token.offset} exceeds max depth {options.max_depth}",
            position=token.offset, token_index=index
        )

    items, starts, next_index = _parse_container(tokens, index, depth + 1, options)
    if token.type is TokenType.LIST_OPEN:
        return items, next_index
    return _pair_items(tokens, index, next_index - 1, items, starts, options), next_index


def parse_value(tokens: Sequence[Token], index: int = 0,
                options: Optional[DecodeOptions] = None) -> Tuple[Any, int]:
    """
    parse the single value starting at tokens[index]

    Args:
        tokens: output of tokenize
        index: position of the value's first token
        options: decode options

    Returns:
        tuple of (value, index of the first token after the value)

    Raises:
        UnbalancedStructureError: missing or extra end marker
        InvalidDictionaryError: bad dictionary body
        NestingTooDeepError: more nesting than options.max_depth
    """
    if options is None:
        options = DecodeOptions()
    if index >= len(tokens):
        raise UnbalancedStructureError(f"no token at index {index}", token_index=index)
    return _parse_value(tokens, index, 0, options)


def parse(tokens: Sequence[Token], options: Optional[DecodeOptions] = None) -> List[Any]:
    """
    rebuild every top-level value from a token stream

    Args:
        tokens: output of tokenize
        options: decode options

    Returns:
        list of top-level values in order
    """
    if options is None:
        options = DecodeOptions()

    values: List[Any] = []
    index = 0
    while index < len(tokens):
        value, index = _parse_value(tokens, index, 0, options)
        values.append(value)
    return values
