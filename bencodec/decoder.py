import logging
from typing import Any, Optional

from .config import DecodeOptions
from .errors import BencodeDecodeError, TrailingDataError
from .parser import parse, parse_value
from .tokenizer import BytesLike, tokenize

logger = logging.getLogger(__name__)


def decode(buffer: BytesLike, options: Optional[DecodeOptions] = None) -> Any:
    """
    decode the first bencoded value in buffer

    extra top-level values after the first are discarded, or rejected in strict mode

    Args:
        buffer: raw bencoded bytes
        options: decode options

    Returns:
        bytes, int, list or dict with bytes keys

    Raises:
        BencodeDecodeError: buffer is empty or malformed
        TypeError: buffer is not bytes-like
    """
    if options is None:
        options = DecodeOptions()

    tokens = tokenize(buffer, options)
    values = parse(tokens, options)
    logger.debug("decoded %d bytes into %d tokens, %d top-level values", len(buffer), len(tokens), len(values))

    if not values:
        raise BencodeDecodeError("buffer contains no bencoded value", position=0)

    if len(values) > 1:
        _, end = parse_value(tokens, 0, options)
        trailing = tokens[end]
        if options.strict:
            raise TrailingDataError(
                f"extra data after decoding, starting at offset {trailing.offset}",
                position=trailing.offset, token_index=end
            )
        logger.debug("discarding %d top-level values after offset %d", len(values) - 1, trailing.offset)

    return values[0]
