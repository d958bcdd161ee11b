from typing import Any, Dict, List, Tuple

from .config import DEFAULT_MAX_DEPTH, MAX_INTEGER_DIGITS
from .errors import BencodeEncodeError, UnsupportedTypeError

_INTEGER_CEILING = 10 ** MAX_INTEGER_DIGITS


def _format_path(path: List[Any]) -> str:
    return "root" + "".join(f"[{step!r}]" for step in path)


def _key_bytes(key: Any, path: List[Any]) -> bytes:
    if isinstance(key, bytes):
        return key
    if isinstance(key, (bytearray, memoryview)):
        return bytes(key)
    if isinstance(key, str):
        return key.encode("utf-8")
    raise UnsupportedTypeError(
        f"dictionary key {key!r} at {_format_path(path)} is not a byte string",
        path=tuple(path)
    )


def _sorted_items(value: Dict[Any, Any], path: List[Any]) -> List[Tuple[bytes, Any]]:
    # canonical order is ascending raw key bytes
    items: Dict[bytes, Any] = {}
    for key, item in value.items():
        raw = _key_bytes(key, path)
        if raw in items:
            raise BencodeEncodeError(f"duplicate dictionary key {raw!r} at {_format_path(path)}", path=tuple(path))
        items[raw] = item
    return sorted(items.items(), key=lambda pair: pair[0])


def _encode_string(raw: bytes, chunks: List[bytes]) -> None:
    chunks.append(b"%d:" % len(raw))
    chunks.append(raw)


def _encode(value: Any, chunks: List[bytes], path: List[Any]) -> None:
    if isinstance(value, bool):
        raise UnsupportedTypeError(f"cannot bencode bool at {_format_path(path)}", path=tuple(path))

    if isinstance(value, int):
        if abs(value) >= _INTEGER_CEILING:
            raise BencodeEncodeError(
                f"integer at {_format_path(path)} has more than {MAX_INTEGER_DIGITS} digits",
                path=tuple(path)
            )
        chunks.append(b"i%de" % value)
    elif isinstance(value, bytes):
        _encode_string(value, chunks)
    elif isinstance(value, (bytearray, memoryview)):
        _encode_string(bytes(value), chunks)
    elif isinstance(value, str):
        _encode_string(value.encode("utf-8"), chunks)
    elif isinstance(value, (list, tuple, dict)) and len(path) >= DEFAULT_MAX_DEPTH:
        raise BencodeEncodeError(
            f"nesting at {_format_path(path)} exceeds max depth {DEFAULT_MAX_DEPTH}", path=tuple(path)
        )
    elif isinstance(value, (list, tuple)):
        chunks.append(b"l")
        for i, item in enumerate(value):
            path.append(i)
            _encode(item, chunks, path)
            path.pop()
        chunks.append(b"e")
    elif isinstance(value, dict):
        chunks.append(b"d")
        for key, item in _sorted_items(value, path):
            _encode_string(key, chunks)
            path.append(key)
            _encode(item, chunks, path)
            path.pop()
        chunks.append(b"e")
    else:
        raise UnsupportedTypeError(
            f"cannot bencode {type(value).__name__} at {_format_path(path)}",
            path=tuple(path)
        )


def encode(value: Any) -> bytes:
    """
    serialize a value tree into canonical bencode

    Args:
        value: bytes, str, int, list/tuple or dict, nested arbitrarily

    Returns:
        bencoded bytes, dictionary keys sorted by raw bytes

    Raises:
        UnsupportedTypeError: an element or key outside the supported types
        BencodeEncodeError: two keys of one dictionary encode to the same bytes
    """
    chunks: List[bytes] = []
    _encode(value, chunks, [])
    return b"".join(chunks)
