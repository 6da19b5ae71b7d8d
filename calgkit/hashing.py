"""Hash functions producing unsigned 32-bit keys."""

from __future__ import annotations

import operator
from typing import Any, Union

_MASK = 0xFFFFFFFF
_DJB2_SEED = 5381


def _as_bytes(string: Union[str, bytes]) -> bytes:
    if isinstance(string, bytes):
        return string
    if isinstance(string, str):
        return string.encode("utf-8")
    raise TypeError(f"expected str or bytes, got {type(string).__name__}")


def _djb2(data: bytes) -> int:
    result = _DJB2_SEED
    for byte in data:
        result = ((result << 5) + result + byte) & _MASK
    return result


def int_hash(value: int) -> int:
    """Hash an integer by reducing it to an unsigned 32-bit value."""
    return operator.index(value) & _MASK


def pointer_hash(obj: Any) -> int:
    """Hash an object by its identity, ignoring its contents."""
    return id(obj) & _MASK


def string_hash(string: Union[str, bytes]) -> int:
    """Hash a string with the djb2 algorithm over its UTF-8 bytes."""
    return _djb2(_as_bytes(string))


def string_nocase_hash(string: Union[str, bytes]) -> int:
    """Hash a string with djb2, folding ASCII letters to lower case first."""
    return _djb2(_as_bytes(string).lower())