"""Ordering and equality functions for text strings."""

from __future__ import annotations

from typing import Union

Text = Union[str, bytes]

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def _ascii_lower(string: Text) -> Text:
    """Lower-case only the ASCII letters of a string, leaving all else alone."""
    if isinstance(string, bytes):
        return string.lower()
    if isinstance(string, str):
        return string.translate(_ASCII_LOWER)
    raise TypeError(f"expected str or bytes, got {type(string).__name__}")


def _sign(a: Text, b: Text) -> int:
    if type(a) is not type(b):
        raise TypeError("cannot compare str with bytes")
    return (a > b) - (a < b)


def string_equal(string1: Text, string2: Text) -> bool:
    """Return True if the two strings are identical."""
    return _sign(string1, string2) == 0


def string_compare(string1: Text, string2: Text) -> int:
    """Return -1, 0 or 1 as string1 sorts before, equal to or after string2."""
    return _sign(string1, string2)


def string_nocase_equal(string1: Text, string2: Text) -> bool:
    """Return True if the strings are equal when ASCII letter case is ignored."""
    return string_nocase_compare(string1, string2) == 0


def string_nocase_compare(string1: Text, string2: Text) -> int:
    """Compare two strings ignoring ASCII letter case; return -1, 0 or 1."""
    return _sign(_ascii_lower(string1), _ascii_lower(string2))