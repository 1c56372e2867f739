"""Input normalisation helpers."""

import string

_ASCII_LETTERS = frozenset(string.ascii_letters)


def fix_string(s: str) -> str:
    """Normalise romanised input.

    Surrounding whitespace and every non-letter are dropped, letters are
    lower-cased, and an ``o`` at the start or after a non-letter becomes ``O``.
    """
    result = []
    prev = " "
    for ch in s.strip():
        if ch in "oO" and prev not in _ASCII_LETTERS:
            result.append("O")
        elif ch in _ASCII_LETTERS:
            result.append(ch.lower())
        prev = ch
    return "".join(result)