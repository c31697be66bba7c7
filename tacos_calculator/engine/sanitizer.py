"""Keystroke-level input sanitizer for monetary fields."""

from __future__ import annotations


def sanitize(text: str) -> str:
    """Reduce arbitrary text to digits with at most one decimal point.

    Currency symbols, thousands separators, signs, letters and any decimal
    point after the first are dropped; digits are kept in order.

        >>> sanitize("$1,234.5.6")
        '1234.56'

    The result is not guaranteed to be a number (``""`` and ``"."`` are
    possible) and sanitizing twice gives the same string.
    """
    kept: list[str] = []
    seen_point = False
    for ch in text:
        if "0" <= ch <= "9":
            kept.append(ch)
        elif ch == "." and not seen_point:
            kept.append(ch)
            seen_point = True
    return "".join(kept)
