"""Longest-match lookup against a prefix-closed table.

Scans a name one character at a time, the way a tokenizer consumes input
after ``&``: stop as soon as the text read so far is not a key, and return
the longest key seen whose value is a real match. Because the table is
prefix-closed, a missing key means no longer entity can match.
"""

from __future__ import annotations

from .records import SENTINEL


def longest_match(table, text):
    """Find the longest entity name matching a prefix of ``text``.

    Args:
        table: prefix-closed map of key -> (c0, c1)
        text: string starting with the entity name (without the leading '&')

    Raises:
        KeyError: if the scan leaves the table before reaching a key
            with a real codepoint value

    Returns:
        tuple: (entity_name, (c0, c1))
    """
    longest_match_len = 0
    longest_value = None

    for i in range(1, len(text) + 1):
        value = table.get(text[:i])
        if value is None:
            break
        if value != SENTINEL:
            longest_match_len = i
            longest_value = value

    if longest_match_len == 0:
        raise KeyError(f"no complete entity at the start of {text!r}")

    return text[:longest_match_len], longest_value


def decode_value(value) -> str:
    """Turn a codepoint pair into its string, dropping the padding ``0``."""
    if value == SENTINEL:
        raise ValueError("sentinel value does not decode to a character")
    return "".join(chr(codepoint) for codepoint in value if codepoint)


def decode_prefix(table, text):
    """Decode the longest entity at the start of ``text``.

    Returns:
        tuple: (decoded_string, consumed_length)
    """
    name, value = longest_match(table, text)
    return decode_value(value), len(name)
