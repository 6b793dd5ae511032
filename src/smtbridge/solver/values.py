"""Extraction of `(get-value ...)` results from raw solver replies."""

from __future__ import annotations

import re
from typing import Any, List


def parse_values(reply: str) -> List[str]:
    """Return the value token of each ``(name value)`` pair in a reply.

    The first line (the sat/unsat verdict) is skipped. Values are returned in
    the order they appear in the reply.

    This is a lexical scan, not a full S-expression parse: a value ends at the
    first closing parenthesis, so only primitive values (numerals, booleans,
    bitvector literals) come back intact.
    """
    end = len(reply)
    newline = reply.find("\n")
    if newline < 0:
        return []
    start = _find(reply, "(", newline, end)

    values: List[str] = []
    while start < end:
        val_start = _find(reply, " ", start, end)
        if val_start < end:
            val_start += 1
        val_end = _find(reply, ")", val_start, end)
        values.append(reply[val_start:val_end])
        start = _find(reply, "(", val_end, end)
    return values


def _find(text: str, char: str, start: int, end: int) -> int:
    pos = text.find(char, start, end)
    return end if pos < 0 else pos


def decode_value(token: str) -> Any:
    """Convert a primitive SMT-LIB value token to a Python value.

    Booleans, decimal numerals and ``#b``/``#x`` bitvector literals are
    converted; ``(- N`` (a negative numeral cut short by the lexical scan)
    and ``(- N)`` become negative ints. Anything else is returned unchanged.
    """
    s = token.strip()
    if s == "true":
        return True
    if s == "false":
        return False
    if s.startswith("#b") and re.fullmatch(r"#b[01]+", s):
        return int(s[2:], 2)
    if s.startswith("#x") and re.fullmatch(r"#x[0-9a-fA-F]+", s):
        return int(s[2:], 16)
    if re.fullmatch(r"-?\d+", s):
        return int(s)
    m = re.fullmatch(r"\(\s*-\s+(\d+)\s*\)?", s)
    if m:
        return -int(m.group(1))
    return token
