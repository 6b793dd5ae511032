"""
Recursive-descent reader for S-expressions in solver output.

Reads one character at a time from a text stream, so it can be used on a
pipe from a running solver. After a closing parenthesis the reader does not
fetch the next character; reading more could block on interactive input.
"""
from __future__ import annotations

import io
from dataclasses import dataclass, field
from typing import List, TextIO, Union

from ..errors import SExprParseError, smt_assert

# End-of-input marker for the current character.
_EOF = ""


@dataclass
class SExpr:
    """A parsed node: an atom (``str``) or a list of nodes."""
    data: Union[str, List["SExpr"]] = field(default_factory=list)

    @property
    def is_atom(self) -> bool:
        return isinstance(self.data, str)

    def as_atom(self) -> str:
        smt_assert(self.is_atom, "S-expression is not an atom")
        return self.data

    def as_list(self) -> List["SExpr"]:
        smt_assert(not self.is_atom, "S-expression is not a list")
        return self.data

    def to_string(self) -> str:
        """Render in canonical form: single spaces, no comments."""
        if self.is_atom:
            return self.data
        return "(" + " ".join(item.to_string() for item in self.data) + ")"

    def __str__(self) -> str:
        return self.to_string()


def _is_whitespace(c: str) -> bool:
    return c != _EOF and c.isspace()


class SExprParser:
    """Parses S-expressions from a character stream.

    Args:
        stream: Object with a ``read(n)`` method returning text
    """

    def __init__(self, stream: TextIO):
        self._input = stream
        self._exhausted = False
        self._token = _EOF
        self._advance()

    def parse_expression(self) -> SExpr:
        self._skip_whitespace()
        if self._token == "(":
            self._advance()
            self._skip_whitespace()
            sub_expressions: List[SExpr] = []
            while self._token != _EOF and self._token != ")":
                sub_expressions.append(self.parse_expression())
                self._skip_whitespace()
            smt_assert(self._token == ")", "Unbalanced parentheses in S-expression")
            # Pretend we saw whitespace instead of reading past the ')'.
            self._token = " "
            return SExpr(sub_expressions)
        smt_assert(self._token != ")", "Unbalanced parentheses in S-expression")
        return SExpr(self._parse_token())

    def is_eof(self) -> bool:
        """True once only whitespace and comments remain."""
        self._skip_whitespace()
        return self._token == _EOF

    def _parse_token(self) -> str:
        result = []
        self._skip_whitespace()
        is_pipe = self._token == "|"
        if is_pipe:
            self._advance()
        while self._token != _EOF:
            c = self._token
            if is_pipe and c == "|":
                self._advance()
                break
            elif not is_pipe and (_is_whitespace(c) or c == "(" or c == ")"):
                break
            result.append(c)
            self._advance()
        return "".join(result)

    def _advance(self) -> None:
        self._token = self._read()
        if self._token == ";":
            while self._token != "\n" and self._token != _EOF:
                self._token = self._read()

    def _read(self) -> str:
        if self._exhausted:
            raise SExprParseError("Read past end of input")
        try:
            c = self._input.read(1)
        except (OSError, ValueError) as e:
            raise SExprParseError(f"Cannot read S-expression input: {e}") from e
        if c == _EOF:
            self._exhausted = True
        return c

    def _skip_whitespace(self) -> None:
        while _is_whitespace(self._token):
            self._advance()


def parse_sexprs(text: str) -> List[SExpr]:
    """Parse every top-level S-expression in ``text``."""
    parser = SExprParser(io.StringIO(text))
    result: List[SExpr] = []
    while not parser.is_eof():
        result.append(parser.parse_expression())
    return result
