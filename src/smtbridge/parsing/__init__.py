"""Reading structured solver output."""

from .sexpr import SExpr, SExprParser, parse_sexprs

__all__ = ["SExpr", "SExprParser", "parse_sexprs"]
