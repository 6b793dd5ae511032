"""Translation of sorts and expressions to SMT-LIB2 script text."""

from .encoder import SMTLib2Encoder

__all__ = ["SMTLib2Encoder"]
