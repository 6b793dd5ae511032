"""
Exception types shared across the package.
"""


class SMTBridgeError(Exception):
    """Base class for errors raised by smtbridge."""


class SMTAssertionError(SMTBridgeError, AssertionError):
    """Raised when an internal contract is violated.

    Popping the last scope, an unexpected sort variant or an out-of-range
    tuple index are programming defects. Callers are not expected to
    recover from these.
    """


class SExprParseError(SMTBridgeError):
    """Raised when the s-expression input stream can no longer be read.

    This is distinct from a clean end of input: it signals truncated or
    corrupt solver output.
    """


def smt_assert(condition: bool, message: str = "") -> None:
    """Raise SMTAssertionError if condition does not hold."""
    if not condition:
        raise SMTAssertionError(message or "SMT contract violation")
