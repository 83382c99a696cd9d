"""
Error handling for numvec.

Every failure raised by the vector core carries a numeric error code so
callers can branch on ``err.code`` without parsing messages.
"""

from __future__ import annotations

from typing import Optional


# =============================================================================
# Error Codes
# =============================================================================

# Success
NUMVEC_OK = 0

# Argument errors (10-19)
NUMVEC_ERROR_INVALID_ARGUMENT = 10

# Feature errors (40-49)
NUMVEC_ERROR_NOT_IMPLEMENTED = 40

# Numerical errors (50-59)
NUMVEC_ERROR_DIVISION_BY_ZERO = 51


_ERROR_MESSAGES = {
    NUMVEC_OK: "Success",
    NUMVEC_ERROR_INVALID_ARGUMENT: "Invalid argument",
    NUMVEC_ERROR_NOT_IMPLEMENTED: "Not implemented",
    NUMVEC_ERROR_DIVISION_BY_ZERO: "Division by zero",
}


# =============================================================================
# Exception Classes
# =============================================================================

class VectorError(Exception):
    """
    Base exception for all numvec errors.

    Attributes:
        code: Numeric error code (``NUMVEC_ERROR_*``)
        message: Human readable message
    """

    OK = NUMVEC_OK
    ERROR_INVALID_ARGUMENT = NUMVEC_ERROR_INVALID_ARGUMENT
    ERROR_NOT_IMPLEMENTED = NUMVEC_ERROR_NOT_IMPLEMENTED
    ERROR_DIVISION_BY_ZERO = NUMVEC_ERROR_DIVISION_BY_ZERO

    def __init__(self, code: int, message: Optional[str] = None):
        self.code = code
        if message is None:
            message = _ERROR_MESSAGES.get(code, f"Unknown error (code={code})")
        self.message = message
        super().__init__(f"Vector Error {code}: {message}")

    @classmethod
    def from_code(cls, code: int, context: str = "") -> "VectorError":
        """Create exception from error code with optional context."""
        base_msg = _ERROR_MESSAGES.get(code, "Unknown error")
        msg = f"{context}: {base_msg}" if context else base_msg
        return cls(code, msg)


class VectorZeroDivisionError(VectorError, ZeroDivisionError):
    """
    Raised when a divisor (scalar or element) is exactly zero.

    Also a ``ZeroDivisionError``, so ``except ArithmeticError`` catches it.
    """

    def __init__(self, message: Optional[str] = None):
        super().__init__(NUMVEC_ERROR_DIVISION_BY_ZERO, message)


def division_by_zero(context: str) -> VectorZeroDivisionError:
    """Build the division error raised by the divide family."""
    return VectorZeroDivisionError(
        f"{context}: {_ERROR_MESSAGES[NUMVEC_ERROR_DIVISION_BY_ZERO]}"
    )
