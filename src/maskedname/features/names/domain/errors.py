"""
Summary: Error taxonomy raised by name values and the masking engine.
Why: Callers distinguish bad input, bad masking, and implementation defects.
"""

from __future__ import annotations


class MaskedNameError(Exception):
    """Base class for all errors raised by the names feature."""


class ArgumentError(MaskedNameError, ValueError):
    """Raised when call-site input is structurally wrong."""


class IndexOutOfRangeError(ArgumentError, IndexError):
    """Raised when an index lies outside the range valid for an operation."""

    def __init__(self, index: int, size: int, *, allow_end: bool = False) -> None:
        upper = "]" if allow_end else ")"
        super().__init__(f"index {index} out of range [0, {size}{upper}")
        self.index: int = index
        self.size: int = size


class MaskingError(MaskedNameError, ValueError):
    """Raised when a masked component violates the escaping rules."""

    DANGLING_ESCAPE = "dangling escape"
    UNESCAPED_DELIMITER = "unescaped delimiter"

    def __init__(self, component: str, delimiter: str, reason: str) -> None:
        super().__init__(f"{reason} in component {component!r} for delimiter {delimiter!r}")
        self.component: str = component
        self.delimiter: str = delimiter
        self.reason: str = reason


class InvariantError(MaskedNameError, RuntimeError):
    """Raised when a name value's own invariant is found violated."""


class PostconditionError(InvariantError):
    """Raised when an operation's result breaks its guaranteed postcondition."""


__all__ = [
    "MaskedNameError",
    "ArgumentError",
    "IndexOutOfRangeError",
    "MaskingError",
    "InvariantError",
    "PostconditionError",
]
