"""Structured, escape-aware names for hierarchical paths."""

from maskedname.config.settings import DEFAULT_DELIMITER, ESCAPE_CHARACTER, MACHINE_DELIMITER
from maskedname.features.names import (
    ArgumentError,
    ComponentListName,
    DelimitedStringName,
    IndexOutOfRangeError,
    InvariantError,
    MaskedNameError,
    MaskingError,
    Name,
    PostconditionError,
    escape_for_delimiter,
    is_masked,
    unescape,
    validate_masked,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_DELIMITER",
    "ESCAPE_CHARACTER",
    "MACHINE_DELIMITER",
    "Name",
    "ComponentListName",
    "DelimitedStringName",
    "escape_for_delimiter",
    "is_masked",
    "unescape",
    "validate_masked",
    "MaskedNameError",
    "ArgumentError",
    "IndexOutOfRangeError",
    "MaskingError",
    "InvariantError",
    "PostconditionError",
]
