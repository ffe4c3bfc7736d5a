"""
Summary: Escape-aware masking, unmasking, validation and tokenizing of name components.
Why: Both name representations share one deterministic definition of the wire form.
"""

from __future__ import annotations

from collections.abc import Iterable

from maskedname.config.settings import ESCAPE_CHARACTER
from maskedname.platform.logging import logger

from .errors import ArgumentError, MaskingError


def check_delimiter(delimiter: object) -> str:
    """Ensure ``delimiter`` is usable as a name delimiter.

    Args:
        delimiter: Candidate delimiter.

    Returns:
        str: The delimiter, unchanged.

    Raises:
        ArgumentError: If the delimiter is missing, not a string, not exactly
            one character long, or the escape character.
    """
    if delimiter is None:
        raise ArgumentError("delimiter must not be None")
    if not isinstance(delimiter, str):
        raise ArgumentError(f"delimiter must be a string, got {type(delimiter).__name__}")
    if len(delimiter) != 1:
        raise ArgumentError(f"delimiter must be a single character, got {delimiter!r}")
    if delimiter == ESCAPE_CHARACTER:
        raise ArgumentError("delimiter must not be the escape character")
    return delimiter


def unescape(masked: str) -> str:
    """Turn a masked component into its raw value.

    A trailing lone escape character is dropped.
    """
    result: list[str] = []
    index = 0
    while index < len(masked):
        char = masked[index]
        if char == ESCAPE_CHARACTER:
            index += 1
            if index < len(masked):
                result.append(masked[index])
        else:
            result.append(char)
        index += 1
    return "".join(result)


def escape_for_delimiter(raw: str, delimiter: str) -> str:
    """Mask a raw component for ``delimiter``.

    Every escape character and every delimiter character is prefixed with
    the escape character.
    """
    result: list[str] = []
    for char in raw:
        if char == ESCAPE_CHARACTER or char == delimiter:
            result.append(ESCAPE_CHARACTER)
        result.append(char)
    return "".join(result)


def validate_masked(masked: object, delimiter: str) -> None:
    """Check that ``masked`` is a well-formed masked component for ``delimiter``.

    Args:
        masked: Candidate masked component.
        delimiter: Delimiter the component will be placed between.

    Raises:
        ArgumentError: If ``masked`` is not a string or the delimiter is invalid.
        MaskingError: If the component ends with a dangling escape or contains
            an unescaped delimiter.
    """
    _ = check_delimiter(delimiter)
    if not isinstance(masked, str):
        logger.debug(
            "Rejected non-string component of type %s",
            type(masked).__name__,
            extra={"event": "name.argument.rejected"},
        )
        raise ArgumentError(f"component must be a string, got {type(masked).__name__}")

    index = 0
    while index < len(masked):
        char = masked[index]
        if char == ESCAPE_CHARACTER:
            if index + 1 >= len(masked):
                _reject(masked, delimiter, MaskingError.DANGLING_ESCAPE)
            index += 2
            continue
        if char == delimiter:
            _reject(masked, delimiter, MaskingError.UNESCAPED_DELIMITER)
        index += 1


def is_masked(masked: object, delimiter: str) -> bool:
    """Return whether ``masked`` passes :func:`validate_masked`.

    Raises:
        ArgumentError: If the delimiter itself is invalid.
    """

    _ = check_delimiter(delimiter)
    if not isinstance(masked, str):
        return False
    try:
        validate_masked(masked, delimiter)
    except MaskingError:
        return False
    return True


def split_masked(masked_name: str, delimiter: str) -> list[str]:
    """Split a masked name string into its masked components.

    The escape character keeps itself and the following character in the
    current component, so escaped delimiters never split. A dangling escape at
    the end stays in the last component for validation to reject.

    Args:
        masked_name: Masked name string.
        delimiter: Delimiter separating components.

    Returns:
        list[str]: Masked components; empty for an empty string.
    """
    if not masked_name:
        return []

    parts: list[str] = []
    current: list[str] = []
    index = 0
    while index < len(masked_name):
        char = masked_name[index]
        if char == ESCAPE_CHARACTER:
            current.append(masked_name[index : index + 2])
            index += 2
            continue
        if char == delimiter:
            parts.append("".join(current))
            current = []
        else:
            current.append(char)
        index += 1

    parts.append("".join(current))
    return parts


def join_masked(components: Iterable[str], delimiter: str) -> str:
    """Join already masked components with ``delimiter``."""

    return delimiter.join(components)


def _reject(masked: str, delimiter: str, reason: str) -> None:
    logger.debug(
        "Rejected masked component (%s)",
        reason,
        extra={"event": "name.mask.rejected", "name_text": masked, "delimiter": delimiter},
    )
    raise MaskingError(masked, delimiter, reason)


__all__ = [
    "check_delimiter",
    "unescape",
    "escape_for_delimiter",
    "validate_masked",
    "is_masked",
    "split_masked",
    "join_masked",
]
