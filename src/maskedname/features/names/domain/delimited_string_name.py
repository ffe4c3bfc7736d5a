"""
Summary: Name representation backed by a single masked, delimiter-joined string.
Why: Names read from text keep their masked form and tokenize it only once.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Self, final, override

from maskedname.config import settings
from maskedname.platform.logging import logger

from .errors import ArgumentError
from .masking import join_masked, split_masked, validate_masked
from .name import Name


@final
class DelimitedStringName(Name):
    """Name stored as one masked string.

    The string is tokenized at construction: an escape character always takes
    the following character with it, an unescaped delimiter separates
    components. ``""`` has no components and ``"a.b."`` has three, the last
    one empty.

    A name holding a single empty component also renders as ``""``. Such a
    name is produced by edits only; parsing ``""`` always yields no components.
    """

    __slots__ = ("_masked", "_parts")

    _masked: str
    _parts: tuple[str, ...]

    def __init__(self, masked_name: str = "", delimiter: str | None = None) -> None:
        """Initialize the name by parsing a masked string.

        Args:
            masked_name: Masked components joined by ``delimiter``.
            delimiter: Single delimiter character, defaults to the configured one.

        Raises:
            ArgumentError: If ``masked_name`` is not a string or the delimiter is
                invalid.
            MaskingError: If a parsed component ends with a dangling escape.
        """
        super().__init__(delimiter)
        if not isinstance(masked_name, str):
            raise ArgumentError(f"masked name must be a string, got {type(masked_name).__name__}")

        parts = split_masked(masked_name, self._delimiter)
        for component in parts:
            validate_masked(component, self._delimiter)

        logger.debug(
            "Parsed masked name into %d components",
            len(parts),
            extra={"event": "name.parse", "name_text": masked_name, "delimiter": self._delimiter},
        )
        self._assign(masked_name, tuple(parts))

    @classmethod
    def from_machine_string(cls, text: str) -> DelimitedStringName:
        """Parse a string produced by :meth:`Name.as_machine_string`."""
        return cls(text, settings.MACHINE_DELIMITER)

    @classmethod
    def from_raw(cls, raw_components: Iterable[str], delimiter: str | None = None) -> DelimitedStringName:
        """Build a name from unescaped components, masking each one."""
        resolved = cls._resolve_delimiter(delimiter)
        return cls._from_components(cls._mask_raw(raw_components, resolved), resolved)

    @classmethod
    def _from_components(cls, components: list[str], delimiter: str) -> DelimitedStringName:
        """Build a name from masked components without reparsing.

        Joining needs no re-escaping because masked components contain no
        unescaped delimiter.
        """
        name = cls.__new__(cls)
        Name.__init__(name, delimiter)
        for component in components:
            validate_masked(component, delimiter)
        name._assign(join_masked(components, delimiter), tuple(components))
        return name

    def _assign(self, masked_name: str, parts: tuple[str, ...]) -> None:
        object.__setattr__(self, "_masked", masked_name)
        object.__setattr__(self, "_parts", parts)
        self._check_invariant()

    @property
    def masked_string(self) -> str:
        """The masked, delimiter-joined backing string."""
        return self._masked

    @override
    def _components(self) -> tuple[str, ...]:
        return self._parts

    @override
    def _with_components(self, components: list[str]) -> Self:
        return type(self)._from_components(components, self._delimiter)

    def __repr__(self) -> str:
        return f"DelimitedStringName({self._masked!r}, delimiter={self._delimiter!r})"


__all__ = ["DelimitedStringName"]
