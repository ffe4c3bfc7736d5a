"""
Summary: Name representation backed by an ordered tuple of masked components.
Why: Constant-time component access for names built component by component.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Self, final, override

from .errors import ArgumentError
from .masking import validate_masked
from .name import Name


@final
class ComponentListName(Name):
    """Name stored as a tuple of masked components."""

    __slots__ = ("_parts",)

    _parts: tuple[str, ...]

    def __init__(self, components: Iterable[str] = (), delimiter: str | None = None) -> None:
        """Initialize the name from masked components.

        Args:
            components: Masked components, each valid for ``delimiter``. The
                iterable is copied; later changes to it do not affect the name.
            delimiter: Single delimiter character, defaults to the configured one.

        Raises:
            ArgumentError: If ``components`` is not an iterable of strings or the
                delimiter is invalid.
            MaskingError: If any component is not properly masked.
        """
        super().__init__(delimiter)
        if components is None or isinstance(components, str):
            raise ArgumentError("components must be an iterable of masked strings")
        try:
            parts = tuple(components)
        except TypeError as e:
            raise ArgumentError("components must be an iterable of masked strings") from e

        for component in parts:
            validate_masked(component, self._delimiter)

        object.__setattr__(self, "_parts", parts)
        self._check_invariant()

    @classmethod
    def from_raw(cls, raw_components: Iterable[str], delimiter: str | None = None) -> ComponentListName:
        """Build a name from unescaped components, masking each one.

        Args:
            raw_components: Components as typed by a person.
            delimiter: Single delimiter character, defaults to the configured one.

        Returns:
            ComponentListName: Name whose raw components equal ``raw_components``.
        """
        resolved = cls._resolve_delimiter(delimiter)
        return cls(cls._mask_raw(raw_components, resolved), resolved)

    @override
    def _components(self) -> tuple[str, ...]:
        return self._parts

    @override
    def _with_components(self, components: list[str]) -> Self:
        return type(self)(components, self._delimiter)

    def __repr__(self) -> str:
        return f"ComponentListName({list(self._parts)!r}, delimiter={self._delimiter!r})"


__all__ = ["ComponentListName"]
