"""
Summary: Immutable name value contract shared by every name representation.
Why: Callers edit, render and compare names without knowing how they are stored.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from typing import Any, NoReturn, Self

from maskedname.config import settings
from maskedname.platform.logging import logger

from .errors import ArgumentError, IndexOutOfRangeError, InvariantError, PostconditionError
from .masking import check_delimiter, escape_for_delimiter, join_masked, unescape, validate_masked


class Name(ABC):
    """A delimiter plus an ordered sequence of masked components.

    Names are values: they never change after construction, and every
    ``with_*`` operation and :meth:`concat` return a new name. Components are
    always handled in masked form; see :mod:`.masking`.
    """

    __slots__ = ("_delimiter",)

    _delimiter: str

    def __init__(self, delimiter: str | None = None) -> None:
        """Initialize the delimiter shared by all representations.

        Args:
            delimiter: Single delimiter character. ``None`` selects the
                configured default delimiter.

        Raises:
            ArgumentError: If the delimiter is not a single character.
        """
        object.__setattr__(self, "_delimiter", self._resolve_delimiter(delimiter))

    @staticmethod
    def _resolve_delimiter(delimiter: str | None) -> str:
        if delimiter is None:
            return settings.DEFAULT_DELIMITER
        return check_delimiter(delimiter)

    @staticmethod
    def _mask_raw(raw_components: Iterable[str], delimiter: str) -> list[str]:
        if raw_components is None or isinstance(raw_components, str):
            raise ArgumentError("raw components must be an iterable of strings")
        masked: list[str] = []
        for raw in raw_components:
            if not isinstance(raw, str):
                raise ArgumentError(f"raw component must be a string, got {type(raw).__name__}")
            masked.append(escape_for_delimiter(raw, delimiter))
        return masked

    # Storage -------------------------------------------------------------------

    @abstractmethod
    def _components(self) -> tuple[str, ...]:
        """Return the masked components in order."""

    @abstractmethod
    def _with_components(self, components: list[str]) -> Self:
        """Build a new name of the same representation and delimiter.

        Args:
            components: Masked components of the new name.

        Returns:
            Self: Newly constructed name.
        """

    # Queries -------------------------------------------------------------------

    @property
    def delimiter(self) -> str:
        """Delimiter character of this name."""
        return self._delimiter

    def component_count(self) -> int:
        return len(self._components())

    def is_empty(self) -> bool:
        return self.component_count() == 0

    def component(self, i: int) -> str:
        """Return the masked component at index ``i``.

        Raises:
            ArgumentError: If ``i`` is not an integer.
            IndexOutOfRangeError: If ``i`` is not in ``[0, component_count())``.
        """
        components = self._components()
        self._check_index(i, len(components))
        return components[i]

    def raw_components(self) -> list[str]:
        """Return every component unescaped."""
        return [unescape(component) for component in self._components()]

    # Edits ---------------------------------------------------------------------

    def with_component(self, i: int, component: str) -> Self:
        """Return a copy with the component at ``i`` replaced.

        Args:
            i: Index in ``[0, component_count())``.
            component: Masked component valid for this delimiter.

        Raises:
            ArgumentError: If ``i`` is not an integer.
            IndexOutOfRangeError: If ``i`` is out of range.
            MaskingError: If ``component`` is not properly masked.
        """
        validate_masked(component, self._delimiter)
        parts = list(self._components())
        self._check_index(i, len(parts))
        parts[i] = component
        return self._with_components(parts)

    def with_inserted(self, i: int, component: str) -> Self:
        """Return a copy with ``component`` inserted before index ``i``.

        ``i`` may equal :meth:`component_count`, which appends.
        """
        validate_masked(component, self._delimiter)
        parts = list(self._components())
        self._check_index(i, len(parts), allow_end=True)
        parts.insert(i, component)
        return self._with_components(parts)

    def with_appended(self, component: str) -> Self:
        """Return a copy with ``component`` added after the last component."""
        validate_masked(component, self._delimiter)
        parts = list(self._components())
        parts.append(component)
        return self._with_components(parts)

    def with_removed(self, i: int) -> Self:
        """Return a copy without the component at ``i``."""
        parts = list(self._components())
        self._check_index(i, len(parts))
        del parts[i]
        return self._with_components(parts)

    def concat(self, other: Name) -> Self:
        """Return a copy with all components of ``other`` appended.

        The result keeps this name's representation and delimiter, so
        ``other``'s masked components must be valid for this delimiter.

        Args:
            other: Name whose components are appended.

        Returns:
            Self: Name with ``self.component_count() + other.component_count()``
            components.

        Raises:
            ArgumentError: If ``other`` is not a name.
            MaskingError: If a component of ``other`` is not properly masked
                for this delimiter.
            PostconditionError: If the resulting count is not the sum of both.
        """
        if not isinstance(other, Name):
            raise ArgumentError(f"can only concat a Name, got {type(other).__name__}")

        appended = other._components()
        for component in appended:
            validate_masked(component, self._delimiter)

        result = self._with_components([*self._components(), *appended])
        expected = self.component_count() + len(appended)
        if result.component_count() != expected:
            self._fail(
                PostconditionError(
                    f"concat produced {result.component_count()} components, expected {expected}"
                )
            )
        return result

    # Rendering -----------------------------------------------------------------

    def as_human_string(self, delimiter: str | None = None) -> str:
        """Render unescaped components joined by ``delimiter``.

        The output is meant for people; it is not guaranteed to parse back.

        Args:
            delimiter: Single character to join with; defaults to this name's
                delimiter.

        Raises:
            ArgumentError: If ``delimiter`` is not a single character.
        """
        if delimiter is None:
            delimiter = self._delimiter
        elif not isinstance(delimiter, str) or len(delimiter) != 1:
            raise ArgumentError(f"delimiter must be a single character, got {delimiter!r}")
        return delimiter.join(self.raw_components())

    def as_machine_string(self) -> str:
        """Render components re-masked for the canonical machine delimiter.

        The result parses back, with ``MACHINE_DELIMITER``, into a name with
        the same raw components.
        """
        machine_delimiter = settings.MACHINE_DELIMITER
        return join_masked(
            (escape_for_delimiter(raw, machine_delimiter) for raw in self.raw_components()),
            machine_delimiter,
        )

    # Equality ------------------------------------------------------------------

    def equals(self, other: object) -> bool:
        """Return whether ``other`` is a name with the same delimiter and masked components."""
        if not isinstance(other, Name):
            return False
        return self._delimiter == other._delimiter and self._components() == other._components()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Name):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash((self._delimiter, self._components()))

    # Python protocol -----------------------------------------------------------

    def __len__(self) -> int:
        return self.component_count()

    def __iter__(self) -> Iterator[str]:
        return iter(self._components())

    def __str__(self) -> str:
        return self.as_machine_string()

    def __copy__(self) -> Self:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> Self:
        return self

    def __setattr__(self, key: str, value: object) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, key: str) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    # Contract checks -----------------------------------------------------------

    def _check_index(self, i: int, size: int, *, allow_end: bool = False) -> None:
        if isinstance(i, bool) or not isinstance(i, int):
            logger.debug(
                "Rejected index of type %s",
                type(i).__name__,
                extra={"event": "name.argument.rejected"},
            )
            raise ArgumentError(f"index must be an integer, got {type(i).__name__}")
        upper = size if allow_end else size - 1
        if i < 0 or i > upper:
            logger.debug(
                "Rejected index %d for %d components",
                i,
                size,
                extra={"event": "name.index.rejected"},
            )
            raise IndexOutOfRangeError(i, size, allow_end=allow_end)

    def _check_invariant(self) -> None:
        """Verify the delimiter and component count invariants.

        Raises:
            InvariantError: If either invariant is violated.
        """
        delimiter = getattr(self, "_delimiter", None)
        if not isinstance(delimiter, str) or len(delimiter) != 1:
            self._fail(InvariantError(f"delimiter must be a single character, got {delimiter!r}"))
        if len(self._components()) < 0:
            self._fail(InvariantError("component count must not be negative"))

    def _fail(self, error: InvariantError) -> NoReturn:
        logger.error("%s", error, extra={"event": "name.invariant.violated"})
        raise error


__all__ = ["Name"]
