"""Shared pytest fixtures for name value tests."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from maskedname.features.names import ComponentListName, DelimitedStringName, Name

NameFactory = Callable[..., Name]


def _list_factory(components: list[str], delimiter: str | None = None) -> Name:
    return ComponentListName(components, delimiter)


def _string_factory(components: list[str], delimiter: str | None = None) -> Name:
    resolved = "." if delimiter is None else delimiter
    if components == [""]:
        # "" parses to no components, so a lone empty component comes from an edit.
        return DelimitedStringName("", resolved).with_appended("")
    return DelimitedStringName(resolved.join(components), resolved)


@pytest.fixture(params=[_list_factory, _string_factory], ids=["component-list", "delimited-string"])
def make_name(request: pytest.FixtureRequest) -> NameFactory:
    """Build a name from masked components in either representation."""

    return request.param
