"""
Summary: Tests for the masking engine free functions.
Why: Escaping, unescaping, validation and tokenizing must stay deterministic.
"""

import pytest

from maskedname.features.names import (
    ArgumentError,
    MaskingError,
    check_delimiter,
    escape_for_delimiter,
    is_masked,
    join_masked,
    split_masked,
    unescape,
    validate_masked,
)


@pytest.mark.parametrize(
    ("masked", "expected"),
    [
        ("", ""),
        ("plain", "plain"),
        (r"a\.b", "a.b"),
        (r"a\\b", "a\\b"),
        (r"\\\.", "\\."),
        (r"x\/y", "x/y"),
    ],
)
def test_unescape(masked: str, expected: str) -> None:
    """Escape characters are dropped and the next character kept literally."""
    assert unescape(masked) == expected


def test_unescape_drops_trailing_lone_escape() -> None:
    """Unescaping is lenient about a dangling escape."""
    assert unescape("abc\\") == "abc"


@pytest.mark.parametrize(
    ("raw", "delimiter", "expected"),
    [
        ("", ".", ""),
        ("a.b", ".", r"a\.b"),
        ("a.b", "/", "a.b"),
        ("a/b", "/", r"a\/b"),
        ("back\\slash", ".", r"back\\slash"),
        ("Oh...", ".", r"Oh\.\.\."),
    ],
)
def test_escape_for_delimiter(raw: str, delimiter: str, expected: str) -> None:
    """Only the escape character and the given delimiter are masked."""
    assert escape_for_delimiter(raw, delimiter) == expected


@pytest.mark.parametrize("raw", ["", "a", "a.b", "a\\b", "\\", "...", "\\.\\.", "/./", "x\\"])
@pytest.mark.parametrize("delimiter", [".", "/", ",", "#"])
def test_unescape_inverts_escape(raw: str, delimiter: str) -> None:
    """unescape(escape_for_delimiter(r, d)) == r for any raw string."""
    assert unescape(escape_for_delimiter(raw, delimiter)) == raw


@pytest.mark.parametrize("masked", ["", "abc", r"a\.b", r"a\\", r"\\\.x"])
def test_escape_inverts_unescape_for_valid_components(masked: str) -> None:
    """Valid masked components survive an unescape/escape cycle unchanged."""
    validate_masked(masked, ".")
    assert escape_for_delimiter(unescape(masked), ".") == masked


def test_validate_masked_rejects_dangling_escape() -> None:
    """A trailing lone escape character is a masking error."""
    with pytest.raises(MaskingError) as excinfo:
        validate_masked("a\\", ".")

    assert excinfo.value.reason == MaskingError.DANGLING_ESCAPE
    assert excinfo.value.component == "a\\"
    assert excinfo.value.delimiter == "."


def test_validate_masked_rejects_unescaped_delimiter() -> None:
    """A bare delimiter inside a component is a masking error."""
    with pytest.raises(MaskingError) as excinfo:
        validate_masked("a.b", ".")

    assert excinfo.value.reason == MaskingError.UNESCAPED_DELIMITER


def test_validate_masked_checks_against_given_delimiter_only() -> None:
    """Characters that are delimiters elsewhere are plain text here."""
    validate_masked("a.b", "/")
    with pytest.raises(MaskingError):
        validate_masked("a/b", "/")


def test_validate_masked_accepts_escaped_escape_before_delimiter_escape() -> None:
    """An even run of escapes does not protect a following delimiter."""
    validate_masked(r"a\\\.b", ".")
    with pytest.raises(MaskingError):
        validate_masked(r"a\\.b", ".")


def test_validate_masked_rejects_non_string() -> None:
    """Components must be strings."""
    with pytest.raises(ArgumentError):
        validate_masked(42, ".")


def test_is_masked() -> None:
    """is_masked mirrors validate_masked without raising."""
    assert is_masked(r"a\.b", ".")
    assert not is_masked("a.b", ".")
    assert not is_masked("a\\", ".")
    assert not is_masked(None, ".")


@pytest.mark.parametrize("delimiter", [None, "", "ab", 1, "\\"])
def test_check_delimiter_rejects_invalid(delimiter: object) -> None:
    """Delimiters must be exactly one non-escape character."""
    with pytest.raises(ArgumentError):
        _ = check_delimiter(delimiter)


def test_check_delimiter_returns_valid_delimiter() -> None:
    assert check_delimiter("/") == "/"


@pytest.mark.parametrize(
    ("masked_name", "delimiter", "expected"),
    [
        ("", ".", []),
        ("a", ".", ["a"]),
        ("a.b", ".", ["a", "b"]),
        ("a.b.", ".", ["a", "b", ""]),
        (".", ".", ["", ""]),
        ("///", "/", ["", "", "", ""]),
        (r"Oh\.\.\.", ".", [r"Oh\.\.\."]),
        (r"a\\.b", ".", [r"a\\", "b"]),
        (r"a\.b.c", ".", [r"a\.b", "c"]),
        ("a\\", ".", ["a\\"]),
    ],
)
def test_split_masked(masked_name: str, delimiter: str, expected: list[str]) -> None:
    """Escapes bind the next character; only unescaped delimiters split."""
    assert split_masked(masked_name, delimiter) == expected


def test_join_masked() -> None:
    assert join_masked([], ".") == ""
    assert join_masked([r"a\.b", "c"], ".") == r"a\.b.c"
    assert split_masked(join_masked([r"a\.b", "", "c"], "."), ".") == [r"a\.b", "", "c"]
