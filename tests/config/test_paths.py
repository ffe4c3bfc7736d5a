"""Tests for configuration path resolution helpers."""

from pathlib import Path

from maskedname.config.paths import (
    default_config_path,
    default_log_dir,
    default_log_file,
    resolve_overridable_path,
)


def test_default_log_paths(portable_repo_root: Path) -> None:
    """Default log locations should live under the repository logs/ folder."""

    _ = portable_repo_root
    expected_dir = portable_repo_root / "logs"
    assert default_log_dir() == expected_dir
    assert default_log_file() == expected_dir / "maskedname.log"


def test_default_config_path(portable_repo_root: Path) -> None:
    assert default_config_path() == portable_repo_root / "config" / "maskedname.toml"


def test_config_path_env_override(portable_repo_root: Path, tmp_path: Path) -> None:
    """MASKEDNAME_CONFIG replaces the repository default."""

    _ = portable_repo_root
    override = tmp_path / "elsewhere" / "names.toml"

    resolved = default_config_path(env={"MASKEDNAME_CONFIG": str(override)})

    assert resolved == override.resolve()


def test_explicit_path_wins(tmp_path: Path) -> None:
    explicit = tmp_path / "explicit.toml"

    resolved = resolve_overridable_path(
        explicit_path=explicit,
        env={"ANY": str(tmp_path / "env.toml")},
        env_var="ANY",
        default_factory=lambda: tmp_path / "default.toml",
    )

    assert resolved == explicit.resolve()


def test_blank_env_value_falls_back_to_default(tmp_path: Path) -> None:
    resolved = resolve_overridable_path(
        explicit_path=None,
        env={"ANY": "   "},
        env_var="ANY",
        default_factory=lambda: tmp_path / "default.toml",
    )

    assert resolved == (tmp_path / "default.toml").resolve()
