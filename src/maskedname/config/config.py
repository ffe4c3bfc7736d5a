"""Configuration management for maskedname."""
import logging
import tomllib
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, ClassVar

from maskedname.config.file_ops import write_text_file
from maskedname.config.paths import default_config_path

# Handlers are attached by maskedname.platform.logging, which imports this module.
logger = logging.getLogger("maskedname")


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Library configuration."""

    # Delimiter used by names constructed without an explicit one
    default_delimiter: str = "."

    # Log file path; console logging only when unset
    log_file: Path | None = _path_field()

    # Console log level name
    log_level: str = "WARNING"

    # Singleton instance
    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""
        from dataclasses import fields

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value else None)

    def save(self) -> None:
        """Save configuration to file."""
        config_dict = asdict(self)

        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        try:
            target = default_config_path()
            content = self._render_toml(config_dict)
            write_text_file(target, content)
            logger.info("Configuration saved to %s", target)
        except Exception as e:
            logger.error("Failed to save configuration: %s", e)
            raise

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# maskedname Configuration File")
        lines.append("")

        lines.append("# Delimiter character for names built without an explicit delimiter")
        lines.append("# Must be exactly one character and must not be the escape character '\\'")
        lines.append(
            f"default_delimiter = {self._format_toml_value(config['default_delimiter'])}"
        )
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "/path/to/logs/maskedname.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        lines.append("# Console log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)")
        lines.append(f"log_level = {self._format_toml_value(config['log_level'])}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization.

        Args:
            value: Value to format

        Returns:
            str: Formatted value
        """
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from file.

        A missing file yields the defaults; nothing is written implicitly.

        Returns:
            Config: Loaded configuration object.
        """
        if cls._instance is not None:
            return cls._instance

        config_file = default_config_path()

        try:
            if config_file.exists():
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)

                _ = config_dict.setdefault("default_delimiter", ".")
                _ = config_dict.setdefault("log_file", None)
                _ = config_dict.setdefault("log_level", "WARNING")

                logger.info("Configuration loaded from %s", config_file)
                instance = cls(**config_dict)
            else:
                instance = cls()

            cls._instance = instance
            cls._loaded_from = config_file
            return instance

        except Exception as e:
            logger.error("Failed to load configuration: %s", e)
            raise


# Global configuration instance
config = Config.load()
