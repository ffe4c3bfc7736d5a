"""Where: src/maskedname/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Expose validated constants to the names feature without file I/O.
Assumptions: - The escape character and machine delimiter are fixed, never configured.
Trade-offs: - Invalid config values fall back to defaults instead of failing import.
"""

from __future__ import annotations

import logging

from maskedname.config.config import config as app_config

# Fixed masking characters -----------------------------------------------------

# Marks the following character as literal. Not configurable.
ESCAPE_CHARACTER: str = "\\"

# Canonical delimiter of the machine string form. Machine strings written by
# one process must parse in another, so this never follows the config.
MACHINE_DELIMITER: str = "."


# Configurable defaults --------------------------------------------------------

_default_delimiter = getattr(app_config, "default_delimiter", ".")
DEFAULT_DELIMITER: str = (
    _default_delimiter
    if isinstance(_default_delimiter, str)
    and len(_default_delimiter) == 1
    and _default_delimiter != ESCAPE_CHARACTER
    else "."
)

_log_level = str(getattr(app_config, "log_level", "WARNING")).upper()
LOG_LEVEL: int = (
    logging.getLevelNamesMapping()[_log_level]
    if _log_level in logging.getLevelNamesMapping()
    else logging.WARNING
)


__all__ = [
    "ESCAPE_CHARACTER",
    "MACHINE_DELIMITER",
    "DEFAULT_DELIMITER",
    "LOG_LEVEL",
]
