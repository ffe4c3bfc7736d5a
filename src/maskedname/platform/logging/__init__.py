"""Logging facade exports.

Where: platform/logging/__init__.py
What: Re-export configured logger, setup helper, and the Rich name handler.
Why: Provide a single canonical import path for the names feature.
"""

from __future__ import annotations

from .config import DEFAULT_LOG_FILE, logger, setup_logger
from .handlers import NameRichHandler

__all__ = [
    "DEFAULT_LOG_FILE",
    "NameRichHandler",
    "logger",
    "setup_logger",
]
