"""Configuration exceptions: unreadable files and invalid settings."""

from pathlib import Path
from typing import Any, Optional

from .base import NamespaceError


class ConfigurationError(NamespaceError):
    """Base class for configuration-related errors."""

    def __init__(self, message: str, source: Optional[Path] = None):
        details = {"source": str(source)} if source is not None else None
        super().__init__(message, details=details)
        self.source = source


class InvalidConfigError(ConfigurationError):
    """Raised when configuration values are invalid."""

    def __init__(self, key: str, value: Any, reason: str):
        super().__init__(f"Invalid configuration for {key}: {value!r} ({reason})")
        self.key = key
        self.value = value
        self.reason = reason
