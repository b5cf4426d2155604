"""Registry exceptions: lookups and conflicting definitions."""

from typing import Any, Optional

from .base import NamespaceError


class RegistryError(NamespaceError):
    """Base class for registry-related errors."""

    pass


class NotFoundError(RegistryError):
    """Raised when a path (or one of its prefixes) is not defined in the registry."""

    def __init__(self, path: str, missing: Optional[str] = None):
        missing = missing or path
        super().__init__(
            f"Uninitialized namespace: {path}",
            details={"path": path, "missing": missing},
        )
        self.path = path
        self.missing = missing


class RegistryCollisionError(RegistryError):
    """Raised when an existing entry prevents a path from being extended or defined."""

    def __init__(self, path: str, existing: Any, reason: str):
        super().__init__(
            f"Cannot define {path}: {reason}",
            details={"path": path, "existing": type(existing).__name__, "reason": reason},
        )
        self.path = path
        self.existing = existing
        self.reason = reason
