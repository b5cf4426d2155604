"""Subject exceptions: unusable names and subjects."""

from typing import Any

from .base import NamespaceError


class InvalidSubjectError(NamespaceError):
    """Raised when an object cannot be wrapped by a namespace analyzer."""

    def __init__(self, subject: Any, reason: str):
        super().__init__(
            f"Invalid namespace subject: {reason}",
            details={"subject": type(subject).__name__},
        )
        self.subject = subject
        self.reason = reason


class InvalidNameError(NamespaceError):
    """Raised when a qualified name cannot be tokenized."""

    def __init__(self, name: str, reason: str):
        super().__init__(f"Invalid qualified name: {name!r}", details={"reason": reason})
        self.name = name
        self.reason = reason
