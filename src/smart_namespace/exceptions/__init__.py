"""Exception hierarchy for smart-namespace."""

from .base import NamespaceError
from .config import ConfigurationError, InvalidConfigError
from .registry import NotFoundError, RegistryCollisionError, RegistryError
from .subject import InvalidNameError, InvalidSubjectError

__all__ = [
    "NamespaceError",
    "RegistryError",
    "NotFoundError",
    "RegistryCollisionError",
    "InvalidSubjectError",
    "InvalidNameError",
    "ConfigurationError",
    "InvalidConfigError",
]
