"""
smart-namespace - Role inference for hierarchical qualified names

Derives what a name like ``Admin::UsersController`` or
``User::Endpoint::Index`` is about (scope, concept, resource, service,
section, handle) and rebuilds sibling names from those roles, resolving or
lazily creating the named entities in a registry.
"""

__version__ = "1.0.0"

from .analyzer import (
    NamespaceAnalyzer,
    NamespaceMixin,
    build,
    components,
    info,
    namespace,
    resolve,
    transform,
)
from .exceptions import (
    InvalidNameError,
    InvalidSubjectError,
    NamespaceError,
    NotFoundError,
    RegistryCollisionError,
)
from .naming import NamePath, Role, path, render, tokenize
from .registry import Namespace, Registry, default_registry

__all__ = [
    # Analyzer
    "NamespaceAnalyzer",
    "NamespaceMixin",
    "namespace",
    "build",
    "components",
    "info",
    "resolve",
    "transform",
    # Names
    "NamePath",
    "Role",
    "path",
    "render",
    "tokenize",
    # Registry
    "Namespace",
    "Registry",
    "default_registry",
    # Errors
    "NamespaceError",
    "NotFoundError",
    "RegistryCollisionError",
    "InvalidSubjectError",
    "InvalidNameError",
]
