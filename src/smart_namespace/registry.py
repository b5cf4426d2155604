"""Registry: the store of named entities.

Maps canonical qualified names (``Dummy::Cell::Index``) to entities. Entries
are only ever added: ``build`` creates missing segments as empty
``Namespace`` placeholders, ``register`` defines an entity at a path. Nothing
is overwritten or removed.

A segment can hold children only when its entry is a container: a
``Namespace`` placeholder or a class. Any other value is a leaf.

All mutations happen under one re-entrant lock, so concurrent ``build``
calls over overlapping prefixes create each segment exactly once.

Usage:
    from smart_namespace.registry import Registry

    registry = Registry()
    registry.build("Dummy::Cell::Index")      # Namespace placeholders
    registry.register("Dummy::Base", Base)    # explicit entity
    registry.resolve("Dummy::Cell")           # -> Namespace(Dummy::Cell)
"""

from __future__ import annotations

import threading
from typing import Any, Iterator, Optional, Union

from .exceptions import InvalidNameError, NotFoundError, RegistryCollisionError
from .logging_config import get_logger
from .naming.tokens import NamePath, render, tokenize

logger = get_logger(__name__)

# Attribute set on registered classes so they can be used as subjects
NAME_ATTRIBUTE = "__namespace_name__"

PathLike = Union[str, NamePath]

_MISSING = object()


class Namespace:
    """Empty placeholder entity created for a missing path segment.

    Attributes:
        name: Canonical qualified name of this namespace.
    """

    __slots__ = ("name",)

    def __init__(self, name: str) -> None:
        self.name = name

    def __repr__(self) -> str:
        return f"Namespace({self.name})"

    def __str__(self) -> str:
        return self.name


def is_container(entity: Any) -> bool:
    """Whether ``entity`` may have child segments."""
    return isinstance(entity, (Namespace, type))


def _as_path(path: PathLike) -> NamePath:
    return path if isinstance(path, NamePath) else tokenize(path)


class Registry:
    """Thread-safe mapping of canonical paths to entities."""

    def __init__(self) -> None:
        self._entries: dict[str, Any] = {}
        self._lock = threading.RLock()

    def __contains__(self, path: PathLike) -> bool:
        try:
            key = render(_as_path(path))
        except InvalidNameError:
            return False
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self.paths())

    def paths(self) -> list[str]:
        """Defined paths in creation order."""
        with self._lock:
            return list(self._entries)

    def get(self, path: PathLike, default: Any = None) -> Any:
        key = render(_as_path(path))
        with self._lock:
            return self._entries.get(key, default)

    def resolve(self, path: PathLike) -> Any:
        """Return the entity at ``path``.

        Raises:
            NotFoundError: If any segment along the path is undefined
        """
        name_path = _as_path(path)
        full = render(name_path)
        with self._lock:
            for prefix in name_path.prefixes():
                key = render(prefix)
                if key not in self._entries:
                    raise NotFoundError(full, missing=key)
            return self._entries[full]

    def build(self, path: PathLike) -> Any:
        """Create every missing segment of ``path`` and return its entity.

        Existing segments are reused whatever they hold. Creation runs
        outermost first.

        Raises:
            RegistryCollisionError: If a segment that needs children is a leaf
        """
        name_path = _as_path(path)
        with self._lock:
            self._ensure(name_path)
            return self.resolve(name_path)

    def register(self, path: PathLike, entity: Any) -> Any:
        """Define ``entity`` at ``path``, building missing parents.

        Registering the same entity twice is a no-op.

        Raises:
            RegistryCollisionError: If the path already holds another entity
                or a parent segment is a leaf
        """
        name_path = _as_path(path)
        key = render(name_path)
        with self._lock:
            existing = self._entries.get(key, _MISSING)
            if existing is entity:
                return entity
            if existing is not _MISSING:
                raise RegistryCollisionError(key, existing, "path is already defined")

            parent = name_path.parent()
            if parent is not None:
                self._check_extendable(parent)
                self._ensure(parent)

            self._entries[key] = entity
            logger.debug(f"Registered {key} -> {entity!r}")

        if isinstance(entity, type) and NAME_ATTRIBUTE not in vars(entity):
            try:
                setattr(entity, NAME_ATTRIBUTE, key)
            except TypeError:
                logger.debug(f"Cannot tag {entity!r} with its qualified name")
        return entity

    def components(self, path: PathLike) -> list[Any]:
        """Entities for every cumulative prefix of ``path``.

        Raises:
            NotFoundError: If any prefix is undefined
        """
        return [self.resolve(prefix) for prefix in _as_path(path).prefixes()]

    def _ensure(self, name_path: NamePath) -> None:
        prefixes = name_path.prefixes()
        for index, prefix in enumerate(prefixes):
            key = render(prefix)
            existing = self._entries.get(key, _MISSING)
            if existing is _MISSING:
                self._entries[key] = Namespace(key)
                logger.debug(f"Created namespace {key}")
            elif index < len(prefixes) - 1 and not is_container(existing):
                raise RegistryCollisionError(key, existing, "cannot extend a leaf entry")

    def _check_extendable(self, name_path: NamePath) -> None:
        for prefix in name_path.prefixes():
            key = render(prefix)
            existing = self._entries.get(key, _MISSING)
            if existing is not _MISSING and not is_container(existing):
                raise RegistryCollisionError(key, existing, "cannot extend a leaf entry")


_default_registry: Optional[Registry] = None
_default_lock = threading.Lock()


def default_registry() -> Registry:
    """The process-wide registry used when no registry is injected."""
    global _default_registry
    if _default_registry is None:
        with _default_lock:
            if _default_registry is None:
                _default_registry = Registry()
    return _default_registry
