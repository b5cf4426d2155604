"""Namespace analyzer: role queries, path transforms and registry access.

Module-level functions work on any subject (see ``subject.py``) and an
optional injected ``Registry``; without one the process-wide default
registry is used. ``NamespaceAnalyzer`` binds a single subject and exposes
the same operations as methods.

Usage:
    from smart_namespace import Role, namespace, transform

    transform("User::Cell::Index", [Role.RESOURCE, "endpoint", Role.HANDLE])
    # -> entity at User::Endpoint::Index

    namespace(Admin.UsersController).concept()
    # -> 'controller'
"""

from __future__ import annotations

import sys
from typing import Any, Callable, Iterable, Optional, TextIO

from .config import DEFAULT_CONFIG, NamespaceConfig
from .exceptions import InvalidSubjectError, NotFoundError
from .logging_config import get_logger
from .naming import roles
from .naming.roles import Role
from .naming.tokens import NamePath, path, render
from .registry import Registry, default_registry
from .subject import is_analyzer, name_path_of

logger = get_logger(__name__)

INFO_FIELDS = (
    "components",
    "modules",
    "sections",
    "scope",
    "concept",
    "resource",
    "service",
    "handle",
)


def _registry(registry: Optional[Registry]) -> Registry:
    return registry if registry is not None else default_registry()


def resolve(*items: Any, registry: Optional[Registry] = None) -> Any:
    """Resolve an existing entity by classified items.

        >>> resolve("dummy", "cell", "Show")   # Dummy::Cell::Show

    Raises:
        NotFoundError: If the path is not defined
    """
    return _registry(registry).resolve(path(*items))


def build(*items: Any, registry: Optional[Registry] = None) -> Any:
    """Resolve an entity by classified items, creating missing segments.

        >>> build("hammer", "commands", "Enter")   # Hammer::Command::Enter
    """
    return _registry(registry).build(path(*items))


def render_request(subject: Any, request: Iterable[Any]) -> list[Any]:
    """Replace every role reference in ``request`` by its value for ``subject``."""
    name_path = name_path_of(subject)
    items = []
    for item in request:
        role = Role.coerce(item)
        items.append(roles.derive(name_path, role) if role is not None else item)
    return items


def transform(
    subject: Any,
    request: Iterable[Any],
    resolve: bool = True,
    registry: Optional[Registry] = None,
) -> Any:
    """Build a sibling path of ``subject`` from literals and role references.

        >>> transform("User::Cell::Index", [Role.RESOURCE, "endpoint", Role.HANDLE], False)
        'User::Endpoint::Index'
        >>> transform("Admin::UsersController", ["__scope__", "home_controller"], False)
        'Admin::HomeController'

    Roles without a value for ``subject`` are left out of the result.

    Args:
        subject: Subject whose roles fill the references
        request: Literal items and ``Role`` members (or their marker strings)
        resolve: Look the result up in the registry instead of returning it
        registry: Registry to resolve against

    Raises:
        NotFoundError: If ``resolve`` is set and the target does not exist
    """
    target = path(*render_request(subject, request))
    logger.debug(f"Transformed {render(name_path_of(subject))} -> {target}")
    if resolve:
        return _registry(registry).resolve(target)
    return target


def components(subject: Any, registry: Optional[Registry] = None) -> list[Any]:
    """Entities for each cumulative prefix of ``subject``.

        >>> components("User::Endpoint::Index")
        [Namespace(User), Namespace(User::Endpoint), Namespace(User::Endpoint::Index)]
    """
    return _registry(registry).components(name_path_of(subject))


def info(
    subject: Any,
    registry: Optional[Registry] = None,
    file: Optional[TextIO] = None,
    config: NamespaceConfig = DEFAULT_CONFIG,
) -> None:
    """Print every role of ``subject``, one per line. Debugging aid.

    Best-effort: components missing from the registry are reported on the
    components line instead of raising.
    """
    out = file if file is not None else sys.stdout
    analyzer = NamespaceAnalyzer(subject, registry=registry)
    ruler = "-" * config.info_width

    lines = [ruler, f"=> {render(analyzer.name_path)} <="]
    for field in INFO_FIELDS:
        value = _display(field, analyzer)
        lines.append(f"{field.ljust(config.info_label_width)}-> {value}")
    lines.append(ruler)

    print("\n".join(lines), file=out)


def _display(field: str, analyzer: NamespaceAnalyzer) -> str:
    if field == "components":
        rendered = "[" + ", ".join(render(p) for p in analyzer.name_path.prefixes()) + "]"
        try:
            analyzer.components()
        except NotFoundError as e:
            return f"{rendered} (missing: {e.missing})"
        return rendered
    value = getattr(analyzer, field)()
    return "" if value is None else str(value)


class NamespaceAnalyzer:
    """Role queries bound to one subject.

    The subject's name is read on every query, so roles always reflect its
    current name.

    Attributes:
        subject: The wrapped object
        registry: Registry used by components/transform (None = default)
    """

    def __init__(self, subject: Any, registry: Optional[Registry] = None) -> None:
        if is_analyzer(subject):
            raise InvalidSubjectError(subject, "cannot re-wrap a namespace analyzer")
        self.subject = subject
        self.registry = registry
        # Fail fast on subjects without a usable name
        name_path_of(subject)

    def __repr__(self) -> str:
        return f"NamespaceAnalyzer({render(self.name_path)})"

    @property
    def name_path(self) -> NamePath:
        return name_path_of(self.subject)

    def components(self) -> list[Any]:
        return components(self.name_path, registry=self.registry)

    def modules(self) -> list[str]:
        return roles.modules(self.name_path)

    def sections(self) -> list[str]:
        return roles.sections(self.name_path)

    def scope(self) -> Optional[str]:
        return roles.scope(self.name_path)

    def concept(self) -> Optional[str]:
        return roles.concept(self.name_path)

    def resource(self) -> str:
        return roles.resource(self.name_path)

    def service(self) -> Optional[str]:
        return roles.service(self.name_path)

    def section(self, pos: int = 0) -> Optional[str]:
        return roles.section(self.name_path, pos)

    def handle(self) -> Optional[str]:
        return roles.handle(self.name_path)

    def transform(self, request: Iterable[Any], resolve: bool = True) -> Any:
        return transform(self.name_path, request, resolve=resolve, registry=self.registry)

    def info(self, file: Optional[TextIO] = None, config: NamespaceConfig = DEFAULT_CONFIG) -> None:
        info(self.name_path, registry=self.registry, file=file, config=config)


def namespace(subject: Any, registry: Optional[Registry] = None) -> NamespaceAnalyzer:
    """Fresh analyzer for ``subject``; every call returns a new instance."""
    return NamespaceAnalyzer(subject, registry=registry)


class _NamespaceAccessor:
    def __get__(self, instance: Any, owner: type) -> Callable[..., NamespaceAnalyzer]:
        subject = owner if instance is None else instance

        def accessor(registry: Optional[Registry] = None) -> NamespaceAnalyzer:
            return NamespaceAnalyzer(subject, registry=registry)

        return accessor


class NamespaceMixin:
    """Adds ``namespace()`` to a class and its instances."""

    namespace = _NamespaceAccessor()
