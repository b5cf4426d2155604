"""Role derivation over qualified names.

Roles are derived views over a ``NamePath``. They are recomputed on every
query and never stored.

    Role       Rule                                              User::GamesHelper
    --------   -----------------------------------------------   -----------------
    scope      first token, needs >= 2 tokens                    user
    concept    last word of the first camel-cased token          helper
    resource   camel token minus its last word (or t[-3] when    game
               the path has more than 3 tokens), singularized
    service    second-to-last token, needs >= 3 tokens           None
    section    token at a position, negative counts from end     user (pos 0)
    handle     last token, needs >= 3 tokens                     None

A camel-cased token is one made of two or more title-case words, where a
word is an uppercase letter followed by lowercase letters or digits
(``UsersController``, ``CategoriesInitializer``).
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Any, Optional

from . import inflector
from .tokens import NamePath, to_snake_symbol

# Token made of at least two title-case words
MODULE_DETECT_PATTERN = re.compile(r"^(?:[A-Z][a-z0-9]+){2,}$")

# Keeps every word but the last: MyUsersController -> MyUsers
RESOURCE_CLEAN_PATTERN = re.compile(r"^((?:[A-Z][a-z0-9]+)+?)(?:[A-Z][a-z0-9]+)?$")

# Keeps only the last word: MyUsersController -> Controller
CONCEPT_CLEAN_PATTERN = re.compile(r"^(?:[A-Z][a-z0-9]+)+([A-Z][a-z0-9]+)$")


class Role(Enum):
    """Role references usable inside a render request.

    Values are the marker strings callers may pass instead of the members.
    """

    SCOPE = "__scope__"
    CONCEPT = "__concept__"
    RESOURCE = "__resource__"
    SECTION = "__section__"
    SERVICE = "__service__"
    HANDLE = "__handle__"

    @classmethod
    def coerce(cls, item: Any) -> Optional[Role]:
        """Return the role an item refers to, or None for literal items."""
        if isinstance(item, cls):
            return item
        if isinstance(item, str):
            try:
                return cls(item)
            except ValueError:
                return None
        return None


def modules(path: NamePath) -> list[str]:
    return list(path.tokens)


def sections(path: NamePath) -> list[str]:
    return [to_snake_symbol(token) for token in path.tokens]


def _detect(path: NamePath, pattern: re.Pattern[str]) -> Optional[str]:
    return next((token for token in path.tokens if pattern.search(token)), None)


def scope(path: NamePath) -> Optional[str]:
    """First token; paths with a single token have no scope."""
    if len(path) < 2:
        return None
    return to_snake_symbol(path[0])


def concept(path: NamePath, pattern: re.Pattern[str] = MODULE_DETECT_PATTERN) -> Optional[str]:
    """Last word of the first camel-cased token.

        >>> concept(tokenize("Admin::UsersController"))
        'controller'
        >>> concept(tokenize("User::Endpoint::Index")) is None
        True
    """
    token = _detect(path, pattern)
    if token is None:
        return None
    return to_snake_symbol(CONCEPT_CLEAN_PATTERN.sub(r"\1", token))


def resource(path: NamePath, pattern: re.Pattern[str] = MODULE_DETECT_PATTERN) -> str:
    """What the path is about.

    Up to three tokens: the first camel-cased token without its last word,
    falling back to the first token. Longer paths use the third token from
    the end. The result is singularized.

        >>> resource(tokenize("Home::CategoriesInitializer::Users"))
        'category'
        >>> resource(tokenize("Dummy::Resolver::UserHandler::Cmd::Import"))
        'user_handler'
    """
    if len(path) <= 3:
        token = _detect(path, pattern) or path[0]
        token = RESOURCE_CLEAN_PATTERN.sub(r"\1", token)
    else:
        token = path[-3]
    return inflector.singularize(to_snake_symbol(token))


def service(path: NamePath) -> Optional[str]:
    """Second-to-last token; needs at least three tokens."""
    if len(path) < 3:
        return None
    return to_snake_symbol(path[-2])


def section(path: NamePath, pos: int = 0) -> Optional[str]:
    """Token at ``pos`` (negative positions count from the end), or None."""
    try:
        return sections(path)[pos]
    except IndexError:
        return None


def handle(path: NamePath) -> Optional[str]:
    """Last token; needs at least three tokens."""
    if len(path) < 3:
        return None
    return to_snake_symbol(path[-1])


def derive(path: NamePath, role: Role) -> Optional[str]:
    """Value of ``role`` for ``path``. SECTION uses position 0."""
    if role is Role.SCOPE:
        return scope(path)
    if role is Role.CONCEPT:
        return concept(path)
    if role is Role.RESOURCE:
        return resource(path)
    if role is Role.SECTION:
        return section(path)
    if role is Role.SERVICE:
        return service(path)
    if role is Role.HANDLE:
        return handle(path)
    raise ValueError(f"Unknown role: {role!r}")
