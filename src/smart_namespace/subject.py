"""Subjects: objects that carry a qualified name.

A subject is anything a namespace analyzer can be bound to:

- a qualified name (``"User::Endpoint::Index"``) or a ``NamePath``
- a registry ``Namespace``
- a class: its registered name, else its ``__qualname__``
- a Python module: its dotted ``__name__``
- an instance of any of the above (its class is used)
"""

from __future__ import annotations

import types
from typing import Any

from .exceptions import InvalidSubjectError
from .naming.tokens import SEPARATOR, NamePath, tokenize
from .registry import NAME_ATTRIBUTE, Namespace


def is_analyzer(subject: Any) -> bool:
    """Whether ``subject`` is a namespace analyzer or an analyzer class."""
    from .analyzer import NamespaceAnalyzer

    if isinstance(subject, type):
        return issubclass(subject, NamespaceAnalyzer)
    return isinstance(subject, NamespaceAnalyzer)


def qualified_name(subject: Any) -> str:
    """Qualified name carried by ``subject``.

    Raises:
        InvalidSubjectError: If the subject is a namespace analyzer
    """
    if is_analyzer(subject):
        raise InvalidSubjectError(subject, "cannot re-wrap a namespace analyzer")
    if isinstance(subject, str):
        return subject
    if isinstance(subject, NamePath):
        return SEPARATOR.join(subject.tokens)
    if isinstance(subject, Namespace):
        return subject.name
    if isinstance(subject, types.ModuleType):
        return subject.__name__.replace(".", SEPARATOR)
    if isinstance(subject, type):
        registered = vars(subject).get(NAME_ATTRIBUTE)
        if registered:
            return registered
        return subject.__qualname__.replace(".", SEPARATOR)
    return qualified_name(type(subject))


def name_path_of(subject: Any) -> NamePath:
    """Tokenized name of ``subject``."""
    if isinstance(subject, NamePath):
        return subject
    return tokenize(qualified_name(subject))
