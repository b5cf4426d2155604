"""Tokenizing, word-casing and role derivation for qualified names."""

from .roles import (
    CONCEPT_CLEAN_PATTERN,
    MODULE_DETECT_PATTERN,
    RESOURCE_CLEAN_PATTERN,
    Role,
    concept,
    derive,
    handle,
    modules,
    resource,
    scope,
    section,
    sections,
    service,
)
from .tokens import SEPARATOR, NamePath, path, render, to_snake_symbol, to_word_case, tokenize

__all__ = [
    # Tokens
    "SEPARATOR",
    "NamePath",
    "path",
    "render",
    "tokenize",
    "to_snake_symbol",
    "to_word_case",
    # Roles
    "Role",
    "MODULE_DETECT_PATTERN",
    "RESOURCE_CLEAN_PATTERN",
    "CONCEPT_CLEAN_PATTERN",
    "modules",
    "sections",
    "scope",
    "concept",
    "resource",
    "service",
    "section",
    "handle",
    "derive",
]
