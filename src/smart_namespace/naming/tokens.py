"""Tokenizing and rendering of qualified names.

A qualified name is a ``::``-joined sequence of title-case tokens
(``User::Endpoint::Index``). ``NamePath`` is its tokenized form; rendering a
``NamePath`` and tokenizing the result gives back the same path.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Iterator, Union, overload

from ..exceptions import InvalidNameError
from . import inflector

SEPARATOR = "::"


@dataclass(frozen=True)
class NamePath:
    """Ordered, non-empty sequence of tokens naming one nested entity.

    Attributes:
        tokens: The path segments, outermost first.
    """

    tokens: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.tokens:
            raise InvalidNameError("", "a qualified name needs at least one token")
        for token in self.tokens:
            if not isinstance(token, str) or not token:
                raise InvalidNameError(SEPARATOR.join(map(str, self.tokens)), "empty token")
            if SEPARATOR in token:
                raise InvalidNameError(token, f"token contains separator {SEPARATOR!r}")

    @classmethod
    def of(cls, tokens: Iterable[str]) -> NamePath:
        return cls(tuple(tokens))

    def __len__(self) -> int:
        return len(self.tokens)

    def __iter__(self) -> Iterator[str]:
        return iter(self.tokens)

    @overload
    def __getitem__(self, index: int) -> str: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[str, ...]: ...

    def __getitem__(self, index):
        return self.tokens[index]

    def __str__(self) -> str:
        return render(self)

    def prefixes(self) -> list[NamePath]:
        """Cumulative prefixes: ``A``, ``A::B``, ..., the full path."""
        return [NamePath(self.tokens[: i + 1]) for i in range(len(self.tokens))]

    def parent(self) -> NamePath | None:
        if len(self.tokens) < 2:
            return None
        return NamePath(self.tokens[:-1])


def tokenize(qualified_name: str) -> NamePath:
    """Split a qualified name into its tokens.

    Raises:
        InvalidNameError: If the name is empty or has an empty segment
    """
    if not qualified_name:
        raise InvalidNameError(qualified_name, "empty name")
    tokens = qualified_name.split(SEPARATOR)
    if any(not token for token in tokens):
        raise InvalidNameError(qualified_name, "empty segment")
    return NamePath(tuple(tokens))


def render(path: NamePath) -> str:
    """Join a path's tokens back into a qualified name."""
    return SEPARATOR.join(path.tokens)


def to_word_case(item: Any) -> str:
    """Classify a caller-supplied item (``:open_tags``, ``"cell"``) into a token.

    ``None`` becomes the empty string; enum members use their value.
    """
    if item is None:
        return ""
    if isinstance(item, Enum):
        item = item.value
    return inflector.classify(str(item))


def to_snake_symbol(token: str) -> str:
    """Lowercase/underscored identifier for a token (``UserHandler`` -> ``user_handler``)."""
    return inflector.underscore(token)


PathItem = Union[str, NamePath, Iterable[Any], None]


def _flatten(items: Iterable[Any]) -> Iterator[Any]:
    for item in items:
        if isinstance(item, NamePath):
            yield render(item)
        elif isinstance(item, (list, tuple)):
            yield from _flatten(item)
        else:
            yield item


def path(*items: PathItem) -> str:
    """Render caller-supplied items as a canonical qualified name.

    Every item is classified into a token; nested lists are flattened and
    items that classify to nothing (``None``, ``""``) are skipped.

        >>> path("user", "Models", "open_tags", "find")
        'User::Model::OpenTag::Find'

    Raises:
        InvalidNameError: If no tokens remain
    """
    words = [to_word_case(item) for item in _flatten(items)]
    rendered = SEPARATOR.join(word for word in words if word)
    # A classified item may itself be a qualified name; re-tokenize to validate.
    return render(tokenize(rendered))
