"""Word-casing adapter.

Thin layer over the ``inflection`` package providing the three transforms the
role analyzer depends on:

- classify:    ``"open_tags"`` -> ``"OpenTag"``
- underscore:  ``"UserHandler"`` -> ``"user_handler"``
- singularize: ``"categories"`` -> ``"category"``
"""

from __future__ import annotations

import inflection


def classify(name: str) -> str:
    """Convert an identifier into a singular, title-cased path segment.

    Anything up to the last ``.`` is dropped and only the trailing word is
    singularized, so ``"users_controller"`` becomes ``"UsersController"``.
    """
    name = name.rpartition(".")[2]
    return inflection.camelize(inflection.singularize(name))


def underscore(token: str) -> str:
    """Convert a title-cased token into its lowercase, underscored form."""
    return inflection.underscore(token)


def singularize(word: str) -> str:
    """Return the singular form of ``word``."""
    return inflection.singularize(word)
