"""Shared test fixtures for smart-namespace tests."""

import pytest

from smart_namespace import NamespaceMixin, Registry

DUMMY_PATHS = (
    "Dummy::Cell::Index",
    "Dummy::Cell::Show",
    "Dummy::Dummy::Index",
    "Dummy::Endpoint::Index",
    "Dummy::AnotherChild",
    "Dummy::Resolver::UserHandler::Cmd::Import",
)


@pytest.fixture
def registry():
    """Empty, isolated registry."""
    return Registry()


@pytest.fixture
def dummy_registry(registry):
    """Registry holding the Dummy::... hierarchy.

    Dummy::UsersController and Dummy::Base are classes, everything else
    is a Namespace placeholder.
    """
    for path in DUMMY_PATHS:
        registry.build(path)

    class UsersController:
        pass

    class Base(NamespaceMixin):
        pass

    registry.register("Dummy::UsersController", UsersController)
    registry.register("Dummy::Base", Base)
    return registry
