"""Tests for the namespace analyzer: resolve, build, transform, components, info."""

import io

import pytest

from smart_namespace import (
    NamespaceAnalyzer,
    Role,
    build,
    components,
    info,
    namespace,
    resolve,
    transform,
)
from smart_namespace.config import NamespaceConfig
from smart_namespace.exceptions import InvalidSubjectError, NotFoundError

DUMP = """\
-----------------------------------------------------------------------------------------------
=> Dummy::Cell::Index <=
components -> [Dummy, Dummy::Cell, Dummy::Cell::Index]
modules    -> ['Dummy', 'Cell', 'Index']
sections   -> ['dummy', 'cell', 'index']
scope      -> dummy
concept    -> 
resource   -> dummy
service    -> cell
handle     -> index
-----------------------------------------------------------------------------------------------
"""

MISSING_DUMP = """\
-----------------------------------------------------------------------------------------------
=> Admin::UsersController <=
components -> [Admin, Admin::UsersController] (missing: Admin)
modules    -> ['Admin', 'UsersController']
sections   -> ['admin', 'users_controller']
scope      -> admin
concept    -> controller
resource   -> user
service    -> 
handle     -> 
-----------------------------------------------------------------------------------------------
"""


class Admin:
    class UsersController:
        pass


class TestResolveAndBuild:
    """Test module-level resolve/build with classified items."""

    def test_resolve(self, dummy_registry):
        """Items are classified before lookup."""
        entity = resolve("dummy", "cell", "Show", registry=dummy_registry)
        assert entity is dummy_registry.resolve("Dummy::Cell::Show")

    def test_resolve_missing(self, registry):
        """Undefined targets raise NotFoundError."""
        with pytest.raises(NotFoundError):
            resolve("no_such", "path", registry=registry)

    def test_build(self, dummy_registry):
        """Builds a new entity from classified items."""
        with pytest.raises(NotFoundError):
            dummy_registry.resolve("Dummy::Command::Enter")

        entity = build("hammer", "commands", "Enter", registry=dummy_registry)
        assert str(entity) == "Hammer::Command::Enter"


class TestTransform:
    """Test reshaping names from role references."""

    def test_resource_endpoint_handle(self, dummy_registry):
        """Role references are filled from the subject."""
        entity = transform(
            "Dummy::Cell::Index",
            [Role.RESOURCE, "endpoint", Role.HANDLE],
            registry=dummy_registry,
        )
        assert entity is dummy_registry.resolve("Dummy::Endpoint::Index")

    def test_marker_strings(self, dummy_registry):
        """Marker strings work like role members."""
        entity = transform(
            "Dummy::Cell::Index",
            ["__resource__", "__section__", "__handle__"],
            registry=dummy_registry,
        )
        assert entity is dummy_registry.resolve("Dummy::Dummy::Index")

    def test_scope_with_literal(self, dummy_registry):
        """Camel-cased literals pass through unchanged."""
        entity = transform(
            "Dummy::Cell", [Role.SCOPE, "UsersController"], registry=dummy_registry
        )
        assert entity is dummy_registry.resolve("Dummy::UsersController")

    def test_returns_path_without_resolving(self, registry):
        """With resolve=False the path string is returned."""
        assert (
            transform("Dummy::UsersController", [Role.CONCEPT, "test"], False, registry=registry)
            == "Controller::Test"
        )
        assert (
            transform(
                "Dummy::Cell::Index",
                [Role.RESOURCE, Role.SERVICE, Role.HANDLE],
                resolve=False,
                registry=registry,
            )
            == "Dummy::Cell::Index"
        )

    def test_absent_roles_are_skipped(self):
        """Roles without a value leave no empty segment behind."""
        assert transform("Admin::UsersController", [Role.SERVICE, "home"], False) == "Home"

    def test_resolve_requires_existing_target(self, registry):
        """Transform never builds its target."""
        with pytest.raises(NotFoundError):
            transform("User::Cell::Index", [Role.RESOURCE, "endpoint", Role.HANDLE], registry=registry)
        assert len(registry) == 0


class TestComponentsAndInfo:
    """Test components and the diagnostic dump."""

    def test_components(self, dummy_registry):
        """Entities for each cumulative prefix."""
        result = components("Dummy::Cell::Index", registry=dummy_registry)
        assert [str(entity) for entity in result] == ["Dummy", "Dummy::Cell", "Dummy::Cell::Index"]

    def test_info(self, dummy_registry, capsys):
        """Prints one line per role to stdout."""
        info("Dummy::Cell::Index", registry=dummy_registry)
        assert capsys.readouterr().out == DUMP

    def test_info_to_file(self, dummy_registry):
        """Writes to the given stream with configured widths."""
        out = io.StringIO()
        info(
            "Dummy::Cell::Index",
            registry=dummy_registry,
            file=out,
            config=NamespaceConfig(info_width=20, info_label_width=9),
        )
        lines = out.getvalue().splitlines()
        assert lines[0] == "-" * 20
        assert lines[5] == "scope    -> dummy"

    def test_info_missing_components(self, registry):
        """Undefined components are reported and the dump still completes."""
        out = io.StringIO()
        namespace(Admin.UsersController, registry=registry).info(file=out)
        assert out.getvalue() == MISSING_DUMP
        assert len(registry) == 0


class TestNamespaceAnalyzer:
    """Test the bound analyzer."""

    @pytest.fixture
    def analyzer(self, dummy_registry):
        return NamespaceAnalyzer("Dummy::Cell::Index", registry=dummy_registry)

    def test_roles(self, analyzer):
        """Instance methods mirror the module-level role functions."""
        assert analyzer.modules() == ["Dummy", "Cell", "Index"]
        assert analyzer.sections() == ["dummy", "cell", "index"]
        assert analyzer.scope() == "dummy"
        assert analyzer.concept() is None
        assert analyzer.resource() == "dummy"
        assert analyzer.service() == "cell"
        assert analyzer.handle() == "index"
        assert analyzer.section() == "dummy"
        assert analyzer.section(-1) == "index"

    def test_components(self, analyzer):
        """Uses the analyzer's registry."""
        assert [str(c) for c in analyzer.components()] == [
            "Dummy",
            "Dummy::Cell",
            "Dummy::Cell::Index",
        ]

    def test_transform(self, analyzer, dummy_registry):
        """Transforms against the analyzer's registry."""
        entity = analyzer.transform([Role.RESOURCE, Role.SECTION, Role.HANDLE])
        assert entity is dummy_registry.resolve("Dummy::Dummy::Index")

    def test_info(self, analyzer, capsys):
        """Dump matches the module-level one."""
        analyzer.info()
        assert capsys.readouterr().out == DUMP

    def test_repr(self, analyzer):
        assert repr(analyzer) == "NamespaceAnalyzer(Dummy::Cell::Index)"

    def test_rejects_analyzer_subject(self, analyzer):
        """Wrapping an analyzer fails fast."""
        with pytest.raises(InvalidSubjectError) as exc_info:
            NamespaceAnalyzer(analyzer)
        assert "cannot re-wrap a namespace analyzer" in str(exc_info.value)

    def test_rejects_analyzer_class(self):
        """The analyzer class itself is no subject either."""
        with pytest.raises(InvalidSubjectError):
            namespace(NamespaceAnalyzer)

    def test_namespace_returns_fresh_instances(self):
        """Every call builds a new analyzer."""
        assert namespace("User::Index") is not namespace("User::Index")
