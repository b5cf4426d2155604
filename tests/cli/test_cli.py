"""Tests for the command line interface."""

import pytest
from typer.testing import CliRunner

from smart_namespace import __version__
from smart_namespace.cli import app


@pytest.fixture
def runner(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.chdir(tmp_path)
    return CliRunner()


class TestRolesCommand:
    """Test the roles table."""

    def test_shows_roles(self, runner):
        result = runner.invoke(app, ["roles", "Home::CategoriesInitializer::Users"])
        assert result.exit_code == 0
        assert "initializer" in result.output
        assert "category" in result.output

    def test_section_position(self, runner):
        result = runner.invoke(app, ["roles", "Admin::Home::Cell::Index", "--position=-2"])
        assert result.exit_code == 0
        assert "section[-2]" in result.output

    def test_custom_separator(self, runner):
        """Names may be typed with a configured separator."""
        result = runner.invoke(app, ["--separator", ".", "roles", "Admin.UsersController"])
        assert result.exit_code == 0
        assert "controller" in result.output

    def test_malformed_name(self, runner):
        result = runner.invoke(app, ["roles", "Admin::::Index"])
        assert result.exit_code == 1
        assert "Invalid qualified name" in result.output


class TestPathAndTransform:
    """Test rendering commands."""

    def test_path(self, runner):
        result = runner.invoke(app, ["path", "user", "Models", "open_tags", "find"])
        assert result.exit_code == 0
        assert result.output.strip() == "User::Model::OpenTag::Find"

    def test_transform(self, runner):
        result = runner.invoke(
            app, ["transform", "User::Cell::Index", "__resource__", "endpoint", "__handle__"]
        )
        assert result.exit_code == 0
        assert result.output.strip() == "User::Endpoint::Index"

    def test_transform_build(self, runner):
        result = runner.invoke(
            app, ["transform", "--build", "User::Cell::Index", "__scope__", "show"]
        )
        assert result.exit_code == 0
        assert "Namespace(User::Show)" in result.output


class TestInfoCommand:
    """Test the diagnostic dump."""

    def test_info(self, runner):
        result = runner.invoke(app, ["info", "Dummy::Cell::Index"])
        assert result.exit_code == 0
        assert "=> Dummy::Cell::Index <=" in result.output
        assert "service    -> cell" in result.output

    def test_info_width_from_config(self, runner, tmp_path):
        config_file = tmp_path / "narrow.toml"
        config_file.write_text("info_width = 12\n")
        result = runner.invoke(app, ["--config", str(config_file), "info", "Dummy::Cell"])
        assert result.exit_code == 0
        assert result.output.splitlines()[0] == "-" * 12


def test_version(runner):
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output
