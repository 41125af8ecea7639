"""CLI smoke tests using typer's CliRunner."""

import json

import pytest
import yaml
from typer.testing import CliRunner

from tplgpp.cli.app import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep config reads and writes inside the test directory."""
    monkeypatch.setenv("TPLGPP_CONFIG", str(tmp_path / "config.json"))


@pytest.fixture
def classes_file(tmp_path, dai_class_data):
    path = tmp_path / "classes.yaml"
    path.write_text(yaml.safe_dump(dai_class_data, sort_keys=False))
    return path


class TestClassesCommand:
    """Tests for the classes command."""

    def test_prints_classes(self, classes_file):
        result = runner.invoke(app, ["classes", str(classes_file)])
        assert result.exit_code == 0
        assert "Class dai (base), 2 argument(s)" in result.output
        assert "direction [argument]" in result.output
        assert "capture: capture -> 1" in result.output
        assert "mask=mandatory,unique" in result.output

    def test_json_output(self, classes_file):
        result = runner.invoke(app, ["classes", str(classes_file), "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data[0]["name"] == "dai"
        assert data[0]["num_args"] == 2
        assert data[0]["attributes"][0]["param_type"] == "argument"

    def test_schema_error_exits(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("pga:\n  DefineAttribute:\n    gain:\n      constraints:\n        min: low\n")
        result = runner.invoke(app, ["classes", str(path)])
        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "gain" in result.output

    def test_malformed_yaml_exits(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("pga: [unclosed\n")
        result = runner.invoke(app, ["classes", str(path)])
        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_corrupt_config_exits(self, tmp_path, classes_file):
        (tmp_path / "config.json").write_text("{not json")
        result = runner.invoke(app, ["classes", str(classes_file)])
        assert result.exit_code == 1
        assert "Invalid config file" in result.output

    def test_nonexistent_file(self):
        result = runner.invoke(app, ["classes", "/nonexistent/path.yaml"])
        assert result.exit_code != 0


class TestConfigCommand:
    """Tests for the config command."""

    def test_config_show(self):
        result = runner.invoke(app, ["config", "show"])
        assert result.exit_code == 0
        assert "Compiler" in result.output
        assert "Logging" in result.output

    def test_config_show_corrupt_file(self, tmp_path):
        (tmp_path / "config.json").write_text("[]")
        result = runner.invoke(app, ["config", "show"])
        assert result.exit_code == 1
        assert "Invalid config file" in result.output

    def test_config_set(self):
        result = runner.invoke(app, ["config", "set", "logging.level", "debug"])
        assert result.exit_code == 0

        result = runner.invoke(app, ["config", "show"])
        assert "level: DEBUG" in result.output

    def test_config_set_invalid_key(self):
        result = runner.invoke(app, ["config", "set", "invalid.key", "value"])
        assert result.exit_code == 1
        assert "Unknown key" in result.output

    def test_config_set_invalid_value(self):
        result = runner.invoke(app, ["config", "set", "compiler.class_type", "widget"])
        assert result.exit_code == 1
        assert "Invalid value" in result.output

    def test_config_set_missing_args(self):
        result = runner.invoke(app, ["config", "set"])
        assert result.exit_code == 1

    def test_config_unknown_action(self):
        result = runner.invoke(app, ["config", "unknown_action"])
        assert result.exit_code == 1
        assert "Unknown action" in result.output


class TestVersionFlag:
    """Test the --version flag."""

    def test_version_output(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "tplgpp" in result.output
