#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for orglens CLI configuration management.

This module tests file loading for each supported format, discovery in
parent directories, priority handling, and building option objects from
configuration sections.
"""

import argparse
import json
from unittest.mock import patch

import pytest

from orglens.cli import EXIT_SUCCESS, EXIT_VALIDATION_ERROR, main
from orglens.cli.config import (
    build_options,
    discover_config_file,
    find_config_in_parents,
    load_config_file,
    load_config_with_priority,
    merge_configs,
)
from orglens.options import HtmlRendererOptions, LogbookParserOptions, OrgParserOptions


@pytest.mark.unit
@pytest.mark.cli
class TestLoadConfigFile:
    """Loading each supported file format."""

    def test_toml(self, tmp_path):
        path = tmp_path / ".orglens.toml"
        path.write_text('[org]\nmax-heading-level = 3\n\n[logbook]\ndrawer-name = "CLOCKING"\n')
        assert load_config_file(path) == {"org": {"max-heading-level": 3}, "logbook": {"drawer-name": "CLOCKING"}}

    def test_yaml(self, tmp_path):
        path = tmp_path / ".orglens.yaml"
        path.write_text("logbook:\n  most_recent_first: false\n")
        assert load_config_file(path) == {"logbook": {"most_recent_first": False}}

    def test_empty_yaml_is_empty_config(self, tmp_path):
        path = tmp_path / "empty.yml"
        path.write_text("")
        assert load_config_file(path) == {}

    def test_json(self, tmp_path):
        path = tmp_path / ".orglens.json"
        path.write_text(json.dumps({"html": {"escape_html": False}}))
        assert load_config_file(path) == {"html": {"escape_html": False}}

    def test_pyproject_section(self, tmp_path):
        path = tmp_path / "pyproject.toml"
        path.write_text('[project]\nname = "x"\n\n[tool.orglens.org]\nextract-planning = false\n')
        assert load_config_file(path) == {"org": {"extract-planning": False}}

    def test_pyproject_without_section(self, tmp_path):
        path = tmp_path / "pyproject.toml"
        path.write_text('[project]\nname = "x"\n')
        assert load_config_file(path) == {}

    def test_missing_file(self, tmp_path):
        with pytest.raises(argparse.ArgumentTypeError, match="does not exist"):
            load_config_file(tmp_path / "nope.toml")

    def test_unsupported_extension(self, tmp_path):
        path = tmp_path / "config.ini"
        path.write_text("[org]\n")
        with pytest.raises(argparse.ArgumentTypeError, match="Unsupported config file format"):
            load_config_file(path)

    @pytest.mark.parametrize(
        "filename,content",
        [
            ("bad.toml", "[org\nmax = 1"),
            ("bad.json", "{not json"),
            ("bad.yaml", "org: [unclosed"),
        ],
    )
    def test_malformed_files(self, tmp_path, filename, content):
        path = tmp_path / filename
        path.write_text(content)
        with pytest.raises(argparse.ArgumentTypeError, match="Error reading config file"):
            load_config_file(path)

    def test_non_mapping_root(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[1, 2]")
        with pytest.raises(argparse.ArgumentTypeError, match="must contain a mapping"):
            load_config_file(path)


@pytest.mark.unit
@pytest.mark.cli
class TestConfigDiscovery:
    """Finding configuration files on disk."""

    def test_dedicated_file_in_start_dir(self, tmp_path):
        config = tmp_path / ".orglens.toml"
        config.write_text("[org]\n")
        assert find_config_in_parents(tmp_path) == config.resolve()

    def test_found_in_parent(self, tmp_path):
        config = tmp_path / ".orglens.yaml"
        config.write_text("org: {}\n")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert find_config_in_parents(nested) == config.resolve()

    def test_dedicated_file_beats_pyproject(self, tmp_path):
        (tmp_path / "pyproject.toml").write_text("[tool.orglens.org]\nmax-heading-level = 2\n")
        dedicated = tmp_path / ".orglens.json"
        dedicated.write_text("{}")
        assert find_config_in_parents(tmp_path) == dedicated.resolve()

    def test_pyproject_without_section_is_skipped(self, tmp_path):
        (tmp_path / "pyproject.toml").write_text('[project]\nname = "x"\n')
        found = find_config_in_parents(tmp_path)
        assert found is None or found.parent != tmp_path.resolve()

    def test_home_directory_fallback(self, tmp_path):
        home = tmp_path / "home"
        home.mkdir()
        config = home / ".orglens.toml"
        config.write_text("[org]\n")
        work = tmp_path / "work"
        work.mkdir()
        with (
            patch("orglens.cli.config.find_config_in_parents", return_value=None),
            patch("orglens.cli.config.Path.home", return_value=home),
        ):
            assert discover_config_file(work) == config


@pytest.mark.unit
@pytest.mark.cli
class TestConfigPriority:
    """Explicit paths, environment variable and merging."""

    def test_explicit_beats_env(self, tmp_path):
        explicit = tmp_path / "explicit.json"
        explicit.write_text('{"org": {"max-heading-level": 2}}')
        env = tmp_path / "env.json"
        env.write_text('{"org": {"max-heading-level": 4}}')
        assert load_config_with_priority(str(explicit), str(env)) == {"org": {"max-heading-level": 2}}

    def test_env_used_without_explicit(self, tmp_path):
        env = tmp_path / "env.json"
        env.write_text('{"logbook": {}}')
        assert load_config_with_priority(None, str(env)) == {"logbook": {}}

    def test_nothing_found(self):
        with patch("orglens.cli.config.discover_config_file", return_value=None):
            assert load_config_with_priority() == {}

    def test_merge_is_deep(self):
        base = {"org": {"max-heading-level": 3, "extract-planning": True}, "html": {"escape_html": True}}
        override = {"org": {"extract-planning": False}}
        assert merge_configs(base, override) == {
            "org": {"max-heading-level": 3, "extract-planning": False},
            "html": {"escape_html": True},
        }

    def test_merge_does_not_mutate_base(self):
        base = {"org": {"max-heading-level": 3}}
        merge_configs(base, {"org": {"max-heading-level": 1}})
        assert base == {"org": {"max-heading-level": 3}}


@pytest.mark.unit
@pytest.mark.cli
class TestBuildOptions:
    """Option objects built from configuration sections."""

    def test_missing_section_gives_defaults(self):
        assert build_options({}, "org") == OrgParserOptions()

    def test_hyphenated_keys(self):
        options = build_options({"logbook": {"drawer-name": "CLOCKING", "most-recent-first": False}}, "logbook")
        assert options == LogbookParserOptions(drawer_name="CLOCKING", most_recent_first=False)

    def test_unknown_keys_are_ignored(self):
        options = build_options({"html": {"escape_html": False, "theme": "dark"}}, "html")
        assert options == HtmlRendererOptions(escape_html=False)

    def test_invalid_value(self):
        with pytest.raises(argparse.ArgumentTypeError, match=r"\[org\]"):
            build_options({"org": {"max-heading-level": 0}}, "org")

    def test_section_must_be_table(self):
        with pytest.raises(argparse.ArgumentTypeError, match="must be a table"):
            build_options({"org": "nope"}, "org")


@pytest.mark.unit
@pytest.mark.cli
class TestConfigInCli:
    """Configuration flowing through the command line."""

    def test_config_file_applies(self, tmp_path, capsys):
        note = tmp_path / "note.org"
        note.write_text("*** Deep", encoding="utf-8")
        config = tmp_path / "orglens.toml"
        config.write_text('[org]\nmax-heading-level = 1\n\n[html]\ncss_class_map = { Heading = "title" }\n')
        assert main(["--config", str(config), "render", str(note)]) == EXIT_SUCCESS
        assert capsys.readouterr().out == '<h1 class="title">Deep</h1>\n'

    def test_flag_overrides_config(self, tmp_path, capsys):
        note = tmp_path / "note.org"
        note.write_text("*** Deep", encoding="utf-8")
        config = tmp_path / "orglens.json"
        config.write_text('{"org": {"max-heading-level": 1}}')
        args = ["--config", str(config), "render", str(note), "--max-heading-level", "2"]
        assert main(args) == EXIT_SUCCESS
        assert capsys.readouterr().out == "<h2>Deep</h2>\n"

    def test_env_var_config(self, tmp_path, monkeypatch, capsys):
        note = tmp_path / "note.org"
        note.write_text(":LOGBOOK:\nCLOCK: [2024-01-15 Mon 10:00]\n:END:", encoding="utf-8")
        config = tmp_path / "env.yaml"
        config.write_text("logbook:\n  drawer-name: OTHER\n")
        monkeypatch.setenv("ORGLENS_CONFIG", str(config))
        assert main(["logbook", str(note), "--format", "json"]) == EXIT_SUCCESS
        assert json.loads(capsys.readouterr().out)["entries"] == []

    def test_bad_config_path(self, tmp_path, capsys):
        note = tmp_path / "note.org"
        note.write_text("text", encoding="utf-8")
        assert main(["--config", str(tmp_path / "missing.toml"), "render", str(note)]) == EXIT_VALIDATION_ERROR
        assert "does not exist" in capsys.readouterr().err
