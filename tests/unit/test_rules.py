"""
Unit tests for building filters from configuration documents and files.
"""

from unittest.mock import MagicMock

import pytest

from ccfilter.core.exceptions import (
    ConfigFileError,
    ConfigValidationError,
    PatternCompileError,
)
from ccfilter.filters.rules import build_filter, load_filter, read_filter_from_file


def document(**overrides):
    rules = {
        "compilers": ["^gcc$"],
        "source_files": [r"\.c$"],
        "cancel_parameters": ["^-E$"],
    }
    rules.update(overrides)
    return {"filter": {k: v for k, v in rules.items() if v is not None}}


class TestBuildFilter:
    def test_builds_three_pattern_sets(self):
        source_filter = build_filter(document())
        assert source_filter.compilers.sources == ("^gcc$",)
        assert source_filter.source_files.sources == (r"\.c$",)
        assert source_filter.cancel_parameters.sources == ("^-E$",)

    def test_empty_arrays_are_valid(self):
        source_filter = build_filter(document(cancel_parameters=[]))
        assert len(source_filter.cancel_parameters) == 0
        assert source_filter.classify(["gcc", "-E", "a.c"], "/w") == "/w/a.c"

    def test_tuples_accepted(self):
        source_filter = build_filter(document(compilers=("^cc$", "^gcc$")))
        assert len(source_filter.compilers) == 2

    def test_unknown_members_ignored(self):
        doc = document()
        doc["filter"]["comment"] = "not a rule"
        assert build_filter(doc).classify(["gcc", "a.c"], "/w") == "/w/a.c"

    def test_missing_filter_group(self):
        with pytest.raises(ConfigValidationError) as exc_info:
            build_filter({"other": {}}, source="bear.toml")
        assert exc_info.value.key == "filter"
        assert "found no filter group" in exc_info.value.message
        assert "bear.toml" in exc_info.value.message

    def test_filter_group_not_a_table(self):
        with pytest.raises(ConfigValidationError) as exc_info:
            build_filter({"filter": ["^gcc$"]})
        assert exc_info.value.key == "filter"

    @pytest.mark.parametrize("doc", [["filter"], "filter = 1", None])
    def test_document_not_a_table(self, doc):
        with pytest.raises(ConfigValidationError) as exc_info:
            build_filter(doc, source="bear.toml")
        assert "shall be a table" in exc_info.value.message

    @pytest.mark.parametrize("member", ["compilers", "source_files", "cancel_parameters"])
    def test_missing_member(self, member):
        with pytest.raises(ConfigValidationError) as exc_info:
            build_filter(document(**{member: None}), source="cfg.toml")
        err = exc_info.value
        assert err.key == member
        assert f"could not find values for '{member}'" in err.message
        assert err.file_path == "cfg.toml"

    @pytest.mark.parametrize("value", ["^gcc$", 42, ["^gcc$", 3], {"a": "b"}])
    def test_member_not_array_of_strings(self, value):
        with pytest.raises(ConfigValidationError) as exc_info:
            build_filter(document(source_files=value))
        assert exc_info.value.key == "source_files"
        assert "shall be array of strings" in exc_info.value.message

    def test_first_bad_member_reported(self):
        with pytest.raises(ConfigValidationError) as exc_info:
            build_filter({"filter": {"cancel_parameters": 1}})
        assert exc_info.value.key == "compilers"

    def test_malformed_regex_aborts(self):
        with pytest.raises(PatternCompileError) as exc_info:
            build_filter(document(cancel_parameters=["^-E$", "(["]))
        assert exc_info.value.rule == "cancel_parameters"
        assert exc_info.value.index == 1

    def test_logs_rule_counts(self):
        logger = MagicMock()
        build_filter(document(), logger=logger)
        logger.debug.assert_called_once()


class TestReadFilterFromFile:
    def test_reads_toml(self, gcc_config):
        source_filter = read_filter_from_file(gcc_config)
        assert source_filter.classify(["gcc", "-c", "foo.c"], "/home/u") == "/home/u/foo.c"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigFileError) as exc_info:
            read_filter_from_file(tmp_path / "nope.toml")
        assert exc_info.value.file_path == str(tmp_path / "nope.toml")

    def test_syntax_error_reports_line(self, write_config):
        path = write_config("[filter]\ncompilers = ['^gcc$'\nsource_files = []\n")
        with pytest.raises(ConfigFileError) as exc_info:
            read_filter_from_file(path)
        assert "line" in exc_info.value.message

    def test_wrong_type_reports_member_line(self, write_config):
        path = write_config(
            "[filter]\n"
            "compilers = ['^gcc$']\n"
            "source_files = '\\.c$'\n"
            "cancel_parameters = []\n"
        )
        with pytest.raises(ConfigValidationError) as exc_info:
            read_filter_from_file(path)
        err = exc_info.value
        assert err.key == "source_files"
        assert err.line == 3
        assert "at line 3" in err.message
        assert str(path) in err.message

    def test_missing_member_reports_group_line(self, write_config):
        path = write_config("# rules\n\n[filter]\ncompilers = []\nsource_files = []\n")
        with pytest.raises(ConfigValidationError) as exc_info:
            read_filter_from_file(path)
        assert exc_info.value.key == "cancel_parameters"
        assert exc_info.value.line == 3

    def test_pyproject_table(self, write_config):
        path = write_config(
            "[project]\nname = 'demo'\n\n"
            "[tool.ccfilter.filter]\n"
            "compilers = ['cc$']\n"
            "source_files = ['\\.cpp$']\n"
            "cancel_parameters = []\n",
            name="pyproject.toml",
        )
        source_filter = read_filter_from_file(path)
        assert source_filter.classify(["/usr/bin/cc", "m.cpp"], "/p") == "/p/m.cpp"

    def test_malformed_regex_in_file(self, write_config):
        path = write_config(
            "[filter]\ncompilers = ['gcc(']\nsource_files = []\ncancel_parameters = []\n"
        )
        with pytest.raises(PatternCompileError):
            read_filter_from_file(path)

    @pytest.mark.parametrize(
        ("text", "key"),
        [
            ("[project]\nname = 'demo'\n\n[tool]\nccfilter = 'rules'\n", "tool.ccfilter"),
            ("tool = 'ccfilter'\n", "tool"),
        ],
    )
    def test_pyproject_tool_not_a_table(self, write_config, text, key):
        path = write_config(text, name="pyproject.toml")
        with pytest.raises(ConfigValidationError) as exc_info:
            read_filter_from_file(path)
        assert exc_info.value.key == key
        assert exc_info.value.file_path == str(path)


class TestLoadFilter:
    def test_explicit_path(self, gcc_config):
        assert load_filter(gcc_config).classify(["gcc", "a.c"], "/w") == "/w/a.c"

    def test_env_var(self, gcc_config, monkeypatch):
        monkeypatch.setenv("CCFILTER_CONFIG", str(gcc_config))
        assert load_filter().classify(["gcc", "a.c"], "/w") == "/w/a.c"

    def test_discovery_from_subdirectory(self, gcc_config, tmp_path):
        nested = tmp_path / "build" / "obj"
        nested.mkdir(parents=True)
        source_filter = load_filter(start_dir=str(nested))
        assert source_filter.classify(["gcc", "a.c"], "/w") == "/w/a.c"

    def test_nothing_found(self, tmp_path, monkeypatch):
        monkeypatch.setattr(
            "ccfilter.core.settings.find_config_file", lambda start_dir=None: None
        )
        with pytest.raises(ConfigFileError):
            load_filter(start_dir=str(tmp_path))
