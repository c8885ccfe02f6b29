"""Unit tests for reading TOML and legacy YAML configuration files."""

import tomllib
from pathlib import Path

import pytest
from structlog.testing import capture_logs

from tests.helpers.memory_fs import InMemoryFileSource
from velacritty.config.errors import (
    ConfigIoError,
    ConfigParseError,
    LegacyParseError,
    LegacySerializeError,
)
from velacritty.config.formats import (
    deserialize_config,
    is_legacy_format,
    prune_yaml_nulls,
    yaml_to_toml,
)


class TestIsLegacyFormat:
    """Tests for format detection by extension."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("velacritty.yml", True),
            ("velacritty.yaml", True),
            ("VELACRITTY.YML", True),
            ("velacritty.toml", False),
            ("velacritty", False),
        ],
    )
    def test_detects_yaml_extensions(self, name: str, expected: bool) -> None:
        """Test that only .yml and .yaml select the YAML reader."""
        assert is_legacy_format(Path(name)) is expected


class TestPruneYamlNulls:
    """Tests for null pruning before TOML conversion."""

    @pytest.mark.unit
    def test_drops_null_keys_and_keeps_siblings(self) -> None:
        """Test that null keys disappear while other keys survive."""
        document = {"window": {"blinking": "Always", "cursor": None}, "extra": None}
        assert prune_yaml_nulls(document) == {"window": {"blinking": "Always"}}

    @pytest.mark.unit
    def test_drops_tables_left_empty(self) -> None:
        """Test that a table containing only nulls is removed."""
        document = {"font": {"normal": {"family": None}}, "scrolling": {"history": 5}}
        assert prune_yaml_nulls(document) == {"scrolling": {"history": 5}}

    @pytest.mark.unit
    def test_drops_null_list_items(self) -> None:
        """Test that null list items and emptied lists are removed."""
        document = {"args": ["-l", None], "empty": [None, None]}
        assert prune_yaml_nulls(document) == {"args": ["-l"]}

    @pytest.mark.unit
    def test_whole_document_pruned_to_empty_table(self) -> None:
        """Test that a document of only nulls becomes an empty table."""
        assert prune_yaml_nulls(None) == {}
        assert prune_yaml_nulls({"a": None, "b": {"c": None}}) == {}

    @pytest.mark.unit
    def test_falsy_values_are_kept(self) -> None:
        """Test that false, zero and empty strings are not treated as null."""
        document = {"a": False, "b": 0, "c": ""}
        assert prune_yaml_nulls(document) == document

    @pytest.mark.unit
    def test_warns_for_removed_keys_when_enabled(self) -> None:
        """Test that each removed key is logged when requested."""
        with capture_logs() as logs:
            prune_yaml_nulls({"window": {"cursor": None}}, warn_pruned=True)

        events = [log for log in logs if log["event"] == "removing_null_key"]
        assert [log["key"] for log in events] == ["cursor", "window"]
        assert all(log["log_level"] == "warning" for log in events)

    @pytest.mark.unit
    def test_silent_when_warning_disabled(self) -> None:
        """Test that nothing is logged by default."""
        with capture_logs() as logs:
            prune_yaml_nulls({"window": {"cursor": None}})

        assert logs == []


class TestYamlToToml:
    """Tests for YAML to TOML text conversion."""

    @pytest.mark.unit
    def test_converts_nested_document(self) -> None:
        """Test that YAML structure survives conversion."""
        contents = "scrolling:\n  history: 2000\nshell:\n  args: [-l, -c]\n"

        toml_text = yaml_to_toml(contents, Path("c.yml"))

        assert tomllib.loads(toml_text) == {
            "scrolling": {"history": 2000},
            "shell": {"args": ["-l", "-c"]},
        }

    @pytest.mark.unit
    def test_nulls_are_pruned(self) -> None:
        """Test that null entries do not reach the TOML output."""
        contents = "window:\n  blinking: Always\n  cursor: ~\nextra: null\n"

        toml_text = yaml_to_toml(contents, Path("c.yml"))

        assert tomllib.loads(toml_text) == {"window": {"blinking": "Always"}}

    @pytest.mark.unit
    def test_on_and_off_stay_strings(self) -> None:
        """Test that enum values spelled On or Off are not read as booleans."""
        contents = (
            "cursor:\n  style:\n    blinking: On\n  vi_mode_style:\n    blinking: Off\n"
        )

        toml_text = yaml_to_toml(contents, Path("c.yml"))

        assert 'blinking = "On"' in toml_text
        assert tomllib.loads(toml_text) == {
            "cursor": {
                "style": {"blinking": "On"},
                "vi_mode_style": {"blinking": "Off"},
            }
        }

    @pytest.mark.unit
    @pytest.mark.parametrize("word", ["yes", "no", "y", "n", "on", "off"])
    def test_other_yaml11_booleans_stay_strings(self, word: str) -> None:
        """Test that only true and false spellings become booleans."""
        toml_text = yaml_to_toml(f"value: {word}\n", Path("c.yml"))
        assert tomllib.loads(toml_text) == {"value": word}

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("word", "expected"),
        [("true", True), ("True", True), ("FALSE", False), ("false", False)],
    )
    def test_true_and_false_are_booleans(self, word: str, expected: bool) -> None:
        """Test the boolean spellings that are kept."""
        toml_text = yaml_to_toml(f"value: {word}\n", Path("c.yml"))
        assert tomllib.loads(toml_text) == {"value": expected}

    @pytest.mark.unit
    def test_malformed_yaml_raises_parse_error(self) -> None:
        """Test that YAML syntax errors become LegacyParseError."""
        with pytest.raises(LegacyParseError) as exc_info:
            yaml_to_toml("window: [unclosed\n", Path("/cfg/bad.yml"))

        assert "/cfg/bad.yml" in str(exc_info.value)

    @pytest.mark.unit
    @pytest.mark.parametrize("contents", ["- a\n- b\n", "just text\n", "42\n"])
    def test_non_mapping_root_raises_serialize_error(self, contents: str) -> None:
        """Test that documents without a root table cannot be converted."""
        with pytest.raises(LegacySerializeError) as exc_info:
            yaml_to_toml(contents, Path("c.yml"))

        assert str(exc_info.value).startswith("Yaml conversion error in c.yml")


class TestDeserializeConfig:
    """Tests for deserialize_config."""

    @pytest.mark.unit
    def test_reads_toml(self) -> None:
        """Test parsing of a plain TOML file."""
        path = Path("/cfg/velacritty.toml")
        source = InMemoryFileSource({path: "[scrolling]\nhistory = 42\n"})

        assert deserialize_config(path, source=source) == {
            "scrolling": {"history": 42}
        }

    @pytest.mark.unit
    def test_strips_byte_order_mark(self) -> None:
        """Test that a leading BOM does not break parsing."""
        path = Path("/cfg/velacritty.toml")
        source = InMemoryFileSource({path: "\ufeff[window]\nopacity = 0.5\n"})

        assert deserialize_config(path, source=source) == {"window": {"opacity": 0.5}}

    @pytest.mark.unit
    def test_malformed_toml_raises_parse_error(self) -> None:
        """Test that TOML syntax errors become ConfigParseError."""
        path = Path("/cfg/velacritty.toml")
        source = InMemoryFileSource({path: "[scrolling\nhistory = 1\n"})

        with pytest.raises(ConfigParseError) as exc_info:
            deserialize_config(path, source=source)

        assert exc_info.value.path == path

    @pytest.mark.unit
    def test_missing_file_raises_not_found(self) -> None:
        """Test that a missing file is reported as not found."""
        with pytest.raises(ConfigIoError) as exc_info:
            deserialize_config(Path("/nope.toml"), source=InMemoryFileSource())

        assert exc_info.value.not_found is True

    @pytest.mark.unit
    def test_unreadable_file_is_not_not_found(self) -> None:
        """Test that permission errors are distinguished from missing files."""
        path = Path("/cfg/locked.toml")
        source = InMemoryFileSource(unreadable={path})

        with pytest.raises(ConfigIoError) as exc_info:
            deserialize_config(path, source=source)

        assert exc_info.value.not_found is False
        assert isinstance(exc_info.value.cause, PermissionError)

    @pytest.mark.unit
    def test_yaml_file_is_converted_with_deprecation_warning(self) -> None:
        """Test that YAML files load and log a migration warning."""
        path = Path("/cfg/velacritty.yml")
        source = InMemoryFileSource({path: "scrolling:\n  history: 7\n"})

        with capture_logs() as logs:
            result = deserialize_config(path, source=source)

        assert result == {"scrolling": {"history": 7}}
        assert any(log["event"] == "yaml_config_deprecated" for log in logs)

    @pytest.mark.unit
    @pytest.mark.parametrize("contents", ["", "   \n\n", "# only a comment\n"])
    def test_empty_yaml_gives_empty_table(self, contents: str) -> None:
        """Test that blank or comment-only YAML yields an empty document."""
        path = Path("/cfg/velacritty.yaml")
        source = InMemoryFileSource({path: contents})

        assert deserialize_config(path, source=source) == {}

    @pytest.mark.unit
    def test_blank_yaml_skips_deprecation_warning(self) -> None:
        """Test that an empty legacy file is not reported as deprecated."""
        path = Path("/cfg/velacritty.yml")
        source = InMemoryFileSource({path: ""})

        with capture_logs() as logs:
            deserialize_config(path, source=source)

        assert logs == []

    @pytest.mark.unit
    def test_yaml_warn_pruned_passed_through(self) -> None:
        """Test that pruned keys are logged only when requested."""
        path = Path("/cfg/velacritty.yml")
        source = InMemoryFileSource({path: "window:\n  title: ~\n"})

        with capture_logs() as quiet:
            deserialize_config(path, source=source)
        with capture_logs() as loud:
            deserialize_config(path, source=source, warn_pruned=True)

        assert not any(log["event"] == "removing_null_key" for log in quiet)
        assert any(
            log["event"] == "removing_null_key" and log["key"] == "title"
            for log in loud
        )
