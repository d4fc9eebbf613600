"""
Unit tests for sqlscript.core.script (SQLScript collection).
"""

from collections.abc import Sequence

import pytest

from sqlscript import SQLScript, ScriptSettings, SourceUnreadableError

TWO_STATEMENTS = """
-- Create users table
CREATE TABLE users (id INTEGER PRIMARY KEY, username TEXT NOT NULL);

/* Seed data */
INSERT INTO users (id, username) VALUES (1, 'john_doe');
"""


class TestConstruction:
    """Tests for building scripts from strings."""

    def test_from_string(self) -> None:
        script = SQLScript(TWO_STATEMENTS)
        assert len(script) == 2
        assert script[0] == "CREATE TABLE users (id INTEGER PRIMARY KEY, username TEXT NOT NULL)"
        assert script[1] == "INSERT INTO users (id, username) VALUES (1, 'john_doe')"

    def test_default_is_empty(self) -> None:
        script = SQLScript()
        assert len(script) == 0
        assert script.is_empty
        assert not script

    @pytest.mark.parametrize("text", ["", "   ", "-- c", "/* c */\n-- d\n", "/* open"])
    def test_comment_or_whitespace_only_is_empty(self, text: str) -> None:
        assert SQLScript(text).is_empty

    def test_non_empty_is_truthy(self) -> None:
        script = SQLScript("SELECT 1")
        assert script
        assert not script.is_empty

    def test_settings_control_trigger_blocks(self) -> None:
        sql = "CREATE TRIGGER tr AFTER INSERT ON t BEGIN DELETE FROM u; END;"
        assert len(SQLScript(sql)) == 1
        assert len(SQLScript(sql, ScriptSettings(trigger_blocks=False))) == 2


class TestSequenceBehaviour:
    """Tests for read-only sequence access."""

    def test_is_a_sequence(self) -> None:
        assert isinstance(SQLScript(), Sequence)

    def test_iteration_in_order_and_restartable(self) -> None:
        script = SQLScript("SELECT 1; SELECT 2; SELECT 3;")
        assert list(script) == ["SELECT 1", "SELECT 2", "SELECT 3"]
        assert list(script) == ["SELECT 1", "SELECT 2", "SELECT 3"]

    def test_enumerate(self) -> None:
        script = SQLScript("SELECT 1; SELECT 2;")
        assert list(enumerate(script)) == [(0, "SELECT 1"), (1, "SELECT 2")]

    def test_index_out_of_range(self) -> None:
        script = SQLScript("SELECT 1;")
        with pytest.raises(IndexError):
            script[1]

    def test_slice_returns_tuple(self) -> None:
        script = SQLScript("SELECT 1; SELECT 2; SELECT 3;")
        assert script[1:] == ("SELECT 2", "SELECT 3")

    def test_contains_and_index(self) -> None:
        script = SQLScript("SELECT 1; SELECT 2;")
        assert "SELECT 2" in script
        assert script.index("SELECT 2") == 1
        assert script.count("SELECT 1") == 1

    def test_statements_tuple(self) -> None:
        assert SQLScript("SELECT 1;").statements == ("SELECT 1",)

    def test_cannot_be_modified(self) -> None:
        script = SQLScript("SELECT 1;")
        with pytest.raises(TypeError):
            script[0] = "DROP TABLE users"  # type: ignore[index]
        with pytest.raises(AttributeError):
            script.append("SELECT 2")  # type: ignore[attr-defined]

    def test_equality_and_hash(self) -> None:
        first = SQLScript("SELECT 1; -- a\nSELECT 2;")
        second = SQLScript("SELECT 1;\n/* b */ SELECT 2")
        assert first == second
        assert hash(first) == hash(second)
        assert first != SQLScript("SELECT 1;")
        assert first != ["SELECT 1", "SELECT 2"]

    def test_repr(self) -> None:
        assert repr(SQLScript("SELECT 1;")) == "SQLScript(['SELECT 1'])"


class TestLoaders:
    """Tests for file, URL and resource loaders."""

    def test_from_file(self, script_file) -> None:
        path = script_file(TWO_STATEMENTS)
        assert SQLScript.from_file(path) == SQLScript(TWO_STATEMENTS)

    def test_from_file_accepts_str_path(self, script_file) -> None:
        path = script_file("SELECT 1;")
        assert list(SQLScript.from_file(str(path))) == ["SELECT 1"]

    def test_from_file_with_encoding(self, tmp_path) -> None:
        path = tmp_path / "latin.sql"
        path.write_bytes("SELECT 'café';".encode("latin-1"))
        assert list(SQLScript.from_file(path, encoding="latin-1")) == ["SELECT 'café'"]

    def test_from_file_encoding_from_settings(self, tmp_path) -> None:
        path = tmp_path / "latin.sql"
        path.write_bytes("SELECT 'é';".encode("latin-1"))
        script = SQLScript.from_file(path, settings=ScriptSettings(encoding="latin-1"))
        assert list(script) == ["SELECT 'é'"]

    def test_from_file_missing(self, tmp_path) -> None:
        with pytest.raises(SourceUnreadableError) as exc_info:
            SQLScript.from_file(tmp_path / "missing.sql")
        assert exc_info.value.code == "file_not_found"

    def test_from_file_undecodable(self, undecodable_file) -> None:
        with pytest.raises(SourceUnreadableError) as exc_info:
            SQLScript.from_file(undecodable_file)
        assert exc_info.value.code == "decode_failed"
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    def test_from_url(self, script_file) -> None:
        path = script_file("SELECT 1; SELECT 2;")
        assert len(SQLScript.from_url(path.as_uri())) == 2

    def test_from_url_unsupported_scheme(self) -> None:
        with pytest.raises(SourceUnreadableError) as exc_info:
            SQLScript.from_url("https://example.com/schema.sql")
        assert exc_info.value.code == "unsupported_scheme"

    def test_from_resource(self, resources_dir) -> None:
        script = SQLScript.from_resource("valid_script", "sql", resources_dir)
        assert script is not None
        assert len(script) == 2

    def test_from_resource_not_found_returns_none(self, resources_dir) -> None:
        assert SQLScript.from_resource("missing_script", "sql", resources_dir) is None

    def test_from_resource_unreadable_raises(self, undecodable_file) -> None:
        with pytest.raises(SourceUnreadableError):
            SQLScript.from_resource("invalid_script", "sql", undecodable_file.parent)
