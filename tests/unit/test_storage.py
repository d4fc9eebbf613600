"""
Unit tests for sqlscript.core.storage (script sources).
"""

from pathlib import Path

import pytest

from sqlscript.core.storage import find_resource, path_from_url, read_script_text
from sqlscript.domain.errors import SourceUnreadableError


class TestReadScriptText:
    """Tests for read_script_text."""

    def test_reads_utf8(self, script_file) -> None:
        path = script_file("SELECT 'ünïcødé';")
        assert read_script_text(path) == "SELECT 'ünïcødé';"

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(SourceUnreadableError) as exc_info:
            read_script_text(tmp_path / "nope.sql")
        assert exc_info.value.code == "file_not_found"
        assert "nope.sql" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    def test_directory_is_unreadable(self, tmp_path) -> None:
        with pytest.raises(SourceUnreadableError) as exc_info:
            read_script_text(tmp_path)
        assert exc_info.value.code == "read_failed"

    def test_undecodable_bytes(self, undecodable_file) -> None:
        with pytest.raises(SourceUnreadableError) as exc_info:
            read_script_text(undecodable_file)
        assert exc_info.value.code == "decode_failed"

    def test_unknown_encoding(self, script_file) -> None:
        with pytest.raises(SourceUnreadableError) as exc_info:
            read_script_text(script_file("SELECT 1;"), encoding="no-such-codec")
        assert exc_info.value.code == "decode_failed"


class TestPathFromUrl:
    """Tests for path_from_url."""

    def test_file_url(self) -> None:
        assert path_from_url("file:///tmp/schema.sql") == Path("/tmp/schema.sql")

    def test_file_url_localhost(self) -> None:
        assert path_from_url("file://localhost/tmp/schema.sql") == Path("/tmp/schema.sql")

    def test_file_url_percent_encoded(self) -> None:
        assert path_from_url("file:///tmp/my%20schema.sql") == Path("/tmp/my schema.sql")

    def test_plain_path(self) -> None:
        assert path_from_url("scripts/schema.sql") == Path("scripts/schema.sql")

    def test_round_trip_with_as_uri(self, tmp_path) -> None:
        path = tmp_path / "a b.sql"
        assert path_from_url(path.as_uri()) == path

    @pytest.mark.parametrize(
        "url",
        ["https://example.com/schema.sql", "ftp://host/schema.sql", "file://remote/schema.sql"],
    )
    def test_unsupported(self, url: str) -> None:
        with pytest.raises(SourceUnreadableError) as exc_info:
            path_from_url(url)
        assert exc_info.value.code == "unsupported_scheme"


class TestFindResource:
    """Tests for find_resource."""

    def test_name_and_extension(self, resources_dir) -> None:
        assert find_resource("valid_script", "sql", resources_dir) == (
            resources_dir / "valid_script.sql"
        )

    def test_extension_with_leading_dot(self, resources_dir) -> None:
        assert find_resource("valid_script", ".sql", resources_dir) == (
            resources_dir / "valid_script.sql"
        )

    def test_exact_name_without_extension(self, resources_dir) -> None:
        assert find_resource("valid_script.sql", None, resources_dir) == (
            resources_dir / "valid_script.sql"
        )
        assert find_resource("valid_script.sql", "", resources_dir) is not None
        assert find_resource("valid_script", None, resources_dir) is None

    def test_no_name_picks_first_with_extension(self, resources_dir) -> None:
        assert find_resource(None, "sql", resources_dir) == resources_dir / "empty_script.sql"

    def test_no_name_and_no_extension(self, resources_dir) -> None:
        assert find_resource(None, None, resources_dir) is None

    def test_no_match_for_extension(self, resources_dir) -> None:
        assert find_resource(None, "ddl", resources_dir) is None

    def test_missing_name(self, resources_dir) -> None:
        assert find_resource("missing", "sql", resources_dir) is None

    def test_missing_directory(self, tmp_path) -> None:
        assert find_resource("x", "sql", tmp_path / "absent") is None

    def test_directory_is_not_a_resource(self, tmp_path) -> None:
        (tmp_path / "folder.sql").mkdir()
        assert find_resource("folder", "sql", tmp_path) is None

    def test_package_by_name(self) -> None:
        resource = find_resource("cli", "py", "sqlscript")
        assert resource is not None
        assert resource.name == "cli.py"

    def test_unknown_package(self) -> None:
        assert find_resource("x", "sql", "no_such_package_for_sql_scripts") is None

    def test_current_directory_default(self, tmp_path, monkeypatch) -> None:
        (tmp_path / "init.sql").write_text("SELECT 1;", encoding="utf-8")
        monkeypatch.chdir(tmp_path)
        assert find_resource("init", "sql") == tmp_path / "init.sql"
