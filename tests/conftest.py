from pathlib import Path

import pytest

RESOURCES_DIR = Path(__file__).parent / "resources"


@pytest.fixture
def resources_dir() -> Path:
    """Directory holding the SQL script fixtures"""
    return RESOURCES_DIR


@pytest.fixture
def script_file(tmp_path):
    """Write a script to a temporary .sql file and return its path"""

    def _write(text: str, name: str = "script.sql") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def undecodable_file(tmp_path) -> Path:
    """A .sql file that is not valid UTF-8"""
    path = tmp_path / "invalid_script.sql"
    path.write_bytes(b"SELECT '\xff\xfe\xfa';")
    return path
