"""
Pydantic models for sqlscript settings.

Settings can be passed to the SQLScript loaders directly or read from a JSON
file (e.g. ``sqlscript.json``) with :func:`load_settings`.
"""

import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .domain.errors import SettingsError


class ScriptSettings(BaseModel):
    """How scripts are decoded, split and checked"""

    model_config = ConfigDict(populate_by_name=True, extra="forbid", frozen=True)

    encoding: str = "utf-8"
    trigger_blocks: bool = Field(True, alias="triggerBlocks")  # keep CREATE TRIGGER bodies whole
    dialect: str = "sqlite"  # sqlglot dialect used by `sqlscript check`


DEFAULT_SETTINGS = ScriptSettings()


def load_settings(path: Path) -> ScriptSettings:
    """Read a settings JSON file"""
    if not path.exists():
        raise SettingsError(message=f"Settings file not found: {path}", code="settings_not_found")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise SettingsError(
            message=f"Settings file is not valid JSON: {path}: {e}", code="settings_invalid"
        ) from e

    try:
        return ScriptSettings.model_validate(data)
    except ValidationError as e:
        raise SettingsError(
            message=f"Invalid settings in {path}: {e}", code="settings_invalid"
        ) from e
