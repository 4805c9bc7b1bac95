"""Editor configuration loaded from an optional YAML file."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml

from romhex.core.geometry import GridGeometry

CONFIG_ENV_VAR = "ROMHEX_CONFIG"


class ConfigError(Exception):
    def __init__(self, errors: list[str]):
        super().__init__("; ".join(errors))
        self.errors = errors


@dataclass(frozen=True)
class EditorConfig:
    geometry: GridGeometry = field(default_factory=GridGeometry)
    confirm_quit: bool = True


def get_user_config_path() -> Path:
    """Get platform-appropriate user config file path."""
    if os.name == "nt":  # Windows
        base = os.environ.get("APPDATA", os.path.expanduser("~"))
        return Path(base) / "romhex" / "config.yaml"
    return Path.home() / ".config" / "romhex" / "config.yaml"


def parse_config(text: str) -> EditorConfig:
    try:
        data = yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        raise ConfigError([f"YAML parse error: {e}"]) from None

    if not isinstance(data, dict):
        raise ConfigError(["Top-level YAML must be a mapping (use 'geometry' and 'confirm_quit')."])

    errors: list[str] = []
    for key in data:
        if key not in ("geometry", "confirm_quit"):
            errors.append(f"unknown key '{key}'")

    geometry = GridGeometry()
    raw_geometry = data.get("geometry")
    if raw_geometry is not None:
        if not isinstance(raw_geometry, dict):
            errors.append("geometry must be a mapping")
        else:
            known = {f.name for f in fields(GridGeometry)}
            unknown = [k for k in raw_geometry if k not in known]
            for k in unknown:
                errors.append(f"unknown geometry key '{k}'")
            if not unknown:
                geometry = GridGeometry(**raw_geometry)
                errors.extend(f"geometry: {msg}" for msg in geometry.validate())

    confirm_quit: Any = data.get("confirm_quit", True)
    if not isinstance(confirm_quit, bool):
        errors.append("confirm_quit must be true or false")

    if errors:
        raise ConfigError(errors)
    return EditorConfig(geometry=geometry, confirm_quit=confirm_quit)


def load_config(path: str | None = None) -> EditorConfig:
    """Load configuration from `path`, $ROMHEX_CONFIG, or the user config file.

    An explicitly named file must exist; the user config file is optional.
    """
    explicit = path or os.environ.get(CONFIG_ENV_VAR)
    if explicit:
        try:
            text = Path(explicit).read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigError([f"cannot read config {explicit}: {e}"]) from None
        return parse_config(text)

    user_path = get_user_config_path()
    if user_path.is_file():
        return parse_config(user_path.read_text(encoding="utf-8"))
    return EditorConfig()
