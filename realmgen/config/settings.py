"""
Generator settings loader.

Reads an optional YAML/JSON settings file and applies environment overrides
on top of the built-in defaults.

Settings file format (YAML or JSON):
    templates_dir: ./my_templates
    validate_before_render: true
    trim_blocks: true
    lstrip_blocks: true

Environment variables:
    REALMGEN_CONFIG_FILE    - path to the settings file (optional).
                              Default search path: <cwd>/realmgen.yaml
    REALMGEN_TEMPLATES_DIR  - directory searched for templates before the
                              bundled ones (wins over the file).
"""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, ValidationError

_log = logging.getLogger("realmgen.settings")

DEFAULT_SETTINGS_FILE = "realmgen.yaml"


class GeneratorSettings(BaseModel):
    templates_dir: Optional[Path] = None
    validate_before_render: bool = True
    trim_blocks: bool = True
    lstrip_blocks: bool = True
    keep_trailing_newline: bool = True


def load_settings(path: Optional[Path] = None) -> GeneratorSettings:
    """
    Load generator settings from a YAML or JSON file plus environment.

    An absent, unreadable or malformed file yields the defaults; the problem
    is logged, not raised.
    """
    data = _read_settings_file(_resolve_path(path))

    try:
        settings = GeneratorSettings(**data)
    except ValidationError as exc:
        _log.warning("Invalid generator settings, using defaults: %s", exc)
        settings = GeneratorSettings()

    env_templates = os.getenv("REALMGEN_TEMPLATES_DIR", "").strip()
    if env_templates:
        settings = settings.model_copy(update={"templates_dir": Path(env_templates)})
    return settings


def _read_settings_file(resolved: Optional[Path]) -> dict:
    if resolved is None or not resolved.exists():
        return {}

    try:
        raw_text = resolved.read_text(encoding="utf-8")
    except OSError as exc:
        _log.warning("Cannot read settings file %s: %s", resolved, exc)
        return {}

    try:
        data = json.loads(raw_text)
    except json.JSONDecodeError:
        try:
            data = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            _log.warning("Failed to parse settings file %s as JSON or YAML: %s", resolved, exc)
            return {}

    if data is None:
        return {}
    if not isinstance(data, dict):
        _log.warning("Settings file %s must be a mapping, got %s", resolved, type(data).__name__)
        return {}

    _log.info("Loaded %d generator settings from %s", len(data), resolved)
    return data


def _resolve_path(path: Optional[Path]) -> Optional[Path]:
    """Determine the settings file path from argument or env var or default."""
    if path is not None:
        return Path(path)
    env_path = os.getenv("REALMGEN_CONFIG_FILE", "").strip()
    if env_path:
        return Path(env_path)
    return Path.cwd() / DEFAULT_SETTINGS_FILE
