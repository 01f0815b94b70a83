"""Load runtime settings from YAML (with fallbacks to config defaults)."""

from __future__ import annotations

import logging
from dataclasses import fields, replace
from pathlib import Path

import yaml

from .config import SETTINGS, AppSettings

logger = logging.getLogger(__name__)

_CACHE: AppSettings | None = None


def load_settings(base_path: str | Path | None = None, *, reload: bool = False) -> AppSettings:
    """Return settings overridden by ``settings.yaml`` when present.

    Unknown keys are ignored and a malformed file falls back to the defaults
    in :mod:`service_desk_app.core.config`.
    """
    global _CACHE
    if _CACHE is not None and not reload:
        return _CACHE
    base = Path(base_path or Path(__file__).resolve().parent.parent)
    yaml_path = base / "settings.yaml"
    if not yaml_path.exists():
        _CACHE = SETTINGS
        return _CACHE
    try:
        data = yaml.safe_load(yaml_path.read_text()) or {}
    except (OSError, yaml.YAMLError) as exc:
        logger.warning("Ignoring unreadable settings file %s: %s", yaml_path, exc)
        _CACHE = SETTINGS
        return _CACHE
    section = data.get("service_desk", data) if isinstance(data, dict) else {}
    if not isinstance(section, dict):
        section = {}
    known = {f.name for f in fields(AppSettings)}
    overrides = {k: v for k, v in section.items() if k in known and v is not None}
    _CACHE = replace(SETTINGS, **overrides)
    return _CACHE


def get_setting(name: str):
    return getattr(load_settings(), name)
