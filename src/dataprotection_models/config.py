"""Configuration helpers for model conversion."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .serialization import SerializationMode

logger = logging.getLogger(__name__)

DEFAULT_PROFILE = "default"


@dataclass(slots=True)
class CodecConfig:
    strict: bool = False
    case_sensitive: bool = False
    serialization_mode: SerializationMode = SerializationMode.INCLUDE_ALL

    @classmethod
    def from_env(cls) -> "CodecConfig":
        strict = _parse_bool(os.getenv("DATAPROTECTION_MODELS_STRICT"))
        case_sensitive = _parse_bool(os.getenv("DATAPROTECTION_MODELS_CASE_SENSITIVE"))
        mode = _parse_mode(os.getenv("DATAPROTECTION_MODELS_SERIALIZATION_MODE"))
        return cls(
            strict=bool(strict),
            case_sensitive=bool(case_sensitive),
            serialization_mode=mode,
        )

    @classmethod
    def from_file(
        cls,
        profile: str | None = None,
        *,
        config_path: str | Path | None = None,
    ) -> "CodecConfig":
        payload = load_config_file(config_path=config_path)
        profiles = payload.get("profiles")
        current_profile = payload.get("currentProfile")

        selected_name = (profile or current_profile or DEFAULT_PROFILE).strip() or DEFAULT_PROFILE
        profile_entry: dict[str, Any] = {}
        if isinstance(profiles, dict) and isinstance(profiles.get(selected_name), dict):
            profile_entry = dict(profiles[selected_name])
        elif isinstance(profiles, dict) and isinstance(profiles.get(DEFAULT_PROFILE), dict):
            profile_entry = dict(profiles[DEFAULT_PROFILE])

        raw_mode = profile_entry.get("serializationMode")
        return cls(
            strict=bool(_parse_bool(profile_entry.get("strict"))),
            case_sensitive=bool(_parse_bool(profile_entry.get("caseSensitive"))),
            serialization_mode=_parse_mode(raw_mode if isinstance(raw_mode, str) else None),
        )


def default_config_path() -> Path:
    xdg = os.getenv("XDG_CONFIG_HOME")
    root = Path(xdg) if xdg else Path.home() / ".config"
    return root / "dataprotection-models" / "config.json"


def load_config_file(*, config_path: str | Path | None = None) -> dict[str, Any]:
    path = Path(config_path) if config_path else default_config_path()
    if not path.exists():
        return {"currentProfile": DEFAULT_PROFILE, "profiles": {}}

    try:
        with path.open("r", encoding="utf-8") as handle:
            parsed = json.load(handle)
    except (OSError, json.JSONDecodeError) as error:
        logger.debug("ignoring unreadable config file %s: %s", path, error)
        return {"currentProfile": DEFAULT_PROFILE, "profiles": {}}

    if not isinstance(parsed, dict):
        return {"currentProfile": DEFAULT_PROFILE, "profiles": {}}
    return parsed


def _parse_bool(value: Any) -> bool | None:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
    return None


def _parse_mode(value: str | None) -> SerializationMode:
    try:
        return SerializationMode.parse(value)
    except ValueError:
        logger.debug("ignoring invalid serialization mode %r", value)
        return SerializationMode.INCLUDE_ALL
