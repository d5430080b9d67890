from __future__ import annotations

import json
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

import jsonschema

from httpmediator.core.errors import ConfigInvalid

CONFIG_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "host": {"type": "string", "minLength": 1},
        "port": {"type": "integer", "minimum": 1, "maximum": 65535},
        "log_level": {"enum": ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]},
    },
}


@dataclass(frozen=True)
class ServerConfig:
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "INFO"

    def with_overrides(self, **overrides: Any) -> "ServerConfig":
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def read_json(path: Path) -> dict:
    return json.loads(path.read_text(encoding="utf-8"))


def validate_config(raw: Any) -> None:
    try:
        jsonschema.Draft202012Validator(CONFIG_SCHEMA).validate(raw)
    except jsonschema.ValidationError as e:
        raise ConfigInvalid(code="CONFIG_INVALID", message=e.message) from e


def load_config(config_path: Path | None) -> ServerConfig:
    if config_path is None:
        return ServerConfig()
    try:
        raw = read_json(config_path)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigInvalid(code="CONFIG_UNREADABLE", message=f"{config_path}: {e}") from e
    validate_config(raw)
    return ServerConfig().with_overrides(**raw)
