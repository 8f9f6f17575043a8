"""
Settings loading for the mizan shell.

Sources, highest precedence first:
    1. Command-line overrides (``--log-level``, ``--currency``)
    2. Environment variables (MIZAN_SECTION__KEY)
    3. Config file (YAML or JSON), if present
    4. Defaults declared on ``MizanConfig``

The merged mapping is validated once into a ``MizanConfig``; the rest of the
program only ever sees that typed object.
"""

import json
import os
from collections.abc import Mapping
from typing import Any

import yaml
from pydantic import ValidationError as PydanticValidationError

from .config_schema import MizanConfig
from .exceptions import ConfigurationError

ENV_PREFIX = "MIZAN_"


def _read_file(path: str) -> dict[str, Any]:
    ext = os.path.splitext(path)[1].lower()
    if ext not in (".yaml", ".yml", ".json"):
        raise ConfigurationError(f"Unsupported config file type: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f) if ext == ".json" else yaml.safe_load(f) or {}
    except OSError as e:
        raise ConfigurationError(f"Could not read config file {path}: {e.strerror or e}") from e
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Could not parse config file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {path} must contain a mapping at the top level")
    return data


def _set_dotted(target: dict[str, Any], parts: list[str], value: Any) -> None:
    *sections, leaf = parts
    for section in sections:
        if not isinstance(target.get(section), dict):
            target[section] = {}
        target = target[section]
    target[leaf] = value


def _merge(target: dict[str, Any], source: Mapping[str, Any]) -> None:
    for key, value in source.items():
        if isinstance(target.get(key), dict) and isinstance(value, dict):
            _merge(target[key], value)
        else:
            target[key] = value


def load_settings(
    config_file: str | None = None,
    overrides: Mapping[str, Any] | None = None,
    env_prefix: str = ENV_PREFIX,
) -> MizanConfig:
    """Build validated settings from file, environment, and overrides.

    Args:
        config_file: YAML or JSON file. A missing file is not an error.
        overrides: Dot-path keys such as ``"display.currency"``. ``None``
            values are skipped so unset CLI options fall through.
        env_prefix: Prefix for environment variable overrides.

    Raises:
        ConfigurationError: Unreadable or malformed file, or invalid values.
    """
    data: dict[str, Any] = {}

    if config_file:
        path = os.path.expanduser(config_file)
        if os.path.exists(path):
            _merge(data, _read_file(path))

    for env_key, env_value in os.environ.items():
        if env_prefix and env_key.startswith(env_prefix):
            _set_dotted(data, env_key[len(env_prefix) :].lower().split("__"), env_value)

    for key_path, value in (overrides or {}).items():
        if value is not None:
            _set_dotted(data, key_path.split("."), value)

    try:
        return MizanConfig.model_validate(data)
    except PydanticValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e
