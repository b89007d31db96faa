"""Load a registry from a YAML or JSON file.

The file holds three optional top-level lists, ``examples``, ``categories``
and ``docs``, whose items use the same field names as the descriptor
models.  List order becomes registry order.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from examplegen.errors import ConfigurationError
from examplegen.registry.models import (
    CategoryDescriptor,
    DocEntry,
    ExampleDescriptor,
    Registry,
)


def _read_mapping(path: Path) -> dict[str, Any]:
    raw = path.read_text(encoding="utf-8")
    try:
        if path.suffix.lower() == ".json":
            data = json.loads(raw)
        else:
            data = yaml.safe_load(raw)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ConfigurationError(f"Could not parse registry file {path}: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Registry file {path} must contain a mapping at the root")
    return data


def _as_list(data: dict[str, Any], key: str, path: Path) -> list[Any]:
    value = data.get(key) or []
    if not isinstance(value, list):
        raise ConfigurationError(f"'{key}' in {path} must be a list")
    return value


def load_registry(path: str | Path) -> Registry:
    """Parse *path* into a validated :class:`Registry`.

    Raises:
        ConfigurationError: If the file is missing, unparsable, or any entry
            fails validation.
    """
    path = Path(path)
    if not path.is_file():
        raise ConfigurationError(f"Registry file not found: {path}")

    data = _read_mapping(path)
    try:
        return Registry.build(
            examples=[ExampleDescriptor(**item) for item in _as_list(data, "examples", path)],
            categories=[
                CategoryDescriptor(**item) for item in _as_list(data, "categories", path)
            ],
            docs=[DocEntry(**item) for item in _as_list(data, "docs", path)],
        )
    except (ValidationError, TypeError) as exc:
        raise ConfigurationError(f"Invalid registry file {path}: {exc}") from exc
