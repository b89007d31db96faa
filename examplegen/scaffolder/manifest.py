"""Rewrite identifying fields of a generated project's ``package.json``."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from examplegen.errors import ManifestParseError, SourceNotFoundError
from examplegen.utils import load_json, save_json


def apply_manifest_fields(
    manifest: dict[str, Any],
    *,
    name: str,
    description: str,
    homepage: str,
    extra_dependencies: Mapping[str, str] | None = None,
) -> dict[str, Any]:
    """Return a copy of *manifest* with the identifying fields replaced.

    Existing keys keep their position; keys that were absent are appended.
    Extra dependencies are merged over the existing ``dependencies`` mapping
    and never replace it.
    """
    patched = dict(manifest)
    patched["name"] = name
    patched["description"] = description
    patched["homepage"] = homepage
    if extra_dependencies:
        dependencies = patched.get("dependencies") or {}
        if not isinstance(dependencies, dict):
            raise ValueError("'dependencies' must be an object")
        patched["dependencies"] = {**dependencies, **extra_dependencies}
    return patched


def patch_manifest(
    path: str | Path,
    *,
    name: str,
    description: str,
    homepage: str,
    extra_dependencies: Mapping[str, str] | None = None,
) -> dict[str, Any]:
    """Patch the manifest at *path* in place and return the new content.

    Raises:
        SourceNotFoundError: If the manifest does not exist.
        ManifestParseError: If it is not a JSON object, or its
            ``dependencies`` field is not an object when a merge is needed.
    """
    path = Path(path)
    if not path.is_file():
        raise SourceNotFoundError(path, kind="Manifest")
    try:
        manifest = load_json(path)
    except json.JSONDecodeError as exc:
        raise ManifestParseError(path, str(exc)) from exc
    if not isinstance(manifest, dict):
        raise ManifestParseError(path, "root is not an object")

    try:
        patched = apply_manifest_fields(
            manifest,
            name=name,
            description=description,
            homepage=homepage,
            extra_dependencies=extra_dependencies,
        )
    except ValueError as exc:
        raise ManifestParseError(path, str(exc)) from exc

    save_json(patched, path)
    return patched
