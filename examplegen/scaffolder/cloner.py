"""Recursive template copy used as the first scaffolding step."""

from __future__ import annotations

import os
import shutil
from collections.abc import Iterable
from pathlib import Path

from examplegen.config import DEFAULT_EXCLUDED_DIRS
from examplegen.errors import DestinationExistsError, SourceNotFoundError


def _ignore_dirs(excluded: frozenset[str]):
    """Build a ``copytree`` ignore callback that drops excluded directories.

    Only real directories are dropped; a regular file that happens to be
    called ``cache`` is still copied.
    """

    def _ignore(directory: str, names: list[str]) -> set[str]:
        return {
            name
            for name in names
            if name in excluded
            and os.path.isdir(os.path.join(directory, name))
            and not os.path.islink(os.path.join(directory, name))
        }

    return _ignore


def clone_template(
    template_dir: str | Path,
    destination: str | Path,
    excluded_dirs: Iterable[str] = DEFAULT_EXCLUDED_DIRS,
) -> Path:
    """Copy *template_dir* to *destination*, skipping build-artifact directories.

    Symlinks are recreated rather than followed, and ``shutil.copy2`` keeps
    permission bits and timestamps.  Contents are copied byte for byte.

    Raises:
        SourceNotFoundError: If the template directory does not exist.
        DestinationExistsError: If *destination* exists before the copy.
    """
    template = Path(template_dir)
    target = Path(destination)

    if not template.is_dir():
        raise SourceNotFoundError(template, kind="Template directory")
    if target.exists() or target.is_symlink():
        raise DestinationExistsError(target)

    try:
        shutil.copytree(
            template,
            target,
            symlinks=True,
            ignore=_ignore_dirs(frozenset(excluded_dirs)),
            copy_function=shutil.copy2,
        )
    except FileExistsError as exc:
        # Lost a race with another writer between the check and the copy.
        raise DestinationExistsError(target) from exc
    return target
