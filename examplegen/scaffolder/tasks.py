"""Rename the template's per-contract hardhat task file.

The base template ships ``tasks/<Placeholder>.ts`` wired to its own
placeholder contract.  After a single example is scaffolded the file is
rewritten to reference the new contract instead.  The rewrite is a plain
find-and-replace over the pascal-case and camel-case spellings of the
placeholder; it does not understand TypeScript, so a rewriter that does can
be passed in through :class:`IdentifierRewriter`.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Optional, Protocol

from examplegen.utils import to_camel


class IdentifierRewriter(Protocol):
    """Replaces one contract identifier with another inside source text."""

    def rewrite(self, text: str, old: str, old_camel: str, new: str) -> str:
        ...


class RegexIdentifierRewriter:
    """Best-effort rewrite: every occurrence of either spelling is replaced."""

    def rewrite(self, text: str, old: str, old_camel: str, new: str) -> str:
        text = re.sub(re.escape(old), lambda _: new, text)
        return re.sub(re.escape(old_camel), lambda _: to_camel(new), text)


def retarget_task_file(
    tasks_dir: Path,
    placeholder: str,
    placeholder_camel: str,
    contract_name: str,
    ext: str = ".ts",
    rewriter: Optional[IdentifierRewriter] = None,
) -> Optional[Path]:
    """Rewrite ``tasks/<placeholder><ext>`` to target *contract_name*.

    Returns the path of the rewritten file, or ``None`` when the template
    has no task file for its placeholder (the directory is left untouched).
    """
    old_file = tasks_dir / f"{placeholder}{ext}"
    if not old_file.is_file():
        return None

    rewriter = rewriter or RegexIdentifierRewriter()
    content = old_file.read_text(encoding="utf-8")
    new_file = tasks_dir / f"{contract_name}{ext}"
    new_file.write_text(
        rewriter.rewrite(content, placeholder, placeholder_camel, contract_name),
        encoding="utf-8",
    )
    if new_file != old_file:
        old_file.unlink()
    return new_file
