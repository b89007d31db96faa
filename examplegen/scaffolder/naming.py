"""Content-derived naming for contract sources.

The canonical identifier of an example is the name its source file declares
for itself, not the registry key, so generated filenames and deployment tags
always match the contract that will actually be compiled.
"""

from __future__ import annotations

import re
from pathlib import Path

from examplegen.errors import NameExtractionError, SourceNotFoundError

# ``contract Foo is Bar {`` / ``contract Foo {`` at the start of a line.
_CONTRACT_RE = re.compile(r"^\s*contract\s+(\w+)(?:\s+is\s+|\s*\{)", re.MULTILINE)

# First line of a leading ``/** ... */`` block, and ``@notice`` tags.
_DOC_COMMENT_RE = re.compile(r"/\*\*\s*\n\s*\*\s*(.+?)\s*\n")
_NOTICE_RE = re.compile(r"@notice\s+(.+)")


def extract_contract_name(text: str, source: str | Path = "<text>") -> str:
    """Return the first contract identifier declared in *text*.

    Args:
        text: Contract source.
        source: Label used in the error message.

    Raises:
        NameExtractionError: If no declaration line matches.
    """
    match = _CONTRACT_RE.search(text)
    if match is None:
        raise NameExtractionError(source)
    return match.group(1)


def read_contract_name(path: str | Path) -> str:
    """Read a contract file and extract its declared identifier."""
    path = Path(path)
    if not path.is_file():
        raise SourceNotFoundError(path, kind="Contract")
    return extract_contract_name(path.read_text(encoding="utf-8"), source=path)


def extract_description(text: str) -> str:
    """Scrape a one-line description from the source's documentation.

    Prefers the first line of the leading ``/** ... */`` comment, then the
    first ``@notice`` tag.  Returns ``""`` when neither is present.
    """
    comment = _DOC_COMMENT_RE.search(text)
    if comment:
        return comment.group(1)
    notice = _NOTICE_RE.search(text)
    if notice:
        return notice.group(1).strip()
    return ""
