"""The documentation index (``SUMMARY.md``).

The index is handled as a structured :class:`IndexDocument` -- an optional
preamble followed by ``## Category`` blocks of ``- [title](file)`` links --
and only converted to and from markdown at the file boundary.  Merging a
page into the index never duplicates a link, never reorders existing links,
and appends categories in first-seen order, so the index is reproducible
from the registry no matter how many times generation has run before.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from pathlib import Path, PurePosixPath
from typing import Optional

from pydantic import BaseModel, Field

from examplegen.registry import DocEntry
from examplegen.utils import print_info, print_success, print_warning

_HEADER_RE = re.compile(r"^##(?!#)\s*(?P<header>.*?)\s*$")
_LINK_RE = re.compile(r"^\s*[-*]\s+\[(?P<text>.*)\]\((?P<target>[^)]+)\)\s*$")


# ---------------------------------------------------------------------------
# Document model
# ---------------------------------------------------------------------------

class IndexLine(BaseModel):
    """A line of the index; a link unless ``target`` is None."""

    raw: str
    text: Optional[str] = None
    target: Optional[str] = None

    @property
    def is_link(self) -> bool:
        return self.target is not None

    @classmethod
    def link(cls, text: str, target: str) -> "IndexLine":
        return cls(raw=f"- [{text}]({target})", text=text, target=target)

    @classmethod
    def parse(cls, line: str) -> "IndexLine":
        match = _LINK_RE.match(line)
        if match is None:
            return cls(raw=line)
        return cls(raw=line, text=match.group("text"), target=match.group("target"))


class IndexBlock(BaseModel):
    """A ``## header`` and the lines listed under it."""

    header: str
    lines: list[IndexLine] = Field(default_factory=list)

    @property
    def links(self) -> list[IndexLine]:
        return [line for line in self.lines if line.is_link]

    def render(self) -> str:
        return "\n".join([f"## {self.header}", *(line.raw for line in self.lines)])


class IndexDocument(BaseModel):
    """Ordered category blocks, plus any text preceding the first header."""

    preamble: list[str] = Field(default_factory=list)
    blocks: list[IndexBlock] = Field(default_factory=list)

    @classmethod
    def empty(cls, default_category: str) -> "IndexDocument":
        """A fresh index holding one empty block."""
        return cls(blocks=[IndexBlock(header=default_category)])

    @classmethod
    def parse(cls, text: str) -> "IndexDocument":
        """Parse ``SUMMARY.md`` text.

        Blank lines inside a block are dropped; every other line is kept
        verbatim, in order.
        """
        doc = cls()
        current: Optional[IndexBlock] = None
        for line in text.splitlines():
            header = _HEADER_RE.match(line)
            if header:
                current = IndexBlock(header=header.group("header"))
                doc.blocks.append(current)
            elif current is None:
                doc.preamble.append(line)
            elif line.strip():
                current.lines.append(IndexLine.parse(line))
        return doc

    def render(self) -> str:
        """Serialise to markdown: blocks separated by exactly one blank line."""
        chunks: list[str] = []
        preamble = "\n".join(self.preamble).strip("\n")
        if preamble:
            chunks.append(preamble)
        chunks.extend(block.render() for block in self.blocks)
        return "\n\n".join(chunks) + "\n"

    # -- Queries -----------------------------------------------------------

    def find_block(self, header: str) -> Optional[IndexBlock]:
        for block in self.blocks:
            if block.header == header:
                return block
        return None

    @property
    def links(self) -> list[IndexLine]:
        """Every link in the document, preamble included."""
        found = [line for line in map(IndexLine.parse, self.preamble) if line.is_link]
        for block in self.blocks:
            found.extend(block.links)
        return found

    def has_target(self, file_name: str) -> bool:
        """Whether *file_name* is already linked anywhere in the document."""
        return any(
            line.target == file_name or PurePosixPath(line.target).name == file_name
            for line in self.links
        )

    # -- Mutation ----------------------------------------------------------

    def add_link(self, category: str, text: str, target: str) -> bool:
        """Insert a link, returning ``False`` if *target* is already listed.

        The link goes after every existing line of the *category* block, or
        into a new block appended at the end of the document.
        """
        if self.has_target(target):
            return False
        block = self.find_block(category)
        if block is None:
            block = IndexBlock(header=category)
            self.blocks.append(block)
        block.lines.append(IndexLine.link(text, target))
        return True


# ---------------------------------------------------------------------------
# Merger
# ---------------------------------------------------------------------------

class IndexMerger:
    """Merges documentation pages into the persistent index file."""

    def __init__(self, index_path: str | Path, default_category: str = "Basic") -> None:
        self.index_path = Path(index_path)
        self.default_category = default_category

    def load(self) -> IndexDocument:
        if not self.index_path.exists():
            print_warning(f"Creating new {self.index_path.name}")
            return IndexDocument.empty(self.default_category)
        return IndexDocument.parse(self.index_path.read_text(encoding="utf-8"))

    def save(self, document: IndexDocument) -> Path:
        self.index_path.parent.mkdir(parents=True, exist_ok=True)
        self.index_path.write_text(document.render(), encoding="utf-8")
        return self.index_path

    def merge(self, entry: DocEntry) -> bool:
        """Add *entry*'s page to the index; a no-op if it is already linked.

        The whole document is rewritten from the in-memory model.  A fresh
        index file is still written even when nothing was added.
        """
        document = self.load()
        added = document.add_link(entry.category, entry.title, entry.output_name)
        if added or not self.index_path.exists():
            self.save(document)
        if added:
            print_success(f"Updated {self.index_path.name}: {entry.title}")
        else:
            print_info(f"{entry.title} already in {self.index_path.name}")
        return added

    def merge_all(self, entries: Iterable[DocEntry]) -> int:
        """Merge *entries* in order with one read and one write.

        The result is identical to calling :meth:`merge` once per entry.
        Returns the number of links added.
        """
        document = self.load()
        added = 0
        for entry in entries:
            if document.add_link(entry.category, entry.title, entry.output_name):
                added += 1
        if added or not self.index_path.exists():
            self.save(document)
        print_success(f"Updated {self.index_path.name}: {added} new link(s)")
        return added
