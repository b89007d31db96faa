"""Documentation engine for examplegen.

Generates the GitBook page of one registry example, or of every example,
and keeps ``docs/SUMMARY.md`` in sync.  Produces a :class:`DocsReport`
describing every page written and every failure.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from pydantic import BaseModel, Field

from examplegen.config import Config
from examplegen.errors import ExampleGenError, SourceNotFoundError
from examplegen.registry import DocEntry, Registry
from examplegen.reporter.page import PageRenderer
from examplegen.reporter.summary import IndexDocument, IndexMerger
from examplegen.utils import (
    console,
    print_error,
    print_info,
    print_rule,
    print_success,
)

__all__ = [
    "DocsEngine",
    "DocsReport",
    "IndexDocument",
    "IndexMerger",
    "PageRenderer",
]


# ---------------------------------------------------------------------------
# Data Models
# ---------------------------------------------------------------------------

class DocsReport(BaseModel):
    """Outcome of a documentation run."""

    generated: list[str] = Field(default_factory=list, description="Written page paths")
    failed: dict[str, str] = Field(
        default_factory=dict, description="Doc id -> error message"
    )
    links_added: int = Field(default=0)

    @property
    def success(self) -> bool:
        return not self.failed


# ---------------------------------------------------------------------------
# DocsEngine
# ---------------------------------------------------------------------------

class DocsEngine:
    """Renders documentation pages and merges them into the index.

    Usage::

        engine = DocsEngine(config, registry)
        await engine.generate("fhe-counter")
        report = await engine.generate_all()
    """

    def __init__(
        self,
        config: Config,
        registry: Registry,
        renderer: PageRenderer | None = None,
        merger: IndexMerger | None = None,
    ) -> None:
        self.config = config
        self.registry = registry
        self.renderer = renderer or PageRenderer(config.layout)
        self.merger = merger or IndexMerger(
            config.index_path, config.naming.default_index_category
        )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def generate(self, doc_id: str, update_index: bool = True) -> Path:
        """Generate the page for *doc_id* and optionally index it.

        Raises:
            ConfigurationError: Unknown id.
            SourceNotFoundError: Contract or test file missing.
        """
        entry = self.registry.doc(doc_id)
        print_info(f"Generating documentation for: {entry.title}")

        output = await asyncio.to_thread(self._write_page, entry)
        print_success(f"Documentation generated: {entry.output_path}")

        if update_index:
            await asyncio.to_thread(self.merger.merge, entry)
        return output

    async def generate_all(self, update_index: bool = True) -> DocsReport:
        """Generate every page in registry order, then run one index pass.

        A failing page is recorded in the report and does not stop the run.
        The index pass covers the whole registry, in registry order.
        """
        report = DocsReport()
        print_info(f"Generating documentation for {len(self.registry.docs)} examples")

        for doc_id in self.registry.docs:
            try:
                path = await self.generate(doc_id, update_index=False)
            except (ExampleGenError, OSError, ValueError) as exc:
                print_error(f"Failed to generate docs for {doc_id}: {exc}")
                report.failed[doc_id] = str(exc)
                continue
            report.generated.append(str(path))

        if update_index:
            console.print()
            print_info(f"Updating {self.config.index_file}...")
            report.links_added = await asyncio.to_thread(
                self.merger.merge_all, self.registry.docs.values()
            )

        print_rule(f"Generated {len(report.generated)} documentation files")
        if report.failed:
            print_error(f"Failed: {len(report.failed)}")
        return report

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _read(self, relative: str, kind: str) -> str:
        path = self.config.resolve(relative)
        if not path.is_file():
            raise SourceNotFoundError(relative, kind=kind)
        return path.read_text(encoding="utf-8")

    def _write_page(self, entry: DocEntry) -> Path:
        source_text = self._read(entry.source_path, "Contract")
        test_text = self._read(entry.test_path, "Test")
        content = self.renderer.render(entry, source_text, test_text)
        return self.renderer.write(self.config.resolve(entry.output_path), content)
