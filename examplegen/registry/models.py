"""Pydantic v2 models for the example registry.

Defines the read-only descriptors that name the source files making up one
example, one category of examples, or one documentation page, together with
the ``Registry`` container that the generators receive by injection.
"""

from __future__ import annotations

from pathlib import PurePosixPath
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from examplegen.errors import ConfigurationError


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


# ---------------------------------------------------------------------------
# Descriptors
# ---------------------------------------------------------------------------

class CategoryItem(_Frozen):
    """One contract inside a category, with the files it is tested with."""
    source_path: str = Field(..., description="Contract source, relative to the root")
    test_path: str = Field(..., description="Test file, relative to the root")
    fixture_path: Optional[str] = Field(default=None, description="Optional test fixture")
    auxiliary_paths: tuple[str, ...] = Field(
        default=(), description="Extra files copied next to the test"
    )

    def support_paths(self) -> list[str]:
        """Test, fixture and auxiliary paths in copy order."""
        paths = [self.test_path]
        if self.fixture_path:
            paths.append(self.fixture_path)
        paths.extend(self.auxiliary_paths)
        return paths


class ExampleDescriptor(CategoryItem):
    """A single standalone example."""
    id: str = Field(..., min_length=1)
    description: str = Field(default="")


class CategoryDescriptor(_Frozen):
    """A group of examples generated into one project."""
    id: str = Field(..., min_length=1)
    name: str
    description: str = Field(default="")
    examples: tuple[CategoryItem, ...] = Field(default=())
    extra_dependencies: Optional[dict[str, str]] = Field(
        default=None, description="Package name -> version constraint merged into the manifest"
    )


class DocEntry(_Frozen):
    """A documentation page generated from an example's source and test."""
    id: str = Field(..., min_length=1)
    title: str
    description: str = Field(default="")
    source_path: str
    test_path: str
    output_path: str = Field(..., description="Page path, relative to the root")
    category: str

    @property
    def output_name(self) -> str:
        """Basename of the page; the key used in the index."""
        return PurePosixPath(self.output_path).name


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

class Registry(_Frozen):
    """Immutable mapping of example, category and doc identifiers.

    Dict insertion order is registry order; batch operations iterate in it.
    """
    examples: dict[str, ExampleDescriptor] = Field(default_factory=dict)
    categories: dict[str, CategoryDescriptor] = Field(default_factory=dict)
    docs: dict[str, DocEntry] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _check_keys(self) -> "Registry":
        for label, table in (
            ("example", self.examples),
            ("category", self.categories),
            ("doc", self.docs),
        ):
            for key, value in table.items():
                if key != value.id:
                    raise ValueError(f"{label} key {key!r} does not match id {value.id!r}")
        outputs = [entry.output_name for entry in self.docs.values()]
        duplicates = sorted({name for name in outputs if outputs.count(name) > 1})
        if duplicates:
            raise ValueError(f"duplicate doc output files: {', '.join(duplicates)}")
        return self

    @classmethod
    def build(
        cls,
        examples: list[ExampleDescriptor] | None = None,
        categories: list[CategoryDescriptor] | None = None,
        docs: list[DocEntry] | None = None,
    ) -> "Registry":
        """Construct a registry from ordered descriptor lists."""
        return cls(
            examples={e.id: e for e in examples or []},
            categories={c.id: c for c in categories or []},
            docs={d.id: d for d in docs or []},
        )

    def example(self, example_id: str) -> ExampleDescriptor:
        try:
            return self.examples[example_id]
        except KeyError:
            raise ConfigurationError(
                f"Unknown example: {example_id}", self.examples
            ) from None

    def category(self, category_id: str) -> CategoryDescriptor:
        try:
            return self.categories[category_id]
        except KeyError:
            raise ConfigurationError(
                f"Unknown category: {category_id}", self.categories
            ) from None

    def doc(self, doc_id: str) -> DocEntry:
        try:
            return self.docs[doc_id]
        except KeyError:
            raise ConfigurationError(f"Unknown example: {doc_id}", self.docs) from None
