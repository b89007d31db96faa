"""examplegen configuration.

Centralised, typed configuration for the generators. All settings use
Pydantic v2 models so they can be validated at construction time and
serialised to/from JSON without boiler-plate.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from examplegen.errors import ConfigurationError

DEFAULT_EXCLUDED_DIRS: tuple[str, ...] = (
    "node_modules",
    "artifacts",
    "cache",
    "coverage",
    "types",
    "dist",
)


class ProjectLayout(BaseModel):
    """Where things live inside the base template and generated projects."""

    contracts_dir: str = Field(default="contracts")
    tests_dir: str = Field(default="test")
    deploy_dir: str = Field(default="deploy")
    deploy_file: str = Field(default="deploy.ts")
    tasks_dir: str = Field(default="tasks")
    manifest_name: str = Field(default="package.json")
    source_ext: str = Field(default=".sol", description="Contract source suffix")
    test_ext: str = Field(default=".ts", description="Test/fixture suffix")
    source_language: str = Field(default="solidity", description="Fence tag for sources")
    test_language: str = Field(default="typescript", description="Fence tag for tests")
    template_identifier: str = Field(
        default="FHECounter",
        description="Contract name the base template ships with",
    )
    template_identifier_camel: str = Field(
        default="fheCounter",
        description="Camel-case spelling of the template contract used in its task file",
    )


class NamingConfig(BaseModel):
    """Derived names written into generated manifests and indexes."""

    example_prefix: str = Field(default="fhevm-example")
    category_prefix: str = Field(default="fhevm-examples")
    homepage_base: str = Field(default="https://github.com/zama-ai/fhevm-examples")
    default_index_category: str = Field(
        default="Basic",
        description="Header of the empty block a fresh SUMMARY.md starts with",
    )

    def example_package_name(self, example_id: str) -> str:
        return f"{self.example_prefix}-{example_id}"

    def category_package_name(self, category_id: str) -> str:
        return f"{self.category_prefix}-{category_id}"

    def homepage(self, key: str) -> str:
        return f"{self.homepage_base.rstrip('/')}/{key}"


class Config(BaseModel):
    """Global examplegen configuration.

    Holds every tuneable parameter and derived path used by the scaffolder
    and the documentation generator.  Instances are created once by the CLI
    entry point and then passed through the rest of the system.
    """

    root_dir: Path = Field(default=Path("."))
    template_name: str = Field(default="fhevm-hardhat-template")
    output_dir_name: str = Field(default="output")
    docs_dir: str = Field(default="docs")
    index_file: str = Field(default="SUMMARY.md")
    excluded_dirs: list[str] = Field(default_factory=lambda: list(DEFAULT_EXCLUDED_DIRS))
    layout: ProjectLayout = Field(default_factory=ProjectLayout)
    naming: NamingConfig = Field(default_factory=NamingConfig)

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def template_dir(self) -> Path:
        """Base template every project is cloned from."""
        return self.root_dir / self.template_name

    @property
    def output_root(self) -> Path:
        """Parent directory of default project destinations."""
        return self.root_dir / self.output_dir_name

    @property
    def docs_path(self) -> Path:
        """Directory holding generated documentation pages."""
        return self.root_dir / self.docs_dir

    @property
    def index_path(self) -> Path:
        """Path to the persistent ``SUMMARY.md`` index."""
        return self.docs_path / self.index_file

    def resolve(self, relative: str | Path) -> Path:
        """Resolve a registry path against ``root_dir``."""
        path = Path(relative)
        return path if path.is_absolute() else self.root_dir / path

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path | None = None) -> Path:
        """Persist the configuration to a JSON file.

        Args:
            path: Destination file. Defaults to ``<root_dir>/examplegen.json``.

        Returns:
            The path where the file was written.
        """
        target = path or (self.root_dir / "examplegen.json")
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON.

        Raises:
            ConfigurationError: If the file is missing or does not validate.
        """
        path = Path(path)
        if not path.is_file():
            raise ConfigurationError(f"Configuration file not found: {path}")
        try:
            return cls.model_validate_json(path.read_text(encoding="utf-8"))
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid configuration file {path}: {exc}") from exc
