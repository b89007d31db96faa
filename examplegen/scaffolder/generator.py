"""Main scaffolding orchestrator.

Turns one registry example, or a whole registry category, into a standalone
hardhat project cloned from the base template: clone, reset the template's
placeholder contract and tests, copy the selected sources in, then patch the
deployment script, ``package.json``, task file and README.

Projects are assembled in a hidden staging directory next to the
destination and moved into place only once every step has succeeded, so a
failed run never leaves a half-populated project behind.
"""

from __future__ import annotations

import asyncio
import shutil
import tempfile
from collections.abc import Iterable
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

from examplegen.config import Config
from examplegen.errors import (
    DestinationExistsError,
    NameExtractionError,
    SourceNotFoundError,
)
from examplegen.registry import CategoryItem, Registry
from examplegen.utils import (
    console,
    print_banner,
    print_info,
    print_step,
    print_success,
    print_warning,
    remove_files_with_suffix,
)

from .cloner import clone_template
from .deploy_gen import DeployScriptGenerator
from .manifest import patch_manifest
from .naming import read_contract_name
from .readme_gen import ReadmeGenerator
from .tasks import IdentifierRewriter, RegexIdentifierRewriter, retarget_task_file
from .templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Result model
# ---------------------------------------------------------------------------


class ScaffoldResult(BaseModel):
    """What a scaffolding run produced."""

    project_dir: Path = Field(..., description="Root of the generated project")
    contract_names: list[str] = Field(
        default_factory=list, description="Contract identifiers, in registry order"
    )
    copied_files: list[str] = Field(
        default_factory=list, description="Project-relative paths of copied sources"
    )
    skipped: list[str] = Field(
        default_factory=list, description="Registry paths skipped with a warning"
    )


# ---------------------------------------------------------------------------
# Main scaffolder
# ---------------------------------------------------------------------------


class ProjectScaffolder:
    """Generates standalone projects from registry descriptors.

    Both variants share one skeleton:
    - clone the base template (build-artifact directories excluded)
    - clear the placeholder contract and tests
    - copy contracts under their declared names, plus tests and fixtures
    - write ``deploy/deploy.ts`` with one step per contract
    - patch ``package.json`` name, description and homepage
    - write the README
    """

    def __init__(
        self,
        config: Config,
        registry: Registry,
        rewriter: Optional[IdentifierRewriter] = None,
    ) -> None:
        self.config = config
        self.registry = registry
        self.layout = config.layout
        self.renderer = TemplateRenderer()
        self.deploy_gen = DeployScriptGenerator(self.renderer)
        self.readme_gen = ReadmeGenerator(self.renderer, self.layout)
        self.rewriter = rewriter or RegexIdentifierRewriter()

    # -- Public API --------------------------------------------------------

    async def generate_example(
        self, example_id: str, output_dir: str | Path | None = None
    ) -> ScaffoldResult:
        """Generate a project holding a single example.

        Args:
            example_id: Registry key of the example.
            output_dir: Project destination; must not exist.  Defaults to
                ``<root>/output/<example prefix>-<example_id>``.

        Raises:
            ConfigurationError: Unknown example.
            SourceNotFoundError: Contract, test or template missing.
            NameExtractionError: The contract declares no name.
            DestinationExistsError: *output_dir* already exists.
        """
        example = self.registry.example(example_id)
        naming = self.config.naming
        destination = Path(
            output_dir or self.config.output_root / naming.example_package_name(example_id)
        )

        contract_path = self.config.resolve(example.source_path)
        test_path = self.config.resolve(example.test_path)
        if not contract_path.is_file():
            raise SourceNotFoundError(example.source_path, kind="Contract")
        if not test_path.is_file():
            raise SourceNotFoundError(example.test_path, kind="Test")
        self._check_destination(destination)
        contract_name = read_contract_name(contract_path)

        print_banner(
            "FHEVM example",
            f"Example : {example_id}\nContract: {contract_name}\nOutput  : {destination}",
        )
        result = ScaffoldResult(project_dir=destination, contract_names=[contract_name])

        async with _Staging(destination) as staged:
            print_step(1, "Copying template")
            await asyncio.to_thread(
                clone_template, self.config.template_dir, staged, self.config.excluded_dirs
            )
            print_success("Template copied")

            print_step(2, "Copying contract")
            await asyncio.to_thread(self._clear_contracts, staged)
            rel = await asyncio.to_thread(
                self._copy_contract, staged, contract_path, contract_name
            )
            result.copied_files.append(rel)
            print_success(f"Contract copied: {contract_name}{self.layout.source_ext}")

            print_step(3, "Copying tests")
            await asyncio.to_thread(self._clear_tests, staged)
            await asyncio.to_thread(
                self._copy_support_files, staged, [example], set(), result
            )

            print_step(4, "Updating configuration")
            await self.deploy_gen.generate_single(self._deploy_path(staged), contract_name)
            await asyncio.to_thread(
                patch_manifest,
                staged / self.layout.manifest_name,
                name=naming.example_package_name(example_id),
                description=example.description,
                homepage=naming.homepage(example_id),
            )
            print_success("Configuration updated")

            print_step(5, "Updating tasks")
            task_file = await asyncio.to_thread(
                retarget_task_file,
                staged / self.layout.tasks_dir,
                self.layout.template_identifier,
                self.layout.template_identifier_camel,
                contract_name,
                self.layout.test_ext,
                self.rewriter,
            )
            if task_file is not None:
                print_success(f"Updated {self.layout.tasks_dir}/{task_file.name}")

            print_step(6, "Generating README")
            await self.readme_gen.generate_example(
                staged, example_id, example.description, contract_name
            )
            print_success("README.md generated")

        return result

    async def generate_category(
        self, category_id: str, output_dir: str | Path | None = None
    ) -> ScaffoldResult:
        """Generate a project holding every example of a category.

        Contracts whose source file is missing, or that declare no name, are
        skipped with a warning; everything else is copied.  Tests, fixtures
        and auxiliary files shared between contracts are copied once.

        Raises:
            ConfigurationError: Unknown category.
            SourceNotFoundError: Template missing.
            DestinationExistsError: *output_dir* already exists.
        """
        category = self.registry.category(category_id)
        naming = self.config.naming
        destination = Path(
            output_dir or self.config.output_root / naming.category_package_name(category_id)
        )
        self._check_destination(destination)

        print_banner(
            "FHEVM category",
            f"Category: {category.name}\nOutput  : {destination}",
        )
        result = ScaffoldResult(project_dir=destination)

        async with _Staging(destination) as staged:
            print_step(1, "Copying template")
            await asyncio.to_thread(
                clone_template, self.config.template_dir, staged, self.config.excluded_dirs
            )
            print_success("Template copied")

            print_step(2, "Clearing template files")
            await asyncio.to_thread(self._clear_contracts, staged)
            await asyncio.to_thread(self._clear_tests, staged)
            print_success("Template files cleared")

            print_step(3, "Copying contracts and tests")
            copied: set[Path] = set()
            for item in category.examples:
                name = self._category_contract_name(item, result)
                if name is None:
                    continue
                rel = await asyncio.to_thread(
                    self._copy_contract, staged, self.config.resolve(item.source_path), name
                )
                result.contract_names.append(name)
                result.copied_files.append(rel)
                console.print(f"  [green]+[/green] {name}{self.layout.source_ext}")
                await asyncio.to_thread(
                    self._copy_support_files, staged, [item], copied, result
                )
            print_success(f"Copied {len(result.contract_names)} contracts and their tests")

            print_step(4, "Generating deployment script")
            await self.deploy_gen.generate_all(self._deploy_path(staged), result.contract_names)
            print_success("Deployment script generated")

            print_step(5, f"Updating {self.layout.manifest_name}")
            await asyncio.to_thread(
                patch_manifest,
                staged / self.layout.manifest_name,
                name=naming.category_package_name(category_id),
                description=category.description,
                homepage=naming.homepage(category_id),
                extra_dependencies=category.extra_dependencies,
            )
            print_success(f"{self.layout.manifest_name} updated")

            print_step(6, "Generating README")
            await self.readme_gen.generate_category(
                staged, category.name, category.description, result.contract_names
            )
            print_success("README.md generated")

        return result

    # -- Preconditions -----------------------------------------------------

    def _check_destination(self, destination: Path) -> None:
        if destination.exists() or destination.is_symlink():
            raise DestinationExistsError(destination)
        if not self.config.template_dir.is_dir():
            raise SourceNotFoundError(self.config.template_dir, kind="Template directory")

    def _category_contract_name(
        self, item: CategoryItem, result: ScaffoldResult
    ) -> Optional[str]:
        """Resolve an item's contract name, or record why it is skipped."""
        source = self.config.resolve(item.source_path)
        if not source.is_file():
            print_warning(f"Contract not found: {item.source_path}")
            result.skipped.append(item.source_path)
            return None
        try:
            name = read_contract_name(source)
        except NameExtractionError as exc:
            print_warning(str(exc))
            result.skipped.append(item.source_path)
            return None
        if name in result.contract_names:
            print_warning(f"Duplicate contract {name} in {item.source_path}, skipping")
            result.skipped.append(item.source_path)
            return None
        return name

    # -- Reset / populate --------------------------------------------------

    def _clear_contracts(self, project_dir: Path) -> None:
        remove_files_with_suffix(project_dir / self.layout.contracts_dir, self.layout.source_ext)

    def _clear_tests(self, project_dir: Path) -> None:
        remove_files_with_suffix(project_dir / self.layout.tests_dir, self.layout.test_ext)

    def _copy_contract(self, project_dir: Path, source: Path, contract_name: str) -> str:
        contracts_dir = project_dir / self.layout.contracts_dir
        contracts_dir.mkdir(parents=True, exist_ok=True)
        target = contracts_dir / f"{contract_name}{self.layout.source_ext}"
        shutil.copy2(source, target)
        return target.relative_to(project_dir).as_posix()

    def _copy_support_files(
        self,
        project_dir: Path,
        items: Iterable[CategoryItem],
        copied: set[Path],
        result: ScaffoldResult,
    ) -> None:
        """Copy test, fixture and auxiliary files into the tests directory.

        *copied* holds the resolved source paths already copied and is
        updated in place; a path seen before is not copied again.  Two sources
        sharing a file name land on the same target; the later one wins and
        a warning is printed.
        """
        tests_dir = project_dir / self.layout.tests_dir
        tests_dir.mkdir(parents=True, exist_ok=True)
        for item in items:
            for rel_source in item.support_paths():
                source = self.config.resolve(rel_source).resolve()
                if source in copied:
                    continue
                if not source.is_file():
                    print_warning(f"File not found, skipping: {rel_source}")
                    result.skipped.append(rel_source)
                    continue
                target = tests_dir / source.name
                if target.exists():
                    rel_target = target.relative_to(project_dir).as_posix()
                    print_warning(f"Overwriting {rel_target} with {rel_source}")
                shutil.copy2(source, target)
                copied.add(source)
                result.copied_files.append(target.relative_to(project_dir).as_posix())
                console.print(f"  [green]+[/green] {source.name}")

    def _deploy_path(self, project_dir: Path) -> Path:
        return project_dir / self.layout.deploy_dir / self.layout.deploy_file


# ---------------------------------------------------------------------------
# Staging directory
# ---------------------------------------------------------------------------


class _Staging:
    """Async context manager yielding a scratch path for a project.

    The scratch path lives in a hidden sibling of *destination*, so the
    final move is a same-filesystem rename.  On success the project is
    renamed into place; on any failure the scratch tree is discarded.
    """

    def __init__(self, destination: Path) -> None:
        self.destination = destination
        self._root: Optional[Path] = None

    async def __aenter__(self) -> Path:
        parent = self.destination.parent
        await asyncio.to_thread(parent.mkdir, parents=True, exist_ok=True)
        self._root = Path(
            await asyncio.to_thread(
                tempfile.mkdtemp,
                prefix=f".{self.destination.name}.",
                suffix=".partial",
                dir=parent,
            )
        )
        return self._root / self.destination.name

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self._root is None:
            raise RuntimeError("staging directory was never created")
        try:
            if exc_type is None:
                await asyncio.to_thread(self._publish)
        finally:
            await asyncio.to_thread(shutil.rmtree, self._root, True)

    def _publish(self) -> None:
        if self.destination.exists() or self.destination.is_symlink():
            raise DestinationExistsError(self.destination)
        (self._root / self.destination.name).rename(self.destination)
        print_info(f"Project written to {self.destination}")
