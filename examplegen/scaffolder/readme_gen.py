"""README generation for scaffolded projects."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from examplegen.config import ProjectLayout

from .templates import TemplateRenderer


class ReadmeGenerator:
    """Renders the project ``README.md`` for an example or a category."""

    def __init__(self, renderer: TemplateRenderer, layout: ProjectLayout) -> None:
        self.renderer = renderer
        self.layout = layout

    async def generate_example(
        self,
        project_dir: Path,
        example_id: str,
        description: str,
        contract_name: str,
    ) -> Path:
        return await self.renderer.render_to_file(
            "README.example.md.j2",
            project_dir / "README.md",
            {
                "example_id": example_id,
                "description": description,
                "contract_name": contract_name,
                "contracts_dir": self.layout.contracts_dir,
                "source_ext": self.layout.source_ext,
            },
        )

    async def generate_category(
        self,
        project_dir: Path,
        category_name: str,
        description: str,
        contract_names: Sequence[str],
    ) -> Path:
        return await self.renderer.render_to_file(
            "README.category.md.j2",
            project_dir / "README.md",
            {
                "category_name": category_name,
                "description": description,
                "contract_names": list(contract_names),
                "contracts_dir": self.layout.contracts_dir,
                "source_ext": self.layout.source_ext,
            },
        )
