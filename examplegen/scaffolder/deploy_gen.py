"""Deployment script generation.

Renders ``deploy/deploy.ts`` from ``deploy.ts.j2`` with one deployment step
per contract identifier, in the order given.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from .templates import TemplateRenderer

ALL_TAG = "all"


class DeployScriptGenerator:
    """Generates the hardhat-deploy script for a scaffolded project."""

    TEMPLATE = "deploy.ts.j2"

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    def render(
        self,
        contract_names: Sequence[str],
        func_id: str,
        tags: Sequence[str],
    ) -> str:
        """Render the script text without touching the filesystem."""
        return self.renderer.render(
            self.TEMPLATE,
            {
                "contract_names": list(contract_names),
                "func_id": func_id,
                "tags": list(tags),
            },
        )

    async def generate_single(self, output_path: Path, contract_name: str) -> Path:
        """Write a script deploying one contract, tagged with its name."""
        return await self.renderer.render_to_file(
            self.TEMPLATE,
            output_path,
            {
                "contract_names": [contract_name],
                "func_id": f"deploy_{contract_name.lower()}",
                "tags": [contract_name],
            },
        )

    async def generate_all(
        self, output_path: Path, contract_names: Sequence[str]
    ) -> Path:
        """Write a script deploying every contract, tagged ``all`` plus each name."""
        return await self.renderer.render_to_file(
            self.TEMPLATE,
            output_path,
            {
                "contract_names": list(contract_names),
                "func_id": "deploy_all",
                "tags": [ALL_TAG, *contract_names],
            },
        )
