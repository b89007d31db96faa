"""examplegen scaffolder -- generates standalone example projects.

This package clones the base hardhat template and repopulates it with the
contract, tests and fixtures of one registry example or of a whole category.

Quick usage::

    from examplegen.config import Config
    from examplegen.registry import default_registry
    from examplegen.scaffolder import ProjectScaffolder

    scaffolder = ProjectScaffolder(Config(root_dir=Path(".")), default_registry())
    result = await scaffolder.generate_example("fhe-counter", "/tmp/fhe-counter")
"""

from examplegen.scaffolder.cloner import clone_template
from examplegen.scaffolder.deploy_gen import DeployScriptGenerator
from examplegen.scaffolder.generator import ProjectScaffolder, ScaffoldResult
from examplegen.scaffolder.manifest import patch_manifest
from examplegen.scaffolder.naming import (
    extract_contract_name,
    extract_description,
    read_contract_name,
)
from examplegen.scaffolder.tasks import IdentifierRewriter, RegexIdentifierRewriter
from examplegen.scaffolder.templates import TemplateRenderer

__all__ = [
    "DeployScriptGenerator",
    "IdentifierRewriter",
    "ProjectScaffolder",
    "RegexIdentifierRewriter",
    "ScaffoldResult",
    "TemplateRenderer",
    "clone_template",
    "extract_contract_name",
    "extract_description",
    "patch_manifest",
    "read_contract_name",
]
