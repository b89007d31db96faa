"""Command line entry points.

Usage::

    examplegen-example fhe-counter ./my-fhe-counter
    examplegen-category basic ./output/basic-examples
    examplegen-docs fhe-counter
    examplegen-docs --all

``examplegen example|category|docs ...`` dispatches to the same commands.
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Optional

from examplegen.config import Config
from examplegen.errors import ExampleGenError
from examplegen.registry import Registry, default_registry, load_registry
from examplegen.reporter import DocsEngine
from examplegen.scaffolder import ProjectScaffolder
from examplegen.utils import (
    print_error,
    print_listing,
    print_next_steps,
    print_rule,
    print_summary_table,
)


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------


def _add_common_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--root",
        default=None,
        help="Repository root holding contracts, tests, template and docs (default: .)",
    )
    parser.add_argument(
        "--registry",
        default=None,
        help="YAML/JSON registry file replacing the built-in examples",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="JSON configuration saved with Config.save()",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="examplegen",
        description="Generate standalone FHEVM example projects and documentation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  examplegen example fhe-counter ./my-fhe-counter\n"
            "  examplegen category basic\n"
            "  examplegen docs --all\n"
        ),
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    example = subparsers.add_parser("example", help="Generate a single-example project")
    example.add_argument("name", nargs="?", help="Example name (omit to list examples)")
    example.add_argument("output", nargs="?", help="Output directory (must not exist)")
    _add_common_options(example)

    category = subparsers.add_parser("category", help="Generate a category project")
    category.add_argument("name", nargs="?", help="Category name (omit to list categories)")
    category.add_argument("output", nargs="?", help="Output directory (must not exist)")
    _add_common_options(category)

    docs = subparsers.add_parser("docs", help="Generate documentation pages")
    docs.add_argument("name", nargs="?", help="Example name (omit to list examples)")
    docs.add_argument("--all", action="store_true", help="Generate every documentation page")
    docs.add_argument(
        "--no-summary",
        action="store_true",
        help="Do not update the SUMMARY.md index",
    )
    _add_common_options(docs)

    return parser


def _load_settings(args: argparse.Namespace) -> tuple[Config, Registry]:
    config = Config.load(Path(args.config)) if args.config else Config()
    if args.root:
        config = config.model_copy(update={"root_dir": Path(args.root)})
    registry = load_registry(args.registry) if args.registry else default_registry()
    return config, registry


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def _run_example(args: argparse.Namespace, config: Config, registry: Registry) -> int:
    if not args.name:
        print_listing(
            "Available examples",
            ((key, e.description) for key, e in registry.examples.items()),
        )
        return 0
    scaffolder = ProjectScaffolder(config, registry)
    result = asyncio.run(scaffolder.generate_example(args.name, args.output))
    print_rule(f'FHEVM example "{args.name}" created successfully!')
    print_next_steps(result.project_dir)
    return 0


def _run_category(args: argparse.Namespace, config: Config, registry: Registry) -> int:
    if not args.name:
        print_listing(
            "Available categories",
            (
                (key, f"{c.name}: {c.description} ({len(c.examples)} contracts)")
                for key, c in registry.categories.items()
            ),
        )
        return 0
    scaffolder = ProjectScaffolder(config, registry)
    result = asyncio.run(scaffolder.generate_category(args.name, args.output))
    category = registry.category(args.name)
    print_rule(f"FHEVM {category.name} project created successfully!")
    print_summary_table(
        {
            "Category": category.name,
            "Contracts": str(len(result.contract_names)),
            "Skipped": str(len(result.skipped)),
            "Location": str(result.project_dir),
        },
        title="Project Summary",
    )
    print_next_steps(result.project_dir)
    return 0


def _run_docs(args: argparse.Namespace, config: Config, registry: Registry) -> int:
    engine = DocsEngine(config, registry)
    if args.all:
        report = asyncio.run(engine.generate_all(update_index=not args.no_summary))
        return 0 if report.success else 1
    if not args.name:
        print_listing(
            "Available examples",
            ((key, f"{d.title} - {d.category}") for key, d in registry.docs.items()),
        )
        return 0
    asyncio.run(engine.generate(args.name, update_index=not args.no_summary))
    print_rule(f'Documentation for "{registry.doc(args.name).title}" generated successfully!')
    return 0


_COMMANDS = {
    "example": _run_example,
    "category": _run_category,
    "docs": _run_docs,
}


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------


def main(argv: Optional[list[str]] = None) -> None:
    """CLI entry point for ``examplegen``; exits non-zero on any failure."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        config, registry = _load_settings(args)
        status = _COMMANDS[args.command](args, config, registry)
    except ExampleGenError as exc:
        print_error(str(exc))
        sys.exit(1)

    if status:
        sys.exit(status)


def example_main() -> None:
    """Entry point for ``examplegen-example``."""
    main(["example", *sys.argv[1:]])


def category_main() -> None:
    """Entry point for ``examplegen-category``."""
    main(["category", *sys.argv[1:]])


def docs_main() -> None:
    """Entry point for ``examplegen-docs``."""
    main(["docs", *sys.argv[1:]])


if __name__ == "__main__":
    main()
