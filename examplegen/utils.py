"""Shared utility functions for examplegen.

Provides JSON I/O that preserves key order, file-system helpers, a case
conversion helper, and Rich-based progress reporting.  The console helpers
are the only place the generators write to the terminal.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table

console = Console()

# ---------------------------------------------------------------------------
# String / name helpers
# ---------------------------------------------------------------------------


def to_camel(name: str) -> str:
    """Lower the first character of a PascalCase identifier.

    ``"BlindAuction"`` -> ``"blindAuction"``.  Acronym prefixes are not
    special-cased: ``"FHEAdd"`` -> ``"fHEAdd"``.
    """
    if not name:
        return ""
    return name[0].lower() + name[1:]


# ---------------------------------------------------------------------------
# JSON I/O
# ---------------------------------------------------------------------------


def load_json(path: str | Path) -> Any:
    """Load and parse a JSON file, preserving object key order.

    Raises:
        FileNotFoundError: If the file does not exist.
        json.JSONDecodeError: If the file is not valid JSON.
    """
    raw = Path(path).read_text(encoding="utf-8")
    return json.loads(raw)


def save_json(data: dict[str, Any] | list[Any], path: str | Path) -> None:
    """Save data as two-space indented JSON.

    Parent directories are created automatically.  Non-ASCII characters are
    written as-is, matching how npm tooling formats ``package.json``.
    """
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    content = json.dumps(data, indent=2, ensure_ascii=False)
    file_path.write_text(content + "\n", encoding="utf-8")


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def remove_files_with_suffix(directory: Path, suffix: str) -> list[Path]:
    """Delete every regular file directly inside *directory* ending in *suffix*.

    Sub-directories are not descended into.  Returns the removed paths.
    """
    removed: list[Path] = []
    if not directory.is_dir():
        return removed
    for entry in sorted(directory.iterdir()):
        if entry.name.endswith(suffix) and (entry.is_file() or entry.is_symlink()):
            entry.unlink()
            removed.append(entry)
    return removed


def relativize(path: Path) -> str:
    """Return *path* relative to the working directory when possible."""
    try:
        return str(path.resolve().relative_to(Path.cwd().resolve()))
    except ValueError:
        return str(path)


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_step(number: int, title: str) -> None:
    """Print a numbered step header."""
    console.print()
    console.print(f"[bold cyan]Step {number}: {title}[/bold cyan]")


def print_banner(title: str, body: str) -> None:
    """Print a bordered panel announcing an operation."""
    console.print(
        Panel(body, title=f"[bold]{title}[/bold]", border_style="bright_cyan")
    )


def print_rule(message: str, color: str = "green") -> None:
    """Print a full-width rule with a centred message."""
    console.print()
    console.print(Rule(f"[bold {color}]{message}[/bold {color}]", style=color))


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)


def print_listing(title: str, rows: Iterable[tuple[str, str]]) -> None:
    """Print available registry keys with their descriptions."""
    table = Table(title=title, show_header=True, header_style="bold yellow")
    table.add_column("Name", style="green", no_wrap=True)
    table.add_column("Description")
    for key, description in rows:
        table.add_row(key, description)
    console.print(table)


def print_next_steps(project_dir: Path) -> None:
    """Print the commands to build the freshly generated project."""
    console.print()
    console.print("[bold yellow]Next steps:[/bold yellow]")
    console.print(f"  cd {relativize(project_dir)}")
    console.print("  npm install")
    console.print("  npm run compile")
    console.print("  npm run test")


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_info(message: str) -> None:
    """Print a blue informational message."""
    console.print(f"[blue]{message}[/blue]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]Error:[/bold red] {message}")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]Warning:[/bold yellow] {message}")
