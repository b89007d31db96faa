"""Documentation page generator.

Produces one GitBook markdown page per example: a description paragraph, a
hint explaining where the two file kinds go in a hardhat project, and a
tabbed block holding the contract and its test verbatim.
"""

from __future__ import annotations

from pathlib import Path, PurePosixPath

from examplegen.config import ProjectLayout
from examplegen.errors import NameExtractionError
from examplegen.registry import DocEntry
from examplegen.scaffolder.naming import extract_contract_name, extract_description


class PageRenderer:
    """Renders a :class:`DocEntry` and its sources into GitBook markdown."""

    def __init__(self, layout: ProjectLayout | None = None) -> None:
        self.layout = layout or ProjectLayout()

    def contract_title(self, entry: DocEntry, source_text: str) -> str:
        """Name of the contract tab, from the source or else its filename."""
        try:
            name = extract_contract_name(source_text, source=entry.source_path)
        except NameExtractionError:
            name = PurePosixPath(entry.source_path).stem
        return f"{name}{self.layout.source_ext}"

    def render(self, entry: DocEntry, source_text: str, test_text: str) -> str:
        """Render the complete page markdown.

        File contents are embedded unchanged; nothing is escaped.
        """
        layout = self.layout
        description = entry.description or extract_description(source_text)
        test_name = PurePosixPath(entry.test_path).name

        sections: list[str] = []

        sections.append(description)
        sections.append("")

        sections.append('{% hint style="info" %}')
        sections.append(
            "To run this example correctly, make sure the files are placed in "
            "the following directories:"
        )
        sections.append("")
        sections.append(
            f"- `{layout.source_ext}` file → `<your-project-root-dir>/{layout.contracts_dir}/`"
        )
        sections.append(
            f"- `{layout.test_ext}` file → `<your-project-root-dir>/{layout.tests_dir}/`"
        )
        sections.append("")
        sections.append(
            "This ensures Hardhat can compile and test your contracts as expected."
        )
        sections.append("{% endhint %}")
        sections.append("")

        sections.append("{% tabs %}")
        sections.append("")
        sections.extend(
            _tab(self.contract_title(entry, source_text), layout.source_language, source_text)
        )
        sections.extend(_tab(test_name, layout.test_language, test_text))
        sections.append("{% endtabs %}")

        return "\n".join(sections) + "\n"

    def write(self, output_path: Path, content: str) -> Path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(content, encoding="utf-8")
        return output_path


def _tab(title: str, language: str, body: str) -> list[str]:
    return [
        f'{{% tab title="{title}" %}}',
        "",
        f"```{language}",
        body,
        "```",
        "",
        "{% endtab %}",
        "",
    ]
