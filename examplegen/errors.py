"""Exception hierarchy for examplegen.

Every error raised on purpose by the generators derives from
``ExampleGenError`` so the CLI can report it and exit non-zero without a
traceback.  Unexpected exceptions (``OSError`` and friends) are left to
propagate.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path


class ExampleGenError(Exception):
    """Base class for all examplegen failures."""


class ConfigurationError(ExampleGenError):
    """Raised for an unknown example/category key or an invalid registry."""

    def __init__(self, message: str, valid_keys: Iterable[str] = ()) -> None:
        self.valid_keys = list(valid_keys)
        if self.valid_keys:
            listing = "\n".join(f"  - {key}" for key in self.valid_keys)
            message = f"{message}\n\nAvailable:\n{listing}"
        super().__init__(message)


class SourceNotFoundError(ExampleGenError):
    """Raised when a referenced source, test or template file is absent."""

    def __init__(self, path: str | Path, kind: str = "File") -> None:
        self.path = Path(path)
        self.kind = kind
        super().__init__(f"{kind} not found: {path}")


class DestinationExistsError(ExampleGenError):
    """Raised when the target project directory already exists."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        super().__init__(f"Output directory already exists: {path}")


class NameExtractionError(ExampleGenError):
    """Raised when no contract declaration can be found in a source file."""

    def __init__(self, source: str | Path = "<text>") -> None:
        self.source = str(source)
        super().__init__(f"Could not extract contract name from {source}")


class ManifestParseError(ExampleGenError):
    """Raised when the template manifest is not a JSON object."""

    def __init__(self, path: str | Path, reason: str = "") -> None:
        self.path = Path(path)
        detail = f": {reason}" if reason else ""
        super().__init__(f"Invalid manifest {path}{detail}")
