"""examplegen -- standalone FHEVM example projects and GitBook documentation."""

__version__ = "0.1.0"
