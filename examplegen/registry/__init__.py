"""Example registry: descriptors, the built-in data set, and a file loader."""

from examplegen.registry.defaults import default_registry
from examplegen.registry.loader import load_registry
from examplegen.registry.models import (
    CategoryDescriptor,
    CategoryItem,
    DocEntry,
    ExampleDescriptor,
    Registry,
)

__all__ = [
    "CategoryDescriptor",
    "CategoryItem",
    "DocEntry",
    "ExampleDescriptor",
    "Registry",
    "default_registry",
    "load_registry",
]
