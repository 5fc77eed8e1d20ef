"""Typed result model of the inventory tool.

These are the shapes the schema generator reflects over.
"""

from .document import Descriptor, Distribution, Document, SchemaInfo, Source
from .metadata import (
    ApkMetadata,
    DpkgMetadata,
    GemMetadata,
    JavaMetadata,
    NpmPackageJSONMetadata,
    PythonPackageMetadata,
    RpmdbMetadata,
)
from .package import Location, Package

__all__ = [
    "Document",
    "Descriptor",
    "Distribution",
    "SchemaInfo",
    "Source",
    "Package",
    "Location",
    "ApkMetadata",
    "DpkgMetadata",
    "GemMetadata",
    "JavaMetadata",
    "NpmPackageJSONMetadata",
    "PythonPackageMetadata",
    "RpmdbMetadata",
]
