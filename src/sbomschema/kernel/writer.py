"""Serialize the assembled schema to its canonical artifact bytes."""

from sbomschema._internal.canonical_json import canonical_schema_bytes
from .schema import SchemaDocument


def render(document: SchemaDocument) -> bytes:
    """Encode the document to its canonical bytes (entirely in memory)."""
    return canonical_schema_bytes(document.to_json_obj())
