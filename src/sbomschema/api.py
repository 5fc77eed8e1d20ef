"""Public API for sbomschema.

High-level functions running the whole pipeline:
reflect -> merge variants -> assemble -> render -> reconcile with disk.
"""

import hashlib
import os
from pathlib import Path
from typing import Optional, Sequence, Type, Union

from pydantic import BaseModel

from sbomschema.contracts import GenerationResult
from sbomschema.kernel.assemble import assemble
from sbomschema.kernel.introspect import reflect
from sbomschema.kernel.schema import SchemaDocument
from sbomschema.kernel.variants import VARIANT_REGISTRY, reflect_variants
from sbomschema._internal.io.artifact import reconcile
from sbomschema.kernel.writer import render
from sbomschema.model.document import Document
from sbomschema.version import JSON_SCHEMA_VERSION, schema_filename, schema_url


def build_schema(
    registry: Sequence[Type[BaseModel]] = VARIANT_REGISTRY,
    document_model: Type[BaseModel] = Document,
    version: str = JSON_SCHEMA_VERSION,
) -> SchemaDocument:
    """Build the schema document for the inventory output.

    Raises:
        SchemaGenerationError: On any reflection, variant or assembly failure
    """
    variants = reflect_variants(registry)
    document = reflect(document_model)
    return assemble(document, variants, schema_id=schema_url(version))


def render_schema(
    registry: Sequence[Type[BaseModel]] = VARIANT_REGISTRY,
    document_model: Type[BaseModel] = Document,
    version: str = JSON_SCHEMA_VERSION,
) -> bytes:
    """Build the schema document and return its canonical bytes."""
    return render(build_schema(registry, document_model, version))


def generate(
    output_dir: Optional[Union[str, os.PathLike, Path]] = None,
    registry: Sequence[Type[BaseModel]] = VARIANT_REGISTRY,
    document_model: Type[BaseModel] = Document,
    version: str = JSON_SCHEMA_VERSION,
) -> GenerationResult:
    """Generate ``schema-<version>.json`` in ``output_dir`` (default: current directory).

    The artifact is written only if absent. An existing artifact with
    different content is left untouched and reported as REFUSED.

    Raises:
        SchemaGenerationError: On any reflection, variant, assembly or encoding failure
        OSError: If the existing artifact cannot be read or the new one cannot be written
    """
    target_dir = Path(output_dir) if output_dir is not None else Path.cwd()
    target = target_dir / schema_filename(version)

    data = render_schema(registry, document_model, version)
    status = reconcile(target, data)

    return GenerationResult(
        path=str(target),
        status=status,
        sha256=f"sha256:{hashlib.sha256(data).hexdigest()}",
        size=len(data),
    )
