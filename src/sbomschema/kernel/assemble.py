"""Assemble the final schema document from the reflected document and variants."""

import copy
from typing import Optional

from .errors import AssemblyError, MergeCollisionError
from .schema import ReflectedSchema, SchemaDocument
from .variants import VariantSet


ROOT_ENTITY = "Package"
POLYMORPHIC_FIELD = "metadata"


def assemble(
    document: ReflectedSchema,
    variants: VariantSet,
    root_entity: str = ROOT_ENTITY,
    field: str = POLYMORPHIC_FIELD,
    schema_id: Optional[str] = None,
) -> SchemaDocument:
    """Merge variant definitions into the document and constrain the polymorphic field.

    A variant definition may share a name with a document definition only
    if both fragments are identical (the same sub-model reached from both
    sides). Inputs are not mutated.

    Args:
        document: Reflected root output-document shape
        variants: Result of merge_variants()
        root_entity: Definition holding the polymorphic field
        field: Property rewritten to the anyOf union
        schema_id: Optional ``$id`` of the document

    Returns:
        SchemaDocument referencing the document's root definition

    Raises:
        MergeCollisionError: If a variant definition differs from a
            document definition of the same name
        AssemblyError: If ``root_entity`` is not among the definitions
    """
    definitions = copy.deepcopy(document.definitions)

    for name in sorted(variants.definitions):
        incoming = variants.definitions[name]
        existing = definitions.get(name)
        if existing is not None and existing != incoming:
            raise MergeCollisionError(
                f"Variant definition '{name}' collides with a different document definition of the same name"
            )
        definitions[name] = copy.deepcopy(incoming)

    entity = definitions.get(root_entity)
    if entity is None:
        raise AssemblyError(
            f"Definition '{root_entity}' not found in {document.root} schema; "
            f"cannot constrain '{field}'"
        )

    union = [dict(alternative) for alternative in variants.alternatives]
    if len(union) != len(variants.names) + 1:
        raise AssemblyError(
            f"Expected {len(variants.names) + 1} alternatives for '{root_entity}.{field}', got {len(union)}"
        )

    entity.setdefault("properties", {})[field] = {"anyOf": union}

    return SchemaDocument(id=schema_id, ref=document.ref, definitions=definitions)
