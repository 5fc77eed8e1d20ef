"""Variant registry and merging of the variant definitions.

``Package.metadata`` holds one of several ecosystem-specific shapes at
runtime. The shapes allowed there are listed explicitly in
VARIANT_REGISTRY; nothing is discovered by name or by scanning modules.
A new metadata shape must be added to the registry to appear in the schema.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Sequence, Tuple, Type
from pydantic import BaseModel, create_model

from sbomschema.model.metadata import (
    ApkMetadata,
    DpkgMetadata,
    GemMetadata,
    JavaMetadata,
    NpmPackageJSONMetadata,
    PythonPackageMetadata,
    RpmdbMetadata,
)
from .errors import VariantError
from .introspect import reflect
from .schema import ReflectedSchema, definition_ref


VARIANT_REGISTRY: Tuple[Type[BaseModel], ...] = (
    ApkMetadata,
    DpkgMetadata,
    GemMetadata,
    JavaMetadata,
    NpmPackageJSONMetadata,
    PythonPackageMetadata,
    RpmdbMetadata,
)

# Name of the synthetic model used to reach every variant in one reflection.
PLACEHOLDER_NAME = "MetadataContainer"

# Alternative allowing the field to be absent or null.
ABSENT_ALTERNATIVE: Dict[str, str] = {"type": "null"}


@dataclass(frozen=True)
class VariantSet:
    """Variants ready to be merged into the document.

    ``alternatives`` is the ordered anyOf list: the absent alternative first,
    then one $ref per variant sorted by name. ``definitions`` holds the
    variant definitions and the nested records they reference, without the
    placeholder.
    """
    names: Tuple[str, ...]
    alternatives: List[Dict[str, str]]
    definitions: Dict[str, Dict[str, Any]]


def build_placeholder(registry: Sequence[Type[BaseModel]] = VARIANT_REGISTRY) -> Type[BaseModel]:
    """Build the aggregation model: one required field per registry member.

    Raises:
        VariantError: If the registry has duplicate names or a member is
            named like the placeholder itself
    """
    names = [variant.__name__ for variant in registry]
    seen = set()
    duplicates = set()
    for name in names:
        if name in seen:
            duplicates.add(name)
        seen.add(name)
    if duplicates:
        raise VariantError(f"Duplicate variants in registry: {sorted(duplicates)}")
    if PLACEHOLDER_NAME in seen:
        raise VariantError(f"Variant name '{PLACEHOLDER_NAME}' is reserved for the aggregation placeholder")

    fields = {variant.__name__: (variant, ...) for variant in registry}
    return create_model(PLACEHOLDER_NAME, **fields)


def merge_variants(reflected: ReflectedSchema, registry: Sequence[Type[BaseModel]] = VARIANT_REGISTRY) -> VariantSet:
    """Select the variant definitions from a reflected placeholder.

    Steps:
    - drop the placeholder's own definition
    - select variants by registry membership
    - sort them by name (the only source of a stable alternative order)
    - build the anyOf alternatives, absent first

    Raises:
        VariantError: If a registry member has no definition in ``reflected``
    """
    definitions = {
        name: definition
        for name, definition in reflected.definitions.items()
        if name != reflected.root
    }

    names = sorted(variant.__name__ for variant in registry)
    missing = [name for name in names if name not in definitions]
    if missing:
        raise VariantError(f"Registered variants missing from reflected definitions: {missing}")

    alternatives = [dict(ABSENT_ALTERNATIVE)]
    alternatives.extend({"$ref": definition_ref(name)} for name in names)

    return VariantSet(names=tuple(names), alternatives=alternatives, definitions=definitions)


def reflect_variants(registry: Sequence[Type[BaseModel]] = VARIANT_REGISTRY) -> VariantSet:
    """Reflect every registered variant in one pass and merge the result."""
    placeholder = build_placeholder(registry)
    return merge_variants(reflect(placeholder), registry)
