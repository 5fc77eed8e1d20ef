"""Package: one cataloged artifact in the inventory output."""

from typing import Any, List, Optional
from pydantic import BaseModel, ConfigDict, Field


class Location(BaseModel):
    """Where a package was found (file path, and image layer if any)."""
    path: str
    layer_id: Optional[str] = Field(None, alias="layerID")

    model_config = ConfigDict(populate_by_name=True)


class Package(BaseModel):
    """A cataloged package. The shape of metadata is named by metadataType."""
    id: str
    name: str
    version: str
    type: str
    found_by: str = Field(..., alias="foundBy")
    locations: List[Location]
    licenses: List[str]
    language: str
    cpes: List[str]
    purl: str
    metadata_type: str = Field(..., alias="metadataType")
    # Weakly typed at runtime; the generated schema narrows it to a union
    # over the shapes in VARIANT_REGISTRY.
    metadata: Any = None

    model_config = ConfigDict(populate_by_name=True)
