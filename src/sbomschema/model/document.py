"""Root shape of the inventory JSON output."""

from typing import Any, List, Optional
from pydantic import BaseModel, ConfigDict, Field

from .package import Package


class Source(BaseModel):
    """What was scanned: an image or a directory."""
    # target is either the image description or the directory path.
    type: str
    target: Any = None


class Distribution(BaseModel):
    """Linux distribution detected in the scanned source."""
    name: str
    version: str
    id_like: Optional[str] = Field(None, alias="idLike")

    model_config = ConfigDict(populate_by_name=True)


class Descriptor(BaseModel):
    """The tool that produced the document."""
    name: str
    version: str


class SchemaInfo(BaseModel):
    """Version and location of the schema the document conforms to."""
    version: str
    url: str


class Document(BaseModel):
    """Top-level inventory document."""
    artifacts: List[Package]
    source: Source
    distro: Distribution
    descriptor: Descriptor
    schema_info: SchemaInfo = Field(..., alias="schema")

    model_config = ConfigDict(populate_by_name=True)
