"""In-memory schema structures passed between pipeline stages."""

from dataclasses import dataclass
from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict, Field


# Definitions are referenced draft-07 style, not via pydantic's default "$defs".
DEFINITIONS_KEY = "definitions"
REF_TEMPLATE = "#/definitions/{model}"
JSON_SCHEMA_DIALECT = "http://json-schema.org/draft-07/schema#"


def definition_ref(name: str) -> str:
    """JSON pointer reference to a named definition."""
    return REF_TEMPLATE.format(model=name)


@dataclass(frozen=True)
class ReflectedSchema:
    """Result of reflecting one model: its own name plus every definition reached.

    ``definitions`` includes the root model's own definition under ``root``.
    """
    root: str
    definitions: Dict[str, Dict[str, Any]]

    @property
    def ref(self) -> str:
        return definition_ref(self.root)


class SchemaDocument(BaseModel):
    """The assembled JSON Schema document.

    Fields are named for Python; dump with ``by_alias=True`` to get the
    JSON Schema keywords.
    """
    schema_uri: str = Field(JSON_SCHEMA_DIALECT, alias="$schema")
    id: Optional[str] = Field(None, alias="$id")
    ref: str = Field(..., alias="$ref")
    definitions: Dict[str, Dict[str, Any]]

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    def to_json_obj(self) -> Dict[str, Any]:
        """Plain JSON object form, with JSON Schema keywords and no empty ``$id``."""
        return self.model_dump(by_alias=True, exclude_none=True)
