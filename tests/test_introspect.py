"""Tests for reflecting pydantic models into named definitions."""

from typing import List, Optional

import pytest
from pydantic import BaseModel, ConfigDict

from sbomschema.kernel.errors import IntrospectionError
from sbomschema.kernel.introspect import reflect
from sbomschema.model import Document, DpkgMetadata


class Digest(BaseModel):
    algorithm: str
    value: str


class FileA(BaseModel):
    path: str
    digest: Digest


class FileB(BaseModel):
    path: str
    digest: Optional[Digest] = None


class Holder(BaseModel):
    a: List[FileA]
    b: List[FileB]


class TreeNode(BaseModel):
    name: str
    children: List["TreeNode"] = []


class Opaque:
    pass


class Unrepresentable(BaseModel):
    thing: Opaque

    model_config = ConfigDict(arbitrary_types_allowed=True)


def test_root_definition_is_keyed_by_class_name():
    reflected = reflect(Holder)
    assert reflected.root == "Holder"
    assert reflected.ref == "#/definitions/Holder"
    assert "Holder" in reflected.definitions
    assert "$defs" not in reflected.definitions["Holder"]


def test_nested_models_become_referenced_definitions():
    reflected = reflect(Holder)
    assert set(reflected.definitions) == {"Holder", "FileA", "FileB", "Digest"}

    holder = reflected.definitions["Holder"]
    assert holder["properties"]["a"]["items"] == {"$ref": "#/definitions/FileA"}
    assert reflected.definitions["FileA"]["properties"]["digest"] == {"$ref": "#/definitions/Digest"}


def test_shared_sub_model_appears_once():
    """Digest is reached through both FileA and FileB but is defined once."""
    reflected = reflect(Holder)
    digest_ref = {"$ref": "#/definitions/Digest"}
    assert reflected.definitions["FileA"]["properties"]["digest"] == digest_ref
    assert digest_ref in reflected.definitions["FileB"]["properties"]["digest"]["anyOf"]
    assert [name for name in reflected.definitions if "Digest" in name] == ["Digest"]


def test_aliases_are_used_for_property_names():
    reflected = reflect(DpkgMetadata)
    properties = reflected.definitions["DpkgMetadata"]["properties"]
    assert "installedSize" in properties
    assert "installed_size" not in properties


def test_self_referencing_model_is_reflected_by_name():
    reflected = reflect(TreeNode)
    node = reflected.definitions["TreeNode"]
    assert node["properties"]["children"]["items"] == {"$ref": "#/definitions/TreeNode"}


def test_document_reflection_contains_package():
    reflected = reflect(Document)
    assert reflected.root == "Document"
    for name in ("Package", "Location", "Source", "Distribution", "Descriptor", "SchemaInfo"):
        assert name in reflected.definitions
    assert "schema" in reflected.definitions["Document"]["properties"]


def test_unrepresentable_field_is_fatal():
    with pytest.raises(IntrospectionError, match="Unrepresentable"):
        reflect(Unrepresentable)


def test_non_model_is_rejected():
    with pytest.raises(IntrospectionError, match="not a pydantic model class"):
        reflect(dict)
