"""Pytest configuration and shared model fixtures.

No sys.path hacks - tests import from the installed sbomschema package.
"""

from typing import Any, List, Optional

import pytest
from pydantic import BaseModel, Field


class AlphaMetadata(BaseModel):
    """Alpha ecosystem metadata."""
    name: str
    homepage: Optional[str] = None


class BetaMetadata(BaseModel):
    """Beta ecosystem metadata."""
    count: int
    tags: List[str] = Field(default_factory=list)


class Package(BaseModel):
    """Minimal package with a weakly typed metadata field."""
    name: str
    metadata: Any = None


class TinyDocument(BaseModel):
    artifacts: List[Package]


class NoPackageDocument(BaseModel):
    names: List[str]


@pytest.fixture
def small_registry():
    """Two variants, deliberately registered out of name order."""
    return (BetaMetadata, AlphaMetadata)


@pytest.fixture
def tiny_document():
    return TinyDocument


@pytest.fixture
def no_package_document():
    return NoPackageDocument
