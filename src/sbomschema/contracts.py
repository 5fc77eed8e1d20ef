"""Public result models for sbomschema."""

from pydantic import BaseModel

from sbomschema.codes import WriteStatus


class GenerationResult(BaseModel):
    """Result of one generation run."""
    path: str  # Target artifact path
    status: WriteStatus
    sha256: str  # Digest of the freshly generated bytes (prefixed with "sha256:")
    size: int  # Length of the freshly generated bytes

    @property
    def ok(self) -> bool:
        return self.status.ok
