"""Outcome codes of a schema generation run."""

from enum import Enum


class WriteStatus(str, Enum):
    """What happened to the schema artifact on disk."""

    # Success
    WRITTEN = "WRITTEN"  # No artifact existed; the new one was written
    UNCHANGED = "UNCHANGED"  # Artifact exists and matches byte for byte

    # Guarded failure
    REFUSED = "REFUSED"  # Artifact exists and differs; left untouched

    @property
    def ok(self) -> bool:
        return self is not WriteStatus.REFUSED
