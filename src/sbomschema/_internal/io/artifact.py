"""Schema artifact I/O: reconcile freshly rendered bytes with the file on disk."""

from pathlib import Path

from sbomschema.codes import WriteStatus


def reconcile(path: Path, data: bytes) -> WriteStatus:
    """Write ``data`` to ``path`` only if nothing is there yet.

    An existing artifact is never overwritten: identical bytes are a no-op
    and different bytes are refused, leaving the file untouched. Read and
    write failures propagate as OSError.
    """
    if path.exists():
        existing = path.read_bytes()
        if existing == data:
            return WriteStatus.UNCHANGED
        return WriteStatus.REFUSED

    path.write_bytes(data)
    return WriteStatus.WRITTEN
