"""Canonical JSON serialization of the schema artifact.

The committed artifact is compared byte for byte against a fresh
generation, so every run must encode the same document to the same bytes.
"""

import json
from typing import Any

from sbomschema.kernel.errors import EncodingError


def canonical_schema_dumps(obj: Any) -> str:
    """
    Canonical, human-reviewable JSON text for a schema document.

    Rules:
    - Sorted keys (recursively)
    - 2-space indentation
    - No escaping of non-ASCII or of "<", ">" and "&"
    - Lists keep their order (callers sort them before calling)
    - NaN/Infinity rejected
    - Exactly one trailing newline

    Raises:
        EncodingError: If ``obj`` contains non-JSON values
    """
    try:
        text = json.dumps(
            obj,
            sort_keys=True,
            indent=2,
            ensure_ascii=False,
            allow_nan=False,
        )
    except (TypeError, ValueError) as e:
        raise EncodingError(f"Cannot encode schema document: {e}") from e
    return text + "\n"


def canonical_schema_bytes(obj: Any) -> bytes:
    """UTF-8 bytes of canonical_schema_dumps()."""
    return canonical_schema_dumps(obj).encode("utf-8")
