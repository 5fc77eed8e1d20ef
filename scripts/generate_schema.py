"""Generate the inventory JSON schema into schema/json/ of this repository."""

import sys
from pathlib import Path

from sbomschema.cli import run


def generate_schema():
    """Generate schema/json/schema-<version>.json, never overwriting a committed one."""
    schema_dir = Path(__file__).parent.parent / "schema" / "json"
    schema_dir.mkdir(parents=True, exist_ok=True)
    return run(output_dir=schema_dir)


if __name__ == "__main__":
    sys.exit(generate_schema())
