"""sbomschema CLI: generate the inventory JSON schema artifact.

Takes no options. Exit codes:
- 0: schema written, or existing schema unchanged
- 1: existing schema differs from the generated one (not overwritten)
- 2: generation failed
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

from sbomschema.version import JSON_SCHEMA_VERSION, schema_filename


EXIT_OK = 0
EXIT_REFUSED = 1
EXIT_ERROR = 2


def run(output_dir: Optional[Path] = None) -> int:
    """Generate the schema into ``output_dir`` (default: current directory) and report.

    Returns:
        Process exit code
    """
    from sbomschema.api import generate
    from sbomschema.codes import WriteStatus
    from sbomschema.kernel.errors import SchemaGenerationError

    try:
        result = generate(output_dir)
    except SchemaGenerationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR
    except Exception as e:
        print(f"Unexpected error: {e}", file=sys.stderr)
        import traceback
        traceback.print_exc()
        return EXIT_ERROR

    filename = Path(result.path).name
    if result.status is WriteStatus.WRITTEN:
        print(f'wrote new schema to "{filename}"')
        return EXIT_OK
    if result.status is WriteStatus.UNCHANGED:
        print("No change to the existing schema!")
        return EXIT_OK

    print(f"Cowardly refusing to overwrite existing schema ({filename})!")
    print(
        f"The generated schema differs from the committed one. Bump JSON_SCHEMA_VERSION "
        f"(currently {JSON_SCHEMA_VERSION}) in sbomschema/version.py; see README.md for how to increment."
    )
    return EXIT_REFUSED


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="sbomschema-generate",
        description=(
            f"Generate {schema_filename()} in the current directory from the "
            "inventory result model. An existing file is never overwritten."
        ),
    )
    parser.parse_args()
    sys.exit(run())
