"""sbomschema: JSON Schema generator for the inventory tool's JSON output."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("sbomschema")
except PackageNotFoundError:
    __version__ = "dev"

# Public API exports
from sbomschema.api import build_schema, render_schema, generate
from sbomschema.codes import WriteStatus
from sbomschema.contracts import GenerationResult
from sbomschema.version import JSON_SCHEMA_VERSION

__all__ = [
    "__version__",
    "build_schema",
    "render_schema",
    "generate",
    "WriteStatus",
    "GenerationResult",
    "JSON_SCHEMA_VERSION",
]
