"""Errors raised while generating the schema.

All of them are fatal: the generator is a build step and stops on the first one.
"""


class SchemaGenerationError(ValueError):
    """Base class for schema generation failures."""
    pass


class IntrospectionError(SchemaGenerationError):
    """Raised when a shape cannot be reflected into a JSON schema."""


class VariantError(SchemaGenerationError):
    """Raised when the variant registry is inconsistent with what was reflected."""


class AssemblyError(SchemaGenerationError):
    """Raised when the document shape and the merge logic are out of sync."""


class MergeCollisionError(AssemblyError):
    """Raised when a variant definition clashes with a different document definition."""


class EncodingError(SchemaGenerationError):
    """Raised when the assembled document cannot be serialized."""
