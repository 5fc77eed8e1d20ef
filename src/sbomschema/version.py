"""Schema version baked into the generated artifact's filename and ``$id``.

Bump JSON_SCHEMA_VERSION whenever the generated schema changes; see README.md.
"""

JSON_SCHEMA_VERSION = "1.0.0"

SCHEMA_FILENAME_TEMPLATE = "schema-{version}.json"
SCHEMA_URL_TEMPLATE = "urn:sbomschema:json:schema:{version}"


def schema_filename(version: str = JSON_SCHEMA_VERSION) -> str:
    """Filename of the artifact for a schema version, e.g. ``schema-1.0.0.json``."""
    return SCHEMA_FILENAME_TEMPLATE.format(version=version)


def schema_url(version: str = JSON_SCHEMA_VERSION) -> str:
    return SCHEMA_URL_TEMPLATE.format(version=version)
