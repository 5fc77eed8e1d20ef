"""Tests for the inventory result model the schema is generated from."""

from sbomschema.model import Document, DpkgMetadata, JavaMetadata, Package, Source


def _package_json(metadata_type, metadata):
    return {
        "id": "pkg-1",
        "name": "bash",
        "version": "5.1-2",
        "type": "deb",
        "foundBy": "dpkgdb-cataloger",
        "locations": [{"path": "/var/lib/dpkg/status", "layerID": "sha256:abc"}],
        "licenses": ["GPL-3.0"],
        "language": "",
        "cpes": ["cpe:2.3:a:bash:bash:5.1-2:*:*:*:*:*:*:*"],
        "purl": "pkg:deb/debian/bash@5.1-2",
        "metadataType": metadata_type,
        "metadata": metadata,
    }


def test_package_parses_camel_case_output():
    package = Package.model_validate(_package_json("DpkgMetadata", {"package": "bash"}))
    assert package.found_by == "dpkgdb-cataloger"
    assert package.locations[0].layer_id == "sha256:abc"
    # metadata stays weakly typed at runtime
    assert package.metadata == {"package": "bash"}


def test_package_metadata_may_be_absent():
    data = _package_json("", None)
    del data["metadata"]
    assert Package.model_validate(data).metadata is None


def test_document_round_trips_by_alias():
    data = {
        "artifacts": [_package_json("", None)],
        "source": {"type": "directory", "target": "/src"},
        "distro": {"name": "debian", "version": "11", "idLike": ""},
        "descriptor": {"name": "inventory", "version": "0.1.0"},
        "schema": {"version": "1.0.0", "url": "urn:sbomschema:json:schema:1.0.0"},
    }
    document = Document.model_validate(data)
    assert document.schema_info.version == "1.0.0"
    assert document.model_dump(by_alias=True)["schema"]["url"] == data["schema"]["url"]


def test_metadata_variant_parses_by_alias():
    dpkg = DpkgMetadata.model_validate({
        "package": "bash",
        "source": "bash",
        "version": "5.1-2",
        "architecture": "amd64",
        "maintainer": "Debian",
        "installedSize": 6469,
        "files": [{"path": "/bin/bash", "md5": "d41d8cd98f00b204e9800998ecf8427e"}],
    })
    assert dpkg.installed_size == 6469

    java = JavaMetadata.model_validate({
        "virtualPath": "app.jar",
        "pomProperties": {
            "path": "META-INF/maven/g/a/pom.properties",
            "name": "",
            "groupId": "g",
            "artifactId": "a",
            "version": "1.0",
            "extraFields": {},
        },
    })
    assert java.pom_properties.group_id == "g"
    assert java.manifest is None


def test_schema_descriptions_use_json_names():
    """Model docstrings are published as schema descriptions."""
    package = Package.model_json_schema(by_alias=True)
    assert package["description"] == "A cataloged package. The shape of metadata is named by metadataType."

    for model in (Package, JavaMetadata, Source):
        description = model.model_json_schema(by_alias=True)["description"]
        assert "\n" not in description
        assert "``" not in description
        assert "sbomschema" not in description
        assert "metadata_type" not in description
