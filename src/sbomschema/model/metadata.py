"""Ecosystem-specific package metadata shapes.

Each class here is one possible runtime shape of ``Package.metadata``.
Field aliases match the camelCase keys of the inventory JSON output.
"""

from typing import Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field


class ApkFileRecord(BaseModel):
    """A file owned by an Alpine (apk) package."""
    path: str
    owner_uid: Optional[str] = Field(None, alias="ownerUid")
    owner_gid: Optional[str] = Field(None, alias="ownerGid")
    permissions: Optional[str] = None
    checksum: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True)


class ApkMetadata(BaseModel):
    """Metadata read from an Alpine installed-package database entry."""
    package: str
    origin_package: str = Field(..., alias="originPackage")
    maintainer: str
    version: str
    license: str
    architecture: str
    url: str
    description: str
    size: int
    installed_size: int = Field(..., alias="installedSize")
    pull_dependencies: str = Field(..., alias="pullDependencies")
    pull_checksum: str = Field(..., alias="pullChecksum")
    git_commit_of_aport: str = Field(..., alias="gitCommitOfApkPort")
    files: List[ApkFileRecord]

    model_config = ConfigDict(populate_by_name=True)


class DpkgFileRecord(BaseModel):
    """A file owned by a Debian package, with its recorded MD5."""
    path: str
    md5: str


class DpkgMetadata(BaseModel):
    """Metadata read from the dpkg status database."""
    package: str
    source: str
    version: str
    architecture: str
    maintainer: str
    installed_size: int = Field(..., alias="installedSize")
    files: List[DpkgFileRecord]

    model_config = ConfigDict(populate_by_name=True)


class GemMetadata(BaseModel):
    """Metadata read from a Ruby gemspec."""
    name: str
    version: str
    files: Optional[List[str]] = None
    authors: Optional[List[str]] = None
    licenses: Optional[List[str]] = None
    homepage: Optional[str] = None


class JavaManifest(BaseModel):
    """Parsed META-INF/MANIFEST.MF sections."""
    main: Optional[Dict[str, str]] = None
    named_sections: Optional[Dict[str, Dict[str, str]]] = Field(None, alias="namedSections")

    model_config = ConfigDict(populate_by_name=True)


class PomProperties(BaseModel):
    """Parsed pom.properties found inside a Java archive."""
    path: str
    name: str
    group_id: str = Field(..., alias="groupId")
    artifact_id: str = Field(..., alias="artifactId")
    version: str
    extra_fields: Dict[str, str] = Field(..., alias="extraFields")

    model_config = ConfigDict(populate_by_name=True)


class JavaMetadata(BaseModel):
    """Metadata for a Java archive (jar, war, ear, ...)."""
    # The parent archive reference is not serialized, so it has no field here.
    virtual_path: str = Field(..., alias="virtualPath")
    manifest: Optional[JavaManifest] = None
    pom_properties: Optional[PomProperties] = Field(None, alias="pomProperties")

    model_config = ConfigDict(populate_by_name=True)


class NpmPackageJSONMetadata(BaseModel):
    """Metadata read from an npm package.json."""
    files: Optional[List[str]] = None
    author: str
    licenses: List[str]
    homepage: str
    description: str
    url: str


class PythonFileDigest(BaseModel):
    algorithm: str
    value: str


class PythonFileRecord(BaseModel):
    """One line of a wheel/egg RECORD file."""
    path: str
    digest: Optional[PythonFileDigest] = None
    size: Optional[str] = None


class PythonPackageMetadata(BaseModel):
    """Metadata read from a Python distribution's METADATA and RECORD files."""
    name: str
    version: str
    license: str
    author: str
    author_email: str = Field(..., alias="authorEmail")
    platform: str
    files: Optional[List[PythonFileRecord]] = None
    site_packages_root_path: str = Field(..., alias="sitePackagesRootPath")
    top_level_packages: Optional[List[str]] = Field(None, alias="topLevelPackages")

    model_config = ConfigDict(populate_by_name=True)


class RpmdbFileRecord(BaseModel):
    """A file owned by an RPM package."""
    path: str
    mode: int
    size: int
    sha256: str


class RpmdbMetadata(BaseModel):
    """Metadata read from the RPM database."""
    name: str
    version: str
    epoch: int
    architecture: str
    release: str
    source_rpm: str = Field(..., alias="sourceRpm")
    size: int
    license: str
    vendor: str
    files: List[RpmdbFileRecord]

    model_config = ConfigDict(populate_by_name=True)
