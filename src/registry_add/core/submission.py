"""Submission records and version metadata acquisition.

A submission starts with an identifier and no versions. ``update_metadata``
queries GitHub once and fills ``versions`` in place, keeping the order in
which GitHub reported the tags or releases.
"""

import logging
import re
from dataclasses import dataclass, field

from registry_add.core.errors import MetadataFetchError
from registry_add.core.github.abc import GitHub
from registry_add.core.github.types import ReleaseInfo
from registry_add.core.identifiers import ModuleIdentifier, ProviderIdentifier
from registry_add.core.versions import is_semver_tag, strip_v_prefix

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ModuleVersion:
    version: str  # Tag name as published, e.g. "v1.2.3"


@dataclass(frozen=True)
class ProviderTarget:
    """A platform-specific provider package attached to a release."""

    os: str
    arch: str
    filename: str
    download_url: str


@dataclass(frozen=True)
class ProviderVersion:
    version: str  # Without the "v" prefix, e.g. "1.2.3"
    shasums_url: str
    shasums_signature_url: str
    targets: list[ProviderTarget]


@dataclass
class ModuleSubmission:
    identifier: ModuleIdentifier
    versions: list[ModuleVersion] = field(default_factory=list)

    def update_metadata(self, github: GitHub) -> None:
        """Populate versions from the repository's semver tags.

        Raises:
            MetadataFetchError: If GitHub cannot be queried
        """
        repository = self.identifier.repository
        try:
            tags = github.list_tags(repository)
        except RuntimeError as e:
            raise MetadataFetchError(f"An unexpected error occured: {e}") from e

        self.versions = [ModuleVersion(version=tag) for tag in tags if is_semver_tag(tag)]
        logger.debug(
            "Found %d semver tags out of %d for %s",
            len(self.versions),
            len(tags),
            repository.full_name,
        )

    def to_record(self) -> dict:
        return {"versions": [{"version": v.version} for v in self.versions]}


@dataclass
class ProviderSubmission:
    identifier: ProviderIdentifier
    versions: list[ProviderVersion] = field(default_factory=list)

    def update_metadata(self, github: GitHub) -> None:
        """Populate versions from the repository's published releases.

        Drafts and releases whose tag is not a semantic version are skipped.

        Raises:
            MetadataFetchError: If GitHub cannot be queried
        """
        repository = self.identifier.repository
        try:
            releases = github.list_releases(repository)
        except RuntimeError as e:
            raise MetadataFetchError(f"An unexpected error occured: {e}") from e

        self.versions = [
            build_provider_version(self.identifier.provider_name, release)
            for release in releases
            if not release.draft and is_semver_tag(release.tag_name)
        ]
        logger.debug(
            "Found %d publishable releases out of %d for %s",
            len(self.versions),
            len(releases),
            repository.full_name,
        )

    def to_record(self) -> dict:
        return {
            "versions": [
                {
                    "version": v.version,
                    "shasums_url": v.shasums_url,
                    "shasums_signature_url": v.shasums_signature_url,
                    "targets": [
                        {
                            "os": t.os,
                            "arch": t.arch,
                            "filename": t.filename,
                            "download_url": t.download_url,
                        }
                        for t in v.targets
                    ],
                }
                for v in self.versions
            ]
        }


def build_provider_version(provider_name: str, release: ReleaseInfo) -> ProviderVersion:
    """Build a ProviderVersion from release assets.

    Packages follow ``terraform-provider-<name>_<version>_<os>_<arch>.zip``;
    checksums are ``..._<version>_SHA256SUMS`` and its ``.sig``. Assets that
    match neither are ignored.
    """
    version = strip_v_prefix(release.tag_name)
    prefix = f"terraform-provider-{provider_name}_{version}_"
    package_pattern = re.compile(re.escape(prefix) + r"(?P<os>[a-z0-9]+)_(?P<arch>[a-z0-9]+)\.zip")

    shasums_url = ""
    shasums_signature_url = ""
    targets: list[ProviderTarget] = []
    for asset in release.assets:
        if asset.name == f"{prefix}SHA256SUMS":
            shasums_url = asset.download_url
        elif asset.name == f"{prefix}SHA256SUMS.sig":
            shasums_signature_url = asset.download_url
        else:
            match = package_pattern.fullmatch(asset.name)
            if match is not None:
                targets.append(
                    ProviderTarget(
                        os=match.group("os"),
                        arch=match.group("arch"),
                        filename=asset.name,
                        download_url=asset.download_url,
                    )
                )

    return ProviderVersion(
        version=version,
        shasums_url=shasums_url,
        shasums_signature_url=shasums_signature_url,
        targets=targets,
    )
