"""Tests for version metadata acquisition."""

import pytest

from registry_add.core.errors import MetadataFetchError
from registry_add.core.github.fake import FakeGitHub
from registry_add.core.github.types import ReleaseAsset, ReleaseInfo
from registry_add.core.identifiers import ModuleIdentifier, ProviderIdentifier
from registry_add.core.submission import (
    ModuleSubmission,
    ModuleVersion,
    ProviderSubmission,
    ProviderTarget,
    build_provider_version,
)

VPC = ModuleIdentifier(namespace="hashicorp", name="vpc", target_system="aws")
RANDOM = ProviderIdentifier(namespace="acme", provider_name="random")

_DOWNLOAD_BASE = "https://github.com/acme/terraform-provider-random/releases/download"


def _asset(tag: str, name: str) -> ReleaseAsset:
    return ReleaseAsset(name=name, download_url=f"{_DOWNLOAD_BASE}/{tag}/{name}")


def test_module_submission_starts_empty() -> None:
    submission = ModuleSubmission(identifier=VPC)

    assert submission.versions == []


def test_module_metadata_keeps_semver_tags_in_discovery_order() -> None:
    github = FakeGitHub(
        tags={"hashicorp/terraform-aws-vpc": ["v1.1.0", "latest", "v1.0.0", "1.2.0-beta.1"]}
    )
    submission = ModuleSubmission(identifier=VPC)

    submission.update_metadata(github)

    assert submission.versions == [
        ModuleVersion("v1.1.0"),
        ModuleVersion("v1.0.0"),
        ModuleVersion("1.2.0-beta.1"),
    ]
    assert github.queried_repositories == ["hashicorp/terraform-aws-vpc"]


def test_module_metadata_error_is_wrapped() -> None:
    github = FakeGitHub(errors={"hashicorp/terraform-aws-vpc": "HTTP 404: Not Found"})
    submission = ModuleSubmission(identifier=VPC)

    with pytest.raises(MetadataFetchError) as exc_info:
        submission.update_metadata(github)

    assert str(exc_info.value) == "An unexpected error occured: HTTP 404: Not Found"
    assert submission.versions == []


def test_module_record() -> None:
    submission = ModuleSubmission(identifier=VPC, versions=[ModuleVersion("v1.0.0")])

    assert submission.to_record() == {"versions": [{"version": "v1.0.0"}]}


def test_build_provider_version_from_assets() -> None:
    release = ReleaseInfo(
        tag_name="v1.2.0",
        draft=False,
        prerelease=False,
        assets=(
            _asset("v1.2.0", "terraform-provider-random_1.2.0_SHA256SUMS"),
            _asset("v1.2.0", "terraform-provider-random_1.2.0_SHA256SUMS.sig"),
            _asset("v1.2.0", "terraform-provider-random_1.2.0_linux_amd64.zip"),
            _asset("v1.2.0", "terraform-provider-random_1.2.0_windows_386.zip"),
            _asset("v1.2.0", "terraform-provider-random_1.2.0_manifest.json"),
            _asset("v1.2.0", "terraform-provider-other_1.2.0_linux_amd64.zip"),
        ),
    )

    version = build_provider_version("random", release)

    assert version.version == "1.2.0"
    assert version.shasums_url == (
        f"{_DOWNLOAD_BASE}/v1.2.0/terraform-provider-random_1.2.0_SHA256SUMS"
    )
    assert version.shasums_signature_url == (
        f"{_DOWNLOAD_BASE}/v1.2.0/terraform-provider-random_1.2.0_SHA256SUMS.sig"
    )
    assert version.targets == [
        ProviderTarget(
            os="linux",
            arch="amd64",
            filename="terraform-provider-random_1.2.0_linux_amd64.zip",
            download_url=f"{_DOWNLOAD_BASE}/v1.2.0/terraform-provider-random_1.2.0_linux_amd64.zip",
        ),
        ProviderTarget(
            os="windows",
            arch="386",
            filename="terraform-provider-random_1.2.0_windows_386.zip",
            download_url=f"{_DOWNLOAD_BASE}/v1.2.0/terraform-provider-random_1.2.0_windows_386.zip",
        ),
    ]


def test_build_provider_version_without_assets() -> None:
    release = ReleaseInfo(tag_name="0.3.0", draft=False, prerelease=False)

    version = build_provider_version("random", release)

    assert version.version == "0.3.0"
    assert version.shasums_url == ""
    assert version.targets == []


def test_provider_metadata_skips_drafts_and_non_semver_tags() -> None:
    github = FakeGitHub(
        releases={
            "acme/terraform-provider-random": [
                ReleaseInfo(tag_name="v2.0.0", draft=True, prerelease=False),
                ReleaseInfo(tag_name="nightly", draft=False, prerelease=True),
                ReleaseInfo(tag_name="v1.1.0-rc.1", draft=False, prerelease=True),
                ReleaseInfo(tag_name="v1.0.0", draft=False, prerelease=False),
            ]
        }
    )
    submission = ProviderSubmission(identifier=RANDOM)

    submission.update_metadata(github)

    assert [v.version for v in submission.versions] == ["1.1.0-rc.1", "1.0.0"]


def test_provider_metadata_error_is_wrapped() -> None:
    github = FakeGitHub(errors={"acme/terraform-provider-random": "rate limited"})
    submission = ProviderSubmission(identifier=RANDOM)

    with pytest.raises(MetadataFetchError, match="An unexpected error occured: rate limited"):
        submission.update_metadata(github)


def test_provider_record() -> None:
    release = ReleaseInfo(
        tag_name="v1.0.0",
        draft=False,
        prerelease=False,
        assets=(_asset("v1.0.0", "terraform-provider-random_1.0.0_linux_arm64.zip"),),
    )
    submission = ProviderSubmission(
        identifier=RANDOM, versions=[build_provider_version("random", release)]
    )

    assert submission.to_record() == {
        "versions": [
            {
                "version": "1.0.0",
                "shasums_url": "",
                "shasums_signature_url": "",
                "targets": [
                    {
                        "os": "linux",
                        "arch": "arm64",
                        "filename": "terraform-provider-random_1.0.0_linux_arm64.zip",
                        "download_url": (
                            f"{_DOWNLOAD_BASE}/v1.0.0/"
                            "terraform-provider-random_1.0.0_linux_arm64.zip"
                        ),
                    }
                ],
            }
        ]
    }
