"""Type definitions for GitHub operations."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ReleaseAsset:
    """A file attached to a GitHub release."""

    name: str
    download_url: str


@dataclass(frozen=True)
class ReleaseInfo:
    """Information about a GitHub release."""

    tag_name: str
    draft: bool
    prerelease: bool
    assets: tuple[ReleaseAsset, ...] = ()
