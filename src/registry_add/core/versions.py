"""Semantic version checks for tag names."""

import re

# Semantic Versioning 2.0.0 with an optional leading "v"
_PRERELEASE_ID = r"(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)"
_SEMVER_PATTERN = re.compile(
    r"^v?(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)"
    rf"(?:-({_PRERELEASE_ID}(?:\.{_PRERELEASE_ID})*))?"
    r"(?:\+([0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?$"
)


def is_semver_tag(tag: str) -> bool:
    """Return True if ``tag`` is a semantic version, with or without a ``v`` prefix.

    Examples:
        >>> is_semver_tag("v1.2.3")
        True
        >>> is_semver_tag("1.0.0-rc.1")
        True
        >>> is_semver_tag("latest")
        False
    """
    return _SEMVER_PATTERN.match(tag) is not None


def strip_v_prefix(tag: str) -> str:
    return tag[1:] if tag.startswith("v") else tag
