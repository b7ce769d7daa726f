"""Parsing of ``gh api`` output into GitHub types."""

import json

from registry_add.core.github.types import ReleaseAsset, ReleaseInfo


def parse_tag_names(output: str) -> list[str]:
    """Parse one tag name per line, skipping blank lines."""
    return [line.strip() for line in output.splitlines() if line.strip()]


def parse_release_lines(output: str) -> list[ReleaseInfo]:
    """Parse JSON-lines release output.

    Each non-blank line is one release object as produced by the REST API
    (``tag_name``, ``draft``, ``prerelease``, ``assets``).

    Raises:
        json.JSONDecodeError: If a line is not valid JSON
    """
    releases: list[ReleaseInfo] = []
    for line in output.splitlines():
        if not line.strip():
            continue
        data = json.loads(line)
        assets = tuple(
            ReleaseAsset(name=asset["name"], download_url=asset["browser_download_url"])
            for asset in data.get("assets") or []
        )
        releases.append(
            ReleaseInfo(
                tag_name=data["tag_name"],
                draft=bool(data.get("draft", False)),
                prerelease=bool(data.get("prerelease", False)),
                assets=assets,
            )
        )
    return releases
