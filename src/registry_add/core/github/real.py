"""Production implementation of GitHub operations."""

import json
import logging
import os

from registry_add.core.github.abc import GitHub
from registry_add.core.github.parsing import parse_release_lines, parse_tag_names
from registry_add.core.github.types import ReleaseInfo
from registry_add.core.identifiers import RepositoryRef
from registry_add.subprocess_utils import run_subprocess_with_context

logger = logging.getLogger(__name__)

# Emit each release as a single compact JSON line so pages concatenate cleanly
_RELEASE_JQ = (
    ".[] | {tag_name, draft, prerelease, "
    "assets: [.assets[] | {name, browser_download_url}]} | @json"
)


class RealGitHub(GitHub):
    """Production implementation using the gh CLI.

    Every query runs ``gh api --paginate`` with the configured token exported
    as GH_TOKEN, so the ambient gh login is never used.
    """

    def __init__(self, token: str) -> None:
        self._token = token

    def _gh_api(self, endpoint: str, jq: str, operation_context: str) -> str:
        cmd = ["gh", "api", "--paginate", endpoint, "--jq", jq]
        logger.debug("Querying GitHub: %s", endpoint)
        env = {**os.environ, "GH_TOKEN": self._token}
        result = run_subprocess_with_context(cmd, operation_context, env=env)
        return result.stdout

    def list_tags(self, repository: RepositoryRef) -> list[str]:
        stdout = self._gh_api(
            f"repos/{repository.full_name}/tags",
            ".[].name",
            f"list tags for {repository.full_name}",
        )
        return parse_tag_names(stdout)

    def list_releases(self, repository: RepositoryRef) -> list[ReleaseInfo]:
        stdout = self._gh_api(
            f"repos/{repository.full_name}/releases",
            _RELEASE_JQ,
            f"list releases for {repository.full_name}",
        )
        try:
            return parse_release_lines(stdout)
        except (json.JSONDecodeError, KeyError) as e:
            msg = f"Unexpected release data for {repository.full_name}: {e}"
            raise RuntimeError(msg) from e
