"""Fake GitHub operations for testing.

FakeGitHub is an in-memory implementation that accepts pre-configured state
in its constructor. Construct instances directly with keyword arguments.
"""

from registry_add.core.github.abc import GitHub
from registry_add.core.github.types import ReleaseInfo
from registry_add.core.identifiers import RepositoryRef


class FakeGitHub(GitHub):
    """In-memory fake implementation of GitHub operations.

    Repositories are keyed by full name (``owner/repo``). Unknown repositories
    have no tags and no releases.
    """

    def __init__(
        self,
        *,
        tags: dict[str, list[str]] | None = None,
        releases: dict[str, list[ReleaseInfo]] | None = None,
        errors: dict[str, str] | None = None,
    ) -> None:
        """Create FakeGitHub with pre-configured state.

        Args:
            tags: Mapping of repository full name -> tag names
            releases: Mapping of repository full name -> releases
            errors: Mapping of repository full name -> error message raised
                as RuntimeError by every query for that repository
        """
        self._tags = tags or {}
        self._releases = releases or {}
        self._errors = errors or {}
        self._queried: list[str] = []

    @property
    def queried_repositories(self) -> list[str]:
        """Full names of repositories queried, in call order."""
        return self._queried

    def _record(self, repository: RepositoryRef) -> None:
        self._queried.append(repository.full_name)
        if repository.full_name in self._errors:
            raise RuntimeError(self._errors[repository.full_name])

    def list_tags(self, repository: RepositoryRef) -> list[str]:
        self._record(repository)
        return list(self._tags.get(repository.full_name, []))

    def list_releases(self, repository: RepositoryRef) -> list[ReleaseInfo]:
        self._record(repository)
        return list(self._releases.get(repository.full_name, []))
