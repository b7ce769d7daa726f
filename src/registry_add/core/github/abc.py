"""Abstract base class for GitHub operations."""

from abc import ABC, abstractmethod

from registry_add.core.github.types import ReleaseInfo
from registry_add.core.identifiers import RepositoryRef


class GitHub(ABC):
    """Abstract interface for the GitHub queries used to discover versions.

    All implementations (real and fake) must implement this interface.
    """

    @abstractmethod
    def list_tags(self, repository: RepositoryRef) -> list[str]:
        """List tag names of a repository.

        Args:
            repository: Repository to query

        Returns:
            Tag names in the order GitHub reports them

        Raises:
            RuntimeError: If the repository cannot be queried
        """
        ...

    @abstractmethod
    def list_releases(self, repository: RepositoryRef) -> list[ReleaseInfo]:
        """List releases of a repository, including drafts and prereleases.

        Args:
            repository: Repository to query

        Returns:
            Releases in the order GitHub reports them

        Raises:
            RuntimeError: If the repository cannot be queried
        """
        ...
