"""Abstract base class for catalog storage."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Generic, TypeVar

IdentifierT = TypeVar("IdentifierT")
SubmissionT = TypeVar("SubmissionT")


class Catalog(ABC, Generic[IdentifierT, SubmissionT]):
    """Persisted entries of one kind (modules or providers).

    The catalog is append-only from the submission pipeline's point of view.
    Duplicate detection happens in the pipeline, so ``save`` does not re-check.
    """

    @abstractmethod
    def create(self, identifier: IdentifierT) -> SubmissionT:
        """Create an empty submission for ``identifier`` without any I/O."""
        ...

    @abstractmethod
    def list(self) -> list[IdentifierT]:
        """List every persisted identifier, read fresh on each call.

        Raises:
            OSError: If the catalog cannot be read
        """
        ...

    @abstractmethod
    def path(self, identifier: IdentifierT) -> Path:
        """Storage location for ``identifier``. Pure and deterministic."""
        ...

    @abstractmethod
    def save(self, submission: SubmissionT) -> None:
        """Persist ``submission`` at ``path(submission.identifier)``.

        Raises:
            OSError: If the record cannot be written
        """
        ...
