"""In-memory fake catalogs for testing.

Paths use the same layout as the filesystem catalogs, rooted at a data
directory that is never touched.
"""

from pathlib import Path

from registry_add.core.catalog.abc import Catalog
from registry_add.core.catalog.real import module_record_path, provider_record_path
from registry_add.core.identifiers import ModuleIdentifier, ProviderIdentifier
from registry_add.core.submission import ModuleSubmission, ProviderSubmission


class FakeModuleCatalog(Catalog[ModuleIdentifier, ModuleSubmission]):
    """In-memory module catalog.

    All state is provided via constructor using keyword arguments.
    """

    def __init__(
        self,
        *,
        existing: list[ModuleIdentifier] | None = None,
        data_dir: Path = Path("/fake/modules"),
        save_error: OSError | None = None,
    ) -> None:
        """Create FakeModuleCatalog with pre-configured state.

        Args:
            existing: Identifiers already present in the catalog
            data_dir: Root used to compute record paths
            save_error: If set, raised by every save() call
        """
        self._entries = list(existing or [])
        self._data_dir = data_dir
        self._save_error = save_error
        self._saved: list[ModuleSubmission] = []

    @property
    def saved(self) -> list[ModuleSubmission]:
        """Read-only access to saved submissions for test assertions."""
        return self._saved

    def create(self, identifier: ModuleIdentifier) -> ModuleSubmission:
        return ModuleSubmission(identifier=identifier)

    def list(self) -> list[ModuleIdentifier]:
        return list(self._entries)

    def path(self, identifier: ModuleIdentifier) -> Path:
        return module_record_path(self._data_dir, identifier)

    def save(self, submission: ModuleSubmission) -> None:
        if self._save_error is not None:
            raise self._save_error
        self._saved.append(submission)
        self._entries.append(submission.identifier)


class FakeProviderCatalog(Catalog[ProviderIdentifier, ProviderSubmission]):
    """In-memory provider catalog.

    All state is provided via constructor using keyword arguments.
    """

    def __init__(
        self,
        *,
        existing: list[ProviderIdentifier] | None = None,
        data_dir: Path = Path("/fake/providers"),
        save_error: OSError | None = None,
    ) -> None:
        self._entries = list(existing or [])
        self._data_dir = data_dir
        self._save_error = save_error
        self._saved: list[ProviderSubmission] = []

    @property
    def saved(self) -> list[ProviderSubmission]:
        """Read-only access to saved submissions for test assertions."""
        return self._saved

    def create(self, identifier: ProviderIdentifier) -> ProviderSubmission:
        return ProviderSubmission(identifier=identifier)

    def list(self) -> list[ProviderIdentifier]:
        return list(self._entries)

    def path(self, identifier: ProviderIdentifier) -> Path:
        return provider_record_path(self._data_dir, identifier)

    def save(self, submission: ProviderSubmission) -> None:
        if self._save_error is not None:
            raise self._save_error
        self._saved.append(submission)
        self._entries.append(submission.identifier)
