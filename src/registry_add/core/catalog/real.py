"""Filesystem catalogs.

Layout under the data directory, bucketed by the namespace's first letter:

    modules:   <data>/<n>/<namespace>/<name>/<target>.json
    providers: <data>/<n>/<namespace>/<provider>.json
"""

import logging
from pathlib import Path

from registry_add.core.catalog.abc import Catalog
from registry_add.core.files import safe_write_json
from registry_add.core.identifiers import ModuleIdentifier, ProviderIdentifier
from registry_add.core.submission import ModuleSubmission, ProviderSubmission

logger = logging.getLogger(__name__)


def module_record_path(data_dir: Path, identifier: ModuleIdentifier) -> Path:
    return (
        data_dir
        / identifier.namespace[0].lower()
        / identifier.namespace
        / identifier.name
        / f"{identifier.target_system}.json"
    )


def provider_record_path(data_dir: Path, identifier: ProviderIdentifier) -> Path:
    return (
        data_dir
        / identifier.namespace[0].lower()
        / identifier.namespace
        / f"{identifier.provider_name}.json"
    )


class ModuleCatalog(Catalog[ModuleIdentifier, ModuleSubmission]):
    def __init__(self, data_dir: Path) -> None:
        self._data_dir = data_dir

    def create(self, identifier: ModuleIdentifier) -> ModuleSubmission:
        return ModuleSubmission(identifier=identifier)

    def list(self) -> list[ModuleIdentifier]:
        if not self._data_dir.is_dir():
            logger.debug("Module data directory %s does not exist", self._data_dir)
            return []

        return [
            ModuleIdentifier(
                namespace=record.parent.parent.name,
                name=record.parent.name,
                target_system=record.stem,
            )
            for record in sorted(self._data_dir.glob("*/*/*/*.json"))
            if record.is_file()
        ]

    def path(self, identifier: ModuleIdentifier) -> Path:
        return module_record_path(self._data_dir, identifier)

    def save(self, submission: ModuleSubmission) -> None:
        record_path = self.path(submission.identifier)
        logger.debug("Writing module record to %s", record_path)
        safe_write_json(record_path, submission.to_record())


class ProviderCatalog(Catalog[ProviderIdentifier, ProviderSubmission]):
    def __init__(self, data_dir: Path) -> None:
        self._data_dir = data_dir

    def create(self, identifier: ProviderIdentifier) -> ProviderSubmission:
        return ProviderSubmission(identifier=identifier)

    def list(self) -> list[ProviderIdentifier]:
        if not self._data_dir.is_dir():
            logger.debug("Provider data directory %s does not exist", self._data_dir)
            return []

        return [
            ProviderIdentifier(namespace=record.parent.name, provider_name=record.stem)
            for record in sorted(self._data_dir.glob("*/*/*.json"))
            if record.is_file()
        ]

    def path(self, identifier: ProviderIdentifier) -> Path:
        return provider_record_path(self._data_dir, identifier)

    def save(self, submission: ProviderSubmission) -> None:
        record_path = self.path(submission.identifier)
        logger.debug("Writing provider record to %s", record_path)
        safe_write_json(record_path, submission.to_record())
