"""Submission pipelines for modules and providers.

Both pipelines run the same linear stages exactly once:

    parse -> create -> validate address -> duplicate check
          -> fetch metadata -> require versions -> save

The first failing stage ends the run. Its SubmissionError is logged and
becomes the ``validation`` message of the returned output; nothing is saved.
"""

import logging
from collections.abc import Callable

from registry_add.core.address import validate_module_address, validate_provider_address
from registry_add.core.catalog.abc import Catalog
from registry_add.core.context import AppContext
from registry_add.core.errors import (
    DuplicateError,
    NoVersionsError,
    PersistError,
    SubmissionError,
)
from registry_add.core.identifiers import (
    ModuleIdentifier,
    ProviderIdentifier,
    parse_module_repository,
    parse_provider_repository,
)
from registry_add.core.output import ModuleOutput, ProviderOutput

logger = logging.getLogger(__name__)


def ensure_not_registered(
    catalog: Catalog, identifier: ModuleIdentifier | ProviderIdentifier
) -> None:
    """Reject ``identifier`` if the catalog has an entry with the same address.

    Addresses are compared case-insensitively.

    Raises:
        DuplicateError: Naming the existing entry
        PersistError: If the catalog cannot be listed
    """
    submitted = str(identifier).lower()
    try:
        existing_entries = catalog.list()
    except OSError as e:
        raise PersistError(f"Unable to list existing entries: {e}") from e

    for existing in existing_entries:
        if str(existing).lower() == submitted:
            raise DuplicateError(f"Repository already exists in the registry, {existing}")


def _admit(
    ctx: AppContext,
    catalog: Catalog,
    identifier: ModuleIdentifier | ProviderIdentifier,
    validate_address: Callable[[str], None],
) -> None:
    """Run every stage after parsing, raising the first SubmissionError."""
    submission = catalog.create(identifier)
    address = str(identifier)

    validate_address(address)
    logger.debug("Address %s is valid", address)

    ensure_not_registered(catalog, identifier)
    logger.debug("Address %s is not yet registered", address)

    submission.update_metadata(ctx.github)
    if len(submission.versions) == 0:
        url = identifier.repository.url
        raise NoVersionsError(f"No versions detected for repository {url}")

    try:
        catalog.save(submission)
    except OSError as e:
        raise PersistError(f"An unexpected error occured: {e}") from e

    logger.info("Added %s with %d versions", address, len(submission.versions))


def submit_module(ctx: AppContext, repository: str) -> ModuleOutput:
    """Run the module pipeline for ``repository`` and describe the outcome."""
    try:
        identifier = parse_module_repository(repository)
        _admit(ctx, ctx.modules, identifier, validate_module_address)
    except SubmissionError as e:
        logger.error("Unable to add module: %s", e)
        return ModuleOutput(validation=str(e))

    return ModuleOutput(
        file=str(ctx.modules.path(identifier)),
        namespace=identifier.namespace,
        name=identifier.name,
        target=identifier.target_system,
    )


def submit_provider(ctx: AppContext, repository: str) -> ProviderOutput:
    """Run the provider pipeline for ``repository`` and describe the outcome."""
    try:
        identifier = parse_provider_repository(repository)
        _admit(ctx, ctx.providers, identifier, validate_provider_address)
    except SubmissionError as e:
        logger.error("Unable to add provider: %s", e)
        return ProviderOutput(validation=str(e))

    return ProviderOutput(
        file=str(ctx.providers.path(identifier)),
        namespace=identifier.namespace,
        name=identifier.provider_name,
    )
