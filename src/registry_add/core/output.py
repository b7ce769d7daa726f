"""JSON result documents written at the end of every run.

Exactly one document is written per invocation, whether or not the
submission succeeded. On failure only ``validation`` is set.
"""

import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict

from registry_add.core.errors import ReportError
from registry_add.core.files import safe_write_json

logger = logging.getLogger(__name__)


class ModuleOutput(BaseModel):
    """Outcome of a module submission.

    Attributes:
        file: Catalog record written for the module
        namespace: Module namespace
        name: Module name
        target: Target system
        validation: Failure message, empty on success
    """

    model_config = ConfigDict(strict=True, frozen=True)

    file: str = ""
    namespace: str = ""
    name: str = ""
    target: str = ""
    validation: str = ""


class ProviderOutput(BaseModel):
    """Outcome of a provider submission.

    Attributes:
        file: Catalog record written for the provider
        namespace: Provider namespace
        name: Provider name
        validation: Failure message, empty on success
    """

    model_config = ConfigDict(strict=True, frozen=True)

    file: str = ""
    namespace: str = ""
    name: str = ""
    validation: str = ""


def write_output(path: Path, output: ModuleOutput | ProviderOutput) -> None:
    """Write ``output`` as a JSON object to ``path``.

    Raises:
        ReportError: If the document cannot be written
    """
    try:
        safe_write_json(path, output.model_dump(mode="json"))
    except (OSError, TypeError) as e:
        raise ReportError(f"Unable to write result to {path}: {e}") from e
    logger.debug("Wrote result to %s", path)
