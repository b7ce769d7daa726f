"""Helpers shared by the add-module and add-provider commands."""

import logging
from pathlib import Path

import click

from registry_add.core.config import AppConfig
from registry_add.core.context import AppContext, create_context
from registry_add.core.errors import InitializationError

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

DEFAULT_MODULE_DATA = Path("../modules")
DEFAULT_PROVIDER_DATA = Path("../providers")


def configure_logging(debug: bool) -> None:
    logging.basicConfig(level=logging.DEBUG if debug else logging.INFO, format=LOG_FORMAT)


def resolve_context(
    click_ctx: click.Context, *, module_data: Path, provider_data: Path
) -> AppContext:
    """Return the injected context, or build the production one.

    Tests inject an AppContext through ``obj``. Otherwise configuration is
    read from the environment; a missing token ends the process with exit
    code 1 before any result file is written.
    """
    if isinstance(click_ctx.obj, AppContext):
        return click_ctx.obj

    try:
        config = AppConfig.from_env()
    except InitializationError as e:
        configure_logging(debug=False)
        logger.error("Initialization Error: %s", e)
        raise SystemExit(1) from e

    configure_logging(config.debug)
    return create_context(config, module_data=module_data, provider_data=provider_data)
