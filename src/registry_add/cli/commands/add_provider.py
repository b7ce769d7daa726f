from pathlib import Path

import click

from registry_add.cli.commands.shared import (
    DEFAULT_MODULE_DATA,
    DEFAULT_PROVIDER_DATA,
    resolve_context,
)
from registry_add.cli.output import report_outcome
from registry_add.core.output import write_output
from registry_add.core.pipeline import submit_provider


@click.command("provider")
@click.option("--repository", required=True, help="The provider repository to add")
@click.option(
    "--output",
    "output_file",
    required=True,
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to write JSON result to",
)
@click.option(
    "--provider-data",
    type=click.Path(file_okay=False, path_type=Path),
    default=DEFAULT_PROVIDER_DATA,
    show_default=True,
    help="Directory containing the provider data",
)
@click.pass_context
def add_provider_cmd(
    click_ctx: click.Context, repository: str, output_file: Path, provider_data: Path
) -> None:
    """Add a provider repository to the registry.

    REPOSITORY must be named <namespace>/terraform-provider-<name>; it is
    matched case-insensitively.
    """
    ctx = resolve_context(click_ctx, module_data=DEFAULT_MODULE_DATA, provider_data=provider_data)

    result = submit_provider(ctx, repository)

    # Always written, even when validation failed
    write_output(output_file, result)
    report_outcome(f"{result.namespace}/{result.name}", result.validation)

    if result.validation:
        raise SystemExit(1)
