import click

from registry_add.cli.commands.add_module import add_module_cmd
from registry_add.cli.commands.add_provider import add_provider_cmd

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="registry-add")
def cli() -> None:
    """Admit new modules and providers into the registry catalog."""


cli.add_command(add_module_cmd)
cli.add_command(add_provider_cmd)


def main() -> None:
    """CLI entry point used by the `registry-add` console script."""
    cli()


def add_module_main() -> None:
    """Entry point for the standalone `add-module` script."""
    add_module_cmd()


def add_provider_main() -> None:
    """Entry point for the standalone `add-provider` script."""
    add_provider_cmd()
