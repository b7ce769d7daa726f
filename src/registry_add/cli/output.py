"""Human-facing output helpers.

Machine-readable results go to the --output file; everything here goes to
stderr so it never mixes with data on stdout.
"""

import click


def user_output(message: str) -> None:
    click.echo(message, err=True)


def report_outcome(address: str, validation: str) -> None:
    """Print a one-line success or error summary."""
    if validation:
        user_output(click.style("Error: ", fg="red") + validation)
    else:
        user_output(click.style("Added ", fg="green") + address)
