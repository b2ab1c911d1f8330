"""hostprof CLI - hostprof command."""

import click

from hostprof.cli.profile import profile_command
from hostprof.core.logging import configure_logging


@click.group()
@click.version_option(version="0.1.0", prog_name="hostprof")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """hostprof - start, watch and capture extension host profiles."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    configure_logging(level="DEBUG" if verbose else "INFO")


cli.add_command(profile_command, name="profile")


if __name__ == "__main__":
    cli()
