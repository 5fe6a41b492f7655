"""TradieStop CLI.

Command-line front end of the marketplace client: log in, manage bookings,
invoices, reviews and support tickets, and administer users.
"""

from typing import Optional

import click

from tradiestop import __version__
from tradiestop.cli.commands import ALL_COMMANDS
from tradiestop.cli.utils.context import CliState
from tradiestop.config.logging_config import LoggingConfig, configure_logging
from tradiestop.config.settings import reload_config


@click.group(help="TradieStop CLI - Book tradespeople, invoice jobs, manage the marketplace")
@click.version_option(version=__version__)
@click.option("--debug", is_flag=True, help="Verbose logging and full stack traces")
@click.option(
    "--env-file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Read settings from this .env file",
)
@click.pass_context
def cli(ctx: click.Context, debug: bool, env_file: Optional[str]):
    """TradieStop CLI main entry point."""
    if env_file:
        reload_config(env_file)
    configure_logging(LoggingConfig.from_env(debug=debug))
    if ctx.obj is None:
        ctx.obj = CliState(debug=debug)
    else:
        ctx.obj.debug = debug or ctx.obj.debug


for command in ALL_COMMANDS:
    cli.add_command(command)


def main():
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
