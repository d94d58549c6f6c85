import click

from stockroom.infrastructure.cli.catalog_commands import catalog_show
from stockroom.infrastructure.cli.server_commands import serve


@click.group()
def cli() -> None:
    """Stockroom: in-memory inventory catalog"""


# Register subcommands
cli.add_command(catalog_show)
cli.add_command(serve)
