import logging

import click

from product_catalogue.infrastructure.cli.catalogue_commands import catalogue_load, catalogue_reorders


@click.group()
@click.option("--verbose", is_flag=True, default=False, help="Log catalogue decisions.")
def cli(verbose: bool) -> None:
    """Catalogue: in-memory product catalogue"""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger("product_catalogue").setLevel(level)


# Register subcommands
cli.add_command(catalogue_load)
cli.add_command(catalogue_reorders)
