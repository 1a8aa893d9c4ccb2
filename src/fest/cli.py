"""Top-level Click group for the fest CLI."""

import logging

import click

from fest.structure.cli import register as register_structure_commands


@click.group()
@click.option("--log-level", default="WARNING",
              type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
              help="Diagnostic logging level (written to stderr)")
def main(log_level):
    """fest - keep festival phases, sequences and tasks in numbered order."""
    logging.basicConfig(level=log_level.upper(), format="%(levelname)s %(name)s: %(message)s")


register_structure_commands(main)
