"""Structure commands: registers renumber, insert, reorder and remove."""

from fest.structure.insert_cli import insert
from fest.structure.remove_cli import remove
from fest.structure.renumber_cli import renumber
from fest.structure.reorder_cli import reorder


def register(group):
    """Register structural edit commands with the given Click group."""
    group.add_command(renumber)
    group.add_command(insert)
    group.add_command(reorder)
    group.add_command(remove)
