"""Click handlers for reorder commands."""

import os

import click

from fest.festival.naming import ElementKind
from fest.structure.structure_io import (
    edit_options,
    phase_dir,
    renumberer_for,
    sequence_dir,
    with_error_handling,
)


@click.group()
def reorder():
    """Move a phase, sequence or task to another position."""
    pass


@reorder.command("phase")
@click.argument("from_number", metavar="FROM", type=int)
@click.argument("to_number", metavar="TO", type=int)
@click.argument("festival_dir", default=".")
@edit_options
def reorder_phase_cmd(from_number, to_number, festival_dir, **kwargs):
    """Move the phase at FROM to TO, shifting the phases in between."""
    directory = os.path.abspath(festival_dir)
    with with_error_handling():
        renumberer_for(directory, **kwargs).reorder(directory, ElementKind.PHASE, from_number, to_number)


@reorder.command("sequence")
@click.argument("from_number", metavar="FROM", type=int)
@click.argument("to_number", metavar="TO", type=int)
@click.option("--phase", required=True, help="Phase (numeric shortcut, name or path)")
@click.option("--festival", default=".", help="Festival directory")
@edit_options
def reorder_sequence_cmd(from_number, to_number, phase, festival, **kwargs):
    """Move the sequence at FROM to TO within a phase."""
    directory = phase_dir(festival, phase)
    with with_error_handling():
        renumberer_for(directory, **kwargs).reorder(directory, ElementKind.SEQUENCE, from_number, to_number)


# @codescene(disable:"Excess Number of Function Arguments")
@reorder.command("task")
@click.argument("from_number", metavar="FROM", type=int)
@click.argument("to_number", metavar="TO", type=int)
@click.option("--sequence", required=True, help="Sequence (numeric shortcut, name or path)")
@click.option("--phase", default=None, help="Phase containing the sequence")
@click.option("--festival", default=".", help="Festival directory")
@edit_options
def reorder_task_cmd(from_number, to_number, sequence, phase, festival, **kwargs):
    """Move the task (or parallel group) at FROM to TO within a sequence."""
    directory = sequence_dir(festival, phase, sequence)
    with with_error_handling():
        renumberer_for(directory, **kwargs).reorder(directory, ElementKind.TASK, from_number, to_number)

