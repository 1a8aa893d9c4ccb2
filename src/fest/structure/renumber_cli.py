"""Click handlers for renumber commands."""

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


def _start_option(fn):
    return click.option("--start", "start_from", default=1, type=int,
                        help="Number given to the first element")(fn)


@click.group()
def renumber():
    """Renumber phases, sequences or tasks into a contiguous run."""
    pass


@renumber.command("phase")
@click.argument("festival_dir", default=".")
@_start_option
@edit_options
def renumber_phase_cmd(festival_dir, start_from, **kwargs):
    """Renumber the phases of a festival (001, 002, ...)."""
    directory = os.path.abspath(festival_dir)
    with with_error_handling():
        renumberer_for(directory, **kwargs).renumber(directory, ElementKind.PHASE, start_from)


@renumber.command("sequence")
@click.option("--phase", required=True, help="Phase (numeric shortcut, name or path)")
@click.option("--festival", default=".", help="Festival directory")
@_start_option
@edit_options
def renumber_sequence_cmd(phase, festival, start_from, **kwargs):
    """Renumber the sequences of a phase (01, 02, ...)."""
    directory = phase_dir(festival, phase)
    with with_error_handling():
        renumberer_for(directory, **kwargs).renumber(directory, ElementKind.SEQUENCE, start_from)


@renumber.command("task")
@click.option("--sequence", required=True, help="Sequence (numeric shortcut, name or path)")
@click.option("--phase", default=None, help="Phase containing the sequence")
@click.option("--festival", default=".", help="Festival directory")
@_start_option
@edit_options
def renumber_task_cmd(sequence, phase, festival, start_from, **kwargs):
    """Renumber the tasks of a sequence; parallel tasks keep a shared number."""
    directory = sequence_dir(festival, phase, sequence)
    with with_error_handling():
        renumberer_for(directory, **kwargs).renumber(directory, ElementKind.TASK, start_from)
