"""Click handlers for insert commands."""

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


def _insert_spec_options(fn):
    """Apply the shared Click options describing the new element."""
    for option in reversed([
        click.option("--after", required=True, type=int, help="Insert after this number (0 for the front)"),
        click.option("--name", "label", required=True, help="Name of the new element"),
    ]):
        fn = option(fn)
    return fn


@click.group()
def insert():
    """Insert a phase, sequence or task and shift the ones after it."""
    pass


@insert.command("phase")
@click.argument("festival_dir", default=".")
@_insert_spec_options
@edit_options
def insert_phase_cmd(festival_dir, after, label, **kwargs):
    """Insert a new phase directory after the given number."""
    directory = os.path.abspath(festival_dir)
    with with_error_handling():
        renumberer_for(directory, **kwargs).insert(directory, ElementKind.PHASE, after, label)


@insert.command("sequence")
@click.option("--phase", required=True, help="Phase (numeric shortcut, name or path)")
@click.option("--festival", default=".", help="Festival directory")
@_insert_spec_options
@edit_options
def insert_sequence_cmd(phase, festival, after, label, **kwargs):
    """Insert a new sequence directory into a phase."""
    directory = phase_dir(festival, phase)
    with with_error_handling():
        renumberer_for(directory, **kwargs).insert(directory, ElementKind.SEQUENCE, after, label)


@insert.command("task")
@click.option("--sequence", required=True, help="Sequence (numeric shortcut, name or path)")
@click.option("--phase", default=None, help="Phase containing the sequence")
@click.option("--festival", default=".", help="Festival directory")
@_insert_spec_options
@edit_options
def insert_task_cmd(sequence, phase, festival, after, label, **kwargs):
    """Insert a new, empty task file into a sequence."""
    directory = sequence_dir(festival, phase, sequence)
    with with_error_handling():
        renumberer_for(directory, **kwargs).insert(directory, ElementKind.TASK, after, label)
