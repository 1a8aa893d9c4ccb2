"""Click handlers for remove commands."""

import os

import click

from fest.festival.naming import TASK_SUFFIX, ElementKind
from fest.festival.scanner import find_element
from fest.structure.structure_io import (
    edit_options,
    phase_dir,
    renumberer_for,
    sequence_dir,
    with_error_handling,
)


def _remove(path, **kwargs):
    with with_error_handling():
        renumberer_for(os.path.dirname(path), **kwargs).remove(path)


def _task_path(directory, target):
    if target.isdigit():
        return find_element(directory, int(target), ElementKind.TASK).path
    if os.path.isabs(target):
        return target
    if not target.endswith(TASK_SUFFIX):
        target += TASK_SUFFIX
    return os.path.join(directory, target)


@click.group()
def remove():
    """Remove a phase, sequence or task and close the gap it leaves."""
    pass


@remove.command("phase")
@click.argument("target")
@click.option("--festival", default=".", help="Festival directory")
@edit_options
def remove_phase_cmd(target, festival, **kwargs):
    """Remove a phase by number, name or path, with everything in it.

    \b
    Examples:
      fest remove phase 2
      fest remove phase 002_DEFINE_INTERFACES
      fest remove phase ./002_DEFINE_INTERFACES
    """
    _remove(phase_dir(festival, target), **kwargs)


@remove.command("sequence")
@click.argument("target")
@click.option("--phase", default=None, help="Phase (defaults to the current directory)")
@click.option("--festival", default=".", help="Festival directory")
@edit_options
def remove_sequence_cmd(target, phase, festival, **kwargs):
    """Remove a sequence by number, name or path, with everything in it."""
    _remove(sequence_dir(festival, phase, target), **kwargs)


@remove.command("task")
@click.argument("target")
@click.option("--sequence", default=None, help="Sequence (defaults to the current directory)")
@click.option("--phase", default=None, help="Phase containing the sequence")
@click.option("--festival", default=".", help="Festival directory")
@edit_options
def remove_task_cmd(target, sequence, phase, festival, **kwargs):
    """Remove a task by number, file name or path.

    A number shared by parallel tasks removes the whole group.
    """
    directory = sequence_dir(festival, phase, sequence) if sequence else os.path.abspath(".")
    with with_error_handling():
        path = _task_path(directory, target)
    _remove(os.path.abspath(path), **kwargs)
