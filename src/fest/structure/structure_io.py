"""Shared Click plumbing for structural edit commands."""

import os
import sys
from contextlib import contextmanager

import click

from fest.festival.errors import ApplyError, RenumberError
from fest.festival.options import RenumberOptions
from fest.festival.renumberer import Renumberer
from fest.festival.resolve import resolve_phase, resolve_sequence


def edit_options(fn):
    """Apply the shared Click options controlling preview, confirmation and backup."""
    for option in reversed([
        click.option("--dry-run/--skip-dry-run", default=True,
                     help="Preview changes before applying them (default: preview)"),
        click.option("--backup", is_flag=True, help="Back up the directory before changing it"),
        click.option("--verbose", is_flag=True, help="Report each change as it is applied"),
        click.option("--quiet", is_flag=True, help="Suppress reports and progress output"),
        click.option("--yes", "auto_approve", is_flag=True, help="Apply without asking for confirmation"),
    ]):
        fn = option(fn)
    return fn


@contextmanager
def with_error_handling():
    try:
        yield
    except ApplyError as e:
        click.echo(str(e), err=True)
        if e.applied:
            click.echo(f"{len(e.applied)} change(s) were applied before the failure:", err=True)
            for change in e.applied:
                click.echo(f"  {change.type}: {change.describe()}", err=True)
        sys.exit(1)
    except RenumberError as e:
        click.echo(str(e), err=True)
        sys.exit(1)


def renumberer_for(directory, **edit_kwargs):
    """Build a Renumberer whose options honour the directory's fest.yaml."""
    options = RenumberOptions.for_directory(directory, **edit_kwargs)
    return Renumberer(options)


def phase_dir(festival, phase):
    with with_error_handling():
        return os.path.abspath(resolve_phase(phase, festival))


def sequence_dir(festival, phase, sequence):
    with with_error_handling():
        parent = resolve_phase(phase, festival) if phase else festival
        return os.path.abspath(resolve_sequence(sequence, parent))
