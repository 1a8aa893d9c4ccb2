import os

import pytest


@pytest.fixture
def make_tree(tmp_path):
    """Create directories (bare names) and task files (``.md`` names) under a root."""

    def _make(*names, root=None):
        base = root or tmp_path
        for name in names:
            path = base / name
            if name.endswith(".md"):
                path.parent.mkdir(parents=True, exist_ok=True)
                path.write_text(f"# {path.name}\n")
            else:
                path.mkdir(parents=True)
        return base

    return _make


@pytest.fixture
def listing():
    """Sorted entry names of a directory, ignoring backups."""

    def _listing(directory):
        return sorted(n for n in os.listdir(directory) if n != ".fest-backup")

    return _listing
