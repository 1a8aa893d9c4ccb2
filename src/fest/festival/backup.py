"""Pre-operation backup of the directory a plan is about to edit."""

import json
import logging
import os
import shutil
from datetime import datetime

from fest.festival.errors import BackupError


logger = logging.getLogger(__name__)

BACKUP_DIR_NAME = ".fest-backup"
MANIFEST_NAME = "manifest.json"


def default_backup_root(directory: str) -> str:
    return os.path.join(directory, BACKUP_DIR_NAME)


def _skip_backup_root(backup_root: str):
    backup_root = os.path.abspath(backup_root)

    def ignore(current_dir, names):
        return [n for n in names if os.path.abspath(os.path.join(current_dir, n)) == backup_root]

    return ignore


def write_manifest(backup_path: str, source_dir: str, reason: str, changes=()) -> str:
    manifest_path = os.path.join(backup_path, MANIFEST_NAME)
    manifest = {
        "timestamp": datetime.now().isoformat(timespec="seconds"),
        "source": os.path.abspath(source_dir),
        "reason": reason,
        "changes": [f"{c.type}: {c.describe()}" for c in changes],
    }
    with open(manifest_path, "w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return manifest_path


def create_backup(source_dir: str, backup_root: str | None = None,
                  reason: str = "manual backup", changes=()) -> str:
    """Copy ``source_dir`` to a timestamped directory under ``backup_root``.

    Returns the backup directory. Raises BackupError if the copy or the
    manifest cannot be written.
    """
    backup_root = backup_root or default_backup_root(source_dir)
    stamp = datetime.now().strftime("%Y%m%d-%H%M%S-%f")
    name = os.path.basename(os.path.abspath(source_dir))
    backup_path = os.path.join(backup_root, f"{name}-{stamp}")
    try:
        os.makedirs(backup_root, exist_ok=True)
        shutil.copytree(source_dir, backup_path, symlinks=True,
                        ignore=_skip_backup_root(backup_root))
        write_manifest(backup_path, source_dir, reason, changes)
    except OSError as e:
        raise BackupError(f"failed to create backup of {source_dir}: {e}") from e
    logger.info("backed up %s to %s", source_dir, backup_path)
    return backup_path
