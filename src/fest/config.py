"""Local festival configuration: read ``fest.yaml`` settings that affect edits."""

import os

CONFIG_FILE_NAME = "fest.yaml"


def read_local_config(path):
    """Read local config from a YAML-like file.

    Returns a dict with 'backup_dir' and 'auto_backup' keys,
    or None if the file does not exist or sets neither key.
    """
    if not os.path.isfile(path):
        return None

    values = {}
    with open(path, encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if line.startswith("backup_dir:"):
                value = line.split(":", 1)[1].strip().strip("'\"")
                if value:
                    values["backup_dir"] = value
            elif line.startswith("auto_backup:"):
                values["auto_backup"] = line.split(":", 1)[1].strip().lower() == "true"

    if not values:
        return None

    values.setdefault("backup_dir", None)
    values.setdefault("auto_backup", False)
    if values["backup_dir"] and not os.path.isabs(values["backup_dir"]):
        values["backup_dir"] = os.path.join(os.path.dirname(os.path.abspath(path)), values["backup_dir"])
    return values


def find_config(start_dir):
    """Walk up from ``start_dir`` and return the first fest.yaml found, or None."""
    current = os.path.abspath(start_dir)
    while True:
        candidate = os.path.join(current, CONFIG_FILE_NAME)
        if os.path.isfile(candidate):
            return candidate
        parent = os.path.dirname(current)
        if parent == current:
            return None
        current = parent


def load_config_for(directory):
    path = find_config(directory)
    if path is None:
        return None
    return read_local_config(path)
