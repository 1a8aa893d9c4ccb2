"""Options dataclass for structural edits."""

from dataclasses import dataclass

from fest.config import load_config_for


@dataclass
class RenumberOptions:
    """How a planned edit is previewed, confirmed and applied."""

    dry_run: bool = False
    backup: bool = False
    verbose: bool = False
    quiet: bool = False
    auto_approve: bool = False
    backup_dir: str | None = None

    @classmethod
    def for_directory(cls, directory, **kwargs) -> "RenumberOptions":
        """Build options for an edit of ``directory``, filling gaps from its fest.yaml."""
        options = cls(**kwargs)
        config = load_config_for(directory)
        if config is None:
            return options
        if config["auto_backup"]:
            options.backup = True
        if options.backup_dir is None:
            options.backup_dir = config["backup_dir"]
        return options
