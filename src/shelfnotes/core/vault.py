# ABOUTME: Locations inside an Obsidian vault where notes and cover images go.
# ABOUTME: Creates the folders on demand; safe to call repeatedly.

from dataclasses import dataclass
from pathlib import Path

DEFAULT_FOLDER = "Books"
DEFAULT_RESOURCES_FOLDER = "resources"


@dataclass(frozen=True)
class VaultLayout:
    """Note and resource directories for one conversion run.

    Attributes:
        vault: Root of the Obsidian vault.
        folder: Folder inside the vault that receives the notes.
        resources_folder: Folder inside the vault for cover images. Defaults
            to a ``resources`` folder next to the notes.
    """

    vault: Path
    folder: str = DEFAULT_FOLDER
    resources_folder: str | None = None

    @property
    def notes_dir(self) -> Path:
        return self.vault / self.folder

    @property
    def resources_dir(self) -> Path:
        if self.resources_folder:
            return self.vault / self.resources_folder
        return self.notes_dir / DEFAULT_RESOURCES_FOLDER

    def ensure(self) -> None:
        """Create the notes and resources directories if missing."""
        self.notes_dir.mkdir(parents=True, exist_ok=True)
        self.resources_dir.mkdir(parents=True, exist_ok=True)
